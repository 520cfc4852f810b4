"""Currency router exposing the Rupiah codec over HTTP.

Every endpoint is a thin wrapper over ``services.currency_service``; parse
failures surface as ``UnparsableAmount`` and are rendered by the global
DomainError handler (422, PARSE_INVALID).
"""
from typing import Literal, Optional

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field

from ..config.observability import record_codec_operation
from ..currency import RupiahOptions
from ..services import currency_service
from ..utils.api_shapes import success
from ..utils.errors import DomainError

router = APIRouter()

# Pydantic schemas


class AmountRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')
    # NaN/Infinity are rejected here; the codec does not define them.
    amount: float = Field(allow_inf_nan=False)


class FormatRequest(AmountRequest):
    symbol: bool = True
    decimal: bool = False
    precision: Optional[int] = Field(default=None, ge=0, le=12)
    separator: str = Field(default=".", max_length=3)
    decimal_separator: str = Field(default=",", max_length=3)
    space_after_symbol: bool = True


class WordsRequest(AmountRequest):
    # None -> WORDS_UPPERCASE setting
    uppercase: Optional[bool] = None
    with_currency: bool = True


class RoundRequest(AmountRequest):
    unit: Optional[str] = None


class DescribeRequest(AmountRequest):
    round_unit: Optional[str] = None


class ParseRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')
    text: str = Field(max_length=256)
    mode: Literal["auto", "plain"] = "auto"


@router.post("/format", status_code=status.HTTP_200_OK)
async def format_endpoint(payload: FormatRequest):
    options = RupiahOptions(
        symbol=payload.symbol,
        decimal=payload.decimal,
        precision=payload.precision,
        separator=payload.separator,
        decimal_separator=payload.decimal_separator,
        space_after_symbol=payload.space_after_symbol,
    )
    formatted = currency_service.format_amount(payload.amount, options)
    record_codec_operation("format")
    return success({"formatted": formatted})


@router.post("/compact", status_code=status.HTTP_200_OK)
async def compact_endpoint(payload: AmountRequest):
    compact = currency_service.compact_amount(payload.amount)
    record_codec_operation("compact")
    return success({"compact": compact})


@router.post("/words", status_code=status.HTTP_200_OK)
async def words_endpoint(payload: WordsRequest):
    words = currency_service.spell_amount(
        payload.amount, uppercase=payload.uppercase, with_currency=payload.with_currency)
    record_codec_operation("words")
    return success({"words": words})


@router.post("/round", status_code=status.HTTP_200_OK)
async def round_endpoint(payload: RoundRequest):
    try:
        rounded = currency_service.round_amount(payload.amount, payload.unit)
    except DomainError:
        record_codec_operation("round", "rejected")
        raise
    record_codec_operation("round")
    return success({"rounded": rounded})


@router.post("/parse", status_code=status.HTTP_200_OK)
async def parse_endpoint(payload: ParseRequest):
    try:
        amount = currency_service.read_amount(payload.text, payload.mode)
    except DomainError:
        record_codec_operation("parse", "rejected")
        raise
    record_codec_operation("parse")
    return success({"amount": amount}, mode=payload.mode)


@router.post("/describe", status_code=status.HTTP_200_OK)
async def describe_endpoint(payload: DescribeRequest):
    description = currency_service.describe_amount(payload.amount, payload.round_unit)
    record_codec_operation("describe")
    return success(description)


__all__ = ["router"]

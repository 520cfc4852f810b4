import pytest

from rupiah.currency import RupiahOptions
from rupiah.services import currency_service
from rupiah.utils.errors import UnknownRoundUnit, UnparsableAmount


def test_read_amount_auto_and_plain():
    assert currency_service.read_amount("Rp 1,5 juta") == 1500000.0
    assert currency_service.read_amount("Rp 1.500.000,50", mode="plain") == 1500000.5


def test_read_amount_rejects_unparsable():
    with pytest.raises(UnparsableAmount):
        currency_service.read_amount("bukan angka")
    # plain mode does not understand unit words
    with pytest.raises(UnparsableAmount):
        currency_service.read_amount("1,5 juta", mode="plain")


def test_format_amount_with_options():
    opts = RupiahOptions(symbol=False, separator=",")
    assert currency_service.format_amount(1500000, opts) == "1,500,000"
    assert currency_service.compact_amount(1500000) == "Rp 1,5 juta"


def test_spell_amount_uses_configured_casing(monkeypatch):
    assert currency_service.spell_amount(1000) == "seribu rupiah"
    monkeypatch.setenv("WORDS_UPPERCASE", "true")
    currency_service.get_settings.cache_clear()
    assert currency_service.spell_amount(1000) == "Seribu rupiah"
    # explicit value wins over the setting
    assert currency_service.spell_amount(1000, uppercase=False, with_currency=False) == "seribu"


def test_round_amount_default_unit_from_settings(monkeypatch):
    assert currency_service.round_amount(1234567) == 1235000
    monkeypatch.setenv("DEFAULT_ROUND_UNIT", "juta")
    currency_service.get_settings.cache_clear()
    assert currency_service.round_amount(1234567) == 1000000


def test_round_amount_unknown_unit():
    with pytest.raises(UnknownRoundUnit):
        currency_service.round_amount(1234567, "miliar")


def test_describe_amount():
    d = currency_service.describe_amount(1234567)
    assert d == {
        "amount": 1234567.0,
        "grouped": "Rp 1.234.567",
        "compact": "Rp 1,2 juta",
        "words": "satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh rupiah",
        "rounded": 1235000.0,
        "round_unit": "ribu",
    }
    assert currency_service.describe_amount(1234567, "juta")["rounded"] == 1000000.0


def test_rejections_are_logged_on_module_logger(caplog):
    caplog.set_level("INFO", logger="rupiah.services.currency_service")
    with pytest.raises(UnparsableAmount):
        currency_service.read_amount("bukan angka", mode="plain")
    with pytest.raises(UnknownRoundUnit):
        currency_service.round_amount(1500, "miliar")
    messages = [r.getMessage() for r in caplog.records if r.name == "rupiah.services.currency_service"]
    assert "Rejected amount text 'bukan angka' (mode=plain)" in messages
    assert "Rejected round unit 'miliar'" in messages

import re
from decimal import Decimal

import pytest

from rupiah.currency import RupiahOptions, format_grouped, group_digits, to_compact


def test_grouped_basic_groups():
    cases = [
        (0, 'Rp 0'),
        (7, 'Rp 7'),
        (999, 'Rp 999'),
        (1000, 'Rp 1.000'),
        (12345, 'Rp 12.345'),
        (1500000, 'Rp 1.500.000'),
        (123456789, 'Rp 123.456.789'),
    ]
    for value, expected in cases:
        assert format_grouped(value) == expected


def test_grouped_without_decimals_floors_fraction():
    assert format_grouped(1500000.7) == 'Rp 1.500.000'
    assert format_grouped(-1500000.7) == 'Rp -1.500.000'


def test_grouped_sign_after_symbol():
    assert format_grouped(-1500000) == 'Rp -1.500.000'
    assert format_grouped(-1500000, space_after_symbol=False) == 'Rp-1.500.000'


def test_grouped_negative_zero_has_no_sign():
    assert format_grouped(-0.4) == 'Rp 0'
    assert format_grouped(-0.001, decimal=True) == 'Rp 0,00'


def test_grouped_decimal_rounds_before_grouping():
    assert format_grouped(1500000.5, decimal=True) == 'Rp 1.500.000,50'
    # Not truncated to ,55
    assert format_grouped(1500000.556, decimal=True) == 'Rp 1.500.000,56'


def test_grouped_half_way_rounds_away_from_zero():
    assert format_grouped(1.005, decimal=True) == 'Rp 1,01'
    assert format_grouped(1.004, decimal=True) == 'Rp 1,00'
    assert format_grouped(-1.005, decimal=True) == 'Rp -1,01'
    assert format_grouped(2.5, decimal=True, precision=0) == 'Rp 3'


def test_grouped_precision():
    assert format_grouped(1500000.5, decimal=True, precision=0) == 'Rp 1.500.001'
    assert format_grouped(1.5, decimal=True, precision=3) == 'Rp 1,500'
    # precision only matters when decimals are shown
    assert format_grouped(1.5, precision=3) == 'Rp 1'


@pytest.mark.parametrize('overrides,expected', [
    ({'symbol': False}, '1.500.000'),
    ({'separator': ','}, 'Rp 1,500,000'),
    ({'separator': ' '}, 'Rp 1 500 000'),
    ({'space_after_symbol': False}, 'Rp1.500.000'),
])
def test_grouped_options(overrides, expected):
    assert format_grouped(1500000, **overrides) == expected


def test_grouped_international_separators():
    out = format_grouped(1500000.5, decimal=True, separator=',', decimal_separator='.')
    assert out == 'Rp 1,500,000.50'


def test_grouped_options_record_with_override():
    opts = RupiahOptions(symbol=False)
    assert format_grouped(1500000, opts) == '1.500.000'
    assert format_grouped(1500000, opts, decimal=True) == '1.500.000,00'
    # the record itself is untouched
    assert opts.decimal is False


def test_grouped_decimal_input():
    assert format_grouped(Decimal('1234.50'), decimal=True) == 'Rp 1.234,50'


def test_group_digits():
    assert group_digits('1234567') == '1.234.567'
    assert group_digits('1234567', ' ') == '1 234 567'
    assert group_digits('123') == '123'


@pytest.mark.parametrize('amount,expected', [
    (1500000, 'Rp 1,5 juta'),
    (1000000, 'Rp 1 juta'),
    (1234567, 'Rp 1,2 juta'),
    (1250000, 'Rp 1,3 juta'),
    (1950000, 'Rp 2 juta'),
    (500000, 'Rp 500 ribu'),
    (100000, 'Rp 100 ribu'),
    (150500, 'Rp 150,5 ribu'),
    (99999, 'Rp 99.999'),
    (1500, 'Rp 1.500'),
    (1500.7, 'Rp 1.500'),
    (999, 'Rp 999'),
    (0, 'Rp 0'),
    (2500000000, 'Rp 2,5 miliar'),
    (1000000000000, 'Rp 1 triliun'),
    (3750000000000, 'Rp 3,8 triliun'),
])
def test_compact(amount, expected):
    assert to_compact(amount) == expected


def test_compact_negative():
    assert to_compact(-1500000) == 'Rp -1,5 juta'
    assert to_compact(-1500) == 'Rp -1.500'
    assert to_compact(-0.3) == 'Rp 0'


def test_compact_unit_chosen_by_threshold_not_rounded_value():
    # 999.999 ribu rounds up to 1000 but stays in the ribu branch
    assert to_compact(999999) == 'Rp 1000 ribu'
    assert to_compact(10 ** 15) == 'Rp 1000 triliun'


@pytest.mark.parametrize('exponent', [63, 99, 120, 300])
def test_grouped_decimal_huge_amounts(exponent):
    out = format_grouped(float(f'1e{exponent}'), decimal=True)
    assert out == 'Rp 1' + '.000' * (exponent // 3) + ',00'


def test_grouped_decimal_huge_negative_amount():
    assert format_grouped(-1e63, decimal=True) == 'Rp -1' + '.000' * 21 + ',00'


@pytest.mark.parametrize('amount', [1e63, 1e80, 1e300])
def test_compact_huge_amounts(amount):
    assert re.fullmatch(r'Rp [1-9]\d* triliun', to_compact(amount))
    assert to_compact(-amount).startswith('Rp -')

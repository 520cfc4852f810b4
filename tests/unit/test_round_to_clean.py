import pytest

from rupiah.currency import RoundUnit, round_to_clean


@pytest.mark.parametrize('amount,unit,expected', [
    (1234567, 'ribu', 1235000),
    (1234567, 'ratus-ribu', 1200000),
    (1234567, 'juta', 1000000),
    (1500, 'ribu', 2000),
    (2500, 'ribu', 3000),
    (1499, 'ribu', 1000),
    (150000, 'ratus-ribu', 200000),
    (-1500, 'ribu', -2000),
    (-1499, 'ribu', -1000),
    (0, 'ribu', 0),
])
def test_round_to_clean(amount, unit, expected):
    assert round_to_clean(amount, unit) == expected


def test_round_to_clean_default_unit_is_ribu():
    assert round_to_clean(1234567) == 1235000


def test_round_to_clean_accepts_enum_and_loose_keys():
    assert round_to_clean(1234567, RoundUnit.JUTA) == 1000000
    assert round_to_clean(1234567, ' Juta ') == 1000000


def test_round_to_clean_returns_float():
    assert isinstance(round_to_clean(1234567, 'ribu'), float)


def test_round_to_clean_unknown_unit():
    with pytest.raises(ValueError, match='Unknown round unit'):
        round_to_clean(1234567, 'miliar')


@pytest.mark.parametrize('amount', [1e63, 1e70, 1e300])
@pytest.mark.parametrize('unit', ['ribu', 'ratus-ribu', 'juta'])
def test_round_to_clean_huge_amounts(amount, unit):
    assert round_to_clean(amount, unit) == pytest.approx(amount)
    assert round_to_clean(-amount, unit) == pytest.approx(-amount)

import pytest
from rules import CONWAY, LifeRule


@pytest.mark.parametrize(
    "self_state,neigh,expected",
    [
        (0, 0, 0),
        (0, 2, 0),
        (0, 3, 1),   # birth
        (0, 4, 0),
        (1, 1, 0),   # underpopulation
        (1, 2, 1),   # survival
        (1, 3, 1),   # survival
        (1, 4, 0),   # overpopulation
        (1, 8, 0),
    ],
)
def test_conway_call(self_state, neigh, expected):
    assert CONWAY(self_state, neigh) == expected


def test_conway_bits():
    assert CONWAY.rule_bits == "000100000" + "001100000"


def test_bits_length_validation():
    """Bit-strings shorter or longer than 18 should raise."""
    for bad_len in (17, 19):
        with pytest.raises(ValueError):
            LifeRule("0" * bad_len)


def test_bits_symbol_validation():
    with pytest.raises(ValueError):
        LifeRule("2" * 18)


def test_call_invalid_args():
    """Out-of-range arguments must raise ValueError."""
    with pytest.raises(ValueError):
        CONWAY(2, 0)      # invalid self_state
    with pytest.raises(ValueError):
        CONWAY(-1, 0)
    with pytest.raises(ValueError):
        CONWAY(0, 9)      # neighbor_sum too large
    with pytest.raises(ValueError):
        CONWAY(0, -1)


def test_table_matches_call():
    table = CONWAY.table
    assert table.shape == (2, 9)
    for self_state in (0, 1):
        for neigh_sum in range(9):
            assert bool(table[self_state, neigh_sum]) == bool(CONWAY(self_state, neigh_sum))


def test_from_birth_survival_out_of_range():
    with pytest.raises(ValueError):
        LifeRule.from_birth_survival({9}, {2})


def test_table_is_read_only():
    with pytest.raises(ValueError):
        CONWAY.table[0, 3] = False

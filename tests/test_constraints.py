import pytest

from wordchain.constraints import derive_constraints, normalize_mode, satisfies
from wordchain.feedback import pattern_to_int

# "geese": e green at 1, e yellow at 2 -> two e's evidenced
GEESE = ("geese", pattern_to_int([0, 2, 1, 0, 0]))
# "enter": e yellow at 0 -> one e evidenced
ENTER = ("enter", pattern_to_int([1, 0, 0, 0, 0]))


def test_none_mode_is_unconstrained():
    c = derive_constraints([GEESE, ENTER], "none")
    assert c.empty
    assert satisfies("xxxxx", c)


def test_no_rows_above_is_unconstrained():
    assert derive_constraints([], "strict").empty


def test_hard_reads_only_the_row_directly_above():
    c = derive_constraints([GEESE, ENTER], "hard")
    assert dict(c.fixed) == {}
    assert dict(c.forbidden) == {"e": frozenset({0})}
    assert dict(c.required) == {"e": 1}


def test_strict_accumulates_with_max_counts():
    c = derive_constraints([GEESE, ENTER], "strict")
    assert dict(c.fixed) == {1: "e"}
    assert dict(c.forbidden) == {"e": frozenset({0, 2})}
    # max(2, 1), not 3
    assert dict(c.required) == {"e": 2}


def test_satisfies_checks_every_kind():
    c = derive_constraints([GEESE, ENTER], "strict")
    assert satisfies("beret", c)
    assert satisfies("bezel", c)
    assert not satisfies("tepid", c)   # only one e
    assert not satisfies("ebene", c)   # e at 0 is forbidden
    assert not satisfies("breed", c)   # position 1 must be e


def test_constraints_are_read_only():
    c = derive_constraints([GEESE], "strict")
    with pytest.raises(TypeError):
        c.fixed[0] = "x"


def test_normalize_mode():
    assert normalize_mode("HARD") == "hard"
    with pytest.raises(ValueError):
        normalize_mode("easy")

import pytest

from wordchain.feedback import score
from wordchain.rows import RowSpec, matches_wildcard
from wordchain.lexicon import Lexicon
from wordchain.search import Chain, ChainSearch, WordleReverser

# scored against "crane":
#   eight                      -> 1    (e yellow)
#   theme elude olive stove    -> 162  (e green at the end)
#   coast clamp chalk          -> 20   (c, a green)
#   flash shaft                -> 18   (a green)
CRANE_WORDS = ["eight", "theme", "elude", "olive", "stove", "coast", "clamp", "chalk", "flash", "shaft"]
GUESS_WORDS = ["crane", "slugs", "moldy", "tippy", "brown", "guess", "lucky"]


@pytest.fixture
def reverser():
    return WordleReverser(CRANE_WORDS, CRANE_WORDS)


def _chains(rev, rows, answer="crane", **kwargs):
    return [c.guesses for c in rev.enumerate_chains(rows, answer, **kwargs)]


def _assert_valid(chains, rows, answer):
    for guesses in chains:
        assert len(guesses) == len(rows)
        for g, r in zip(guesses, rows):
            r = RowSpec(*r) if isinstance(r, tuple) else RowSpec(r)
            assert score(g, answer) == r.pattern_code
            if r.guess is not None:
                assert matches_wildcard(g, r.guess)


def test_unconstrained_row_pairs_with_literal_answer_row():
    rev = WordleReverser(GUESS_WORDS, GUESS_WORDS)
    chains = _chains(rev, [0, (242, "guess")], "guess")
    assert chains == [("moldy", "guess"), ("tippy", "guess"), ("brown", "guess")]


def test_literal_row_must_score_its_code():
    rev = WordleReverser(GUESS_WORDS, GUESS_WORDS)
    assert _chains(rev, [0, (242, "slugs")], "guess") == []
    slugs_code = score("slugs", "guess")
    chains = _chains(rev, [0, (slugs_code, "slugs")], "guess")
    assert chains == [("moldy", "slugs"), ("tippy", "slugs"), ("brown", "slugs")]


def test_inconsistent_literal_yields_nothing_without_searching():
    rev = WordleReverser(GUESS_WORDS, GUESS_WORDS)
    search = rev.enumerate_chains([(0, "crane"), 0], "guess")
    assert list(search) == []
    assert search.steps == 0


def test_hard_mode_carries_greens_forward(reverser):
    rows = [(20, "coast"), 18]
    assert _chains(reverser, rows) == [("coast", "flash"), ("coast", "shaft")]
    # row 2 would need c at 0 and a at 2, which code 18 cannot have
    assert _chains(reverser, rows, progress_mode="hard") == []

    rows = [(20, "coast"), 20]
    assert _chains(reverser, rows, progress_mode="hard") == [("coast", "clamp"), ("coast", "chalk")]


def test_progress_modes_nest(reverser):
    rows = [1, 162, 162]
    none = set(_chains(reverser, rows, progress_mode="none"))
    hard = set(_chains(reverser, rows, progress_mode="hard"))
    strict = set(_chains(reverser, rows, progress_mode="strict"))

    assert len(none) == 12
    assert len(hard) == 9
    assert len(strict) == 6
    assert strict < hard < none
    # row 3 follows row 2 only in hard mode; strict also remembers eight's yellow e
    assert ("eight", "olive", "elude") in hard
    assert ("eight", "olive", "elude") not in strict
    for chains in (none, hard, strict):
        _assert_valid(chains, rows, "crane")


def test_no_repeat(reverser):
    rows = [162, 162]
    with_repeats = _chains(reverser, rows, no_repeat=False)
    without = _chains(reverser, rows, no_repeat=True)
    assert ("theme", "theme") in with_repeats
    assert len(with_repeats) == 16
    assert len(without) == 12
    assert all(len(set(c)) == len(c) for c in without)


def test_wildcard_rows(reverser):
    rows = [(162, "s***e"), (20, "c***k")]
    assert _chains(reverser, rows) == [("stove", "chalk")]


def test_cap_is_respected(reverser):
    search = reverser.enumerate_chains([1, 162, 162], "crane", max_solutions=2)
    assert len(list(search)) == 2


def test_stopping_early_does_less_work(reverser):
    partial = reverser.enumerate_chains([1, 162, 162], "crane")
    next(partial)
    full = reverser.enumerate_chains([1, 162, 162], "crane")
    list(full)
    assert partial.steps < full.steps


def test_capped_search_does_no_more_work(reverser):
    search = reverser.enumerate_chains([1, 162, 162], "crane", max_solutions=1)
    next(search)
    steps = search.steps
    with pytest.raises(StopIteration):
        next(search)
    assert search.steps == steps
    assert search.exhausted


def test_resuming_continues_where_it_stopped(reverser):
    rows = [1, 162, 162]
    search = reverser.enumerate_chains(rows, "crane", progress_mode="strict")
    head = [next(search), next(search)]
    rest = list(search)
    assert head + rest == list(reverser.enumerate_chains(rows, "crane", progress_mode="strict"))
    with pytest.raises(StopIteration):
        next(search)


def test_chains_carry_the_answer(reverser):
    chain = next(reverser.enumerate_chains([(20, "coast")], "CRANE"))
    assert chain == Chain("crane", ("coast",))


def test_no_rows_gives_the_empty_chain(reverser):
    assert list(reverser.enumerate_chains([], "crane")) == [Chain("crane", ())]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"answer": "cran"},
        {"answer": "cr4ne"},
        {"progress_mode": "easy"},
        {"max_solutions": 0},
    ],
)
def test_bad_requests_raise_eagerly(reverser, kwargs):
    args = {"rows": [0], "answer": "crane"}
    args.update(kwargs)
    with pytest.raises(ValueError):
        reverser.enumerate_chains(**args)


def test_bad_rows_raise(reverser):
    with pytest.raises(ValueError):
        reverser.enumerate_chains([(243, None)], "crane")
    with pytest.raises(TypeError):
        reverser.enumerate_chains([0], 12345)


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"progress_mode": "Hardest"}, ValueError),
        ({"max_solutions": -1}, ValueError),
        ({"max_solutions": True}, TypeError),
        ({"max_solutions": 2.5}, TypeError),
    ],
)
def test_chain_search_validates_its_own_arguments(reverser, kwargs, error):
    with pytest.raises(error):
        ChainSearch(reverser.lexicon, [1, 162, 162], "crane", **kwargs)


def test_chain_search_normalizes_mode_and_answer(reverser):
    search = ChainSearch(reverser.lexicon, [1, 162, 162], "Crane", progress_mode="STRICT")
    assert search.progress_mode == "strict"
    assert search.answer == "crane"
    assert len(list(search)) == 6


def test_reverser_reuses_a_loaded_lexicon():
    lex = Lexicon(CRANE_WORDS, CRANE_WORDS)
    rev = WordleReverser(lexicon=lex)
    assert rev.lexicon is lex
    assert _chains(rev, [(20, "coast"), 18]) == [("coast", "flash"), ("coast", "shaft")]
    with pytest.raises(TypeError):
        WordleReverser(lexicon=CRANE_WORDS)


def test_filter_answers():
    rev = WordleReverser(GUESS_WORDS, ["crane", "guess", "moldy"])
    slugs_code = score("slugs", "guess")
    assert rev.filter_answers([(slugs_code, "slugs"), 0]) == ["guess"]
    assert rev.filter_answers([0, (0, "s***s")]) == ["crane", "guess", "moldy"]

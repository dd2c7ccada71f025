from Mansion.clues import ClueIndex
from Mansion.scenarios import MANSION_CLUES, default_suspect_table
from Mansion.verdict import ACCUSATION_THRESHOLD, judge, run_accusation, tally_evidence


def _index(*words):
    index = ClueIndex()
    for word in words:
        index.insert(word)
    return index


def test_threshold_is_two():
    assert ACCUSATION_THRESHOLD == 2


def test_tally_counts_exact_matches_only(butler_table):
    index = _index("Fingerprint", "Cup", "Feather")
    assert tally_evidence(index, butler_table, "Butler") == 2
    assert tally_evidence(index, butler_table, "butler") == 0
    assert tally_evidence(index, butler_table, "Butler ") == 0


def test_one_clue_is_not_enough(butler_table):
    verdict = judge(_index("Cup"), butler_table, "Butler")
    assert verdict.count == 1
    assert verdict.outcome == "insufficient"
    assert "Only 1 clue(s)" in verdict.message


def test_enough_clues_close_the_case(butler_table):
    verdict = judge(_index("Cup", "Fingerprint"), butler_table, "Butler")
    assert verdict.solved
    assert "2 clues point to Butler" in verdict.message


def test_empty_index_fails_without_asking(butler_table):
    def ask():
        raise AssertionError("should not prompt without clues")

    verdict = run_accusation(ClueIndex(), butler_table, ask)
    assert verdict.outcome == "no_clues"
    assert verdict.count == 0
    assert not verdict.solved
    assert "no clues" in verdict.message


def test_multi_word_suspect_names():
    table = default_suspect_table()
    index = _index(*MANSION_CLUES.values())
    verdict = run_accusation(index, table, lambda: "Lady Cordelia\n")
    assert verdict.accused == "Lady Cordelia"
    assert verdict.count == 3
    assert verdict.solved


def test_accusation_is_bounded(butler_table):
    verdict = run_accusation(_index("Cup"), butler_table, lambda: "B" * 100, limit=10)
    assert verdict.accused == "B" * 10

import pytest

from Mansion.scenarios import SUSPECT_FACTS, default_suspect_table
from Mansion.suspects import SuspectTable, hash_clue


def test_hash_is_sum_of_codes_mod_buckets():
    assert hash_clue("A") == 65 % 7
    assert hash_clue("Cup") == (67 + 117 + 112) % 7
    assert hash_clue("") == 0
    assert hash_clue("Cup", 3) == (67 + 117 + 112) % 3


def test_anagrams_share_a_bucket():
    assert hash_clue("listen") == hash_clue("silent")


def test_lookup_after_insert():
    table = SuspectTable()
    table.insert("Fingerprint", "Butler")
    assert table.lookup("Fingerprint") == "Butler"


def test_most_recent_insert_wins():
    table = SuspectTable()
    table.insert("Cup", "Butler")
    table.insert("Cup", "Gardener")
    assert table.lookup("Cup") == "Gardener"
    assert len(table) == 2


def test_missing_key_is_not_found():
    assert SuspectTable().lookup("Cup") is None
    table = default_suspect_table()
    assert table.lookup("Cup") is None
    assert table.lookup("") is None


def test_colliding_keys_chain_head_first():
    table = SuspectTable()
    table.insert("listen", "Butler")
    table.insert("silent", "Maid")
    idx = table.bucket_of("listen")
    assert table.chain(idx) == ["silent", "listen"]
    assert table.lookup("listen") == "Butler"
    assert table.lookup("silent") == "Maid"


def test_single_bucket_still_resolves_every_key():
    table = SuspectTable(bucket_count=1)
    for clue, suspect in SUSPECT_FACTS:
        table.insert(clue, suspect)
    for clue, suspect in SUSPECT_FACTS:
        assert table.lookup(clue) == suspect


def test_destroy_resets_to_empty():
    table = default_suspect_table()
    assert table.destroy() == len(SUSPECT_FACTS)
    assert table.is_empty()
    assert all(table.chain(i) == [] for i in range(table.bucket_count))
    assert table.lookup(SUSPECT_FACTS[0][0]) is None


@pytest.mark.parametrize("buckets", [0, -3])
def test_bucket_count_must_be_positive(buckets):
    with pytest.raises(ValueError):
        SuspectTable(bucket_count=buckets)


def test_long_key_is_found_after_insert():
    clue = "A very long description of a smudged fingerprint on the silver tray"
    table = SuspectTable()
    table.insert(clue, "Butler")
    assert len(clue) > table.limit
    assert table.lookup(clue) == "Butler"
    assert table.lookup(clue[:table.limit]) == "Butler"

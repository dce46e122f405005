import pytest

from sysdemos.wordtable import (
    WORDS,
    CountTable,
    TableFullError,
    WordEntry,
    WordTable,
    main,
)


def test_new_word_starts_at_one():
    table = WordTable(10)
    entry = table.increment("alpha")
    assert entry == WordEntry("alpha", 1)
    assert table.lookup("alpha") is entry


def test_new_word_decremented_still_starts_at_one():
    table = WordTable(10)
    assert table.decrement("bravo").count == 1


@pytest.mark.parametrize("times", [1, 3, 7])
def test_repeated_increments_count_up(times):
    table = WordTable(10)
    for _ in range(times):
        entry = table.increment("echo")
    assert entry.count == times
    assert table.lookup("echo").count == times


def test_count_stuck_at_zero():
    table = WordTable(10)
    table.increment("golf")
    table.decrement("golf")
    assert table.lookup("golf").count == 0
    table.increment("golf")
    assert table.lookup("golf").count == 0


def test_lookup_missing_is_none():
    assert WordTable(10).lookup("nothing") is None


def test_delete_entry():
    table = WordTable(10)
    table.increment("kilo")
    assert table.delete_entry("kilo") is True
    assert table.lookup("kilo") is None
    assert table.delete_entry("kilo") is False
    assert table.delete_entry("never-seen") is False


def test_upsert_after_delete_is_not_stored():
    table = WordTable(10)
    table.increment("lima")
    table.delete_entry("lima")
    entry = table.increment("lima")
    assert entry.word == "lima"
    assert entry.count == 1
    assert table.lookup("lima") is None


def test_len_counts_live_entries():
    table = WordTable(10)
    for word in ("a", "b", "c", "a"):
        table.increment(word)
    assert len(table) == len({"a", "b", "c"})
    table.delete_entry("b")
    assert len(table) == len({"a", "c"})


def test_capacity_rounds_up_to_prime():
    assert WordTable(30).capacity == 31


def test_full_table_raises():
    table = WordTable(3)
    words = [f"w{i}" for i in range(table.capacity)]
    for word in words:
        table.increment(word)
    with pytest.raises(TableFullError):
        table.increment("one-too-many")
    # Known words still update when the table is full.
    assert table.increment(words[0]).count == 2


def test_deleted_keys_keep_their_slot():
    table = WordTable(3)
    words = [f"w{i}" for i in range(table.capacity)]
    for word in words:
        table.increment(word)
    table.delete_entry(words[0])
    with pytest.raises(TableFullError):
        table.increment("fresh")


def test_count_table_new_word_starts_at_one():
    table = CountTable(10)
    assert table.decrement("alpha") == 1
    assert table.lookup("alpha") == 1


def test_count_table_clamps_at_zero():
    table = CountTable(10)
    table.increment("alpha")
    assert table.adjust("alpha", -5) == 0
    assert table.lookup("alpha") == 0
    assert table.increment("alpha") == 1


@pytest.mark.parametrize("times", [2, 5])
def test_count_table_counts(times):
    table = CountTable(10)
    for _ in range(times):
        count = table.increment("x")
    assert count == times


def test_count_table_missing_and_full():
    table = CountTable(3)
    assert table.lookup("zzz") is None
    for i in range(table.capacity):
        table.increment(f"k{i}")
    with pytest.raises(TableFullError):
        table.increment("overflow")


def test_main_manpage(capsys):
    assert main(["manpage"]) == 0
    out = capsys.readouterr().out
    assert "   whisky ->    whisky:22\n" in out
    assert "   yankee ->      NULL:0\n" in out


def test_main_wordtable(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("new word i=") == len(WORDS)
    assert out.count("deleting word ") == len(WORDS)


def test_main_counts(capsys):
    assert main(["counts"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("insertions:\n")
    assert out.count("incremented word") == len(WORDS)


def test_main_unknown_demo():
    assert main(["nope"]) == 2
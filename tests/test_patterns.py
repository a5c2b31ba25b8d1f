import itertools

import numpy as np
import pytest

from wordle_tree.patterns import (
    ALL_HIT,
    HIT,
    MISS,
    PRESENT,
    PatternTable,
    decode_pattern,
    encode_marks,
    feedback,
    load_or_build_table,
    parse_pattern,
    pattern_rank,
    pattern_to_string,
)

WORDS = ["crane", "trace", "sissy", "llama", "hello", "boost", "robot", "speed", "abide"]


@pytest.mark.parametrize("guess,answer,marks", [
    ("ABCDE", "FGHIJ", (MISS, MISS, MISS, MISS, MISS)),
    ("crane", "trace", (PRESENT, HIT, HIT, MISS, HIT)),
    ("llama", "hello", (PRESENT, MISS, MISS, MISS, MISS)),
    ("speed", "abide", (MISS, MISS, PRESENT, MISS, PRESENT)),
    # second O is a miss: only the first occurrence in the guess is credited
    ("boost", "robot", (PRESENT, HIT, MISS, MISS, HIT)),
])
def test_feedback_golden(guess, answer, marks):
    assert decode_pattern(feedback(guess, answer)) == marks


def test_feedback_code_values():
    assert feedback("ABCDE", "FGHIJ") == 0
    assert feedback("boost", "robot") == 137
    assert feedback("llama", "hello") == 81


def test_identical_words_are_all_hit():
    for word in WORDS:
        assert feedback(word, word) == ALL_HIT


def test_hit_iff_same_letter_in_position():
    for guess, answer in itertools.product(WORDS, repeat=2):
        marks = decode_pattern(feedback(guess, answer))
        for i in range(5):
            assert (marks[i] == HIT) == (guess[i] == answer[i])


def test_encode_decode():
    assert encode_marks((HIT, PRESENT, MISS, MISS, HIT)) == 191
    assert decode_pattern(191) == (HIT, PRESENT, MISS, MISS, HIT)
    assert decode_pattern(ALL_HIT) == (HIT,) * 5


def test_encode_rejects_bad_marks():
    with pytest.raises(ValueError):
        encode_marks((HIT, HIT, HIT, HIT))
    with pytest.raises(ValueError):
        encode_marks((HIT, HIT, HIT, HIT, 3))


def test_pattern_strings():
    assert pattern_to_string(0) == "⬜⬜⬜⬜⬜"
    assert pattern_to_string(ALL_HIT) == "🟩🟩🟩🟩🟩"
    assert parse_pattern("GYBBG") == 191
    assert parse_pattern("gybbg") == 191
    assert parse_pattern("🟩🟨⬜⬜🟩") == 191


def test_parse_pattern_rejects_garbage():
    with pytest.raises(ValueError):
        parse_pattern("GYBXG")
    with pytest.raises(ValueError):
        parse_pattern("GYB")


def test_rank_orders_hits_above_presents_most_significant_first():
    ranks = [
        pattern_rank(parse_pattern(p))
        for p in ["BBBBB", "BBBBY", "BBBBG", "BBBYB", "YBBBB", "GBBBB", "GGGGG"]
    ]
    assert ranks == sorted(ranks)


def test_table_matches_feedback():
    table = PatternTable.build(WORDS, WORDS[:4])
    assert table.matrix.shape == (len(WORDS), 4)
    assert table.matrix.dtype == np.uint8
    for guess in WORDS:
        for answer in WORDS[:4]:
            assert table.pattern(guess, answer) == feedback(guess, answer)

    row = table.row("crane", ["llama", "crane"])
    assert row.tolist() == [feedback("crane", "llama"), ALL_HIT]


def test_table_unknown_word():
    table = PatternTable.build(["crane"], ["trace"])
    with pytest.raises(KeyError):
        table.pattern("crane", "sissy")


def test_table_shape_must_match():
    with pytest.raises(ValueError):
        PatternTable(["crane"], ["trace"], np.zeros((2, 2), dtype=np.uint8))


def test_table_cache_reused_and_invalidated(tmp_path, capsys):
    cache = tmp_path / "table.bin"

    first = load_or_build_table(WORDS, WORDS[:3], cache)
    assert cache.exists()
    assert "saved" in capsys.readouterr().out

    second = load_or_build_table(WORDS, WORDS[:3], cache)
    assert "Loaded compatible pattern table" in capsys.readouterr().out
    assert np.array_equal(first.matrix, second.matrix)

    # same shape, different words
    third = load_or_build_table(WORDS, WORDS[3:6], cache)
    assert "stale" in capsys.readouterr().out
    assert third.pattern("crane", "hello") == feedback("crane", "hello")

    load_or_build_table(WORDS, WORDS[:5], cache)
    assert "shape mismatch" in capsys.readouterr().out


def test_table_without_cache_path(tmp_path):
    table = load_or_build_table(WORDS, WORDS, None)
    assert table.pattern("boost", "robot") == 137
    assert list(tmp_path.iterdir()) == []


def test_table_columns_and_codes():
    table = PatternTable.build(WORDS, WORDS[:4])
    cols = table.columns(["llama", "crane"])
    assert cols.tolist() == [3, 0]
    assert table.codes("boost", cols).tolist() == [
        feedback("boost", "llama"), feedback("boost", "crane"),
    ]


def _save_npy(path):
    with open(path, "wb") as f:
        np.save(f, np.zeros((2, 2)))


def _save_npz_without_digest(path):
    with open(path, "wb") as f:
        np.savez(f, matrix=np.zeros((9, 3), dtype=np.uint8))


@pytest.mark.parametrize("write", [
    lambda path: path.write_bytes(b"garbage"),
    lambda path: path.write_bytes(b""),
    lambda path: path.write_bytes(b"PK\x03\x04 not really a zip"),
    _save_npy,
    _save_npz_without_digest,
])
def test_unreadable_cache_is_rebuilt(tmp_path, capsys, write):
    cache = tmp_path / "table.npz"
    write(cache)

    table = load_or_build_table(WORDS, WORDS[:3], cache)
    out = capsys.readouterr().out
    assert "unreadable" in out
    assert "saved" in out
    assert table.pattern("boost", "crane") == feedback("boost", "crane")

    load_or_build_table(WORDS, WORDS[:3], cache)
    assert "Loaded compatible pattern table" in capsys.readouterr().out

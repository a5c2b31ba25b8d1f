"""
patterns.py

Feedback patterns for (guess, answer) pairs and the optional pattern table.

A pattern is stored as an integer 0..242 encoding the 5-tile feedback in
base-3, most significant position first:

    0 = miss
    1 = present
    2 = hit

Because the positions are weighted most-significant-first, the integer code
is also the canonical ranking used to order sibling branches.
"""

import hashlib
import zipfile
from pathlib import Path

import numpy as np
from tqdm import tqdm


WORD_LENGTH = 5

MISS = 0
PRESENT = 1
HIT = 2

ALL_HIT = 3**WORD_LENGTH - 1

TILES = {HIT: "🟩", PRESENT: "🟨", MISS: "⬜"}
_TILE_MARKS = {
    "🟩": HIT,
    "🟨": PRESENT,
    "⬜": MISS,
    "G": HIT,
    "Y": PRESENT,
    "B": MISS,
}

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
TABLE_PATH = DATA_DIR / "pattern_table.npz"


def feedback(guess: str, answer: str) -> int:
    """
    Encode feedback for a (guess, answer) pair as a base-3 integer.

    Single left-to-right pass:

    1. A letter in the right position is a hit.
    2. Otherwise it is present if the answer contains it anywhere and the
       same letter has not already appeared earlier in the guess.
    3. Anything else is a miss.

    This is not the two-pass multiset rule of the real game. A repeated
    guess letter is only ever credited on its first occurrence, so
    feedback("BOOST", "ROBOT") marks the second O as a miss.
    """
    code = 0
    for i in range(WORD_LENGTH):
        ch = guess[i]
        if ch == answer[i]:
            mark = HIT
        elif ch in answer and ch not in guess[:i]:
            mark = PRESENT
        else:
            mark = MISS
        code = code * 3 + mark

    return code


def encode_marks(marks) -> int:
    """Convert a sequence of per-position marks into a pattern code."""
    if len(marks) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} marks, got {len(marks)}")

    code = 0
    for mark in marks:
        if mark not in TILES:
            raise ValueError(f"invalid mark: {mark!r}")
        code = code * 3 + mark
    return code


def decode_pattern(code: int) -> tuple:
    marks = []
    for _ in range(WORD_LENGTH):
        code, mark = divmod(code, 3)
        marks.append(mark)
    return tuple(reversed(marks))


def pattern_to_string(code: int) -> str:
    return "".join(TILES[mark] for mark in decode_pattern(code))


def parse_pattern(text: str) -> int:
    """Parse tiles (🟩🟨⬜) or letters (G/Y/B) back into a pattern code."""
    try:
        marks = [_TILE_MARKS[ch] for ch in text.strip().upper()]
    except KeyError as exc:
        raise ValueError(f"invalid pattern: {text!r}") from exc
    return encode_marks(marks)


def pattern_rank(code: int) -> int:
    """Canonical ordering key for sibling branches (all-miss first)."""
    return code


def build_matrix(guesses: list[str], answers: list[str]) -> np.ndarray:
    """
    Compute the full pattern matrix from scratch.

    Shape is (n_guesses, n_answers). Progress is shown so long builds on the
    full word lists don't look stuck.
    """
    matrix = np.zeros((len(guesses), len(answers)), dtype=np.uint8)

    print("Building pattern table...")
    for i, guess in enumerate(tqdm(guesses)):
        for j, answer in enumerate(answers):
            matrix[i, j] = feedback(guess, answer)

    return matrix


def word_lists_digest(guesses: list[str], answers: list[str]) -> str:
    """Fingerprint of both word lists, order included."""
    h = hashlib.sha256()
    h.update("\n".join(guesses).encode("utf-8"))
    h.update(b"\0")
    h.update("\n".join(answers).encode("utf-8"))
    return h.hexdigest()


class PatternTable:
    """Precomputed feedback codes for every (guess, answer) pair."""

    def __init__(self, guesses: list[str], answers: list[str], matrix: np.ndarray):
        if matrix.shape != (len(guesses), len(answers)):
            raise ValueError(
                f"matrix shape {matrix.shape} does not match word lists "
                f"({len(guesses)}, {len(answers)})"
            )
        self.guesses = list(guesses)
        self.answers = list(answers)
        self.matrix = matrix
        self._guess_index = {w: i for i, w in enumerate(self.guesses)}
        self._answer_index = {w: j for j, w in enumerate(self.answers)}

    @classmethod
    def build(cls, guesses, answers):
        return cls(guesses, answers, build_matrix(guesses, answers))

    def pattern(self, guess: str, answer: str) -> int:
        return int(self.matrix[self._guess_index[guess], self._answer_index[answer]])

    def columns(self, candidates: list[str]) -> np.ndarray:
        """Matrix column indices of the candidates, in order."""
        return np.array([self._answer_index[w] for w in candidates], dtype=np.intp)

    def codes(self, guess: str, cols: np.ndarray) -> np.ndarray:
        return self.matrix[self._guess_index[guess], cols]

    def row(self, guess: str, candidates: list[str]) -> np.ndarray:
        """Pattern codes of one guess against each candidate, in order."""
        return self.codes(guess, self.columns(candidates))


def _read_cache(cache_path):
    """(matrix, digest) from a cache file, or None if it can't be read."""
    try:
        data = np.load(cache_path)
    except (OSError, ValueError, EOFError, zipfile.BadZipFile):
        return None

    if not isinstance(data, np.lib.npyio.NpzFile):
        return None

    with data:
        try:
            return data["matrix"], str(data["digest"])
        except (KeyError, OSError, ValueError, zipfile.BadZipFile):
            return None


def load_or_build_table(guesses, answers, cache_path=None) -> PatternTable:
    """
    Load a previously built pattern table if it matches the current lists.

    The cache stores the matrix together with a digest of both word lists.
    If the file is missing, unreadable, the shape differs or the digest
    differs, the table is rebuilt and, when a cache path is given, saved
    again.
    """
    digest = word_lists_digest(guesses, answers)

    if cache_path is not None:
        cache_path = Path(cache_path)

    if cache_path is not None and cache_path.exists():
        cached = _read_cache(cache_path)

        if cached is None:
            print("Pattern table is unreadable. Rebuilding.")
        else:
            matrix, cached_digest = cached
            shape_ok = matrix.shape == (len(guesses), len(answers))
            if shape_ok and cached_digest == digest:
                print("Loaded compatible pattern table from disk.")
                return PatternTable(guesses, answers, matrix)

            if not shape_ok:
                print("Pattern table shape mismatch. Rebuilding.")
            else:
                print("Pattern table is stale. Rebuilding.")

    table = PatternTable.build(guesses, answers)

    if cache_path is not None:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        # File handle so numpy doesn't append .npz to custom paths
        with open(cache_path, "wb") as f:
            np.savez(f, matrix=table.matrix, digest=np.array(digest))
        print("Pattern table saved to disk.")

    return table

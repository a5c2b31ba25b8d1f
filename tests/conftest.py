import pytest


ANSWERS = [
    "cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade",
    "naval", "serve", "heath", "dwarf", "model", "karma", "stink", "grade",
    "quiet", "bench", "abate", "feign", "major", "death", "fresh", "crust",
    "stool", "colon", "abase", "marry", "react", "batty",
]

EXTRA_GUESSES = ["salet", "crane", "trace", "soare", "roate"]


@pytest.fixture
def answers():
    return list(ANSWERS)


@pytest.fixture
def guesses():
    return EXTRA_GUESSES + ANSWERS


@pytest.fixture
def word_files(tmp_path):
    answers_path = tmp_path / "answers.txt"
    allowed_path = tmp_path / "allowed.txt"
    answers_path.write_text("\n".join(ANSWERS) + "\n")
    allowed_path.write_text("\n".join(EXTRA_GUESSES) + "\n")
    return answers_path, allowed_path

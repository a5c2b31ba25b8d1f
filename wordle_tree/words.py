"""
words.py

Handles loading and checking the word lists.
No numpy here, just clean text handling.
"""

from pathlib import Path

from wordle_tree.patterns import WORD_LENGTH


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ANSWERS_PATH = DATA_DIR / "answers.txt"
ALLOWED_PATH = DATA_DIR / "allowed.txt"


def load_word_list(path):
    """Load a newline-separated word list into a lower-cased Python list."""
    with open(path, "r") as f:
        return [line.strip().lower() for line in f if line.strip()]


def validate_words(words, name):
    """Raise ValueError unless words is a non-empty list of distinct 5-letter words."""
    if not words:
        raise ValueError(f"{name} word list is empty")

    seen = set()
    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(
                f"{name} word list: {word!r} is not {WORD_LENGTH} letters long"
            )
        if word in seen:
            raise ValueError(f"{name} word list: duplicate entry {word!r}")
        seen.add(word)


def load_words(answers_path=ANSWERS_PATH, allowed_path=ALLOWED_PATH, include_answers=True):
    """
    Returns:
        answers: list of possible solution words
        allowed: list of valid guess words (includes answers unless
            include_answers is False)
    """
    answers = load_word_list(answers_path)
    allowed = load_word_list(allowed_path)
    validate_words(answers, "answers")
    validate_words(allowed, "allowed")

    if include_answers:
        known = set(allowed)
        allowed = allowed + [w for w in answers if w not in known]

    return answers, allowed

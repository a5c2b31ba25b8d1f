"""
partition.py

Buckets candidate answers by the feedback pattern a guess would produce.
"""

from typing import NamedTuple

from wordle_tree.patterns import feedback


class Partition(NamedTuple):
    groups: dict
    self_is_candidate: bool


def partition(guess: str, candidates: list[str], table=None) -> Partition:
    """
    Group candidates by pattern, preserving their relative order.

    A candidate equal to the guess joins no group; it only sets
    self_is_candidate. When a PatternTable is given, codes are read from it
    instead of being recomputed.
    """
    groups = {}
    self_is_candidate = False

    if table is not None:
        codes = table.row(guess, candidates).tolist()
    else:
        codes = [feedback(guess, answer) for answer in candidates]

    for answer, code in zip(candidates, codes):
        if answer == guess:
            self_is_candidate = True
            continue
        groups.setdefault(code, []).append(answer)

    return Partition(groups, self_is_candidate)


def partition_size(result: Partition) -> int:
    """Number of candidates accounted for by a partition."""
    return sum(len(g) for g in result.groups.values()) + int(result.self_is_candidate)

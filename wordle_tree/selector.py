"""
selector.py

Greedy one-ply guess selection.

Every guess in the pool is scored by how many distinct pattern groups it
splits the candidates into, with a small bonus when the guess could itself
be the answer. This is a hand-tuned heuristic, not an optimal search.
"""

from typing import NamedTuple

import numpy as np

from wordle_tree.partition import partition


SELF_CANDIDATE_BONUS = 1.1


class Selection(NamedTuple):
    guess: str
    groups: dict
    self_is_candidate: bool
    cost: float


def _cost(n_groups, self_is_candidate) -> float:
    return -n_groups - (SELF_CANDIDATE_BONUS if self_is_candidate else 0)


def guess_cost(result) -> float:
    """Lower is better: more groups, and being a possible answer, both help."""
    return _cost(len(result.groups), result.self_is_candidate)


def select_best(guess_pool: list[str], candidates: list[str], table=None) -> Selection:
    """
    Pick the pool word with the lowest cost against the candidates.

    Ties keep the earliest word in pool order, so the result only depends on
    the order of the inputs. With a PatternTable, guesses are scored from the
    distinct codes in their matrix row and only the winner is partitioned.
    """
    if not guess_pool:
        raise ValueError("guess pool is empty")
    if not candidates:
        raise ValueError("candidate list is empty")

    if table is not None:
        return _select_from_table(guess_pool, candidates, table)

    best = None

    for guess in guess_pool:
        result = partition(guess, candidates)
        cost = guess_cost(result)

        if best is None or cost < best.cost:
            best = Selection(guess, result.groups, result.self_is_candidate, cost)

    return best


def _select_from_table(guess_pool, candidates, table):
    cols = table.columns(candidates)
    candidate_set = set(candidates)

    best_guess = None
    best_cost = None

    for guess in guess_pool:
        self_is_candidate = guess in candidate_set
        # Only the guess itself produces ALL_HIT, and it forms no group
        n_groups = np.unique(table.codes(guess, cols)).size
        if self_is_candidate:
            n_groups -= 1
        cost = _cost(n_groups, self_is_candidate)

        if best_cost is None or cost < best_cost:
            best_guess, best_cost = guess, cost

    result = partition(best_guess, candidates, table)
    return Selection(best_guess, result.groups, result.self_is_candidate, best_cost)

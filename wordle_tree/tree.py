"""
tree.py

Builds the full strategy tree by applying the guess selector recursively.

Each internal node removes its chosen guess from the pool handed to its
children; candidates only shrink by partitioning. Aggregates are computed
bottom-up as the recursion returns:

    count         = resolved answers beneath the node
    max_depth     = worst-case guesses from this node
    average_depth = expected guesses from this node, all answers equally likely
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from tqdm import tqdm

from wordle_tree.selector import select_best
from wordle_tree.words import validate_words


@dataclass(frozen=True)
class Leaf:
    word: str


@dataclass(frozen=True)
class Internal:
    """
    Branching node. children is a read-only mapping of pattern code to node.

    Nodes compare by value but are not hashable, since children is a mapping.
    """

    guess: str
    children: MappingProxyType = field(repr=False)
    self_is_candidate: bool
    count: int
    max_depth: int
    average_depth: float

    __hash__ = None


class GuessPoolExhausted(ValueError):
    """The guess pool ran out before all candidates were told apart."""


def node_count(node) -> int:
    return 1 if isinstance(node, Leaf) else node.count


def node_max_depth(node) -> int:
    return 0 if isinstance(node, Leaf) else node.max_depth


def node_average_depth(node) -> float:
    return 0.0 if isinstance(node, Leaf) else node.average_depth


def without(pool: list[str], word: str) -> list[str]:
    """Copy of pool with the first occurrence of word removed."""
    reduced = list(pool)
    reduced.remove(word)
    return reduced


def build_tree(guess_pool, candidates, table=None, progress=False):
    """
    Build the strategy tree for candidates using words from guess_pool.

    Raises ValueError if either list is empty, holds a word of the wrong
    length or repeats a word, and GuessPoolExhausted when the pool runs dry
    while more than one candidate is left. Passing a PatternTable only speeds
    up pattern lookups; the tree is identical.
    """
    guess_pool = list(guess_pool)
    candidates = list(candidates)
    validate_words(candidates, "answers")
    validate_words(guess_pool, "guess pool")
    return _build(guess_pool, candidates, table, progress)


def _build(guess_pool, candidates, table, progress):
    if len(candidates) == 1:
        return Leaf(candidates[0])

    if not guess_pool:
        raise GuessPoolExhausted(
            f"guess pool exhausted with {len(candidates)} candidates unresolved: "
            + ", ".join(candidates)
        )

    best = select_best(guess_pool, candidates, table)
    reduced_pool = without(guess_pool, best.guess)

    branches = best.groups.items()
    if progress:
        branches = tqdm(branches, total=len(best.groups), desc=f"Branches of {best.guess}")

    children = {}
    for code, group in branches:
        children[code] = _build(reduced_pool, group, table, False)

    return _internal(best.guess, children, best.self_is_candidate)


def _internal(guess, children, self_is_candidate):
    nodes = list(children.values())

    count = sum(node_count(n) for n in nodes) + (1 if self_is_candidate else 0)
    max_depth = 1 + max([0] + [node_max_depth(n) for n in nodes])
    # Self-resolved answers cost exactly the current guess, covered by the +1
    average_depth = 1 + sum(
        node_average_depth(n) * node_count(n) / count for n in nodes
    )

    return Internal(
        guess=guess,
        children=MappingProxyType(children),
        self_is_candidate=self_is_candidate,
        count=count,
        max_depth=max_depth,
        average_depth=average_depth,
    )


def iter_leaves(node):
    """Yield every Leaf beneath node, depth first in child insertion order."""
    if isinstance(node, Leaf):
        yield node
        return
    for child in node.children.values():
        yield from iter_leaves(child)


def resolved_answers(node, depth=0):
    """
    Yield (answer, depth) for every answer resolved beneath node.

    Depth counts internal nodes passed on the way, so a guess that turns out
    to be the answer resolves at depth 1 from its own node, and a Leaf
    directly under a node sits at depth 1 as well.
    """
    if isinstance(node, Leaf):
        yield node.word, depth
        return

    if node.self_is_candidate:
        yield node.guess, depth + 1
    for child in node.children.values():
        yield from resolved_answers(child, depth + 1)


def guess_count(node, answer):
    """Depth at which answer is resolved beneath node, or None if absent."""
    for word, depth in resolved_answers(node):
        if word == answer:
            return depth
    return None

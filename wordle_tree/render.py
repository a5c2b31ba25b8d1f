"""
render.py

Turns a finished strategy tree into something a person can read.

Sibling branches are always ordered by pattern_rank, so the output is stable
regardless of the order in which candidates happened to be grouped.
"""

import json

import numpy as np

from wordle_tree.partition import partition
from wordle_tree.patterns import pattern_rank, pattern_to_string
from wordle_tree.tree import Leaf


def sorted_children(node):
    """(code, child) pairs of an internal node in canonical order."""
    return sorted(node.children.items(), key=lambda item: pattern_rank(item[0]))


def format_tree(node, stats=False):
    """
    Nested plain-data form of the tree.

    A Leaf becomes its word. An internal node becomes
    {"input": guess, "next": {tiles: child, ...}}, plus its aggregates when
    stats is set.
    """
    if isinstance(node, Leaf):
        return node.word

    out = {"input": node.guess}
    if stats:
        out["count"] = node.count
        out["maxDepth"] = node.max_depth
        out["averageDepth"] = round(node.average_depth, 4)
        out["maybeAnswer"] = node.self_is_candidate
    out["next"] = {
        pattern_to_string(code): format_tree(child, stats)
        for code, child in sorted_children(node)
    }
    return out


def dump_json(node, stats=False, indent=2) -> str:
    return json.dumps(format_tree(node, stats), indent=indent, ensure_ascii=False)


def render_outline(node) -> str:
    """Indented text form, one line per guess or resolved answer."""
    lines = []
    _outline(node, lines, 0)
    return "\n".join(lines)


def _outline(node, lines, level):
    pad = "  " * level
    if isinstance(node, Leaf):
        lines.append(f"{pad}= {node.word}")
        return

    flag = " [+]" if node.self_is_candidate else ""
    lines.append(
        f"{pad}{node.guess}{flag}  "
        f"(count {node.count}, max {node.max_depth}, avg {node.average_depth:.4f})"
    )
    for code, child in sorted_children(node):
        lines.append(f"{pad}  {pattern_to_string(code)}")
        _outline(child, lines, level + 2)


def describe_guess(guess, candidates, table=None) -> str:
    """
    Report how a single guess splits the candidates.

    Lists the variance and mean of the group sizes, the number of branches,
    then every group with its size and members.
    """
    result = partition(guess, candidates, table)
    counts = np.array([len(g) for g in result.groups.values()], dtype=float)

    lines = [f"Input: {guess}"]
    if counts.size:
        lines.append(f"Variance = {counts.var():.4f}")
        lines.append(f"Average = {counts.mean():.4f} words")
    lines.append(f"# of Branches = {counts.size}")
    if result.self_is_candidate:
        lines.append("Input is itself a candidate answer")
    lines.append("")
    lines.append("---")
    lines.append("")

    for code, group in sorted(result.groups.items(), key=lambda item: pattern_rank(item[0])):
        num = f"({len(group)})".rjust(6)
        lines.append(f"{pattern_to_string(code)} {num} -> {','.join(group)}")

    return "\n".join(lines)

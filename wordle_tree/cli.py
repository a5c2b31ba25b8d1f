"""
cli.py

Command-line entry point: load the word lists, build the strategy tree and
print it.

Modes:
default: build the whole tree and print it (outline or JSON)
-input WORD: report how one guess splits the answer list; no tree is built

Optional:
-stats: include count / maxDepth / averageDepth in JSON output (-format json only).
-output PATH: write the rendered tree to a file instead of stdout.
-cache PATH / -no-cache: where to keep the precomputed pattern table.
-progress: show a progress bar over the root's branches.
"""

import argparse
import time

from wordle_tree.patterns import TABLE_PATH, load_or_build_table
from wordle_tree.render import describe_guess, dump_json, render_outline
from wordle_tree.tree import Internal, build_tree
from wordle_tree.words import ALLOWED_PATH, ANSWERS_PATH, load_words


def run_tree(answers, allowed, table, fmt, stats, output, progress):
    print(f"Building strategy tree for {len(answers):,} answers "
          f"from {len(allowed):,} guesses...")
    start_time = time.time()
    tree = build_tree(allowed, answers, table=table, progress=progress)
    elapsed = time.time() - start_time

    rendered = dump_json(tree, stats=stats) if fmt == "json" else render_outline(tree)

    if output is not None:
        with open(output, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
        print(f"Saved tree to {output}.")
    else:
        print(rendered)

    print(f"\nBuilt in {elapsed:.1f}s")
    if isinstance(tree, Internal):
        print(f"First guess: {tree.guess}")
        print(f"Answers: {tree.count:,}")
        print(f"Max depth: {tree.max_depth}")
        print(f"Average depth: {tree.average_depth:.4f}")
    return tree


def run_single_input(answers, allowed, table, word):
    if word not in allowed:
        raise ValueError(f"word not found in allowed list: {word}")
    print(describe_guess(word, answers, table))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Greedy Wordle strategy tree builder."
    )
    parser.add_argument(
        "-answers",
        type=str,
        default=str(ANSWERS_PATH),
        help="Newline-separated answer list (default: data/answers.txt).",
    )
    parser.add_argument(
        "-allowed",
        type=str,
        default=str(ALLOWED_PATH),
        help="Newline-separated guess list (default: data/allowed.txt).",
    )
    parser.add_argument(
        "-format",
        choices=("outline", "json"),
        default="outline",
        help="Tree output format (default: outline).",
    )
    parser.add_argument(
        "-stats",
        action="store_true",
        help="Include per-node aggregates in JSON output (requires -format json).",
    )
    parser.add_argument(
        "-output",
        type=str,
        default=None,
        help="Write the rendered tree to this path instead of stdout.",
    )
    parser.add_argument(
        "-input",
        type=str,
        default=None,
        metavar="WORD",
        help="Only report how WORD splits the answers; no tree is built.",
    )
    cache_group = parser.add_mutually_exclusive_group()
    cache_group.add_argument(
        "-cache",
        type=str,
        default=str(TABLE_PATH),
        help="Pattern table cache file (default: data/pattern_table.npz).",
    )
    cache_group.add_argument(
        "-no-cache",
        action="store_true",
        help="Build the pattern table in memory without reading or saving it.",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar over the first guess's branches.",
    )
    args = parser.parse_args(argv)
    if args.stats and args.format != "json":
        parser.error("-stats requires -format json")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        answers, allowed = load_words(args.answers, args.allowed)
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    try:
        if args.input is not None:
            # One row of feedback; not worth the full table
            run_single_input(answers, allowed, None, args.input.lower())
            return

        cache_path = None if args.no_cache else args.cache
        table = load_or_build_table(allowed, answers, cache_path)
        run_tree(
            answers,
            allowed,
            table,
            args.format,
            args.stats,
            args.output,
            args.progress,
        )
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()

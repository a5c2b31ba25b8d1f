"""
main.py

Builds the greedy strategy tree for the bundled word lists.
See wordle_tree/cli.py for the available flags.
"""

from wordle_tree.cli import main


if __name__ == "__main__":
    main()

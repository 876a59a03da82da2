"""Demonstration of AVL insertions and removals."""

from __future__ import annotations

import sys
from typing import TextIO

from arboreto.avl import AVLTree

DEMO_VALUES = (30, 20, 40, 10, 25, 35, 50, 5, 15)
DEMO_REMOVALS = (40, 30)
SEPARATOR = "------------------"


def run(output_stream: TextIO) -> int:
    """Write the demonstration to output_stream and return exit status."""
    write = output_stream.write
    tree = AVLTree()

    write("Inserindo elementos na árvore AVL...\n")
    for value in DEMO_VALUES:
        tree.insert(value)
        write(f"Inserido: {value}\n")
        write(tree.format_tree() + "\n")
        write(SEPARATOR + "\n")

    write("\nRemovendo elementos...\n")
    for value in DEMO_REMOVALS:
        tree.remove(value)
        write(f"Removido: {value}\n")
        write(tree.format_tree() + "\n")

    write("\nElementos em ordem crescente:\n")
    write(tree.format_in_order() + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on standard output."""
    return run(sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
"""Command that builds a binary search tree from input and reports on it."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from arboreto.bst import BinarySearchTree


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _write_answer(write: Callable[[str], object], question: str, flag: bool) -> None:
    """Write a yes/no question line with its answer."""
    answer = "Sim" if flag else "Nao"
    write(f"{question} {answer}\n")


def run(input_stream: TextIO, output_stream: TextIO) -> int:
    """Read values and queries from input_stream and write the report.

    Raises ValueError when a number is missing or malformed.
    """
    tokens = _tokens(input_stream)
    write = output_stream.write
    tree = BinarySearchTree()

    write("Quantos valores deseja inserir na arvore? ")
    output_stream.flush()
    count = _read_int(tokens)
    for position in range(1, count + 1):
        write(f"Digite o valor {position}: ")
        output_stream.flush()
        tree.insert(_read_int(tokens))

    write("\n--- RESULTADOS ---\n")
    write(f"Soma: {tree.total()}\n")
    write(f"Media: {tree.mean():g}\n")
    _write_answer(write, "Eh cheia?", tree.is_full())
    _write_answer(write, "Eh completa?", tree.is_complete())
    _write_answer(write, "Eh estritamente binaria?", tree.is_strictly_binary())

    write("Digite um valor de referencia para contar maiores que ele: ")
    output_stream.flush()
    reference = _read_int(tokens)
    write(f"Maiores que {reference}: {tree.count_greater(reference)}\n")

    write("Digite um nivel para calcular a media: ")
    output_stream.flush()
    level = _read_int(tokens)
    write(f"Media no nivel {level}: {tree.level_mean(level):g}\n")

    write("Digite o intervalo [x, y] para imprimir valores nesse intervalo:\n")
    write("x: ")
    output_stream.flush()
    low = _read_int(tokens)
    write("y: ")
    output_stream.flush()
    high = _read_int(tokens)
    write(f"Valores no intervalo [{low}, {high}]: ")
    write("".join(f"{value} " for value in tree.values_in_range(low, high)))
    write("\n")

    write("Altura de cada no:\n")
    for value, height in tree.compute_heights():
        write(f"Valor: {value} | Altura: {height}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the report on standard input and output."""
    try:
        return run(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"\nerro: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
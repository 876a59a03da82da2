"""Interactive menu for exercising a MaxHeap."""

from __future__ import annotations

import sys
from typing import TextIO

from arboreto.maxheap import MaxHeap, heapify_max, is_min_heap

INITIAL_VALUES = (32, 11, 15, 20, 76, 23, 17, 50, 33, 80)
MIN_HEAP_SAMPLE = (1, 3, 6, 5, 9, 8)
MAX_HEAP_SAMPLE = (5, 10, 15, 20, 25, 30)
MAX_LINE_LENGTH = 6
CLEAR_SCREEN = "\033[2J\033[1;1H"

MENU = (
    "Selecione uma operacao:\n"
    " 1: Inserir valor\n"
    " 2: Olhar raiz\n"
    " 3: Remover raiz\n"
    " 4: Imprimir como lista\n"
    " 5: Imprimir como arvore\n"
    " 6: Heapsort\n"
    " 7: Buscar valor na heap\n"
    " 8: Verificar se vetor eh MinHeap\n"
    " 9: Transformar vetor em MaxHeap\n"
    "10: Encerrar\n"
    "Digite o numero da operacao: "
)


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


def read_number(line: str) -> int | None:
    """Parse an optionally signed decimal of at most six characters.

    Returns None when the line is empty, too long or not a number.
    """
    if not line or len(line) > MAX_LINE_LENGTH:
        return None
    negative = line[0] == "-"
    digits = line[1:] if negative else line
    if any(ch not in "0123456789" for ch in digits):
        return None
    number = int(digits) if digits else 0
    return -number if negative else number


def run(input_stream: TextIO, output_stream: TextIO) -> int:
    """Run the menu loop until option 10 or end of input; return exit status."""
    heap = MaxHeap()
    for value in INITIAL_VALUES:
        heap.insert(value)

    write = output_stream.write

    def next_line() -> str:
        line = input_stream.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\n")

    def pause(prompt: str = "Pressione ENTER.") -> None:
        write(prompt)
        next_line()

    def ask_number() -> int:
        number = read_number(next_line())
        while number is None:
            write("Numero invalido. Tente novamente: ")
            number = read_number(next_line())
        return number

    def insert_value() -> None:
        write("Digite valor: ")
        heap.insert(ask_number())
        pause("Pressione ENTER para continuar.")

    def show_root() -> None:
        if heap.is_empty():
            pause("Heap vazia. Pressione ENTER.")
        else:
            pause(f"Raiz: {heap.root()}. Pressione ENTER.")

    def remove_root() -> None:
        heap.remove_root()
        pause("Raiz removida. Pressione ENTER.")

    def show_list() -> None:
        write(heap.format_list() + "\n")
        pause()

    def show_tree() -> None:
        tree = heap.format_tree()
        if tree:
            write(tree + "\n")
        pause()

    def show_sorted() -> None:
        write(", ".join(str(value) for value in heap.heapsort()) + "\n")
        pause()

    def search() -> None:
        write("Digite o valor a buscar: ")
        index = heap.find(ask_number())
        if index is None:
            write("Valor nao encontrado.\n")
        else:
            write(f"Valor encontrado no indice: {index}\n")
        pause()

    def check_min_heap() -> None:
        answer = "Sim" if is_min_heap(MIN_HEAP_SAMPLE) else "Nao"
        write(f"Vetor eh MinHeap? {answer}\n")
        pause()

    def convert_to_max_heap() -> None:
        values = list(MAX_HEAP_SAMPLE)
        heapify_max(values)
        write("Vetor convertido para MaxHeap: ")
        write(", ".join(str(value) for value in values) + "\n")
        pause()

    actions = {
        1: insert_value,
        2: show_root,
        3: remove_root,
        4: show_list,
        5: show_tree,
        6: show_sorted,
        7: search,
        8: check_min_heap,
        9: convert_to_max_heap,
    }

    try:
        while True:
            write(CLEAR_SCREEN)
            write(MENU)
            option = read_number(next_line())
            if option == 10:
                return 0
            action = actions.get(option)
            if action is not None:
                action()
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
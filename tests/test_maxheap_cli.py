import io

import pytest

from arboreto.maxheap_cli import INITIAL_VALUES, read_number, run


def _run(text):
    out = io.StringIO()
    status = run(io.StringIO(text), out)
    return status, out.getvalue()


@pytest.mark.parametrize(
    "line, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("123456", 123456),
        ("-12345", -12345),
        ("0", 0),
    ],
)
def test_read_number_valid(line, expected):
    assert read_number(line) == expected


@pytest.mark.parametrize("line", ["", "1234567", "12a", "abc", " 12", "1-2"])
def test_read_number_invalid(line):
    assert read_number(line) is None


def test_read_number_lone_minus_is_zero():
    assert read_number("-") == 0


def test_exit_option_stops_loop():
    status, output = _run("10\n2\n")
    assert status == 0
    assert output.count("Selecione uma operacao:") == 1


def test_end_of_input_stops_loop():
    status, output = _run("")
    assert status == 0
    assert "Digite o numero da operacao: " in output


def test_unknown_option_shows_menu_again():
    _, output = _run("42\n10\n")
    assert output.count("Selecione uma operacao:") == 2


def test_show_root():
    _, output = _run("2\n\n10\n")
    assert f"Raiz: {max(INITIAL_VALUES)}. Pressione ENTER." in output


def test_remove_root_then_show():
    _, output = _run("3\n\n2\n\n10\n")
    assert "Raiz removida." in output
    assert f"Raiz: {sorted(INITIAL_VALUES)[-2]}." in output


def test_insert_retries_invalid_input():
    _, output = _run("1\nabc\n99\n\n2\n\n10\n")
    assert "Numero invalido. Tente novamente: " in output
    assert "Raiz: 99." in output


def test_heapsort_option():
    _, output = _run("6\n\n10\n")
    expected = ", ".join(str(v) for v in sorted(INITIAL_VALUES))
    assert expected + "\n" in output


def test_search_found_and_missing():
    _, output = _run("7\n76\n\n7\n1000\n\n10\n")
    assert "Valor encontrado no indice: " in output
    assert "Valor nao encontrado." in output


def test_min_heap_check():
    _, output = _run("8\n\n10\n")
    assert "Vetor eh MinHeap? Sim" in output


def test_convert_to_max_heap():
    _, output = _run("9\n\n10\n")
    assert "Vetor convertido para MaxHeap: 30, 25, 15, 20, 10, 5\n" in output
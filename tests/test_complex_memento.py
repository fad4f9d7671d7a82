import dataclasses

import pytest

from patternbook.complex_memento import ComplexMemento, ComplexNumber, Store, main


def test_default_is_zero():
    number = ComplexNumber()
    assert (number.real, number.imaginary) == (0.0, 0.0)


def test_memento_round_trip():
    original = ComplexNumber(1.5, -2.25)
    memento = original.create_memento()
    original.add(ComplexNumber(10.0, 10.0))
    restored = ComplexNumber()
    restored.reinstate_memento(memento)
    assert (restored.real, restored.imaginary) == (1.5, -2.25)


def test_memento_is_immutable():
    memento = ComplexNumber(1.0, 2.0).create_memento()
    with pytest.raises(dataclasses.FrozenInstanceError):
        memento.real = 5.0
    restored = ComplexNumber()
    restored.reinstate_memento(memento)
    assert (restored.real, restored.imaginary) == (1.0, 2.0)


def test_add_is_symmetric_in_value():
    a = ComplexNumber(1.0, 2.0)
    b = ComplexNumber(3.0, 4.0)
    a_copy = ComplexNumber(1.0, 2.0)
    b.add(a_copy)
    a.add(ComplexNumber(3.0, 4.0))
    assert (a.real, a.imaginary) == (b.real, b.imaginary)


def test_add_leaves_argument_unchanged():
    a = ComplexNumber(1.0, 2.0)
    b = ComplexNumber(3.0, 4.0)
    a.add(b)
    assert (b.real, b.imaginary) == (3.0, 4.0)


def test_multiply_uses_updated_real_part():
    a = ComplexNumber(1.0, 2.0)
    a.multiply(ComplexNumber(3.0, 4.0))
    assert (a.real, a.imaginary) == (-5.0, -14.0)


def test_multiply_by_one_is_identity():
    a = ComplexNumber(7.0, 0.0)
    a.multiply(ComplexNumber(1.0, 0.0))
    assert (a.real, a.imaginary) == (7.0, 0.0)


def test_print_format(capsys):
    ComplexNumber(1.0, 2.0).print()
    assert capsys.readouterr().out == "1 + 2i\n"


def test_store_keeps_last_memento():
    store = Store()
    first = ComplexMemento(1.0, 1.0)
    second = ComplexMemento(2.0, 2.0)
    store.store_memento(first)
    store.store_memento(second)
    assert store.retrieve_memento() == second


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "3 + 4i",
        "1 + 2i",
        "4 + 6i",
        "1 + 2i",
    ]
"""Complex numbers whose value can be saved and restored."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from patternbook.pizza_decorator import format_number


@dataclass(frozen=True)
class ComplexMemento:
    """A saved value of a complex number."""

    real: float = 0.0
    imaginary: float = 0.0


class ComplexNumber:
    """A mutable complex number."""

    def __init__(self, real: float = 0.0, imaginary: float = 0.0) -> None:
        self.real = real
        self.imaginary = imaginary

    def add(self, other: ComplexNumber) -> None:
        """Add ``other`` to this number in place."""
        self.real = self.real + other.real
        self.imaginary = self.imaginary + other.imaginary

    def multiply(self, other: ComplexNumber) -> None:
        """Multiply in place; the imaginary part is computed from the updated real part."""
        self.real = self.real * other.real - self.imaginary * other.imaginary
        self.imaginary = self.real * other.imaginary + self.imaginary * other.real

    def create_memento(self) -> ComplexMemento:
        """Save the current value."""
        return ComplexMemento(self.real, self.imaginary)

    def reinstate_memento(self, memento: ComplexMemento) -> None:
        """Restore a saved value."""
        self.real = memento.real
        self.imaginary = memento.imaginary

    def __str__(self) -> str:
        return f"{format_number(self.real)} + {format_number(self.imaginary)}i"

    def print(self) -> None:
        """Print the number as ``a + bi``."""
        print(str(self))


class Store:
    """Holds one saved complex value."""

    def __init__(self) -> None:
        self._memento = ComplexMemento()

    def store_memento(self, memento: ComplexMemento) -> None:
        """Keep ``memento``, replacing what was kept before."""
        self._memento = memento

    def retrieve_memento(self) -> ComplexMemento:
        """Return the kept memento."""
        return self._memento


def main(argv: list[str] | None = None) -> int:
    """Save a number, restore it into another and add them."""
    del argv
    store = Store()
    one = ComplexNumber(1.0, 2.0)
    store.store_memento(one.create_memento())

    one = ComplexNumber(3.0, 4.0)
    two = ComplexNumber()
    two.reinstate_memento(store.retrieve_memento())

    one.print()
    two.print()
    one.add(two)
    one.print()
    two.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Coffee orders built by wrapping a plain coffee in milk and sugar."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Coffee(ABC):
    """A drink that can be ordered."""

    @abstractmethod
    def operation(self) -> str:
        """Text describing how the drink is prepared."""

    @abstractmethod
    def cost(self) -> float:
        """Price of the drink."""

    @abstractmethod
    def description(self) -> str:
        """Short name of the drink and its additions."""


class BlackCoffee(Coffee):
    """Plain black coffee."""

    def operation(self) -> str:
        return "Basic Black Coffee"

    def cost(self) -> float:
        return 2.50

    def description(self) -> str:
        return "Basic Black Coffee"


class CoffeeDecorator(Coffee):
    """Wraps a drink; with nothing wrapped it contributes nothing."""

    def __init__(self, component: Coffee | None) -> None:
        self.component = component

    def operation(self) -> str:
        return self.component.operation() if self.component is not None else ""

    def cost(self) -> float:
        return self.component.cost() if self.component is not None else 0.0

    def description(self) -> str:
        return self.component.description() if self.component is not None else ""

    @abstractmethod
    def added_behaviour(self) -> str:
        """Extra note that this addition contributes to the preparation."""


class Milk(CoffeeDecorator):
    """Adds milk."""

    def operation(self) -> str:
        return super().operation() + " + Milk" + self.added_behaviour()

    def cost(self) -> float:
        return super().cost() + 0.60

    def description(self) -> str:
        return super().description() + " + Milk"

    def added_behaviour(self) -> str:
        return " (Steamed to perfection)"


class Sugar(CoffeeDecorator):
    """Adds sugar."""

    def operation(self) -> str:
        return super().operation() + " + Sugar" + self.added_behaviour()

    def cost(self) -> float:
        return super().cost() + 0.25

    def description(self) -> str:
        return super().description() + " + Sugar"

    def added_behaviour(self) -> str:
        return " (Extra sweetness added)"


def main(argv: list[str] | None = None) -> int:
    """Run the coffee shop demonstration."""
    del argv
    print("=== Coffee Shop Decorator Pattern Demo ===\n")
    orders = [
        ("Order 1: ", BlackCoffee()),
        ("Order 2: ", Milk(BlackCoffee())),
        ("Order 3: ", Sugar(BlackCoffee())),
        ("Order 4: ", Sugar(Milk(BlackCoffee()))),
        ("Order 5 (Fancy): ", Milk(Sugar(Milk(BlackCoffee())))),
    ]
    for label, coffee in orders:
        print(f"{label}{coffee.operation()}")
        print(f"Cost: ${coffee.cost():.2f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Pizzas whose price and name grow as decorations are wrapped around them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

BASE_PRICE = 8.99
EXTRA_CHEESE_PRICE = 1.50
STUFFED_CRUST_PRICE = 2.25


def format_number(value: float) -> str:
    """Render a number the way a default-formatted stream does (6 significant digits)."""
    return f"{value:g}"


class Pizza(ABC):
    """Anything that can be sold as a pizza."""

    @abstractmethod
    def price(self) -> float:
        """Total price of the pizza."""

    @abstractmethod
    def name(self) -> str:
        """Full display name of the pizza."""

    def describe(self) -> str:
        """One-line summary: name and price."""
        return f"{self.name()} - ${format_number(self.price())}"

    def print_pizza(self) -> None:
        """Print the one-line summary."""
        print(self.describe())


class BasePizza(Pizza):
    """A plain pizza with the given toppings."""

    def __init__(self, toppings: str) -> None:
        self.toppings = toppings

    def price(self) -> float:
        return BASE_PRICE

    def name(self) -> str:
        return f"{self.toppings} Pizza"


class PizzaDecorator(Pizza):
    """Wraps another pizza and forwards everything to it."""

    def __init__(self, pizza: Pizza) -> None:
        self.pizza = pizza

    def price(self) -> float:
        return self.pizza.price()

    def name(self) -> str:
        return self.pizza.name()

    def print_pizza(self) -> None:
        # Printing is forwarded to the wrapped pizza, so it shows that pizza's own summary.
        self.pizza.print_pizza()


class ExtraCheese(PizzaDecorator):
    """Adds extra cheese."""

    def price(self) -> float:
        return self.pizza.price() + EXTRA_CHEESE_PRICE

    def name(self) -> str:
        return f"{self.pizza.name()} with Extra Cheese"


class StuffedCrust(PizzaDecorator):
    """Adds a stuffed crust."""

    def price(self) -> float:
        return self.pizza.price() + STUFFED_CRUST_PRICE

    def name(self) -> str:
        return f"{self.pizza.name()} with Stuffed Crust"


def main(argv: list[str] | None = None) -> int:
    """Run the pizza decorator demonstration."""
    del argv
    print("=== Pizza Decorator Pattern Demo ===")
    print()

    margherita = BasePizza("Margherita")
    cheesy_margherita = ExtraCheese(BasePizza("Margherita"))
    stuffed_pepperoni = StuffedCrust(BasePizza("Pepperoni"))
    deluxe = ExtraCheese(StuffedCrust(BasePizza("Supreme")))
    another_deluxe = StuffedCrust(ExtraCheese(BasePizza("Hawaiian")))
    triple_cheese = ExtraCheese(ExtraCheese(ExtraCheese(BasePizza("plain"))))

    sections = [
        ("1. Basic Pizza:", margherita),
        ("2. Pizza with Extra Cheese:", cheesy_margherita),
        ("3. Pizza with Stuffed Crust:", stuffed_pepperoni),
        ("4. Pizza with Multiple Decorations:", deluxe),
        ("5. Different Order of Decorations:", another_deluxe),
        ("6. Extra Extra Extra cheese pizza:", triple_cheese),
    ]
    for heading, pizza in sections:
        print(heading)
        pizza.print_pizza()
        print()

    print("=== Demonstration of Dynamic Behavior ===")
    print(f"Base Margherita: ${format_number(margherita.price())}")
    print(f"With Extra Cheese: ${format_number(cheesy_margherita.price())}")
    print(f"With Stuffed Crust: ${format_number(stuffed_pepperoni.price())}")
    print(f"With Both Decorations: ${format_number(deluxe.price())}")
    print(f"pizza with extra extra extra cheese: ${format_number(triple_cheese.price())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
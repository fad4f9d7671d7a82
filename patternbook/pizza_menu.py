"""Pizza toppings that can be sold alone or bundled into priced groups."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from patternbook.pizza_decorator import format_number


class PizzaComponent(ABC):
    """A topping or a group of toppings."""

    def __init__(self, name: str, price: float) -> None:
        self.name = name
        self._price = price

    @abstractmethod
    def price(self) -> float:
        """Total price of this item."""

    @abstractmethod
    def display(self) -> str:
        """Print this item; returns the text printed."""

    def add(self, component: PizzaComponent) -> None:
        """Add a part; a single topping cannot hold parts and says so."""
        print("Cannot add to individual topping")

    def remove(self, component: PizzaComponent) -> None:
        """Remove a part; a single topping cannot hold parts and says so."""
        print("Cannot remove from individual topping")


class Topping(PizzaComponent):
    """A single topping with its own price."""

    def price(self) -> float:
        return self._price

    def display(self) -> str:
        text = f"  {self.name}: ${format_number(self._price)}"
        print(text)
        return text


class ToppingGroup(PizzaComponent):
    """A named bundle of toppings priced as the sum of its parts."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 0.0)
        self._components: list[PizzaComponent] = []

    @property
    def components(self) -> tuple[PizzaComponent, ...]:
        """The bundled items, in the order they were added."""
        return tuple(self._components)

    def add(self, component: PizzaComponent) -> None:
        self._components.append(component)

    def remove(self, component: PizzaComponent) -> None:
        for position, member in enumerate(self._components):
            if member is component:
                del self._components[position]
                return

    def price(self) -> float:
        return sum((component.price() for component in self._components), 0.0)

    def display(self) -> str:
        header = f"{self.name} (Total: ${format_number(self.price())})"
        print(header)
        parts = [header]
        parts.extend(component.display() for component in self._components)
        return "\n".join(parts)


def _group(name: str, *toppings: PizzaComponent) -> ToppingGroup:
    group = ToppingGroup(name)
    for topping in toppings:
        group.add(topping)
    return group


def main(argv: list[str] | None = None) -> int:
    """Print the menu of toppings and topping combinations."""
    del argv
    print("=== Romeo's Pizza Menu ===")
    print()

    pepperoni = Topping("Pepperoni", 2.50)
    cheese = Topping("Extra Cheese", 1.75)

    vegetarian = _group(
        "Vegetarian Special",
        Topping("Mushrooms", 1.50),
        Topping("Green Peppers", 1.25),
        Topping("Onions", 1.00),
    )
    meat_lovers = _group(
        "Meat Lovers Special",
        pepperoni,
        Topping("Beef Sausage", 3.00),
        Topping("Salami", 2.75),
    )
    vegetarian_deluxe = _group(
        "Vegetarian Deluxe",
        Topping("Mushrooms", 1.50),
        Topping("Green Peppers", 1.25),
        Topping("Onions", 1.00),
        Topping("Feta Cheese", 2.25),
        Topping("Olives", 1.50),
    )

    print("Individual Toppings:")
    pepperoni.display()
    cheese.display()
    print()

    print("Topping Combinations:")
    for group in (vegetarian, meat_lovers, vegetarian_deluxe):
        group.display()
        print()

    print("Price Comparison:")
    print(f"Single Pepperoni: ${format_number(pepperoni.price())}")
    print(f"Vegetarian Special: ${format_number(vegetarian.price())}")
    print(f"Meat Lovers Special: ${format_number(meat_lovers.price())}")
    print(f"Vegetarian Deluxe: ${format_number(vegetarian_deluxe.price())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
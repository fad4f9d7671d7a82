"""Buildings assembled from floors, rooms and fittings, with costs and weights rolled up."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from patternbook.pizza_decorator import format_number


class BuildingComponent(ABC):
    """Any part of a building, from a single door up to the whole building."""

    @abstractmethod
    def cost(self) -> float:
        """Total cost of this part."""

    @abstractmethod
    def weight(self) -> float:
        """Total weight of this part in kilograms."""

    @abstractmethod
    def description(self) -> str:
        """One-line description of this part."""

    @abstractmethod
    def structure_lines(self, indent_level: int = 0) -> list[str]:
        """Indented lines showing this part and everything inside it."""

    def show_structure(self, indent_level: int = 0) -> None:
        """Print the structure lines."""
        for line in self.structure_lines(indent_level):
            print(line)

    def add_component(self, component: BuildingComponent) -> None:
        """Add a part; parts that hold nothing ignore this."""

    def remove_component(self, component: BuildingComponent) -> None:
        """Remove a part; parts that hold nothing ignore this."""

    @staticmethod
    def _indent(level: int) -> str:
        return "  " * level


class _Leaf(BuildingComponent):
    """A part that holds no other parts."""

    def structure_lines(self, indent_level: int = 0) -> list[str]:
        return [f"{self._indent(indent_level)}- {self.description()}"]


class Window(_Leaf):
    """A window of a given type."""

    def __init__(self, window_type: str, cost: float, weight: float) -> None:
        self.window_type = window_type
        self._cost = cost
        self._weight = weight

    def cost(self) -> float:
        return self._cost

    def weight(self) -> float:
        return self._weight

    def description(self) -> str:
        return (
            f"{self.window_type} Window (${format_number(self._cost)}, "
            f"{format_number(self._weight)}kg)"
        )


class Door(_Leaf):
    """A door made of a given material."""

    def __init__(self, material: str, cost: float, weight: float) -> None:
        self.material = material
        self._cost = cost
        self._weight = weight

    def cost(self) -> float:
        return self._cost

    def weight(self) -> float:
        return self._weight

    def description(self) -> str:
        return (
            f"{self.material} Door (${format_number(self._cost)}, "
            f"{format_number(self._weight)}kg)"
        )


class Wall(_Leaf):
    """A wall priced and weighed by its area."""

    def __init__(
        self,
        material: str,
        length: float,
        height: float,
        cost_per_sqm: float,
        weight_per_sqm: float,
    ) -> None:
        self.material = material
        self.length = length
        self.height = height
        self.cost_per_sqm = cost_per_sqm
        self.weight_per_sqm = weight_per_sqm

    @property
    def area(self) -> float:
        """Area of the wall in square metres."""
        return self.length * self.height

    def cost(self) -> float:
        return self.area * self.cost_per_sqm

    def weight(self) -> float:
        return self.area * self.weight_per_sqm

    def description(self) -> str:
        return (
            f"{self.material} Wall {format_number(self.length)}m x "
            f"{format_number(self.height)}m (${format_number(self.cost())}, "
            f"{format_number(self.weight())}kg)"
        )


class Furniture(_Leaf):
    """A piece of furniture."""

    def __init__(self, furniture_type: str, cost: float, weight: float) -> None:
        self.furniture_type = furniture_type
        self._cost = cost
        self._weight = weight

    def cost(self) -> float:
        return self._cost

    def weight(self) -> float:
        return self._weight

    def description(self) -> str:
        return (
            f"{self.furniture_type} (${format_number(self._cost)}, "
            f"{format_number(self._weight)}kg)"
        )


class _Composite(BuildingComponent):
    """A part made of other parts; cost and weight are the sums of its children."""

    _marker = "+"

    def __init__(self) -> None:
        self._children: list[BuildingComponent] = []

    @property
    def children(self) -> tuple[BuildingComponent, ...]:
        """The contained parts, in the order they were added."""
        return tuple(self._children)

    def cost(self) -> float:
        return sum((child.cost() for child in self._children), 0.0)

    def weight(self) -> float:
        return sum((child.weight() for child in self._children), 0.0)

    def structure_lines(self, indent_level: int = 0) -> list[str]:
        lines = [f"{self._indent(indent_level)}{self._marker} {self.description()}"]
        for child in self._children:
            lines.extend(child.structure_lines(indent_level + 1))
        return lines

    def add_component(self, component: BuildingComponent) -> None:
        self._children.append(component)

    def remove_component(self, component: BuildingComponent) -> None:
        for position, child in enumerate(self._children):
            if child is component:
                del self._children[position]
                return


class Room(_Composite):
    """A room holding walls, doors, windows and furniture."""

    _marker = "+"

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def description(self) -> str:
        return (
            f"{self.name} (Cost: ${format_number(self.cost())}, "
            f"Weight: {format_number(self.weight())}kg)"
        )


class Floor(_Composite):
    """A numbered floor holding rooms."""

    _marker = "++"

    def __init__(self, number: int) -> None:
        super().__init__()
        self.number = number

    def description(self) -> str:
        return (
            f"Floor {self.number} (Cost: ${format_number(self.cost())}, "
            f"Weight: {format_number(self.weight())}kg, Rooms: {len(self._children)})"
        )


class Building(_Composite):
    """A named building at an address, holding floors."""

    _marker = "+++"

    def __init__(self, name: str, address: str) -> None:
        super().__init__()
        self.name = name
        self.address = address

    def description(self) -> str:
        return (
            f"{self.name} ({self.address}) - Total Cost: ${format_number(self.cost())}, "
            f"Total Weight: {format_number(self.weight())}kg, "
            f"Floors: {len(self._children)}"
        )


def _room(name: str, *components: BuildingComponent) -> Room:
    room = Room(name)
    for component in components:
        room.add_component(component)
    return room


def run_office_demo() -> Building:
    """Build and report on a two-floor office tower; returns the building."""
    print("=== Building Construction - Composite Pattern Demo ===\n")

    office = Building("TechCorp Tower", "123 Business Street")

    first_floor = Floor(1)
    lobby = _room(
        "Main Lobby",
        Wall("Marble", 10.0, 3.0, 200.0, 300.0),
        Wall("Marble", 8.0, 3.0, 200.0, 300.0),
        Door("Glass", 1500.0, 80.0),
        Window("Floor-to-ceiling", 800.0, 120.0),
        Furniture("Reception Desk", 2000.0, 150.0),
        Furniture("Leather Sofa", 1200.0, 80.0),
    )
    conference_room = _room(
        "Conference Room A",
        Wall("Drywall", 6.0, 3.0, 50.0, 80.0),
        Wall("Drywall", 6.0, 3.0, 50.0, 80.0),
        Door("Wood", 600.0, 45.0),
        Window("Double-pane", 400.0, 50.0),
        Furniture("Conference Table", 1500.0, 120.0),
        *(Furniture("Office Chair", 300.0, 25.0) for _ in range(3)),
    )
    first_floor.add_component(lobby)
    first_floor.add_component(conference_room)

    second_floor = Floor(2)
    second_floor.add_component(
        _room(
            "CEO Office",
            Wall("Wood Paneling", 5.0, 3.0, 150.0, 100.0),
            Wall("Wood Paneling", 4.0, 3.0, 150.0, 100.0),
            Door("Mahogany", 1200.0, 60.0),
            Window("Panoramic", 1000.0, 100.0),
            Furniture("Executive Desk", 3000.0, 200.0),
            Furniture("Executive Chair", 800.0, 35.0),
            Furniture("Bookshelf", 600.0, 80.0),
        )
    )
    second_floor.add_component(
        _room(
            "Regular Office",
            Wall("Drywall", 4.0, 3.0, 50.0, 80.0),
            Wall("Drywall", 3.0, 3.0, 50.0, 80.0),
            Door("Wood", 500.0, 40.0),
            Window("Standard", 300.0, 35.0),
            Furniture("Desk", 400.0, 50.0),
            Furniture("Office Chair", 200.0, 20.0),
        )
    )

    office.add_component(first_floor)
    office.add_component(second_floor)

    print("Complete Building Structure:")
    print("============================")
    office.show_structure()

    print("\n=== Cost and Weight Summary ===")
    print(f"Total Building Cost: ${format_number(office.cost())}")
    print(f"Total Building Weight: {format_number(office.weight())}kg\n")

    print("=== Individual Component Details ===")
    print(f"Lobby details: {lobby.description()}")
    print(f"Conference Room details: {conference_room.description()}")
    print(f"First Floor details: {first_floor.description()}")

    print("\n=== Demo Complete ===")
    print("This demonstrates:")
    print("- Leaf components (walls, doors, windows, furniture) stored in Rooms")
    print("- Rooms stored in Floors (middle-men composites)")
    print("- Floors stored in Building (top-level composite)")
    print("- All components treated uniformly through common interface")
    print("- Automatic cost/weight calculation up the hierarchy")
    return office


def run_school_demo() -> Building:
    """Build a one-room school, print its structure and return it."""
    school = Building("high school", "123 street")
    first_floor = Floor(1)
    maths = _room(
        "maths class",
        *(Wall("dry wall", 20, 2, 10, 10) for _ in range(4)),
        Furniture("Chair", 100, 10),
    )
    first_floor.add_component(maths)
    school.add_component(first_floor)
    school.show_structure()
    return school


def main(argv: list[str] | None = None) -> int:
    """Run the school building demonstration."""
    del argv
    run_school_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
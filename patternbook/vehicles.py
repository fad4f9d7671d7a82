"""Vehicles and the factories that build them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum, auto


class VehicleType(Enum):
    """Kinds of vehicle a factory can build."""

    CAR = auto()
    MOTORCYCLE = auto()
    TRUCK = auto()


def _say(text: str) -> str:
    print(text)
    return text


class Vehicle(ABC):
    """Something that can be started, stopped and described."""

    def __init__(self) -> None:
        self.num_tires = 0

    @abstractmethod
    def start(self) -> str:
        """Start the engine; returns the line printed."""

    @abstractmethod
    def stop(self) -> str:
        """Stop the engine; returns the line printed."""

    @abstractmethod
    def display_info(self) -> str:
        """Describe the vehicle; returns the line printed."""


class Car(Vehicle):
    """A car of a given colour and brand."""

    def __init__(self, color: str, brand: str) -> None:
        super().__init__()
        self.color = color
        self.brand = brand
        print(f"Car constructor: Creating a {color} {brand}")

    def start(self) -> str:
        return _say(
            f"Car: Turning key in {self.color} {self.brand}, engine purring to life..."
        )

    def stop(self) -> str:
        return _say(f"Car: {self.brand} engine stopping, pressing brake...")

    def display_info(self) -> str:
        return _say(
            f"This is a {self.color} {self.brand} Car - 4 wheels, "
            "comfortable seating, good for families"
        )


class Motorcycle(Vehicle):
    """A two-wheeler."""

    def start(self) -> str:
        return _say("Motorcycle: Kick starting, engine roaring loudly!")

    def stop(self) -> str:
        return _say("Motorcycle: Pulling brake lever, engine winding down...")

    def display_info(self) -> str:
        return _say(
            "This is a Motorcycle - 2 wheels, fast and agile, great for solo rides "
            f"and has: {self.num_tires} number of tires "
        )


class Truck(Vehicle):
    """A heavy-duty cargo truck."""

    def start(self) -> str:
        return _say("Truck: Diesel engine starting with a deep rumble...")

    def stop(self) -> str:
        return _say("Truck: Air brakes hissing, heavy engine shutting down...")

    def display_info(self) -> str:
        return _say(
            "This is a Truck - Large wheels, heavy duty, built for cargo transport"
        )

    def foo(self) -> str:
        """A truck-only operation."""
        return _say("this is the foo")


class VehicleFactory(ABC):
    """Builds vehicles of one kind."""

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """Build a new vehicle."""


class CarFactory(VehicleFactory):
    """Builds cars, using default colour and brand unless told otherwise."""

    def __init__(self, color: str = "Red", brand: str = "Toyota") -> None:
        self.default_color = color
        self.default_brand = brand
        print(f"CarFactory: Initialized with defaults - {color} {brand}")

    def create_vehicle(self, color: str | None = None, brand: str | None = None) -> Car:
        """Build a car with the defaults, or with both ``color`` and ``brand`` given."""
        if color is None and brand is None:
            print("CarFactory: Creating car with default settings...")
            return Car(self.default_color, self.default_brand)
        if color is None or brand is None:
            raise TypeError("a custom car needs both a color and a brand")
        print("CarFactory: Creating custom car...")
        return Car(color, brand)

    def set_default_color(self, color: str) -> None:
        """Change the colour used for default cars."""
        self.default_color = color
        print(f"CarFactory: Default color changed to {color}")

    def set_default_brand(self, brand: str) -> None:
        """Change the brand used for default cars."""
        self.default_brand = brand
        print(f"CarFactory: Default brand changed to {brand}")


class MotorcycleFactory(VehicleFactory):
    """Builds motorcycles."""

    def create_vehicle(self) -> Vehicle:
        print("MotorcycleFactory: Creating a new Motorcycle...")
        return Motorcycle()

    def create_motorcycle(self) -> Motorcycle:
        """Build a motorcycle, typed as such."""
        return Motorcycle()


class TruckFactory(VehicleFactory):
    """Builds trucks."""

    def create_vehicle(self) -> Vehicle:
        print("TruckFactory: Creating a new Truck...")
        return Truck()

    def create_truck(self) -> Truck:
        """Build a truck, typed as such."""
        return Truck()


def run_factory_demo() -> None:
    """Walk through building cars and other vehicles with several factories."""
    print("=== Vehicle Factory Demo (With Car Properties) ===")
    print()

    toyota_factory = CarFactory("Blue", "Toyota")
    bmw_factory = CarFactory("Black", "BMW")
    motorcycle_factory = MotorcycleFactory()
    truck_factory = TruckFactory()

    print("Client: Creating cars with factory defaults...")
    toyota = toyota_factory.create_vehicle()
    toyota.display_info()
    toyota.start()

    print()
    bmw = bmw_factory.create_vehicle()
    bmw.display_info()
    bmw.start()

    print()
    print("Client: Creating cars with custom specifications...")
    toyota_factory.create_vehicle("Green", "Honda").display_info()
    bmw_factory.create_vehicle("White", "Mercedes").display_info()

    print()
    print("Client: Changing factory defaults...")
    toyota_factory.set_default_color("Silver")
    toyota_factory.set_default_brand("Lexus")
    toyota_factory.create_vehicle().display_info()

    print()
    print("Client: Creating other vehicles...")
    motorcycle_factory.create_vehicle().display_info()
    truck_factory.create_vehicle().display_info()

    print()
    print("=== Demo Complete ===")


def main(argv: list[str] | None = None) -> int:
    """Build a motorcycle and a truck and use their specific operations."""
    del argv
    motorcycle_factory = MotorcycleFactory()
    motorcycle = motorcycle_factory.create_vehicle()
    motorcycle.num_tires = 2
    motorcycle.display_info()

    typed_motorcycle = motorcycle_factory.create_motorcycle()
    typed_motorcycle.display_info()

    truck = TruckFactory().create_truck()
    truck.start()
    truck.foo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
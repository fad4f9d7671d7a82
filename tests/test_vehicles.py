import pytest

from patternbook.vehicles import (
    Car,
    CarFactory,
    Motorcycle,
    MotorcycleFactory,
    Truck,
    TruckFactory,
    VehicleFactory,
    main,
    run_factory_demo,
)


def test_car_constructor_announces_itself(capsys):
    car = Car("Blue", "Toyota")
    assert (car.color, car.brand) == ("Blue", "Toyota")
    assert capsys.readouterr().out == "Car constructor: Creating a Blue Toyota\n"


def test_car_messages_use_color_and_brand(capsys):
    car = Car("Green", "Honda")
    capsys.readouterr()
    assert car.start() == "Car: Turning key in Green Honda, engine purring to life..."
    assert car.stop() == "Car: Honda engine stopping, pressing brake..."
    info = car.display_info()
    assert info.startswith("This is a Green Honda Car - 4 wheels")
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == info


def test_car_factory_defaults():
    factory = CarFactory()
    car = factory.create_vehicle()
    assert (car.color, car.brand) == ("Red", "Toyota")
    assert (factory.default_color, factory.default_brand) == ("Red", "Toyota")


def test_car_factory_custom_car(capsys):
    factory = CarFactory("Black", "BMW")
    capsys.readouterr()
    car = factory.create_vehicle("White", "Mercedes")
    assert (car.color, car.brand) == ("White", "Mercedes")
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "CarFactory: Creating custom car...",
        "Car constructor: Creating a White Mercedes",
    ]


def test_car_factory_needs_both_custom_values():
    factory = CarFactory()
    with pytest.raises(TypeError):
        factory.create_vehicle("White")
    with pytest.raises(TypeError):
        factory.create_vehicle(brand="Mercedes")


def test_changing_defaults_affects_later_cars(capsys):
    factory = CarFactory("Blue", "Toyota")
    factory.set_default_color("Silver")
    factory.set_default_brand("Lexus")
    out = capsys.readouterr().out
    assert "CarFactory: Default color changed to Silver" in out
    assert "CarFactory: Default brand changed to Lexus" in out
    car = factory.create_vehicle()
    assert (car.color, car.brand) == ("Silver", "Lexus")


def test_motorcycle_reports_tire_count(capsys):
    motorcycle = MotorcycleFactory().create_vehicle()
    assert "MotorcycleFactory: Creating a new Motorcycle..." in capsys.readouterr().out
    motorcycle.num_tires = 2
    assert motorcycle.display_info().endswith("has: 2 number of tires ")


def test_create_motorcycle_is_silent(capsys):
    motorcycle = MotorcycleFactory().create_motorcycle()
    assert capsys.readouterr().out == ""
    assert isinstance(motorcycle, Motorcycle)
    assert motorcycle.start() == "Motorcycle: Kick starting, engine roaring loudly!"


def test_truck_factory_and_foo(capsys):
    factory = TruckFactory()
    truck = factory.create_vehicle()
    assert capsys.readouterr().out == "TruckFactory: Creating a new Truck...\n"
    assert isinstance(truck, Truck)
    assert factory.create_truck().foo() == "this is the foo"
    assert truck.stop() == "Truck: Air brakes hissing, heavy engine shutting down..."


def test_vehicle_factory_is_abstract():
    with pytest.raises(TypeError):
        VehicleFactory()


def test_main_runs_motorcycle_and_truck(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "MotorcycleFactory: Creating a new Motorcycle..."
    assert out[1].endswith("has: 2 number of tires ")
    assert out[-2] == "Truck: Diesel engine starting with a deep rumble..."
    assert out[-1] == "this is the foo"


def test_factory_demo_output(capsys):
    run_factory_demo()
    out = capsys.readouterr().out
    assert out.startswith("=== Vehicle Factory Demo (With Car Properties) ===")
    assert "This is a Silver Lexus Car" in out
    assert "This is a White Mercedes Car" in out
    assert out.rstrip().endswith("=== Demo Complete ===")
# patternbook

A set of small object-oriented design pattern examples. Each one is a short,
readable module you can import, and most come with a command that runs a
demonstration.

| Pattern   | Module                          | What it models                                   |
|-----------|---------------------------------|--------------------------------------------------|
| Decorator | `patternbook.pizza_decorator`   | Pizzas with extra cheese and stuffed crust       |
| Decorator | `patternbook.coffee_decorator`  | Black coffee with milk and sugar                 |
| Mediator  | `patternbook.chat`              | Users talking through a chat room                |
| Factory   | `patternbook.vehicles`          | Factories that build cars, motorcycles, trucks   |
| Memento   | `patternbook.complex_memento`   | Saving and restoring a complex number            |
| Memento   | `patternbook.product_memento`   | Backing up a product and its change flags        |
| Composite | `patternbook.building`          | Buildings made of floors, rooms, walls, doors    |
| Composite | `patternbook.pizza_menu`        | Toppings and groups of toppings                  |
| Iterator  | `patternbook.cursor`, `patternbook.linked_queue`, `patternbook.circular`, `patternbook.iterator_demo` | A linked queue and a circular list sharing one cursor type |

## Installing

```
pip install .
```

Python 3.10 or newer is needed; there are no third-party dependencies.

## Running the demonstrations

```
patternbook-pizza
patternbook-coffee
patternbook-chat
patternbook-vehicles
patternbook-complex-memento
patternbook-building
patternbook-iterators
patternbook-pizza-menu
```

Each command prints a walkthrough of its pattern to standard output. They take
no options.

## Using the modules

Decorators wrap one another, and each layer adds to the price and the name:

```python
from patternbook.pizza_decorator import BasePizza, ExtraCheese, StuffedCrust

pizza = ExtraCheese(StuffedCrust(BasePizza("Supreme")))
print(pizza.name())   # Supreme Pizza with Stuffed Crust with Extra Cheese
print(pizza.price())
```

A chat room passes messages between its members:

```python
from patternbook.chat import ChatRoom, ChatUser

room = ChatRoom()
alice = ChatUser(room, "Alice")
bob = ChatUser(room, "Bob")
room.add_user(alice)
room.add_user(bob)
alice.send_message("Hello everyone!")
room.remove_user(bob)
```

A composite building adds up cost and weight from the leaves upward:

```python
from patternbook.building import Building, Floor, Room, Wall, Furniture

school = Building("high school", "123 street")
floor = Floor(1)
classroom = Room("maths class")
classroom.add_component(Wall("dry wall", 20, 2, 10, 10))
classroom.add_component(Furniture("Chair", 100, 10))
floor.add_component(classroom)
school.add_component(floor)

print(school.cost(), school.weight())
school.show_structure(0)
```

A memento captures an object's state so it can be put back later:

```python
from patternbook.product_memento import Product

product = Product("Widget", "A small widget", 10.0)
backup = product.make_backup()
product.cost = 12.5
product.display()
product.restore(backup)
```

The circular list keeps its last node linked back to the first, so it can be
rotated in place:

```python
from patternbook.circular import CircularList

items = CircularList([10, 20, 30, 40])
items.rotate_left(1)
print(items.front(), items.back())   # 20 10
```

## What it does not do

`patternbook.product_memento` is a library module only: it has no
demonstration command. Nothing in the package saves state to disk; mementos
live only in memory for as long as the program runs.

## Running the tests

```
pip install ".[test]"
pytest
```
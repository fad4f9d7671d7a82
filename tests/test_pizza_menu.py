import pytest

from patternbook.pizza_menu import PizzaComponent, Topping, ToppingGroup


def test_topping_price_is_its_own():
    assert Topping("Pepperoni", 2.50).price() == 2.50


def test_topping_display_format(capsys):
    text = Topping("Pepperoni", 2.50).display()
    assert text == "  Pepperoni: $2.5"
    assert capsys.readouterr().out == "  Pepperoni: $2.5\n"


def test_topping_name_kept():
    assert Topping("Onions", 1.0).name == "Onions"


def test_empty_group_costs_nothing():
    assert ToppingGroup("Nothing").price() == 0.0


def test_group_price_is_sum_of_members():
    a = Topping("Mushrooms", 1.50)
    b = Topping("Onions", 1.00)
    group = ToppingGroup("Veg")
    group.add(a)
    group.add(b)
    assert group.price() == pytest.approx(a.price() + b.price())
    assert group.components == (a, b)


def test_nested_groups_roll_up():
    inner = ToppingGroup("Inner")
    salami = Topping("Salami", 2.75)
    inner.add(salami)
    outer = ToppingGroup("Outer")
    outer.add(inner)
    feta = Topping("Feta Cheese", 2.25)
    outer.add(feta)
    assert outer.price() == pytest.approx(inner.price() + feta.price())


def test_remove_member_by_identity():
    a = Topping("Olives", 1.50)
    b = Topping("Olives", 1.50)
    group = ToppingGroup("Olive bar")
    group.add(a)
    group.add(b)
    group.remove(b)
    assert group.components == (a,)
    assert group.components[0] is a


def test_remove_non_member_leaves_group_unchanged():
    a = Topping("Olives", 1.50)
    group = ToppingGroup("Olive bar")
    group.add(a)
    group.remove(Topping("Olives", 1.50))
    assert group.components == (a,)


def test_topping_refuses_add_and_remove(capsys):
    topping = Topping("Pepperoni", 2.50)
    topping.add(Topping("Salami", 2.75))
    topping.remove(Topping("Salami", 2.75))
    assert capsys.readouterr().out.splitlines() == [
        "Cannot add to individual topping",
        "Cannot remove from individual topping",
    ]


def test_group_display_lists_header_then_members(capsys):
    group = ToppingGroup("Vegetarian Special")
    members = [Topping("Mushrooms", 1.50), Topping("Onions", 1.00)]
    for member in members:
        group.add(member)
    text = group.display()
    lines = text.splitlines()
    assert lines[0].startswith("Vegetarian Special (Total: $")
    assert lines[1:] == [f"  {m.name}: ${m.price():g}" for m in members]
    assert capsys.readouterr().out == text + "\n"


def test_component_base_is_abstract():
    with pytest.raises(TypeError):
        PizzaComponent("x", 1.0)


def test_main_prints_menu(capsys):
    from patternbook.pizza_menu import main

    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "=== Romeo's Pizza Menu ==="
    assert "Meat Lovers Special: $8.25" in lines
    assert "Price Comparison:" in lines
"""Products that record which fields changed and can be backed up and restored."""

from __future__ import annotations

from dataclasses import dataclass

from patternbook.pizza_decorator import format_number


class ChangeState:
    """Which fields of a product have been changed."""

    def __init__(self) -> None:
        self.name_changed = False
        self.description_changed = False
        self.cost_changed = False

    def copy(self) -> ChangeState:
        """An independent copy of these flags."""
        other = ChangeState()
        other.name_changed = self.name_changed
        other.description_changed = self.description_changed
        other.cost_changed = self.cost_changed
        return other

    def set_name_changed(self) -> None:
        """Record that the name changed."""
        self.name_changed = True

    def set_description_changed(self) -> None:
        """Record that the description changed."""
        self.description_changed = True

    def set_cost_changed(self) -> None:
        """Record that the cost changed."""
        self.cost_changed = True

    def _changed_labels(self) -> list[str]:
        return [
            label
            for label, flag in (
                ("name", self.name_changed),
                ("description", self.description_changed),
                ("cost", self.cost_changed),
            )
            if flag
        ]

    def summary(self) -> str:
        """A line listing the changed fields, or saying nothing changed."""
        changed = self._changed_labels()
        if not changed:
            return "Nothing has changed"
        return "The following has changed: " + "".join(f"{label} " for label in changed)

    def show_state(self) -> None:
        """Print which fields changed, or that nothing changed."""
        changed = self._changed_labels()
        if changed:
            listed = "".join(f"{label} " for label in changed)
            print(f"The following has changed: {listed}")
        else:
            print("Nothing has changed")


@dataclass(frozen=True)
class ProductBackup:
    """A saved product; the change state is shared, not copied."""

    name: str
    description: str
    cost: float
    state: ChangeState


class ProductStateMemory:
    """Holds one product backup."""

    def __init__(self) -> None:
        self.memento: ProductBackup | None = None


class Product:
    """A named product with a description and a cost."""

    def __init__(self, name: str, description: str, cost: float) -> None:
        self.name = name
        self._description = description
        self._cost = cost
        self.state = ChangeState()

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = value
        self.state.set_description_changed()

    @property
    def cost(self) -> float:
        return self._cost

    @cost.setter
    def cost(self, value: float) -> None:
        self._cost = value
        self.state.set_cost_changed()

    def display(self) -> None:
        """Print the product and what has changed."""
        print(f"\n{self.name}: {self._description}  R{format_number(self._cost)}")
        self.state.show_state()

    def make_backup(self) -> ProductBackup:
        """Save the current fields together with the change state."""
        return ProductBackup(self.name, self._description, self._cost, self.state)

    def restore(self, backup: ProductBackup) -> None:
        """Bring back the fields of a backup."""
        self.name = backup.name
        self._description = backup.description
        self._cost = backup.cost
        self.state = backup.state
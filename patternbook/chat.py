"""A chat room that relays messages between its users."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Mediator(ABC):
    """Routes events from one participant to the others."""

    @abstractmethod
    def notify(self, sender: User, event: str, message: str = "") -> None:
        """Handle an event raised by ``sender``."""


class User(ABC):
    """A participant that talks only through its mediator."""

    def __init__(self, mediator: Mediator, name: str) -> None:
        self.mediator = mediator
        self.name = name

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Send a message to the room."""

    @abstractmethod
    def receive_message(self, sender: str, message: str) -> None:
        """Receive a message sent by the user called ``sender``."""

    @abstractmethod
    def user_joined(self, user_name: str) -> None:
        """Be told that another user joined."""

    @abstractmethod
    def user_left(self, user_name: str) -> None:
        """Be told that another user left."""


class ChatRoom(Mediator):
    """Keeps the member list and broadcasts messages to members."""

    def __init__(self) -> None:
        self._users: list[User] = []

    @property
    def users(self) -> tuple[User, ...]:
        """Current members, in joining order."""
        return tuple(self._users)

    def add_user(self, user: User) -> None:
        """Add a member and tell the others about it."""
        self._users.append(user)
        print(f"[SYSTEM] {user.name} joined the chat room.")
        for existing in self._users:
            if existing is not user:
                existing.user_joined(user.name)

    def remove_user(self, user: User) -> None:
        """Remove a member, if present, and tell the rest."""
        for position, member in enumerate(self._users):
            if member is user:
                del self._users[position]
                break
        else:
            return
        print(f"[SYSTEM] {user.name} left the chat room.")
        for remaining in self._users:
            remaining.user_left(user.name)

    def notify(self, sender: User, event: str, message: str = "") -> None:
        """Broadcast ``message`` events to everyone except the sender."""
        if event != "message":
            return
        for member in self._users:
            if member is not sender:
                member.receive_message(sender.name, message)


class ChatUser(User):
    """A user that reports what it sees on standard output."""

    def send_message(self, message: str) -> None:
        print(f"{self.name} sends: {message}")
        self.mediator.notify(self, "message", message)

    def receive_message(self, sender: str, message: str) -> None:
        print(f"{self.name} received from {sender}: {message}")

    def user_joined(self, user_name: str) -> None:
        print(f"{self.name} notices: {user_name} joined the room")

    def user_left(self, user_name: str) -> None:
        print(f"{self.name} notices: {user_name} left the room")


def main(argv: list[str] | None = None) -> int:
    """Run the chat room demonstration."""
    del argv
    print("=== Mediator Pattern Demo - Chat Room ===")
    print()

    room = ChatRoom()
    alice = ChatUser(room, "Alice")
    bob = ChatUser(room, "Bob")
    charlie = ChatUser(room, "Charlie")

    print()
    print("--- Adding users to chat room ---")
    room.add_user(alice)
    room.add_user(bob)

    print()
    print("--- Users sending messages ---")
    alice.send_message("Hello everyone!")
    bob.send_message("Hi Alice, how are you?")

    print()
    print("--- Another user joins ---")
    room.add_user(charlie)

    print()
    print("--- More messages ---")
    charlie.send_message("Hey guys, what's up?")
    alice.send_message("Welcome Charlie!")

    print()
    print("--- User leaves ---")
    room.remove_user(bob)

    print()
    print("--- Final messages ---")
    alice.send_message("Goodbye Bob!")
    charlie.send_message("See you later!")

    print()
    print("=== Demo completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
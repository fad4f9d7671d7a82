"""A walk through the linked queue, the circular list and the cursors that traverse them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any

from patternbook.circular import CircularList
from patternbook.cursor import NodeCursor
from patternbook.linked_queue import Queue


def _banner(title: str, width: int = 50) -> None:
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def _walk(begin: NodeCursor, end: NodeCursor) -> Iterator[Any]:
    """Yield values from ``begin`` up to, but not including, ``end``."""
    cursor = begin.copy()
    while cursor != end:
        yield cursor.value()
        cursor.step()


def _spaced(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def _show(label: str, clist: CircularList) -> None:
    print(label, end="")
    clist.display()
    print()


def demo_queue() -> None:
    """Show queue operations and cursor movement over a queue."""
    _banner("TESTING QUEUE FUNCTIONALITY")
    queue = Queue()

    print("\n1. Basic Queue Operations:")
    for value in range(10, 60, 10):
        queue.enqueue(value)
        print(f"Enqueued: {value}")

    print(f"\nQueue size: {len(queue)}")
    print(f"Front element: {queue.front()}")

    print("\n2. Enhanced Iterator Features:")
    it1 = queue.begin()
    it2 = queue.begin()
    it2.advance(2)
    print(f"Iterator 1 points to: {it1.value()}")
    print(f"Iterator 2 points to: {it2.value()}")
    print(f"Distance from it1 to it2: {it1.distance(it2)}")
    print(f"Iterator 1 before Iterator 2: {'Yes' if it1.before(it2) else 'No'}")

    print("\n3. Iterator Advancement:")
    adv_it = queue.begin()
    print(f"Original position: {adv_it.value()}")
    adv_it.advance(3)
    print(f"After advancing 3 positions: {adv_it.value()}")

    print("\n4. Backward Iteration (Note: Inefficient for Queue):")
    back_it = queue.begin()
    back_it.advance(2)
    print(f"Starting at position: {back_it.value()}")
    back_it.step_back()
    print(f"After one step back: {back_it.value()}")

    print("\n5. FIFO Demonstration:")
    print("Dequeuing in FIFO order: ", end="")
    drained = []
    while not queue.is_empty():
        drained.append(queue.dequeue())
    print(_spaced(drained))


def demo_circular_list() -> None:
    """Show insertion, rotation, search, removal and reversal on a circular list."""
    _banner("TESTING CIRCULAR LIST FUNCTIONALITY")
    clist = CircularList()

    print("\n1. Basic Circular List Operations:")
    for value in range(10, 60, 10):
        clist.insert_back(value)
        print(f"Inserted at back: {value}")

    print(f"\nList size: {len(clist)}")
    print(f"Front element: {clist.front()}")
    print(f"Back element: {clist.back()}")

    print("\n2. Circular Nature Demonstration:")
    _show("Normal display: ", clist)
    print("Circular display (2 rotations): ", end="")
    clist.display_circular(2)
    print()

    print("\n3. Insertion at Different Positions:")
    clist.insert_front(5)
    _show("After inserting 5 at front: ", clist)
    clist.insert_at(3, 25)
    _show("After inserting 25 at index 3: ", clist)

    print("\n4. Rotation Operations:")
    _show("Before rotation: ", clist)
    clist.rotate_left(2)
    _show("After rotating left 2 positions: ", clist)
    clist.rotate_right(1)
    _show("After rotating right 1 position: ", clist)

    print("\n5. Search and Removal:")
    print(f"Looking for value 30: {'Found' if 30 in clist else 'Not Found'}")
    print(f"Index of value 25: {clist.find_index(25)}")
    clist.remove_value(25)
    _show("After removing value 25: ", clist)

    print("\n6. List Reversal:")
    _show("Before reversal: ", clist)
    clist.reverse()
    _show("After reversal: ", clist)


def demo_iterator_comparison() -> None:
    """Drive the same cursor type over a queue and a circular list."""
    _banner("COMPARING ITERATORS: QUEUE vs CIRCULAR LIST")
    queue = Queue()
    clist = CircularList()
    for value in range(5, 25, 5):
        queue.enqueue(value)
        clist.insert_back(value)

    print("\n1. Same Iterator Class, Different Containers:")
    print(f"Queue iteration: {_spaced(_walk(queue.begin(), queue.end()))}")
    # The end cursor of a circular list sits on its first node, so this range is empty.
    print(f"Circular List iteration: {_spaced(_walk(clist.begin(), clist.end()))}")

    print("\n2. Iterator Behavior Differences:")
    q_it = queue.begin()
    q_it.advance(2)
    print(f"Queue iterator advanced 2 positions: {q_it.value()}")
    c_it = clist.begin()
    c_it.advance(2)
    print(f"Circular list iterator advanced 2 positions: {c_it.value()}")

    print("\n3. Advancing Beyond Container End:")
    q_end = queue.begin()
    q_end.advance(10)
    print(
        "Queue iterator advanced beyond end - valid: "
        f"{'Yes' if q_end.is_valid() else 'No'}"
    )
    c_end = clist.begin()
    c_end.advance(10)
    shown = c_end.value() if c_end.is_valid() else "Invalid"
    print(f"Circular list iterator advanced 10 positions: {shown}")


def demo_advanced_iterator_features() -> None:
    """Show distance, reset and range iteration over a list of characters."""
    _banner("TESTING ADVANCED ITERATOR FEATURES")
    char_list = CircularList("ABCDE")

    print("\n1. Character Circular List:")
    _show("List contents: ", char_list)

    print("\n2. Iterator Distance Calculations:")
    it1 = char_list.begin()
    it2 = char_list.begin()
    it2.advance(3)
    print(f"Iterator 1 at: {it1.value()}")
    print(f"Iterator 2 at: {it2.value()}")
    print(f"Distance from it1 to it2: {it1.distance(it2)}")

    print("\n3. Iterator Reset Functionality:")
    reset_it = char_list.begin()
    reset_it.advance(3)
    print(f"Iterator before reset: {reset_it.value()}")
    reset_it.reset_to_begin()
    print(f"Iterator after reset: {reset_it.value()}")

    print("\n4. Range-based For Loop:")
    print(f"Using range-based for: {_spaced(_walk(char_list.begin(), char_list.end()))}")


def demo_special_circular_iterator() -> None:
    """Loop twice round a small circular list, restarting at the end cursor."""
    _banner("TESTING SPECIAL CIRCULAR ITERATOR")
    small_list = CircularList([1, 2, 3])

    print("\n1. Small Circular List:")
    _show("List contents: ", small_list)

    print("\n2. Infinite-like Iteration (showing circular nature):")
    print("Showing 2 complete rotations: ", end="")
    cursor = small_list.begin()
    seen = []
    for _ in range(len(small_list) * 2):
        if cursor == small_list.end():
            cursor = small_list.begin()
        seen.append(cursor.value())
        cursor.step()
    print(_spaced(seen))


def demonstrate_pattern_benefits() -> None:
    """Print a summary of what the iterator approach buys."""
    _banner("DEMONSTRATING ITERATOR PATTERN BENEFITS", 60)

    print("\n1. UNIFORM INTERFACE:")
    print("   - Same iterator class works with Queue and CircularList")
    print("   - Client code doesn't need to know container internals")
    print("   - Easy to switch between container types")

    print("\n2. ENCAPSULATION:")
    print("   - Internal structure (nodes, pointers) hidden from client")
    print("   - Only iterator methods exposed for traversal")
    print("   - Container can change implementation without affecting client")

    print("\n3. FLEXIBILITY:")
    print("   - Multiple iterators can traverse same container")
    print("   - Forward and backward iteration supported")
    print("   - Range-based for loops work automatically")

    print("\n4. EXTENSIBILITY:")
    print("   - Easy to add new iterator types (like CircularIterator)")
    print("   - Additional functionality (distance, reset, advance)")
    print("   - Container-specific optimizations possible")


def main(argv: list[str] | None = None) -> int:
    """Run every demonstration; returns 1 if one of them fails."""
    del argv
    print("*" * 70)
    print("ITERATOR DESIGN PATTERN COMPREHENSIVE DEMONSTRATION")
    print("*" * 70)
    try:
        demo_queue()
        demo_circular_list()
        demo_iterator_comparison()
        demo_advanced_iterator_features()
        demo_special_circular_iterator()
        demonstrate_pattern_benefits()
        print("\n" + "*" * 70)
        print("DEMONSTRATION COMPLETED SUCCESSFULLY!")
        print("*" * 70)
    except Exception as error:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"\nError during demonstration: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
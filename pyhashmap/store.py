from dataclasses import dataclass
from typing import Iterator, TypeGuard


@dataclass
class Entry:
    key: int
    value: int
    next: "Entry | None" = None


@dataclass(frozen=True)
class Empty:
    pass


EMPTY = Empty()

Slot = Entry | Empty


@dataclass
class Table:
    slots: list[Slot]
    capacity: int
    # slots holding at least one entry, not the number of entries
    occupied: int


class AllocationError(Exception):
    pass


def new_table(capacity: int) -> Table:
    if capacity <= 0:
        raise ValueError("capacity must be positive", capacity)

    try:
        slots: list[Slot] = [EMPTY] * capacity
    except MemoryError as e:
        raise AllocationError("cannot allocate slots", capacity) from e

    return Table(slots=slots, capacity=capacity, occupied=0)


def is_empty(slot: Slot) -> TypeGuard[Empty]:
    return isinstance(slot, Empty)


def is_entry(slot: Slot) -> TypeGuard[Entry]:
    return isinstance(slot, Entry)


def as_entry(slot: Slot) -> Entry:
    if not is_entry(slot):
        raise Exception("not entry", slot)
    return slot


def slot_index(key: int, capacity: int) -> int:
    # floored modulo: negative keys still land in [0, capacity)
    return key % capacity


def chain_at(table: Table, index: int) -> Iterator[Entry]:
    slot = table.slots[index]
    if is_empty(slot):
        return

    entry: Entry | None = as_entry(slot)
    while entry is not None:
        yield entry
        entry = entry.next


def iter_entries(table: Table) -> Iterator[tuple[int, Entry]]:
    for index in range(table.capacity):
        for entry in chain_at(table, index):
            yield index, entry


def append_to_chain(head: Entry, key: int, value: int) -> Entry:
    tail = head
    while tail.next is not None:
        tail = tail.next

    tail.next = Entry(key, value)
    return tail.next


def free_chain(head: Entry) -> int:
    # read the successor before detaching, so each node is released once
    released = 0
    entry: Entry | None = head
    while entry is not None:
        successor = entry.next
        entry.next = None
        released += 1
        entry = successor
    return released


def count_entries(table: Table) -> int:
    return sum(1 for _ in iter_entries(table))

from dataclasses import dataclass

from .debug import print_growth
from .store import (
    Entry,
    Table,
    append_to_chain,
    as_entry,
    chain_at,
    free_chain,
    is_empty,
    is_entry,
    iter_entries,
    new_table,
    slot_index,
)


INITIAL_CAPACITY = 10
LOAD_FACTOR = 0.75
GROWTH_FACTOR = 2


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


@dataclass(frozen=True)
class Found:
    value: int


@dataclass(frozen=True)
class NotFound:
    pass


LookupResult = Found | NotFound


class FreedTableError(Exception):
    pass


def init_table(capacity: int = INITIAL_CAPACITY) -> Table:
    return new_table(capacity)


def check_live(table: Table):
    if table.capacity == 0:
        raise FreedTableError("table used after free", table)


def should_grow(table: Table) -> bool:
    return table.occupied / table.capacity >= LOAD_FACTOR


def table_insert(table: Table, key: int, value: int) -> Table:
    # growth returns a new table and frees the one passed in
    check_live(table)

    if should_grow(table):
        if _debug_trace_growth:
            print_growth(
                table.capacity, table.capacity * GROWTH_FACTOR, table.occupied
            )
        table = grow_table(table, GROWTH_FACTOR)

    index = slot_index(key, table.capacity)
    slot = table.slots[index]
    if is_empty(slot):
        table.slots[index] = Entry(key, value)
        table.occupied += 1
    else:
        # no key check: duplicates append, the first one inserted wins
        append_to_chain(as_entry(slot), key, value)

    return table


def grow_table(table: Table, growth_factor: int) -> Table:
    new = new_table(table.capacity * growth_factor)

    for _, entry in iter_entries(table):
        new = table_insert(new, entry.key, entry.value)

    free_table(table)
    return new


def table_lookup(table: Table, key: int) -> LookupResult:
    check_live(table)

    index = slot_index(key, table.capacity)
    for entry in chain_at(table, index):
        if entry.key == key:
            return Found(entry.value)
    return NotFound()


def table_remove(table: Table, key: int):
    raise NotImplementedError("remove is not supported", key)


def free_table(table: Table):
    for slot in table.slots:
        if is_entry(slot):
            free_chain(slot)

    table.slots = []
    table.capacity = 0
    table.occupied = 0

from .shared import YELLOW, printf, printf_color
from .store import Table, count_entries, iter_entries


def print_table(table: Table):
    for index, entry in iter_entries(table):
        printf("#{0:d}\tKey: {1:d}, Value: {2:d}\n", index, entry.key, entry.value)


def print_growth(old_capacity: int, new_capacity: int, occupied: int):
    printf_color(
        YELLOW,
        "Expanding map from {0:d} to {1:d} at current size of {2:d}",
        old_capacity,
        new_capacity,
        occupied,
    )
    printf("\n")


def print_stats(table: Table):
    entries = count_entries(table)
    load = table.occupied / table.capacity if table.capacity else 0.0
    printf("== table ==\n")
    printf("{0:<10s} {1:d}\n", "capacity", table.capacity)
    printf("{0:<10s} {1:d}\n", "occupied", table.occupied)
    printf("{0:<10s} {1:d}\n", "entries", entries)
    printf("{0:<10s} {1:.2f}\n", "load", load)

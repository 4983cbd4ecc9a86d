from dataclasses import dataclass

from .debug import print_stats, print_table
from .shared import printf, printf_err
from .store import Table
from .table import (
    INITIAL_CAPACITY,
    Found,
    NotFound,
    init_table,
    set_debug_trace_growth,
    table_insert,
    table_lookup,
)


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class CommandError:
    line: int
    message: str


CommandResult = CommandOk | CommandError


table: Table


def init_shell(capacity: int = INITIAL_CAPACITY):
    global table
    table = init_table(capacity)


def execute(source: str) -> CommandResult:
    # stops at the first failing line
    for line, text in enumerate(source.splitlines(), start=1):
        try:
            error = execute_line(text)
        except ValueError:
            error = "expected integer arguments"

        if error is not None:
            printf_err("[line {0:d}] Error: {1:s}\n", line, error)
            return CommandError(line, error)

    return CommandOk()


def execute_line(text: str) -> str | None:
    global table

    match text.split("#", 1)[0].split():
        case []:
            pass

        case ["put", key, value]:
            table = table_insert(table, int(key), int(value))

        case ["get", key]:
            match table_lookup(table, int(key)):
                case Found(value):
                    printf("{0:d}\n", value)
                case NotFound():
                    printf("nil\n")

        case ["print"]:
            print_table(table)

        case ["stats"]:
            print_stats(table)

        case ["trace", ("on" | "off") as flag]:
            set_debug_trace_growth(flag == "on")

        case [("put" | "get" | "print" | "stats" | "trace") as command, *_]:
            return f"wrong arguments for '{command}'"

        case [command, *_]:
            return f"unknown command '{command}'"

    return None

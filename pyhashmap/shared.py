import sys
from typing import Any


YELLOW = "\033[33m"
RESET = "\033[0m"


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def printf_color(color: str, format: str, *args: Any):
    printf("{0:s}{1:s}{2:s}", color, format.format(*args), RESET)

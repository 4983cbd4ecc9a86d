import sys

from .shared import printf, printf_err
from .shell import CommandError, execute, init_shell
from .table import set_debug_trace_growth


def repl():
    while True:
        printf("> ")
        try:
            inpt = input()
        except EOFError:
            printf("\n")
            return
        execute(inpt)


def run_file(filepath: str):
    try:
        with open(filepath, encoding="utf-8") as fp:
            source = fp.read()
    except OSError as e:
        printf_err("Could not open file \"{0:s}\": {1:s}\n", filepath, e.strerror or "")
        sys.exit(74)
    except UnicodeDecodeError as e:
        printf_err("Could not read file \"{0:s}\": {1:s}\n", filepath, e.reason)
        sys.exit(74)

    result = execute(source)
    if isinstance(result, CommandError):
        sys.exit(65)


def main():
    init_shell()
    set_debug_trace_growth(True)

    if len(sys.argv) == 1:
        repl()
    elif len(sys.argv) == 2:
        run_file(sys.argv[1])
    else:
        printf("Usage: phm [path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()

import sys

from .shared import printf
from .table import Table


LETTERS = "ABCDEFGHIJKLMNOPQRS"


def print_values(table: Table):
    for key in table.keys():
        printf("{0:s}\n", table.get_or_insert_default(key))


def run_demo() -> Table:
    table = Table()

    for key in range(1, 7):
        table.place(key, LETTERS[key - 1])

    for key in range(7, 20):
        table.get_or_insert_entry(key).value = LETTERS[key - 1]

    print_values(table)

    for key in range(1, 7):
        table.remove(key)

    print_values(table)

    table.clear()

    print_values(table)
    return table


def main():
    if len(sys.argv) != 1:
        printf("Usage: chaintable-demo\n")
        sys.exit(64)

    run_demo()

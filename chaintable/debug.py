from .shared import printf
from .table import Table


def dump_table(table: Table, name: str):
    printf("== {0:s} ==\n", name)
    printf(
        "capacity {0:d}, count {1:d}, max {2:d}\n",
        table.capacity,
        table.count(),
        table.max_count,
    )

    for index in range(table.capacity):
        dump_bucket(table, index)


def dump_bucket(table: Table, index: int):
    printf("{0:04d} ", index)

    entry = table.buckets[index]
    if entry is None:
        printf("(empty)\n")
        return

    links = []
    while entry is not None:
        links.append("{0!r}={1!r}".format(entry.key, entry.value))
        entry = entry.next
    printf("{0:s}\n", " -> ".join(links))


def bucket_lengths(table: Table) -> list[int]:
    lengths = []
    for head in table.buckets:
        length = 0
        entry = head
        while entry is not None:
            length += 1
            entry = entry.next
        lengths.append(length)
    return lengths

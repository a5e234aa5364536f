"""Bubble sort and selection sort over integer sequences."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEMO_VALUES: tuple[int, ...] = (9, 1, 10, 6, 32, 11, 0, 34, 22, 18)

__all__ = ["DEMO_VALUES", "bubble_sort", "selection_sort", "format_values", "main"]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list built by repeatedly swapping adjacent pairs."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list built by moving each minimum to the front."""
    items = list(values)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def format_values(values: Iterable[int]) -> str:
    """Render values as the sort programs print them: each followed by a space."""
    return "".join(f"{value} " for value in values)


_ALGORITHMS = {
    "bubble": bubble_sort,
    "selection": selection_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort integers given on the command line (or a demo list) and print them."""
    parser = argparse.ArgumentParser(description="Sort integers and print them.")
    parser.add_argument(
        "--algorithm",
        choices=sorted(_ALGORITHMS),
        default="bubble",
        help="sorting algorithm to use",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    values = args.numbers if args.numbers else list(DEMO_VALUES)
    result = _ALGORITHMS[args.algorithm](values)
    print(format_values(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
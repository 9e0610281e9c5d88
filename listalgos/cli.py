"""Command line front end for the list and string algorithms."""

from __future__ import annotations

import argparse
import sys

from .linkedlist import (
    find_middle,
    format_list,
    from_values,
    has_cycle,
    make_cyclic,
    merge_sorted,
    remove_element,
    reverse_list,
)
from .palindrome import is_palindrome_deque, is_palindrome_stack
from .subsequence import is_subsequence_queue, is_subsequence_two_pointers

_DEFAULT_VALUES = [1, 2, 3, 4, 5]


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="listalgos", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("reverse", help="reverse a list")
    p.add_argument("values", nargs="*", type=int, default=_DEFAULT_VALUES)

    p = sub.add_parser("middle", help="print the middle value of a list")
    p.add_argument("values", nargs="*", type=int, default=_DEFAULT_VALUES)

    p = sub.add_parser("remove", help="remove every occurrence of a value")
    p.add_argument("value", type=int)
    p.add_argument("values", nargs="*", type=int, default=_DEFAULT_VALUES)

    p = sub.add_parser("merge", help="merge two sorted lists")
    p.add_argument("--first", nargs="*", type=int, default=[3, 6, 8])
    p.add_argument("--second", nargs="*", type=int, default=[4, 7, 9, 11])

    sub.add_parser(
        "cycle",
        help="read N and N values from stdin, close them into a ring and check for a cycle",
    )

    p = sub.add_parser("palindrome", help="check whether a text is a palindrome")
    p.add_argument("text", nargs="?", default="madam")
    p.add_argument("--method", choices=["deque", "stack"], default="deque")

    p = sub.add_parser("subsequence", help="check whether NEEDLE is a subsequence of HAYSTACK")
    p.add_argument("needle", nargs="?", default="abd")
    p.add_argument("haystack", nargs="?", default="uabqd")
    p.add_argument("--method", choices=["queue", "pointers"], default="queue")
    return parser


def _read_cycle_input(parser: argparse.ArgumentParser) -> list[int]:
    tokens = sys.stdin.read().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError:
        parser.error("cycle input must be whole numbers")
    if not numbers:
        parser.error("cycle input needs a count")
    count, values = numbers[0], numbers[1:]
    if count <= 0 or len(values) < count:
        parser.error("cycle input needs a positive count followed by that many values")
    return values[:count]


def main(argv: list[str] | None = None) -> int:
    """Run one algorithm as chosen on the command line and print its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "reverse":
        print(format_list(reverse_list(from_values(args.values))))
    elif args.command == "middle":
        if not args.values:
            parser.error("middle needs at least one value")
        print(find_middle(from_values(args.values)).data)
    elif args.command == "remove":
        print(format_list(remove_element(from_values(args.values), args.value)))
    elif args.command == "merge":
        print(format_list(merge_sorted(from_values(args.first), from_values(args.second))))
    elif args.command == "cycle":
        values = _read_cycle_input(parser)
        print(1 if has_cycle(make_cyclic(values)) else -1)
    elif args.command == "palindrome":
        check = is_palindrome_deque if args.method == "deque" else is_palindrome_stack
        print(_yes_no(check(args.text)))
    else:
        check = is_subsequence_queue if args.method == "queue" else is_subsequence_two_pointers
        print(_yes_no(check(args.needle, args.haystack)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
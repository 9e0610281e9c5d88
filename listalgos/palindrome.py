"""Palindrome checks built on a double-ended queue and on a stack."""

from collections import deque

_DEQUE_CAPACITY = 100001


def is_palindrome_deque(text: str) -> bool:
    """Compare characters taken from both ends of a bounded deque.

    Characters beyond the deque's capacity are not taken into account.
    """
    chars = deque(text[:_DEQUE_CAPACITY])
    while len(chars) > 1:
        if chars.popleft() != chars.pop():
            return False
    return True


def is_palindrome_stack(text: str) -> bool:
    """Compare the text with the characters popped back off a stack."""
    stack = list(text)
    return all(ch == stack.pop() for ch in text)
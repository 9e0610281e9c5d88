"""Subsequence checks: one with a queue, one with two cursors."""

from collections import deque


def is_subsequence_queue(needle: str, haystack: str) -> bool:
    """Queue up ``needle`` and drop its front whenever ``haystack`` matches it."""
    if len(needle) > len(haystack):
        return False
    pending = deque(needle)
    for ch in haystack:
        if pending and pending[0] == ch:
            pending.popleft()
    return not pending


def is_subsequence_two_pointers(needle: str, haystack: str) -> bool:
    """Walk both strings once, advancing in ``needle`` on each match."""
    matched = 0
    for ch in haystack:
        if matched == len(needle):
            break
        if needle[matched] == ch:
            matched += 1
    return matched == len(needle)
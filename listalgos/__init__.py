"""Linked-list, palindrome and subsequence algorithms with a small command line."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "palindrome", "subsequence", "cli"]
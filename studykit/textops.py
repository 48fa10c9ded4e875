"""Small string exercises working on characters rather than bytes."""

from __future__ import annotations


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards.

    For a palindrome every character is printed with its UTF-8 byte offset.
    """
    if text != text[::-1]:
        return False
    offset = 0
    for ch in text:
        print(offset, ch)
        offset += len(ch.encode("utf-8", "surrogatepass"))
    return True
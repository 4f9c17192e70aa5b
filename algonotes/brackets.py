"""Bracket balance checking with a stack."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}


def is_balanced(text: str) -> bool:
    """Check that brackets in ``text`` nest properly.

    Other characters are ignored, and so is a closing bracket met while no
    bracket is open.
    """
    stack: list[str] = []
    for char in text:
        if char in "({[":
            stack.append(char)
        elif stack and char in _PAIRS:
            if stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack
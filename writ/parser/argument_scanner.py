# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentScanner`, the token source used by the decoding engine.

The scanner walks an immutable copy of the argument vector with an index
cursor. Tokens can be pushed back in front of the cursor (used to re-scan the
rest of a short-option cluster such as `-vvv`), and the next token can be taken
out of the stream (used when an option consumes the following argument), so the
caller's list is never modified.
"""
from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence


class ArgumentScanner:
    """Index cursor over an argument vector with a pushback queue."""

    def __init__(self, args: Sequence[str]) -> None:
        self._args: tuple[str, ...] = tuple(args)
        self._index: int = 0
        self._pending: deque[str] = deque()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.take()
        if token is None:
            raise StopIteration
        return token

    def take(self) -> str | None:
        """Remove and return the next token, or None at end of input."""
        if self._pending:
            return self._pending.popleft()
        if self._index >= len(self._args):
            return None
        token = self._args[self._index]
        self._index += 1
        return token

    def push(self, token: str) -> None:
        """Put a token back so it is returned next."""
        self._pending.appendleft(token)

    def remaining(self) -> list[str]:
        """Return the tokens not yet scanned, without consuming them."""
        return list(self._pending) + list(self._args[self._index :])

    def __repr__(self) -> str:
        return f"ArgumentScanner(remaining={self.remaining()!r})"

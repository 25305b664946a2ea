# markov_textgen/core/protocols.py
"""
Protocol interfaces for the seams of the Markov model.

The model only needs two things from its callers: a random source to draw
successor indices from, and a callback that consumes generated tokens.
Depending on Protocols keeps both swappable in tests (seeded generators,
scripted index sequences, collecting callbacks).
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, runtime_checkable
from typing_extensions import TypedDict


Token = Hashable


@runtime_checkable
class RandomSource(Protocol):
    """Anything with randrange(stop) -> int in [0, stop). random.Random fits."""

    def randrange(self, stop: int) -> int:
        ...


class TokenCallback(Protocol):
    """Called once per generated token, in generation order."""

    def __call__(self, token: Any) -> Any:
        ...


class ChainSummary(TypedDict):
    """
    Shape counts for a built transition table.

    order:                 context length k
    contexts:              number of distinct k-token states (leaf lists)
    transitions:           non-sentinel successor entries (one per input token)
    terminal_transitions:  sentinel successor entries (one per build)
    """
    order: int
    contexts: int
    transitions: int
    terminal_transitions: int

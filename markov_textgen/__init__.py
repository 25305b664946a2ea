"""
markov_textgen

Character-level (or any-token) Markov text generation:
 - MarkovModel builds a k-th order transition table and walks it at random
 - NONWORD is the sentinel that pads the start state and ends every walk
 - context / utils hold input preparation, logging and config for the CLI
"""

from .core import (
    NONWORD,
    MarkovModel,
    MarkovError,
    ModelNotInitializedError,
    CorruptChainError,
)

__all__ = [
    "NONWORD",
    "MarkovModel",
    "MarkovError",
    "ModelNotInitializedError",
    "CorruptChainError",
]

__version__ = "0.1.0"

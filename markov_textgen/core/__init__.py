"""
markov_textgen.core

The model itself:
 - MarkovModel: init / each / get_chain over a nested transition table
 - NONWORD: start padding and end-of-sequence sentinel
 - error types raised on misuse or a tampered chain
"""

from .markov_model import MarkovModel, NONWORD
from .errors import MarkovError, ModelNotInitializedError, CorruptChainError
from .protocols import RandomSource, TokenCallback, ChainSummary

__all__ = [
    "MarkovModel",
    "NONWORD",
    "MarkovError",
    "ModelNotInitializedError",
    "CorruptChainError",
    "RandomSource",
    "TokenCallback",
    "ChainSummary",
]

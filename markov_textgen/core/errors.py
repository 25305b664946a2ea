# errors.py - exception types raised by the Markov model


class MarkovError(Exception):
    """Base class for every error raised by markov_textgen."""


class ModelNotInitializedError(MarkovError, RuntimeError):
    """Generation or inspection was requested before init() built a chain."""

    def __init__(self, operation: str = "each"):
        super().__init__(f"model not initialized: call init() before {operation}()")
        self.operation = operation


class CorruptChainError(MarkovError, LookupError):
    """
    Sampling reached a state with no recorded successors.
    init() never builds such a table, so this only shows up when the chain
    returned by get_chain() was edited from outside.
    """

    def __init__(self, state):
        super().__init__(f"no successors recorded for state {list(state)!r}")
        self.state = tuple(state)

# markov_model.py
# k-th order Markov model over arbitrary token sequences.
# The chain is a k-level nested dict keyed by the tokens of a state, ending in
# a list of observed successors. Duplicates are kept on purpose: sampling a
# uniform index from that list picks each successor in proportion to how
# often it followed the state.

from __future__ import annotations

import random
from typing import Any, Dict, Iterable, List, Optional

from markov_textgen.core.errors import CorruptChainError, ModelNotInitializedError
from markov_textgen.core.protocols import ChainSummary, RandomSource, Token, TokenCallback
from markov_textgen.utils.logger_utils import Log

log = Log.get(__name__)

Chain = Dict[Any, Any]  # nested k levels deep, leaves are List[Token]


class _NonWord:
    """Type of the NONWORD sentinel. Only one instance exists."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NONWORD"

    def __reduce__(self):
        # pickles by reference so a loaded chain still matches `is NONWORD`
        return "NONWORD"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


# pads the initial state and marks end of sequence; never equal to a caller token
NONWORD = _NonWord()


class _StopGeneration(Exception):
    """Raised from generate()'s own callback once the token limit is reached."""


def _coerce_order(order: Any) -> int:
    """int(order), with anything non-numeric or below 1 clamped to 1."""
    try:
        k = int(order)
    except ValueError:
        # numeric strings such as "2.9" truncate like the float would
        try:
            k = int(float(order))
        except (ValueError, OverflowError):
            return 1
    except (TypeError, OverflowError):
        return 1
    return k if k > 0 else 1


class MarkovModel:
    """
    Bounded-order Markov model with a sentinel terminal symbol.

    Public surface:
      - init(sequence, order): build the transition table
      - each(callback): random walk over the table, one callback per token
      - get_chain(): the raw nested table, for inspection or serialization

    The context window used while building or walking lives in locals of
    those calls, so two walks over the same model never share state.
    """

    def __init__(self, sequence: Optional[Iterable[Token]] = None, order: Any = 1,
                 rng: Optional[RandomSource] = None) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._order: Optional[int] = None
        self._chain: Optional[Chain] = None
        if sequence is not None:
            self.init(sequence, order)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def init(self, sequence: Iterable[Token], order: Any = 1) -> None:
        """
        Build a fresh table from `sequence`, replacing any previous one.
        Strings are consumed character by character. An empty sequence is
        legal and leaves a single sentinel -> sentinel transition.
        """
        if sequence is None:
            raise TypeError("sequence must not be None")

        k = _coerce_order(order)
        chain: Chain = {}
        state = self._initial_state(k)
        count = 0
        for tok in sequence:
            self._push(chain, state, tok)
            self._slide(state, tok)
            count += 1
        self._push(chain, state, NONWORD)

        self._order = k
        self._chain = chain
        log.debug(f"built order-{k} chain from {count} tokens")

    @staticmethod
    def _initial_state(k: int) -> List[Token]:
        return [NONWORD] * k

    @staticmethod
    def _slide(state: List[Token], tok: Token) -> None:
        """Drop the oldest token and append `tok`, in place."""
        del state[0]
        state.append(tok)

    @staticmethod
    def _push(chain: Chain, state: List[Token], tok: Token) -> None:
        node = chain
        for key in state[:-1]:
            node = node.setdefault(key, {})
        node.setdefault(state[-1], []).append(tok)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def each(self, callback: TokenCallback) -> None:
        """
        Walk the table from the all-sentinel state, calling `callback` with
        every sampled token until the sentinel is drawn. The sentinel itself
        is never passed on. Exceptions from `callback` propagate as-is.
        There is no length cap: an input whose tail loops back into itself
        can produce arbitrarily long output.
        """
        chain = self._require_chain("each")
        state = self._initial_state(self._order)
        while True:
            tok = self._pick(chain, state)
            if tok is NONWORD:
                return
            callback(tok)
            self._slide(state, tok)

    def _pick(self, chain: Chain, state: List[Token]) -> Token:
        node: Any = chain
        for key in state:
            if not isinstance(node, dict) or key not in node:
                raise CorruptChainError(state)
            node = node[key]
        if not isinstance(node, list) or not node:
            raise CorruptChainError(state)
        return node[self._rng.randrange(len(node))]

    def generate(self, limit: Optional[int] = None) -> List[Token]:
        """
        Collect one walk into a list. With `limit`, stop after that many
        tokens even if the sentinel has not been drawn yet.
        """
        self._require_chain("generate")
        out: List[Token] = []
        if limit is not None and limit <= 0:
            return out

        def collect(tok: Token) -> None:
            out.append(tok)
            if limit is not None and len(out) >= limit:
                raise _StopGeneration

        try:
            self.each(collect)
        except _StopGeneration:
            log.debug(f"generation cut at {limit} tokens")
        return out

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def get_chain(self) -> Optional[Chain]:
        """The live transition table (not a copy), or None before init()."""
        return self._chain

    export_model = get_chain

    @property
    def order(self) -> Optional[int]:
        return self._order

    def summary(self) -> ChainSummary:
        chain = self._require_chain("summary")
        contexts = transitions = terminal = 0
        for leaf in self._leaves(chain, self._order):
            contexts += 1
            for tok in leaf:
                if tok is NONWORD:
                    terminal += 1
                else:
                    transitions += 1
        return ChainSummary(order=self._order, contexts=contexts,
                            transitions=transitions, terminal_transitions=terminal)

    @classmethod
    def _leaves(cls, node: Any, depth: int) -> Iterable[List[Token]]:
        if depth == 0:
            yield node
            return
        for child in node.values():
            yield from cls._leaves(child, depth - 1)

    def _require_chain(self, operation: str) -> Chain:
        if self._chain is None:
            raise ModelNotInitializedError(operation)
        return self._chain

# fsacheck/core/automaton.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple

from fsacheck.core.errors import (
    DuplicateState,
    DuplicateSymbol,
    DuplicateTransition,
    InitialAlreadySet,
    UnknownState,
    UnknownSymbol,
)
from fsacheck.interfaces.types import StateID, SymbolID, TransitionOutcome

logger = logging.getLogger(__name__)


class Automaton:
    """
    Registry owning the canonical description of one finite-state automaton:
    states, alphabet, initial and final states, and the transition table.

    Runtime Invariants:
    - Each state and each symbol is registered at most once.
    - State indices are dense (``0..size-1``), assigned on insertion, never reused.
    - The initial state is set at most once.
    - Every recorded transition references registered states and a registered symbol.
    - ``table[i][j]`` holds the symbol of the edge ``i -> j`` or None.
    - An exact (source, symbol, target) edge is accepted once, even after its
      table cell has been overwritten by another symbol.
    """

    def __init__(self) -> None:
        self._states: List[StateID] = []
        self._index_of: Dict[StateID, int] = {}
        self._alphabet: List[SymbolID] = []
        self._symbols: Set[SymbolID] = set()
        self._initial: Optional[StateID] = None
        self._finals: List[StateID] = []
        self._table: List[List[Optional[SymbolID]]] = []
        self._linked: List[bool] = []
        self._recorded: Set[Tuple[int, SymbolID, int]] = set()
        self._transition_count = 0

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_state(self, state: StateID) -> int:
        """
        Register a new state at the next free index.

        :param state: Identifier of the state.
        :return: The index assigned to the state.
        :raises DuplicateState: If the state is already registered.
        """
        if state in self._index_of:
            raise DuplicateState(state)

        index = len(self._states)
        self._index_of[state] = index
        self._states.append(state)

        # Grow the table by one column and one row.
        for row in self._table:
            row.append(None)
        self._table.append([None] * (index + 1))
        self._linked.append(False)

        logger.debug("Registered state %r at index %d", state, index)
        return index

    def add_symbol(self, symbol: SymbolID) -> None:
        """
        Register a new alphabet symbol.

        :raises DuplicateSymbol: If the symbol is already in the alphabet.
        """
        if symbol in self._symbols:
            raise DuplicateSymbol(symbol)
        self._symbols.add(symbol)
        self._alphabet.append(symbol)
        logger.debug("Registered symbol %r", symbol)

    def set_initial(self, state: StateID) -> None:
        """
        Set the initial state. Can only be done once.

        :raises UnknownState: If the state is not registered.
        :raises InitialAlreadySet: If an initial state was set before.
        """
        self._require_state(state)
        if self._initial is not None:
            raise InitialAlreadySet()
        self._initial = state
        logger.debug("Initial state set to %r", state)

    def add_final(self, state: StateID) -> None:
        """
        Mark a state as accepting. Repeats are kept, not rejected.

        :raises UnknownState: If the state is not registered.
        """
        self._require_state(state)
        self._finals.append(state)
        logger.debug("Registered final state %r", state)

    def add_transition(self, source: StateID, symbol: SymbolID, target: StateID) -> TransitionOutcome:
        """
        Record the edge ``source --symbol--> target``.

        The edge is recorded even when it makes the automaton nondeterministic;
        the caller decides what to do with the returned flags. A different
        symbol already stored for the same ordered pair is overwritten.

        :param source: State the edge leaves.
        :param symbol: Alphabet symbol labelling the edge.
        :param target: State the edge enters.
        :return: Indices of both endpoints plus the nondeterminism and
            connectivity flags for this edge.
        :raises UnknownState: If either endpoint is not registered.
        :raises UnknownSymbol: If the symbol is not in the alphabet.
        :raises DuplicateTransition: If this exact edge already exists.
        """
        src = self._require_state(source)
        dst = self._require_state(target)
        if symbol not in self._symbols:
            raise UnknownSymbol(symbol)

        row = self._table[src]
        if (src, symbol, dst) in self._recorded:
            raise DuplicateTransition()

        nondeterministic = any(cell == symbol for col, cell in enumerate(row) if col != dst)

        first = self._transition_count == 0
        linked = first or self._linked[src] or self._linked[dst]
        if linked:
            self._linked[src] = self._linked[dst] = True

        if row[dst] is not None:
            logger.debug("Overwriting edge %r -> %r (was %r, now %r)", source, target, row[dst], symbol)
        row[dst] = symbol
        self._recorded.add((src, symbol, dst))
        self._transition_count += 1

        logger.debug("Recorded transition %s>%s>%s", source, symbol, target)
        return TransitionOutcome(src, dst, nondeterministic, linked)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def index_of(self, state: StateID) -> int:
        """
        Return the dense index of a registered state.

        :raises UnknownState: If the state is not registered.
        """
        return self._require_state(state)

    @property
    def size(self) -> int:
        """Number of registered states."""
        return len(self._states)

    @property
    def transition_count(self) -> int:
        return self._transition_count

    @property
    def initial_state(self) -> Optional[StateID]:
        return self._initial

    @property
    def states(self) -> Tuple[StateID, ...]:
        return tuple(self._states)

    @property
    def alphabet(self) -> Tuple[SymbolID, ...]:
        return tuple(self._alphabet)

    @property
    def final_states(self) -> Tuple[StateID, ...]:
        return tuple(self._finals)

    def is_final(self, state: StateID) -> bool:
        return state in self._finals

    @property
    def table(self) -> Tuple[Tuple[Optional[SymbolID], ...], ...]:
        """Snapshot of the transition table, indexed ``[source][target]``."""
        return tuple(tuple(row) for row in self._table)

    def transitions_from(self, state: StateID) -> List[Tuple[SymbolID, StateID]]:
        """
        List the outgoing edges of a state as ``(symbol, target)`` pairs, in
        target index order.
        """
        row = self._table[self._require_state(state)]
        return [(symbol, self._states[col]) for col, symbol in enumerate(row) if symbol is not None]

    @property
    def complete_transition_count(self) -> int:
        """Number of (state, symbol) pairs a complete automaton defines."""
        return len(self._states) * len(self._alphabet)

    def _require_state(self, state: StateID) -> int:
        index = self._index_of.get(state)
        if index is None:
            raise UnknownState(state)
        return index

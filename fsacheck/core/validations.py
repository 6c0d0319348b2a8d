# fsacheck/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from fsacheck.core.automaton import Automaton
from fsacheck.core.errors import DisjointStates, EmptyRequiredGroup, FSAError, MalformedInput
from fsacheck.interfaces.types import Declaration, Report, StateID, ValidationResult
from fsacheck.persistence.serializer import split_fields
from fsacheck.runtime.graph import unreachable

logger = logging.getLogger(__name__)

PHASES = ("states", "alpha", "init.st", "fin.st", "trans")

COMPLETE = "FSA is complete"
INCOMPLETE = "FSA is incomplete"

NO_ACCEPTING_STATE = "W1: Accepting state is not defined"
UNREACHABLE_STATES = "W2: Some states are not reachable from the initial state"
NONDETERMINISTIC = "W3: FSA is nondeterministic"


class Validator:
    """
    Drives one validation run: ingests the five declaration groups into an
    :class:`Automaton` in fixed order, then analyses the result.

    A validator is single-use. The first fatal error aborts the run and the
    warnings collected up to that point are dropped.
    """

    def __init__(self, automaton: Optional[Automaton] = None) -> None:
        """
        :param automaton: Registry to populate. A fresh one is created if omitted.
        """
        self._automaton = automaton if automaton is not None else Automaton()
        self._results: List[ValidationResult] = []
        self._phases: Dict[str, Callable[[Sequence[str]], None]] = {
            "states": self._ingest_states,
            "alpha": self._ingest_alphabet,
            "init.st": self._ingest_initial,
            "fin.st": self._ingest_finals,
            "trans": self._ingest_transitions,
        }

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    @property
    def warnings(self) -> List[str]:
        """Warnings accumulated so far, in detection order."""
        return [result.message for result in self._results]

    def run(self, declarations: Iterable[Declaration]) -> Report:
        """
        Validate and return the report, turning a fatal error into an error report.

        :param declarations: Ordered declaration groups, one per phase.
        """
        try:
            return self.validate(declarations)
        except FSAError as e:
            logger.error("Validation aborted: %s", e.report_message.replace("\n", " "))
            self._results = []
            return Report(error=e.report_message)

    def validate(self, declarations: Iterable[Declaration]) -> Report:
        """
        Ingest all declaration groups, then analyse the automaton.

        :raises FSAError: On the first fatal error.
        """
        self.ingest(declarations)
        return self.analyse()

    def ingest(self, declarations: Iterable[Declaration]) -> None:
        """
        Feed exactly one declaration per phase, in phase order.

        :raises MalformedInput: If a group is missing, out of order or extra.
        :raises FSAError: If the registry rejects a declaration.
        """
        source = iter(declarations)
        for phase in PHASES:
            declaration = next(source, None)
            if declaration is None:
                logger.debug("Input ended before phase %r", phase)
                raise MalformedInput()
            if declaration.label != phase:
                logger.debug("Expected phase %r, got %r", phase, declaration.label)
                raise MalformedInput()
            logger.debug("Ingesting phase %r with %d token(s)", phase, len(declaration.tokens))
            self._phases[phase](declaration.tokens)

        if next(source, None) is not None:
            logger.debug("Unexpected declaration after phase %r", PHASES[-1])
            raise MalformedInput()

    def analyse(self) -> Report:
        """
        Run the post-construction checks and assemble the success report.
        Warnings are sorted by text; duplicates are kept.
        """
        missing = _DefaultValidationRules.unreachable_states(self._automaton)
        if missing:
            self._warn(UNREACHABLE_STATES, states=missing)

        verdict = _DefaultValidationRules.completeness(self._automaton)
        logger.info("%s (%d of %d transitions)", verdict, self._automaton.transition_count,
                    self._automaton.complete_transition_count)
        return Report(verdict=verdict, warnings=tuple(sorted(self.warnings)))

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _ingest_states(self, tokens: Sequence[str]) -> None:
        if not tokens:
            raise EmptyRequiredGroup("states")
        for state in tokens:
            self._automaton.add_state(state)

    def _ingest_alphabet(self, tokens: Sequence[str]) -> None:
        if not tokens:
            raise EmptyRequiredGroup("alpha")
        for symbol in tokens:
            self._automaton.add_symbol(symbol)

    def _ingest_initial(self, tokens: Sequence[str]) -> None:
        if not tokens:
            raise EmptyRequiredGroup("init.st")
        if len(tokens) > 1:
            raise MalformedInput()
        self._automaton.set_initial(tokens[0])

    def _ingest_finals(self, tokens: Sequence[str]) -> None:
        if not tokens:
            self._warn(NO_ACCEPTING_STATE)
            return
        for state in tokens:
            self._automaton.add_final(state)

    def _ingest_transitions(self, tokens: Sequence[str]) -> None:
        if not tokens:
            raise MalformedInput()
        for token in tokens:
            parts = split_fields(token, ">")
            if len(parts) != 3:
                raise MalformedInput()
            source, symbol, target = parts

            outcome = self._automaton.add_transition(source, symbol, target)
            if not outcome.linked:
                raise DisjointStates()
            if outcome.nondeterministic:
                self._warn(NONDETERMINISTIC, transition=token)

    def _warn(self, message: str, **context) -> None:
        logger.warning(message)
        self._results.append(ValidationResult("WARNING", message, context))


class _DefaultValidationRules:
    """
    Built-in whole-automaton checks, run once after ingestion.
    """

    @staticmethod
    def unreachable_states(automaton: Automaton) -> List[StateID]:
        """
        Names of the states a breadth-first traversal from the initial state
        never visits.
        """
        if automaton.initial_state is None:
            raise EmptyRequiredGroup("init.st")
        states = automaton.states
        start = automaton.index_of(automaton.initial_state)
        return [states[index] for index in unreachable(automaton.table, start)]

    @staticmethod
    def completeness(automaton: Automaton) -> str:
        """Compare the transition count with ``|states| * |alphabet|``."""
        if automaton.transition_count == automaton.complete_transition_count:
            return COMPLETE
        return INCOMPLETE

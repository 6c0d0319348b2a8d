# fsacheck/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Optional


class FSAError(Exception):
    """
    Base exception class for fatal errors raised while building or validating
    an automaton. Any instance aborts the run and becomes its whole report.
    """

    code: Optional[str] = None

    @property
    def report_message(self) -> str:
        """
        The text written to the report for this error. Coded errors are
        preceded by an ``Error:`` line.
        """
        if self.code is None:
            return str(self)
        return f"Error:\n{self.code}: {self}"


class UnknownState(FSAError):
    """
    Raised when a state is referenced before being declared in ``states``.
    """

    code = "E1"

    def __init__(self, state: str) -> None:
        super().__init__(f"A state '{state}' is not in the set of states")
        self.state = state


class DisjointStates(FSAError):
    """
    Raised when a transition joins two states that no earlier transition touched.
    """

    code = "E2"

    def __init__(self, message: str = "Some states are disjoint") -> None:
        super().__init__(message)


class UnknownSymbol(FSAError):
    """
    Raised when a transition uses a symbol missing from the alphabet.
    """

    code = "E3"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"A transition '{symbol}' is not represented in the alphabet")
        self.symbol = symbol


class DuplicateState(FSAError):
    def __init__(self, state: str) -> None:
        super().__init__(f"State {state} already exists")
        self.state = state


class DuplicateSymbol(FSAError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"Alpha {symbol} already exists")
        self.symbol = symbol


class InitialAlreadySet(FSAError):
    def __init__(self, message: str = "Initial state is already defined") -> None:
        super().__init__(message)


class DuplicateTransition(FSAError):
    def __init__(self, message: str = "Such transition already exists") -> None:
        super().__init__(message)


class MalformedInput(FSAError):
    """
    Raised when a declaration group cannot be decomposed structurally.
    """

    code = "E5"

    def __init__(self, message: str = "Input file is malformed") -> None:
        super().__init__(message)


class EmptyRequiredGroup(MalformedInput):
    """
    Raised when ``states``, ``alpha`` or ``init.st`` is declared with no tokens.
    Only the initial-state group keeps a code (``E4``).
    """

    _MESSAGES = {
        "states": (None, "States array is empty"),
        "alpha": (None, "Alphabet array is empty"),
        "init.st": ("E4", "Initial state is not defined"),
    }

    def __init__(self, group: str) -> None:
        code, message = self._MESSAGES.get(group, (MalformedInput.code, "Input file is malformed"))
        super().__init__(message)
        self.group = group
        self.code = code

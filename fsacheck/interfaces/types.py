# fsacheck/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, NamedTuple, Optional, Tuple

StateID = str
SymbolID = str


class Declaration(NamedTuple):
    """One declaration group, e.g. ``states=[a,b]`` as ``("states", ("a", "b"))``."""

    label: str
    tokens: Tuple[str, ...]


class TransitionOutcome(NamedTuple):
    """
    What the registry learned while recording one transition.

    ``linked`` is False when neither endpoint was connected to any earlier
    transition (and this is not the first transition of the run).
    """

    source: int
    target: int
    nondeterministic: bool
    linked: bool


class ValidationResult(NamedTuple):
    severity: str
    message: str
    context: Dict[str, Any]


class Report(NamedTuple):
    """
    Terminal outcome of one validation run: either ``error`` is set, or
    ``verdict`` is set together with the sorted ``warnings``.
    """

    verdict: Optional[str] = None
    warnings: Tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

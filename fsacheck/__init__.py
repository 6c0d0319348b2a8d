"""fsacheck: well-formedness validator for deterministic finite-state automata

Builds an automaton from five declaration groups (states, alphabet, initial
state, final states, transitions) and reports whether it is complete, along
with any warnings, or the first fatal error.

Responsibilities:
    - Registry of states, alphabet and transitions with checks on insertion
    - Nondeterminism and disjoint-component detection during ingestion
    - Reachability from the initial state
    - Completeness verdict and sorted warning report
"""

from fsacheck.core.automaton import Automaton
from fsacheck.core.errors import FSAError
from fsacheck.core.validations import Validator
from fsacheck.interfaces.types import Report
from fsacheck.runtime.executor import Executor, RunConfig

__version__ = "0.1.0"

__all__ = ["Automaton", "Executor", "FSAError", "Report", "RunConfig", "Validator"]

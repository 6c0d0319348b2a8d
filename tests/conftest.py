# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def automaton():
    """An empty registry."""
    from fsacheck.core.automaton import Automaton

    return Automaton()


@pytest.fixture
def abc_automaton(automaton):
    """Registry with states a, b, c and alphabet 0, 1, initial state a."""
    for state in ("a", "b", "c"):
        automaton.add_state(state)
    for symbol in ("0", "1"):
        automaton.add_symbol(symbol)
    automaton.set_initial("a")
    return automaton


@pytest.fixture
def validator():
    """A fresh single-use Validator."""
    from fsacheck.core.validations import Validator

    return Validator()


@pytest.fixture
def declarations():
    """Returns a factory building the five declaration groups."""
    from fsacheck.interfaces.types import Declaration

    def _factory(states=("a",), alpha=("0",), init=("a",), fin=("a",), trans=("a>0>a",)):
        return [
            Declaration("states", tuple(states)),
            Declaration("alpha", tuple(alpha)),
            Declaration("init.st", tuple(init)),
            Declaration("fin.st", tuple(fin)),
            Declaration("trans", tuple(trans)),
        ]

    return _factory


@pytest.fixture
def fsa_text():
    """Returns a factory rendering the five declaration lines as file text."""

    def _factory(states="a", alpha="0", init="a", fin="a", trans="a>0>a"):
        return (
            f"states=[{states}]\n"
            f"alpha=[{alpha}]\n"
            f"init.st=[{init}]\n"
            f"fin.st=[{fin}]\n"
            f"trans=[{trans}]\n"
        )

    return _factory

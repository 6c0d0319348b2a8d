# tests/unit/test_automaton.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from fsacheck.core.errors import (
    DuplicateState,
    DuplicateSymbol,
    DuplicateTransition,
    InitialAlreadySet,
    UnknownState,
    UnknownSymbol,
)


def test_states_get_dense_indices(automaton):
    assert automaton.add_state("a") == 0
    assert automaton.add_state("b") == 1
    assert automaton.index_of("b") == 1
    assert automaton.size == 2
    assert automaton.states == ("a", "b")


def test_duplicate_state_rejected(automaton):
    automaton.add_state("a")
    with pytest.raises(DuplicateState):
        automaton.add_state("a")
    assert automaton.size == 1


def test_duplicate_symbol_rejected(automaton):
    automaton.add_symbol("0")
    with pytest.raises(DuplicateSymbol):
        automaton.add_symbol("0")
    assert automaton.alphabet == ("0",)


def test_index_of_unknown_state(automaton):
    with pytest.raises(UnknownState):
        automaton.index_of("nope")


def test_set_initial(automaton):
    automaton.add_state("a")
    automaton.add_state("b")
    automaton.set_initial("a")
    assert automaton.initial_state == "a"
    with pytest.raises(InitialAlreadySet):
        automaton.set_initial("b")
    assert automaton.initial_state == "a"


def test_set_initial_unknown_state(automaton):
    with pytest.raises(UnknownState):
        automaton.set_initial("a")
    assert automaton.initial_state is None


def test_final_states_keep_duplicates(automaton):
    automaton.add_state("a")
    automaton.add_final("a")
    automaton.add_final("a")
    assert automaton.final_states == ("a", "a")
    assert automaton.is_final("a")


def test_final_state_must_be_registered(automaton):
    with pytest.raises(UnknownState):
        automaton.add_final("a")


def test_table_grows_with_states(automaton):
    assert automaton.table == ()
    automaton.add_state("a")
    automaton.add_state("b")
    assert automaton.table == ((None, None), (None, None))


def test_add_transition_records_edge(abc_automaton):
    outcome = abc_automaton.add_transition("a", "0", "b")
    assert outcome.source == 0
    assert outcome.target == 1
    assert not outcome.nondeterministic
    assert outcome.linked
    assert abc_automaton.table[0][1] == "0"
    assert abc_automaton.transition_count == 1
    assert abc_automaton.transitions_from("a") == [("0", "b")]


@pytest.mark.parametrize("source, target", [("x", "a"), ("a", "x")])
def test_transition_unknown_endpoint(abc_automaton, source, target):
    with pytest.raises(UnknownState):
        abc_automaton.add_transition(source, "0", target)
    assert abc_automaton.transition_count == 0


def test_transition_unknown_symbol(abc_automaton):
    with pytest.raises(UnknownSymbol):
        abc_automaton.add_transition("a", "2", "b")


def test_final_state_name_does_not_register_state(abc_automaton):
    abc_automaton.add_final("c")
    with pytest.raises(UnknownState):
        abc_automaton.add_transition("a", "0", "d")


def test_duplicate_transition(abc_automaton):
    abc_automaton.add_transition("a", "0", "b")
    with pytest.raises(DuplicateTransition):
        abc_automaton.add_transition("a", "0", "b")
    assert abc_automaton.transition_count == 1


def test_same_symbol_to_other_target_is_nondeterministic(abc_automaton):
    abc_automaton.add_transition("a", "0", "b")
    outcome = abc_automaton.add_transition("a", "0", "c")
    assert outcome.nondeterministic
    assert abc_automaton.table[0][2] == "0"
    assert abc_automaton.transition_count == 2


def test_different_symbols_are_deterministic(abc_automaton):
    abc_automaton.add_transition("a", "0", "b")
    outcome = abc_automaton.add_transition("a", "1", "c")
    assert not outcome.nondeterministic


def test_second_symbol_on_same_pair_overwrites_cell(abc_automaton):
    abc_automaton.add_transition("a", "0", "b")
    abc_automaton.add_transition("a", "1", "b")
    assert abc_automaton.table[0][1] == "1"
    assert abc_automaton.transition_count == 2


def test_first_transition_is_always_linked(abc_automaton):
    assert abc_automaton.add_transition("b", "0", "c").linked


def test_unconnected_edge_is_not_linked(automaton):
    for state in ("a", "b", "c", "d"):
        automaton.add_state(state)
    automaton.add_symbol("0")
    automaton.add_transition("a", "0", "b")
    assert not automaton.add_transition("c", "0", "d").linked
    # Once an endpoint touches the linked set the edge counts as connected.
    assert automaton.add_transition("b", "0", "c").linked
    assert automaton.add_transition("d", "0", "c").linked


def test_complete_transition_count(abc_automaton):
    assert abc_automaton.complete_transition_count == 6


def test_table_is_a_snapshot(abc_automaton):
    table = abc_automaton.table
    abc_automaton.add_transition("a", "0", "b")
    assert table[0][1] is None


def test_duplicate_transition_after_overwrite(abc_automaton):
    abc_automaton.add_transition("a", "0", "b")
    abc_automaton.add_transition("a", "1", "b")
    with pytest.raises(DuplicateTransition):
        abc_automaton.add_transition("a", "0", "b")
    assert abc_automaton.table[0][1] == "1"
    assert abc_automaton.transition_count == 2

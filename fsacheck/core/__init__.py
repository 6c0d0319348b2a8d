"""
Core package: the automaton registry, its error hierarchy and the validation engine.
"""

"""The built-in predicates: empty, equal, size and terminal."""

from __future__ import annotations

from typing import Sequence

from .query import Predicate, QueryError, QueryValue, State, TermValue, register_predicate
from .subtree import ordered_string

__all__ = [
    "EmptyPredicate",
    "EqualPredicate",
    "SizePredicate",
    "TerminalPredicate",
    "register_defaults",
]


def _no_eval(name: str) -> QueryError:
    return QueryError(f"predicate '{name}' has type bool, not int")


def _no_check(name: str) -> QueryError:
    return QueryError(f"predicate '{name}' has type int, not bool")


class EmptyPredicate(Predicate):
    """True when the state's place graph has no nodes."""

    name = "empty"

    def check(self, state: State, params: Sequence[QueryValue]) -> bool:
        return state.root.size() == 0

    def eval(self, state: State, params: Sequence[QueryValue]) -> int:
        raise _no_eval(self.name)


class EqualPredicate(Predicate):
    """True when the state's place graph equals the given term."""

    name = "equal"

    def check(self, state: State, params: Sequence[QueryValue]) -> bool:
        if len(params) != 1:
            raise QueryError(
                f"predicate '{self.name}' expects type term -> bool, got _ -> bool"
            )
        (param,) = params
        if not isinstance(param, TermValue):
            raise QueryError(
                f"predicate '{self.name}' expects type term -> bool, got ??? -> bool"
            )
        return ordered_string(state.root) == ordered_string(param.term)

    def eval(self, state: State, params: Sequence[QueryValue]) -> int:
        raise _no_eval(self.name)


class SizePredicate(Predicate):
    """The number of nodes in the state's place graph."""

    name = "size"

    def check(self, state: State, params: Sequence[QueryValue]) -> bool:
        raise _no_check(self.name)

    def eval(self, state: State, params: Sequence[QueryValue]) -> int:
        return state.root.size()


class TerminalPredicate(Predicate):
    """Whether the state has no successors."""

    name = "terminal"

    def check(self, state: State, params: Sequence[QueryValue]) -> bool:
        return state.terminal

    def eval(self, state: State, params: Sequence[QueryValue]) -> int:
        return int(state.terminal)


def register_defaults() -> None:
    """Register the built-in predicates under their names."""
    for predicate in (
        EmptyPredicate(),
        EqualPredicate(),
        SizePredicate(),
        TerminalPredicate(),
    ):
        register_predicate(predicate.name, predicate)
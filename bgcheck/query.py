"""Property queries evaluated against states of the reaction graph."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence

from .report import warning
from .terms import Term

__all__ = [
    "QueryError",
    "Operator",
    "State",
    "Predicate",
    "register_predicate",
    "get_predicate",
    "Query",
    "BinaryQuery",
    "NotQuery",
    "PredicateQuery",
    "QueryValue",
    "NumValue",
    "TermValue",
    "IdValue",
    "ScopeQuery",
]


class QueryError(Exception):
    """Raised when a property is ill-typed or refers to something unknown."""


class Operator(enum.Enum):
    """Binary operators of the property language, valued by their symbol."""

    NEQ = "!="
    EQ = "=="
    LEQ = "<="
    GEQ = ">="
    GT = ">"
    LT = "<"
    AND = "&&"
    OR = "||"


_COMPARISONS: dict[Operator, Callable[[int, int], bool]] = {
    Operator.NEQ: operator.ne,
    Operator.EQ: operator.eq,
    Operator.LEQ: operator.le,
    Operator.GEQ: operator.ge,
    Operator.GT: operator.gt,
    Operator.LT: operator.lt,
}


@dataclass(eq=False)
class State:
    """A state of the reaction graph: its place graph and its neighbours."""

    root: Term
    terminal: bool = False
    parent: Optional["State"] = None
    successors: list[tuple["State", Any]] = field(default_factory=list)


class Predicate:
    """A named test on a state; subclasses give a bool and/or int meaning."""

    name = "predicate"

    def check(self, state: State, params: Sequence["QueryValue"]) -> bool:
        raise QueryError(f"predicate '{self.name}' cannot be used as a bool")

    def eval(self, state: State, params: Sequence["QueryValue"]) -> int:
        raise QueryError(f"predicate '{self.name}' cannot be used as an int")


_predicates: dict[str, Predicate] = {}


def register_predicate(name: str, predicate: Predicate) -> None:
    """Make ``predicate`` available under ``name``, replacing any earlier one."""
    _predicates[name] = predicate


def get_predicate(name: str) -> Optional[Predicate]:
    """The predicate registered under ``name``, or None."""
    return _predicates.get(name)


class Query:
    """Base of all property terms."""

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return "<uninitialised query>"

    def check(self, state: State) -> bool:
        raise QueryError(f"query '{self.to_string()}' cannot be checked")

    def eval(self, state: State) -> int:
        raise QueryError(
            f"Query object '{self.to_string()}' is of the wrong type: "
            "expected 'int', got 'bool'"
        )


class BinaryQuery(Query):
    """A comparison of two ints, or a conjunction or disjunction."""

    def __init__(self, lhs: Query, op: Operator, rhs: Query) -> None:
        self.lhs = lhs
        self.op = op
        self.rhs = rhs

    def to_string(self) -> str:
        return f"{self.lhs.to_string()} {self.op.value} {self.rhs.to_string()}"

    def check(self, state: State) -> bool:
        if self.op is Operator.AND:
            return self.lhs.check(state) and self.rhs.check(state)
        if self.op is Operator.OR:
            return self.lhs.check(state) or self.rhs.check(state)
        compare = _COMPARISONS.get(self.op)
        if compare is None:
            raise QueryError(f"unhandled operator: {self.to_string()}")
        return compare(self.lhs.eval(state), self.rhs.eval(state))


class NotQuery(Query):
    """Logical negation."""

    def __init__(self, lhs: Query) -> None:
        self.lhs = lhs

    def to_string(self) -> str:
        return "!" + self.lhs.to_string()

    def check(self, state: State) -> bool:
        return not self.lhs.check(state)


class PredicateQuery(Query):
    """An application of a registered predicate to arguments."""

    def __init__(self, name: str, params: Iterable["QueryValue"] = ()) -> None:
        predicate = get_predicate(name)
        if predicate is None:
            raise QueryError(f"unknown predicate '{name}'")
        self.name = name
        self.params = tuple(params)
        self.predicate = predicate

    def to_string(self) -> str:
        return self.name + ("(...)" if self.params else "()")

    def check(self, state: State) -> bool:
        return self.predicate.check(state, self.params)

    def eval(self, state: State) -> int:
        return self.predicate.eval(state, self.params)


class QueryValue(Query):
    """Base of literal arguments in properties."""

    def to_string(self) -> str:
        return "<uninitialised query_val>"

    def check(self, state: State) -> bool:
        raise QueryError("hit invalid node in check()")

    def eval(self, state: State) -> int:
        raise QueryError("hit invalid node in eval()")


class NumValue(QueryValue):
    """An integer literal."""

    def __init__(self, value: int) -> None:
        self.value = value

    def to_string(self) -> str:
        return "<int literal>"

    def check(self, state: State) -> bool:
        warning("NumValue.check", "coercing int to bool")
        return self.value > 0

    def eval(self, state: State) -> int:
        return self.value


class TermValue(QueryValue):
    """A place-graph term given as an argument."""

    def __init__(self, term: Term) -> None:
        self.term = term

    def to_string(self) -> str:
        return self.term.to_string()

    def check(self, state: State) -> bool:
        raise QueryError("unexpected term in property")

    def eval(self, state: State) -> int:
        raise QueryError("Type error: expected 'int', got 'term'")


class IdValue(QueryValue):
    """An identifier; only ``true`` and ``false`` have a meaning."""

    def __init__(self, name: str) -> None:
        self.name = name

    def to_string(self) -> str:
        return "$" + self.name

    def check(self, state: State) -> bool:
        if self.name == "true":
            return True
        if self.name == "false":
            return False
        raise QueryError(f"unknown id '{self.name}' in property")

    def eval(self, state: State) -> int:
        raise QueryError("invalid integer id in eval()")


class ScopeQuery(Query):
    """A query evaluated at a related state: this, terminal, pred or succ."""

    def __init__(self, name: str, query: Query) -> None:
        self.name = name
        self.query = query

    def to_string(self) -> str:
        return f"${self.name}->{self.query.to_string()}"

    def check(self, state: State) -> bool:
        if self.name == "this":
            return self.query.check(state)
        if self.name == "terminal":
            return self.query.check(state) if state.terminal else True
        if self.name == "pred":
            if state.parent is None:
                return True
            return self.query.check(state.parent)
        if self.name == "succ":
            return all(self.query.check(target) for target, _ in state.successors)
        raise QueryError(f"Unknown meta-variable ${self.name}")

    def eval(self, state: State) -> int:
        if self.name == "this":
            return self.query.eval(state)
        if self.name == "terminal":
            if state.terminal:
                return self.query.eval(state)
            warning(
                "ScopeQuery.eval",
                "using $terminal doesn't make much sense in this context.  "
                "Returning 0",
            )
            return 0
        if self.name == "pred":
            if state.parent is None:
                return 0
            return self.query.eval(state.parent)
        raise QueryError(f"Unknown meta-variable ${self.name}")
"""Place-graph terms: holes, nil, numbers and prefixed controls."""

from __future__ import annotations

import itertools
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

__all__ = [
    "CONTEXT_HOLE_BASE",
    "TermError",
    "Control",
    "Term",
    "Hole",
    "Nil",
    "Num",
    "Prefix",
    "TermVisitor",
    "ConsistencyVisitor",
]

# Holes with an index at or above this value are context holes added to rules.
CONTEXT_HOLE_BASE = 19191911

_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


class TermError(Exception):
    """Raised when a term is malformed or used in an invalid way."""


@dataclass(frozen=True)
class Control:
    """A node kind of the signature: its name, activity and arity."""

    name: str
    active: bool = True
    arity: int = 0

    def __str__(self) -> str:
        return self.name


def _is_match_site(term: "Term", match: Any) -> bool:
    root = getattr(match, "root", None)
    return root is not None and root.id == term.id


def _reactum(match: Any) -> "Term":
    return match.rule.reactum.instantiate(match)


class Term:
    """Base of all place-graph terms."""

    def __init__(self, term_id: Optional[int] = None) -> None:
        self.id = _next_id() if term_id is None else term_id
        self.parent: Optional[Term] = None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} #{self.id} {self.to_string()}>"

    def to_string(self) -> str:
        return "<untyped term>"

    def size(self) -> int:
        """Number of nodes, holes and numbers in the term."""
        return 0

    def flatten(self) -> list["Term"]:
        """The terms this one contributes to an enclosing parallel."""
        return [self]

    def children(self) -> tuple["Term", ...]:
        """Direct sub-terms."""
        return ()

    def walk(self) -> Iterator["Term"]:
        """Yield this term and all sub-terms, breadth first."""
        pending: deque[Term] = deque([self])
        while pending:
            term = pending.popleft()
            yield term
            pending.extend(term.children())

    def active_context(self) -> bool:
        """Whether every enclosing control is active."""
        if self.parent is None:
            return True
        return self.parent.active_context()

    def overlap(self, other: Optional["Term"]) -> bool:
        """Whether this term is ``other`` or one of its ancestors."""
        while other is not None:
            if other is self:
                return True
            other = other.parent
        return False

    def instantiate(self, match: Any) -> "Term":
        raise TermError(f"cannot instantiate {self.to_string()}")

    def apply_match(self, match: Any) -> "Term":
        raise TermError(f"cannot apply a match to {self.to_string()}")

    def accept(self, visitor: "TermVisitor") -> None:
        visitor.visit(self)


class Hole(Term):
    """A numbered site where a parameter is placed."""

    def __init__(self, index: int, term_id: Optional[int] = None) -> None:
        super().__init__(term_id)
        self.index = index

    def to_string(self) -> str:
        if self.index >= CONTEXT_HOLE_BASE:
            return "$ctx"
        return f"${self.index}"

    def size(self) -> int:
        return 1

    def instantiate(self, match: Any) -> Term:
        """Replace the hole with a fresh copy of its matched parameter."""
        if match is None:
            raise TermError("invalid place graph contains a hole")
        param = match.get_param(self.index)
        if param is None:
            param = Nil()
        return param.instantiate(None)

    def apply_match(self, match: Any) -> Term:
        raise TermError("invalid place graph contains a hole")


class Nil(Term):
    """The empty term."""

    def to_string(self) -> str:
        return "nil"

    def size(self) -> int:
        return 0

    def instantiate(self, match: Any) -> Term:
        return Nil()

    def apply_match(self, match: Any) -> Term:
        return Nil()


class Num(Term):
    """An integer literal."""

    def __init__(self, value: int, term_id: Optional[int] = None) -> None:
        super().__init__(term_id)
        self.value = value

    def to_string(self) -> str:
        return f"int:{self.value}"

    def size(self) -> int:
        return 1

    def instantiate(self, match: Any) -> Term:
        return Num(self.value, term_id=self.id)

    def apply_match(self, match: Any) -> Term:
        if _is_match_site(self, match):
            return _reactum(match)
        return Num(self.value, term_id=self.id)


class Prefix(Term):
    """A control with linked ports, nesting a suffix term."""

    def __init__(
        self,
        control: Control,
        ports: Sequence[Optional[str]] = (),
        suffix: Optional[Term] = None,
        term_id: Optional[int] = None,
    ) -> None:
        super().__init__(term_id)
        ports = tuple(ports)
        if len(ports) > control.arity:
            raise TermError(
                f"control {control.name} has arity {control.arity} but "
                f"{len(ports)} ports have been linked"
            )
        self.control = control
        self.ports = ports
        self.suffix: Term = Nil() if suffix is None else suffix
        self.suffix.parent = self

    @property
    def active(self) -> bool:
        return self.control.active

    def to_string(self) -> str:
        links = ",".join("-" if port is None else port for port in self.ports)
        if links:
            links = f"[{links}]"
        return f"{self.control.name}{links}.{self.suffix.to_string()}"

    def size(self) -> int:
        return 1 + self.suffix.size()

    def children(self) -> tuple[Term, ...]:
        return (self.suffix,)

    def active_context(self) -> bool:
        if self.parent is None:
            return self.active
        return self.active and self.parent.active_context()

    def instantiate(self, match: Any) -> Term:
        if match is None:
            ports = self.ports
        else:
            ports = tuple(match.get_name(port) for port in self.ports)
        return Prefix(self.control, ports, self.suffix.instantiate(match))

    def apply_match(self, match: Any) -> Term:
        if _is_match_site(self, match):
            return _reactum(match)
        return Prefix(
            self.control,
            self.ports,
            self.suffix.apply_match(match),
            term_id=self.id,
        )

    def accept(self, visitor: "TermVisitor") -> None:
        self.suffix.accept(visitor)
        visitor.visit(self)


class TermVisitor:
    """Visitor called on each term, innermost first; does nothing by default."""

    def visit(self, term: Term) -> None:
        pass


class ConsistencyVisitor(TermVisitor):
    """Detects sub-terms that are shared within one term."""

    def __init__(self) -> None:
        self.visited: set[int] = set()

    def visit(self, term: Term) -> None:
        key = id(term)
        if key in self.visited:
            raise TermError(f"{term.to_string()}: found duplicate sub-term.")
        self.visited.add(key)
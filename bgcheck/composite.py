"""Composite terms: parallel composition within a region, and lists of regions."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .terms import Nil, Term, TermVisitor

__all__ = ["WIDE_CONTEXT_PARAM", "Parallel", "Regions"]

# Parameter index under which a match records the context surrounding a
# top-level parallel redex.
WIDE_CONTEXT_PARAM = 999999


def _is_match_site(term: Term, match: Any) -> bool:
    root = getattr(match, "root", None)
    return root is not None and root.id == term.id


class Parallel(Term):
    """Unordered parallel composition of terms sharing one parent."""

    def __init__(
        self, terms: Iterable[Term] = (), term_id: Optional[int] = None
    ) -> None:
        super().__init__(term_id)
        self.terms: list[Term] = []
        for term in terms:
            self._add(term)

    def _add(self, term: Term) -> None:
        if any(existing is term for existing in self.terms):
            return
        term.parent = self
        self.terms.append(term)

    def to_string(self) -> str:
        return "(" + " | ".join(term.to_string() for term in self.terms) + ")"

    def size(self) -> int:
        return sum(term.size() for term in self.terms)

    def children(self) -> tuple[Term, ...]:
        return tuple(self.terms)

    def flatten(self) -> list[Term]:
        """Drop nil children and splice nested parallels into this one."""
        flat: list[Term] = []
        for term in self.terms:
            if isinstance(term, Nil):
                continue
            for sub in term.flatten():
                if not any(existing is sub for existing in flat):
                    flat.append(sub)
        self.terms = []
        for term in flat:
            self._add(term)
        return list(self.terms)

    def active_context(self) -> bool:
        if self.parent is None:
            return True
        return self.parent.active_context()

    def instantiate(self, match: Any) -> Term:
        parts: list[Term] = []
        for term in self.terms:
            copy = term.instantiate(match)
            if isinstance(term, Parallel) and isinstance(copy, Parallel):
                parts.extend(copy.terms)
            else:
                parts.append(copy)
        result = Parallel(parts)
        result.flatten()
        return result

    def apply_match(self, match: Any) -> Term:
        if _is_match_site(self, match):
            reactum = match.rule.reactum.instantiate(match)
            context = (
                match.get_param(WIDE_CONTEXT_PARAM) if self.parent is None else None
            )
            if context is None or not isinstance(reactum, Parallel):
                return reactum
            extra = context.instantiate(None)
            if isinstance(extra, Nil):
                return reactum
            added = extra.terms if isinstance(extra, Parallel) else [extra]
            for term in list(added):
                reactum._add(term)
            return reactum

        result = Parallel(
            (term.apply_match(match) for term in self.terms), term_id=self.id
        )
        result.flatten()
        return result

    def accept(self, visitor: TermVisitor) -> None:
        for term in self.terms:
            term.accept(visitor)
        visitor.visit(self)


class Regions(Term):
    """An ordered list of regions, the roots of a place graph."""

    def __init__(
        self, terms: Iterable[Term] = (), term_id: Optional[int] = None
    ) -> None:
        super().__init__(term_id)
        self.terms: list[Term] = list(terms)
        for term in self.terms:
            term.parent = self

    def to_string(self) -> str:
        return " || ".join(term.to_string() for term in self.terms)

    def size(self) -> int:
        return sum(term.size() for term in self.terms)

    def children(self) -> tuple[Term, ...]:
        return tuple(self.terms)

    def flatten(self) -> list[Term]:
        return [self]

    def instantiate(self, match: Any) -> Term:
        return Regions(term.instantiate(match) for term in self.terms)

    def apply_match(self, match: Any) -> Term:
        if _is_match_site(self, match):
            return match.rule.reactum.instantiate(match)
        return Regions(
            (term.apply_match(match) for term in self.terms), term_id=self.id
        )

    def accept(self, visitor: TermVisitor) -> None:
        for term in self.terms:
            term.accept(visitor)
        visitor.visit(self)
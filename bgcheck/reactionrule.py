"""Reaction rules: a redex rewritten to a reactum."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .composite import Parallel
from .terms import CONTEXT_HOLE_BASE, Hole, Term

__all__ = ["ReactionRule"]


@dataclass(eq=False)
class ReactionRule:
    """A rewrite from ``redex`` to ``reactum``, optionally named."""

    redex: Optional[Term]
    reactum: Optional[Term]
    name: str = ""
    causation: set["ReactionRule"] = field(default_factory=set)

    _contexts: ClassVar[itertools.count] = itertools.count()

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        if self.name:
            return self.name
        if self.redex is not None and self.reactum is not None:
            return f"{self.redex.to_string()} -> {self.reactum.to_string()}"
        if self.redex is not None:
            return f"{self.redex.to_string()} -> NULL"
        if self.reactum is not None:
            return f"NULL -> {self.reactum.to_string()}"
        return "<error printing rule>"

    def contextify(self) -> None:
        """Give a parallel redex without holes a context hole on both sides."""
        if not isinstance(self.redex, Parallel):
            return
        children = self.redex.children()
        if any(isinstance(child, Hole) for child in children):
            return

        index = CONTEXT_HOLE_BASE + next(self._contexts)
        self.redex = Parallel([*children, Hole(index)])
        if isinstance(self.reactum, Parallel):
            self.reactum = Parallel([*self.reactum.children(), Hole(index)])
        else:
            self.reactum = Parallel([self.reactum, Hole(index)])

    def causes(self, rule: "ReactionRule") -> None:
        """Record that applying this rule may enable ``rule``."""
        self.causation.add(rule)
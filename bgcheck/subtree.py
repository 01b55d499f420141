"""Canonical pre-order strings of terms, used to compare terms for equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .composite import Parallel
from .terms import Hole, Nil, Num, Prefix, Term

__all__ = ["HOLE_LABEL", "Element", "format_ports", "preorder_string", "ordered_string"]

HOLE_LABEL = "[-]"


@dataclass
class Element:
    """One labelled position of a pre-order string."""

    term: Optional[Term]
    name: str


def format_ports(ports: Sequence[Optional[str]]) -> str:
    """Render a port list as ``[x,y]``; unlinked ports show as ``-``."""
    return "[" + ",".join("-" if port is None else port for port in ports) + "]"


def _prefix_label(term: Prefix) -> str:
    return term.control.name + format_ports(term.ports)


def _sort_key(element: Element) -> tuple[bool, str]:
    return (element.name == HOLE_LABEL, element.name)


def preorder_string(term: Term) -> list[Element]:
    """Pre-order labels of ``term`` with parallel children in canonical order."""
    if isinstance(term, Prefix):
        return [
            Element(term, _prefix_label(term)),
            *preorder_string(term.suffix),
            Element(None, "0"),
        ]
    if isinstance(term, Parallel):
        labelled = []
        for child in term.children():
            if isinstance(child, Prefix):
                labelled.append(Element(child, _prefix_label(child)))
            elif isinstance(child, Hole):
                labelled.append(Element(child, HOLE_LABEL))
            elif isinstance(child, Num):
                labelled.append(Element(child, child.to_string()))
        labelled.sort(key=_sort_key)
        return [elem for item in labelled for elem in preorder_string(item.term)]
    if isinstance(term, Hole):
        return [Element(term, HOLE_LABEL)]
    if isinstance(term, Num):
        return [Element(term, term.to_string())]
    if isinstance(term, Nil):
        return []
    return []


def ordered_string(term: Term) -> str:
    """The space-separated canonical pre-order string of ``term``."""
    return " ".join(element.name for element in preorder_string(term))
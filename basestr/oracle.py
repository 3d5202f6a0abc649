"""
Query surface the classifier needs from a host type system.

The classifier receives a `TypeOracle` instance so the decision procedure can stay
independent of how types are computed, resolved or displayed. Type handles are opaque:
the classifier only ever passes them back into these callables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .names import ROOT_OBJECT_NAME


@dataclass(frozen=True)
class Declaration:
    # Name of the declaration enclosing the member, e.g. the class defining `__str__`.
    context_name: str | None

    def enclosing_context_name(self) -> str | None:
        return self.context_name


@dataclass(frozen=True)
class TypeOracle:
    """
    Injectable query surface over resolved types.

    Every callable must be a read-only query; the classifier never mutates the handles
    it is given and may call any query more than once for the same handle.
    """
    # True when values of the type can be called.
    has_call_signatures: Callable[[Any], bool]
    # Declaration sites of a named member; empty when the type has no such member.
    find_member: Callable[[Any, str], Sequence[Declaration]]
    # Boolean scalar or boolean literal.
    is_boolean_like: Callable[[Any], bool]
    # Display name compared against the configured override set.
    canonical_name: Callable[[Any], str]
    # Constituents when the type is a union, else None.
    decompose_union: Callable[[Any], Sequence[Any] | None]
    # Constituents when the type is an intersection, else None.
    decompose_intersection: Callable[[Any], Sequence[Any] | None]
    # True when a declaration context is the universal root object declaration.
    is_root_context: Callable[[str | None], bool]


def root_context_predicate(root_name: str = ROOT_OBJECT_NAME) -> Callable[[str | None], bool]:
    def is_root_context(context_name: str | None) -> bool:
        return context_name == root_name

    return is_root_context

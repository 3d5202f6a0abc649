"""
Structural type model bound to the `TypeOracle` query surface.

Types are a closed variant:
- `Scalar`: builtin scalar or literal value type,
- `ObjectType`: class instances, callables, containers and other member-bearing types,
- `Composite`: union or intersection over constituent types.

Each non-composite type carries the declaration sites of its stringifier member.
`STRUCTURAL_ORACLE` answers classifier queries over this model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Sequence, Union

from .names import (
    BOOLEAN_TYPE_NAME,
    FUNCTION_CONTEXT_NAME,
    REPR_MEMBER,
    ROOT_OBJECT_NAME,
    STRINGIFIER_MEMBER,
)
from .oracle import Declaration, TypeOracle, root_context_predicate

CompositeKind = Literal["union", "intersection"]

_STRINGIFIER_MEMBERS = frozenset((STRINGIFIER_MEMBER, REPR_MEMBER))
_JOINERS = {"union": " | ", "intersection": " & "}


@dataclass(frozen=True)
class Scalar:
    name: str
    declarations: tuple[Declaration, ...] = ()
    boolean: bool = False
    literal: bool = False


@dataclass(frozen=True)
class ObjectType:
    name: str
    declarations: tuple[Declaration, ...] = ()
    call_signatures: int = 0


@dataclass(frozen=True)
class Composite:
    kind: CompositeKind
    constituents: tuple[StructuralType, ...]

    @property
    def name(self) -> str:
        return _JOINERS[self.kind].join(t.name for t in self.constituents)


StructuralType = Union[Scalar, ObjectType, Composite]


def scalar(name: str) -> Scalar:
    return Scalar(name, (Declaration(name),), boolean=name == BOOLEAN_TYPE_NAME)


def literal(value: Any) -> Scalar:
    assert isinstance(value, (bool, int, float, complex, str, bytes)), f"unsupported literal value: {value!r}"
    value_type = type(value).__name__
    return Scalar(repr(value), (Declaration(value_type),), boolean=isinstance(value, bool), literal=True)


def object_type(name: str, context_name: str | None = ROOT_OBJECT_NAME, call_signatures: int = 0) -> ObjectType:
    return ObjectType(name, (Declaration(context_name),), call_signatures=call_signatures)


def function_type(name: str = "Callable") -> ObjectType:
    return object_type(name, FUNCTION_CONTEXT_NAME, call_signatures=1)


def _composite(kind: CompositeKind, types: Sequence[StructuralType]) -> StructuralType:
    flat: list[StructuralType] = []
    for t in types:
        members = t.constituents if isinstance(t, Composite) and t.kind == kind else (t,)
        for member in members:
            if member not in flat:
                flat.append(member)
    assert len(flat) > 0, f"empty {kind}"
    if len(flat) == 1:
        return flat[0]
    return Composite(kind, tuple(flat))


def union(*types: StructuralType) -> StructuralType:
    return _composite("union", types)


def intersection(*types: StructuralType) -> StructuralType:
    return _composite("intersection", types)


NONE = Scalar("None", (Declaration("NoneType"),))
ANY = ObjectType("Any")
OBJECT = object_type(ROOT_OBJECT_NAME)


def has_call_signatures(t: StructuralType) -> bool:
    if isinstance(t, ObjectType):
        return t.call_signatures > 0
    if isinstance(t, Composite):
        # A union is callable only when every member is; an intersection when any is.
        if t.kind == "union":
            return all(has_call_signatures(c) for c in t.constituents)
        return any(has_call_signatures(c) for c in t.constituents)
    return False


def find_member(t: StructuralType, member_name: str) -> tuple[Declaration, ...]:
    if member_name not in _STRINGIFIER_MEMBERS:
        return ()
    if not isinstance(t, Composite):
        return t.declarations
    per_constituent = tuple(find_member(c, member_name) for c in t.constituents)
    if t.kind == "union" and any(len(decls) == 0 for decls in per_constituent):
        return ()
    return tuple(d for decls in per_constituent for d in decls)


def is_boolean_like(t: StructuralType) -> bool:
    return isinstance(t, Scalar) and t.boolean


def canonical_name(t: StructuralType) -> str:
    return t.name


def decompose_union(t: StructuralType) -> tuple[StructuralType, ...] | None:
    if isinstance(t, Composite) and t.kind == "union":
        return t.constituents
    return None


def decompose_intersection(t: StructuralType) -> tuple[StructuralType, ...] | None:
    if isinstance(t, Composite) and t.kind == "intersection":
        return t.constituents
    return None


STRUCTURAL_ORACLE = TypeOracle(
    has_call_signatures=has_call_signatures,
    find_member=find_member,
    is_boolean_like=is_boolean_like,
    canonical_name=canonical_name,
    decompose_union=decompose_union,
    decompose_intersection=decompose_intersection,
    is_root_context=root_context_predicate(ROOT_OBJECT_NAME),
)

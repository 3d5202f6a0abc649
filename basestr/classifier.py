"""
Stringification-usefulness classifier.

Decides, for one type, whether converting its values to text is guaranteed to produce
meaningful output, guaranteed to produce the default placeholder, depends on the runtime
branch of a union, or is a callable being stringified.

Rules apply in strict order and each one short-circuits:
1. callable and `reject_functions` enabled -> FUNCTION (even for ignored names),
2. no stringifier declarations -> ALWAYS,
3. boolean scalar / literal -> ALWAYS,
4. canonical name in the override set -> ALWAYS,
5. no declaration on the root object -> ALWAYS,
6. intersection / union -> merge of constituent verdicts,
7. anything else -> NEVER.
"""

from __future__ import annotations

from typing import Any

from .config import Configuration
from .lattice import Usefulness, merge_intersection, merge_union
from .names import STRINGIFIER_MEMBER
from .oracle import TypeOracle

# id(type) -> (type, verdict); the handle is kept so its id cannot be reused mid-call.
Memo = dict[int, tuple[Any, Usefulness]]


class _Classification:
    def __init__(self, config: Configuration, oracle: TypeOracle):
        self.config = config
        self.oracle = oracle
        self.memo: Memo = {}

    def verdict(self, type_: Any) -> Usefulness:
        key = id(type_)
        if key in self.memo:
            return self.memo[key][1]
        # Re-entry through a cyclic type graph resolves to useful.
        self.memo[key] = (type_, Usefulness.ALWAYS)
        result = self._decide(type_)
        self.memo[key] = (type_, result)
        return result

    def _decide(self, type_: Any) -> Usefulness:
        oracle = self.oracle
        if self.config.reject_functions and oracle.has_call_signatures(type_):
            return Usefulness.FUNCTION

        declarations = oracle.find_member(type_, STRINGIFIER_MEMBER)
        if not declarations:
            return Usefulness.ALWAYS

        # Some hosts omit the stringifier declaration on booleans.
        if oracle.is_boolean_like(type_):
            return Usefulness.ALWAYS

        if oracle.canonical_name(type_) in self.config.ignored_type_names:
            return Usefulness.ALWAYS

        if not any(oracle.is_root_context(d.enclosing_context_name()) for d in declarations):
            return Usefulness.ALWAYS

        parts = oracle.decompose_intersection(type_)
        if parts is not None:
            return merge_intersection(self.verdict(part) for part in parts)

        parts = oracle.decompose_union(type_)
        if parts is not None:
            return merge_union([self.verdict(part) for part in parts])

        return Usefulness.NEVER

    def constituents(self, type_: Any) -> tuple[Any, ...]:
        parts = self.oracle.decompose_intersection(type_)
        if parts is None:
            parts = self.oracle.decompose_union(type_)
        if parts is None:
            return (type_,)
        return tuple(parts)


def classify(type_: Any, config: Configuration, oracle: TypeOracle) -> Usefulness:
    return _Classification(config, oracle).verdict(type_)


def offending_constituents(type_: Any, config: Configuration, oracle: TypeOracle) -> tuple[Any, ...]:
    """
    Constituents responsible for a non-`ALWAYS` verdict.

    For a union or intersection these are the direct constituents whose own verdict is
    not `ALWAYS`; for any other type it is the type itself. Empty when the type is
    always useful.
    """
    run = _Classification(config, oracle)
    if run.verdict(type_) is Usefulness.ALWAYS:
        return ()
    return tuple(part for part in run.constituents(type_) if run.verdict(part) is not Usefulness.ALWAYS)

"""
Per-analysis classifier settings.

A `Configuration` is built once per analysis run and never mutated. The option mapping
accepted by `from_options` is the rule-option shape used by lint integrations:

    {"ignoredTypeNames": ["Error", "URL"], "rejectFunctions": true}
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from .names import default_ignored_types

IGNORED_TYPE_NAMES_OPTION = "ignoredTypeNames"
REJECT_FUNCTIONS_OPTION = "rejectFunctions"


@dataclass(frozen=True)
class Configuration:
    # Canonical type names always treated as useful.
    ignored_type_names: frozenset[str] = default_ignored_types
    # Report callables as `FUNCTION` before any placeholder analysis.
    reject_functions: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> Configuration:
        # Missing keys keep their defaults; a given name list replaces the default set.
        if options is None:
            return cls()
        ignored = options.get(IGNORED_TYPE_NAMES_OPTION)
        reject = options.get(REJECT_FUNCTIONS_OPTION)
        if isinstance(ignored, (str, bytes)):
            raise ValueError(f"{IGNORED_TYPE_NAMES_OPTION} must be a list of names, not {ignored!r}")
        if reject is not None and not isinstance(reject, bool):
            raise ValueError(f"{REJECT_FUNCTIONS_OPTION} must be a boolean, not {reject!r}")
        return cls(
            ignored_type_names=default_ignored_types if ignored is None else frozenset(ignored),
            reject_functions=False if reject is None else reject,
        )

    def with_ignored(self, *names: str) -> Configuration:
        return replace(self, ignored_type_names=self.ignored_type_names.union(names))

    def with_reject_functions(self, reject_functions: bool = True) -> Configuration:
        return replace(self, reject_functions=reject_functions)

    def to_options(self) -> dict[str, Any]:
        return {
            IGNORED_TYPE_NAMES_OPTION: sorted(self.ignored_type_names),
            REJECT_FUNCTIONS_OPTION: self.reject_functions,
        }


DEFAULT_CONFIGURATION = Configuration()

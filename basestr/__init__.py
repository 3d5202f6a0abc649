"""
Stringification-usefulness classifier.

Public surface:
- `classify(type, config, oracle)` -> `Usefulness`,
- `offending_constituents(type, config, oracle)` for a per-constituent breakdown,
- `Configuration` / `DEFAULT_CONFIGURATION` for per-analysis settings,
- `TypeOracle` / `Declaration` for binding a host type system,
- `STRUCTURAL_ORACLE` and the stub loader for the bundled structural type model.
"""

from .classifier import classify, offending_constituents
from .config import DEFAULT_CONFIGURATION, Configuration
from .lattice import Usefulness, merge_intersection, merge_union
from .oracle import Declaration, TypeOracle, root_context_predicate
from .structural import STRUCTURAL_ORACLE
from .stubs import StubError, StubModule, load_stub, load_stub_file

__all__ = [
    "Configuration",
    "DEFAULT_CONFIGURATION",
    "Declaration",
    "STRUCTURAL_ORACLE",
    "StubError",
    "StubModule",
    "TypeOracle",
    "Usefulness",
    "classify",
    "load_stub",
    "load_stub_file",
    "merge_intersection",
    "merge_union",
    "offending_constituents",
    "root_context_predicate",
]

"""
Usefulness lattice for default stringification.

Composite merging only ever looks at `ALWAYS` and `NEVER`: a constituent verdict of
`SOMETIMES` or `FUNCTION` counts as neither guaranteed useful nor guaranteed useless.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Usefulness(str, Enum):
    # Values are the certainty words interpolated into findings.
    ALWAYS = "always"
    NEVER = "will"
    SOMETIMES = "may"
    FUNCTION = "function"

    @property
    def certainty(self) -> str:
        return self.value

    @property
    def is_finding(self) -> bool:
        return self is not Usefulness.ALWAYS


def merge_intersection(verdicts: Iterable[Usefulness]) -> Usefulness:
    # Lazy: stops at the first useful constituent.
    for verdict in verdicts:
        if verdict is Usefulness.ALWAYS:
            return Usefulness.ALWAYS
    return Usefulness.NEVER


def merge_union(verdicts: Iterable[Usefulness]) -> Usefulness:
    all_useful = True
    some_useful = False
    for verdict in verdicts:
        if verdict is not Usefulness.ALWAYS:
            all_useful = False
        if verdict is not Usefulness.NEVER:
            some_useful = True
    if all_useful and some_useful:
        return Usefulness.ALWAYS
    if some_useful:
        return Usefulness.SOMETIMES
    return Usefulness.NEVER

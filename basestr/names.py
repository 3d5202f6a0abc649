"""
Name tables for the stringification classifier.

These tables drive the name-based decisions of the classifier and the stub loader:
- the stringifier member looked up on every type,
- the universal root object declaration,
- the default always-useful override set,
- builtin scalar / container roots known to the structural type model.
"""

# Member consulted when a value is converted to text.
STRINGIFIER_MEMBER = "__str__"

# Fallback stringifier member; `object.__str__` delegates to it.
REPR_MEMBER = "__repr__"

# Declaration context of the default placeholder-producing stringifier.
ROOT_OBJECT_NAME = "object"

# Declaration context of the stringifier every callable inherits.
FUNCTION_CONTEXT_NAME = "function"

# Type names treated as always useful unless configured otherwise.
default_ignored_type_order = (
    "Error",
    "RegExp",
    "URL",
    "URLSearchParams",
)
default_ignored_types = frozenset(default_ignored_type_order)

# Builtin scalars whose stringifier is declared on the scalar itself.
scalar_type_order = (
    "int",
    "float",
    "complex",
    "str",
    "bytes",
    "bool",
)
scalar_types = frozenset(scalar_type_order)

# Boolean scalar; see the boolean carve-out in the classifier.
BOOLEAN_TYPE_NAME = "bool"

# Builtin containers with a meaningful repr of their own.
container_type_order = (
    "list",
    "dict",
    "set",
    "frozenset",
    "tuple",
    "List",
    "Dict",
    "Set",
    "FrozenSet",
    "Tuple",
)
container_types = frozenset(container_type_order)

# Names with no stringifier declaration at all.
memberless_type_order = (
    "None",
    "Any",
)
memberless_types = frozenset(memberless_type_order)

# Subscript roots for composite and special annotation forms.
UNION_ROOTS = frozenset(("Union",))
OPTIONAL_ROOTS = frozenset(("Optional",))
INTERSECTION_ROOTS = frozenset(("Intersection",))
CALLABLE_ROOTS = frozenset(("Callable",))
LITERAL_ROOTS = frozenset(("Literal",))
ANNOTATED_ROOTS = frozenset(("Annotated",))

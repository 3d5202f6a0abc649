"""
Stub loader for the structural type model.

A stub is a restricted Python module declaring classes and annotated names:

    class Point:
        def __repr__(self) -> str: ...

    class Handle: ...

    where: Point | Handle

Classes are resolved against their bases with C3 linearisation. The stringifier of a
class is declared by the first class in its MRO defining `__str__` or `__repr__`; every
MRO ends in `object`, which declares the placeholder-producing default.
"""

from __future__ import annotations

from ast import (
    AST,
    AnnAssign,
    AsyncFunctionDef,
    Attribute,
    BinOp,
    BitOr,
    ClassDef,
    Constant,
    Expr,
    FunctionDef,
    Import,
    ImportFrom,
    Name,
    Pass,
    Subscript,
    Tuple,
    expr,
    literal_eval,
    parse,
    unparse,
)
from dataclasses import dataclass
from pathlib import Path

from .names import (
    ANNOTATED_ROOTS,
    CALLABLE_ROOTS,
    INTERSECTION_ROOTS,
    LITERAL_ROOTS,
    OPTIONAL_ROOTS,
    REPR_MEMBER,
    ROOT_OBJECT_NAME,
    STRINGIFIER_MEMBER,
    UNION_ROOTS,
    container_types,
    memberless_types,
    scalar_types,
)
from .oracle import Declaration
from .structural import (
    ANY,
    NONE,
    ObjectType,
    StructuralType,
    function_type,
    intersection,
    literal,
    scalar,
    union,
)

TYPE_ALIAS_NAMES = frozenset(("TypeAlias",))


class StubError(ValueError):
    def __init__(self, message: str, file_name: str = "<stub>", line: int | None = None):
        self.message = message
        self.file_name = file_name
        self.line = line
        where = file_name if line is None else f"{file_name}:{line}"
        super().__init__(f"{where}: {message}")


@dataclass(frozen=True)
class StubClass:
    name: str
    bases: tuple[str, ...]
    # Declares `__str__` or `__repr__` itself.
    declares_stringifier: bool
    # Declares `__call__` itself.
    declares_call: bool


# Builtin classes every stub can refer to, in declaration order.
BUILTIN_CLASSES = (
    StubClass(ROOT_OBJECT_NAME, (), declares_stringifier=True, declares_call=False),
    StubClass("BaseException", (ROOT_OBJECT_NAME,), declares_stringifier=True, declares_call=False),
    StubClass("Exception", ("BaseException",), declares_stringifier=False, declares_call=False),
)


@dataclass(frozen=True)
class StubModule:
    file_name: str
    classes: dict[str, StubClass]
    class_mro: dict[str, tuple[str, ...]]
    values: dict[str, StructuralType]

    def names(self) -> tuple[str, ...]:
        return tuple(self.values)

    def value(self, name: str) -> StructuralType:
        if name not in self.values:
            raise StubError(f"no annotated name {name!r}", self.file_name)
        return self.values[name]

    def stringifier_context(self, class_name: str) -> str:
        for ancestor in self.class_mro[class_name]:
            if self.classes[ancestor].declares_stringifier:
                return ancestor
        raise AssertionError(f"MRO of {class_name} does not end in {ROOT_OBJECT_NAME}")

    def call_signatures(self, class_name: str) -> int:
        return 1 if any(self.classes[a].declares_call for a in self.class_mro[class_name]) else 0


def annotation_root_name(annotation: expr | None) -> str | None:
    if annotation is None:
        return None
    if isinstance(annotation, Name):
        return annotation.id
    if isinstance(annotation, Attribute):
        return annotation.attr
    if isinstance(annotation, Subscript):
        return annotation_root_name(annotation.value)
    return None


def _linearize(name: str, bases: tuple[str, ...], mro: dict[str, tuple[str, ...]]) -> tuple[str, ...] | None:
    seqs = [list(mro[base]) for base in bases] + [list(bases)]
    result = [name]
    while True:
        seqs = [seq for seq in seqs if len(seq) > 0]
        if len(seqs) == 0:
            return tuple(result)
        for seq in seqs:
            head = seq[0]
            if not any(head in other[1:] for other in seqs):
                break
        else:
            return None
        result.append(head)
        for seq in seqs:
            if seq[0] == head:
                del seq[0]


class _StubBuilder:
    def __init__(self, file_name: str):
        self.file_name = file_name
        self.classes: dict[str, StubClass] = {}
        self.class_mro: dict[str, tuple[str, ...]] = {}
        self.aliases: dict[str, StructuralType] = {}
        self.pending: list[tuple[str, expr, bool]] = []
        for builtin in BUILTIN_CLASSES:
            self._add_class(builtin, None)
        self.module = StubModule(file_name, self.classes, self.class_mro, {})

    def error(self, message: str, node: AST | None = None) -> StubError:
        return StubError(message, self.file_name, getattr(node, "lineno", None))

    def _add_class(self, stub_class: StubClass, node: AST | None):
        order = _linearize(stub_class.name, stub_class.bases, self.class_mro)
        if order is None:
            raise self.error(f"cannot linearize bases of {stub_class.name}", node)
        self.classes[stub_class.name] = stub_class
        self.class_mro[stub_class.name] = order

    def add_class(self, node: ClassDef):
        if node.name in self.classes:
            raise self.error(f"class name shadowing not supported: {node.name}", node)
        bases: list[str] = []
        for base in node.bases:
            if not isinstance(base, Name):
                raise self.error(f"only simple inheritance supported: {unparse(base)}", base)
            if base.id not in self.classes:
                raise self.error(f"unknown base class: {base.id}", base)
            bases.append(base.id)
        method_names = set()
        for child in node.body:
            if isinstance(child, ClassDef):
                raise self.error("class inside class not supported", child)
            if isinstance(child, (FunctionDef, AsyncFunctionDef)):
                method_names.add(child.name)
        stub_class = StubClass(
            name=node.name,
            bases=tuple(bases) if len(bases) > 0 else (ROOT_OBJECT_NAME,),
            declares_stringifier=STRINGIFIER_MEMBER in method_names or REPR_MEMBER in method_names,
            declares_call="__call__" in method_names,
        )
        self._add_class(stub_class, node)

    def add_statement(self, node: AST):
        if isinstance(node, ClassDef):
            self.add_class(node)
        elif isinstance(node, AnnAssign):
            if not isinstance(node.target, Name):
                raise self.error(f"only simple names can be annotated: {unparse(node.target)}", node)
            if annotation_root_name(node.annotation) in TYPE_ALIAS_NAMES:
                if node.value is None:
                    raise self.error(f"type alias without value: {node.target.id}", node)
                self.pending.append((node.target.id, node.value, True))
            else:
                self.pending.append((node.target.id, node.annotation, False))
        elif isinstance(node, (Import, ImportFrom, Expr, Pass)):
            return
        else:
            raise self.error(f"unsupported statement: {type(node).__name__}", node)

    def class_type(self, class_name: str, display_name: str) -> ObjectType:
        return ObjectType(
            display_name,
            (Declaration(self.module.stringifier_context(class_name)),),
            call_signatures=self.module.call_signatures(class_name),
        )

    def resolve(self, node: expr) -> StructuralType:
        if isinstance(node, Constant):
            if node.value is None:
                return NONE
            if isinstance(node.value, str):
                # Forward reference.
                try:
                    inner = parse(node.value, mode="eval").body
                except SyntaxError as exc:
                    raise self.error(f"bad forward reference: {node.value!r}", node) from exc
                return self.resolve(inner)
            raise self.error(f"unsupported annotation: {unparse(node)}", node)

        if isinstance(node, BinOp) and isinstance(node.op, BitOr):
            return union(self.resolve(node.left), self.resolve(node.right))

        if isinstance(node, Subscript):
            return self.resolve_subscript(node)

        root_name = annotation_root_name(node)
        if root_name is None:
            raise self.error(f"unsupported annotation: {unparse(node)}", node)
        if root_name in self.aliases:
            return self.aliases[root_name]
        if root_name in scalar_types:
            return scalar(root_name)
        if root_name in memberless_types:
            return NONE if root_name == "None" else ANY
        if root_name in self.classes:
            return self.class_type(root_name, root_name)
        if root_name in container_types:
            return ObjectType(root_name, (Declaration(root_name),))
        if root_name in CALLABLE_ROOTS:
            return function_type(root_name)
        raise self.error(f"unknown type name: {root_name}", node)

    def resolve_subscript(self, node: Subscript) -> StructuralType:
        root_name = annotation_root_name(node)
        args = list(node.slice.elts) if isinstance(node.slice, Tuple) else [node.slice]
        if len(args) == 0:
            raise self.error(f"{root_name} needs at least one argument", node)
        if root_name in UNION_ROOTS:
            return union(*(self.resolve(a) for a in args))
        if root_name in OPTIONAL_ROOTS:
            if len(args) != 1:
                raise self.error("Optional takes exactly one argument", node)
            return union(self.resolve(args[0]), NONE)
        if root_name in INTERSECTION_ROOTS:
            return intersection(*(self.resolve(a) for a in args))
        if root_name in CALLABLE_ROOTS:
            return function_type(unparse(node))
        if root_name in LITERAL_ROOTS:
            return union(*(self.resolve_literal(a) for a in args))
        if root_name in ANNOTATED_ROOTS:
            return self.resolve(args[0])
        if root_name in self.classes:
            return self.class_type(root_name, unparse(node))
        if root_name in container_types:
            return ObjectType(unparse(node), (Declaration(root_name),))
        raise self.error(f"unsupported generic annotation: {unparse(node)}", node)

    def resolve_literal(self, node: expr) -> StructuralType:
        try:
            value = literal_eval(node)
        except (ValueError, TypeError) as exc:
            raise self.error(f"unsupported literal: {unparse(node)}", node) from exc
        if value is None:
            return NONE
        if not isinstance(value, (bool, int, float, complex, str, bytes)):
            raise self.error(f"unsupported literal: {unparse(node)}", node)
        return literal(value)

    def build(self) -> StubModule:
        # Aliases first, in order, so annotated names may refer to later aliases.
        for name, annotation, is_alias in self.pending:
            if is_alias:
                self.aliases[name] = self.resolve(annotation)
        values: dict[str, StructuralType] = {}
        for name, annotation, is_alias in self.pending:
            if not is_alias:
                values[name] = self.resolve(annotation)
        return StubModule(self.file_name, self.classes, self.class_mro, values)


def load_stub(source: str, file_name: str = "<stub>") -> StubModule:
    try:
        tree = parse(source, filename=file_name)
    except SyntaxError as exc:
        raise StubError(exc.msg, file_name, exc.lineno) from exc
    builder = _StubBuilder(file_name)
    for node in tree.body:
        builder.add_statement(node)
    return builder.build()


def load_stub_file(file_name: str | Path) -> StubModule:
    path = Path(file_name)
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise StubError(str(exc), str(path)) from exc
    return load_stub(source, str(path))

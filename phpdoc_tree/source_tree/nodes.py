"""Typed PHP syntax tree consumed by the documentation generator.

A closed set of frozen node kinds. Anything the generator does not document
is kept as OtherNode / OtherExpr so the shape of the file survives loading.
"""

from dataclasses import dataclass
from enum import IntFlag
from pathlib import Path


class Modifier(IntFlag):
    """Member modifier bits as emitted by the PHP parser."""

    PUBLIC = 1
    PROTECTED = 2
    PRIVATE = 4
    STATIC = 8
    ABSTRACT = 16
    FINAL = 32
    READONLY = 64


@dataclass(frozen=True, slots=True)
class Comment:
    """A raw comment attached to the node that follows it."""

    text: str
    line: int = -1
    is_doc: bool = False


# --- Default-value expressions ---


@dataclass(frozen=True, slots=True)
class ScalarExpr:
    """Literal string, integer or float."""

    value: str | int | float


@dataclass(frozen=True, slots=True)
class ConstFetchExpr:
    """Bare constant reference such as null, true or PHP_EOL."""

    name: str


@dataclass(frozen=True, slots=True)
class OtherExpr:
    """Any other expression, identified by its parser node type (e.g. Expr_Array)."""

    kind: str


Expr = ScalarExpr | ConstFetchExpr | OtherExpr


# --- Declarations ---


@dataclass(frozen=True, slots=True)
class ParamNode:
    name: str
    type_name: str | None = None
    default: Expr | None = None
    by_ref: bool = False
    variadic: bool = False


@dataclass(frozen=True, slots=True)
class PropertyItemNode:
    """One `$name [= default]` entry of a property statement."""

    name: str
    default: Expr | None = None
    comments: tuple[Comment, ...] = ()


@dataclass(frozen=True, slots=True)
class PropertyNode:
    """Property statement; all items share its flags and type."""

    items: tuple[PropertyItemNode, ...]
    flags: int = 0
    type_name: str | None = None
    comments: tuple[Comment, ...] = ()
    line: int = -1


@dataclass(frozen=True, slots=True)
class MethodNode:
    name: str
    flags: int = 0
    params: tuple[ParamNode, ...] = ()
    return_type: str | None = None
    comments: tuple[Comment, ...] = ()
    line: int = -1


@dataclass(frozen=True, slots=True)
class OtherNode:
    """Statement the generator does not document (use, const, declare, ...)."""

    kind: str
    comments: tuple[Comment, ...] = ()
    line: int = -1


ClassMember = PropertyNode | MethodNode | OtherNode


@dataclass(frozen=True, slots=True)
class ClassNode:
    name: str
    members: tuple[ClassMember, ...] = ()
    flags: int = 0
    comments: tuple[Comment, ...] = ()
    line: int = -1


@dataclass(frozen=True, slots=True)
class FunctionNode:
    name: str
    params: tuple[ParamNode, ...] = ()
    return_type: str | None = None
    comments: tuple[Comment, ...] = ()
    line: int = -1


@dataclass(frozen=True, slots=True)
class NamespaceNode:
    """Namespace declaration; name is empty for the global `namespace { }` block."""

    name: str
    statements: tuple["Statement", ...] = ()
    comments: tuple[Comment, ...] = ()
    line: int = -1


Statement = NamespaceNode | ClassNode | FunctionNode | OtherNode


@dataclass(frozen=True, slots=True)
class SourceTree:
    """Top-level statements of one source file."""

    statements: tuple[Statement, ...]
    path: Path | None = None


__all__ = [
    "ClassMember",
    "ClassNode",
    "Comment",
    "ConstFetchExpr",
    "Expr",
    "FunctionNode",
    "MethodNode",
    "Modifier",
    "NamespaceNode",
    "OtherExpr",
    "OtherNode",
    "ParamNode",
    "PropertyItemNode",
    "PropertyNode",
    "ScalarExpr",
    "SourceTree",
    "Statement",
]

"""Build a SourceTree from a nikic/PHP-Parser JSON dump.

The dump is what `php-parse --json-dump file.php` prints: a list of
statement objects, each tagged with "nodeType" and carrying an
"attributes" object with "startLine" and "comments". Both the v4 node
shapes (Name.parts, Stmt_PropertyProperty, Scalar_LNumber) and the v5
shapes (Name.name, PropertyItem, Scalar_Int) are accepted.
"""

import json
from pathlib import Path
from typing import Any

from phpdoc_tree.exceptions import SourceUnavailableError, TreeLoadError
from phpdoc_tree.logging import get_pipeline_logger
from phpdoc_tree.source_tree.nodes import (
    ClassMember,
    ClassNode,
    Comment,
    ConstFetchExpr,
    Expr,
    FunctionNode,
    MethodNode,
    NamespaceNode,
    OtherExpr,
    OtherNode,
    ParamNode,
    PropertyItemNode,
    PropertyNode,
    ScalarExpr,
    SourceTree,
    Statement,
)

logger = get_pipeline_logger(__name__)

_SCALAR_TYPES = frozenset({"Scalar_String", "Scalar_LNumber", "Scalar_DNumber", "Scalar_Int", "Scalar_Float"})
_PROPERTY_ITEM_TYPES = frozenset({"Stmt_PropertyProperty", "PropertyItem"})


def load_source_tree(path: Path) -> SourceTree:
    """Read a JSON dump from disk and build its SourceTree.

    Raises:
        SourceUnavailableError: The file cannot be read.
        TreeLoadError: The file is not a PHP-Parser statement list.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeLoadError(f"{path} is not valid JSON: {e}") from e

    tree = build_source_tree(data, path=path)
    logger.debug("Loaded %d top-level statements from %s", len(tree.statements), path)
    return tree


def build_source_tree(data: Any, path: Path | None = None) -> SourceTree:
    """Convert decoded JSON into a SourceTree.

    Only the top-level shape is enforced; unexpected nested shapes degrade
    to OtherNode / OtherExpr.
    """
    if not isinstance(data, list):
        raise TreeLoadError(f"Expected a list of statements, got {type(data).__name__}")
    return SourceTree(statements=tuple(_statement(item) for item in data), path=path)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def _statement(node: Any) -> Statement:
    match _node_type(node):
        case "Stmt_Namespace":
            return NamespaceNode(
                name=_name(node.get("name")),
                statements=tuple(_statement(item) for item in _list(node.get("stmts"))),
                comments=_comments(node),
                line=_line(node),
            )
        case "Stmt_Class":
            return ClassNode(
                name=_identifier(node.get("name")),
                members=tuple(_class_member(item) for item in _list(node.get("stmts"))),
                flags=_int(node.get("flags")),
                comments=_comments(node),
                line=_line(node),
            )
        case "Stmt_Function":
            return FunctionNode(
                name=_identifier(node.get("name")),
                params=_params(node.get("params")),
                return_type=_type_name(node.get("returnType")),
                comments=_comments(node),
                line=_line(node),
            )
        case kind:
            return _other(node, kind)


def _class_member(node: Any) -> ClassMember:
    match _node_type(node):
        case "Stmt_Property":
            return PropertyNode(
                items=tuple(_property_item(item) for item in _list(node.get("props")) if _node_type(item) in _PROPERTY_ITEM_TYPES),
                flags=_int(node.get("flags")),
                type_name=_type_name(node.get("type")),
                comments=_comments(node),
                line=_line(node),
            )
        case "Stmt_ClassMethod":
            return MethodNode(
                name=_identifier(node.get("name")),
                flags=_int(node.get("flags")),
                params=_params(node.get("params")),
                return_type=_type_name(node.get("returnType")),
                comments=_comments(node),
                line=_line(node),
            )
        case kind:
            return _other(node, kind)


def _other(node: Any, kind: str) -> OtherNode:
    logger.debug("Keeping %s statement as OtherNode", kind)
    return OtherNode(kind=kind, comments=_comments(node), line=_line(node))


def _property_item(node: dict[str, Any]) -> PropertyItemNode:
    return PropertyItemNode(
        name=_identifier(node.get("name")),
        default=_expr(node.get("default")),
        comments=_comments(node),
    )


def _params(value: Any) -> tuple[ParamNode, ...]:
    params: list[ParamNode] = []
    for node in _list(value):
        if _node_type(node) != "Param":
            continue
        var = node.get("var")
        name = var.get("name") if isinstance(var, dict) else None
        params.append(
            ParamNode(
                name=name if isinstance(name, str) else "",
                type_name=_type_name(node.get("type")),
                default=_expr(node.get("default")),
                by_ref=bool(node.get("byRef")),
                variadic=bool(node.get("variadic")),
            )
        )
    return tuple(params)


# ---------------------------------------------------------------------------
# Expressions, names and types
# ---------------------------------------------------------------------------


def _expr(node: Any) -> Expr | None:
    if node is None:
        return None
    kind = _node_type(node)
    if kind in _SCALAR_TYPES and isinstance(node.get("value"), (str, int, float)):
        return ScalarExpr(value=node["value"])
    if kind == "Expr_ConstFetch":
        return ConstFetchExpr(name=_name(node.get("name")))
    if kind == "Expr_UnaryMinus":
        inner = _expr(node.get("expr"))
        if isinstance(inner, ScalarExpr) and isinstance(inner.value, (int, float)):
            return ScalarExpr(value=-inner.value)
    return OtherExpr(kind=kind)


def _name(node: Any) -> str:
    """Render a Name node (v4 `parts` or v5 `name`) as a backslash-joined string."""
    if not isinstance(node, dict):
        return ""
    if isinstance(parts := node.get("parts"), list):
        name = "\\".join(str(part) for part in parts)
    else:
        name = str(node.get("name") or "")
    if node.get("nodeType") == "Name_FullyQualified":
        return "\\" + name
    return name


def _identifier(node: Any) -> str:
    if isinstance(node, dict):
        return str(node.get("name") or "")
    if isinstance(node, str):
        return node
    return ""


def _type_name(node: Any) -> str | None:
    """Render a declared type as written; None when the type is absent."""
    match _node_type(node):
        case "Identifier":
            return _identifier(node)
        case "Name" | "Name_FullyQualified" | "Name_Relative":
            return _name(node)
        case "NullableType":
            inner = _type_name(node.get("type"))
            return f"?{inner}" if inner else None
        case "UnionType":
            return "|".join(t for t in (_type_name(item) for item in _list(node.get("types"))) if t) or None
        case "IntersectionType":
            return "&".join(t for t in (_type_name(item) for item in _list(node.get("types"))) if t) or None
        case _:
            return None


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


def _comments(node: Any) -> tuple[Comment, ...]:
    attributes = node.get("attributes") if isinstance(node, dict) else None
    if not isinstance(attributes, dict):
        return ()
    comments: list[Comment] = []
    for item in _list(attributes.get("comments")):
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            continue
        comments.append(
            Comment(
                text=item["text"],
                line=_int(item.get("line"), default=-1),
                is_doc=item.get("nodeType") == "Comment_Doc",
            )
        )
    return tuple(comments)


def _line(node: Any) -> int:
    attributes = node.get("attributes") if isinstance(node, dict) else None
    if not isinstance(attributes, dict):
        return -1
    return _int(attributes.get("startLine"), default=-1)


def _node_type(node: Any) -> str:
    if isinstance(node, dict) and isinstance(node.get("nodeType"), str):
        return node["nodeType"]
    return ""


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _int(value: Any, default: int = 0) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else default

"""Documentation tree construction.

Turns classified declarations into ClassDoc / FunctionFileDoc records:
member extraction, comment lookup and parsing, default-value rendering and
the member ordering renderers rely on.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from phpdoc_tree.docs_generator.classifier import classify
from phpdoc_tree.docs_generator.comment_parser import parse_comment
from phpdoc_tree.docs_generator.models import (
    NO_CLASS_KEY,
    ClassDoc,
    DocumentationTree,
    FunctionDoc,
    FunctionFileDoc,
    MethodDoc,
    ParamDoc,
    PropertyDoc,
    Visibility,
)
from phpdoc_tree.settings import Settings
from phpdoc_tree.settings import settings as default_settings
from phpdoc_tree.source_tree import load_source_tree
from phpdoc_tree.source_tree.nodes import (
    ClassNode,
    Comment,
    ConstFetchExpr,
    Expr,
    FunctionNode,
    MethodNode,
    Modifier,
    OtherExpr,
    ParamNode,
    PropertyItemNode,
    PropertyNode,
    ScalarExpr,
    SourceTree,
)

CONSTRUCTOR_NAME = "__construct"

_DIGIT_RUNS = re.compile(r"([0-9]+)")


def document_file(path: Path, settings: Settings | None = None) -> DocumentationTree:
    """Load a PHP-Parser JSON dump and build its documentation tree.

    Raises SourceUnavailableError / TreeLoadError when the tree cannot be loaded.
    """
    return build_documentation(load_source_tree(path), settings)


def build_documentation(tree: SourceTree, settings: Settings | None = None) -> DocumentationTree:
    """Build the documentation tree of one source file.

    Classes are keyed by name (last declaration wins). A file without
    classes yields a single FunctionFileDoc under NO_CLASS_KEY.
    """
    config = settings or default_settings
    classification = classify(tree)

    if classification.function_file:
        raw = select_comment(classification.comments, config)
        return {
            NO_CLASS_KEY: document_functions(classification.namespace, raw, classification.functions, config),
        }

    docs: DocumentationTree = {}
    for scoped in classification.classes:
        docs[scoped.node.name] = document_class(scoped.namespace, scoped.node, config)
    return docs


def document_class(namespace: str, node: ClassNode, settings: Settings | None = None) -> ClassDoc:
    """Document a class with its properties (by name) and methods (static first, constructor last)."""
    config = settings or default_settings
    raw = select_comment(node.comments, config)

    properties: dict[str, PropertyDoc] = {}
    methods: dict[str, MethodDoc] = {}
    for member in node.members:
        match member:
            case PropertyNode():
                for item in member.items:
                    prop = _property_doc(member, item, config)
                    properties[prop.name] = prop
            case MethodNode():
                method = _method_doc(member, config)
                methods[method.name] = method
            case _:
                pass

    return ClassDoc(
        name=node.name,
        namespace=namespace,
        raw_comment=raw,
        parsed_comment=parse_comment(raw, settings=config),
        properties=dict(sorted(properties.items(), key=lambda entry: natural_key(entry[0]))),
        methods=dict(sorted(methods.items(), key=lambda entry: method_sort_key(entry[1]))),
    )


def document_functions(
    namespace: str,
    top_level_comment: str,
    nodes: Iterable[FunctionNode],
    settings: Settings | None = None,
) -> FunctionFileDoc:
    """Document free functions in encounter order; no sorting is applied."""
    config = settings or default_settings
    functions: dict[str, FunctionDoc] = {}
    for node in nodes:
        raw = select_comment(node.comments, config)
        functions[node.name] = FunctionDoc(
            name=node.name,
            type=node.return_type or "",
            params=tuple(_param_doc(param) for param in node.params),
            raw_comment=raw,
            parsed_comment=parse_comment(raw, extract_definitions=True, settings=config),
        )

    return FunctionFileDoc(
        namespace=namespace,
        raw_comment=top_level_comment,
        parsed_comment=parse_comment(top_level_comment, extract_definitions=True, settings=config),
        functions=functions,
    )


# ---------------------------------------------------------------------------
# Comments, flags and ordering
# ---------------------------------------------------------------------------


def select_comment(comments: tuple[Comment, ...], settings: Settings | None = None) -> str:
    """Raw text of the comment that documents a node; empty when none is attached."""
    if not comments:
        return ""
    config = settings or default_settings
    chosen = comments[0] if config.comment_selection == "first" else comments[-1]
    return chosen.text


def visibility_of(flags: int) -> Visibility | int:
    """Map modifier bits to a Visibility; without any visibility bit the raw flags are returned."""
    if flags & Modifier.PUBLIC:
        return Visibility.PUBLIC
    if flags & Modifier.PROTECTED:
        return Visibility.PROTECTED
    if flags & Modifier.PRIVATE:
        return Visibility.PRIVATE
    return int(flags)


def natural_key(value: str) -> tuple[tuple[str, int, str], ...]:
    """Sort key comparing ASCII digit runs numerically and everything else by character."""
    return tuple(("0", int(part), part) if part.isascii() and part.isdigit() else (part, 0, "") for part in _DIGIT_RUNS.split(value) if part)


def method_sort_key(method: MethodDoc) -> tuple[bool, bool, tuple[tuple[str, int, str], ...]]:
    """Constructor last, then static before instance methods, then natural name order."""
    return (method.name == CONSTRUCTOR_NAME, not method.is_static, natural_key(method.name))


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


def _property_doc(statement: PropertyNode, item: PropertyItemNode, config: Settings) -> PropertyDoc:
    raw = select_comment(item.comments or statement.comments, config)
    return PropertyDoc(
        name=item.name,
        type=statement.type_name or "",
        default=_property_default(item.default),
        visibility=visibility_of(statement.flags),
        is_static=bool(statement.flags & Modifier.STATIC),
        raw_comment=raw,
        parsed_comment=parse_comment(raw, settings=config),
    )


def _method_doc(node: MethodNode, config: Settings) -> MethodDoc:
    raw = select_comment(node.comments, config)
    return MethodDoc(
        name=node.name,
        type=node.return_type or "",
        visibility=visibility_of(node.flags),
        is_static=bool(node.flags & Modifier.STATIC),
        is_abstract=bool(node.flags & Modifier.ABSTRACT),
        is_final=bool(node.flags & Modifier.FINAL),
        params=tuple(_param_doc(param) for param in node.params),
        raw_comment=raw,
        parsed_comment=parse_comment(raw, extract_definitions=True, settings=config),
    )


def _param_doc(param: ParamNode) -> ParamDoc:
    return ParamDoc(
        type=param.type_name or "",
        name=param.name,
        default=_param_default(param.default),
        by_ref=param.by_ref,
        variadic=param.variadic,
    )


def _property_default(expr: Expr | None) -> str:
    """Literal value, constant name, or the expression kind label (Expr_Array -> Array)."""
    match expr:
        case None:
            return ""
        case ScalarExpr(value=value):
            return _scalar_repr(value)
        case ConstFetchExpr(name=name):
            return name
        case OtherExpr(kind=kind):
            return kind.rsplit("_", 1)[-1]


def _param_default(expr: Expr | None) -> str:
    """Only literals and bare constants resolve; anything else is empty."""
    match expr:
        case ScalarExpr(value=value):
            return _scalar_repr(value)
        case ConstFetchExpr(name=name):
            return name
        case _:
            return ""


def _scalar_repr(value: str | int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

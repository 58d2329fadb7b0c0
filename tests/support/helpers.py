"""Builders for source tree nodes and doc comment text used across tests."""

from phpdoc_tree.source_tree.nodes import (
    ClassNode,
    Comment,
    Expr,
    FunctionNode,
    MethodNode,
    Modifier,
    ParamNode,
    PropertyItemNode,
    PropertyNode,
)


def doc(*lines: str, indent: str = " ") -> str:
    """Render a `/** ... */` comment with one ` * ` prefixed line per argument."""
    body = "".join(f"{indent}* {line}\n" if line else f"{indent}*\n" for line in lines)
    return f"/**\n{body}{indent}*/"


def comments(*texts: str) -> tuple[Comment, ...]:
    return tuple(Comment(text=text, is_doc=text.startswith("/**")) for text in texts)


def method(name: str, flags: int = Modifier.PUBLIC, comment: str | None = None, **kwargs) -> MethodNode:
    return MethodNode(name=name, flags=flags, comments=comments(comment) if comment else (), **kwargs)


def prop(name: str, default: Expr | None = None, flags: int = Modifier.PUBLIC, comment: str | None = None) -> PropertyNode:
    return PropertyNode(
        items=(PropertyItemNode(name=name, default=default),),
        flags=flags,
        comments=comments(comment) if comment else (),
    )


def cls(name: str, *members, comment: str | None = None) -> ClassNode:
    return ClassNode(name=name, members=tuple(members), comments=comments(comment) if comment else ())


def func(name: str, *params: ParamNode, comment: str | None = None, return_type: str | None = None) -> FunctionNode:
    return FunctionNode(name=name, params=params, return_type=return_type, comments=comments(comment) if comment else ())

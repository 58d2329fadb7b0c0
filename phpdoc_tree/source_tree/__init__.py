"""Typed PHP syntax tree and its loader.

The PHP parser itself is external; this package models the node kinds the
documentation generator consumes and loads them from PHP-Parser JSON dumps.
"""

from phpdoc_tree.source_tree.nodes import (
    ClassMember,
    ClassNode,
    Comment,
    ConstFetchExpr,
    Expr,
    FunctionNode,
    MethodNode,
    Modifier,
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
from phpdoc_tree.source_tree.php_parser_json import build_source_tree, load_source_tree

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
    "build_source_tree",
    "load_source_tree",
]

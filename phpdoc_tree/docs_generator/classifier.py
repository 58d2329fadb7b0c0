"""Top-level classification of a source tree.

Finds the enclosing namespace and picks the declarations to document:
every class, or every free function when the file has no class at all.
"""

from dataclasses import dataclass

from phpdoc_tree.source_tree.nodes import (
    ClassNode,
    Comment,
    FunctionNode,
    NamespaceNode,
    OtherNode,
    SourceTree,
    Statement,
)

# Statements that may precede the namespace: declare(...) directives and
# inline HTML such as a shebang line before the opening tag.
PRELUDE_KINDS = frozenset({"Stmt_Declare", "Stmt_InlineHTML"})


@dataclass(frozen=True, slots=True)
class ScopedClass:
    namespace: str
    node: ClassNode


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classify().

    `classes` is empty in function-file mode; `functions` is empty otherwise.
    `comments` are the raw comments attached to the first namespace statement.
    """

    namespace: str
    comments: tuple[Comment, ...]
    classes: tuple[ScopedClass, ...]
    functions: tuple[FunctionNode, ...]

    @property
    def function_file(self) -> bool:
        return not self.classes


def classify(tree: SourceTree) -> Classification:
    """Bucket the declarations of a source tree.

    When the first statement (after `declare(...)` and inline HTML) is a namespace,
    every top-level namespace block is walked and each class keeps the name
    of its own block. Otherwise the top-level statement list is walked with
    an empty namespace. Free functions are only collected when no class exists.
    """
    statements = [stmt for stmt in tree.statements if not _is_prelude(stmt)]
    first = statements[0] if statements else None

    blocks: list[tuple[str, tuple[Statement, ...]]]
    if isinstance(first, NamespaceNode):
        namespace = first.name
        comments = first.comments
        blocks = [(stmt.name, stmt.statements) for stmt in statements if isinstance(stmt, NamespaceNode)]
    else:
        namespace = ""
        comments = ()
        blocks = [("", tuple(statements))]

    classes = tuple(ScopedClass(ns, stmt) for ns, body in blocks for stmt in body if isinstance(stmt, ClassNode))
    functions: tuple[FunctionNode, ...] = ()
    if not classes:
        functions = tuple(stmt for _, body in blocks for stmt in body if isinstance(stmt, FunctionNode))

    return Classification(namespace=namespace, comments=comments, classes=classes, functions=functions)


def _is_prelude(stmt: Statement) -> bool:
    return isinstance(stmt, OtherNode) and stmt.kind in PRELUDE_KINDS

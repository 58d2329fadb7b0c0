from phpdoc_tree.docs_generator.classifier import classify
from phpdoc_tree.source_tree.nodes import NamespaceNode, OtherNode, SourceTree
from tests.support.helpers import cls, comments, doc, func


def test_namespace_first_statement_sets_namespace_and_comment():
    ns_comment = doc("Models of the app.")
    tree = SourceTree(
        statements=(
            NamespaceNode(
                name="App\\Models",
                statements=(cls("User"), cls("Group")),
                comments=comments(ns_comment),
            ),
        )
    )
    result = classify(tree)
    assert result.namespace == "App\\Models"
    assert result.comments[0].text == ns_comment
    assert [c.node.name for c in result.classes] == ["User", "Group"]
    assert all(c.namespace == "App\\Models" for c in result.classes)
    assert result.function_file is False


def test_without_namespace_walks_top_level():
    tree = SourceTree(statements=(OtherNode(kind="Stmt_Use"), cls("Foo"), cls("Bar")))
    result = classify(tree)
    assert result.namespace == ""
    assert result.comments == ()
    assert [c.node.name for c in result.classes] == ["Foo", "Bar"]
    assert [c.namespace for c in result.classes] == ["", ""]


def test_classes_take_precedence_over_functions():
    tree = SourceTree(statements=(func("helper"), cls("Foo"), func("other")))
    result = classify(tree)
    assert [c.node.name for c in result.classes] == ["Foo"]
    assert result.functions == ()


def test_function_file_mode_keeps_encounter_order():
    tree = SourceTree(statements=(func("first"), OtherNode(kind="Stmt_Expression"), func("second")))
    result = classify(tree)
    assert result.function_file is True
    assert [f.name for f in result.functions] == ["first", "second"]


def test_function_file_mode_inside_namespace():
    tree = SourceTree(statements=(NamespaceNode(name="Lib", statements=(func("a"), func("b"))),))
    result = classify(tree)
    assert result.function_file is True
    assert result.namespace == "Lib"
    assert [f.name for f in result.functions] == ["a", "b"]


def test_empty_file_is_function_file_without_functions():
    result = classify(SourceTree(statements=()))
    assert result.function_file is True
    assert result.functions == ()
    assert result.namespace == ""


def test_leading_declare_is_skipped():
    tree = SourceTree(
        statements=(
            OtherNode(kind="Stmt_Declare"),
            NamespaceNode(name="App", statements=(cls("Foo"),)),
        )
    )
    result = classify(tree)
    assert result.namespace == "App"
    assert [c.node.name for c in result.classes] == ["Foo"]


def test_leading_shebang_html_is_skipped():
    tree = SourceTree(
        statements=(
            OtherNode(kind="Stmt_InlineHTML"),
            OtherNode(kind="Stmt_Declare"),
            NamespaceNode(name="App\\Cli", statements=(cls("Runner"),)),
        )
    )
    result = classify(tree)
    assert result.namespace == "App\\Cli"
    assert not result.function_file
    assert [c.node.name for c in result.classes] == ["Runner"]


def test_each_namespace_block_keeps_its_name():
    tree = SourceTree(
        statements=(
            NamespaceNode(name="App\\One", statements=(cls("A"),)),
            NamespaceNode(name="App\\Two", statements=(cls("B"),)),
        )
    )
    result = classify(tree)
    assert result.namespace == "App\\One"
    assert [(c.namespace, c.node.name) for c in result.classes] == [("App\\One", "A"), ("App\\Two", "B")]


def test_classes_nested_in_other_statements_are_ignored():
    tree = SourceTree(statements=(OtherNode(kind="Stmt_If"), func("only")))
    result = classify(tree)
    assert result.classes == ()
    assert [f.name for f in result.functions] == ["only"]

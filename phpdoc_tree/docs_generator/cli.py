"""CLI for building documentation trees from PHP-Parser JSON dumps."""

import argparse
import json
import sys
from pathlib import Path

from phpdoc_tree.docs_generator.documenter import document_file
from phpdoc_tree.docs_generator.models import dump_tree
from phpdoc_tree.exceptions import PhpDocTreeError
from phpdoc_tree.logging import get_pipeline_logger
from phpdoc_tree.settings import Settings
from phpdoc_tree.source_tree import load_source_tree
from phpdoc_tree.source_tree.nodes import (
    ClassNode,
    FunctionNode,
    MethodNode,
    NamespaceNode,
    OtherNode,
    PropertyNode,
    SourceTree,
    Statement,
)

logger = get_pipeline_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Entry point with build/dump subcommands."""
    parser = argparse.ArgumentParser(description="PHP API documentation tree generator")
    parser.add_argument(
        "--comment-selection",
        choices=("first", "last"),
        help="Which attached comment documents a declaration (default from settings)",
    )
    subparsers = parser.add_subparsers(dest="command")
    build_parser = subparsers.add_parser("build", help="Print the documentation tree as JSON")
    build_parser.add_argument("source", type=Path, help="JSON dump written by php-parse --json-dump")
    build_parser.add_argument("-o", "--output", type=Path, help="Write JSON here instead of stdout")
    dump_parser = subparsers.add_parser("dump", help="Print an outline of the loaded syntax tree")
    dump_parser.add_argument("source", type=Path, help="JSON dump written by php-parse --json-dump")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    settings = Settings(comment_selection=args.comment_selection) if args.comment_selection else None

    if args.command == "build":
        return _run_build(args.source, args.output, settings)
    return _run_dump(args.source)


def _run_build(source: Path, output: Path | None, settings: Settings | None) -> int:
    """Build the tree and write it as JSON; a load failure is reported, never rendered as empty."""
    try:
        tree = document_file(source, settings)
    except PhpDocTreeError as e:
        print(f"FAIL: could not process {source}: {e}", file=sys.stderr)
        return 1

    content = json.dumps(dump_tree(tree), indent=2, ensure_ascii=False) + "\n"
    if output is None:
        sys.stdout.write(content)
    else:
        try:
            output.write_text(content, encoding="utf-8")
        except OSError as e:
            print(f"FAIL: could not write {output}: {e}", file=sys.stderr)
            return 1
        logger.info("Wrote %d declarations to %s", len(tree), output)
    return 0


def _run_dump(source: Path) -> int:
    """Debugging aid: print the node kinds, names and lines of the loaded tree."""
    try:
        tree = load_source_tree(source)
    except PhpDocTreeError as e:
        print(f"FAIL: could not process {source}: {e}", file=sys.stderr)
        return 1

    print("\n".join(render_outline(tree)))
    return 0


def render_outline(tree: SourceTree) -> list[str]:
    """One line per node, indented by depth."""
    lines: list[str] = []
    for stmt in tree.statements:
        _outline_statement(stmt, 0, lines)
    return lines


def _outline_statement(stmt: Statement, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    match stmt:
        case NamespaceNode():
            lines.append(f"{indent}namespace {stmt.name or '(global)'} @{stmt.line}")
            for child in stmt.statements:
                _outline_statement(child, depth + 1, lines)
        case ClassNode():
            lines.append(f"{indent}class {stmt.name} @{stmt.line}")
            for member in stmt.members:
                lines.append(f"{indent}  {_outline_member(member)}")
        case FunctionNode():
            lines.append(f"{indent}function {stmt.name}() @{stmt.line}")
        case OtherNode():
            lines.append(f"{indent}{stmt.kind or '?'} @{stmt.line}")


def _outline_member(member: PropertyNode | MethodNode | OtherNode) -> str:
    match member:
        case PropertyNode():
            names = ", ".join(f"${item.name}" for item in member.items)
            return f"property {names} flags={member.flags} @{member.line}"
        case MethodNode():
            return f"method {member.name}() flags={member.flags} @{member.line}"
        case OtherNode():
            return f"{member.kind or '?'} @{member.line}"

"""phpdoc-tree - documentation trees from parsed PHP source.

@public

Builds a slim, renderer-ready documentation tree (namespace, classes,
properties, methods, free functions and their parsed doc comments) from the
syntax tree of one PHP file. Rendering is left to templates.

Quick Start:
    >>> from pathlib import Path
    >>> from phpdoc_tree import document_file
    >>>
    >>> # php-parse --json-dump Module.php > Module.json
    >>> tree = document_file(Path("Module.json"))
    >>> for name, record in tree.items():
    ...     print(name, record.kind)

Environment Variables:
    - PHPDOC_TREE_COMMENT_SELECTION: "last" (default) or "first"
    - PHPDOC_TREE_LOG_LEVEL: log level for the phpdoc_tree logger
"""

from phpdoc_tree.docs_generator import (
    NO_CLASS_KEY,
    ClassDoc,
    DocumentationTree,
    FunctionDoc,
    FunctionFileDoc,
    MethodDoc,
    ParamDoc,
    ParsedComment,
    PropertyDoc,
    Visibility,
    build_documentation,
    document_file,
    dump_tree,
    parse_comment,
)
from phpdoc_tree.exceptions import PhpDocTreeError, SourceUnavailableError, TreeLoadError
from phpdoc_tree.logging import get_pipeline_logger, setup_logging
from phpdoc_tree.settings import Settings, settings
from phpdoc_tree.source_tree import SourceTree, build_source_tree, load_source_tree

__version__ = "0.1.0"

__all__ = [
    "NO_CLASS_KEY",
    "ClassDoc",
    "DocumentationTree",
    "FunctionDoc",
    "FunctionFileDoc",
    "MethodDoc",
    "ParamDoc",
    "ParsedComment",
    "PhpDocTreeError",
    "PropertyDoc",
    "Settings",
    "SourceTree",
    "SourceUnavailableError",
    "TreeLoadError",
    "Visibility",
    "build_documentation",
    "build_source_tree",
    "document_file",
    "dump_tree",
    "get_pipeline_logger",
    "load_source_tree",
    "parse_comment",
    "settings",
    "setup_logging",
]

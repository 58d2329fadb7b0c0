"""PHP API documentation tree generator.

Walks a parsed PHP syntax tree, documents its classes (or its free functions
when there are none) and parses their doc comments into structured records
for a template renderer.
"""

from phpdoc_tree.docs_generator.classifier import Classification, ScopedClass, classify
from phpdoc_tree.docs_generator.comment_parser import is_doc_comment, parse_comment, strip_decoration
from phpdoc_tree.docs_generator.documenter import (
    CONSTRUCTOR_NAME,
    build_documentation,
    document_class,
    document_file,
    document_functions,
    method_sort_key,
    natural_key,
    select_comment,
    visibility_of,
)
from phpdoc_tree.docs_generator.models import (
    NO_CLASS_KEY,
    ClassDoc,
    DeclarationDoc,
    DocumentationTree,
    FunctionDoc,
    FunctionFileDoc,
    MethodDoc,
    ParamDoc,
    ParamTag,
    ParsedComment,
    PropertyDoc,
    ReturnTag,
    Visibility,
    dump_tree,
)

__all__ = [
    "CONSTRUCTOR_NAME",
    "NO_CLASS_KEY",
    "ClassDoc",
    "Classification",
    "DeclarationDoc",
    "DocumentationTree",
    "FunctionDoc",
    "FunctionFileDoc",
    "MethodDoc",
    "ParamDoc",
    "ParamTag",
    "ParsedComment",
    "PropertyDoc",
    "ReturnTag",
    "ScopedClass",
    "Visibility",
    "build_documentation",
    "classify",
    "document_class",
    "document_file",
    "document_functions",
    "dump_tree",
    "is_doc_comment",
    "method_sort_key",
    "natural_key",
    "parse_comment",
    "select_comment",
    "strip_decoration",
    "visibility_of",
]

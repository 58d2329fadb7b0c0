"""Documentation tree records handed to renderers.

All records are frozen pydantic models. A DocumentationTree maps declaration
names to ClassDoc records, or holds a single FunctionFileDoc under NO_CLASS_KEY
when the file declares no classes.
"""

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

NO_CLASS_KEY = "NOCLASS"


class Visibility(StrEnum):
    """Member visibility. Members without any visibility bit keep their raw flag integer instead."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class ReturnTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    text: str = ""


class ParamTag(BaseModel):
    """An `@param` tag; name keeps its leading `$`."""

    model_config = ConfigDict(frozen=True)

    type: str
    name: str = ""
    text: str = ""


class ParsedComment(BaseModel):
    """Structured content of a doc comment."""

    model_config = ConfigDict(frozen=True)

    summary: str = ""
    description: str = ""
    returns: ReturnTag | None = None
    params: tuple[ParamTag, ...] = ()
    todo: tuple[str, ...] = ()


class ParamDoc(BaseModel):
    """A declared parameter; name is given without the `$` sigil."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    name: str
    default: str = ""
    by_ref: bool = False
    variadic: bool = False


class PropertyDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    default: str = ""
    visibility: Visibility | int = Visibility.PUBLIC
    is_static: bool = False
    raw_comment: str = ""
    parsed_comment: ParsedComment | None = None


class FunctionDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    params: tuple[ParamDoc, ...] = ()
    raw_comment: str = ""
    parsed_comment: ParsedComment | None = None


class MethodDoc(FunctionDoc):
    visibility: Visibility | int = Visibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False
    is_final: bool = False


class ClassDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: str
    namespace: str = ""
    raw_comment: str = ""
    parsed_comment: ParsedComment | None = None
    properties: dict[str, PropertyDoc] = Field(default_factory=dict)
    methods: dict[str, MethodDoc] = Field(default_factory=dict)


class FunctionFileDoc(BaseModel):
    """Record for a file without classes; documents its free functions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["functions"] = "functions"
    namespace: str = ""
    raw_comment: str = ""
    parsed_comment: ParsedComment | None = None
    functions: dict[str, FunctionDoc] = Field(default_factory=dict)


DeclarationDoc = Annotated[ClassDoc | FunctionFileDoc, Field(discriminator="kind")]
DocumentationTree = dict[str, DeclarationDoc]

_TREE_ADAPTER: TypeAdapter[DocumentationTree] = TypeAdapter(DocumentationTree)


def dump_tree(tree: DocumentationTree) -> dict[str, Any]:
    """Serialize a DocumentationTree to JSON-compatible data, keeping key order."""
    return _TREE_ADAPTER.dump_python(tree, mode="json")


__all__ = [
    "NO_CLASS_KEY",
    "ClassDoc",
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
    "Visibility",
    "dump_tree",
]

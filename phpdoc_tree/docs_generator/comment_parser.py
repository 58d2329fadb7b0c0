"""Doc-comment parsing.

Turns the raw text of a `/** ... */` comment into a ParsedComment: the
summary line, the free-text description, and (on request) the `@param`,
`@return` and `@todo` tags. Pure text processing; no I/O and no logging.
"""

import re
from functools import lru_cache

from phpdoc_tree.docs_generator.models import ParamTag, ParsedComment, ReturnTag
from phpdoc_tree.settings import Settings
from phpdoc_tree.settings import settings as default_settings

_DOC_COMMENT_OPEN = re.compile(r"^\s*/\*{2}")
_LINE_BREAKS = re.compile(r"[\r\n]+")
_DECORATION = re.compile(r"^\s+\* ")
_DECORATION_ONLY = re.compile(r"^\s+\*\s*$")

_PARAM_TAG = re.compile(r"^\s*@param\s+(\S+)(?:\s+)?(\$\S+)?(?:\s+)?(.*)$")
_RETURN_TAG = re.compile(r"^\s*@return\s+(\S+)(?:\s+)?(.*)$")
_TODO_TAG = re.compile(r"^\s*@todo:?\s?(.*)$")
_ANY_TAG = re.compile(r"^\s*@")


def is_doc_comment(raw: str) -> bool:
    """True when the comment opens with `/**` after optional whitespace."""
    return bool(_DOC_COMMENT_OPEN.match(raw))


def parse_comment(
    raw: str,
    extract_definitions: bool = False,
    settings: Settings | None = None,
) -> ParsedComment | None:
    """Parse a raw comment; None when it is not a doc comment.

    With extract_definitions the recognized tags are moved into `params`,
    `returns` and `todo`. Either way no `@` line survives in the description.
    """
    if not is_doc_comment(raw):
        return None
    config = settings or default_settings

    ignored = _compile_patterns(config.ignored_line_patterns)
    lines = [line for line in strip_decoration(raw) if not _matches_any(line, ignored)]
    lines = _drop_leading_blank(lines)

    summary = lines[0] if lines else ""
    body = lines[1:]

    params: list[ParamTag] = []
    returns: ReturnTag | None = None
    todo: list[str] = []
    if extract_definitions:
        notes = _compile_patterns(config.dropped_note_patterns)
        kept: list[str] = []
        for line in body:
            if match := _PARAM_TAG.match(line):
                params.append(ParamTag(type=match[1], name=match[2] or "", text=match[3] or ""))
            elif match := _RETURN_TAG.match(line):
                returns = ReturnTag(type=match[1], text=match[2] or "")
            elif match := _TODO_TAG.match(line):
                todo.append(match[1] or "")
            elif _ANY_TAG.match(line) or _matches_any(line, notes):
                continue
            else:
                kept.append(line)
        body = kept
    else:
        body = [line for line in body if not _ANY_TAG.match(line)]

    body = _drop_trailing_blank(_drop_leading_blank(body))

    return ParsedComment(
        summary=summary,
        description="\n".join(body),
        returns=returns,
        params=tuple(params),
        todo=tuple(todo),
    )


def strip_decoration(raw: str) -> list[str]:
    """Content lines of a block comment with the `* ` prefixes removed.

    The opening and closing physical lines are delimiters and are dropped.
    Lines holding nothing but a `*` become empty strings.
    """
    lines = [_DECORATION.sub("", line, count=1) for line in _LINE_BREAKS.split(raw)]
    return ["" if _DECORATION_ONLY.match(line) else line for line in lines[1:-1]]


@lru_cache(maxsize=32)
def _compile_patterns(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"^\s*(?:{pattern})") for pattern in patterns)


def _matches_any(line: str, patterns: tuple[re.Pattern[str], ...]) -> bool:
    return any(pattern.match(line) for pattern in patterns)


def _drop_leading_blank(lines: list[str]) -> list[str]:
    start = 0
    while start < len(lines) and lines[start] == "":
        start += 1
    return lines[start:]


def _drop_trailing_blank(lines: list[str]) -> list[str]:
    end = len(lines)
    while end > 0 and lines[end - 1] == "":
        end -= 1
    return lines[:end]

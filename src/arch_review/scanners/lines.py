"""Lexical classification of source lines.

Only one bit of state crosses lines: whether a ``/* ... */`` block is open.
Comment markers inside string or regex literals are not recognised as such.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


class LineKind(str, Enum):
    BLANK = "blank"
    IGNORED_DIRECTIVE = "ignored-directive"
    STRING_DIRECTIVE = "string-directive"
    BLOCK_COMMENT_OPEN = "block-comment-open"
    BLOCK_COMMENT_CLOSE = "block-comment-close"
    BLOCK_COMMENT_BODY = "block-comment-body"
    DOC_COMMENT = "doc-comment"
    LINE_COMMENT = "line-comment"
    INLINE_TRAILING_COMMENT = "inline-trailing-comment"
    CODE = "code"


@dataclass(frozen=True)
class ClassifiedLine:
    index: int
    kind: LineKind
    text: str
    # For BLOCK_COMMENT_* lines, the index of the line that opened the block.
    block_start: int | None = None

    @property
    def block_length(self) -> int:
        if self.block_start is None:
            return 1
        return self.index - self.block_start + 1


TOOL_PRAGMA = re.compile(r"^\s*/[/*]\s*(eslint|@ts-|prettier|istanbul|c8|vitest|jest)")
USE_DIRECTIVE = re.compile(r"""^['"]use (client|server)['"]""")
DOC_OPEN = re.compile(r"^\s*/\*\*")
URL = re.compile(r"https?://")
TRAILING_COMMENT = re.compile(r"\S+.*//\s*\S")
LINE_COMMENT_PREFIX = re.compile(r"^\s*//\s?")
TAGGED_MARKER = re.compile(r"//\s*(todo|fixme|hack|xxx|bug|note)\b", re.IGNORECASE)

COMMENTED_CODE_PATTERNS = [
    re.compile(
        r"^(const|let|var|function|class|import|export|return|if|else|for|while|switch|case"
        r"|break|continue|throw|try|catch|finally|await|async)\b"
    ),
    re.compile(r"^\w+\s*[=!<>]+"),
    re.compile(r"^\w+\.\w+\s*\("),
    re.compile(r"^</?[A-Z]"),
    re.compile(r"^[}\]);]+\s*$"),
    re.compile(r"^[{\[(]+\s*$"),
    re.compile(r"^\w+\s*:\s*\w"),
    re.compile(r"=>\s*\{?\s*$"),
]


def looks_like_commented_code(line: str) -> bool:
    stripped = LINE_COMMENT_PREFIX.sub("", line, count=1).strip()
    return len(stripped) > 2 and any(pattern.search(stripped) for pattern in COMMENTED_CODE_PATTERNS)


def tagged_marker(line: str) -> str | None:
    """Return the upper-cased annotation word of a ``// TODO``-style comment."""
    match = TAGGED_MARKER.search(line)
    if match is None:
        return None
    return match.group(1).upper()


def classify_lines(lines: Sequence[str]) -> Iterator[ClassifiedLine]:
    in_block = False
    block_start = -1
    index = 0
    total = len(lines)

    while index < total:
        raw = lines[index]
        trimmed = raw.strip()

        if TOOL_PRAGMA.search(raw):
            yield ClassifiedLine(index, LineKind.IGNORED_DIRECTIVE, raw)
            index += 1
            continue

        if USE_DIRECTIVE.search(trimmed):
            yield ClassifiedLine(index, LineKind.STRING_DIRECTIVE, raw)
            index += 1
            continue

        if not in_block and "/*" in trimmed and "/**" not in trimmed:
            block_start = index
            if "*/" in trimmed:
                yield ClassifiedLine(index, LineKind.BLOCK_COMMENT_CLOSE, raw, block_start)
            else:
                in_block = True
                yield ClassifiedLine(index, LineKind.BLOCK_COMMENT_OPEN, raw, block_start)
            index += 1
            continue

        if in_block:
            if "*/" in trimmed:
                in_block = False
                yield ClassifiedLine(index, LineKind.BLOCK_COMMENT_CLOSE, raw, block_start)
            else:
                yield ClassifiedLine(index, LineKind.BLOCK_COMMENT_BODY, raw, block_start)
            index += 1
            continue

        if DOC_OPEN.search(raw):
            while index < total:
                closing = "*/" in lines[index]
                yield ClassifiedLine(index, LineKind.DOC_COMMENT, lines[index])
                index += 1
                if closing:
                    break
            continue

        yield ClassifiedLine(index, _classify_plain(trimmed), raw)
        index += 1


def _classify_plain(trimmed: str) -> LineKind:
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith("//"):
        return LineKind.LINE_COMMENT
    if TRAILING_COMMENT.search(trimmed) and not URL.search(trimmed):
        return LineKind.INLINE_TRAILING_COMMENT
    return LineKind.CODE

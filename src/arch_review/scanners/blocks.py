"""Bracket-depth helpers shared by the rules.

Brackets are counted without regard to kind or to string and comment
contents: ``{`` closed by ``)`` still ends a block.
"""

from __future__ import annotations

import re
from typing import Sequence

from arch_review.models import BlockSpan


OPENERS = frozenset("{[(")
CLOSERS = frozenset("}])")

CATCH_PATTERN = re.compile(r"\bcatch\s*\(")
TRY_PATTERN = re.compile(r"\btry\s*\{")


def find_block_end(lines: Sequence[str], start: int) -> int:
    """Return the index of the line where the block opened at ``start`` closes.

    Depth goes up on any opener and down on any closer. The first line after
    which a block has been opened and depth is back at zero or below is the
    end. Without such a line the last line of the file is returned.
    """
    depth = 0
    started = False
    for index in range(start, len(lines)):
        for char in lines[index]:
            if char in OPENERS:
                depth += 1
                started = True
            elif char in CLOSERS:
                depth -= 1
        if started and depth <= 0:
            return index
    return max(start, len(lines) - 1)


def block_span(lines: Sequence[str], start: int) -> BlockSpan:
    return BlockSpan(start=start, end=find_block_end(lines, start))


def block_text(lines: Sequence[str], span: BlockSpan) -> str:
    return "\n".join(lines[span.start : span.end + 1])


def is_inside_catch_block(lines: Sequence[str], index: int) -> bool:
    """Walk backwards from ``index`` to the nearest try/catch at the same depth."""
    depth = 0
    for cursor in range(index, -1, -1):
        line = lines[cursor]
        depth += line.count("}")
        depth -= line.count("{")
        if CATCH_PATTERN.search(line) and depth <= 0:
            return True
        if TRY_PATTERN.search(line) and depth <= 0:
            return False
    return False

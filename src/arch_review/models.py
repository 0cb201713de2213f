from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any


def split_lines(text: str) -> tuple[str, ...]:
    """Split on line feeds only, the way git numbers lines; a final newline adds no line."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


class Severity(str, Enum):
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class RuleConfig:
    max_file_lines: int = 200
    max_function_lines: int = 30
    max_constant_lines: int = 10
    max_jsx_lines: int = 50
    max_state_count: int = 4
    max_params: int = 3
    max_comments_to_flag: int = 15
    max_type_lines: int = 5
    max_effect_hooks: int = 3

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class SourceFile:
    path: str
    text: str
    lines: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", split_lines(self.text))


@dataclass(frozen=True)
class BlockSpan:
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class Finding:
    line: int
    message: str
    severity: Severity
    category: str

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["severity"] = self.severity.value
        return payload

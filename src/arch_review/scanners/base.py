from __future__ import annotations

import re
from abc import ABC, abstractmethod

from arch_review.models import Finding, RuleConfig, Severity, SourceFile


class Rule(ABC):
    name: str = ""
    categories: tuple[str, ...] = ()

    def __init__(self, config: RuleConfig):
        self.config = config

    @abstractmethod
    def evaluate(self, source: SourceFile) -> list[Finding]:
        raise NotImplementedError


def warn(line: int, category: str, message: str) -> Finding:
    return Finding(line=line, message=message, severity=Severity.WARN, category=category)


def kebab_case(name: str) -> str:
    return re.sub(r"([a-z])([A-Z])", r"\1-\2", name).lower()


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]

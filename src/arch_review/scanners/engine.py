from __future__ import annotations

import logging
from typing import Iterable, Sequence

from arch_review.models import Finding, RuleConfig, SourceFile
from arch_review.scanners.api import FetchDirectRule, QueryClientRule
from arch_review.scanners.base import Rule
from arch_review.scanners.code_quality import ConsoleCallsRule, FileSizeRule, UnusedImportsRule
from arch_review.scanners.comments import CommentsRule
from arch_review.scanners.functions import (
    DuplicateTryBlocksRule,
    LongFunctionsRule,
    RepetitiveHandlersRule,
    TooManyParamsRule,
)
from arch_review.scanners.hooks import HookExtractionRule, HookPlacementRule, StateCountRule
from arch_review.scanners.organization import (
    AtomicDesignRule,
    ConstantsRule,
    InlineTypesRule,
    JsxSizeRule,
    MultipleComponentsRule,
)


logger = logging.getLogger(__name__)

RULE_TYPES: tuple[type[Rule], ...] = (
    FileSizeRule,
    CommentsRule,
    UnusedImportsRule,
    ConsoleCallsRule,
    ConstantsRule,
    MultipleComponentsRule,
    InlineTypesRule,
    JsxSizeRule,
    AtomicDesignRule,
    LongFunctionsRule,
    RepetitiveHandlersRule,
    TooManyParamsRule,
    DuplicateTryBlocksRule,
    HookPlacementRule,
    HookExtractionRule,
    StateCountRule,
    QueryClientRule,
    FetchDirectRule,
)


def rule_names() -> list[str]:
    return [rule_type.name for rule_type in RULE_TYPES]


def build_rules(config: RuleConfig | None = None, *, disabled: Iterable[str] = ()) -> list[Rule]:
    config = config or RuleConfig()
    disabled_names = set(disabled)
    unknown = sorted(disabled_names - set(rule_names()))
    if unknown:
        raise ValueError(f"Unknown rule names: {', '.join(unknown)}")
    return [rule_type(config) for rule_type in RULE_TYPES if rule_type.name not in disabled_names]


class Scanner:
    def __init__(self, rules: Sequence[Rule]):
        self.rules = list(rules)

    def scan(self, path: str, content: str) -> list[Finding]:
        source = SourceFile(path=path, text=content)
        findings: list[Finding] = []
        for rule in self.rules:
            produced = rule.evaluate(source)
            if produced:
                logger.debug("%s: rule %s produced %d finding(s)", path, rule.name, len(produced))
            findings.extend(produced)
        return findings


def scan(
    path: str,
    content: str,
    config: RuleConfig | None = None,
    rules: Sequence[Rule] | None = None,
) -> list[Finding]:
    scanner = Scanner(rules if rules is not None else build_rules(config))
    return scanner.scan(path, content)

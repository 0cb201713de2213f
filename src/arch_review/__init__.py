from arch_review.models import BlockSpan, Finding, RuleConfig, Severity, SourceFile
from arch_review.scanners import scan

__all__ = ["BlockSpan", "Finding", "RuleConfig", "Severity", "SourceFile", "scan"]

from arch_review.scanners.base import Rule
from arch_review.scanners.engine import RULE_TYPES, Scanner, build_rules, rule_names, scan

__all__ = ["RULE_TYPES", "Rule", "Scanner", "build_rules", "rule_names", "scan"]

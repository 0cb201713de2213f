from __future__ import annotations

from arch_review.models import Finding, SourceFile
from arch_review.scanners.base import Rule, warn
from arch_review.scanners.lines import (
    ClassifiedLine,
    LineKind,
    classify_lines,
    looks_like_commented_code,
    tagged_marker,
)


SELF_DOCUMENTING_HINT = (
    "Tip: if the code needs a comment to be understood, it can probably be simpler. "
    "Descriptive variable and function names are the best documentation."
)


class CommentsRule(Rule):
    """Flags comments, commented-out code, tag markers and trailing comments.

    The number of findings per file is capped at ``max_comments_to_flag``;
    the cap is local to each ``evaluate`` call.
    """

    name = "comments"
    categories = ("comment", "commented-code", "todo-comment", "inline-comment")

    def evaluate(self, source: SourceFile) -> list[Finding]:
        findings: list[Finding] = []
        remaining = self.config.max_comments_to_flag

        for item in classify_lines(source.lines):
            finding = self._finding_for(item)
            if finding is None or remaining <= 0:
                continue
            findings.append(finding)
            remaining -= 1

        return findings

    def _finding_for(self, item: ClassifiedLine) -> Finding | None:
        if item.kind is LineKind.BLOCK_COMMENT_CLOSE:
            if item.block_start == item.index:
                return warn(
                    item.index + 1,
                    "comment",
                    "**Comment detected**: we favour self-documenting code.\n\n" + SELF_DOCUMENTING_HINT,
                )
            return warn(
                item.block_start + 1,
                "comment",
                f"**Comment block ({item.block_length} lines)**: long comments usually point at "
                "code that is too complex.\n\n"
                "Tip: simplify the logic or extract it into a well-named function. "
                "API documentation belongs in JSDoc next to the types.",
            )

        if item.kind is LineKind.LINE_COMMENT:
            if looks_like_commented_code(item.text):
                return warn(
                    item.index + 1,
                    "commented-code",
                    "**Commented-out code detected**: never leave commented code in a PR.\n\n"
                    "Tip: if it is not used, delete it. Git keeps the history.",
                )
            tag = tagged_marker(item.text)
            if tag:
                return warn(
                    item.index + 1,
                    "todo-comment",
                    f"**{tag} found**: resolve it before merging.\n\n"
                    f"Tip: {tag} comments are temporary reminders. If it cannot be fixed now, "
                    "open an issue and reference it here.",
                )
            return warn(
                item.index + 1,
                "comment",
                "**Comment in code**: we favour self-documenting code.\n\n"
                "Before adding a comment, ask:\n"
                "- Does the variable or function name already say what it does?\n"
                "- Can the logic be made clearer?\n"
                "- Is this something the code genuinely cannot express?",
            )

        if item.kind is LineKind.INLINE_TRAILING_COMMENT:
            return warn(
                item.index + 1,
                "inline-comment",
                "**Inline comment**: avoid comments on the same line as code.\n\n"
                "Tip: if a comment is really needed, put it on the line above. "
                "First try a better variable or function name.",
            )

        return None

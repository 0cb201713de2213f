from __future__ import annotations

import json
from collections import Counter
from typing import Any, Sequence

from arch_review.models import Finding, Severity


FileReport = tuple[str, Sequence[Finding]]


def render_json(reports: Sequence[FileReport]) -> str:
    payload: list[dict[str, Any]] = [
        {"path": path, "findings": [item.to_dict() for item in findings]}
        for path, findings in reports
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_text(reports: Sequence[FileReport]) -> str:
    out: list[str] = []
    counts: Counter[str] = Counter()

    for path, findings in reports:
        if not findings:
            continue
        out.append(f"== {path} ({len(findings)} finding(s)) ==")
        for item in findings:
            counts[item.severity.value] += 1
            out.append(f"{path}:{item.line} [{item.severity.value}] {item.category}")
            for message_line in item.message.splitlines():
                out.append(f"    {message_line}" if message_line else "")
        out.append("")

    out.append(
        f"Files: {len(reports)}  "
        f"{Severity.ERROR.value}={counts[Severity.ERROR.value]} "
        f"{Severity.WARN.value}={counts[Severity.WARN.value]}"
    )
    return "\n".join(out)


def should_fail(reports: Sequence[FileReport], fail_on: str) -> bool:
    if fail_on == "none":
        return False
    findings = [item for _, items in reports for item in items]
    if fail_on == "warn":
        return bool(findings)
    if fail_on == "error":
        return any(item.severity is Severity.ERROR for item in findings)
    raise ValueError(f"Unsupported fail-on level: {fail_on}")

from __future__ import annotations

import re

from arch_review.models import Finding, SourceFile
from arch_review.scanners.base import Rule, kebab_case, upper_first, warn
from arch_review.scanners.blocks import block_span, block_text
from arch_review.scanners.context import is_component_file, is_in_folder


HOOKS_FOLDER = "hooks"

DECLARATION = re.compile(r"^(?:export\s+)?(?:const|function)\s+(\w+)")
HOOK_NAME = re.compile(r"^use[A-Z]")
HOOK_CALL = re.compile(r"\buse[A-Z]\w*\(")
EFFECT_HOOK_CALLS = (
    re.compile(r"useEffect\s*\("),
    re.compile(r"useCallback\s*\("),
    re.compile(r"useMemo\s*\("),
)
STATE_HOOK = re.compile(r"\buseState\b")
STATE_NAME = re.compile(r"const\s*\[(\w+)")


class HookPlacementRule(Rule):
    """Custom hooks belong in ``hooks/``; functions calling hooks should be hooks."""

    name = "hook-placement"
    categories = ("hook-placement",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if is_in_folder(source.path, HOOKS_FOLDER):
            return []

        findings: list[Finding] = []
        lines = source.lines
        for index, line in enumerate(lines):
            match = DECLARATION.search(line.strip())
            if not match:
                continue
            name = match.group(1)

            if HOOK_NAME.search(name):
                findings.append(
                    warn(
                        index + 1,
                        "hook-placement",
                        f"**Custom hook `{name}` outside /hooks**: move it.\n\n"
                        "Tip: keep every custom hook under `/hooks` so it is easy to find:\n"
                        f"```\nhooks/{kebab_case(name)}.ts\n```",
                    )
                )
                continue

            if name[:1].isupper():
                continue

            body = block_text(lines, block_span(lines, index))
            if HOOK_CALL.search(body) and not name.startswith("use"):
                findings.append(
                    warn(
                        index + 1,
                        "hook-placement",
                        f"**Function `{name}` calls hooks internally**: turn it into a custom hook.\n\n"
                        f"Tip: rename it to `use{upper_first(name)}` and move it to:\n"
                        f"```\nhooks/use-{kebab_case(name)}.ts\n```",
                    )
                )

        return findings


class HookExtractionRule(Rule):
    name = "hook-extraction"
    categories = ("hook-extraction",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if is_in_folder(source.path, HOOKS_FOLDER) or not is_component_file(source.path):
            return []

        total = sum(len(pattern.findall(source.text)) for pattern in EFFECT_HOOK_CALLS)
        if total <= self.config.max_effect_hooks:
            return []
        return [
            warn(
                1,
                "hook-extraction",
                f"**Component with {total} effect/memo hooks**: extract the logic into custom hooks.\n\n"
                "Tip: many hooks couple the logic to rendering. Group related logic:\n"
                "```tsx\nconst { data, loading, refetch } = useMyFeature()\n```",
            )
        ]


class StateCountRule(Rule):
    name = "state-count"
    categories = ("too-many-states",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if not is_component_file(source.path):
            return []

        states: list[tuple[str, int]] = []
        for index, line in enumerate(source.lines):
            if not STATE_HOOK.search(line):
                continue
            match = STATE_NAME.search(line)
            states.append((match.group(1) if match else "state", index + 1))

        if len(states) <= self.config.max_state_count:
            return []

        names = ", ".join(f"`{name}`" for name, _ in states)
        return [
            warn(
                states[0][1],
                "too-many-states",
                f"**{len(states)} useState calls in this component**: {names}\n\n"
                "Tip: many states mean too many responsibilities. Options:\n"
                "1. a custom hook grouping related state\n"
                "2. `useReducer` when the states change together\n"
                "3. splitting the component",
            )
        ]

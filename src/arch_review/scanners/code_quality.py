from __future__ import annotations

import re

from arch_review.models import Finding, SourceFile
from arch_review.scanners.base import Rule, warn
from arch_review.scanners.blocks import is_inside_catch_block


IMPORT_START = re.compile(r"^import\s")
SIDE_EFFECT_IMPORT = re.compile(r"""^import\s+['"]""")
NAMED_BINDINGS = re.compile(r"\{([^}]+)\}")
DEFAULT_BINDING = re.compile(r"^import\s+(?:type\s+)?(\w+)\s*(?:,|\s+from)")
NAMESPACE_BINDING = re.compile(r"\*\s+as\s+(\w+)")
ALIAS_SEPARATOR = re.compile(r"\s+as\s+")
TYPE_MODIFIER = re.compile(r"^type\s+")

CONSOLE_CALL = re.compile(r"\bconsole\.(log|warn|info|debug|error|trace)\b")


class FileSizeRule(Rule):
    name = "file-size"
    categories = ("file-size",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        total = len(source.lines)
        limit = self.config.max_file_lines
        if total <= limit:
            return []
        return [
            warn(
                1,
                "file-size",
                f"**File has {total} lines; the limit is {limit}.**\n\n"
                "Tip: large files are hard to maintain, test and review. Consider:\n"
                "- extracting smaller components (atoms -> molecules -> organisms)\n"
                "- moving state logic into custom hooks under `/hooks`\n"
                "- moving constants to `/consts`\n"
                "- moving types and interfaces to `/interfaces` or `/types`",
            )
        ]


class UnusedImportsRule(Rule):
    name = "unused-imports"
    categories = ("unused-import",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        findings: list[Finding] = []
        lines = source.lines

        for index, end, statement in _iter_imports(lines):
            names = imported_names(statement)
            if not names:
                continue

            rest = "\n".join(lines[end + 1 :])
            unused = [name for name in names if not re.search(rf"\b{re.escape(name)}\b", rest)]
            if not unused:
                continue

            listed = "`, `".join(unused)
            findings.append(
                warn(
                    index + 1,
                    "unused-import",
                    f"**Unused import**: `{listed}`\n\n"
                    "Tip: unused imports grow the bundle and clutter the file. "
                    "Remove them, or let the editor's organize-imports action do it.",
                )
            )

        return findings


def imported_names(statement: str) -> list[str]:
    """Names bound by one import statement, in source order.

    Side-effect imports (``import './styles.css'``) bind nothing.
    """
    if SIDE_EFFECT_IMPORT.search(statement):
        return []

    names: list[str] = []
    named = NAMED_BINDINGS.search(statement)
    if named:
        for part in named.group(1).split(","):
            name = ALIAS_SEPARATOR.split(part.strip())[-1].strip()
            name = TYPE_MODIFIER.sub("", name)
            if name and name != "type":
                names.append(name)

    default = DEFAULT_BINDING.search(statement)
    if default and default.group(1) != "type":
        names.append(default.group(1))

    namespace = NAMESPACE_BINDING.search(statement)
    if namespace:
        names.append(namespace.group(1))

    return names


def _iter_imports(lines):
    last = len(lines) - 1
    for index, line in enumerate(lines):
        trimmed = line.strip()
        if not IMPORT_START.search(trimmed):
            continue

        statement = trimmed
        end = index
        while not _import_complete(statement) and end < last:
            end += 1
            statement += " " + lines[end].strip()
        yield index, end, statement


def _import_complete(statement: str) -> bool:
    return " from " in statement or bool(SIDE_EFFECT_IMPORT.search(statement))


class ConsoleCallsRule(Rule):
    name = "console-calls"
    categories = ("console-in-catch", "console-log")

    def evaluate(self, source: SourceFile) -> list[Finding]:
        findings: list[Finding] = []
        lines = source.lines

        for index, line in enumerate(lines):
            match = CONSOLE_CALL.search(line.strip())
            if not match:
                continue

            method = match.group(1)
            if is_inside_catch_block(lines, index):
                findings.append(
                    warn(
                        index + 1,
                        "console-in-catch",
                        f"**`console.{method}` in error handling**: give the user feedback with a toast instead.\n\n"
                        "Tip: users never see the browser console.\n"
                        "```tsx\n"
                        "try {\n"
                        "  // your logic\n"
                        "} catch (error) {\n"
                        "  toast.error('Something went wrong. Please try again.')\n"
                        "}\n"
                        "```",
                    )
                )
            else:
                findings.append(
                    warn(
                        index + 1,
                        "console-log",
                        f"**`console.{method}` detected**: remove it before merging.\n\n"
                        "Alternatives:\n"
                        "- user feedback: `toast.success()` or `toast.error()`\n"
                        "- monitoring: an error-tracking service\n"
                        "- temporary debugging: DevTools breakpoints",
                    )
                )

        return findings

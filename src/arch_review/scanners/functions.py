from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from arch_review.models import BlockSpan, Finding, SourceFile
from arch_review.scanners.base import Rule, upper_first, warn
from arch_review.scanners.blocks import block_span, block_text


ARROW_FUNCTION = re.compile(r"^(?:export\s+)?(?:const|let)\s+(\w+)\s*=\s*(?:async\s*)?\(")
ARROW_TAIL = re.compile(r"=>\s*\{?\s*$")
FUNCTION_DECLARATION = re.compile(r"^(?:export\s+)?(?:async\s+)?function\s+(\w+)\s*\(")
FIRST_PARAMS = re.compile(r"\(([^)]*)\)")

HANDLER_NAME = re.compile(r"^(handle|on)[A-Z]")
STATE_SETTER_CALL = re.compile(r"set\w+\(")
REMOTE_CALL = re.compile(r"fetch|supabase|axios|api", re.IGNORECASE)
TRY_OPEN = re.compile(r"\btry\s*\{")

MIN_HANDLERS = 3
MIN_REPETITIVE_HANDLERS = 2
MIN_TRY_BLOCKS = 3


@dataclass(frozen=True)
class FunctionInfo:
    name: str
    span: BlockSpan

    @property
    def line(self) -> int:
        return self.span.start + 1


def collect_functions(lines: Sequence[str]) -> list[FunctionInfo]:
    functions: list[FunctionInfo] = []
    for index, line in enumerate(lines):
        trimmed = line.strip()
        match = ARROW_FUNCTION.search(trimmed)
        if not (match and ARROW_TAIL.search(trimmed)):
            match = FUNCTION_DECLARATION.search(trimmed)
        if match:
            functions.append(FunctionInfo(name=match.group(1), span=block_span(lines, index)))
    return functions


class LongFunctionsRule(Rule):
    name = "long-functions"
    categories = ("long-function",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        findings: list[Finding] = []
        for func in collect_functions(source.lines):
            length = func.span.length
            if length <= self.config.max_function_lines:
                continue
            findings.append(
                warn(
                    func.line,
                    "long-function",
                    f"**Function `{func.name}` has {length} lines**: split it into smaller functions.\n\n"
                    "Tip: long functions are hard to test and read. Extract:\n"
                    f"- validation into `validate{upper_first(func.name)}()`\n"
                    "- data transformations into utilities\n"
                    "- state logic into a custom hook\n"
                    "- API calls into `/lib`",
                )
            )
        return findings


class RepetitiveHandlersRule(Rule):
    name = "repetitive-handlers"
    categories = ("repetitive-pattern",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        lines = source.lines
        handlers = [func for func in collect_functions(lines) if HANDLER_NAME.search(func.name)]
        if len(handlers) < MIN_HANDLERS:
            return []

        repetitive = [
            func
            for func in handlers
            if _fetches_then_sets_state(block_text(lines, func.span))
        ]
        if len(repetitive) < MIN_REPETITIVE_HANDLERS:
            return []

        names = ", ".join(f"`{func.name}`" for func in handlers)
        return [
            warn(
                handlers[0].line,
                "repetitive-pattern",
                f"**Repetitive pattern**: {len(handlers)} handlers with similar logic: {names}\n\n"
                "Tip: when handlers all follow fetch -> setState -> loading, abstract it:\n"
                "```tsx\n"
                "function useApiAction<T>(apiCall: () => Promise<T>) {\n"
                "  const [data, setData] = useState<T | null>(null)\n"
                "  const [loading, setLoading] = useState(false)\n"
                "  const execute = async () => { ... }\n"
                "  return { data, loading, execute }\n"
                "}\n"
                "```",
            )
        ]


def _fetches_then_sets_state(body: str) -> bool:
    return bool(STATE_SETTER_CALL.search(body) and REMOTE_CALL.search(body))


class TooManyParamsRule(Rule):
    name = "too-many-params"
    categories = ("too-many-params",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        findings: list[Finding] = []
        lines = source.lines
        for func in collect_functions(lines):
            match = FIRST_PARAMS.search(lines[func.span.start])
            if not match:
                continue
            params = [item for item in match.group(1).split(",") if item.strip()]
            if len(params) <= self.config.max_params:
                continue
            type_name = f"{upper_first(func.name)}Params"
            findings.append(
                warn(
                    func.line,
                    "too-many-params",
                    f"**Function `{func.name}` takes {len(params)} parameters**: use an options object.\n\n"
                    "```tsx\n"
                    f"interface {type_name} {{\n"
                    "  // your parameters\n"
                    "}\n\n"
                    f"function {func.name}(params: {type_name}) {{ ... }}\n"
                    "```",
                )
            )
        return findings


class DuplicateTryBlocksRule(Rule):
    name = "duplicate-try-blocks"
    categories = ("duplicate-pattern",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        starts = [index for index, line in enumerate(source.lines) if TRY_OPEN.search(line.strip())]
        if len(starts) < MIN_TRY_BLOCKS:
            return []
        return [
            warn(
                starts[0] + 1,
                "duplicate-pattern",
                f"**{len(starts)} try/catch blocks in one file**: abstract the error handling.\n\n"
                "```tsx\n"
                "async function safeExecute<T>(action: () => Promise<T>, errorMessage = 'Something went wrong') {\n"
                "  try {\n"
                "    return await action()\n"
                "  } catch (error) {\n"
                "    toast.error(errorMessage)\n"
                "    return null\n"
                "  }\n"
                "}\n"
                "```",
            )
        ]

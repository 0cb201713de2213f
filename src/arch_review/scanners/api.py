from __future__ import annotations

import re

from arch_review.models import Finding, SourceFile
from arch_review.scanners.base import Rule, warn
from arch_review.scanners.context import DATA_LAYER_FOLDERS, is_component_file, is_in_any_folder


QUERY_CLIENT_CALL = re.compile(r"supabase\s*\.\s*from\(")
FETCH_CALL = re.compile(r"\bfetch\s*\(")


def _applies_to(path: str) -> bool:
    return is_component_file(path) and not is_in_any_folder(path, DATA_LAYER_FOLDERS)


class QueryClientRule(Rule):
    name = "query-client"
    categories = ("supabase-in-component",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if not _applies_to(source.path):
            return []

        for index, line in enumerate(source.lines):
            if QUERY_CLIENT_CALL.search(line):
                return [
                    warn(
                        index + 1,
                        "supabase-in-component",
                        "**Direct Supabase query in a component**: move it to `/lib/supabase`.\n\n"
                        "Tip: components should not hold database logic:\n"
                        "```\n"
                        "lib/supabase/queries.ts   -> reads\n"
                        "lib/supabase/mutations.ts -> writes\n"
                        "hooks/use-*.ts            -> hooks consuming them\n"
                        "```",
                    )
                ]
        return []


class FetchDirectRule(Rule):
    name = "fetch-direct"
    categories = ("fetch-in-component",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if not _applies_to(source.path):
            return []

        for index, line in enumerate(source.lines):
            if FETCH_CALL.search(line) and "//" not in line.split("fetch", 1)[0]:
                return [
                    warn(
                        index + 1,
                        "fetch-in-component",
                        "**Direct `fetch` in a component**: centralise API calls.\n\n"
                        "```tsx\n"
                        "export async function apiGet<T>(endpoint: string): Promise<T> {\n"
                        "  const res = await fetch(endpoint)\n"
                        "  if (!res.ok) throw new Error('Request failed')\n"
                        "  return res.json()\n"
                        "}\n"
                        "```\n"
                        "Or use a data-fetching library with caching and revalidation.",
                    )
                ]
        return []

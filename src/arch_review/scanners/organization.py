from __future__ import annotations

import re
from pathlib import PurePosixPath

from arch_review.models import Finding, SourceFile
from arch_review.scanners.base import Rule, kebab_case, warn
from arch_review.scanners.blocks import block_span, find_block_end
from arch_review.scanners.context import is_component_file, is_in_any_folder, is_in_folder, normalize_path


CONSTANT_DECLARATION = re.compile(r"^(?:export\s+)?const\s+([A-Z_][A-Z0-9_]*)\s*[=:]")
UPPER_CONSTANT = re.compile(r"^(?:export\s+)?const\s+([A-Z_]{2,})\s*=")

COMPONENT_FUNCTION = re.compile(r"^(?:export\s+)?(?:default\s+)?function\s+([A-Z]\w+)\s*\(")
COMPONENT_ARROW = re.compile(
    r"^(?:export\s+)?const\s+([A-Z]\w+)\s*[=:]\s*"
    r"(?:\([^)]*\)\s*=>|React\.FC|React\.memo|forwardRef|memo\()"
)

TYPE_DECLARATION = re.compile(r"^(?:export\s+)?(?:type|interface)\s+(\w+)")
TYPE_FILE_SUFFIXES = (".types.ts", ".d.ts")

RETURN_JSX = re.compile(r"^\s*return\s*\(")

DIRECT_COMPONENT = re.compile(r"/components/[^/]+\.tsx$")

MIN_SCATTERED_CONSTANTS = 3
MIN_COMPONENT_TYPES = 3


class ConstantsRule(Rule):
    name = "constants"
    categories = ("large-constant", "scattered-constants")

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if is_in_any_folder(source.path, ("consts", "constants")):
            return []

        findings: list[Finding] = []
        lines = source.lines
        limit = self.config.max_constant_lines

        for index, line in enumerate(lines):
            match = CONSTANT_DECLARATION.search(line.strip())
            if not match:
                continue
            name = match.group(1)
            length = block_span(lines, index).length
            if length > limit:
                findings.append(
                    warn(
                        index + 1,
                        "large-constant",
                        f"**Large constant: `{name}` spans {length} lines**: move it to its own file.\n\n"
                        f"Tip: constants longer than {limit} lines deserve a dedicated module:\n"
                        f"```\nconsts/{name.lower().replace('_', '-')}.ts\n```\n"
                        "or group related constants under `consts/` with an `index.ts` re-export.",
                    )
                )

        scattered = []
        for index, line in enumerate(lines):
            match = UPPER_CONSTANT.search(line.strip())
            if match:
                scattered.append((match.group(1), index + 1))

        if len(scattered) >= MIN_SCATTERED_CONSTANTS:
            names = ", ".join(f"`{name}`" for name, _ in scattered)
            findings.append(
                warn(
                    scattered[0][1],
                    "scattered-constants",
                    f"**{len(scattered)} scattered constants**: {names}\n\n"
                    "Tip: three or more UPPER_CASE constants in one file belong in `/consts`, "
                    "where they can be reused without circular imports.",
                )
            )

        return findings


class MultipleComponentsRule(Rule):
    name = "multiple-components"
    categories = ("multiple-components",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if not is_component_file(source.path):
            return []

        components: list[tuple[str, int]] = []
        for index, line in enumerate(source.lines):
            trimmed = line.strip()
            match = COMPONENT_FUNCTION.search(trimmed) or COMPONENT_ARROW.search(trimmed)
            if match:
                components.append((match.group(1), index + 1))

        if len(components) <= 1:
            return []

        names = ", ".join(f"`{name}`" for name, _ in components)
        layout = "\n".join(f"`components/{kebab_case(name)}.tsx`" for name, _ in components)
        return [
            warn(
                components[1][1],
                "multiple-components",
                f"**{len(components)} components in one file**: {names}\n\n"
                "Tip: with Atomic Design each component lives in its own file, "
                "which keeps tests isolated and imports selective.\n\n"
                "Suggested layout:\n" + layout,
            )
        ]


class InlineTypesRule(Rule):
    name = "inline-types"
    categories = ("inline-type",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        path = source.path
        if is_in_any_folder(path, ("types", "interfaces")) or path.endswith(TYPE_FILE_SUFFIXES):
            return []

        lines = source.lines
        declarations: list[tuple[str, int, int]] = []
        for index, line in enumerate(lines):
            match = TYPE_DECLARATION.search(line.strip())
            if match:
                declarations.append((match.group(1), index + 1, block_span(lines, index).length))

        findings: list[Finding] = []
        for name, line_number, length in declarations:
            if length <= self.config.max_type_lines:
                continue
            slug = kebab_case(name)
            findings.append(
                warn(
                    line_number,
                    "inline-type",
                    f"**Inline type/interface `{name}` ({length} lines)**: move it to a types file.\n\n"
                    f"Tip: types longer than {self.config.max_type_lines} lines belong in "
                    f"`interfaces/{slug}.ts` or `types/{slug}.ts`.",
                )
            )

        if len(declarations) >= MIN_COMPONENT_TYPES and is_component_file(path):
            type_names = ", ".join(name for name, _, _ in declarations)
            findings.append(
                warn(
                    declarations[0][1],
                    "inline-type",
                    f"**{len(declarations)} types/interfaces in a component**: components should not define them.\n\n"
                    "Tip: move them to `/interfaces` or `/types` and import them:\n"
                    f"```tsx\nimport type {{ {type_names} }} from '@/interfaces/...'\n```",
                )
            )

        return findings


class JsxSizeRule(Rule):
    name = "jsx-size"
    categories = ("large-jsx",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        if not is_component_file(source.path):
            return []

        lines = source.lines
        for index, line in enumerate(lines):
            if not RETURN_JSX.search(line):
                continue
            length = find_block_end(lines, index) - index + 1
            if length <= self.config.max_jsx_lines:
                return []
            return [
                warn(
                    index + 1,
                    "large-jsx",
                    f"**Large JSX block ({length} lines)**: split it into subcomponents.\n\n"
                    "Tip: extract visual sections, lists, forms and modals into their own components.",
                )
            ]

        return []


class AtomicDesignRule(Rule):
    name = "atomic-design"
    categories = ("atomic-design",)

    def evaluate(self, source: SourceFile) -> list[Finding]:
        path = source.path
        if not is_component_file(path):
            return []
        if not DIRECT_COMPONENT.search(normalize_path(path)) or is_in_folder(path, "ui"):
            return []

        text = source.text
        state_count = len(re.findall(r"useState", text))
        effect_count = len(re.findall(r"useEffect", text))
        jsx_elements = len(re.findall(r"<[A-Z]", text))

        file_name = PurePosixPath(normalize_path(path)).stem
        if state_count == 0 and effect_count == 0 and jsx_elements <= 3:
            level = "atoms"
        elif state_count <= 2 and jsx_elements <= 8:
            level = "molecules"
        else:
            level = "organisms"

        return [
            warn(
                1,
                "atomic-design",
                f"**Atomic Design layout**: this component could live in `components/{level}/{file_name}.tsx`\n\n"
                "Tip: organise components by complexity:\n"
                "- **atoms/**: simple stateless pieces (Button, Input, Badge)\n"
                "- **molecules/**: small combinations with little state (SearchBar, FormField)\n"
                "- **organisms/**: complex sections with logic (Header, DataTable)\n"
                "- **ui/**: design-system components",
            )
        ]

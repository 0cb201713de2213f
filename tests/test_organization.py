from arch_review.models import RuleConfig, SourceFile
from arch_review.scanners.organization import (
    AtomicDesignRule,
    ConstantsRule,
    InlineTypesRule,
    JsxSizeRule,
    MultipleComponentsRule,
)


def _run(rule_type, path, text, config=None):
    return rule_type(config or RuleConfig()).evaluate(SourceFile(path=path, text=text))


def _categories(findings):
    return [(item.line, item.category) for item in findings]


def test_large_constant_is_flagged():
    body = "".join(f"  'item-{index}',\n" for index in range(12))
    text = "export const MENU_ITEMS = [\n" + body + "]\n"
    findings = _run(ConstantsRule, "src/app/menu.ts", text)
    assert _categories(findings) == [(1, "large-constant")]
    assert "`MENU_ITEMS` spans 14 lines" in findings[0].message
    assert "consts/menu-items.ts" in findings[0].message


def test_constants_folder_is_exempt():
    body = "".join(f"  'item-{index}',\n" for index in range(12))
    text = "export const MENU_ITEMS = [\n" + body + "]\nconst A_B = 1\nconst C_D = 2\nconst E_F = 3\n"
    assert _run(ConstantsRule, "src/consts/menu.ts", text) == []
    assert _run(ConstantsRule, "src/constants/menu.ts", text) == []


def test_scattered_constants():
    text = "const PAGE_SIZE = 10\nconst MAX_RETRIES = 3\nexport const API_URL = '/api'\n"
    findings = _run(ConstantsRule, "src/app/page.ts", text)
    assert _categories(findings) == [(1, "scattered-constants")]
    assert "`PAGE_SIZE`, `MAX_RETRIES`, `API_URL`" in findings[0].message


def test_two_constants_are_not_scattered():
    text = "const PAGE_SIZE = [10]\nconst MAX_RETRIES = [3]\n"
    assert _run(ConstantsRule, "src/app/page.ts", text) == []


def test_multiple_components_reported_at_second_declaration():
    text = (
        "export function UserCard() {\n"
        "  return null\n"
        "}\n"
        "\n"
        "const UserAvatar = ({ url }) => <img src={url} />\n"
        "const Badge = memo(() => null)\n"
    )
    findings = _run(MultipleComponentsRule, "src/components/user-card.tsx", text)
    assert _categories(findings) == [(5, "multiple-components")]
    assert "3 components" in findings[0].message
    assert "components/user-avatar.tsx" in findings[0].message


def test_single_component_and_non_component_files():
    text = "export default function Page() {\n  return null\n}\nfunction Helper() {}\n"
    assert _run(MultipleComponentsRule, "src/app/page.ts", text) == []
    assert _run(MultipleComponentsRule, "src/app/page.tsx", "export function Page() {}\n") == []


def test_long_inline_type_is_flagged():
    text = (
        "export interface UserProfile {\n"
        "  id: string\n"
        "  name: string\n"
        "  email: string\n"
        "  role: string\n"
        "  created: string\n"
        "}\n"
        "type Id = { value: string }\n"
    )
    findings = _run(InlineTypesRule, "src/app/user.ts", text)
    assert _categories(findings) == [(1, "inline-type")]
    assert "`UserProfile` (7 lines)" in findings[0].message
    assert "interfaces/user-profile.ts" in findings[0].message


def test_many_types_in_component():
    text = "type A = { a: 1 }\ntype B = { b: 2 }\ninterface C { c: 3 }\nexport function View() {}\n"
    findings = _run(InlineTypesRule, "src/components/view.tsx", text)
    assert _categories(findings) == [(1, "inline-type")]
    assert "import type { A, B, C }" in findings[0].message


def test_type_files_are_exempt():
    text = "type A = { a: 1 }\ntype B = { b: 2 }\ninterface C { c: 3 }\n"
    for path in ("src/types/a.tsx", "src/interfaces/a.tsx", "src/user.types.ts", "src/env.d.ts"):
        assert _run(InlineTypesRule, path, text) == []


def test_large_jsx_block():
    markup = "".join("      <li>row</li>\n" for _ in range(50))
    text = "export function List() {\n  return (\n    <ul>\n" + markup + "    </ul>\n  )\n}\n"
    findings = _run(JsxSizeRule, "src/components/list.tsx", text)
    assert _categories(findings) == [(2, "large-jsx")]
    assert "54 lines" in findings[0].message


def test_small_jsx_block_and_non_component():
    text = "export function List() {\n  return (\n    <ul />\n  )\n}\n"
    assert _run(JsxSizeRule, "src/components/list.tsx", text) == []
    markup = "".join("<li>row</li>\n" for _ in range(60))
    assert _run(JsxSizeRule, "src/components/list.ts", "return (\n" + markup + ")\n") == []


def test_atomic_design_suggestions():
    atom = "export function Badge() {\n  return <span />\n}\n"
    findings = _run(AtomicDesignRule, "src/components/badge.tsx", atom)
    assert _categories(findings) == [(1, "atomic-design")]
    assert "components/atoms/badge.tsx" in findings[0].message

    molecule = "const [q, setQ] = useState('')\nreturn <Input value={q} />\n"
    findings = _run(AtomicDesignRule, "src/components/search-bar.tsx", molecule)
    assert "components/molecules/search-bar.tsx" in findings[0].message

    organism = "useState(1)\nuseState(2)\nuseState(3)\nuseEffect(() => {})\n"
    findings = _run(AtomicDesignRule, "src/components/dashboard.tsx", organism)
    assert "components/organisms/dashboard.tsx" in findings[0].message


def test_atomic_design_only_for_direct_children_of_components():
    text = "export function Badge() {}\n"
    assert _run(AtomicDesignRule, "src/components/atoms/badge.tsx", text) == []
    assert _run(AtomicDesignRule, "src/components/ui/button.tsx", text) == []
    assert _run(AtomicDesignRule, "src/app/page.tsx", text) == []


def test_unbracketed_constant_spans_to_the_next_closed_group():
    text = "const TITLE = 'Demo'\n\nexport function Page() {\n" + "  step()\n" * 9 + "}\n"
    findings = _run(ConstantsRule, "src/app/page.ts", text)
    assert _categories(findings) == [(1, "large-constant")]
    assert "spans 13 lines" in findings[0].message

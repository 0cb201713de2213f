from arch_review.scanners.lines import (
    LineKind,
    classify_lines,
    looks_like_commented_code,
    tagged_marker,
)


def _kinds(lines):
    return [item.kind for item in classify_lines(lines)]


def classify_line(line):
    return _kinds([line])[0]


def test_single_line_kinds():
    assert classify_line("") is LineKind.BLANK
    assert classify_line("   ") is LineKind.BLANK
    assert classify_line("const a = 1") is LineKind.CODE
    assert classify_line("  // explain") is LineKind.LINE_COMMENT
    assert classify_line("const a = 1 // why") is LineKind.INLINE_TRAILING_COMMENT
    assert classify_line("// eslint-disable-next-line no-console") is LineKind.IGNORED_DIRECTIVE
    assert classify_line("/* @ts-ignore */") is LineKind.IGNORED_DIRECTIVE
    assert classify_line("'use client'") is LineKind.STRING_DIRECTIVE
    assert classify_line('"use server";') is LineKind.STRING_DIRECTIVE


def test_urls_are_not_trailing_comments():
    assert classify_line("const url = 'https://example.com/api'") is LineKind.CODE


def test_block_comment_lines():
    lines = [
        "/*",
        " some text",
        " more",
        "*/",
        "const a = 1",
    ]
    items = list(classify_lines(lines))
    assert [item.kind for item in items] == [
        LineKind.BLOCK_COMMENT_OPEN,
        LineKind.BLOCK_COMMENT_BODY,
        LineKind.BLOCK_COMMENT_BODY,
        LineKind.BLOCK_COMMENT_CLOSE,
        LineKind.CODE,
    ]
    assert items[3].block_start == 0
    assert items[3].block_length == 4


def test_one_line_block_comment_opens_and_closes():
    items = list(classify_lines(["{/* note in jsx */}"]))
    assert items[0].kind is LineKind.BLOCK_COMMENT_CLOSE
    assert items[0].block_start == 0
    assert items[0].block_length == 1


def test_line_comment_markers_inside_block_are_body():
    assert _kinds(["/* start", "// inner", "end */"]) == [
        LineKind.BLOCK_COMMENT_OPEN,
        LineKind.BLOCK_COMMENT_BODY,
        LineKind.BLOCK_COMMENT_CLOSE,
    ]


def test_doc_comment_skipped_until_close():
    lines = [
        "/**",
        " * Loads the user.",
        " * // not a line comment",
        " */",
        "// after",
    ]
    assert _kinds(lines) == [
        LineKind.DOC_COMMENT,
        LineKind.DOC_COMMENT,
        LineKind.DOC_COMMENT,
        LineKind.DOC_COMMENT,
        LineKind.LINE_COMMENT,
    ]


def test_single_line_doc_comment():
    assert _kinds(["/** short */", "code()"]) == [LineKind.DOC_COMMENT, LineKind.CODE]


def test_unterminated_doc_comment_consumes_rest_of_file():
    assert _kinds(["/**", " * never closed", "code()"]) == [LineKind.DOC_COMMENT] * 3


def test_comment_markers_in_strings_are_not_understood():
    assert classify_line("const glob = 'a/*b'") is LineKind.BLOCK_COMMENT_OPEN


def test_looks_like_commented_code():
    assert looks_like_commented_code("// const value = compute()")
    assert looks_like_commented_code("// user.save()")
    assert looks_like_commented_code("// count = 3")
    assert looks_like_commented_code("// </Button>")
    assert looks_like_commented_code("// });")
    assert looks_like_commented_code("// {[(")
    assert looks_like_commented_code("// name: string")
    assert looks_like_commented_code("// items.map(item =>")
    assert looks_like_commented_code("//   if (ready) {")


def test_prose_is_not_commented_code():
    assert not looks_like_commented_code("// Initialise the client")
    assert not looks_like_commented_code("// the list is sorted by date")
    assert not looks_like_commented_code("// }")
    assert not looks_like_commented_code("// )]")


def test_tagged_marker():
    assert tagged_marker("// TODO: remove before merge") == "TODO"
    assert tagged_marker("//fixme later") == "FIXME"
    assert tagged_marker("  // Note the ordering") == "NOTE"
    assert tagged_marker("// todos are tracked elsewhere") is None
    assert tagged_marker("// regular comment") is None

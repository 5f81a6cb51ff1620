"""
Unit tests for Markdown emission.
"""

import pytest

from el2md import convert, convert_text, render_body
from el2md.core.models import ConversionConfig
from el2md.rendering.markdown import emit_document, strip_trailing_periods
from el2md.processing.ingest import make_document


def body(*lines):
    return render_body(list(lines))


class TestStripTrailingPeriods:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Heading.", "Heading"),
            ("Heading...", "Heading"),
            ("Heading. . .", "Heading"),
            ("Heading", "Heading"),
            ("e.g. this", "e.g. this"),
        ],
    )
    def test_strip(self, text, expected):
        assert strip_trailing_periods(text) == expected

    def test_idempotent(self):
        once = strip_trailing_periods("Done...")

        assert strip_trailing_periods(once) == once


class TestRenderBody:
    """Block rendering and blank-line spacing."""

    def test_heading_and_paragraph(self):
        assert body(";; This is a heading:", ";;", ";; Bla bla bla ...") == "## This is a heading\n\nBla bla bla ...\n"

    def test_key_span(self):
        assert "<kbd>RET</kbd>" in body(";; Press `RET' to continue.")

    def test_code_span(self):
        assert "`my-func`" in body(";; Call `my-func' to start.")

    def test_adjacent_bullets_have_no_blank(self):
        assert body(";; * One", ";;", ";; * Two") == "* One\n* Two\n"

    def test_one_blank_between_other_blocks(self):
        output = body(";; Para one.", ";;", ";; * item", ";;", ";; Para two.")

        assert output == "Para one.\n\n* item\n\nPara two.\n"

    def test_heading_period_stripped(self):
        assert body(";; Getting started...:", ";;", ";; Text") == "## Getting started\n\nText\n"

    def test_second_heading_is_level_three(self):
        output = body(";; One:", ";;", ";; a", ";;", ";; Two:", ";;", ";; b")

        assert output == "## One\n\na\n\n### Two\n\nb\n"

    def test_code_block_indented(self):
        output = body(";; Example:", ";;", ";;     (foo)", ";;       (bar))")

        assert output == "Example:\n\n    (foo)\n      (bar))\n"

    def test_tab_indented_code_block(self):
        output = body(";; Put this in init:", ";;", ";;\t(require 'foo)", ";;\t(foo-mode 1)")

        assert output == "Put this in init:\n\n    (require 'foo)\n    (foo-mode 1)\n"

    def test_paren_code_block(self):
        assert body(";; (setq x `y')") == "    (setq x `y`)\n"

    def test_paragraph_lines_kept_separate(self):
        assert body(";; line one", ";;   line two") == "line one\nline two\n"

    def test_license_absent_with_spacing_preserved(self):
        with_license = body(
            ";; First.",
            ";;",
            ";;; License:",
            ";; Secret GPL words.",
            ";;; Second.",
        )
        without_license = body(";; First.", ";;", ";;; Second.")

        assert "GPL" not in with_license
        assert with_license == without_license == "First.\n\nSecond.\n"

    def test_empty_body(self):
        assert body() == ""
        assert body(";;", ";;") == ""


SOURCE = [
    ";;; foo.el --- Frob the foo.  -*- lexical-binding: t -*-",
    "",
    ";; Author: Jane Doe",
    ";; Version: 1.0",
    ";; URL: https://example.org/foo",
    "",
    ";;; Commentary:",
    "",
    ";; Usage:",
    ";;",
    ";; Type `M-x foo'.",
    "",
    ";;; Code:",
]


class TestEmitDocument:
    """Full documents: title, metadata, body, footer, hooks."""

    def test_full_document(self):
        output = convert(SOURCE, source_name="foo.el")

        assert output == (
            "# Frob the foo\n"
            "\n"
            "*Author:* Jane Doe<br>\n"
            "*Version:* 1.0<br>\n"
            "*URL:* [https://example.org/foo](https://example.org/foo)<br>\n"
            "\n"
            "## Usage\n"
            "\n"
            "Type <kbd>M-x foo</kbd>.\n"
            "\n"
            "---\n"
            "Converted from `foo.el` by [*el2md*](https://gitlab.com/thomasluquet/el2md).\n"
        )

    def test_single_title_header(self):
        output = convert(SOURCE)

        assert sum(1 for line in output.splitlines() if line.startswith("# ")) == 1

    def test_no_title(self):
        output = convert([";;; Commentary:", ";; Body."])

        assert output.startswith("Body.\n")
        assert "# " not in output

    def test_no_commentary_emits_title_and_footer_only(self):
        output = convert_text(";;; foo.el --- Foo\n;; Author: Jane\n;; Text.\n")

        assert output == "# Foo\n\n---\nConverted by [*el2md*](https://gitlab.com/thomasluquet/el2md).\n"

    def test_mode_line_only_title_is_omitted(self):
        output = convert([";;; foo.el --- -*- lexical-binding: t -*-", ";;; Commentary:", ";; Body."])

        assert output.startswith("Body.\n")
        assert "# " not in output

    def test_metadata_omitted_fields(self):
        output = convert([";; Version: 2", ";;; Commentary:", ";; Body."])

        assert "*Author:*" not in output
        assert "*Version:* 2<br>\n\nBody.\n" in output

    def test_token_kinds(self):
        sink = emit_document(make_document(SOURCE))
        token_kinds = [t.kind for t in sink.tokens]

        assert token_kinds[0] == "header"
        assert token_kinds[-2:] == ["rule", "attribution"]
        assert "blank" in token_kinds

    def test_hooks_run_in_order(self):
        calls = []
        config = ConversionConfig(
            post_conversion_hooks=[
                lambda sink: calls.append("first"),
                lambda sink: calls.append("second"),
            ]
        )
        convert(SOURCE, config=config)

        assert calls == ["first", "second"]

    def test_hook_can_append(self):
        config = ConversionConfig(post_conversion_hooks=[lambda sink: sink.text("<!-- generated -->")])

        assert convert(SOURCE, config=config).endswith("<!-- generated -->\n")

    def test_hook_errors_propagate(self):
        def broken(sink):
            raise RuntimeError("hook failed")

        with pytest.raises(RuntimeError, match="hook failed"):
            convert(SOURCE, config=ConversionConfig(post_conversion_hooks=[broken]))

    def test_custom_tool_name(self):
        config = ConversionConfig(tool_name="mytool", tool_url="https://example.org/mytool")

        assert "by [*mytool*](https://example.org/mytool)." in convert(SOURCE, config=config)

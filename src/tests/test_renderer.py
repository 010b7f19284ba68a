"""Unit tests for markdown rendering."""

from mdwiki.core.renderer import create_parser, render_markdown


# ============================================================
# Strikethrough extension
# ============================================================


class TestStrikethrough:
    def test_basic_strikethrough(self):
        html = render_markdown("~~deleted~~")
        assert "<del>deleted</del>" in html

    def test_strikethrough_in_paragraph(self):
        html = render_markdown("This is ~~removed~~ text.")
        assert "<del>removed</del>" in html
        assert "This is" in html
        assert "text." in html

    def test_strikethrough_multiple(self):
        html = render_markdown("~~one~~ and ~~two~~")
        assert html.count("<del>") == 2


# ============================================================
# Standard markdown
# ============================================================


class TestRenderMarkdown:
    def test_heading(self):
        html = render_markdown("# Hi")
        assert html.startswith("<h1")
        assert ">Hi</h1>" in html

    def test_heading_gets_toc_anchor(self):
        html = render_markdown("## Getting Started")
        assert 'id="getting-started"' in html

    def test_bold(self):
        assert "<strong>bold text</strong>" in render_markdown("**bold text**")

    def test_fenced_code(self):
        html = render_markdown("```\ncode here\n```")
        assert "<code>" in html
        assert "code here" in html

    def test_table(self):
        html = render_markdown("| A | B |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_task_list(self):
        html = render_markdown("- [x] done\n- [ ] todo")
        assert 'type="checkbox"' in html

    def test_empty(self):
        assert render_markdown("") == ""

    def test_deterministic(self):
        assert render_markdown("# Same\n\ntext") == render_markdown("# Same\n\ntext")


class TestCreateParser:
    def test_custom_extensions(self):
        parser = create_parser(["extra"])
        html = parser.convert("# Plain")
        assert html == "<h1>Plain</h1>"

    def test_strikethrough_always_enabled(self):
        parser = create_parser([])
        assert "<del>x</del>" in parser.convert("~~x~~")

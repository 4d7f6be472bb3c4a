"""Integration tests for the render and build commands"""

from typer.testing import CliRunner

from mdrender.cli.cli import app


runner = CliRunner()


def test_render_cmd_prints_html(tmp_path):
    """render writes HTML for one file to stdout."""
    (tmp_path / "page.md").write_text("'one'\n")
    result = runner.invoke(app, ["render", str(tmp_path / "page.md"), "--curly-quotes"])
    assert result.exit_code == 0, result.output
    assert "<p>‘one’</p>" in result.output


def test_render_cmd_writes_out_file(tmp_path):
    (tmp_path / "page.md").write_text("[next](next.md)\n")
    (tmp_path / "next.md").write_text("# Next\n")
    out = tmp_path / "html" / "page.html"
    result = runner.invoke(app, ["render", str(tmp_path / "page.md"), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert 'href="next.html"' in out.read_text(encoding="utf-8")


def test_render_cmd_missing_file(tmp_path):
    result = runner.invoke(app, ["render", str(tmp_path / "missing.md")])
    assert result.exit_code == 1


def test_build_cmd_renders_tree(tmp_path):
    """build produces one .html output per markdown source."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "index.md").write_text("[Intro](intro.md)\n")
    (src / "intro.md").write_text("# Intro\n")

    result = runner.invoke(app, ["build", str(src), "--out-dir", str(tmp_path / "book")])

    assert result.exit_code == 0, result.output
    assert "Rendered 2 document(s)" in result.output
    assert 'href="intro.html"' in (tmp_path / "book" / "index.html").read_text(encoding="utf-8")


def test_build_cmd_uses_config_yaml(tmp_path):
    """build falls back to output_dir from config.yaml."""
    (tmp_path / "config.yaml").write_text("output_dir: site\ncurly_quotes: true\n")
    (tmp_path / "doc.md").write_text("'hi'\n")
    result = runner.invoke(app, ["build", "doc.md"])
    assert result.exit_code == 0, result.output
    assert "‘hi’" in (tmp_path / "site" / "doc.html").read_text(encoding="utf-8")


def test_build_cmd_invalid_config(tmp_path):
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    (tmp_path / "doc.md").write_text("hi\n")
    result = runner.invoke(app, ["build", "doc.md"])
    assert result.exit_code == 1

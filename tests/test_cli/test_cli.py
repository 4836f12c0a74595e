"""Tests for the scss-dts CLI commands."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

from click.testing import CliRunner

from scss_dts import __version__
from scss_dts.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _project(tmp_path: Path, *names: str) -> Path:
    for name in names:
        shutil.copy(FIXTURES / name, tmp_path / name)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "tokens" in result.output
        assert "classes" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "loud", "classes", "x.scss"])
        assert result.exit_code == 2

    def test_log_level_sets_package_logger(self) -> None:
        result = CliRunner().invoke(
            cli, ["--log-level", "debug", "classes", str(FIXTURES / "plain.scss")]
        )
        assert result.exit_code == 0
        assert logging.getLogger("scss_dts").level == logging.DEBUG
        CliRunner().invoke(cli, ["classes", str(FIXTURES / "plain.scss")])
        assert logging.getLogger("scss_dts").level == logging.INFO


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_generates_declarations(self, tmp_path) -> None:
        root = _project(tmp_path, "card.scss", "plain.scss")
        result = CliRunner().invoke(cli, ["generate", str(root)])
        assert result.exit_code == 0, result.output
        assert (root / "card.scss.d.ts").exists()
        assert not (root / "plain.scss.d.ts").exists()
        assert "Summary: 2 file(s), 1 written" in result.output

    def test_failure_exit_code(self, tmp_path) -> None:
        root = _project(tmp_path, "card.scss", "broken.scss")
        result = CliRunner().invoke(cli, ["generate", str(root), "--threads", "2"])
        assert result.exit_code == 1
        assert "broken.scss" in result.output
        assert "1 failed" in result.output
        assert (root / "card.scss.d.ts").exists()

    def test_sorted_order_and_suffix(self, tmp_path) -> None:
        (tmp_path / "a.scss").write_text(".zeta { }\n.alpha { }\n")
        result = CliRunner().invoke(
            cli, ["generate", str(tmp_path), "--order", "sorted", "--suffix", ".d.scss.ts"]
        )
        assert result.exit_code == 0, result.output
        text = (tmp_path / "a.scss.d.scss.ts").read_text()
        assert text.index("alpha") < text.index("zeta")

    def test_custom_template(self, tmp_path) -> None:
        (tmp_path / "a.scss").write_text(".x { }\n")
        template = tmp_path / "decl.jinja"
        template.write_text("{% for name in classes %}{{ name }}{% endfor %}\n")
        result = CliRunner().invoke(cli, ["generate", str(tmp_path), "--template", str(template)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "a.scss.d.ts").read_text() == "x\n"

    def test_missing_path(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["generate", str(tmp_path / "nope")])
        assert result.exit_code == 2

    def test_zero_threads_rejected(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["generate", str(tmp_path), "--threads", "0"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# tokens / classes
# ---------------------------------------------------------------------------


class TestInspectCommands:
    def test_tokens(self, tmp_path) -> None:
        path = tmp_path / "a.scss"
        path.write_text(".foo { color: $primary; }")
        result = CliRunner().invoke(cli, ["tokens", str(path)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "Class(nested=False, 'foo')",
            "Operator(LBRACE)",
            "Property('color') = '$primary'",
            "Operator(RBRACE)",
            "EndOfInput",
        ]

    def test_tokens_with_trivia(self, tmp_path) -> None:
        path = tmp_path / "a.scss"
        path.write_text(".foo {}\n")
        result = CliRunner().invoke(cli, ["tokens", "--trivia", str(path)])
        assert "Indent(1)" in result.output
        assert "Operator(NEWLINE)" in result.output

    def test_tokens_lexical_error(self, tmp_path) -> None:
        path = tmp_path / "a.scss"
        path.write_text("#id { }")
        result = CliRunner().invoke(cli, ["tokens", str(path)])
        assert result.exit_code == 1
        assert "Unexpected character '#'" in result.output

    def test_classes(self) -> None:
        result = CliRunner().invoke(cli, ["classes", str(FIXTURES / "card.scss")])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "card", "active", "title", "card-body", "card_compact",
        ]

    def test_classes_nested(self) -> None:
        result = CliRunner().invoke(cli, ["classes", "--nested", str(FIXTURES / "card.scss")])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "  & card.active" in lines
        assert "    card.card-body" in lines
        assert "    card_compact" in lines

# tests/unit/test_cli.py
"""
CLI unit tests.

Tests each command via typer's CliRunner with the config file redirected
to a temporary directory.
"""

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from interactive_de.cli import app, report_error
from interactive_de.errors import ChannelError, CustomError
from interactive_de.schema import BytesSchema, EnumSchema, IntSchema, StructSchema

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    with patch("interactive_de.config.loader.get_config_path", return_value=tmp_path / "config.yaml"):
        yield tmp_path / "config.yaml"
    root.handlers[:] = handlers
    root.setLevel(level)


class TestHelp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Build typed values by answering prompts" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "zoo" in result.output
        assert "config-path" in result.output


class TestZoo:
    def test_builds_and_prints(self):
        result = runner.invoke(app, ["zoo"], input="y\n5\nn\n")
        assert result.exit_code == 0
        assert "These are their stories." in result.output
        assert "zoo.animals - Any elements to add? " in result.output
        assert "And here is your finished Zoo:" in result.output
        assert "Penguin" in result.output

    def test_no_banner_and_custom_name(self):
        result = runner.invoke(app, ["zoo", "--no-banner", "--name", "park"], input="n\n")
        assert result.exit_code == 0
        assert "These are their stories." not in result.output
        assert "park.animals - Any elements to add? " in result.output

    def test_banner_disabled_in_config(self, isolated_config):
        isolated_config.write_text("output:\n  show_banner: false\n")
        result = runner.invoke(app, ["zoo"], input="n\n")
        assert result.exit_code == 0
        assert "These are their stories." not in result.output

    def test_quit_prints_nothing_extra(self):
        result = runner.invoke(app, ["zoo", "--no-banner"], input="y\n:q\n")
        assert result.exit_code == 0
        assert "finished" not in result.output
        assert "error:" not in result.output

    def test_end_of_input_is_a_quit(self):
        result = runner.invoke(app, ["zoo", "--no-banner"], input="")
        assert result.exit_code == 0
        assert "finished" not in result.output

    def test_unsupported_shape_is_reported(self):
        with patch("interactive_de.model.ZOO", BytesSchema()):
            result = runner.invoke(app, ["zoo", "--no-banner"], input="")
        assert result.exit_code == 1
        assert "error: unsupported shape: Bytes cannot be entered interactively" in result.output

    def test_cause_chain_is_printed(self):
        def build(n):
            raise ValueError("too many animals")

        schema = StructSchema("Zoo", {"n": IntSchema()}, build=build)
        with patch("interactive_de.model.ZOO", schema):
            result = runner.invoke(app, ["zoo", "--no-banner"], input="3\n")
        assert result.exit_code == 1
        assert "error: invalid value for Zoo" in result.output
        assert "  caused by: too many animals" in result.output


class TestReportError:
    def test_walks_every_cause(self, capsys):
        try:
            try:
                raise OSError("pipe closed")
            except OSError as e:
                raise ChannelError() from e
        except ChannelError as err:
            wrapped = CustomError("could not finish")
            wrapped.__cause__ = err
            report_error(wrapped)

        assert capsys.readouterr().out == (
            "error: could not finish\n"
            "  caused by: io error\n"
            "  caused by: pipe closed\n"
        )


class TestConfigPath:
    def test_prints_path(self, isolated_config):
        result = runner.invoke(app, ["config-path"])
        assert result.exit_code == 0
        assert str(isolated_config) in result.output


class TestStderr:
    def test_quit_leaves_stderr_empty(self):
        result = runner.invoke(app, ["zoo", "--no-banner"], input="y\n:q\n")
        assert result.exit_code == 0
        assert result.stderr == ""

    def test_successful_run_leaves_stderr_empty(self):
        result = runner.invoke(app, ["zoo", "--no-banner"], input="n\n")
        assert result.exit_code == 0
        assert result.stderr == ""


class TestContractFailures:
    def test_empty_enum_is_reported(self):
        with patch("interactive_de.model.ZOO", EnumSchema("Empty", [])):
            result = runner.invoke(app, ["zoo", "--no-banner"], input="")
        assert result.exit_code == 1
        assert "error: enum Empty has no variants" in result.output

    def test_invalid_config_is_reported(self, isolated_config):
        isolated_config.write_text("prompt:\n  indent_step: 0\n")
        result = runner.invoke(app, ["zoo", "--no-banner"], input="n\n")
        assert result.exit_code == 2
        assert "error:" in result.output
        assert "Any elements to add" not in result.output

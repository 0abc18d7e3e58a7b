"""Tests for the --examples option helper."""

import click
from click.testing import CliRunner

from campuscoffee.commands._base import examples, format_examples


def test_format_examples_prefixes_program() -> None:
    text = format_examples("campuscoffee pos", ("pos list", "-q pos list"))
    assert text.splitlines() == [
        "Examples for 'campuscoffee pos':",
        "",
        "  campuscoffee pos list",
        "  campuscoffee -q pos list",
    ]


def test_examples_flag_exits_before_command_runs(cli_runner: CliRunner) -> None:
    calls: list[str] = []

    @click.command()
    @examples("demo 1")
    @click.argument("value")
    def demo(value: str) -> None:
        calls.append(value)

    result = cli_runner.invoke(demo, ["--examples"], prog_name="demo")
    assert result.exit_code == 0
    assert "  campuscoffee demo 1" in result.output
    assert calls == []

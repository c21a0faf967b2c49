"""Smoke tests verifying CLI entry points load."""

from __future__ import annotations

import importlib
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.mark.parametrize(
    "module_path, attr_name, prog_name",
    [
        ("sqlgrid.grid_query.main", "cli", "sqlgrid"),
    ],
)
def test_cli_entrypoint_help(module_path: str, attr_name: str, prog_name: str) -> None:
    module = importlib.import_module(module_path)
    cli: Callable[..., object] = getattr(module, attr_name)

    runner = CliRunner()
    result = runner.invoke(cli, ["--help"], prog_name=prog_name)

    assert result.exit_code == 0, result.output
    assert "Usage" in result.output

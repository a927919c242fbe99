"""Tests for the schema export CLI."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from toolschema.cli import export as cli_export

_TESTS_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _TESTS_DIR.parents[1]


@pytest.fixture(autouse=True)
def _declared_schemas_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.syspath_prepend(str(_TESTS_DIR))


def test_export_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli_export.main(["declared_schemas:DIRECTION", "--compact"])

    assert rc == 0
    out = capsys.readouterr().out.strip()
    assert out == '{"type":"STRING","format":"enum","enum":["EAST","NORTH","SOUTH","WEST"]}'


def test_export_callable_to_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "person.json"
    rc = cli_export.main(["declared_schemas:build_person", "--out", str(out_path)])

    assert rc == 0
    assert capsys.readouterr().out.startswith("OK: declared_schemas:build_person -> ")
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload == {
        "type": "OBJECT",
        "properties": {"name": {"type": "STRING"}, "age": {"type": "INTEGER"}},
        "required": ["name"],
    }


def test_export_dotted_attribute(capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli_export.main(["declared_schemas:Catalog.LOCATION", "--indent", "0"])

    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"type": "STRING", "description": "City and state."}


@pytest.mark.parametrize(
    "ref",
    [
        "declared_schemas",
        "declared_schemas:MISSING",
        "declared_schemas:NOT_A_SCHEMA",
        "no_such_module_for_export:DIRECTION",
    ],
)
def test_export_errors(ref: str, capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli_export.main([ref])

    assert rc == 1
    assert capsys.readouterr().out.startswith("ERROR: Schema reference failed")


def test_resolve_schema_ref_returns_schema() -> None:
    schema = cli_export.resolve_schema_ref("declared_schemas:DIRECTION")
    assert schema.enum_values == ("EAST", "NORTH", "SOUTH", "WEST")


def test_cli_module_entrypoint() -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(_TESTS_DIR), str(_REPO_ROOT), env.get("PYTHONPATH", "")]
    )
    result = subprocess.run(
        [sys.executable, "-m", "toolschema.cli.export", "declared_schemas:DIRECTION", "--compact"],
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )
    assert result.returncode == 0
    assert json.loads(result.stdout)["type"] == "STRING"

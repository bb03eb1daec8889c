"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from openapi_extension_gen.cli import cli, main


def _write_schema(tmp_path: Path, definitions: dict, name: str = "x-observability.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps({"definitions": definitions}), encoding="utf-8")
    return path


def test_generate_command_writes_extension_directory(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = _write_schema(
        tmp_path,
        {
            "trace": {"id": "x-trace", "properties": {"name": {"type": "string"}}},
            "weight": {"id": "x-weight", "type": "number"},
        },
    )
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, [str(schema_path), f"--out_dir={out_dir}", "--extension"])

    extension_dir = out_dir / "openapi_extensions_observability"
    assert result.exit_code == 0
    assert str(extension_dir) in result.output
    assert (extension_dir / "proto" / "x-observability.proto").exists()
    assert (extension_dir / "proto" / "x-observability.py").exists()
    assert (extension_dir / "main.py").exists()


def test_generate_command_accepts_config_and_verbose_flags(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = _write_schema(tmp_path, {"trace": {"id": "x-trace"}})
    config_path = tmp_path / "generator.yaml"
    config_path.write_text("license:\n  inline: Copyright Example\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    result = runner.invoke(
        cli,
        [str(schema_path), "--out-dir", str(out_dir), "--config", str(config_path), "--verbose"],
    )

    assert result.exit_code == 0
    main_path = out_dir / "openapi_extensions_observability" / "main.py"
    assert main_path.read_text(encoding="utf-8").startswith("# Copyright Example\n")


def test_validation_failures_are_listed_and_exit_with_error(capsys, tmp_path: Path) -> None:
    schema_path = _write_schema(
        tmp_path,
        {
            "Foo": {"id": "x-cost"},
            "Bar": {"id": "x-cost"},
            "Tags": {"id": "x-tags", "type": "array"},
        },
    )
    out_dir = tmp_path / "out"

    exit_code = main([str(schema_path), f"--out_dir={out_dir}"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema Bar and Foo have the same 'id' field value." in captured.err
    assert "Schema Tags has type 'array' which is not supported." in captured.err
    assert not out_dir.exists()


def test_invalid_config_returns_error(capsys, tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path, {"trace": {"id": "x-trace"}})

    exit_code = main(
        [
            str(schema_path),
            f"--out_dir={tmp_path / 'out'}",
            f"--config={tmp_path / 'absent.yaml'}",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err


def test_unreadable_config_is_reported_without_traceback(capsys, tmp_path: Path) -> None:
    schema_path = _write_schema(tmp_path, {"trace": {"id": "x-trace"}})
    config_dir = tmp_path / "generator.yaml"
    config_dir.mkdir()

    exit_code = main(
        [str(schema_path), f"--out_dir={tmp_path / 'out'}", f"--config={config_dir}"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot read configuration file" in captured.err
    assert "Traceback" not in captured.err

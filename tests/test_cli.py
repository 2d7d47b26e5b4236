"""CLI behaviour tests."""

from __future__ import annotations

import io
import tempfile
from pathlib import Path

import pytest

from typegen.cli import _build_parser, main

SAMPLE = '{"a":1,"b":"x","c":null}'


def _write_sample(directory: str, text: str = SAMPLE) -> str:
    path = Path(directory) / "sample.json"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_cli_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate"])
    assert args.command == "generate"
    assert args.input == "-"
    assert args.language == "typescript"
    assert args.option == []
    assert args.verbose is False


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--verbose", "-l", "go"])
    assert args.verbose is True
    assert args.language == "go"


def test_cli_rejects_unknown_language() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["generate", "-l", "cobol"])
    assert exc_info.value.code == 2


def test_generate_prints_code(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        main(["generate", _write_sample(temp_dir)])

    out = capsys.readouterr().out
    assert out == "export interface Root {\n  a: number;\n  b: string;\n  c: null;\n}\n"


def test_generate_reads_stdin(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    main(["generate", "-", "-l", "swift"])
    assert capsys.readouterr().out.startswith("struct Root: Codable {")


def test_generate_with_options(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        main([
            "generate", _write_sample(temp_dir),
            "-l", "rust",
            "-o", "deriveDebug=false",
            "--root-name", "Order",
        ])

    out = capsys.readouterr().out
    assert "#[derive(Serialize, Deserialize, Clone)]" in out
    assert "pub struct Order {" in out


def test_generate_with_options_file(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        options_path = Path(temp_dir) / "options.yaml"
        options_path.write_text("style: typeddict\nrootName: Event\n", encoding="utf-8")
        main(["generate", _write_sample(temp_dir), "-l", "python", "--options-file", str(options_path)])

    assert "class Event(TypedDict):" in capsys.readouterr().out


def test_generate_writes_file(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir) / "out"
        main(["generate", _write_sample(temp_dir), "-l", "php", "--root-name", "Order", "--out", str(out_dir)])

        target = out_dir / "order.php"
        assert target.read_text(encoding="utf-8").startswith("<?php")
        assert capsys.readouterr().out == f"Wrote {target}\n"


def test_generate_nothing_to_write(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir) / "out"
        main(["generate", _write_sample(temp_dir, "[1, 2]"), "--out", str(out_dir)])

        assert not out_dir.exists()
    assert "Nothing to generate" in capsys.readouterr().out


def test_generate_invalid_json(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", _write_sample(temp_dir, "{bad")])

    assert exc_info.value.code == 1
    assert "Invalid JSON:" in capsys.readouterr().err


def test_generate_malformed_option_pair(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", _write_sample(temp_dir), "-o", "useInterface"])

    assert exc_info.value.code == 1
    assert "Expected KEY=VALUE" in capsys.readouterr().err


def test_generate_unparseable_option_value(capsys) -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", _write_sample(temp_dir), "-l", "java", "-o", "packageName=[com"])

    assert exc_info.value.code == 1
    assert "Invalid value for packageName" in capsys.readouterr().err


def test_generate_deeply_nested_sample(capsys) -> None:
    deep = '{"a":' * 600 + "1" + "}" * 600
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", _write_sample(temp_dir, deep)])

    assert exc_info.value.code == 1
    assert "nests deeper than 100 levels" in capsys.readouterr().err


def test_generate_missing_input(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["generate", "/nonexistent/sample.json"])
    assert exc_info.value.code == 1


def test_languages_command(capsys) -> None:
    main(["languages"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert lines[0].split() == ["typescript", "TypeScript", ".ts"]


def test_cli_out_without_value_uses_configured_directory() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "sample.json", "--out"])
    assert args.out == Path("generated")

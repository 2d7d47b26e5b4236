"""CLI entrypoints for typegen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .core.config import load_options_file, settings
from .core.errors import ConfigError, InputTooDeepError, UnsupportedLanguageError
from .core.logging import configure_logging
from .generators import (
    build_generated_file,
    generate_from_text,
    options_for,
    registry,
    write_files,
)
from .generators.options import TargetLanguage


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typegen",
        description="Generate typed source code from a sample JSON document.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate type declarations for one target language.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to the JSON sample, or - for stdin (default).",
    )
    generate_parser.add_argument(
        "-l",
        "--language",
        choices=[language.value for language in TargetLanguage],
        default=settings.default_language,
        help="Target language (default: %(default)s).",
    )
    generate_parser.add_argument(
        "--root-name",
        default=None,
        help="Name of the root type (default: Root).",
    )
    generate_parser.add_argument(
        "-o",
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set a generator option, e.g. useInterface=false. Repeatable.",
    )
    generate_parser.add_argument(
        "--options-file",
        type=Path,
        help="YAML or JSON file with generator options.",
    )
    generate_parser.add_argument(
        "--out",
        type=Path,
        nargs="?",
        const=Path(settings.output_dir),
        help="Write <root>.<ext> into this directory instead of printing "
        "(default directory: %(const)s).",
    )

    languages_parser = subparsers.add_parser(
        "languages",
        help="List supported target languages.",
    )
    _add_verbose_option(languages_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=settings.api_host)
    serve_parser.add_argument("--port", type=int, default=settings.api_port)

    return parser


def _parse_option_pairs(pairs: List[str]) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw_value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        key = key.strip()
        # YAML scalars give true/false/numbers their natural types
        try:
            options[key] = yaml.safe_load(raw_value) if raw_value.strip() else ""
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid value for {key}: {exc}") from exc
    return options


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        raw_options: Dict[str, Any] = {}
        if args.options_file is not None:
            raw_options.update(load_options_file(args.options_file))
        raw_options.update(_parse_option_pairs(args.option))
        if args.root_name is not None:
            raw_options["root_name"] = args.root_name
        text = _read_input(args.input)
    except (ConfigError, ValueError, OSError) as exc:
        parser.exit(1, f"{exc}\n")

    try:
        spec = registry.get(args.language)
    except UnsupportedLanguageError as exc:
        parser.exit(2, f"{exc}\n")
    options = options_for(spec.language, raw_options)

    try:
        code = generate_from_text(text, spec.language, options)
    except json.JSONDecodeError as exc:
        parser.exit(1, f"Invalid JSON: {exc}\n")
    except InputTooDeepError as exc:
        parser.exit(1, f"{exc}\n")

    if args.out is None:
        if code:
            print(code)
        return

    generated = build_generated_file(code, options.root_name, spec.language)
    if generated is None:
        print("Nothing to generate: the sample contains no object type")
        return
    [path] = write_files([generated], args.out)
    print(f"Wrote {path}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for typegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    if args.command == "generate":
        _run_generate(parser, args)
    elif args.command == "languages":
        for spec in registry.languages():
            print(f"{spec.language.value:<12} {spec.label:<12} .{spec.extension}")
    elif args.command == "serve":
        import uvicorn

        uvicorn.run("typegen.main:app", host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":  # pragma: no cover
    main()

"""
ProWrite CLI — Command-line access to the text utilities.

Every command prints JSON on stdout; logs go to stderr.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from prowrite import __version__
from prowrite.core.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_component_logger,
)
from prowrite.extract import (
    parse_chat_response,
    parse_cold_email_content,
    parse_educational_content,
    parse_hr_document,
    parse_landing_page_content,
)
from prowrite.generation import (
    extract_tokens,
    filter_to_distinct_variations,
    validate_token_preservation,
)
from prowrite.schema import (
    AggregateValidationError,
    ModuleType,
    parse_input_schema,
    validate_template_input,
)

log = get_component_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class InputError(Exception):
    """CLI input could not be read or decoded."""


def read_input(value: str) -> str:
    """Read literal text, a file path, or stdin ("-")."""
    if value == "-":
        return sys.stdin.read()
    # Only check as path if it's short enough to be a valid path
    if len(value) < 256 and "\n" not in value and Path(value).is_file():
        try:
            return Path(value).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read {value}: {e}") from e
    return value


def read_json(value: str) -> Any:
    text = read_input(value)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON: {e}") from e


def emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


# =============================================================================
# Commands
# =============================================================================

def run_schema(args: argparse.Namespace) -> int:
    """Check the shape of an input schema."""
    schema = read_json(args.schema)
    try:
        parsed = parse_input_schema(schema)
    except AggregateValidationError as e:
        emit({"valid": False, "errors": e.errors})
        return EXIT_INVALID

    emit({"valid": True, "fields": [f.name for f in parsed.fields]})
    return EXIT_OK


def run_validate(args: argparse.Namespace) -> int:
    """Check submitted data against a schema's required fields."""
    schema = read_json(args.schema)
    data = read_json(args.data)
    if not isinstance(data, dict):
        raise InputError("DATA must be a JSON object")

    result = validate_template_input(schema, data)
    emit(asdict(result))
    return EXIT_OK if result.valid else EXIT_INVALID


def run_sections(args: argparse.Namespace) -> int:
    emit(asdict(parse_educational_content(read_input(args.input))))
    return EXIT_OK


def run_document(args: argparse.Namespace) -> int:
    emit(asdict(parse_hr_document(read_input(args.input))))
    return EXIT_OK


def run_parse(args: argparse.Namespace) -> int:
    """Parse generated output in the format of a module."""
    content = read_input(args.input)
    module = ModuleType(args.module)

    if module == ModuleType.COLD_EMAIL:
        parsed = parse_cold_email_content(content)
    elif module == ModuleType.WEBSITE_COPY:
        parsed = parse_landing_page_content(content)
    else:
        emit(asdict(parse_chat_response(content, module_type=module)))
        return EXIT_OK

    check = parsed.check()
    emit({**asdict(parsed), **asdict(check)})
    return EXIT_OK if check.is_valid else EXIT_INVALID


def run_tokens(args: argparse.Namespace) -> int:
    """List tokens, or check that expected tokens survived."""
    content = read_input(args.input)

    if not args.expect:
        emit({"tokens": extract_tokens(content)})
        return EXIT_OK

    result = validate_token_preservation(args.expect, content)
    emit(asdict(result))
    return EXIT_OK if result.is_valid else EXIT_INVALID


def run_distinct(args: argparse.Namespace) -> int:
    """Filter a JSON array of candidate texts to distinct variations."""
    candidates = read_json(args.input)
    if not isinstance(candidates, list) or not all(isinstance(c, str) for c in candidates):
        raise InputError("INPUT must be a JSON array of strings")

    kept = filter_to_distinct_variations(candidates, threshold=args.threshold)
    emit({"variations": kept, "dropped": len(candidates) - len(kept)})
    return EXIT_OK


COMMANDS = {
    "schema": run_schema,
    "validate": run_validate,
    "sections": run_sections,
    "document": run_document,
    "parse": run_parse,
    "tokens": run_tokens,
    "distinct": run_distinct,
}


# =============================================================================
# Entry point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prowrite",
        description="Structured-text utilities for generated content",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"prowrite {__version__}",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or PROWRITE_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (validate,extract,tokens,variation,catalog,system). Default: all",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    input_help = "Input text or path to file (use - for stdin)"

    schema_parser = subparsers.add_parser("schema", help="Check an input schema's shape")
    schema_parser.add_argument("schema", help="Schema JSON or path (use - for stdin)")

    validate_parser = subparsers.add_parser("validate", help="Validate data against a schema")
    validate_parser.add_argument("schema", help="Schema JSON or path")
    validate_parser.add_argument("data", help="Data JSON or path")

    sections_parser = subparsers.add_parser("sections", help="Extract educational sections")
    sections_parser.add_argument("input", help=input_help)

    document_parser = subparsers.add_parser("document", help="Split an HR document from its explanation")
    document_parser.add_argument("input", help=input_help)

    parse_parser = subparsers.add_parser("parse", help="Parse output in a module's format")
    parse_parser.add_argument("input", help=input_help)
    parse_parser.add_argument(
        "--module",
        choices=[m.value for m in ModuleType],
        default=ModuleType.COLD_EMAIL.value,
        help="Module whose output format to parse (default: cold_email)",
    )

    tokens_parser = subparsers.add_parser("tokens", help="List or check {{token}} placeholders")
    tokens_parser.add_argument("input", help=input_help)
    tokens_parser.add_argument(
        "--expect",
        action="append",
        default=[],
        metavar="TOKEN",
        help="Token that must be present (repeatable)",
    )

    distinct_parser = subparsers.add_parser("distinct", help="Keep only distinct variations")
    distinct_parser.add_argument("input", help="JSON array of strings or path (use - for stdin)")
    distinct_parser.add_argument(
        "--threshold",
        type=float,
        default=0.9,
        help="Similarity above which a candidate is dropped (default: 0.9)",
    )

    return parser


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)

    bind_request_context(command=args.command)
    try:
        code = COMMANDS[args.command](args)
    except InputError as e:
        log.error("input_error", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    finally:
        clear_request_context()

    log.info("command_finished", command=args.command, exit_code=code)
    return code


if __name__ == "__main__":
    sys.exit(main())

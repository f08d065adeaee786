"""CLI command handlers for wpslugify.

Each public ``handle_*`` function corresponds to a CLI subcommand and
encapsulates the input handling and output formatting for that command.
:func:`main` wires them together and turns :class:`ActionableError` into
a readable message and a non-zero exit status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wpslugify.config import DEFAULT_SETTINGS_PATH, OUTPUT_FORMATS, Settings, load_settings
from wpslugify.errors import ActionableError
from wpslugify.logging import configure_file_logging, remove_file_logging, set_verbosity
from wpslugify.policy import SlugPolicy, apply_policy, slugify_with_policy
from wpslugify.text import sanitize_and_split

_log = logging.getLogger(__name__)

STDIN_PATH = "-"


def handle_slug(args: argparse.Namespace, settings: Settings) -> None:
    """Print the slug of the given words, joined by spaces."""
    text = " ".join(args.text)
    slug = slugify_with_policy(text, _policy(args, settings))
    if _output_format(args, settings) == "json":
        print(json.dumps({"text": text, "slug": slug}, ensure_ascii=False))
    else:
        print(slug)


def handle_split(args: argparse.Namespace, settings: Settings) -> None:
    """Print the sanitized words, one per line or as a JSON array."""
    text = " ".join(args.text)
    words = apply_policy(sanitize_and_split(text), _policy(args, settings))
    if _output_format(args, settings) == "json":
        print(json.dumps(words, ensure_ascii=False))
    else:
        for word in words:
            print(word)


def handle_batch(args: argparse.Namespace, settings: Settings) -> None:
    """Slugify every line of a UTF-8 file (or stdin), one slug per line.

    Output stays line-aligned with the input: a blank or all-punctuation
    line produces an empty output line rather than being skipped.
    """
    text = read_input(args.path)
    policy = _policy(args, settings)

    rows: list[dict[str, str]] = []
    for line in input_lines(text):
        rows.append({"text": line, "slug": slugify_with_policy(line, policy)})

    if _output_format(args, settings) == "json":
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for row in rows:
            print(row["slug"])

    _log.info("Slugified %d lines from %s", len(rows), _describe(args.path))


def read_input(path: str) -> str:
    """Read *path* (``-`` for stdin) and decode it as strict UTF-8.

    Raises :class:`ActionableError` INPUT when the path can't be read and
    DECODE when the bytes aren't UTF-8.  The sanitization pipeline only
    ever sees valid text.
    """
    source = _describe(path)
    try:
        raw = sys.stdin.buffer.read() if path == STDIN_PATH else Path(path).read_bytes()
        return raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(exc, source, "read input") from None


def input_lines(text: str) -> list[str]:
    """Split *text* into lines on ``\\n`` only, dropping a trailing ``\\r``.

    Unlike :meth:`str.splitlines`, U+2028, U+0085, form feeds and the like
    stay inside their line, so each input line yields exactly one slug.
    A final newline does not add an empty line.

    >>> input_lines("one\\u2028two\\r\\nthree\\n")
    ['one\\u2028two', 'three']
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    # Shared by every subcommand so options may follow the command name
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH} if it exists)",
    )
    common.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: [output].format from settings, else text)",
    )
    common.add_argument(
        "--raw",
        action="store_true",
        help="Ignore the [slug] policy and print the plain WordPress slug",
    )
    common.add_argument(
        "--log-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Also write a timestamped log file under DIR",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="wpslugify",
        description="WordPress-compatible slug generation",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", parents=[common], help="Print the slug for some text")
    slug_p.add_argument("text", nargs="+", help="Text to slugify (words are joined by spaces)")

    # -- split ---------------------------------------------------------------
    split_p = sub.add_parser("split", parents=[common], help="Print the sanitized words")
    split_p.add_argument("text", nargs="+", help="Text to sanitize (words are joined by spaces)")

    # -- batch ---------------------------------------------------------------
    batch_p = sub.add_parser("batch", parents=[common], help="Slugify each line of a file")
    batch_p.add_argument("path", type=str, help="UTF-8 text file, or '-' for stdin")

    return parser


_HANDLERS = {
    "slug": handle_slug,
    "split": handle_split,
    "batch": handle_batch,
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    set_verbosity(args.verbose)
    file_handler = (
        configure_file_logging(args.log_dir, command=args.command) if args.log_dir else None
    )

    try:
        settings = resolve_settings(args.config)
        _HANDLERS[args.command](args, settings)
    except ActionableError as exc:
        _log.error("%s failed: %s", args.command, exc.error)
        _log.debug("Error details: %s", exc.to_dict())
        print(f"Error: {exc.error}", file=sys.stderr)
        if exc.suggestion:
            print(f"Suggestion: {exc.suggestion}", file=sys.stderr)
        return 1
    finally:
        if file_handler is not None:
            remove_file_logging(file_handler)

    return 0


def resolve_settings(config_path: str | None) -> Settings:
    """Load *config_path*, else the default settings file, else defaults."""
    if config_path is not None:
        return load_settings(config_path)
    if DEFAULT_SETTINGS_PATH.is_file():
        return load_settings(DEFAULT_SETTINGS_PATH)
    _log.debug("No %s found, using built-in defaults", DEFAULT_SETTINGS_PATH)
    return Settings()


# -- helpers -----------------------------------------------------------------


def _policy(args: argparse.Namespace, settings: Settings) -> SlugPolicy:
    return SlugPolicy() if args.raw else settings.policy()


def _output_format(args: argparse.Namespace, settings: Settings) -> str:
    return args.format or settings.output.format


def _describe(path: str) -> str:
    return "<stdin>" if path == STDIN_PATH else path


if __name__ == "__main__":
    sys.exit(main())

"""Configuration loading and validation.

Loads ``settings.toml`` and validates every field up front, so a typo in
a stopword list fails the command immediately instead of silently
producing different slugs halfway through a batch.

The validated config is exposed as a :class:`Settings` dataclass with
typed fields for each section: ``slug`` and ``output``.  Every section
and field is optional.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from wpslugify.errors import ActionableError
from wpslugify.policy import SlugPolicy
from wpslugify.text import sanitize_and_split

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class SlugConfig:
    """Slug policy settings from ``[slug]``."""

    max_words: int = 0
    max_length: int = 0
    drop_articles: bool = False
    stopwords: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Output settings from ``[output]``."""

    format: str = "text"


@dataclass
class Settings:
    """Top-level validated configuration."""

    slug: SlugConfig = field(default_factory=SlugConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def policy(self) -> SlugPolicy:
        """Build the :class:`SlugPolicy` described by ``[slug]``."""
        return SlugPolicy(
            max_words=self.slug.max_words,
            max_length=self.slug.max_length,
            stopwords=frozenset(self.slug.stopwords),
            drop_articles=self.slug.drop_articles,
        )


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~wpslugify.errors.ActionableError`:
      - CONFIG if the file is missing
      - INPUT if it cannot be read, DECODE if it is not UTF-8
      - PARSE if the TOML is malformed
      - VALIDATION if a field has the wrong type or is out of range

    Returns a fully validated :class:`Settings` instance.
    """
    filepath = Path(path)
    if not filepath.is_file():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy config/settings.toml from the project",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(
            exc,
            str(filepath),
            "load settings",
            suggestion=f"Make {filepath} a readable UTF-8 TOML file",
        ) from None

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location="TOML syntax",
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    settings = _validate(data, filepath)
    logger.debug("Loaded settings from %s", filepath)
    return settings


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- slug section --------------------------------------------------------
    slug_data = _optional_section(data, "slug", filepath)

    max_words = _non_negative_int(slug_data, "max_words", "slug")
    max_length = _non_negative_int(slug_data, "max_length", "slug")

    drop_articles = slug_data.get("drop_articles", False)
    if not isinstance(drop_articles, bool):
        raise ActionableError.validation(
            field_name="slug.drop_articles",
            reason=f"is {drop_articles!r}; must be true or false",
            suggestion="Set [slug].drop_articles to true or false",
        )

    raw_stopwords = slug_data.get("stopwords", [])
    if not isinstance(raw_stopwords, list) or not all(isinstance(w, str) for w in raw_stopwords):
        raise ActionableError.validation(
            field_name="slug.stopwords",
            reason="must be a list of strings",
            suggestion='Set [slug].stopwords to a list such as ["of", "and"]',
        )

    # Stopwords are compared against sanitized words, so sanitize them too
    stopwords: list[str] = []
    for entry in raw_stopwords:
        for word in sanitize_and_split(entry):
            if word not in stopwords:
                stopwords.append(word)

    slug = SlugConfig(
        max_words=max_words,
        max_length=max_length,
        drop_articles=drop_articles,
        stopwords=stopwords,
    )

    # -- output section ------------------------------------------------------
    output_data = _optional_section(data, "output", filepath)

    fmt = output_data.get("format", "text")
    if fmt not in OUTPUT_FORMATS:
        raise ActionableError.validation(
            field_name="output.format",
            reason=f"is {fmt!r}; must be one of {', '.join(OUTPUT_FORMATS)}",
            suggestion='Set [output].format to "text" or "json"',
        )

    return Settings(slug=slug, output=OutputConfig(format=str(fmt)))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str, filepath: Path) -> dict[str, object]:
    """Return a top-level section, an empty dict if absent, or raise CONFIG error."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] must be a table in {filepath}, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table in {filepath}",
        )
    return section


def _non_negative_int(section: dict[str, object], field_name: str, section_name: str) -> int:
    """Return an integer field that must be >= 0, or raise VALIDATION error."""
    value = section.get(field_name, 0)
    # bool is a subclass of int but never a valid limit
    if isinstance(value, bool) or not isinstance(value, int):
        raise ActionableError.validation(
            field_name=f"{section_name}.{field_name}",
            reason=f"is {value!r}; must be an integer",
            suggestion=f"Set [{section_name}].{field_name} to a whole number (0 means unlimited)",
        )
    if value < 0:
        raise ActionableError.validation(
            field_name=f"{section_name}.{field_name}",
            reason=f"is {value}; must be >= 0",
            suggestion=f"Set [{section_name}].{field_name} to 0 (unlimited) or a positive number",
        )
    return value

"""Character tables and compiled matchers for the sanitization pipeline.

Every table is a module-level constant and every pattern is compiled once,
at import time, so callers on any thread share the same read-only objects.

Patterns use the third-party :mod:`regex` module rather than :mod:`re`
because the residual-punctuation class needs the Unicode ``Alphabetic``
property (``\\p{Alphabetic}``), which :mod:`re` cannot express.
"""

from __future__ import annotations

from collections.abc import Iterable

import regex

# ---------------------------------------------------------------------------
# Soft punctuation: deleted with no replacement
# ---------------------------------------------------------------------------

TO_STRIP: tuple[str, ...] = (
    # Soft hyphen
    "\u00ad",
    # Inverted exclamation and question marks
    "\u00a1", "\u00bf",
    # Angle quotes
    "\u00ab", "\u00bb", "\u2039", "\u203a",
    # Curly quotes and bullet
    "\u2018", "\u2019", "\u201a", "\u201b", "\u201c", "\u201d", "\u201e", "\u201f", "\u2022",
    # Copyright, registered, degree, ellipsis, trademark
    "\u00a9", "\u00ae", "\u00b0", "\u2026", "\u2122",
    # Acute accents
    "\u00b4", "\u02ca", "\u0301", "\u0341",
    # Grave accent, macron, caron
    "\u0300", "\u0304", "\u030c",
)  # fmt: skip

# ---------------------------------------------------------------------------
# Soft dashes: any run of these collapses to a single hyphen
# ---------------------------------------------------------------------------

TO_REWRITE: tuple[str, ...] = (
    "&nbsp;",
    "&#160;",
    "&ndash;",
    "&8211;",
    "&mdash;",
    "&#8212;",
    "\u00a0",  # no-break space
    "\u2013",  # en dash
    "\u2014",  # em dash
    "-",
)

# Sentence punctuation rewritten to a hyphen
ACCEPTABLE_PUNCT: tuple[str, ...] = (".", "?", "!", ";", ":", "_", "@", "\r", "\n")


def one_or_more_of(members: Iterable[str]) -> str:
    """Build a pattern matching a run of one or more *members*, in any mix.

    Members are escaped and tried in the given order.
    """
    return "(?:" + "|".join(regex.escape(m) for m in members) + ")+"


# ---------------------------------------------------------------------------
# Compiled matchers
# ---------------------------------------------------------------------------

# Inner content may span lines
SCRIPT_AND_STYLE = regex.compile(
    r"<script[^>]*?>.*?</script>|<style[^>]*?>.*?</style>",
    regex.DOTALL,
)
ANY_TAG = regex.compile(r"<[^>]*?>")
SOFT_PUNCT = regex.compile(one_or_more_of(TO_STRIP))
SOFT_DASHES = regex.compile(one_or_more_of(TO_REWRITE))
# Lazy, and never crosses a line break
HTML_ENTITY = regex.compile(r"&.+?;")
ACCEPTABLE_PUNCT_RUN = regex.compile(one_or_more_of(ACCEPTABLE_PUNCT))
# Digits are ASCII only
RESIDUAL_PUNCT = regex.compile(r"[^%\p{Alphabetic}0-9 \-]+")
WORD_BOUNDARY = regex.compile(r"[ \-]+")

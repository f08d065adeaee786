"""WordPress-compatible title sanitization.

Pure functions with no I/O and no logging. The pipeline mirrors WordPress's
``sanitize_title_with_dashes()``: every step is a whole-string rewrite that
sees the full output of the previous step, and the steps run in the exact
order of :data:`SANITIZE_RULES`.  Reordering or fusing two steps changes
output for whole classes of input (smart quotes, accented letters,
embedded markup) without raising anything.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from wpslugify import tables


@dataclass(frozen=True)
class SanitizeRule:
    """One rewrite step: replace every match of *pattern* with *replacement*."""

    name: str
    pattern: regex.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


SANITIZE_RULES: tuple[SanitizeRule, ...] = (
    # Script/style bodies go first so their content can't leak through tag stripping
    SanitizeRule("strip_script_and_style", tables.SCRIPT_AND_STYLE, ""),
    SanitizeRule("strip_tags", tables.ANY_TAG, ""),
    SanitizeRule("remove_soft_punct", tables.SOFT_PUNCT, ""),
    SanitizeRule("rewrite_soft_dashes", tables.SOFT_DASHES, "-"),
    SanitizeRule("remove_remaining_entities", tables.HTML_ENTITY, ""),
    SanitizeRule("rewrite_acceptable_punct", tables.ACCEPTABLE_PUNCT_RUN, "-"),
    SanitizeRule("remove_remaining_punct", tables.RESIDUAL_PUNCT, ""),
)


def sanitize(text: str) -> str:
    """Lowercase *text* and run it through every rule in order.

    The result holds only ``%``, letters, ASCII digits, spaces and hyphens,
    but is not yet split: runs of spaces and leading or trailing hyphens
    may remain.

    >>> sanitize("Fish &amp; Chips!")
    'fish  chips-'
    """
    workspace = text.lower()
    for rule in SANITIZE_RULES:
        workspace = rule.apply(workspace)
    return workspace


def sanitize_and_split(text: str) -> list[str]:
    """Sanitize *text* and return its words, lowercased and in order.

    Exists alongside :func:`slugify` because slugified titles have uses
    beyond slugs: callers may want to cap the number of words, remove
    stopwords or language articles, and so on before joining.  Never
    raises; empty or all-punctuation input yields an empty list.

    >>> sanitize_and_split("  ----You--and--_-_me")
    ['you', 'and', 'me']
    """
    return [word for word in tables.WORD_BOUNDARY.split(sanitize(text)) if word]


def slugify(text: str) -> str:
    """Convert *text* to a lowercase slug with a single hyphen between words.

    >>> slugify("Töxic Tësticle Färm?")
    'töxic-tësticle-färm'
    """
    return "-".join(sanitize_and_split(text))

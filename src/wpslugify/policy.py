"""Caller-side slug policies applied on top of the sanitized word list.

The core pipeline deliberately stops at a list of words.  Shortening a
slug, removing stopwords or dropping ``a``/``an``/``the`` are site
policies, so they live here and operate on the output of
:func:`~wpslugify.text.sanitize_and_split` without changing it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from wpslugify.errors import ActionableError
from wpslugify.text import sanitize_and_split

logger = logging.getLogger(__name__)

ARTICLES: frozenset[str] = frozenset({"a", "an", "the"})


@dataclass(frozen=True)
class SlugPolicy:
    """Post-processing limits for a slug.  Zero means unlimited."""

    max_words: int = 0
    max_length: int = 0
    stopwords: frozenset[str] = field(default_factory=frozenset)
    drop_articles: bool = False

    def __post_init__(self) -> None:
        for name in ("max_words", "max_length"):
            value = getattr(self, name)
            if value < 0:
                raise ActionableError.validation(
                    field_name=name,
                    reason=f"is {value}; must be >= 0 (0 means unlimited)",
                )

    @property
    def dropped_words(self) -> frozenset[str]:
        if self.drop_articles:
            return self.stopwords | ARTICLES
        return self.stopwords


def apply_policy(words: Iterable[str], policy: SlugPolicy) -> list[str]:
    """Filter and truncate *words* according to *policy*.

    Steps run in order: stopword/article removal, word cap, length cap.
    Removal never empties a non-empty list; if every word would be
    dropped the words are kept as-is.  The length cap keeps whole words
    while the hyphen-joined result fits, and only cuts inside a word
    when the first word alone is too long.
    """
    words = list(words)

    dropped = policy.dropped_words
    if dropped:
        kept = [w for w in words if w not in dropped]
        if kept:
            words = kept
        elif words:
            logger.debug("Every word is a stopword, keeping %r unfiltered", words)

    if policy.max_words:
        words = words[: policy.max_words]

    if policy.max_length and words:
        fitted: list[str] = []
        length = 0
        for word in words:
            needed = len(word) + (1 if fitted else 0)
            if length + needed > policy.max_length:
                break
            fitted.append(word)
            length += needed
        if not fitted:
            fitted = [words[0][: policy.max_length]]
        words = fitted

    return words


def slugify_with_policy(text: str, policy: SlugPolicy) -> str:
    """Slugify *text*, then apply *policy* before joining.

    >>> slugify_with_policy("The Quick Brown Fox", SlugPolicy(drop_articles=True, max_words=2))
    'quick-brown'
    """
    return "-".join(apply_policy(sanitize_and_split(text), policy))

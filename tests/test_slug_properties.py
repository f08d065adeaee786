"""Property checks for :func:`wpslugify.text.slugify` over a realistic title corpus.

Covers :class:`TestSlugInvariants` and :class:`TestMarkupContainment`.
"""

from __future__ import annotations

import pytest
import regex

from wpslugify.text import slugify

# Titles of the kind editors actually type, plus a few hostile ones
TITLE_CORPUS: list[str] = [
    "This is a test.",
    "Excellent!!!1!1",
    "Töxic Tësticle Färm?",
    "  ----You--and--_-_me",
    "Boys & Girls & Those Elsewhere",
    "user@example.com",
    "“Smart” quotes — and dashes – everywhere…",
    "Rock ’n’ Roll Hall of Fame™",
    "Fish &amp; Chips&nbsp;&mdash;&nbsp;A History",
    "50% off: today only!",
    "C++ vs. C#: a comparison",
    "Привет, Мир!",
    "Ünïcödé Çhäräctérs",
    "Line one\nLine two\r\nLine three",
    "<h1>Heading</h1> with <b>bold</b> text",
    "price < 10 & qty > 2",
    "snake_case_and-kebab-case",
    "",
    "   ",
    "¿¡!?",
    "Version 2.0.1 released",
    "café naïve résumé",
    "&#8211;leading and trailing&#8212;",
    "a-.-b-!-c",
    "x² + y² = z²",
]


def _has_simple_case_mapping(text: str) -> bool:
    """True when upper-casing *text* does not change what lowercasing gives back."""
    return text.upper().lower() == text.lower()


class TestSlugInvariants:
    """
    REQUIREMENT: Every slug is stable, case-insensitive and well formed.

    WHO: Systems that store slugs and may re-slugify them later
    WHAT: slugify is idempotent; upper-casing the input does not change the
          slug; output never has doubled, leading or trailing hyphens; every
          character is a lowercase letter, an ASCII digit, '%' or '-'
    WHY: A slug that changes when re-processed, or differs by input case,
         produces two URLs for one post
    """

    @pytest.mark.parametrize("title", TITLE_CORPUS)
    def test_slugify_is_idempotent(self, title: str) -> None:
        """
        When a slug is slugified again
        Then it is unchanged
        """
        once = slugify(title)
        twice = slugify(once)

        assert twice == once, f"slugify not idempotent for {title!r}: {once!r} -> {twice!r}"

    @pytest.mark.parametrize("title", [t for t in TITLE_CORPUS if _has_simple_case_mapping(t)])
    def test_slug_ignores_input_case(self, title: str) -> None:
        """
        When the input is upper-cased
        Then the slug is the same
        """
        result = slugify(title.upper())

        assert result == slugify(title), f"Upper-cased {title!r} gave a different slug: {result!r}"

    @pytest.mark.parametrize("title", TITLE_CORPUS)
    def test_hyphens_are_single_and_internal(self, title: str) -> None:
        """
        When any title is slugified
        Then no hyphen is doubled and none starts or ends the slug
        """
        result = slugify(title)

        assert "--" not in result, f"Doubled hyphen in {result!r}"
        assert not result.startswith("-"), f"Leading hyphen in {result!r}"
        assert not result.endswith("-"), f"Trailing hyphen in {result!r}"

    @pytest.mark.parametrize("title", TITLE_CORPUS)
    def test_only_permitted_characters_appear(self, title: str) -> None:
        """
        When any title is slugified
        Then every character is a lowercase letter, ASCII digit, '%' or '-'
        """
        result = slugify(title)

        for ch in result:
            permitted = (
                ch in "-%0123456789"
                or (regex.fullmatch(r"\p{Alphabetic}", ch) is not None and ch == ch.lower())
            )
            assert permitted, f"Unexpected character {ch!r} in {result!r}"


class TestMarkupContainment:
    """
    REQUIREMENT: Nothing inside <script> or <style> reaches the slug.

    WHO: Sites that import titles from untrusted feeds
    WHAT: Whatever text a script or style block wraps, with or without
          attributes and across lines, none of it appears among the words
    WHY: Executable content must never become part of a URL
    """

    @pytest.mark.parametrize(
        "wrapper",
        [
            "<script>{}</script>",
            '<script type="text/javascript">{}</script>',
            "<style>{}</style>",
            '<style media="screen">{}</style>',
            "<SCRIPT>{}</SCRIPT>",
        ],
    )
    @pytest.mark.parametrize(
        "payload",
        [
            "hiddenword",
            "alert('hiddenword')",
            "if (a < b) { hiddenword(); }",
            "\nhiddenword\n",
            "body { hiddenword: 1; }",
        ],
    )
    def test_wrapped_content_never_appears(self, wrapper: str, payload: str) -> None:
        """
        When a payload is wrapped in script or style tags between visible words
        Then only the visible words remain
        """
        title = "Before " + wrapper.format(payload) + " After"

        result = slugify(title)

        assert "hiddenword" not in result, f"Payload leaked into {result!r}"
        assert result == "before-after", f"Expected 'before-after', got {result!r}"

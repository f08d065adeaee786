"""WordPress-compatible slugification.

A port of WordPress's ``sanitize_title_with_dashes()``: letters in the
Unicode ``Alphabetic`` class survive intact, markup and typographic
punctuation do not.

    >>> slugify("This is a <script>alert('!')</script> test")
    'this-is-a-test'
"""

from wpslugify.policy import SlugPolicy, apply_policy, slugify_with_policy
from wpslugify.text import sanitize, sanitize_and_split, slugify

__all__ = [
    "SlugPolicy",
    "apply_policy",
    "sanitize",
    "sanitize_and_split",
    "slugify",
    "slugify_with_policy",
]

"""
.. py:module:: charinfo.category
   :synopsis: The Unicode general categories and their logical groupings.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from enum import IntEnum

__author__ = "Florian Leitner"


class UnicodeCategory(IntEnum):
    """
    The Unicode general categories as stable integer values in the [0..29]
    range. These ordinals are the values stored in the classification
    tables and must not be renumbered: other systems consume them as raw
    numbers.
    """

    UPPERCASE_LETTER = 0
    "``Lu`` - upper-case letter"
    LOWERCASE_LETTER = 1
    "``Ll`` - lower-case letter"
    TITLECASE_LETTER = 2
    "``Lt`` - title-case digraph (Dz, Lj, Nj, etc.)"
    MODIFIER_LETTER = 3
    "``Lm`` - letter modifier"
    OTHER_LETTER = 4
    "``Lo`` - letter, other (letters without a case, ideographs)"
    NON_SPACING_MARK = 5
    "``Mn`` - non-spacing, combining mark (accent, tilde, acute, etc.)"
    SPACING_COMBINING_MARK = 6
    "``Mc`` - spacing combining mark (Indic vowel signs, etc.)"
    ENCLOSING_MARK = 7
    "``Me`` - combining, enclosing mark (Cyrillic number signs, etc.)"
    DECIMAL_DIGIT_NUMBER = 8
    "``Nd`` - decimal digit"
    LETTER_NUMBER = 9
    "``Nl`` - letter number (Roman numerals, etc.)"
    OTHER_NUMBER = 10
    "``No`` - other number (superscripts, fractions, etc.)"
    SPACE_SEPARATOR = 11
    "``Zs`` - space separator"
    LINE_SEPARATOR = 12
    "``Zl`` - line separator"
    PARAGRAPH_SEPARATOR = 13
    "``Zp`` - paragraph separator"
    CONTROL = 14
    "``Cc`` - control character (including TAB, LF, and CR)"
    FORMAT = 15
    "``Cf`` - formatting character (soft hyphen, BOM, etc.)"
    SURROGATE = 16
    "``Cs`` - high or low surrogate code unit"
    PRIVATE_USE = 17
    "``Co`` - private use"
    CONNECTOR_PUNCTUATION = 18
    "``Pc`` - connector punctuation (underscore, etc.)"
    DASH_PUNCTUATION = 19
    "``Pd`` - dash punctuation"
    OPEN_PUNCTUATION = 20
    "``Ps`` - opening bracket"
    CLOSE_PUNCTUATION = 21
    "``Pe`` - closing bracket"
    INITIAL_QUOTE_PUNCTUATION = 22
    "``Pi`` - initial quotation mark (like ``«``)"
    FINAL_QUOTE_PUNCTUATION = 23
    "``Pf`` - final quotation mark (like ``»``)"
    OTHER_PUNCTUATION = 24
    "``Po`` - other punctuation (``!``, ``,``, ``.``, ``:``, etc.)"
    MATH_SYMBOL = 25
    "``Sm`` - math symbol"
    CURRENCY_SYMBOL = 26
    "``Sc`` - currency symbol"
    MODIFIER_SYMBOL = 27
    "``Sk`` - modifier symbol (spacing accents, etc.)"
    OTHER_SYMBOL = 28
    "``So`` - other symbol"
    OTHER_NOT_ASSIGNED = 29
    "``Cn`` - not assigned to any character"

    @property
    def abbreviation(self) -> str:
        """The two-letter UCD alias of this category, e.g., ``Lu``."""
        return ABBREVIATIONS[self]

    @classmethod
    def from_abbreviation(cls, alias: str) -> 'UnicodeCategory':
        """
        Return the category for a two-letter UCD *alias* (as found in
        ``UnicodeData.txt`` or returned by :func:`unicodedata.category`).

        :raises: ValueError If the *alias* is not a general category.
        """
        try:
            return CATEGORY_MAP[alias]
        except KeyError:
            raise ValueError("unknown general category %r" % alias) from None


ABBREVIATIONS = (
    "Lu", "Ll", "Lt", "Lm", "Lo",
    "Mn", "Mc", "Me",
    "Nd", "Nl", "No",
    "Zs", "Zl", "Zp",
    "Cc", "Cf", "Cs", "Co",
    "Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po",
    "Sm", "Sc", "Sk", "So",
    "Cn",
)
"""
The two-letter UCD aliases, indexed by :class:`UnicodeCategory` value.
"""

CATEGORY_MAP = {alias: UnicodeCategory(value)
                for value, alias in enumerate(ABBREVIATIONS)}
"""
Mapping of the two-letter UCD aliases to :class:`UnicodeCategory` members.
"""

U = UnicodeCategory

LETTERS = frozenset({U.UPPERCASE_LETTER, U.LOWERCASE_LETTER,
                     U.TITLECASE_LETTER, U.MODIFIER_LETTER, U.OTHER_LETTER})
MARKS = frozenset({U.NON_SPACING_MARK, U.SPACING_COMBINING_MARK,
                   U.ENCLOSING_MARK})
NUMBERS = frozenset({U.DECIMAL_DIGIT_NUMBER, U.LETTER_NUMBER,
                     U.OTHER_NUMBER})
SEPARATORS = frozenset({U.SPACE_SEPARATOR, U.LINE_SEPARATOR,
                        U.PARAGRAPH_SEPARATOR})
PUNCTUATION = frozenset({U.CONNECTOR_PUNCTUATION, U.DASH_PUNCTUATION,
                         U.OPEN_PUNCTUATION, U.CLOSE_PUNCTUATION,
                         U.INITIAL_QUOTE_PUNCTUATION,
                         U.FINAL_QUOTE_PUNCTUATION, U.OTHER_PUNCTUATION})
SYMBOLS = frozenset({U.MATH_SYMBOL, U.CURRENCY_SYMBOL, U.MODIFIER_SYMBOL,
                     U.OTHER_SYMBOL})
ALNUM = LETTERS | frozenset({U.DECIMAL_DIGIT_NUMBER, U.LETTER_NUMBER})

del U

"""
.. py:module:: charinfo.info
   :synopsis: Locale-independent character type information for UTF-16
   code units.

All functions accept a code unit either as an integer in the
[0x0000..0xFFFF] range or as a single character string in the Basic
Multilingual Plane (including lone surrogates). Characters beyond the BMP
must be split into their surrogate pair first (see
:func:`charinfo.strtok.code_units`); they have no category of their own
here.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from charinfo.category import UnicodeCategory, LETTERS, MARKS, NUMBERS, \
        PUNCTUATION, SEPARATORS, SYMBOLS
from charinfo.tables import LEVEL1, LEVEL2, LEVEL3

__author__ = "Florian Leitner"

#################
# CONFIGURATION #
#################

MAX_CODE_UNIT = 0xFFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

WHITESPACE_CHARS = frozenset({
    0x0009,  # CHARACTER TABULATION
    0x000A,  # LINE FEED
    0x000B,  # LINE TABULATION
    0x000C,  # FORM FEED
    0x000D,  # CARRIAGE RETURN
    0x0020,  # SPACE
    0x00A0,  # NO-BREAK SPACE
    0x2000,  # EN QUAD
    0x2001,  # EM QUAD
    0x2002,  # EN SPACE
    0x2003,  # EM SPACE
    0x2004,  # THREE-PER-EM SPACE
    0x2005,  # FOUR-PER-EM SPACE
    0x2006,  # SIX-PER-EM SPACE
    0x2007,  # FIGURE SPACE
    0x2008,  # PUNCTUATION SPACE
    0x2009,  # THIN SPACE
    0x200A,  # HAIR SPACE
    0x200B,  # ZERO WIDTH SPACE
    0x3000,  # IDEOGRAPHIC SPACE
    0xFEFF,  # ZERO WIDTH NO-BREAK SPACE (BOM)
})
"""
The broader set of white-space code units used by the trimming functions
in :mod:`charinfo.strtok`. Note that :func:`is_white_space` does **not**
consult this set (e.g., U+200B and U+FEFF are formatting characters).
"""

SPACE_CONTROLS = frozenset({0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85})
"""
Code units that always are white-space, even though all but SPACE are
:attr:`UnicodeCategory.CONTROL` characters.
"""

##################
# IMPLEMENTATION #
##################


def code_unit(ch) -> int:
    """
    Narrow *ch* to a UTF-16 code unit.

    :param ch: An integer or a single character string.
    :return: The code unit as an integer in the [0..0xFFFF] range.
    :raises: TypeError If *ch* is neither an integer nor a string.
    :raises: ValueError If *ch* is out of range, not a single character, or
                        a character beyond the Basic Multilingual Plane.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError("expected a single character, got %r" % ch)

        unit = ord(ch)
    elif isinstance(ch, int) and not isinstance(ch, bool):
        unit = ch
    else:
        raise TypeError("expected a code unit, got %s" % type(ch).__name__)

    if not 0 <= unit <= MAX_CODE_UNIT:
        raise ValueError("%r is not a UTF-16 code unit" % ch)

    return unit


def classify(ch) -> UnicodeCategory:
    """
    Return the general category of the code unit *ch*.

    Unassigned code units are :attr:`UnicodeCategory.OTHER_NOT_ASSIGNED`.
    """
    unit = code_unit(ch)
    row = LEVEL1[unit >> 8]
    offset = LEVEL2[(row << 4) + ((unit >> 4) & 0xF)]
    return UnicodeCategory(LEVEL3[offset + (unit & 0xF)])


def is_letter(ch) -> bool:
    """``True`` if *ch* is any letter category (L?)."""
    return classify(ch) in LETTERS


def is_lower(ch) -> bool:
    """``True`` if *ch* is a lower-case letter (Ll)."""
    return classify(ch) == UnicodeCategory.LOWERCASE_LETTER


def is_upper(ch) -> bool:
    """``True`` if *ch* is an upper-case letter (Lu)."""
    return classify(ch) == UnicodeCategory.UPPERCASE_LETTER


def is_title_case(ch) -> bool:
    """
    ``True`` if *ch* is a title-case letter (Lt).

    Only a handful of digraphs are title-case, e.g., U+01C5 (Dz with caron),
    U+01C8 (Lj), U+01CB (Nj), and U+01F2 (Dz): a book title capitalizes
    the Serbian LJ as "Lj", not as "LJ".
    """
    return classify(ch) == UnicodeCategory.TITLECASE_LETTER


def is_mark(ch) -> bool:
    """``True`` if *ch* is any mark category (M?)."""
    return classify(ch) in MARKS


is_combining_character = is_mark


def is_number(ch) -> bool:
    """``True`` if *ch* is any number category (N?)."""
    return classify(ch) in NUMBERS


def is_digit(ch) -> bool:
    """``True`` if *ch* is a decimal digit (Nd)."""
    return classify(ch) == UnicodeCategory.DECIMAL_DIGIT_NUMBER


def is_separator(ch) -> bool:
    """``True`` if *ch* is any separator category (Z?)."""
    return classify(ch) in SEPARATORS


def is_control(ch) -> bool:
    """``True`` if *ch* is a control character (Cc)."""
    return classify(ch) == UnicodeCategory.CONTROL


def is_surrogate(ch) -> bool:
    """``True`` if *ch* is a high or low surrogate (Cs)."""
    return classify(ch) == UnicodeCategory.SURROGATE


def is_punctuation(ch) -> bool:
    """``True`` if *ch* is any punctuation category (P?)."""
    return classify(ch) in PUNCTUATION


def is_symbol(ch) -> bool:
    """``True`` if *ch* is any symbol category (S?)."""
    return classify(ch) in SYMBOLS


def is_high_surrogate(ch) -> bool:
    """``True`` if *ch* is in the U+D800..U+DBFF range."""
    return HIGH_SURROGATE_START <= code_unit(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch) -> bool:
    """``True`` if *ch* is in the U+DC00..U+DFFF range."""
    return LOW_SURROGATE_START <= code_unit(ch) <= LOW_SURROGATE_END


def is_white_space(ch) -> bool:
    """
    ``True`` if *ch* is TAB, LF, VT, FF, CR, SPACE, or NEXT LINE, or any
    separator category (Z?).
    """
    unit = code_unit(ch)

    if unit in SPACE_CONTROLS:
        return True

    return classify(unit) in SEPARATORS

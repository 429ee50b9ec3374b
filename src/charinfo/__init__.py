"""
.. py:module:: charinfo
   :synopsis: Locale-independent Unicode general categories of UTF-16 code
   units.

The classification itself lives in :mod:`charinfo.info`; its most
important names are re-exported here::

    >>> from charinfo import classify, is_upper
    >>> classify('A')
    <UnicodeCategory.UPPERCASE_LETTER: 0>
    >>> is_upper('a')
    False

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from charinfo.category import UnicodeCategory
from charinfo.info import code_unit, classify, is_letter, is_lower, \
        is_upper, is_title_case, is_mark, is_combining_character, \
        is_number, is_digit, is_separator, is_control, is_surrogate, \
        is_punctuation, is_symbol, is_high_surrogate, is_low_surrogate, \
        is_white_space, WHITESPACE_CHARS

__version__ = '1'

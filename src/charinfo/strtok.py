"""
.. py:module:: charinfo.strtok
   :synopsis: Trimming, splitting, and offset-based tokenization of text
   by the categories of its UTF-16 code units.

Offsets reported by the tokenizers are UTF-16 code unit offsets, not
Python string indices: a character beyond the Basic Multilingual Plane
counts as two units (its surrogate pair), and each half is classified
(as :attr:`.UnicodeCategory.SURROGATE`) on its own.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from io import StringIO
from types import FunctionType

from charinfo.category import ALNUM, UnicodeCategory
from charinfo.info import classify, is_digit, is_letter, is_white_space, \
        HIGH_SURROGATE_START, LOW_SURROGATE_START, MAX_CODE_UNIT, \
        WHITESPACE_CHARS

__author__ = "Florian Leitner"

#################
# CONFIGURATION #
#################

TRIM_CHARS = "".join(chr(u) for u in sorted(WHITESPACE_CHARS))
"""
:data:`.WHITESPACE_CHARS` as a string, for :meth:`str.strip`.
"""

NUMERALS = frozenset({UnicodeCategory.LETTER_NUMBER,
                      UnicodeCategory.OTHER_NUMBER})


##################
# IMPLEMENTATION #
##################

def code_units(text: str):
    """
    Yield the UTF-16 code units of a *text*; characters beyond the BMP are
    yielded as their surrogate pair.
    """
    for char in text:
        o = ord(char)

        if o > MAX_CODE_UNIT:
            o -= 0x10000
            yield HIGH_SURROGATE_START + (o >> 10)
            yield LOW_SURROGATE_START + (o & 0x3FF)
        else:
            yield o


def decode(units) -> str:
    """
    Join a sequence of code *units* back into a string; complete surrogate
    pairs are combined, lone surrogates are kept as they are.
    """
    data = b"".join(u.to_bytes(2, "little") for u in units)
    return data.decode("utf-16-le", "surrogatepass")


def category_iter(text: str):
    """Yield the :class:`.UnicodeCategory` of each code unit of a *text*."""
    for unit in code_units(text):
        yield classify(unit)


def trim(text: str) -> str:
    """Remove leading and trailing :data:`.WHITESPACE_CHARS` from *text*."""
    return text.strip(TRIM_CHARS)


def trim_start(text: str) -> str:
    """Remove leading :data:`.WHITESPACE_CHARS` from *text*."""
    return text.lstrip(TRIM_CHARS)


def trim_end(text: str) -> str:
    """Remove trailing :data:`.WHITESPACE_CHARS` from *text*."""
    return text.rstrip(TRIM_CHARS)


def split_white_space(text: str) -> list:
    """
    Split *text* at runs of :func:`.is_white_space` characters, dropping
    empty strings.
    """
    parts = []
    start = 0

    for idx, char in enumerate(text):
        if ord(char) <= MAX_CODE_UNIT and is_white_space(char):
            if idx > start:
                parts.append(text[start:idx])

            start = idx + 1

    if start < len(text):
        parts.append(text[start:])

    return parts


def morphology(cat: UnicodeCategory) -> str:
    """
    A one-character representation of a category: ``A`` for
    :attr:`.UnicodeCategory.UPPERCASE_LETTER` (0), ``B`` for the lower-case
    letters (1), and so forth up to ``^`` for the unassigned (29).
    """
    return chr(ord('A') + cat)


# token states; the function name is the token tag

def white_space(unit: int) -> bool:
    return is_white_space(unit)


def not_white_space(unit: int) -> bool:
    return not is_white_space(unit)


def letter(unit: int) -> bool:
    return is_letter(unit)


def digit(unit: int) -> bool:
    return is_digit(unit)


def numeral(unit: int) -> bool:
    return classify(unit) in NUMERALS


def alnum(unit: int) -> bool:
    return classify(unit) in ALNUM


def glyph(_) -> bool:
    return False


class Tokenizer:
    """
    Abstract tokenizer implementing the actual procedure.
    """

    def tag(self, text: str):
        """
        Tokenize the given *text* by yielding offset tags.

        A tag is a tuple of the start/end code unit offsets, the token tag,
        and a morphological representation of the token (see
        :func:`.morphology`).

        :param text: The string to tokenize.
        :return: An iterator over (start, end, tag, morphology) tag tuples.
        """
        return self._tag(list(code_units(text)))

    def tokenize(self, text: str):
        """Yield the token strings of a *text*."""
        units = list(code_units(text))

        for start, end, _, _ in self._tag(units):
            yield decode(units[start:end])

    def _tag(self, units: list):
        morph = None
        start = 0
        State = None

        for end, unit in enumerate(units):
            if State is not None and State(unit):
                morph.write(morphology(classify(unit)))
            else:
                if State is not None:
                    yield start, end, State.__name__, morph.getvalue()

                morph = StringIO()
                morph.write(morphology(classify(unit)))
                start = end
                State = self._findState(unit)

        if State is not None:
            yield start, len(units), State.__name__, morph.getvalue()

    @staticmethod
    def _findState(unit: int) -> FunctionType:
        """
        Abstract method that should define the state of the iteration
        through a string and thereby the token boundaries.

        The implementing method should return the appropriate function that
        evaluates to ``True`` as long as the next code unit belongs to the
        same token.
        """
        raise NotImplementedError("abstract")


class SpaceTokenizer(Tokenizer):
    """
    A tokenizer that only separates white-space code units (see
    :func:`.is_white_space`) from all others.

    Produces the following tags:

        * white_space (Z?, TAB, LF, VT, FF, CR, NEL)+
        * not_white_space (all others)+
    """

    @staticmethod
    def _findState(unit: int) -> FunctionType:
        if is_white_space(unit):
            return white_space
        else:
            return not_white_space


class WordTokenizer(Tokenizer):
    """
    A tokenizer that creates single code unit tokens for all non-letter,
    -digit, -numeral, and -white-space units, while it joins the others
    as long as the next unit is of that same kind, too.

    Produces the following tags:

        * letter (L?)+
        * digit (Nd)+
        * numeral (Nl, No)+
        * white_space (Z?, TAB, LF, VT, FF, CR, NEL)+
        * glyph (all others){1}
    """

    @staticmethod
    def _findState(unit: int) -> FunctionType:
        for State in (letter, white_space, digit, numeral):
            if State(unit):
                return State

        return glyph


class AlnumTokenizer(Tokenizer):
    """
    A tokenizer that creates single code unit tokens for all non-white-space
    and -alphanumeric units, and joins the latter two as long as the next
    unit is of that same kind, too.

    Produces the following tags:

        * alnum (L?, Nd, Nl)+
        * white_space (Z?, TAB, LF, VT, FF, CR, NEL)+
        * glyph (all others){1}
    """

    @staticmethod
    def _findState(unit: int) -> FunctionType:
        if alnum(unit):
            return alnum
        elif white_space(unit):
            return white_space
        else:
            return glyph

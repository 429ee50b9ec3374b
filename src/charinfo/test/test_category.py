"""category module tests"""

import unicodedata

from pytest import raises

from charinfo.category import UnicodeCategory, ABBREVIATIONS, ALNUM, \
        CATEGORY_MAP, LETTERS, MARKS, NUMBERS, PUNCTUATION, SEPARATORS, \
        SYMBOLS


class TestUnicodeCategory():

    """stable category values"""

    def test_closed_set(self):
        assert 30 == len(UnicodeCategory)
        assert list(range(30)) == [int(c) for c in UnicodeCategory]

    def test_stable_ordinals(self):
        assert 0 == UnicodeCategory.UPPERCASE_LETTER
        assert 4 == UnicodeCategory.OTHER_LETTER
        assert 8 == UnicodeCategory.DECIMAL_DIGIT_NUMBER
        assert 11 == UnicodeCategory.SPACE_SEPARATOR
        assert 14 == UnicodeCategory.CONTROL
        assert 16 == UnicodeCategory.SURROGATE
        assert 18 == UnicodeCategory.CONNECTOR_PUNCTUATION
        assert 24 == UnicodeCategory.OTHER_PUNCTUATION
        assert 25 == UnicodeCategory.MATH_SYMBOL
        assert 29 == UnicodeCategory.OTHER_NOT_ASSIGNED

    def test_from_raw_value(self):
        assert UnicodeCategory.TITLECASE_LETTER == UnicodeCategory(2)

        with raises(ValueError):
            UnicodeCategory(30)


class TestAbbreviations():

    """two-letter UCD aliases"""

    def test_abbreviation(self):
        assert 'Lu' == UnicodeCategory.UPPERCASE_LETTER.abbreviation
        assert 'Cs' == UnicodeCategory.SURROGATE.abbreviation
        assert 'Cn' == UnicodeCategory.OTHER_NOT_ASSIGNED.abbreviation

    def test_unique(self):
        assert 30 == len(set(ABBREVIATIONS))
        assert 30 == len(CATEGORY_MAP)

    def test_round_trip(self):
        for cat in UnicodeCategory:
            assert cat is UnicodeCategory.from_abbreviation(cat.abbreviation)

    def test_unicodedata_aliases(self):
        assert UnicodeCategory.LOWERCASE_LETTER == \
            UnicodeCategory.from_abbreviation(unicodedata.category('a'))
        assert UnicodeCategory.CURRENCY_SYMBOL == \
            UnicodeCategory.from_abbreviation(unicodedata.category('$'))

    def test_unknown_alias(self):
        with raises(ValueError):
            UnicodeCategory.from_abbreviation('LC')

        with raises(ValueError):
            UnicodeCategory.from_abbreviation('')


class TestGroups():

    """logical groupings of the categories"""

    def test_major_classes(self):
        assert {'L'} == {c.abbreviation[0] for c in LETTERS}
        assert {'M'} == {c.abbreviation[0] for c in MARKS}
        assert {'N'} == {c.abbreviation[0] for c in NUMBERS}
        assert {'Z'} == {c.abbreviation[0] for c in SEPARATORS}
        assert {'P'} == {c.abbreviation[0] for c in PUNCTUATION}
        assert {'S'} == {c.abbreviation[0] for c in SYMBOLS}

    def test_complete(self):
        assert 5 == len(LETTERS)
        assert 3 == len(MARKS)
        assert 3 == len(NUMBERS)
        assert 3 == len(SEPARATORS)
        assert 7 == len(PUNCTUATION)
        assert 4 == len(SYMBOLS)

    def test_alnum(self):
        assert LETTERS < ALNUM
        assert UnicodeCategory.DECIMAL_DIGIT_NUMBER in ALNUM
        assert UnicodeCategory.LETTER_NUMBER in ALNUM
        assert UnicodeCategory.OTHER_NUMBER not in ALNUM

from unittest import main, TestCase

import charinfo.info as I
from charinfo.category import UnicodeCategory as U


class ClassifyTests(TestCase):

    EXAMPLES = {
        'A': U.UPPERCASE_LETTER,
        'a': U.LOWERCASE_LETTER,
        '0': U.DECIMAL_DIGIT_NUMBER,
        0x01C5: U.TITLECASE_LETTER,
        0x02B0: U.MODIFIER_LETTER,
        0x05D0: U.OTHER_LETTER,
        0x4E00: U.OTHER_LETTER,
        0x0300: U.NON_SPACING_MARK,
        0x0903: U.SPACING_COMBINING_MARK,
        0x20DD: U.ENCLOSING_MARK,
        0x2160: U.LETTER_NUMBER,
        0x00B2: U.OTHER_NUMBER,
        ' ': U.SPACE_SEPARATOR,
        0x2028: U.LINE_SEPARATOR,
        0x2029: U.PARAGRAPH_SEPARATOR,
        '\t': U.CONTROL,
        0x0085: U.CONTROL,
        0xFEFF: U.FORMAT,
        0xD800: U.SURROGATE,
        0xDFFF: U.SURROGATE,
        0xE000: U.PRIVATE_USE,
        '_': U.CONNECTOR_PUNCTUATION,
        '-': U.DASH_PUNCTUATION,
        '(': U.OPEN_PUNCTUATION,
        ')': U.CLOSE_PUNCTUATION,
        '«': U.INITIAL_QUOTE_PUNCTUATION,
        '»': U.FINAL_QUOTE_PUNCTUATION,
        '!': U.OTHER_PUNCTUATION,
        '+': U.MATH_SYMBOL,
        '$': U.CURRENCY_SYMBOL,
        '^': U.MODIFIER_SYMBOL,
        '©': U.OTHER_SYMBOL,
        0x0378: U.OTHER_NOT_ASSIGNED,
        0xFFFF: U.OTHER_NOT_ASSIGNED,
    }

    def testExamples(self):
        for ch, cat in self.EXAMPLES.items():
            self.assertEqual(cat, I.classify(ch), repr(ch))

    def testBoundaries(self):
        self.assertEqual(U.CONTROL, I.classify(0))
        self.assertEqual(U.OTHER_NOT_ASSIGNED, I.classify(0xFFFE))
        self.assertEqual(U.OTHER_SYMBOL, I.classify(0xFFFD))

    def testTableVintage(self):
        # assignments that differ from later Unicode revisions
        self.assertEqual(U.SPACE_SEPARATOR, I.classify(0x200B))
        self.assertEqual(U.DASH_PUNCTUATION, I.classify(0x00AD))
        self.assertEqual(U.OTHER_NOT_ASSIGNED, I.classify(0x9FA6))
        self.assertEqual(U.OTHER_NOT_ASSIGNED, I.classify(0x4DB6))

    def testTotality(self):
        for unit in range(I.MAX_CODE_UNIT + 1):
            self.assertIsInstance(I.classify(unit), U)

    def testDeterminism(self):
        first = [I.classify(u) for u in range(0, I.MAX_CODE_UNIT + 1, 7)]
        second = [I.classify(u) for u in range(0, I.MAX_CODE_UNIT + 1, 7)]
        self.assertListEqual(first, second)

    def testStringAndIntegerAgree(self):
        for unit in (0x41, 0xE9, 0x3042, 0xD800, 0xFFFF):
            self.assertEqual(I.classify(unit), I.classify(chr(unit)))


class CodeUnitTests(TestCase):

    def testInteger(self):
        self.assertEqual(0, I.code_unit(0))
        self.assertEqual(0xFFFF, I.code_unit(0xFFFF))

    def testCharacter(self):
        self.assertEqual(0x41, I.code_unit('A'))
        self.assertEqual(0xDC00, I.code_unit('\udc00'))

    def testOutOfRange(self):
        for value in (-1, 0x10000, 0x10FFFF):
            self.assertRaises(ValueError, I.code_unit, value)

    def testSupplementaryCharacter(self):
        self.assertRaises(ValueError, I.code_unit, '\U0001F600')

    def testNotSingleCharacter(self):
        self.assertRaises(ValueError, I.code_unit, '')
        self.assertRaises(ValueError, I.code_unit, 'ab')

    def testWrongType(self):
        for value in (None, 1.0, b'A', True):
            self.assertRaises(TypeError, I.code_unit, value)

    def testPredicatesNarrow(self):
        self.assertRaises(ValueError, I.is_letter, 0x10000)
        self.assertRaises(ValueError, I.is_high_surrogate, -1)
        self.assertRaises(TypeError, I.is_white_space, None)


class PredicateTests(TestCase):

    PREDICATES = {
        I.is_letter: {U.UPPERCASE_LETTER, U.LOWERCASE_LETTER,
                      U.TITLECASE_LETTER, U.MODIFIER_LETTER, U.OTHER_LETTER},
        I.is_lower: {U.LOWERCASE_LETTER},
        I.is_upper: {U.UPPERCASE_LETTER},
        I.is_title_case: {U.TITLECASE_LETTER},
        I.is_mark: {U.NON_SPACING_MARK, U.SPACING_COMBINING_MARK,
                    U.ENCLOSING_MARK},
        I.is_number: {U.DECIMAL_DIGIT_NUMBER, U.LETTER_NUMBER,
                      U.OTHER_NUMBER},
        I.is_digit: {U.DECIMAL_DIGIT_NUMBER},
        I.is_separator: {U.SPACE_SEPARATOR, U.LINE_SEPARATOR,
                         U.PARAGRAPH_SEPARATOR},
        I.is_control: {U.CONTROL},
        I.is_surrogate: {U.SURROGATE},
        I.is_punctuation: {U.CONNECTOR_PUNCTUATION, U.DASH_PUNCTUATION,
                           U.OPEN_PUNCTUATION, U.CLOSE_PUNCTUATION,
                           U.INITIAL_QUOTE_PUNCTUATION,
                           U.FINAL_QUOTE_PUNCTUATION, U.OTHER_PUNCTUATION},
        I.is_symbol: {U.MATH_SYMBOL, U.CURRENCY_SYMBOL, U.MODIFIER_SYMBOL,
                      U.OTHER_SYMBOL},
    }

    def testCategoryEquivalence(self):
        categories = [I.classify(u) for u in range(I.MAX_CODE_UNIT + 1)]

        for predicate, members in self.PREDICATES.items():
            for unit, cat in enumerate(categories):
                self.assertEqual(cat in members, predicate(unit),
                                 "%s(U+%04X)" % (predicate.__name__, unit))

    def testCombiningCharacterIsMark(self):
        self.assertIs(I.is_mark, I.is_combining_character)
        self.assertTrue(I.is_combining_character(0x0301))
        self.assertFalse(I.is_combining_character('e'))

    def testUpperCaseA(self):
        self.assertTrue(I.is_upper('A'))
        self.assertFalse(I.is_lower('A'))
        self.assertTrue(I.is_letter('A'))

    def testLowerCaseA(self):
        self.assertTrue(I.is_letter('a'))
        self.assertTrue(I.is_lower('a'))
        self.assertFalse(I.is_upper('a'))

    def testDigitZero(self):
        self.assertTrue(I.is_digit('0'))
        self.assertTrue(I.is_number('0'))
        self.assertFalse(I.is_letter('0'))

    def testRomanNumeralIsNumberButNotDigit(self):
        self.assertTrue(I.is_number(0x2160))
        self.assertFalse(I.is_digit(0x2160))

    def testTitleCaseDigraphs(self):
        for unit in (0x01C5, 0x01C8, 0x01CB, 0x01F2):
            self.assertTrue(I.is_title_case(unit), hex(unit))
            self.assertFalse(I.is_upper(unit), hex(unit))
            self.assertFalse(I.is_lower(unit), hex(unit))


class SurrogateTests(TestCase):

    def testHighSurrogate(self):
        self.assertEqual(U.SURROGATE, I.classify(0xD800))
        self.assertTrue(I.is_high_surrogate(0xD800))
        self.assertFalse(I.is_low_surrogate(0xD800))
        self.assertTrue(I.is_high_surrogate(0xDBFF))

    def testLowSurrogate(self):
        self.assertTrue(I.is_low_surrogate(0xDC00))
        self.assertTrue(I.is_low_surrogate('\udfff'))
        self.assertFalse(I.is_high_surrogate(0xDC00))

    def testRangeEdges(self):
        self.assertFalse(I.is_high_surrogate(0xD7FF))
        self.assertFalse(I.is_low_surrogate(0xE000))

    def testPartition(self):
        for unit in range(I.MAX_CODE_UNIT + 1):
            high = I.is_high_surrogate(unit)
            low = I.is_low_surrogate(unit)
            self.assertFalse(high and low, hex(unit))
            self.assertEqual(high or low,
                             I.classify(unit) == U.SURROGATE, hex(unit))


class WhiteSpaceTests(TestCase):

    def testSpaceAndTab(self):
        self.assertTrue(I.is_white_space(0x20))
        self.assertTrue(I.is_white_space(0x09))
        self.assertFalse(I.is_white_space('A'))

    def testNextLineIsControlAndWhiteSpace(self):
        self.assertEqual(U.CONTROL, I.classify(0x0085))
        self.assertTrue(I.is_white_space(0x0085))

    def testControls(self):
        for ch in '\t\n\v\f\r':
            self.assertTrue(I.is_white_space(ch), repr(ch))

        self.assertFalse(I.is_white_space(0x0000))
        self.assertFalse(I.is_white_space(0x001C))

    def testSeparators(self):
        for unit in (0x00A0, 0x2000, 0x2028, 0x2029, 0x3000):
            self.assertTrue(I.is_white_space(unit), hex(unit))

    def testFormatCharactersAreNotWhiteSpace(self):
        self.assertFalse(I.is_white_space(0xFEFF))
        self.assertIn(0xFEFF, I.WHITESPACE_CHARS)

    def testWhiteSpaceDefinition(self):
        for unit in range(I.MAX_CODE_UNIT + 1):
            expected = unit in (0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85) or \
                I.is_separator(unit)
            self.assertEqual(expected, I.is_white_space(unit), hex(unit))

    def testWhitespaceChars(self):
        expected = {0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x3000, 0xFEFF}
        expected.update(range(0x2000, 0x200C))
        self.assertSetEqual(expected, set(I.WHITESPACE_CHARS))
        self.assertIsInstance(I.WHITESPACE_CHARS, frozenset)


if __name__ == '__main__':
    main()

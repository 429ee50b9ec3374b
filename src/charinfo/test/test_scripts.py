import os
import subprocess
import sys

from tempfile import TemporaryDirectory
from unittest import main, skipUnless, TestCase

from unidecode import unidecode

from charinfo import tables

SRC = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
SCRIPTS = os.path.join(os.path.dirname(SRC), 'scripts')


def run(script, *args, text=''):
    env = dict(os.environ, PYTHONIOENCODING='utf-8')
    env['PYTHONPATH'] = os.pathsep.join(
        p for p in (SRC, env.get('PYTHONPATH')) if p
    )
    return subprocess.run(
        [sys.executable, os.path.join(SCRIPTS, script)] + list(args),
        input=text, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
        encoding='utf-8', env=env
    )


def rows(result):
    return [line.split('\t') for line in result.stdout.split('\n')[:-1]]


@skipUnless(os.path.isdir(SCRIPTS), 'scripts directory not available')
class DumpAndDiffTests(TestCase):

    def setUp(self):
        self.tmp = TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        result = run('chartype.py', '--dump')
        self.assertEqual(0, result.returncode, result.stderr)
        self.dump = result.stdout

    def writeDump(self, content):
        path = os.path.join(self.tmp.name, 'dump.txt')

        with open(path, 'w', encoding='ascii') as stream:
            stream.write(content)

        return path

    def testDumpFormat(self):
        lines = self.dump.split('\n')
        self.assertEqual('', lines.pop())
        self.assertEqual(0x10000, len(lines))
        self.assertEqual('0041\tLu', lines[0x41])
        self.assertEqual('200B\tZs', lines[0x200B])

    def testDiffAgainstOwnDump(self):
        result = run('chartype.py', '--diff', self.writeDump(self.dump))
        self.assertEqual(0, result.returncode, result.stderr)
        self.assertEqual('', result.stdout)

    def testDiffReportsMismatch(self):
        self.assertIn('200B\tZs\n', self.dump)
        path = self.writeDump(self.dump.replace('200B\tZs\n', '200B\tCf\n'))
        result = run('chartype.py', '--diff', path)
        self.assertEqual(1, result.returncode, result.stderr)
        self.assertEqual('U+200B\tCf\tZs\n', result.stdout)

    def testDiffRejectsMalformedDump(self):
        path = self.writeDump('0x41\tLu\n' + self.dump)
        result = run('chartype.py', '--diff', path)
        self.assertEqual(2, result.returncode)
        self.assertIn('malformed', result.stderr)

    def testGeneratorReproducesTables(self):
        result = run('chartypegen.py', self.writeDump(self.dump))
        self.assertEqual(0, result.returncode, result.stderr)
        namespace = {}
        exec(result.stdout, namespace)
        self.assertEqual(tables.LEVEL1, namespace['LEVEL1'])
        self.assertEqual(tables.LEVEL2, namespace['LEVEL2'])
        self.assertEqual(tables.LEVEL3, namespace['LEVEL3'])


@skipUnless(os.path.isdir(SCRIPTS), 'scripts directory not available')
class ListingTests(TestCase):

    def testCategories(self):
        result = run('chartype.py', text='a-')
        self.assertEqual(0, result.returncode, result.stderr)
        self.assertListEqual([
            ['0', 'U+0061', 'Ll', 'LOWERCASE_LETTER'],
            ['1', 'U+002D', 'Pd', 'DASH_PUNCTUATION'],
        ], rows(result))

    def testTransliterationOfSurrogatePair(self):
        char = '\U0001D400'
        result = run('chartype.py', '--ascii', text='a' + char)
        self.assertEqual(0, result.returncode, result.stderr)
        self.assertNotIn('Surrogate', result.stderr)
        self.assertListEqual([
            ['0', 'U+0061', 'Ll', 'LOWERCASE_LETTER', 'a'],
            ['1', 'U+D835', 'Cs', 'SURROGATE', unidecode(char)],
            ['2', 'U+DC00', 'Cs', 'SURROGATE', ''],
        ], rows(result))

    def testOffsetsContinueAcrossLines(self):
        text = 'ab c\nde\n'
        listing = run('chartype.py', text=text)
        tokens = run('chartype.py', '--space', text=text)
        self.assertEqual(0, tokens.returncode, tokens.stderr)
        spans = [tuple(int(o) for o in row[:2]) for row in rows(tokens)]
        self.assertListEqual(
            [(0, 2), (2, 3), (3, 4), (4, 5), (5, 7), (7, 8)], spans
        )
        # the listing numbers the same code units
        self.assertEqual(len(text), len(rows(listing)))
        self.assertEqual('7', rows(listing)[-1][0])


if __name__ == '__main__':
    main()

#!/usr/bin/env python3

"""print the Unicode general category of each UTF-16 code unit of the input"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from argparse import ArgumentParser
import logging
import os
import sys

from unidecode import unidecode

from charinfo import reference
from charinfo.info import classify
from charinfo.strtok import AlnumTokenizer, SpaceTokenizer, WordTokenizer, \
        code_units

__author__ = 'Florian Leitner'
__version__ = '1'


def categorize(input_stream, transliterate=False):
    offset = 0

    for line in input_stream:
        for char in line:
            translit = unidecode(char) if transliterate else None

            # the second unit of a surrogate pair gets no transliteration
            for unit in code_units(char):
                cat = classify(unit)
                row = [offset, 'U+%04X' % unit, cat.abbreviation, cat.name]

                if transliterate:
                    row.append(translit)
                    translit = ''

                print(*row, sep='\t')
                offset += 1


def tokenize(input_stream, tokenizer):
    offset = 0

    for line in input_stream:
        length = 0

        for start, end, tag, morph in tokenizer.tag(line):
            print(offset + start, offset + end, tag, morph, sep='\t')
            length = end

        offset += length


def compare(dump_file):
    with open(dump_file, encoding='ascii') as stream:
        expected = reference.read(stream)

    mismatches = 0

    for unit, exp, act in reference.diff(expected):
        print('U+%04X' % unit, exp.abbreviation, act.abbreviation, sep='\t')
        mismatches += 1

    return mismatches


epilog = 'system (default) encoding: {}'.format(sys.getdefaultencoding())
parser = ArgumentParser(
    usage='%(prog)s [options] [FILE ...]',
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument('files', metavar='FILE', nargs='*', type=open,
                    help='input file(s); if absent, read from <STDIN>')
parser.add_argument('--ascii', action='store_true',
                    help='add an ASCII transliteration column')
parser.add_argument('--tokenize', action='store_const', const=AlnumTokenizer,
                    dest='tokenizer', help='print alnum tokens instead')
parser.add_argument('--space', action='store_const', const=SpaceTokenizer,
                    dest='tokenizer', help='print white-space tokens instead')
parser.add_argument('--word', action='store_const', const=WordTokenizer,
                    dest='tokenizer', help='print word tokens instead')
parser.add_argument('--dump', action='store_true',
                    help='write the categories of all code units and exit')
parser.add_argument('--diff', metavar='DUMP',
                    help='compare all code units against a dump and exit')
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()
files = args.files if args.files else [sys.stdin]

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

if args.dump:
    reference.write(sys.stdout)
    sys.exit(0)

if args.diff:
    try:
        sys.exit(1 if compare(args.diff) else 0)
    except (OSError, ValueError) as e:
        logging.exception("cannot compare against %s", args.diff)
        parser.error(str(e))

for input_stream in files:
    try:
        if args.tokenizer:
            tokenize(input_stream, args.tokenizer())
        else:
            categorize(input_stream, args.ascii)
    except Exception:
        logging.exception("unexpected program error")
        parser.error("unexpected program error")

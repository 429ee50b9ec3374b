#!/usr/bin/env python3

"""generate a three-level category table module from a category dump"""

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
import unicodedata

from charinfo import reference, trie

__author__ = 'Florian Leitner'
__version__ = '1'

parser = ArgumentParser(
    usage='%(prog)s [options] [DUMP]',
    description=__doc__,
    epilog='without a DUMP, the categories of Python\'s own UCD {} are '
           'used'.format(unicodedata.unidata_version),
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument('dump', metavar='DUMP', nargs='?',
                    help='a category dump as written by chartype.py --dump')
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

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

try:
    if args.dump:
        with open(args.dump, encoding='ascii') as stream:
            categories = reference.read(stream)
    else:
        categories = reference.from_unicodedata()

    tables = trie.compile_tables(categories)
    errors = list(trie.verify_tables(*tables, categories))

    if errors:
        raise RuntimeError('%d code units differ, first U+%04X' %
                           (len(errors), errors[0]))

    sys.stdout.write(trie.format_tables(*tables))
except Exception:
    logging.exception("unexpected program error")
    parser.error("unexpected program error")

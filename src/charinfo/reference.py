"""
.. py:module:: charinfo.reference
   :synopsis: Full-domain category dumps to regression-test classifiers.

A dump lists every UTF-16 code unit with its category, one per line::

    0041	Lu

(four hex digits, a tab, and the two-letter category alias). Comment lines
starting with ``#`` and blank lines are ignored when reading.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import hashlib
import logging
import re
import unicodedata

from charinfo.category import UnicodeCategory
from charinfo.info import classify, MAX_CODE_UNIT

__author__ = "Florian Leitner"

logger = logging.getLogger(__name__)

UNIT_PATTERN = re.compile(r"[0-9A-F]{4}")

TABLES_FINGERPRINT = \
    "fbc0e13de969887a3bbc7d01bed96a9f8b81ba4a3dd4add67bdc56f82622ecf6"
"""
The :func:`fingerprint` of the ported :mod:`charinfo.tables`.
"""


def dump(classifier=classify):
    """Yield ``(unit, category)`` pairs for all 65,536 code units."""
    for unit in range(MAX_CODE_UNIT + 1):
        yield unit, UnicodeCategory(classifier(unit))


def write(stream, classifier=classify):
    """Write the dump of *classifier* to a text *stream*."""
    for unit, cat in dump(classifier):
        print("%04X\t%s" % (unit, cat.abbreviation), file=stream)


def read(stream) -> list:
    """
    Read a dump from a text *stream*.

    :return: A list of 65,536 category values, indexed by code unit.
    :raises: ValueError If a line is malformed, a unit is repeated, or any
                        unit is missing.
    """
    categories = [None] * (MAX_CODE_UNIT + 1)

    for lno, line in enumerate(stream, 1):
        line = line.strip()

        if not line or line.startswith('#'):
            continue

        try:
            unit, alias = line.split('\t')

            if not UNIT_PATTERN.fullmatch(unit):
                raise ValueError("unit is not four upper-case hex digits")

            unit = int(unit, 16)
            cat = UnicodeCategory.from_abbreviation(alias)
        except ValueError as e:
            raise ValueError("line %d: malformed entry %r (%s)" %
                             (lno, line, e)) from e

        if categories[unit] is not None:
            raise ValueError("line %d: U+%04X repeated" % (lno, unit))

        categories[unit] = cat

    missing = sum(1 for c in categories if c is None)

    if missing:
        raise ValueError("%d code units missing, first U+%04X" %
                         (missing, categories.index(None)))

    return categories


def diff(reference, classifier=classify):
    """
    Yield ``(unit, expected, actual)`` for every code unit where the
    *classifier* disagrees with the *reference* category values.

    :raises: ValueError If the reference does not have exactly one value
                        per code unit.
    """
    if len(reference) != MAX_CODE_UNIT + 1:
        raise ValueError("expected %d reference values, got %d" %
                         (MAX_CODE_UNIT + 1, len(reference)))

    mismatches = 0

    for unit, expected in enumerate(reference):
        expected = UnicodeCategory(expected)
        actual = UnicodeCategory(classifier(unit))

        if expected != actual:
            mismatches += 1
            yield unit, expected, actual

    logger.info("%d of %d code units differ", mismatches, len(reference))


def from_unicodedata() -> list:
    """
    Return the category values of all code units according to Python's
    own :mod:`unicodedata` database.

    That database usually is a much newer Unicode revision than the one
    the :mod:`charinfo.tables` were generated from.
    """
    logger.debug("reading UCD %s categories", unicodedata.unidata_version)
    return [UnicodeCategory.from_abbreviation(unicodedata.category(chr(u)))
            for u in range(MAX_CODE_UNIT + 1)]


def fingerprint(classifier=classify) -> str:
    """
    Return the SHA-256 hex digest of the category values of all code units,
    one byte per unit in code unit order; two classifiers agree on the whole
    domain iff their fingerprints are equal.
    """
    values = bytes(int(classifier(u)) for u in range(MAX_CODE_UNIT + 1))
    return hashlib.sha256(values).hexdigest()

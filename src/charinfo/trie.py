"""
.. py:module:: charinfo.trie
   :synopsis: Compile, resolve, and render three-level category tables.

A flat table of 65,536 category values is split into blocks of sixteen
code units. Identical blocks are stored only once in level 3, and identical
rows of sixteen block offsets only once in level 2, while level 1 maps each
high byte to its level 2 row. Blocks and rows are numbered in the order
they are first seen.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging

from charinfo.category import UnicodeCategory

__author__ = "Florian Leitner"

logger = logging.getLogger(__name__)

DOMAIN_SIZE = 0x10000
BLOCK_SIZE = 16
ROW_SIZE = 16


def compile_tables(categories) -> tuple:
    """
    Compress a flat table of category values into three levels.

    :param categories: A sequence of 65,536 category values, one per code
                       unit.
    :return: A ``(level1, level2, level3)`` tuple of ``bytes``, a ``tuple``
             of offsets, and ``bytes``.
    :raises: ValueError If the sequence has the wrong length or contains
                        values that are not categories.
    :raises: RuntimeError If a level overflows its storage width.
    """
    categories = tuple(int(c) for c in categories)

    if len(categories) != DOMAIN_SIZE:
        raise ValueError("expected %d categories, got %d" %
                         (DOMAIN_SIZE, len(categories)))

    if min(categories) < 0 or max(categories) >= len(UnicodeCategory):
        raise ValueError("category values must be in [0..%d]" %
                         (len(UnicodeCategory) - 1))

    level3 = []
    block_cache = {}
    offsets = []

    for i in range(0, DOMAIN_SIZE, BLOCK_SIZE):
        block = categories[i:i + BLOCK_SIZE]
        offset = block_cache.get(block)

        if offset is None:
            offset = len(level3)
            block_cache[block] = offset
            level3.extend(block)

        offsets.append(offset)

    level2 = []
    row_cache = {}
    level1 = []

    for i in range(0, len(offsets), ROW_SIZE):
        row = tuple(offsets[i:i + ROW_SIZE])
        index = row_cache.get(row)

        if index is None:
            index = len(level2) // ROW_SIZE
            row_cache[row] = index
            level2.extend(row)

        level1.append(index)

    if max(level1) > 0xFF:
        raise RuntimeError("%d level 2 rows do not fit level 1 bytes" %
                           (max(level1) + 1))

    if max(level2) > 0xFFFF:
        raise RuntimeError("level 3 offset %d does not fit 16 bits" %
                           max(level2))

    logger.info("compiled %d blocks into %d+%d+%d table entries",
                len(offsets), len(level1), len(level2), len(level3))
    return bytes(level1), tuple(level2), bytes(level3)


def lookup(level1, level2, level3, unit: int) -> int:
    """Resolve the raw category value of a code *unit* in the given tables."""
    row = level1[unit >> 8]
    offset = level2[(row << 4) + ((unit >> 4) & 0xF)]
    return level3[offset + (unit & 0xF)]


def verify_tables(level1, level2, level3, categories):
    """
    Yield every code unit where the tables disagree with the flat
    *categories* sequence.
    """
    for unit, expected in enumerate(categories):
        if lookup(level1, level2, level3, unit) != int(expected):
            yield unit


def _rows(values, width: int = 16):
    for i in range(0, len(values), width):
        yield "    " + ", ".join(str(v) for v in values[i:i + width]) + ","


def format_tables(level1, level2, level3) -> str:
    """
    Render the three levels as the source text of a Python module that
    defines ``LEVEL1``, ``LEVEL2``, and ``LEVEL3`` the same way as
    :mod:`charinfo.tables` does.
    """
    lines = ['"""Generated by chartypegen.py; do not edit."""', ""]
    lines.append("LEVEL1 = bytes((")
    lines.extend(_rows(level1))
    lines.append("))")
    lines.append("")
    lines.append("LEVEL2 = (")
    lines.extend(_rows(level2))
    lines.append(")")
    lines.append("")
    lines.append("LEVEL3 = bytes((")
    lines.extend(_rows(level3))
    lines.append("))")
    return "\n".join(lines) + "\n"

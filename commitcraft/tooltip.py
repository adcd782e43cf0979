# tooltip.py
# Hover overlay for one column: where it sits, how big it is, what it says.

from collections import namedtuple

from .classify import tier_of
from .geometry import TH
from .materials import TIERS

TOOLTIP_INSET = 6      # gap between the top face and the box
TOOLTIP_PAD = 6
TOOLTIP_HEIGHT = 40
GLYPH_W = 5.5          # average glyph width at the tooltip font size
LINE_HEIGHT = 11
FONT_SIZE = 9
MAX_SUMMARY_COUNT = 999_999

Tooltip = namedtuple("Tooltip", ["x", "y", "width", "height", "lines", "tier"])


def count_summary(count):
    if count == 1:
        return "1 contribution"
    if count > MAX_SUMMARY_COUNT:
        return f"{MAX_SUMMARY_COUNT:,}+ contributions"
    return f"{count:,} contributions"


def tooltip_lines(date, count):
    tier = TIERS[tier_of(count)]
    return (date or "", count_summary(count), tier.flavor)


def max_line_chars():
    # widest line any tooltip can carry: ISO date, capped summary or flavour text
    flavor = max(len(t.flavor) for t in TIERS)
    return max(len("0000-00-00"), len(count_summary(MAX_SUMMARY_COUNT + 1)), flavor)


def box_width(lines):
    return max(len(line) for line in lines) * GLYPH_W + 2 * TOOLTIP_PAD


def make_tooltip(column):
    if column.height <= 0:
        return None
    cell = column.cell
    lines = tooltip_lines(cell.date, cell.count)
    width = box_width(lines)
    # the top face's upper vertex lies 2*TH above the top block's front-top vertex
    top = min(b.offset for b in column.blocks)
    y = column.sy + top - 2 * TH - TOOLTIP_INSET
    return Tooltip(column.sx, y, width, TOOLTIP_HEIGHT, lines, tier_of(cell.count))

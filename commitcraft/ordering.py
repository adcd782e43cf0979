# ordering.py
# Cells and columns of the scene, and their back-to-front draw order.

from collections import namedtuple

from .classify import column_materials, height_of, level_material
from .geometry import BH, anchor, layer_offset
from .materials import WATER

Cell = namedtuple("Cell", ["w", "d", "count", "date", "level"])
Column = namedtuple("Column", ["w", "d", "sx", "sy", "height", "blocks", "cell"])
# offset: vertical distance from the column anchor to the block's front-top vertex
# size: height of the block's side faces
Block = namedtuple("Block", ["z", "material", "offset", "size"])


def build_cells(calendar):
    cells = []
    for w, week in enumerate(calendar.weeks):
        for d, day in enumerate(week):
            cells.append(Cell(w, d, max(0, day.count), day.date, day.level))
    return cells


def build_column(cell, rng, detail="ore"):
    sx, sy = anchor(cell.w, cell.d)
    height = height_of(cell.count)
    blocks = [Block(0, WATER, layer_offset(0), BH)]
    if detail == "simple":
        material, size = level_material(cell.level)
        if cell.level > 0:
            blocks.append(Block(1, material, -size, size))
    else:
        materials = column_materials(cell.count, rng)
        for z in range(1, height + 1):
            blocks.append(Block(z, materials[z], layer_offset(z), BH))
    return Column(cell.w, cell.d, sx, sy, height, blocks, cell)


def depth(column):
    return column.w + column.d


def draw_order(columns):
    # painter's algorithm: far (small w + d) first; sorted() is stable so
    # columns on the same anti-diagonal keep their enumeration order
    return sorted(columns, key=depth)


def build_columns(calendar, rng, detail="ore"):
    return draw_order(build_column(cell, rng, detail) for cell in build_cells(calendar))

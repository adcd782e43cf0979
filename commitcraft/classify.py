# classify.py
# Column heights, per-layer materials and rarity tiers.

import random

from .materials import (
    COVERED_SURFACE,
    DEEP,
    LEVELS,
    ORE_TABLE,
    SOFT_SURFACE,
    SOIL,
    WATER,
)

H_MAX = 10
SOIL_CHANCE = 0.4      # transitional soil two layers below the top
MAX_COUNT_FACTOR = 2.5


def height_of(count):
    if count <= 0:
        return 0
    return min(count, H_MAX)


def depth_ratio(height, z):
    # 0 at the bottom of the stone section, 1 just under the soil
    stone_top = height - 2
    if stone_top > 1:
        return (z - 1) / (stone_top - 1)
    return 0.5


def count_factor(count):
    return min(MAX_COUNT_FACTOR, 1 + (count - 1) * 0.1)


def sample_ore(height, z, count, rng, table=ORE_TABLE):
    """Pick a deep-layer material from the ore table.

    Rules are tried rarest first and their chances are accumulated without
    normalising, so with a high count and a deep layer the earlier (rarer)
    rules win more often. One uniform draw is taken per block.
    """
    ratio = depth_ratio(height, z)
    factor = count_factor(count)
    roll = rng.random()
    total = 0.0
    for rule in table:
        if ratio > rule.min_depth_ratio:
            continue
        depth_bonus = 1 - ratio / rule.min_depth_ratio
        total += rule.base_chance * (1 + depth_bonus) * (factor * rule.count_weight / 1.5)
        if total > roll:
            return rule.material
    return DEEP


def material_of(height, z, count, rng):
    if z <= 0:
        return WATER
    if z == height:
        return SOFT_SURFACE if count <= 1 else COVERED_SURFACE
    if z == height - 1:
        return SOIL
    if z == height - 2 and height >= 5 and rng.random() < SOIL_CHANCE:
        return SOIL
    return sample_ore(height, z, count, rng)


def column_materials(count, rng):
    # materials bottom to top, z = 0 (water) .. height
    height = height_of(count)
    return [material_of(height, z, count, rng) for z in range(height + 1)]


def tier_of(count):
    if count <= 0:
        return 0
    if count < 10:
        return count
    if count < 20:
        return 10
    return 11


def level_material(level):
    # simple detail mode: colour level 0-4 -> (material, face height)
    level = max(0, min(level, len(LEVELS) - 1))
    return LEVELS[level]


def make_rng(seed=None):
    # seed=None gives a fresh scene on every render
    return random.Random(seed)

# materials.py
# Block materials, their textures, the ore table and the rarity tiers.

from collections import namedtuple

TEX_BASE = "https://cdn.jsdelivr.net/gh/InventivetalentDev/minecraft-assets@1.20.4/assets/minecraft/textures/block/"

WATER = "water"
SOFT_SURFACE = "sand"
COVERED_SURFACE = "grass"
SOIL = "dirt"
DEEP = "stone"

# material -> (top texture, side texture, tint filter id or None)
MATERIALS = {
    "water": ("water_still.png", "water_still.png", "tint-water"),
    "sand": ("sand.png", "sand.png", None),
    "grass": ("grass_block_top.png", "grass_block_side.png", "tint-grass"),
    "dirt": ("dirt.png", "dirt.png", None),
    "stone": ("stone.png", "stone.png", None),
    "coal_ore": ("coal_ore.png", "coal_ore.png", None),
    "copper_ore": ("copper_ore.png", "copper_ore.png", None),
    "iron_ore": ("iron_ore.png", "iron_ore.png", None),
    "lapis_ore": ("lapis_ore.png", "lapis_ore.png", None),
    "redstone_ore": ("redstone_ore.png", "redstone_ore.png", None),
    "gold_ore": ("gold_ore.png", "gold_ore.png", None),
    "emerald_ore": ("emerald_ore.png", "emerald_ore.png", None),
    "diamond_ore": ("diamond_ore.png", "diamond_ore.png", None),
}

# tint applies to side faces too; grass tints only its top
TINT_SIDES = {"water"}

# colour matrices for the feColorMatrix tint filters
TINTS = {
    "tint-water": "0.1 0 0 0 0.15  0.3 0 0 0 0.35  0.6 0 0 0 0.85  0 0 0 1 0",
    "tint-grass": "0.569 0 0 0 0.05  0.741 0 0 0 0.05  0.349 0 0 0 0.05  0 0 0 1 0",
}


def texture_url(name):
    return TEX_BASE + name


OreRule = namedtuple("OreRule", ["material", "min_depth_ratio", "base_chance", "count_weight"])

# rarest first; a rule only applies at depth ratios <= min_depth_ratio
ORE_TABLE = (
    OreRule("diamond_ore", 0.25, 0.02, 2.0),
    OreRule("emerald_ore", 0.3, 0.015, 1.8),
    OreRule("gold_ore", 0.4, 0.04, 1.5),
    OreRule("redstone_ore", 0.5, 0.05, 1.2),
    OreRule("lapis_ore", 0.5, 0.04, 1.2),
    OreRule("iron_ore", 0.8, 0.08, 1.0),
    OreRule("copper_ore", 0.9, 0.08, 0.8),
    OreRule("coal_ore", 1.0, 0.12, 0.6),
)

Tier = namedtuple("Tier", ["level", "name", "color", "flavor"])

# index == tier; tier 0 is a day without activity and never gets a tooltip
TIERS = (
    Tier(0, "Water", "#3f76e4", "Still waters."),
    Tier(1, "Dirt", "#8b5a2b", "Broke ground."),
    Tier(2, "Wood", "#a0824a", "Punched a tree."),
    Tier(3, "Stone", "#aaaaaa", "Got a stone pickaxe."),
    Tier(4, "Coal", "#555555", "Torches lit."),
    Tier(5, "Copper", "#e77c56", "Oxidising nicely."),
    Tier(6, "Iron", "#e6e6e6", "Acquire hardware."),
    Tier(7, "Lapis", "#345ec3", "Enchanted."),
    Tier(8, "Redstone", "#ff5555", "Wired up."),
    Tier(9, "Gold", "#ffff55", "Shiny."),
    Tier(10, "Diamond", "#55ffff", "DIAMONDS!"),
    Tier(11, "Netherite", "#b15bf0", "Cover me with netherite."),
)

# simple detail mode: GitHub colour level -> (material, face height)
LEVELS = (
    ("water", 8),
    ("dirt", 16),
    ("grass", 26),
    ("stone", 38),
    ("diamond_ore", 52),
)

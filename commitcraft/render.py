# render.py
# Assembles textures, columns, tooltips and style rules into one SVG document.

import logging
import os
import re
from html import escape

from .calendar import day_count
from .classify import H_MAX, make_rng
from .geometry import (
    BH,
    FACES,
    TEX,
    TH,
    TW,
    face_matrix,
    face_polygons,
    fmt,
    matrix_str,
    points_str,
)
from .materials import MATERIALS, TIERS, TINT_SIDES, TINTS, WATER, texture_url
from .ordering import build_columns
from .tooltip import (
    FONT_SIZE,
    GLYPH_W,
    LINE_HEIGHT,
    TOOLTIP_HEIGHT,
    TOOLTIP_INSET,
    TOOLTIP_PAD,
    make_tooltip,
    max_line_chars,
)

log = logging.getLogger(__name__)

ROWS = 7
PADDING = 20
FLOAT_AMPLITUDE = 8
WATER_FLOAT_AMPLITUDE = 3
WAVE_STEP = 0.15       # animation delay per anti-diagonal, seconds
BACKGROUND = "#09121c"
MAX_TOOLTIP_CHARS = max_line_chars()

# dark overlays per face; water is lit a little differently
SHADE = {
    "left": ("#000", 0.5, 0.4),
    "right": ("#000", 0.15, 0.15),
    "top": ("#fff", 0.05, 0.1),
}

STYLE = f"""
.land {{ animation: float 4s ease-in-out infinite; }}
.animated-water-wave {{ animation: water-float 4s ease-in-out infinite; }}
.column {{ cursor: crosshair; }}
.column .land {{ transition: filter 0.2s; }}
.column:hover .land {{ filter: brightness(1.5) contrast(1.2); }}
.tooltip {{ opacity: 0; transition: opacity 0.2s; pointer-events: none; }}
.column:hover .tooltip {{ opacity: 1; }}
.tooltip text {{ font-family: 'Minecraft', VT323, monospace; font-size: {FONT_SIZE}px; }}
@keyframes float {{
  0%, 100% {{ transform: translateY(0); }}
  50% {{ transform: translateY(-{FLOAT_AMPLITUDE}px); }}
}}
@keyframes water-float {{
  0%, 100% {{ transform: translateY(0); }}
  50% {{ transform: translateY(-{WATER_FLOAT_AMPLITUDE}px); }}
}}
"""


def viewport(weeks):
    """(x, y, width, height) that holds every block of a calendar `weeks` wide.

    Derived from the grid extremes: anchors span w - d in [-6, weeks - 1] and
    w + d in [0, weeks + 5], blocks reach TW either side of their anchor, the
    tallest column rises H_MAX blocks plus its top face, the float animation
    and a tooltip above that.
    """
    weeks = max(weeks, 1)
    hx = max(0, (MAX_TOOLTIP_CHARS * GLYPH_W + 2 * TOOLTIP_PAD) / 2 - TW)
    x0 = -(ROWS * TW) - hx - PADDING
    x1 = weeks * TW + hx + PADDING
    y0 = -H_MAX * BH - 2 * TH - FLOAT_AMPLITUDE - TOOLTIP_INSET - TOOLTIP_HEIGHT - PADDING
    y1 = (weeks + ROWS - 2) * TH + BH + PADDING
    return (x0, y0, x1 - x0, y1 - y0)


def _image(material, face):
    top, side, tint = MATERIALS[material]
    href = texture_url(top if face == "top" else side)
    filt = ""
    if tint and (face == "top" or material in TINT_SIDES):
        filt = f' filter="url(#{tint})"'
    return (f'<image href="{href}" width="{TEX}" height="{TEX}" preserveAspectRatio="none" '
            f'style="image-rendering: pixelated;"{filt}/>')


def face_pattern(material, face):
    # one tileable texture laid onto one isometric face
    return (f'<pattern id="pat-{material}-{face}" width="{TEX}" height="{TEX}" patternUnits="userSpaceOnUse" '
            f'patternTransform="{matrix_str(face_matrix(face))}">{_image(material, face)}</pattern>')


def pattern_defs(materials):
    parts = []
    for fid, values in TINTS.items():
        parts.append(f'<filter id="{fid}"><feColorMatrix type="matrix" values="{values}"/></filter>')
    for material in materials:
        for face in FACES:
            parts.append(face_pattern(material, face))
    return "\n".join(parts)


def block_svg(column, block):
    polys = face_polygons(block.size)
    water = block.material == WATER
    parts = [f'<g transform="translate({fmt(column.sx)}, {fmt(column.sy + block.offset)})">']
    for face in FACES:
        parts.append(f'<polygon points="{points_str(polys[face])}" fill="url(#pat-{block.material}-{face})"/>')
    for face in FACES:
        color, land_opacity, water_opacity = SHADE[face]
        opacity = water_opacity if water else land_opacity
        parts.append(f'<polygon points="{points_str(polys[face])}" fill="{color}" opacity="{opacity}"/>')
    parts.append("</g>")
    return "".join(parts)


def tooltip_svg(tip):
    tier = TIERS[tip.tier]
    x = -tip.width / 2
    parts = [
        f'<g class="tooltip" transform="translate({fmt(tip.x)}, {fmt(tip.y)})">',
        f'<rect x="{fmt(x)}" y="{-tip.height}" width="{fmt(tip.width)}" height="{tip.height}" '
        f'fill="#100010" fill-opacity="0.9" stroke="{tier.color}" stroke-width="1"/>',
    ]
    colors = ("#aaaaaa", "#ffffff", tier.color)
    for i, (line, color) in enumerate(zip(tip.lines, colors)):
        y = -tip.height + TOOLTIP_PAD + (i + 1) * LINE_HEIGHT - 2
        parts.append(f'<text x="{fmt(x + TOOLTIP_PAD)}" y="{y}" fill="{color}">{escape(line)}</text>')
    parts.append("</g>")
    return "".join(parts)


def column_svg(column, tip):
    base, land = column.blocks[0], column.blocks[1:]
    parts = [f'<g class="column" data-date="{escape(column.cell.date or "")}">']
    if land:
        parts.append(block_svg(column, base))
        delay = -(column.w + column.d) * WAVE_STEP
        parts.append(f'<g class="land" style="animation-delay: {delay:.2f}s">')
        parts.extend(block_svg(column, b) for b in land)
        parts.append("</g>")
    else:
        parts.append('<g class="animated-water-wave">')
        parts.append(block_svg(column, base))
        parts.append("</g>")
    if tip is not None:
        parts.append(tooltip_svg(tip))
    parts.append("</g>")
    return "".join(parts)


class SceneDocument:
    """A rendered scene: viewport, texture patterns, draw list and style rules.

    `draw_list` holds (column, tooltip) pairs in back-to-front order; the
    tooltip is None for columns without land.
    """

    def __init__(self, label, weeks, viewbox, materials, draw_list, style=STYLE):
        self.label = label
        self.weeks = weeks
        self.viewbox = viewbox
        self.materials = materials
        self.draw_list = draw_list
        self.style = style

    @property
    def tooltips(self):
        return [tip for _, tip in self.draw_list if tip is not None]

    def to_svg(self):
        x, y, w, h = self.viewbox
        parts = []
        parts.append(f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{fmt(x)} {fmt(y)} {fmt(w)} {fmt(h)}" '
                     f'width="100%" height="100%">')
        if self.label:
            parts.append(f"<title>{escape(self.label)}</title>")
        parts.append("<defs>")
        parts.append(pattern_defs(self.materials))
        parts.append(f"<style>{self.style}</style>")
        parts.append("</defs>")
        parts.append(f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(w)}" height="{fmt(h)}" fill="{BACKGROUND}"/>')
        parts.append("<g>")
        for column, tip in self.draw_list:
            parts.append(column_svg(column, tip))
        parts.append("</g>")
        parts.append("</svg>")
        return "\n".join(parts)


def render_scene(calendar, label="", seed=None, rng=None, detail="ore"):
    """Build the scene for `calendar`, or None when it holds no days.

    Deep layers are drawn from `rng` (or a Random seeded with `seed`); leave
    both unset for a different scene on every call.
    """
    if day_count(calendar) == 0:
        return None
    if rng is None:
        rng = make_rng(seed)
    columns = build_columns(calendar, rng, detail)
    draw_list = [(column, make_tooltip(column)) for column in columns]
    used = {b.material for column in columns for b in column.blocks}
    materials = [m for m in MATERIALS if m in used]
    weeks = len(calendar.weeks)
    box = viewport(weeks)
    log.debug("Scene: %d columns, %d materials, viewBox %s", len(columns), len(materials), box)
    return SceneDocument(label, weeks, box, materials, draw_list)


def render_svg(calendar, label="", seed=None, rng=None, detail="ore"):
    doc = render_scene(calendar, label, seed=seed, rng=rng, detail=detail)
    if doc is None:
        return None
    return doc.to_svg()


def export_filename(label):
    name = re.sub(r"[^A-Za-z0-9._-]+", "-", label or "").strip("-.")
    return f"{name or 'scene'}-commitcraft.svg"


def export_svg(svg, label, directory="."):
    # writes the document verbatim
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, export_filename(label))
    with open(path, "w", encoding="utf-8") as f:
        f.write(svg)
    log.info("Wrote %s", path)
    return path

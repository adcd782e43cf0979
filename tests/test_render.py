"""
Tests for scene assembly: viewport, patterns, draw list, export.
"""

import os
import random

import pytest

from commitcraft.calendar import ActivityCalendar
from commitcraft.geometry import block_footprint
from commitcraft.render import (
    export_filename,
    export_svg,
    render_scene,
    render_svg,
    viewport,
)

from helpers import make_calendar


def inside(box, x, y):
    x0, y0, w, h = box
    return x0 < x < x0 + w and y0 < y < y0 + h


def test_empty_calendar_gives_no_document():
    assert render_scene(ActivityCalendar((), 0)) is None
    assert render_svg(ActivityCalendar((), 0)) is None


@pytest.mark.parametrize("weeks", list(range(1, 54)))
def test_viewport_contains_every_block(weeks):
    doc = render_scene(make_calendar([[25] * 7] * weeks), seed=1)
    assert doc.viewbox == viewport(weeks)
    for column, tip in doc.draw_list:
        for block in column.blocks:
            for x, y in block_footprint(column.w, column.d, block.offset, block.size):
                assert inside(doc.viewbox, x, y)
        assert inside(doc.viewbox, tip.x - tip.width / 2, tip.y - tip.height)
        assert inside(doc.viewbox, tip.x + tip.width / 2, tip.y)


def test_scenario_document():
    doc = render_scene(make_calendar([[0, 1, 20, 0, 0, 0, 0]]), "octocat", seed=5)
    assert len(doc.draw_list) == 7
    assert len(doc.tooltips) == 2
    by_day = {column.d: (column, tip) for column, tip in doc.draw_list}
    assert by_day[0][1] is None
    assert by_day[1][0].blocks[-1].material == "sand"
    tall, tip = by_day[2]
    assert len(tall.blocks) - 1 == 10
    assert tall.blocks[-1].material == "grass"
    assert tip.tier == 11


def test_patterns_cover_used_materials():
    doc = render_scene(make_calendar([[0, 1, 20, 5, 0, 0, 0]]), seed=3)
    used = {b.material for column, _ in doc.draw_list for b in column.blocks}
    assert set(doc.materials) == used
    svg = doc.to_svg()
    for material in used:
        for face in ("top", "left", "right"):
            assert svg.count(f'id="pat-{material}-{face}"') == 1


def test_svg_document():
    svg = render_svg(make_calendar([[0, 2, 0, 0, 0, 0, 0]]), "a<b", seed=1)
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox=')
    assert svg.rstrip().endswith("</svg>")
    assert "<title>a&lt;b</title>" in svg
    assert "@keyframes float" in svg
    assert ".column:hover .tooltip" in svg
    assert svg.count('class="tooltip"') == 1
    assert 'filter="url(#tint-grass)"' in svg


def test_seed_makes_render_reproducible():
    cal = make_calendar([[12, 20, 30, 8, 15, 25, 40]] * 4)
    assert render_svg(cal, seed=42) == render_svg(cal, seed=42)
    assert render_svg(cal, rng=random.Random(9)) == render_svg(cal, rng=random.Random(9))


def test_water_only_column_animates_base():
    svg = render_svg(make_calendar([[0] * 7]), seed=0)
    assert svg.count('class="animated-water-wave"') == 7
    assert 'class="land"' not in svg


def test_simple_detail():
    doc = render_scene(make_calendar([[0, 1, 2, 3, 4, 0, 0]]), detail="simple", seed=0)
    assert set(doc.materials) == {"water", "dirt", "grass", "stone", "diamond_ore"}
    assert len(doc.tooltips) == 4


def test_export_filename():
    assert export_filename("octocat") == "octocat-commitcraft.svg"
    assert export_filename("../evil name") == "evil-name-commitcraft.svg"
    assert export_filename("") == "scene-commitcraft.svg"


def test_export_writes_verbatim(tmp_path):
    svg = render_svg(make_calendar([[1] * 7]), "octocat", seed=0)
    path = export_svg(svg, "octocat", str(tmp_path / "out"))
    assert os.path.basename(path) == "octocat-commitcraft.svg"
    with open(path, encoding="utf-8") as f:
        assert f.read() == svg


def test_viewport_holds_tooltip_of_huge_count():
    doc = render_scene(make_calendar([[0, 0, 0, 0, 0, 0, 10 ** 9]]), seed=0)
    (tip,) = doc.tooltips
    assert tip.lines[1] == "999,999+ contributions"
    assert inside(doc.viewbox, tip.x - tip.width / 2, tip.y - tip.height)
    assert inside(doc.viewbox, tip.x + tip.width / 2, tip.y)

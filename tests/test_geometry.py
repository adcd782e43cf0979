"""
Unit tests for the isometric projection and block faces.
"""

import unittest

from commitcraft.geometry import (
    BH,
    TEX,
    TH,
    TW,
    anchor,
    block_footprint,
    block_origin,
    face_matrix,
    face_polygons,
    layer_offset,
    matrix_str,
    points_str,
)


def apply(m, x, y):
    a, b, c, d, e, f = m
    return (round(a * x + c * y + e, 6), round(b * x + d * y + f, 6))


class TestAnchor(unittest.TestCase):

    def test_origin(self):
        self.assertEqual(anchor(0, 0), (0, 0))

    def test_formula(self):
        for w in range(0, 53, 7):
            for d in range(7):
                self.assertEqual(anchor(w, d), ((w - d) * TW, (w + d) * TH))


class TestFaces(unittest.TestCase):

    def test_each_face_is_a_quad(self):
        polys = face_polygons()
        self.assertEqual(set(polys), {"left", "right", "top"})
        for poly in polys.values():
            self.assertEqual(len(poly), 4)

    def test_stacked_blocks_share_edges(self):
        lower = face_polygons()
        # the block above sits BH higher; its side bottoms meet the lower block's front-top vertex
        ox, oy = block_origin(0, 0, layer_offset(1))
        upper_left = [(ox + x, oy + y) for x, y in lower["left"]]
        self.assertIn((0, 0), upper_left)
        self.assertIn((-TW, -TH), upper_left)
        self.assertIn((-TW, -TH), lower["top"])

    def test_neighbours_share_edges(self):
        # the top face of (w+1, d) touches the top face of (w, d) along one edge
        here = set(block_footprint(0, 0, 0))
        ox, oy = block_origin(1, 0, 0)
        there = {(ox + x, oy + y) for x, y in face_polygons()["top"]}
        self.assertTrue({(0, 0), (TW, -TH)} <= here & there)

    def test_face_matrix_maps_texture_corners_onto_face(self):
        polys = face_polygons()
        corners = [(0, 0), (TEX, 0), (0, TEX), (TEX, TEX)]
        for face in ("left", "right", "top"):
            mapped = {apply(face_matrix(face), x, y) for x, y in corners}
            expected = {(float(x), float(y)) for x, y in polys[face]}
            self.assertEqual(mapped, expected, face)

    def test_unknown_face(self):
        with self.assertRaises(ValueError):
            face_matrix("bottom")

    def test_formatting(self):
        self.assertEqual(points_str([(0, 0), (14, -7.5)]), "0,0 14,-7.5")
        self.assertEqual(matrix_str(face_matrix("right")), f"matrix(0.875, -0.4375, 0, {BH // TEX}, 0, 0)")


if __name__ == "__main__":
    unittest.main()

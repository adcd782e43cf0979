# geometry.py
# Isometric projection of the calendar grid and the faces of one unit block.

TW = 14   # tile half-width
TH = 7    # tile half-height
BH = 16   # unit block height; equals the texture size so one texel is one unit
TEX = 16  # side of the square source textures

FACES = ("left", "right", "top")


def anchor(w, d):
    # screen position of the grid cell (w = week, d = day of week)
    return ((w - d) * TW, (w + d) * TH)


def face_polygons(size=BH):
    """Left, right and top faces of a block, relative to its front-top vertex.

    Vertices wind the same way for every face so that a block stacked on top,
    or a neighbour one step along w or d, shares its edges exactly.
    """
    left = [(0, 0), (0, size), (-TW, size - TH), (-TW, -TH)]
    right = [(0, 0), (TW, -TH), (TW, size - TH), (0, size)]
    top = [(0, -2 * TH), (TW, -TH), (0, 0), (-TW, -TH)]
    return {"left": left, "right": right, "top": top}


def block_origin(w, d, offset):
    # front-top vertex of a block whose vertex sits `offset` px below the anchor
    sx, sy = anchor(w, d)
    return (sx, sy + offset)


def layer_offset(z):
    return -z * BH


def block_footprint(w, d, offset, size=BH):
    ox, oy = block_origin(w, d, offset)
    pts = []
    for face in FACES:
        pts.extend((ox + x, oy + y) for x, y in face_polygons(size)[face])
    return pts


def face_matrix(face):
    """Affine matrix (a, b, c, d, e, f) laying a TEX x TEX texture onto a face.

    The same square image is sampled for all three faces; only the matrix
    differs, so each material needs one image and three patterns.
    """
    sx = TW / TEX
    sy = TH / TEX
    if face == "top":
        return (sx, sy, -sx, sy, 0, -2 * TH)
    if face == "left":
        return (sx, sy, 0, BH / TEX, -TW, -TH)
    if face == "right":
        return (sx, -sy, 0, BH / TEX, 0, 0)
    raise ValueError(f"unknown face {face!r}")


def fmt(v):
    # compact number formatting for svg attributes
    if float(v).is_integer():
        return str(int(v))
    return f"{v:.4f}".rstrip("0").rstrip(".")


def points_str(poly):
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in poly)


def matrix_str(m):
    return "matrix(" + ", ".join(fmt(v) for v in m) + ")"

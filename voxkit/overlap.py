"""Triangle/axis-aligned box overlap tests based on the separating axis theorem."""

import math

_BOX_NORMALS = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
_ZERO = (0.0, 0.0, 0.0)


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v):
    length = math.sqrt(_dot(v, v))
    return (v[0] / length, v[1] / length, v[2] / length)


def _position(vertex):
    """Accept either a mesh Vertex or a bare 3D point."""
    point = getattr(vertex, "position", vertex)
    x, y, z = point
    return (float(x), float(y), float(z))


def project_triangle(axis, vertices):
    """Return the (min, max) interval of the triangle's points projected onto ``axis``."""
    values = [_dot(axis, _position(v)) for v in vertices]
    return min(values), max(values)


def project_box(axis, box_center, box_half_size):
    """Return the (min, max) interval of an axis-aligned box projected onto ``axis``."""
    center_projection = _dot(axis, box_center)
    extent = (
        box_half_size[0] * abs(axis[0])
        + box_half_size[1] * abs(axis[1])
        + box_half_size[2] * abs(axis[2])
    )
    return center_projection - extent, center_projection + extent


def overlaps(min1, max1, min2, max2):
    """True when the closed intervals [min1, max1] and [min2, max2] intersect."""
    return max1 >= min2 and max2 >= min1


def _separated_on(axis, triangle, box_half_size):
    tri_min, tri_max = project_triangle(axis, triangle)
    box_min, box_max = project_box(axis, _ZERO, box_half_size)
    return not overlaps(tri_min, tri_max, box_min, box_max)


def triangle_box_overlap(box_center, box_half_size, triangle_vertices):
    """True when a triangle and an axis-aligned box intersect.

    ``triangle_vertices`` holds three vertices, either mesh Vertex objects or
    3D points. The candidate axes are the first triangle edge crossed with
    each box axis, the three box axes and the triangle normal.
    """
    corners = [_position(v) for v in triangle_vertices]
    if len(corners) != 3:
        raise ValueError("A triangle needs exactly 3 vertices")

    center = tuple(float(c) for c in box_center)
    half = tuple(float(h) for h in box_half_size)
    v0, v1, v2 = (_sub(c, center) for c in corners)
    local = (v0, v1, v2)

    e0 = _sub(v1, v0)
    e1 = _sub(v2, v1)

    for box_normal in _BOX_NORMALS:
        axis = _cross(e0, box_normal)
        if axis == _ZERO:
            continue
        if _separated_on(_normalize(axis), local, half):
            return False

    for box_normal in _BOX_NORMALS:
        if _separated_on(box_normal, local, half):
            return False

    normal = _cross(e0, e1)
    if normal != _ZERO and _separated_on(_normalize(normal), local, half):
        return False

    return True
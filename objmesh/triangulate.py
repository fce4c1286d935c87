"""Conversion of collected faces into the flat index lists of a shape."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from objmesh.tokens import VertexIndex
from objmesh.types import Index, Shape, Tag

# Attribute values are single precision in the file format's usual readers.
_EPSILON = 1.1920928955078125e-07
_MAX_ROUNDS = 10


@dataclass
class Face:
    """One ``f`` statement: its corners and the smoothing group it belongs to."""

    vertex_indices: list[VertexIndex] = field(default_factory=list)
    smoothing_group_id: int = 0


def point_in_polygon(
    xs: Sequence[float], ys: Sequence[float], tx: float, ty: float
) -> bool:
    """Crossing-number test of whether ``(tx, ty)`` lies inside the polygon."""
    inside = False
    count = len(xs)
    j = count - 1
    for i in range(count):
        if (ys[i] > ty) != (ys[j] > ty) and tx < (xs[j] - xs[i]) * (ty - ys[i]) / (
            ys[j] - ys[i]
        ) + xs[i]:
            inside = not inside
        j = i
    return inside


def _coord(vertices: Sequence[float], v_idx: int, axis: int) -> float | None:
    position = 3 * v_idx + axis
    if v_idx < 0 or position >= len(vertices):
        return None
    return vertices[position]


def _position(vertices: Sequence[float], v_idx: int) -> tuple[float, float, float] | None:
    if v_idx < 0 or 3 * v_idx + 2 >= len(vertices):
        return None
    return vertices[3 * v_idx], vertices[3 * v_idx + 1], vertices[3 * v_idx + 2]


def _to_index(corner: VertexIndex) -> Index:
    return Index(corner.v_idx, corner.vn_idx, corner.vt_idx)


def _projection_axes(corners: list[VertexIndex], vertices: Sequence[float]) -> tuple[int, int]:
    """Pick the two coordinate axes onto which the polygon projects best."""
    axes = [1, 2]
    count = len(corners)
    for k in range(count):
        p0 = _position(vertices, corners[k].v_idx)
        p1 = _position(vertices, corners[(k + 1) % count].v_idx)
        p2 = _position(vertices, corners[(k + 2) % count].v_idx)
        if p0 is None or p1 is None or p2 is None:
            continue
        e0 = (p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2])
        e1 = (p2[0] - p1[0], p2[1] - p1[1], p2[2] - p1[2])
        cx = abs(e0[1] * e1[2] - e0[2] * e1[1])
        cy = abs(e0[2] * e1[0] - e0[0] * e1[2])
        cz = abs(e0[0] * e1[1] - e0[1] * e1[0])
        if cx > _EPSILON or cy > _EPSILON or cz > _EPSILON:
            if not (cx > cy and cx > cz):
                axes[0] = 0
                if cz > cx and cz > cy:
                    axes[1] = 1
            break
    return axes[0], axes[1]


def _signed_area(
    corners: list[VertexIndex], vertices: Sequence[float], axes: tuple[int, int]
) -> float:
    area = 0.0
    count = len(corners)
    for k in range(count):
        a, b = corners[k].v_idx, corners[(k + 1) % count].v_idx
        coords = (
            _coord(vertices, a, axes[0]),
            _coord(vertices, a, axes[1]),
            _coord(vertices, b, axes[0]),
            _coord(vertices, b, axes[1]),
        )
        if any(c is None for c in coords):
            continue
        v0x, v0y, v1x, v1y = coords
        area += (v0x * v1y - v0y * v1x) * 0.5
    return area


def _emit_triangle(
    shape: Shape, corners: Sequence[VertexIndex], material_id: int, smoothing_id: int
) -> None:
    shape.mesh.indices.extend(_to_index(c) for c in corners)
    shape.mesh.num_face_vertices.append(3)
    shape.mesh.material_ids.append(material_id)
    shape.mesh.smoothing_group_ids.append(smoothing_id)


def _triangulate_face(
    shape: Shape, face: Face, material_id: int, vertices: Sequence[float]
) -> None:
    axes = _projection_axes(face.vertex_indices, vertices)
    area = _signed_area(face.vertex_indices, vertices, axes)

    remaining = list(face.vertex_indices)
    guess = 0
    rounds = _MAX_ROUNDS
    while len(remaining) > 3 and rounds > 0:
        count = len(remaining)
        if guess >= count:
            rounds -= 1
            guess -= count

        ear = [remaining[(guess + k) % count] for k in range(3)]
        xs: list[float] = []
        ys: list[float] = []
        for corner in ear:
            x = _coord(vertices, corner.v_idx, axes[0])
            y = _coord(vertices, corner.v_idx, axes[1])
            if x is None or y is None:
                x, y = 0.0, 0.0
            xs.append(x)
            ys.append(y)

        cross = (xs[1] - xs[0]) * (ys[2] - ys[1]) - (ys[1] - ys[0]) * (xs[2] - xs[1])
        if cross * area < 0.0:
            guess += 1
            continue

        overlap = False
        for other in range(3, count):
            corner = remaining[(guess + other) % count]
            tx = _coord(vertices, corner.v_idx, axes[0])
            ty = _coord(vertices, corner.v_idx, axes[1])
            if tx is None or ty is None:
                continue
            if point_in_polygon(xs, ys, tx, ty):
                overlap = True
                break
        if overlap:
            guess += 1
            continue

        _emit_triangle(shape, ear, material_id, face.smoothing_group_id)
        del remaining[(guess + 1) % count]

    if len(remaining) == 3:
        _emit_triangle(shape, remaining, material_id, face.smoothing_group_id)


def export_face_group(
    shape: Shape,
    face_group: Sequence[Face],
    tags: Sequence[Tag],
    material_id: int,
    name: str,
    triangulate: bool,
    vertices: Sequence[float],
) -> bool:
    """Append the faces of ``face_group`` to ``shape``.

    Faces with fewer than three corners are dropped. With ``triangulate``
    polygons are split by ear clipping. Returns False, leaving ``shape``
    untouched, when the group is empty.
    """
    if not face_group:
        return False

    for face in face_group:
        count = len(face.vertex_indices)
        if count < 3:
            continue
        if triangulate:
            _triangulate_face(shape, face, material_id, vertices)
        else:
            shape.mesh.indices.extend(_to_index(c) for c in face.vertex_indices)
            shape.mesh.num_face_vertices.append(count)
            shape.mesh.material_ids.append(material_id)
            shape.mesh.smoothing_group_ids.append(face.smoothing_group_id)

    shape.name = name
    shape.mesh.tags = list(tags)
    return True
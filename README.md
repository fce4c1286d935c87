# objmesh

Pure-Python building blocks for working with Wavefront `.obj` meshes: a data
model for parsed geometry and materials, a tokeniser for OBJ/MTL lines, ear
clipping triangulation of polygon faces, a colour quadtree over RGB images and
centering/rescaling of vertex positions. It has no dependencies outside the
standard library.

## Modules

- `objmesh.types` – dataclasses for a parsed scene: `Attrib` (flat vertex,
  normal, texcoord and colour lists), `Shape` and `Mesh` (corner `Index`
  entries, vertices per face, material and smoothing group ids, `Tag` list),
  `Material` (colours, scalar parameters, texture names, PBR extension fields,
  unknown parameters) and `TextureOption` with the `TextureType` enum.
  `TextureOption.default(is_bump)` gives the defaults; bump maps use the `"l"`
  channel, others `"m"`.
- `objmesh.tokens` – `try_parse_double(text)` reads a leading number and
  returns `None` when there is none; `fix_index(idx, n)` turns a one-based or
  negative (relative) index into a zero-based one and raises `ValueError` on
  `0`. `Cursor` walks one line: `parse_string`, `parse_int`, `parse_real`,
  `try_parse_real`, `parse_on_off`, `parse_texture_type`, `parse_tag_triple`,
  `parse_triple` (returns a `VertexIndex`) and `parse_raw_triple`, plus
  `skip_space`, `advance`, `rest`, `at_line_end` and `startswith_keyword`.
- `objmesh.triangulate` – `Face` holds the corners of one face and its
  smoothing group. `export_face_group(shape, face_group, tags, material_id,
  name, triangulate, vertices)` appends faces to a `Shape`, splitting polygons
  into triangles when `triangulate` is true; faces with fewer than three
  corners are dropped and an empty group returns `False`.
  `point_in_polygon(xs, ys, tx, ty)` is the crossing-number test it uses.
- `objmesh.quadtree` – `QuadNode.from_buffer` (packed RGB buffer) and
  `QuadNode.from_rows` (rows of `Pixel`) split a rectangle into up to four
  children while its mean colour distance exceeds a threshold.
  `QuadNode.browse(threshold)` yields the coarsest nodes within a threshold.
  `average_color` and `measure_detail` compute the figures for one rectangle.
- `objmesh.normalize` – `normalize_positions(positions, center, rescale,
  size)` returns a `NormalizeResult` with the moved positions, the bounding
  box dimensions, the centre offset and the scale used;
  `scale_coefficient(dimensions, size)` raises `ValueError` when all
  dimensions are zero.

## Installation

```
pip install .
```

## Usage

Reading a face corner:

```python
from objmesh.tokens import Cursor

corner = Cursor("1/2/3").parse_triple(3, 3, 3)
print(corner)   # VertexIndex(v_idx=0, vt_idx=1, vn_idx=2)
```

Triangulating a quad:

```python
from objmesh.tokens import VertexIndex
from objmesh.triangulate import Face, export_face_group
from objmesh.types import Shape

vertices = [0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0]
face = Face([VertexIndex(i) for i in range(4)])
shape = Shape()
export_face_group(shape, [face], [], -1, "quad", True, vertices)
print(shape.mesh.num_face_vertices)   # [3, 3]
```

Quadtree over a raw RGB buffer:

```python
from objmesh.quadtree import QuadNode

data = bytes([255, 0, 0] * 16)          # 4x4 red image
root = QuadNode.from_buffer(data, 4, 0, 0, 4, 4, threshold=10)
for node in root.browse(10):
    print(node.x, node.y, node.width, node.height, node.pixel)
```

Centering and rescaling positions:

```python
from objmesh.normalize import normalize_positions

result = normalize_positions([(0, 0, 0), (4, 2, 2)], center=True, rescale=True, size=1.0)
print(result.positions)    # [(-0.5, -0.25, -0.25), (0.5, 0.25, 0.25)]
print(result.dimensions, result.scale)   # (1.0, 0.5, 0.5) 0.25
```

## What it does not do

The package does not read `.obj` or `.mtl` files or streams. There is no
function that turns a file into `Attrib`, `Shape` and `Material` objects, no
material file lookup and no callback-driven reader; the tokeniser, the data
model and `export_face_group` are the pieces such a reader would be built
from. There is no command-line tool and no rendering.

## Running the tests

```
pip install ".[test]"
pytest
```
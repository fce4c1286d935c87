"""Data model of a parsed Wavefront OBJ/MTL scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TextureType(IntEnum):
    """Value of the ``-type`` texture option."""

    NONE = 0
    SPHERE = 1
    CUBE_TOP = 2
    CUBE_BOTTOM = 3
    CUBE_FRONT = 4
    CUBE_BACK = 5
    CUBE_LEFT = 6
    CUBE_RIGHT = 7


def _triple(value: float):
    return field(default_factory=lambda: [value, value, value])


@dataclass
class TextureOption:
    """Options that can precede a texture file name in an MTL statement."""

    type: TextureType = TextureType.NONE
    sharpness: float = 1.0
    brightness: float = 0.0
    contrast: float = 1.0
    origin_offset: list[float] = _triple(0.0)
    scale: list[float] = _triple(1.0)
    turbulence: list[float] = _triple(0.0)
    clamp: bool = False
    imfchan: str = "m"
    blendu: bool = True
    blendv: bool = True
    bump_multiplier: float = 1.0

    @classmethod
    def default(cls, is_bump: bool = False) -> TextureOption:
        """Return the default options; bump maps read the luminance channel."""
        return cls(imfchan="l" if is_bump else "m")


def _texopt(is_bump: bool = False):
    return field(default_factory=lambda: TextureOption.default(is_bump))


@dataclass
class Material:
    """One ``newmtl`` entry of an MTL file."""

    name: str = ""

    ambient: list[float] = _triple(0.0)
    diffuse: list[float] = _triple(0.0)
    specular: list[float] = _triple(0.0)
    transmittance: list[float] = _triple(0.0)
    emission: list[float] = _triple(0.0)
    shininess: float = 1.0
    ior: float = 1.0
    dissolve: float = 1.0
    illum: int = 0

    ambient_texname: str = ""
    diffuse_texname: str = ""
    specular_texname: str = ""
    specular_highlight_texname: str = ""
    bump_texname: str = ""
    displacement_texname: str = ""
    alpha_texname: str = ""
    reflection_texname: str = ""

    ambient_texopt: TextureOption = _texopt()
    diffuse_texopt: TextureOption = _texopt()
    specular_texopt: TextureOption = _texopt()
    specular_highlight_texopt: TextureOption = _texopt()
    bump_texopt: TextureOption = _texopt(True)
    displacement_texopt: TextureOption = _texopt()
    alpha_texopt: TextureOption = _texopt()
    reflection_texopt: TextureOption = _texopt()

    roughness: float = 0.0
    metallic: float = 0.0
    sheen: float = 0.0
    clearcoat_thickness: float = 0.0
    clearcoat_roughness: float = 0.0
    anisotropy: float = 0.0
    anisotropy_rotation: float = 0.0

    roughness_texname: str = ""
    metallic_texname: str = ""
    sheen_texname: str = ""
    emissive_texname: str = ""
    normal_texname: str = ""

    roughness_texopt: TextureOption = _texopt()
    metallic_texopt: TextureOption = _texopt()
    sheen_texopt: TextureOption = _texopt()
    emissive_texopt: TextureOption = _texopt()
    normal_texopt: TextureOption = _texopt()

    unknown_parameter: dict[str, str] = field(default_factory=dict)


@dataclass
class Tag:
    """A subdivision-surface tag (``t`` statement)."""

    name: str = ""
    int_values: list[int] = field(default_factory=list)
    float_values: list[float] = field(default_factory=list)
    string_values: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Index:
    """Zero-based attribute indices of one face corner; -1 means unused."""

    vertex_index: int = -1
    normal_index: int = -1
    texcoord_index: int = -1


@dataclass
class Mesh:
    """Faces of a shape, stored as flat corner indices plus per-face data."""

    indices: list[Index] = field(default_factory=list)
    num_face_vertices: list[int] = field(default_factory=list)
    material_ids: list[int] = field(default_factory=list)
    smoothing_group_ids: list[int] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)


@dataclass
class Shape:
    """A named group of faces."""

    name: str = ""
    mesh: Mesh = field(default_factory=Mesh)


@dataclass
class Attrib:
    """Flat vertex attribute arrays shared by all shapes."""

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    colors: list[float] = field(default_factory=list)
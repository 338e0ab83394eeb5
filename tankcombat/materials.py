"""Classic OpenGL surface materials used to shade the scene."""

from __future__ import annotations

from dataclasses import dataclass

RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Material:
    """Ambient, diffuse and specular colours plus a shininess exponent."""

    name: str
    ambient: RGBA
    diffuse: RGBA
    specular: RGBA
    shininess: int


def _make(name, ambient, diffuse, specular, coefficient) -> Material:
    return Material(
        name=name,
        ambient=(*ambient, 1.0),
        diffuse=(*diffuse, 1.0),
        specular=(*specular, 1.0),
        shininess=int(coefficient * 128),
    )


MATERIALS: tuple[Material, ...] = (
    _make("Esmerald", (0.0215, 0.1745, 0.0215), (0.07568, 0.61424, 0.07568),
          (0.633, 0.727811, 0.633), 0.6),
    _make("Jade", (0.135, 0.2225, 0.1575), (0.54, 0.89, 0.63),
          (0.316228, 0.316228, 0.316228), 0.1),
    _make("obsidian", (0.05375, 0.05, 0.06625), (0.18275, 0.17, 0.22525),
          (0.332741, 0.328634, 0.346435), 0.6),
    _make("Pearl", (0.25, 0.20725, 0.20725), (1.0, 0.829, 0.829),
          (0.296648, 0.296648, 0.296648), 0.088),
    _make("Ruby", (0.1745, 0.01175, 0.01175), (0.61424, 0.04136, 0.04136),
          (0.727811, 0.626959, 0.626959), 0.6),
    _make("Turquoise", (0.1, 0.18725, 0.1745), (0.396, 0.74151, 0.40102),
          (0.297254, 0.60829, 0.306678), 0.6),
    _make("Brass", (0.329412, 0.223529, 0.027451), (0.780392, 0.568627, 0.113725),
          (0.992157, 0.941176, 0.807843), 0.21794872),
    _make("Bronze", (0.2125, 0.1275, 0.054), (0.714, 0.4284, 0.18144),
          (0.393548, 0.271906, 0.166721), 0.2),
    _make("Chrome", (0.25, 0.25, 0.25), (0.4, 0.4, 0.4),
          (0.774597, 0.774597, 0.774597), 0.6),
    _make("Copper", (0.19125, 0.0735, 0.0225), (0.7038, 0.27048, 0.0828),
          (0.256777, 0.137622, 0.086014), 0.1),
    _make("Gold", (0.24725, 0.1995, 0.0745), (0.75164, 0.60648, 0.22648),
          (0.628281, 0.555802, 0.366065), 0.4),
    _make("Silver", (0.19225, 0.19225, 0.19225), (0.50754, 0.50754, 0.50754),
          (0.508273, 0.508273, 0.508273), 0.4),
    _make("blackPlastic", (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 0.25),
    _make("cyankPlastic", (0.0, 0.1, 0.06), (0.0, 0.50980392, 0.50980392),
          (0.0, 0.50196078, 0.50196078), 0.25),
    _make("greenPlastic", (0.0, 0.2, 0.0), (0.0, 0.35, 0.0), (0.0, 0.55, 0.0), 0.25),
    _make("redPlastic", (0.2, 0.0, 0.0), (0.5, 0.0, 0.0), (0.7, 0.0, 0.0), 0.25),
    _make("whitePlastic", (0.8, 0.8, 0.8), (0.55, 0.55, 0.55),
          (0.870, 0.870, 0.870), 0.25),
    _make("yellowPlastic", (0.2, 0.2, 0.0), (0.5, 0.5, 0.0), (0.60, 0.60, 0.0), 0.25),
)

NUM_MAT = len(MATERIALS)

_BY_NAME = {m.name: m for m in MATERIALS}


def material(index: int) -> Material:
    """Return the material at ``index``; raise IndexError when out of range."""
    if not 0 <= index < NUM_MAT:
        raise IndexError(f"material index {index} out of range 0..{NUM_MAT - 1}")
    return MATERIALS[index]


def material_by_name(name: str) -> Material:
    """Return the material called ``name``; raise KeyError when unknown."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown material {name!r}") from None
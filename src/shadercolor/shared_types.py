"""
Host-side layouts of the geometry records shared with shader code.

The structured dtypes below are byte-compatible with the shader structs, so a
NumPy array of them can be uploaded to a vertex/constant buffer as-is:

    struct Rectangle { float2 topLeft, bottomLeft, topRight, bottomRight; };  // 32 bytes
    struct Line { float2 startPoint, endPoint; float width; };                // 24 bytes
    struct TextMeshVertex { packed_float4 position; packed_float2 texCoords; };  // 24 bytes

float2 is 8-byte aligned, which is why Line carries 4 bytes of tail padding.
The packed vertex fields have 4-byte alignment and no padding.
"""

import numpy as np

from shadercolor.utils import ArrayLike

_F2 = ("<f4", (2,))
_F4 = ("<f4", (4,))

RECTANGLE_DTYPE = np.dtype(
    {
        "names": ["topLeft", "bottomLeft", "topRight", "bottomRight"],
        "formats": [_F2, _F2, _F2, _F2],
        "offsets": [0, 8, 16, 24],
        "itemsize": 32,
    }
)

LINE_DTYPE = np.dtype(
    {
        "names": ["startPoint", "endPoint", "width"],
        "formats": [_F2, _F2, "<f4"],
        "offsets": [0, 8, 16],
        "itemsize": 24,
    }
)

TEXT_MESH_VERTEX_DTYPE = np.dtype(
    {
        "names": ["position", "texCoords"],
        "formats": [_F4, _F2],
        "offsets": [0, 16],
        "itemsize": 24,
    }
)


def rectangles_from_rects(rects: ArrayLike) -> np.ndarray:
    """
    Build Rectangle records from (x, y, width, height) rows.

    y grows downward: the top edge is at y and the bottom edge at y + height.

    Args:
        rects: Rectangles [N, 4] or a single [4]

    Returns:
        Structured array [N] of RECTANGLE_DTYPE

    Example:
        >>> r = rectangles_from_rects([[0.1, 0.2, 0.5, 0.25]])
        >>> r["bottomRight"]
        array([[0.6 , 0.45]], dtype=float32)
    """
    rects = np.atleast_2d(np.asarray(rects, dtype=np.float32))
    if rects.ndim != 2 or rects.shape[1] != 4:
        raise ValueError(f"rects must have shape [N, 4] (x, y, width, height), got {rects.shape}")

    x, y, w, h = rects[:, 0], rects[:, 1], rects[:, 2], rects[:, 3]
    out = np.zeros(len(rects), dtype=RECTANGLE_DTYPE)
    out["topLeft"] = np.stack([x, y], axis=1)
    out["bottomLeft"] = np.stack([x, y + h], axis=1)
    out["topRight"] = np.stack([x + w, y], axis=1)
    out["bottomRight"] = np.stack([x + w, y + h], axis=1)
    return out


def lines_from_points(start: ArrayLike, end: ArrayLike, width: float | ArrayLike) -> np.ndarray:
    """
    Build Line records.

    Args:
        start: Start points [N, 2] or [2]
        end: End points [N, 2] or [2]
        width: Line width, scalar or [N]

    Returns:
        Structured array [N] of LINE_DTYPE
    """
    start = np.atleast_2d(np.asarray(start, dtype=np.float32))
    end = np.atleast_2d(np.asarray(end, dtype=np.float32))
    if start.shape != end.shape or start.shape[-1] != 2:
        raise ValueError(
            f"start and end must both have shape [N, 2], got {start.shape} and {end.shape}"
        )

    out = np.zeros(len(start), dtype=LINE_DTYPE)
    out["startPoint"] = start
    out["endPoint"] = end
    out["width"] = width
    return out


def text_mesh_vertices(positions: ArrayLike, tex_coords: ArrayLike) -> np.ndarray:
    """Build TextMeshVertex records from positions [N, 4] and texture coordinates [N, 2]."""
    positions = np.atleast_2d(np.asarray(positions, dtype=np.float32))
    tex_coords = np.atleast_2d(np.asarray(tex_coords, dtype=np.float32))
    if positions.shape[-1] != 4 or tex_coords.shape[-1] != 2 or len(positions) != len(tex_coords):
        raise ValueError(
            f"positions must be [N, 4] and tex_coords [N, 2], "
            f"got {positions.shape} and {tex_coords.shape}"
        )

    out = np.zeros(len(positions), dtype=TEXT_MESH_VERTEX_DTYPE)
    out["position"] = positions
    out["texCoords"] = tex_coords
    return out

# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a finished module matrix into pixels. The plain renderers produce a
two-color image (numpy pixel buffer, Pillow image or SVG); the zone renderers
color each module by the QR area it belongs to, which helps when studying the
structure of a symbol.

Classes:
    RenderOptions: Module size, quiet zone and palette

Functions:
    render_array: Render to a numpy RGB pixel buffer
    render_image: Render to a Pillow image
    render_svg: Render to SVG markup
    render_zones_png: Zone-colored PNG with module metrics
    render_zones_svg: Zone-colored SVG
"""

import base64
from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from .matrix import CellState, ModuleMatrix, data_module_coords

Color = Union[str, Tuple[int, int, int]]
MatrixLike = Union[ModuleMatrix, Sequence[Sequence[bool]]]

# Color palette for QR code zone visualization
PALETTE = {
    'background': (255, 255, 255),    # White background
    'finder': (128, 0, 128),          # Purple - Finder patterns (3 corners)
    'separator': (230, 230, 230),     # Light gray - Visual separators
    'timing': (255, 165, 0),          # Orange - Timing patterns (row/col 6)
    'alignment': (0, 128, 128),       # Teal - Alignment patterns
    'dark': (90, 0, 90),              # Dark purple - Dark module
    'format': (255, 0, 0),            # Red - Format information bits
    'version': (180, 0, 0),           # Dark red - Version information (v>=7)
    'data': (35, 35, 35),             # Dark gray - Data payload
    'ecc': (20, 90, 160),             # Blue - Error correction codes
    'remainder': (120, 120, 120),     # Gray - Remainder bits
}


@dataclass(frozen=True)
class RenderOptions:
    """
    Rendering configuration.

    Attributes:
        module_size: Pixels per module, must be positive
        margin: Quiet zone width in modules, must not be negative
        dark_color: Fill for dark modules (any Pillow color)
        light_color: Fill for light modules and the quiet zone
    """

    module_size: int = 8
    margin: int = 4
    dark_color: Color = '#000000'
    light_color: Color = '#ffffff'

    def __post_init__(self):
        if int(self.module_size) <= 0:
            raise ValueError(f"module_size must be positive, got {self.module_size}")
        if int(self.margin) < 0:
            raise ValueError(f"margin must not be negative, got {self.margin}")


def _to_rgb(color: Color) -> Tuple[int, int, int]:
    if isinstance(color, str):
        return ImageColor.getrgb(color)[:3]
    return tuple(int(v) for v in color[:3])


def _rows(matrix: MatrixLike) -> List[List[bool]]:
    if isinstance(matrix, ModuleMatrix):
        if not matrix.is_resolved():
            raise ValueError("Matrix still has unset or reserved modules")
        return matrix.to_rows()
    rows = [[bool(v) for v in row] for row in matrix]
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("Matrix must be square and non-empty")
    return rows


def render_array(
    matrix: MatrixLike,
    module_size: int = 8,
    margin: int = 4,
    dark_color: Color = '#000000',
    light_color: Color = '#ffffff'
) -> np.ndarray:
    """
    Render a module matrix into an RGB pixel buffer.

    Args:
        matrix (MatrixLike): Resolved ModuleMatrix or square rows of booleans
        module_size (int): Pixels per module
        margin (int): Quiet zone in modules on every side
        dark_color (Color): Dark module color
        light_color (Color): Light module and quiet zone color

    Returns:
        np.ndarray: uint8 array of shape (side, side, 3) where
            side = (matrix size + 2 * margin) * module_size

    Raises:
        ValueError: For invalid options or an unresolved/non-square matrix
    """
    options = RenderOptions(module_size, margin, dark_color, light_color)
    grid = np.array(_rows(matrix), dtype=bool)
    grid = np.pad(grid, options.margin, mode='constant', constant_values=False)
    pixels = grid.repeat(options.module_size, axis=0).repeat(options.module_size, axis=1)

    buffer = np.empty(pixels.shape + (3,), dtype=np.uint8)
    buffer[:] = _to_rgb(options.light_color)
    buffer[pixels] = _to_rgb(options.dark_color)
    return buffer


def render_image(
    matrix: MatrixLike,
    module_size: int = 8,
    margin: int = 4,
    dark_color: Color = '#000000',
    light_color: Color = '#ffffff'
) -> Image.Image:
    """
    Render a module matrix as a Pillow RGB image.

    Example:
        >>> img = render_image(make_qr("HELLO").matrix, module_size=4, margin=2)
        >>> img.size
        (100, 100)
    """
    return Image.fromarray(render_array(matrix, module_size, margin, dark_color, light_color), 'RGB')


def render_svg(
    matrix: MatrixLike,
    module_size: int = 10,
    margin: int = 4,
    dark_color: str = '#000000',
    light_color: str = '#ffffff'
) -> bytes:
    """
    Render a module matrix as SVG, one rect per dark module.

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    options = RenderOptions(module_size, margin, dark_color, light_color)
    rows = _rows(matrix)
    px = (len(rows) + 2 * options.margin) * options.module_size

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="{light_color}"/>')
    for r, row in enumerate(rows):
        for c, dark in enumerate(row):
            if not dark:
                continue
            x = (c + options.margin) * options.module_size
            y = (r + options.margin) * options.module_size
            out.append(f'<rect x="{x}" y="{y}" width="{options.module_size}" '
                       f'height="{options.module_size}" fill="{dark_color}"/>')
    out.append('</svg>')
    return "\n".join(out).encode("utf-8")


def _zone_fills(qr) -> List[List[Optional[Tuple[int, int, int]]]]:
    """
    Fill color per module for the zone view, None where nothing is drawn.

    Dark modules take their zone color; light modules are only drawn inside
    the finder separators. Data modules are split into data, EC and remainder
    by their position along the placement path.
    """
    matrix = qr.matrix
    size = matrix.size
    data_bits = len(qr.data_codewords) * 8
    ec_bits = len(qr.ec_codewords) * 8

    payload_zone = {}
    for index, (r, c) in enumerate(data_module_coords(matrix)):
        if index < data_bits:
            payload_zone[(r, c)] = 'data'
        elif index < data_bits + ec_bits:
            payload_zone[(r, c)] = 'ecc'
        else:
            payload_zone[(r, c)] = 'remainder'

    fills = [[None] * size for _ in range(size)]
    for r in range(size):
        for c in range(size):
            zone = matrix.zone(r, c)
            if not matrix.is_dark(r, c):
                if zone == 'separator':
                    fills[r][c] = PALETTE['separator']
                continue
            if zone == 'data':
                zone = payload_zone[(r, c)]
            fills[r][c] = PALETTE[zone]
    return fills


def _zone_metrics(qr, border: int) -> Dict[str, Any]:
    matrix = qr.matrix
    return {
        'size': matrix.size,
        'modules': matrix.size * matrix.size,
        'dark_modules': sum(sum(row) for row in matrix.to_rows()),
        'functional_modules': matrix.count(CellState.FUNCTION) + matrix.count(CellState.METADATA),
        'data_modules': matrix.count(CellState.DATA),
        'border': border,
    }


def render_zones_png(qr, border: int = 4, scale: int = 6) -> Tuple[str, Dict[str, Any]]:
    """
    Render a symbol as PNG with modules colored by zone.

    Args:
        qr (QRCode): Result of make_qr
        border (int): Quiet zone size in modules
        scale (int): Pixel size per module

    Returns:
        Tuple[str, Dict[str, Any]]: (base64_png, metrics_dict)
            - base64_png: Base64-encoded PNG image
            - metrics_dict: size, module counts and border
    """
    fills = _zone_fills(qr)
    size = len(fills)

    img_px = (size + 2 * border) * scale
    img = Image.new('RGB', (img_px, img_px), PALETTE['background'])
    draw = ImageDraw.Draw(img)

    for r in range(size):
        for c in range(size):
            fill = fills[r][c]
            if fill is None:
                continue
            x0 = (c + border) * scale
            y0 = (r + border) * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=fill)

    buf = BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('ascii')

    return b64, _zone_metrics(qr, border)


def render_zones_svg(qr, border: int = 4, scale: int = 10) -> bytes:
    """Zone-colored rendering as SVG; see render_zones_png."""
    fills = _zone_fills(qr)
    size = len(fills)
    px = (size + 2 * border) * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="rgb{PALETTE["background"]}"/>')
    for r in range(size):
        for c in range(size):
            fill = fills[r][c]
            if fill is None:
                continue
            x = (c + border) * scale
            y = (r + border) * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" fill="rgb{fill}"/>')
    out.append('</svg>')
    return "\n".join(out).encode("utf-8")

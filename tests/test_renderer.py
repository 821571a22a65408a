from __future__ import annotations

import base64
from io import BytesIO

import numpy as np
import pytest
from PIL import Image

from qr_encoder import render_array, render_image, render_svg, render_zones_png, render_zones_svg
from qr_encoder.matrix import ModuleMatrix
from qr_encoder.renderer import PALETTE, RenderOptions


def test_array_shape_and_quiet_zone(hello) -> None:
    pixels = render_array(hello.matrix, module_size=4, margin=2)
    assert pixels.shape == (100, 100, 3)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (255, 255, 255)
    assert tuple(pixels[8, 8]) == (0, 0, 0)
    assert tuple(pixels[99, 99]) == (255, 255, 255)


def test_array_matches_modules(hello) -> None:
    pixels = render_array(hello.matrix, module_size=1, margin=0)
    assert (pixels[:, :, 0] == 0).tolist() == hello.rows


def test_custom_colors(hello) -> None:
    pixels = render_array(hello.matrix, module_size=2, margin=1, dark_color='#ff0000', light_color=(0, 0, 255))
    assert tuple(pixels[0, 0]) == (0, 0, 255)
    assert tuple(pixels[2, 2]) == (255, 0, 0)


def test_image_size(hello) -> None:
    img = render_image(hello.matrix)
    assert img.mode == 'RGB'
    assert img.size == ((21 + 8) * 8, (21 + 8) * 8)


def test_plain_rows_are_accepted() -> None:
    pixels = render_array([[True, False], [False, True]], module_size=1, margin=0)
    assert pixels.shape == (2, 2, 3)


@pytest.mark.parametrize("kwargs", [{'module_size': 0}, {'margin': -1}])
def test_invalid_options(kwargs) -> None:
    with pytest.raises(ValueError):
        RenderOptions(**kwargs)


def test_unresolved_matrix_is_rejected() -> None:
    with pytest.raises(ValueError):
        render_array(ModuleMatrix(1))


def test_non_square_rows_are_rejected() -> None:
    with pytest.raises(ValueError):
        render_array([[True, False]])
    with pytest.raises(ValueError):
        render_array([])


def test_svg(hello) -> None:
    svg = render_svg(hello.matrix, module_size=10, margin=4).decode('utf-8')
    assert svg.startswith('<?xml')
    assert 'width="290"' in svg
    dark = sum(sum(row) for row in hello.rows)
    assert svg.count('<rect') == dark + 1


def test_zones_png(hello) -> None:
    b64, metrics = render_zones_png(hello, border=2, scale=3)
    img = Image.open(BytesIO(base64.b64decode(b64)))
    assert img.size == (75, 75)
    assert metrics['size'] == 21
    assert metrics['modules'] == 441
    assert metrics['data_modules'] == 208
    assert metrics['functional_modules'] + metrics['data_modules'] == 441
    assert metrics['dark_modules'] == sum(sum(row) for row in hello.rows)
    assert metrics['border'] == 2
    # top-left finder corner
    assert img.convert('RGB').getpixel((6, 6)) == PALETTE['finder']


def test_zones_svg(hello) -> None:
    svg = render_zones_svg(hello, border=4, scale=10).decode('utf-8')
    assert f"rgb{PALETTE['finder']}" in svg
    assert f"rgb{PALETTE['format']}" in svg or f"rgb{PALETTE['timing']}" in svg

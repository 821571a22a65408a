# -*- coding: utf-8 -*-
"""
QR Encoder - Core Module

Byte-mode QR code encoder: GF(256) Reed-Solomon coding, module placement,
masking and rendering to images or SVG.

Modules:
    qr_generator: Encoding pipeline and mask evaluation
    capacity: Version selection and capacities
    bitstream: Byte-mode data codewords
    reed_solomon: Error correction codewords
    matrix: Module grid, data placement and masks
    functional_areas: Finder, timing, alignment and information areas
    penalties: Mask pattern evaluation algorithms
    renderer: Raster, SVG and zone-colored rendering
    payloads: Wi-Fi, URL and vCard payload builders
"""

__version__ = "1.0.0"

from .exceptions import PayloadTooLarge, QREncodeError, UnsupportedECLength
from .tables import ECLevel
from .qr_generator import QRCode, make_qr, evaluate_all_masks
from .renderer import render_array, render_image, render_svg, render_zones_png, render_zones_svg
from .functional_areas import compute_alignment_centers
from .penalties import compute_mask_penalty

__all__ = [
    'ECLevel',
    'QRCode',
    'make_qr',
    'evaluate_all_masks',
    'render_array',
    'render_image',
    'render_svg',
    'render_zones_png',
    'render_zones_svg',
    'compute_alignment_centers',
    'compute_mask_penalty',
    'QREncodeError',
    'PayloadTooLarge',
    'UnsupportedECLength',
]

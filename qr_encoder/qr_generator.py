# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Runs the complete encoding pipeline:

    text -> version -> data codewords -> EC codewords -> placement
         -> masking -> format/version information -> module matrix

Functions:
    build_matrix: Build and mask a module matrix from codewords
    make_qr: Generate QR code with specified parameters
    evaluate_all_masks: Evaluate all mask patterns to find optimal one
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .bitstream import encode_byte_mode
from .capacity import check_capacity, data_capacity, ec_codewords, select_version
from .functional_areas import (
    add_format_info, add_function_patterns, add_version_info, reserve_info_areas
)
from .matrix import MASK_PATTERNS, ModuleMatrix, apply_mask, place_data
from .penalties import compute_mask_penalty
from .reed_solomon import generate_ec
from .tables import MAX_VERSION, MIN_VERSION, ECLevel

logger = logging.getLogger(__name__)

DEFAULT_MASK = 0


@dataclass(frozen=True)
class QRCode:
    """An encoded symbol together with the values that produced it."""

    text: str
    payload: bytes
    version: int
    level: ECLevel
    mask: int
    data_codewords: Tuple[int, ...]
    ec_codewords: Tuple[int, ...]
    matrix: ModuleMatrix = field(hash=False)

    @property
    def size(self) -> int:
        return self.matrix.size

    @property
    def rows(self) -> List[List[bool]]:
        """Module rows, True = dark."""
        return self.matrix.to_rows()


def build_matrix(codewords: Sequence[int], version: int, level: ECLevel, mask: int) -> ModuleMatrix:
    """
    Build a finished module matrix.

    Args:
        codewords (Sequence[int]): Data codewords followed by EC codewords
        version (int): QR code version (1-29)
        level (ECLevel): Error correction level, stored in the format word
        mask (int): Mask pattern (0-7)

    Returns:
        ModuleMatrix: Fully resolved matrix
    """
    matrix = ModuleMatrix(version)
    add_function_patterns(matrix)
    reserve_info_areas(matrix)
    place_data(matrix, codewords)
    apply_mask(matrix, mask)
    add_format_info(matrix, level, mask)
    add_version_info(matrix)
    return matrix


def _parse_version(version: Optional[Union[int, str]]) -> Optional[int]:
    if version in (None, 'auto'):
        return None
    number = int(version)
    if not MIN_VERSION <= number <= MAX_VERSION:
        raise ValueError(f"Version must be between {MIN_VERSION} and {MAX_VERSION}, got {version}")
    return number


def _parse_mask(mask: Union[int, str]) -> Optional[int]:
    if mask == 'auto':
        return None
    number = int(mask)
    if number not in MASK_PATTERNS:
        raise ValueError(f"Mask pattern must be 0-7 or 'auto', got {mask!r}")
    return number


def make_qr(
    text: Union[str, bytes],
    ecc: Union[str, ECLevel] = 'M',
    version: Optional[Union[int, str]] = 'auto',
    mask: Union[int, str] = DEFAULT_MASK,
    encoding: str = 'utf-8'
) -> QRCode:
    """
    Generate a QR code symbol in byte mode.

    Args:
        text (Union[str, bytes]): The data to encode; str is encoded with ``encoding``
        ecc (Union[str, ECLevel]): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR code version (1-29) or 'auto'
            - 'auto' / None: Select minimum version that fits the data
            - int: Force a specific version (1=21x21, 29=133x133)
        mask (Union[int, str]): Mask pattern
            - int: Use a specific mask pattern (0-7), 0 by default
            - 'auto': Use the mask with the lowest ISO/IEC penalty score
        encoding (str): Character encoding for str input

    Returns:
        QRCode: Encoded symbol with its fully resolved matrix

    Raises:
        ValueError: If the level, version or mask is invalid
        PayloadTooLarge: If the data does not fit

    Example:
        >>> qr = make_qr("HELLO", ecc='M')
        >>> qr.version, qr.size
        (1, 21)
    """
    level = ECLevel.parse(ecc)
    fixed_version = _parse_version(version)
    mask_id = _parse_mask(mask)

    if isinstance(text, str):
        payload = text.encode(encoding)
    else:
        payload = bytes(text)
        text = payload.decode(encoding, errors='replace')

    if fixed_version is None:
        chosen = select_version(len(payload), level)
    else:
        check_capacity(len(payload), fixed_version, level)
        chosen = fixed_version

    if mask_id is None:
        mask_id, best_score, _ = evaluate_all_masks(payload, ecc=level, version=chosen)
        logger.debug("Selected mask %d (penalty %d)", mask_id, best_score)

    data = encode_byte_mode(payload, chosen, data_capacity(chosen, level))
    ec = generate_ec(data, ec_codewords(chosen, level))
    matrix = build_matrix(data + ec, chosen, level, mask_id)

    logger.debug("Encoded %d bytes as version %d-%s, mask %d", len(payload), chosen, level, mask_id)

    return QRCode(
        text=text,
        payload=payload,
        version=chosen,
        level=level,
        mask=mask_id,
        data_codewords=tuple(data),
        ec_codewords=tuple(ec),
        matrix=matrix,
    )


def evaluate_all_masks(
    text: Union[str, bytes],
    ecc: Union[str, ECLevel] = 'M',
    version: Optional[Union[int, str]] = 'auto'
) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) to find the optimal one.

    This function generates the symbol with every mask pattern and
    calculates its penalty score according to ISO/IEC 18004.
    The mask with the lowest penalty score is considered optimal;
    ties go to the lower mask id.

    Args:
        text (Union[str, bytes]): The data to encode
        ecc (Union[str, ECLevel]): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR code version (1-29) or 'auto'

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty (0-7)
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score

    Example:
        >>> best_mask, best_score, scores = evaluate_all_masks("Hello World", ecc='M')
        >>> sorted(scores)
        [0, 1, 2, 3, 4, 5, 6, 7]
    """
    scores = {}
    best_mask = None
    best_score = None

    for mask_pattern in sorted(MASK_PATTERNS):
        symbol = make_qr(text, ecc=ecc, version=version, mask=mask_pattern)
        penalty_score = compute_mask_penalty(symbol.rows)
        scores[mask_pattern] = penalty_score

        if best_score is None or penalty_score < best_score:
            best_score = penalty_score
            best_mask = mask_pattern

    return best_mask, best_score, scores

# -*- coding: utf-8 -*-
"""
QR Code Constant Tables

Read-only data taken from ISO/IEC 18004: error correction structure per
version and level, Reed-Solomon generator polynomials, and the pre-computed
format and version information words. Only versions 1-29 are supported.

Classes:
    ECLevel: Error correction level (L, M, Q, H)
"""

from enum import Enum
from typing import Dict, Tuple, Union

MIN_VERSION = 1
MAX_VERSION = 29


class ECLevel(Enum):
    """
    Error correction level.

    - L: ~7% recovery capability
    - M: ~15% recovery capability
    - Q: ~25% recovery capability
    - H: ~30% recovery capability
    """

    L = 0
    M = 1
    Q = 2
    H = 3

    @property
    def format_bits(self) -> int:
        """Two-bit indicator stored in the format information."""
        return _FORMAT_INDICATORS[self.value]

    @classmethod
    def parse(cls, value: Union['ECLevel', str]) -> 'ECLevel':
        """
        Convert 'L', 'm', ... into an ECLevel.

        Raises:
            ValueError: If the value does not name a level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid error correction level {value!r}, expected one of L, M, Q, H")

    def __str__(self) -> str:
        return self.name


# Indexed by ECLevel.value
_FORMAT_INDICATORS = (0b01, 0b00, 0b11, 0b10)

# EC codewords per block, versions 1-29 (index 0 is version 1)
EC_CODEWORDS_PER_BLOCK = (
    # L
    (7, 10, 15, 20, 26, 18, 20, 24, 30, 18, 20, 24, 26, 30, 22,
     24, 28, 30, 28, 28, 28, 28, 30, 30, 26, 28, 30, 30, 30),
    # M
    (10, 16, 26, 18, 24, 16, 18, 22, 22, 26, 30, 22, 22, 24, 24,
     28, 28, 26, 26, 26, 26, 28, 28, 28, 28, 28, 28, 28, 28),
    # Q
    (13, 22, 18, 26, 18, 24, 18, 22, 20, 24, 28, 26, 24, 20, 30,
     24, 28, 28, 26, 30, 28, 30, 30, 30, 30, 28, 30, 30, 30),
    # H
    (17, 28, 22, 16, 22, 28, 26, 26, 24, 28, 24, 28, 22, 24, 24,
     30, 28, 28, 26, 28, 30, 24, 30, 30, 30, 30, 30, 30, 30),
)

# Number of error correction blocks, versions 1-29
EC_BLOCKS = (
    # L
    (1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6,
     6, 6, 6, 7, 8, 8, 9, 9, 10, 12, 12, 12, 13, 14),
    # M
    (1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10,
     10, 11, 13, 14, 16, 17, 17, 18, 20, 21, 23, 25, 26, 28),
    # Q
    (1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12,
     17, 16, 18, 21, 20, 23, 23, 25, 27, 29, 34, 34, 35, 38),
    # H
    (1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18,
     16, 19, 21, 25, 25, 25, 34, 30, 32, 35, 37, 40, 42, 45),
)

# Generator polynomials keyed by EC codeword count. Coefficients are alpha
# exponents, highest degree first, leading x^n term omitted.
GENERATOR_POLYNOMIALS: Dict[int, Tuple[int, ...]] = {
    7: (87, 229, 146, 149, 238, 102, 21),
    10: (251, 67, 46, 61, 118, 70, 64, 94, 32, 45),
    13: (74, 152, 176, 100, 86, 100, 106, 104, 130, 218, 206, 140, 78),
    15: (8, 183, 61, 91, 202, 37, 51, 58, 58, 237, 140, 124, 5, 99, 105),
    16: (120, 104, 107, 109, 102, 161, 76, 3, 91, 191, 147, 169, 182, 194, 225, 120),
    17: (43, 139, 206, 78, 43, 239, 123, 206, 214, 147, 24, 99, 150, 39, 243, 163, 136),
    18: (215, 234, 158, 94, 184, 97, 118, 170, 79, 187, 152, 148, 252, 179, 5, 98, 96, 153),
    20: (17, 60, 79, 50, 61, 163, 26, 187, 202, 180, 221, 225, 83, 239, 156, 164, 212, 212,
         188, 190),
    22: (210, 171, 247, 242, 93, 230, 14, 109, 221, 53, 200, 74, 8, 172, 98, 80, 219, 134,
         160, 105, 165, 231),
    24: (229, 121, 135, 48, 211, 117, 251, 126, 159, 180, 169, 152, 192, 226, 228, 218, 111,
         0, 117, 232, 87, 96, 227, 21),
    26: (173, 125, 158, 2, 103, 182, 118, 17, 145, 201, 111, 28, 165, 53, 161, 21, 245, 142,
         13, 102, 48, 227, 153, 145, 218, 70),
    28: (168, 223, 200, 104, 224, 234, 108, 180, 110, 190, 195, 147, 205, 27, 232, 201, 21,
         43, 245, 87, 42, 195, 212, 119, 242, 37, 9, 123),
    30: (41, 173, 145, 152, 216, 31, 179, 182, 50, 48, 110, 86, 239, 96, 222, 125, 42, 173,
         226, 193, 224, 130, 156, 37, 251, 216, 238, 40, 192, 180),
}

# 15-bit format words (BCH coded and XOR-ed with 0x5412), [level][mask]
FORMAT_INFO = (
    (0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976),
    (0x5412, 0x5125, 0x5E7C, 0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0),
    (0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED),
    (0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x0762, 0x0255, 0x0D0C, 0x083B),
)

# 18-bit version words for versions 7-29
VERSION_INFO = {
    7: 0x07C94, 8: 0x085BC, 9: 0x09A99, 10: 0x0A4D3, 11: 0x0BBF6, 12: 0x0C762,
    13: 0x0D847, 14: 0x0E60D, 15: 0x0F928, 16: 0x10B78, 17: 0x1145D, 18: 0x12A17,
    19: 0x13532, 20: 0x149A6, 21: 0x15683, 22: 0x168C9, 23: 0x177EC, 24: 0x18EC4,
    25: 0x191E1, 26: 0x1AFAB, 27: 0x1B08E, 28: 0x1CC1A, 29: 0x1D33F,
}


def format_info(level: ECLevel, mask: int) -> int:
    """Return the 15-bit format word for a level and mask id."""
    return FORMAT_INFO[level.value][mask]


def version_info(version: int) -> int:
    """Return the 18-bit version word (versions 7 and up)."""
    return VERSION_INFO[version]

# -*- coding: utf-8 -*-
"""
QR Code Capacity Module

Maps payload sizes and error correction levels to QR versions.

Data capacities follow ISO/IEC 18004 Table 7: the number of modules left for
data after all function patterns, minus the EC codewords of every block.
The encoder itself writes a single EC block (see reed_solomon), so only the
single-block configurations are bit-exact with the standard.

Functions:
    module_count: Side length of the module grid
    data_capacity: Data codewords for a version/level
    ec_codewords: EC codewords generated for a version/level
    byte_capacity: Payload bytes that fit in byte mode
    select_version: Smallest version holding a payload
    check_capacity: Validate a payload against a fixed version
"""

from .exceptions import PayloadTooLarge
from .tables import EC_BLOCKS, EC_CODEWORDS_PER_BLOCK, MAX_VERSION, MIN_VERSION, ECLevel

MODE_INDICATOR_BITS = 4


def _check_version(version: int) -> None:
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise ValueError(f"Version must be between {MIN_VERSION} and {MAX_VERSION}, got {version}")


def module_count(version: int) -> int:
    """
    Calculate the module grid size for a version.

    Example:
        >>> module_count(1)
        21
    """
    return 4 * version + 17


def raw_data_modules(version: int) -> int:
    """
    Count modules not occupied by function patterns or format/version areas.

    Args:
        version (int): QR code version (1-29)

    Returns:
        int: Modules available for data and EC bits (remainder bits included)
    """
    _check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
    if version >= 7:
        result -= 36
    return result


def ec_codewords(version: int, level: ECLevel) -> int:
    """Number of EC codewords generated for the data block."""
    _check_version(version)
    return EC_CODEWORDS_PER_BLOCK[level.value][version - 1]


def data_capacity(version: int, level: ECLevel) -> int:
    """
    Number of data codewords for a version and error correction level.

    Example:
        >>> data_capacity(1, ECLevel.M)
        16
    """
    total_codewords = raw_data_modules(version) // 8
    total_ec = EC_CODEWORDS_PER_BLOCK[level.value][version - 1] * EC_BLOCKS[level.value][version - 1]
    return total_codewords - total_ec


def count_field_bits(version: int) -> int:
    """Width of the byte-mode character count field."""
    return 8 if version < 10 else 16


def byte_capacity(version: int, level: ECLevel) -> int:
    """
    Maximum payload length in bytes for byte mode.

    The mode indicator and count field are subtracted from the data capacity.

    Example:
        >>> byte_capacity(1, ECLevel.M)
        14
    """
    bits = data_capacity(version, level) * 8 - MODE_INDICATOR_BITS - count_field_bits(version)
    return bits // 8


def select_version(byte_length: int, level: ECLevel = ECLevel.M) -> int:
    """
    Pick the smallest version whose byte-mode capacity holds the payload.

    Args:
        byte_length (int): Payload length in bytes
        level (ECLevel): Error correction level

    Returns:
        int: Version number (1-29)

    Raises:
        PayloadTooLarge: If the payload does not fit even in the largest version
    """
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if byte_length <= byte_capacity(version, level):
            return version
    raise PayloadTooLarge(byte_length, byte_capacity(MAX_VERSION, level), level, MAX_VERSION)


def check_capacity(byte_length: int, version: int, level: ECLevel) -> None:
    """
    Validate that a payload fits a caller-selected version.

    Raises:
        ValueError: If the version is out of range
        PayloadTooLarge: If the payload is too long
    """
    capacity = byte_capacity(version, level)
    if byte_length > capacity:
        raise PayloadTooLarge(byte_length, capacity, level, version)

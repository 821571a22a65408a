# -*- coding: utf-8 -*-
"""
Galois Field GF(256) Module

Arithmetic over GF(2^8) as used by QR code Reed-Solomon coding. The field is
generated by alpha = 2 with the primitive polynomial
x^8 + x^4 + x^3 + x^2 + 1 (0x11D = 285).

Both lookup tables are built once at import time and exposed as tuples.

Functions:
    multiply: Multiply two field elements
    exp: Power of the generator alpha
"""

from typing import Tuple

PRIMITIVE_POLY = 0x11D


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Build the exponent and logarithm tables.

    The exponent table holds 512 entries: the 255-periodic sequence is repeated
    so that ``EXP_TABLE[LOG_TABLE[a] + LOG_TABLE[b]]`` never needs a modulo.

    Returns:
        Tuple[Tuple[int, ...], Tuple[int, ...]]: (exp_table, log_table)
    """
    exp_table = [0] * 512
    log_table = [0] * 256

    x = 1
    for i in range(255):
        exp_table[i] = x
        log_table[x] = i
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE_POLY

    for i in range(255, 512):
        exp_table[i] = exp_table[i - 255]

    return tuple(exp_table), tuple(log_table)


EXP_TABLE, LOG_TABLE = _build_tables()


def multiply(a: int, b: int) -> int:
    """
    Multiply two elements of GF(256).

    Args:
        a (int): Field element (0-255)
        b (int): Field element (0-255)

    Returns:
        int: Product in GF(256)

    Example:
        >>> multiply(2, 128)
        29
    """
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[LOG_TABLE[a] + LOG_TABLE[b]]


def exp(n: int) -> int:
    """Return alpha ** n."""
    return EXP_TABLE[n % 255]

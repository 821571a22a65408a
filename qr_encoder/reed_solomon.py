# -*- coding: utf-8 -*-
"""
Reed-Solomon Error Correction Module

Computes QR error correction codewords as the remainder of the data
polynomial (times x^n) divided by the generator polynomial of degree n.
Field addition is XOR, multiplication comes from the galois module.

Functions:
    generator_polynomial: Generator coefficients as field values
    generate_ec: EC codewords for a data block
"""

from typing import Dict, List, Sequence, Tuple

from .exceptions import UnsupportedECLength
from .galois import exp, multiply
from .tables import GENERATOR_POLYNOMIALS

# Exponent form converted once to field values
_GENERATORS: Dict[int, Tuple[int, ...]] = {
    length: tuple(exp(e) for e in exponents)
    for length, exponents in GENERATOR_POLYNOMIALS.items()
}


def generator_polynomial(ec_length: int) -> Tuple[int, ...]:
    """
    Return the generator coefficients (leading 1 omitted) for ``ec_length``.

    Raises:
        UnsupportedECLength: If no table entry exists
    """
    try:
        return _GENERATORS[ec_length]
    except KeyError:
        raise UnsupportedECLength(ec_length) from None


def generate_ec(data: Sequence[int], ec_length: int) -> List[int]:
    """
    Generate Reed-Solomon EC codewords by polynomial long division.

    Args:
        data (Sequence[int]): Data codewords, highest degree first
        ec_length (int): Number of EC codewords (degree of the generator)

    Returns:
        List[int]: ``ec_length`` EC codewords

    Raises:
        UnsupportedECLength: If ``ec_length`` has no generator polynomial

    Example:
        >>> generate_ec([16, 32, 12, 86, 97, 128, 236, 17,
        ...              236, 17, 236, 17, 236, 17, 236, 17], 10)
        [165, 36, 212, 193, 237, 54, 199, 135, 44, 85]
    """
    generator = generator_polynomial(ec_length)

    message = list(data) + [0] * ec_length
    for i in range(len(data)):
        coef = message[i]
        if coef == 0:
            continue
        for j, g in enumerate(generator):
            message[i + j + 1] ^= multiply(g, coef)

    return message[len(data):]

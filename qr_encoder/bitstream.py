# -*- coding: utf-8 -*-
"""
QR Code Bitstream Module

Packs a byte payload into the data codewords of a byte-mode QR segment:

    mode (4 bits) | count (8 or 16 bits) | payload | terminator | pad bytes

The header is 12 or 20 bits long, so every payload byte straddles two
codewords: each codeword takes the low nibble of the previous byte and the
high nibble of the current one. The low nibble of the last payload byte is
followed by zero bits, then a whole zero codeword when there is room for
one, after which 0xEC and 0x11 alternate until the data capacity is reached.

Functions:
    encode_byte_mode: Build the data codeword sequence
"""

from typing import List

from .capacity import count_field_bits
from .exceptions import PayloadTooLarge

BYTE_MODE = 0b0100
PAD_CODEWORDS = (0xEC, 0x11)


def encode_byte_mode(payload: bytes, version: int, data_capacity: int) -> List[int]:
    """
    Encode a payload as byte-mode data codewords.

    Args:
        payload (bytes): Raw bytes to encode (usually UTF-8 text)
        version (int): QR code version, decides the count field width
        data_capacity (int): Number of data codewords to produce

    Returns:
        List[int]: Exactly ``data_capacity`` codewords

    Raises:
        PayloadTooLarge: If header and payload do not fit

    Example:
        >>> encode_byte_mode(b"A", 1, 4)
        [64, 20, 16, 0]
    """
    count_bits = count_field_bits(version)
    header_bytes = count_bits // 8
    needed = header_bytes + 1 + len(payload)
    if needed > data_capacity:
        raise PayloadTooLarge(len(payload), max(0, data_capacity - header_bytes - 1), None, version)

    header = (BYTE_MODE << count_bits) | len(payload)
    codewords = [(header >> (4 + 8 * i)) & 0xFF for i in reversed(range(header_bytes))]

    carry = header & 0x0F
    for byte in payload:
        codewords.append((carry << 4) | (byte >> 4))
        carry = byte & 0x0F
    codewords.append(carry << 4)
    # Terminator
    if len(codewords) < data_capacity:
        codewords.append(0)

    pad_index = 0
    while len(codewords) < data_capacity:
        codewords.append(PAD_CODEWORDS[pad_index % 2])
        pad_index += 1

    return codewords

# -*- coding: utf-8 -*-
"""
QR Encoder Exceptions

All errors raised while encoding derive from QREncodeError, which is a
ValueError so callers that already guard user input with ``except ValueError``
keep working.
"""


class QREncodeError(ValueError):
    """Base class for encoding failures."""


class PayloadTooLarge(QREncodeError):
    """The payload does not fit into the requested (or largest) version."""

    def __init__(self, length: int, capacity: int, level, version: int):
        self.length = length
        self.capacity = capacity
        self.level = level
        self.version = version
        symbol = f"{version}-{level}" if level is not None else str(version)
        super().__init__(
            f"Payload of {length} bytes exceeds the capacity of version {symbol} ({capacity} bytes)"
        )


class UnsupportedECLength(QREncodeError):
    """No generator polynomial is known for the requested EC codeword count."""

    def __init__(self, ec_length: int):
        self.ec_length = ec_length
        super().__init__(f"No generator polynomial for {ec_length} EC codewords")

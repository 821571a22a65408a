from __future__ import annotations

import pytest

from qr_encoder import make_qr

# (version, level) pairs that ISO/IEC 18004 codes as a single RS block
SINGLE_BLOCK = [
    (1, 'L'), (1, 'M'), (1, 'Q'), (1, 'H'),
    (2, 'L'), (2, 'M'), (2, 'Q'), (2, 'H'),
    (3, 'L'), (3, 'M'), (4, 'L'), (5, 'L'),
]


@pytest.fixture
def hello():
    return make_qr("HELLO", ecc='M')


def segno_rows(text: str, ecc: str, version: int, mask: int):
    """Reference matrix from segno with the same fixed parameters."""
    segno = pytest.importorskip("segno")
    symbol = segno.make(
        text, error=ecc.lower(), version=version, mode='byte', mask=mask,
        encoding='utf-8', eci=False, micro=False, boost_error=False,
    )
    return [[bool(v) for v in row] for row in symbol.matrix]

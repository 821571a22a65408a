# -*- coding: utf-8 -*-
"""
QR Code Module Matrix

The module grid under construction. Every cell has an explicit CellState so
that "can data still go here" is a state check instead of a null check:

    UNSET    -> FUNCTION   finder / timing / alignment / dark module
    UNSET    -> RESERVED   format and version areas, light placeholder
    UNSET    -> DATA       data and EC bits (masked in place)
    RESERVED -> METADATA   format and version words

A matrix is resolved once no cell is UNSET or RESERVED.

Classes:
    CellState: Construction state of a module
    ModuleMatrix: Square grid of modules

Functions:
    data_module_coords: Data module positions in placement order
    place_data: Write codewords along the zigzag path
    apply_mask: XOR a mask pattern over the data modules
"""

from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from .capacity import module_count


class CellState(Enum):
    """
    Construction state of a module.

    - UNSET: not written yet, free for data
    - FUNCTION: finder, separator, timing, alignment or dark module
    - RESERVED: format/version area waiting for its word
    - DATA: data, EC or remainder bit (the only state masks touch)
    - METADATA: format or version bit
    """

    UNSET = 0
    FUNCTION = 1
    RESERVED = 2
    DATA = 3
    METADATA = 4


# Mask conditions, i = row, j = column; the module is inverted when true
MASK_PATTERNS: Dict[int, Callable[[int, int], bool]] = {
    0: lambda i, j: (i + j) % 2 == 0,
    1: lambda i, j: i % 2 == 0,
    2: lambda i, j: j % 3 == 0,
    3: lambda i, j: (i + j) % 3 == 0,
    4: lambda i, j: (i // 2 + j // 3) % 2 == 0,
    5: lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    6: lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    7: lambda i, j: ((i + j) % 2 + (i * j) % 3) % 2 == 0,
}


class ModuleMatrix:
    """
    Square grid of modules for one QR version.

    Besides its state and color, each non-data module remembers the zone that
    produced it ('finder', 'separator', 'timing', 'alignment', 'dark',
    'format' or 'version'), which the zone renderer uses for coloring.
    """

    def __init__(self, version: int):
        self.version = version
        self.size = module_count(version)
        self._state = [[CellState.UNSET] * self.size for _ in range(self.size)]
        self._dark = [[False] * self.size for _ in range(self.size)]
        self._zone: List[List[Optional[str]]] = [[None] * self.size for _ in range(self.size)]

    def state(self, row: int, col: int) -> CellState:
        """Return the construction state of module (row, col)."""
        return self._state[row][col]

    def is_dark(self, row: int, col: int) -> bool:
        """True if module (row, col) is currently dark."""
        return self._dark[row][col]

    def zone(self, row: int, col: int) -> Optional[str]:
        """Zone name of a function/reserved module, 'data' for data, None if unset."""
        if self._state[row][col] is CellState.DATA:
            return 'data'
        return self._zone[row][col]

    def set_function(self, row: int, col: int, dark: bool, zone: str) -> None:
        """Stamp a function pattern module. Later patterns may overwrite earlier ones."""
        if self._state[row][col] not in (CellState.UNSET, CellState.FUNCTION):
            raise RuntimeError(f"Module ({row}, {col}) is {self._state[row][col].name}, not a pattern slot")
        self._state[row][col] = CellState.FUNCTION
        self._dark[row][col] = dark
        self._zone[row][col] = zone

    def reserve(self, row: int, col: int, zone: str) -> None:
        """Hold a light placeholder for metadata written after masking."""
        if self._state[row][col] is not CellState.UNSET:
            raise RuntimeError(f"Module ({row}, {col}) cannot be reserved, it is {self._state[row][col].name}")
        self._state[row][col] = CellState.RESERVED
        self._dark[row][col] = False
        self._zone[row][col] = zone

    def set_data(self, row: int, col: int, dark: bool) -> None:
        """
        Write a data bit into an unset module.

        Args:
            row (int): Module row
            col (int): Module column
            dark (bool): True for a 1 bit

        Raises:
            RuntimeError: If the module was already written
        """
        if self._state[row][col] is not CellState.UNSET:
            raise RuntimeError(f"Module ({row}, {col}) already holds {self._state[row][col].name}")
        self._state[row][col] = CellState.DATA
        self._dark[row][col] = dark

    def set_metadata(self, row: int, col: int, dark: bool) -> None:
        """
        Write a format or version bit into a reserved module.

        Args:
            row (int): Module row
            col (int): Module column
            dark (bool): True for a 1 bit

        Raises:
            RuntimeError: If the module was not reserved
        """
        if self._state[row][col] not in (CellState.RESERVED, CellState.METADATA):
            raise RuntimeError(f"Module ({row}, {col}) is not reserved for metadata")
        self._state[row][col] = CellState.METADATA
        self._dark[row][col] = dark

    def invert(self, row: int, col: int) -> None:
        """
        Flip a data module (used by masking).

        Raises:
            RuntimeError: If the module is not a data module
        """
        if self._state[row][col] is not CellState.DATA:
            raise RuntimeError(f"Only data modules can be masked, ({row}, {col}) is {self._state[row][col].name}")
        self._dark[row][col] = not self._dark[row][col]

    def count(self, state: CellState) -> int:
        """
        Count modules in a given state.

        Args:
            state (CellState): State to count

        Returns:
            int: Number of modules in that state
        """
        return sum(row.count(state) for row in self._state)

    def is_resolved(self) -> bool:
        """True once every module has its final color."""
        return self.count(CellState.UNSET) == 0 and self.count(CellState.RESERVED) == 0

    def to_rows(self) -> List[List[bool]]:
        """Copy of the grid as rows of booleans (True = dark)."""
        return [list(row) for row in self._dark]

    def __iter__(self) -> Iterator[List[bool]]:
        return iter(self.to_rows())

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModuleMatrix):
            return NotImplemented
        return self._dark == other._dark and self._state == other._state


def data_module_coords(matrix: ModuleMatrix) -> List[Tuple[int, int]]:
    """
    Get coordinates of non-functional modules in standard QR placement order.

    QR codes place data in a zigzag pattern of column pairs from right to left,
    skipping column 6 (timing pattern) and alternating between upward and
    downward scans.

    Args:
        matrix (ModuleMatrix): Matrix with all function patterns stamped

    Returns:
        List[Tuple[int, int]]: (row, col) coordinates in placement order
    """
    size = matrix.size
    coords = []
    upward = True
    col = size - 1

    while col > 0:
        if col == 6:  # Skip timing pattern column
            col -= 1

        for i in range(size):
            r = (size - 1 - i) if upward else i
            for c in (col, col - 1):
                if matrix.state(r, c) in (CellState.UNSET, CellState.DATA):
                    coords.append((r, c))

        upward = not upward
        col -= 2

    return coords


def place_data(matrix: ModuleMatrix, codewords: Sequence[int]) -> int:
    """
    Place codewords MSB first into every unset module.

    Modules beyond the end of the bitstream (remainder bits) are light.

    Returns:
        int: Number of remainder modules that received no codeword bit
    """
    total_bits = len(codewords) * 8
    coords = data_module_coords(matrix)
    for bit_index, (r, c) in enumerate(coords):
        bit = 0
        if bit_index < total_bits:
            bit = (codewords[bit_index >> 3] >> (7 - (bit_index & 7))) & 1
        matrix.set_data(r, c, bit == 1)
    return max(0, len(coords) - total_bits)


def apply_mask(matrix: ModuleMatrix, mask: int) -> None:
    """
    Invert the data modules selected by a mask pattern.

    Raises:
        ValueError: If mask is not in 0-7
    """
    try:
        condition = MASK_PATTERNS[mask]
    except KeyError:
        raise ValueError(f"Mask pattern must be 0-7, got {mask!r}") from None

    for r in range(matrix.size):
        for c in range(matrix.size):
            if matrix.state(r, c) is CellState.DATA and condition(r, c):
                matrix.invert(r, c)

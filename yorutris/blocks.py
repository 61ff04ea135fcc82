"""The concrete pieces, each with its id, rotations and spawn column."""

from __future__ import annotations

from .block import Block
from .position import Position


def _shape(*cells: tuple[int, int]) -> list[Position]:
    return [Position(r, c) for r, c in cells]


class LBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 2), (1, 0), (1, 1), (1, 2)),
                _shape((0, 1), (1, 1), (2, 1), (2, 2)),
                _shape((0, 0), (0, 1), (0, 2), (1, 0)),
                _shape((0, 0), (0, 1), (1, 1), (2, 1)),
            ],
            block_id=5,
            start_col=13,
        )


class JBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 0), (1, 0), (1, 1), (1, 2)),
                _shape((0, 1), (0, 2), (1, 1), (2, 1)),
                _shape((0, 0), (0, 1), (0, 2), (1, 2)),
                _shape((0, 1), (1, 1), (2, 0), (2, 1)),
            ],
            block_id=6,
            start_col=13,
        )


class IBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 0), (0, 1), (0, 2), (0, 3)),
                _shape((0, 2), (1, 2), (2, 2), (3, 2)),
                _shape((0, 0), (0, 1), (0, 2), (0, 3)),
                _shape((0, 1), (1, 1), (2, 1), (3, 1)),
            ],
            block_id=7,
            start_col=13,
        )


class OBlock(Block):
    def __init__(self) -> None:
        square = _shape((0, 0), (0, 1), (1, 0), (1, 1))
        super().__init__([square] * 4, block_id=8, start_col=14)


class TBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 1), (1, 0), (1, 1), (1, 2)),
                _shape((0, 1), (1, 1), (1, 2), (2, 1)),
                _shape((0, 0), (0, 1), (0, 2), (1, 1)),
                _shape((0, 1), (1, 0), (1, 1), (2, 1)),
            ],
            block_id=9,
            start_col=13,
        )


class SBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 1), (0, 2), (1, 0), (1, 1)),
                _shape((0, 1), (1, 1), (1, 2), (2, 2)),
                _shape((0, 1), (0, 2), (1, 0), (1, 1)),
                _shape((0, 0), (1, 0), (1, 1), (2, 1)),
            ],
            block_id=10,
            start_col=13,
        )


class ZBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 0), (0, 1), (1, 1), (1, 2)),
                _shape((0, 2), (1, 1), (1, 2), (2, 1)),
                _shape((0, 0), (0, 1), (1, 1), (1, 2)),
                _shape((0, 1), (1, 0), (1, 1), (2, 0)),
            ],
            block_id=11,
            start_col=13,
        )


class CBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 0), (0, 1), (0, 2), (1, 0), (1, 2)),
                _shape((0, 0), (0, 1), (1, 1), (2, 1), (2, 0)),
                _shape((0, 1), (0, 0), (1, 0), (2, 0), (2, 1)),
                _shape((0, 0), (1, 0), (1, 1), (1, 2), (0, 2)),
            ],
            block_id=3,
            start_col=13,
        )


class VBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            [
                _shape((0, 0), (1, 0), (1, 1)),
                _shape((0, 1), (1, 1), (1, 0)),
                _shape((0, 0), (0, 1), (1, 1)),
                _shape((0, 1), (0, 0), (1, 0)),
            ],
            block_id=4,
            start_col=13,
        )


class IIBlock(Block):
    def __init__(self) -> None:
        flat = _shape((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2))
        upright = _shape((0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1))
        super().__init__([flat, upright, flat, upright], block_id=12, start_col=13)


def basic_blocks() -> list[Block]:
    """Return one of each classic four-cell piece."""
    return [LBlock(), TBlock(), IBlock(), OBlock(), SBlock(), ZBlock(), JBlock()]


def all_blocks() -> list[Block]:
    """Return one of every piece, including the special shapes."""
    return [
        LBlock(),
        TBlock(),
        IBlock(),
        OBlock(),
        SBlock(),
        ZBlock(),
        JBlock(),
        CBlock(),
        VBlock(),
        IIBlock(),
    ]
"""Chunk / tile addressing of world pixels."""
from __future__ import annotations

import math
from typing import Tuple

from wplace_route.config import PlannerConfig
from wplace_route.core.models import BlockAddress, WorldPoint


def _split(coord: float, modulus: int) -> Tuple[int, int]:
    block = math.floor(coord / modulus)
    local = coord - block * modulus
    # tiny negatives can land exactly on the upper edge after rounding
    if local >= modulus:
        block += 1
        local -= modulus
    elif local < 0:
        block -= 1
        local += modulus
    return block, math.floor(local)


def decompose(x: float, y: float, modulus: int) -> BlockAddress:
    """
    Split a world pixel into ``(block, local)`` under *modulus*.

    Block indices use floor division and may be negative; local offsets are
    whole pixels in ``[0, modulus)`` whatever the sign of the coordinate.
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    bx, lx = _split(x, modulus)
    by, ly = _split(y, modulus)
    return BlockAddress(block_x=bx, block_y=by, local_x=lx, local_y=ly, modulus=modulus)


def chunk_address(point: WorldPoint, config: PlannerConfig) -> BlockAddress:
    return decompose(point.x, point.y, config.chunk_modulus)


def tile_address(point: WorldPoint, config: PlannerConfig) -> BlockAddress:
    return decompose(point.x, point.y, config.tile_modulus)

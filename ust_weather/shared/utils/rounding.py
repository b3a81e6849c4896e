"""Arredondamento "half up" (2.5 → 3, -2.5 → -2), igual ao usado pelo dashboard web"""
import math


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

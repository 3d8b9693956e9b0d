from __future__ import annotations

import math


def compute_num_layers(max_stack: float, box_h: float) -> int:
    if box_h <= 0 or max_stack <= 0:
        return 0
    return max(int(math.floor(max_stack / box_h)), 0)


def compute_stack_height(num_layers: int, box_h: float) -> float:
    if box_h <= 0 or num_layers <= 0:
        return 0.0
    return num_layers * box_h

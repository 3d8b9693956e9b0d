from __future__ import annotations

import math

from .errors import InvalidDimension
from .models import BoxSpec, LoadConstraints, PalletSpec


def check_dimension(field: str, value, *, allow_zero: bool = False) -> float:
    """Return ``value`` as float or raise :class:`InvalidDimension`."""
    if value is None:
        raise InvalidDimension(field, "missing", value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDimension(field, "not a number", value)
    number = float(value)
    if math.isnan(number):
        raise InvalidDimension(field, "nan", value)
    if math.isinf(number):
        raise InvalidDimension(field, "non-finite", value)
    if allow_zero:
        if number < 0:
            raise InvalidDimension(field, "negative", value)
    elif number <= 0:
        raise InvalidDimension(field, "non-positive", value)
    return number


def validate_load_inputs(
    box: BoxSpec, pallet: PalletSpec, constraints: LoadConstraints
) -> None:
    check_dimension("length", box.length)
    check_dimension("width", box.width)
    check_dimension("height", box.height)
    check_dimension("weight", box.weight, allow_zero=True)
    check_dimension("pallet_width", pallet.width)
    check_dimension("pallet_length", pallet.length)
    check_dimension("max_stack_height", constraints.max_stack_height)

"""Module for validating flat mappings of numeric request fields"""

__all__ = ['ValidationError', 'is_missing', 'validate']

import math
import numbers
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from greatcircle.utils.logging import LOGGER

Bounds = Tuple[Optional[float], Optional[float]]


class ValidationError(ValueError):
    """One or more request fields were missing, non-numeric, or out of range"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(
            '; '.join(msg for messages in errors.values() for msg in messages)
        )


def is_missing(value: Any) -> bool:
    """None and blank strings count as absent"""
    if value is None:
        return True

    return isinstance(value, str) and not value.strip()


def _to_number(value: Any) -> Optional[float]:
    """Converts a numeric value or numeric string to a finite float, else None"""
    if isinstance(value, bool):
        return None

    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def _format_bound(bound: float) -> str:
    return f'{bound:g}'


def _check_bounds(field: str, value: float, bounds: Bounds) -> Optional[str]:
    lower, upper = bounds
    if lower is not None and upper is not None:
        if not lower <= value <= upper:
            return (
                f'The {field} must be between '
                f'{_format_bound(lower)} and {_format_bound(upper)}.'
            )
        return None

    if lower is not None and value < lower:
        return f'The {field} must be at least {_format_bound(lower)}.'

    if upper is not None and value > upper:
        return f'The {field} must not be greater than {_format_bound(upper)}.'

    return None


def validate(
    data: Mapping[str, Any],
    required: Iterable[str],
    optional: Iterable[str] = (),
    defaults: Optional[Mapping[str, float]] = None,
    ranges: Optional[Mapping[str, Bounds]] = None,
) -> Dict[str, float]:
    """
    Checks that every required field is present and numeric, that optional
    fields are numeric when present, and that numeric values sit within their
    (inclusive) bounds. All violations are collected before raising.

    Args:
        data:
            The flat mapping to validate, e.g. a request body

        required:
            Names of fields which must be present

        optional:
            Names of fields which may be absent

        defaults:
            Values to use for absent optional fields

        ranges:
            Inclusive (lower, upper) bounds per field; either bound may be None

    Returns:
        Dict of field name to float, for every required field and every
        optional field that was present or has a default

    Raises:
        ValidationError: with a mapping of field name to error messages
    """
    defaults = defaults or {}
    ranges = ranges or {}
    errors: Dict[str, List[str]] = {}
    values: Dict[str, float] = {}

    fields = [(field, True) for field in required] + [(field, False) for field in optional]
    for field, is_required in fields:
        raw = data.get(field)
        if is_missing(raw):
            if is_required:
                errors.setdefault(field, []).append(f'The {field} field is required.')
            elif field in defaults:
                values[field] = float(defaults[field])
            continue

        number = _to_number(raw)
        if number is None:
            errors.setdefault(field, []).append(f'The {field} must be a number.')
            continue

        if field in ranges:
            message = _check_bounds(field, number, ranges[field])
            if message:
                errors.setdefault(field, []).append(message)
                continue

        values[field] = number

    if errors:
        LOGGER.debug('Validation failed for fields: %s', ', '.join(errors))
        raise ValidationError(errors)

    return values

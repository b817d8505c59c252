"""Decimal helpers: money and quantities never go through binary floats."""
from decimal import Decimal, InvalidOperation
from typing import Any


def D(value: Any) -> Decimal:
    '''Coerce a stored or user supplied number into a Decimal (floats via their repr).'''
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a decimal value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal value: {value!r}") from e


def decimal_str(value: Decimal) -> str:
    '''Text encoding used in the JSON store and API payloads.'''
    return format(D(value), 'f')


__all__ = ['D', 'decimal_str']

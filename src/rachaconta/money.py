from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, str, Decimal]

# Smallest tracked unit: a tenth of a cent.
UNIT = Decimal("0.001")


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _quantize(value: Decimal, places: int = 3) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Monetary amount stored as a Decimal quantized to thousandths.

    Arithmetic with plain numbers goes through Decimal and is re-quantized, so
    no binary floating point error accumulates across many edges.
    """

    value: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _quantize(_to_decimal(self.value)))

    @classmethod
    def of(cls, value: Number | Money) -> Money:
        if isinstance(value, Money):
            return value
        return cls(_to_decimal(value))

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal(0))

    @classmethod
    def sum(cls, values: Iterable[Money]) -> Money:
        total = Decimal(0)
        for value in values:
            total += value.value
        return cls(total)

    def round(self, places: int = 2) -> Money:
        return Money(_quantize(self.value, places))

    def is_zero(self) -> bool:
        return self.value == 0

    def decimal(self) -> Decimal:
        return self.value

    def __add__(self, other: Money | Number) -> Money:
        return Money(self.value + Money.of(other).value)

    def __radd__(self, other: Money | Number) -> Money:
        # lets the builtin sum() start from 0
        return self.__add__(other)

    def __sub__(self, other: Money | Number) -> Money:
        return Money(self.value - Money.of(other).value)

    def __rsub__(self, other: Money | Number) -> Money:
        return Money(Money.of(other).value - self.value)

    def __mul__(self, factor: Number) -> Money:
        return Money(self.value * _to_decimal(factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Money:
        return Money(self.value / _to_decimal(divisor))

    def __neg__(self) -> Money:
        return Money(-self.value)

    def __abs__(self) -> Money:
        return Money(abs(self.value))

    def __str__(self) -> str:
        return str(_quantize(self.value, 2))

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(_quantize(self.value, 2), spec)

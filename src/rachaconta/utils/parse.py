from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from rachaconta.money import Money
from rachaconta.person import Person, named, unnamed


class InputError(ValueError):
    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


def parse_payment(token: str) -> tuple[str, Decimal]:
    """
    Parse a ``NAME=VALUE`` contribution.

    The name may contain spaces; only the first ``=`` separates it from the
    amount, e.g. ``"Ana Clara=100"`` or ``Rafael=50.00``.
    """
    name, sep, value = token.partition("=")
    if not sep:
        raise InputError(f"use the format NAME=VALUE: {token!r}")

    name = name.strip()
    if not name:
        raise InputError(f"missing name in {token!r}")

    try:
        amount = Decimal(value.strip())
    except InvalidOperation as exc:
        raise InputError(f"invalid number: {value!r}") from exc

    if not amount.is_finite():
        raise InputError(f"invalid number: {value!r}")
    if amount < 0:
        raise InputError(f"amount must not be negative: {value!r}")
    _check_representable(amount, repr(value))
    return name, amount


def _check_representable(amount: Decimal, label: str) -> None:
    try:
        Money.of(amount)
    except InvalidOperation as exc:
        raise InputError(f"amount out of range: {label}") from exc


def build_persons(
    payments: Iterable[tuple[str, Decimal]],
    total_persons: Optional[int] = None,
) -> list[Person]:
    """Turn contributions into participants, pooling non-payers into one anonymous group.

    Repeated names are one participant whose contributions add up.
    """
    spent: dict[str, Decimal] = {}
    for name, amount in payments:
        spent[name] = spent.get(name, Decimal(0)) + amount

    if not spent:
        raise InputError("at least one NAME=VALUE contribution is required")
    _check_representable(sum(spent.values()), "the contributions add up to too much")

    payers = len(spent)
    if total_persons is None:
        total_persons = payers

    if payers > total_persons:
        raise InputError(
            f"the bill does not add up: {payers} person(s) paid, but only {total_persons} were given in total",
            hint=f"raise -p to at least {payers} or drop -p to split among the payers only",
        )
    if total_persons < 2:
        raise InputError(
            "at least two people are needed to split a bill",
            hint="use -p to include people who did not pay",
        )

    persons: list[Person] = [named(name, amount) for name, amount in spent.items()]
    remaining = total_persons - payers
    if remaining > 0:
        persons.append(unnamed(remaining))
    return persons

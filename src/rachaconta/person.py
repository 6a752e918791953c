from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from rachaconta.money import Money, Number


@dataclass(frozen=True, slots=True)
class Named:
    """A participant identified by name who paid ``money_spent``.

    Two ``Named`` values with the same name are the same participant, whatever
    they spent.
    """

    name: str
    spent: Money = field(default_factory=Money.zero, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "spent", Money.of(self.spent).round(2))

    def identifier(self) -> str:
        return self.name

    def money_spent(self) -> Money:
        return self.spent

    def size(self) -> int:
        return 1

    def __str__(self) -> str:
        return self.identifier()


@dataclass(frozen=True, slots=True)
class Unnamed:
    """Anonymous bloc of ``count`` participants who paid nothing.

    There is a single anonymous bucket per settlement, so all ``Unnamed``
    values compare equal.
    """

    count: int = field(compare=False)

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("anonymous group size must be at least 1")

    def identifier(self) -> str:
        if self.count == 1:
            return "1 other person"
        return f"{self.count} other people"

    def money_spent(self) -> Money:
        return Money.zero()

    def size(self) -> int:
        return self.count

    def __str__(self) -> str:
        return self.identifier()


Person = Union[Named, Unnamed]


def named(name: str, money_spent: Number | Money) -> Named:
    return Named(name, Money.of(money_spent))


def unnamed(size: int) -> Unnamed:
    return Unnamed(size)


def total_head_count(persons: Iterable[Person]) -> int:
    return sum(person.size() for person in persons)


def total_spent(persons: Iterable[Person]) -> Money:
    return Money.sum(person.money_spent() for person in persons)

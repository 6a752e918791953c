"""Directed debt graph stored as a node arena with index-keyed adjacency maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from rachaconta.money import Money, Number
from rachaconta.person import Person


@dataclass(slots=True)
class Payment:
    debitor: Person
    creditor: Person
    amount: Money


class DebtGraph:
    """Who owes whom how much.

    Nodes live in an append-only list and are addressed by their index. Edges
    are kept twice, in an outgoing and an incoming map per node, so that
    lookups, reweighting and removal are O(1) and never invalidate other
    indices. Participants are deduplicated by value equality.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._nodes: list[Person] = []
        self._index: dict[Person, int] = {}
        self._out: list[dict[int, Money]] = []
        self._in: list[dict[int, Money]] = []
        for person in persons:
            self.add_node(person)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, person: object) -> bool:
        return person in self._index

    def add_node(self, person: Person) -> int:
        index = self._index.get(person)
        if index is not None:
            return index
        index = len(self._nodes)
        self._nodes.append(person)
        self._index[person] = index
        self._out.append({})
        self._in.append({})
        return index

    def index_of(self, person: Person) -> int:
        try:
            return self._index[person]
        except KeyError:
            raise KeyError(f"unknown participant: {person}") from None

    def person(self, index: int) -> Person:
        return self._nodes[index]

    def persons(self) -> list[Person]:
        return list(self._nodes)

    def node_indices(self) -> range:
        return range(len(self._nodes))

    def edge_weight(self, debitor: int, creditor: int) -> Optional[Money]:
        return self._out[debitor].get(creditor)

    def has_edge(self, debitor: int, creditor: int) -> bool:
        return creditor in self._out[debitor]

    def set_edge(self, debitor: int, creditor: int, amount: Money | Number) -> None:
        if debitor == creditor:
            raise ValueError("a participant cannot owe themselves")
        amount = Money.of(amount)
        if amount.value < 0:
            raise ValueError("edge amount must not be negative")
        if amount.is_zero():
            self.remove_edge(debitor, creditor)
            return
        self._out[debitor][creditor] = amount
        self._in[creditor][debitor] = amount

    def add_edge(self, debitor: int, creditor: int, amount: Money | Number) -> None:
        """Add ``amount`` to the debitor -> creditor edge, creating it if absent."""
        current = self._out[debitor].get(creditor, Money.zero())
        self.set_edge(debitor, creditor, current + amount)

    def remove_edge(self, debitor: int, creditor: int) -> None:
        self._out[debitor].pop(creditor, None)
        self._in[creditor].pop(debitor, None)

    def clear_edges(self) -> None:
        for adjacency in self._out:
            adjacency.clear()
        for adjacency in self._in:
            adjacency.clear()

    def outgoing(self, index: int) -> dict[int, Money]:
        return dict(self._out[index])

    def incoming(self, index: int) -> dict[int, Money]:
        return dict(self._in[index])

    def edges(self) -> Iterator[tuple[int, int, Money]]:
        for debitor, adjacency in enumerate(self._out):
            for creditor, amount in adjacency.items():
                yield debitor, creditor, amount

    def edge_count(self) -> int:
        return sum(len(adjacency) for adjacency in self._out)

    def total_owed(self, index: int) -> Money:
        return Money.sum(self._out[index].values())

    def total_to_receive(self, index: int) -> Money:
        return Money.sum(self._in[index].values())

    def net_balance(self, index: int) -> Money:
        """Positive when the participant is owed money, negative when they owe."""
        return self.total_to_receive(index) - self.total_owed(index)

    def snapshot(self) -> list[tuple[int, int, Money]]:
        return list(self.edges())

    def restore(self, edges: Iterable[tuple[int, int, Money]]) -> None:
        self.clear_edges()
        for debitor, creditor, amount in edges:
            self.set_edge(debitor, creditor, amount)

    def copy(self) -> DebtGraph:
        other = DebtGraph(self._nodes)
        other.restore(self.edges())
        return other

    def to_payments(self) -> list[Payment]:
        return [
            Payment(debitor=self._nodes[debitor], creditor=self._nodes[creditor], amount=amount)
            for debitor, creditor, amount in self.edges()
        ]

from __future__ import annotations

from typing import Sequence

from rachaconta.graph import DebtGraph
from rachaconta.money import Money
from rachaconta.person import Named, Person, total_head_count, total_spent


def _check_participants(persons: Sequence[Person]) -> int:
    if not persons:
        raise ValueError("persons must not be empty")
    if len(set(persons)) != len(persons):
        raise ValueError("participants must be distinct")

    heads = total_head_count(persons)
    if heads <= 0:
        raise ValueError("total head count must be positive")
    return heads


def fair_share_per_head(persons: Sequence[Person]) -> Money:
    heads = _check_participants(persons)
    return total_spent(persons) / heads


def build_debt_graph(persons: Sequence[Person]) -> DebtGraph:
    """Every participant owes each paying creditor an equal share of what they spent.

    The debitor's share is weighted by its head count, so an anonymous group of
    three owes three shares on a single edge.
    """
    heads = _check_participants(persons)
    graph = DebtGraph(persons)

    for creditor in persons:
        if not isinstance(creditor, Named) or creditor.money_spent().is_zero():
            continue

        amount_for_each = creditor.money_spent() / heads
        creditor_index = graph.index_of(creditor)
        for debitor in persons:
            if debitor == creditor:
                continue
            amount = amount_for_each * debitor.size()
            if amount.is_zero():
                continue
            graph.add_edge(graph.index_of(debitor), creditor_index, amount)

    return graph

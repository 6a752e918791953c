from __future__ import annotations

from decimal import Decimal
from typing import Optional

from rachaconta.config import get_settings
from rachaconta.graph import DebtGraph
from rachaconta.person import total_head_count, total_spent


class SettlementInvariantError(AssertionError):
    pass


def tolerance_for(graph: DebtGraph, per_head: Optional[Decimal] = None) -> Decimal:
    if per_head is None:
        per_head = get_settings().tolerance_per_head
    return per_head * total_head_count(graph.persons())


def fair_share(graph: DebtGraph) -> Decimal:
    persons = graph.persons()
    heads = total_head_count(persons)
    if heads <= 0:
        raise ValueError("total head count must be positive")
    return total_spent(persons).decimal() / heads


def final_balance(graph: DebtGraph, index: int) -> Decimal:
    """Per-head amount this participant ends up paying once every edge is settled."""
    person = graph.person(index)
    paid = person.money_spent() + graph.total_owed(index) - graph.total_to_receive(index)
    return paid.decimal() / person.size()


def balance_errors(graph: DebtGraph) -> dict[int, Decimal]:
    expected = fair_share(graph)
    return {index: final_balance(graph, index) - expected for index in graph.node_indices()}


def is_balanced(graph: DebtGraph, tolerance: Optional[Decimal] = None) -> bool:
    if tolerance is None:
        tolerance = tolerance_for(graph)
    return all(abs(error) <= tolerance for error in balance_errors(graph).values())


def assert_balanced(graph: DebtGraph, tolerance: Optional[Decimal] = None) -> None:
    if tolerance is None:
        tolerance = tolerance_for(graph)
    for index, error in balance_errors(graph).items():
        if abs(error) > tolerance:
            raise SettlementInvariantError(
                f"{graph.person(index).identifier()} is off their fair share by {error:.4f} "
                f"(tolerance {tolerance})"
            )

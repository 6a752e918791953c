from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Mapping, Optional

from rachaconta.config import get_settings
from rachaconta.graph import DebtGraph
from rachaconta.logging import get_logger
from rachaconta.money import Money
from rachaconta.services.strategy import Strategy
from rachaconta.services.validation import SettlementInvariantError, assert_balanced

# Remainders at or below one cent count as settled.
DUST = Money("0.01")


@dataclass(slots=True)
class Transfer:
    debtor: Hashable
    creditor: Hashable
    amount: Money


def settle(
    balances: Mapping[Hashable, Money],
    tiebreak: Optional[Callable[[Hashable], str]] = None,
) -> List[Transfer]:
    """Pair the largest debtor with the largest creditor until nobody is left owing.

    Positive balances are owed money, negative ones owe money. Ties between equal
    magnitudes go to the smallest ``tiebreak`` key, or to mapping order.
    """
    creditors: list[tuple] = []
    debtors: list[tuple] = []

    for position, (key, balance) in enumerate(balances.items()):
        balance = Money.of(balance).round(2)
        rank = tiebreak(key) if tiebreak else ""
        if balance.value > 0:
            heapq.heappush(creditors, (-balance.value, rank, position, key))
        elif balance.value < 0:
            heapq.heappush(debtors, (balance.value, rank, position, key))

    transfers: list[Transfer] = []

    while creditors and debtors:
        cred_value, cred_rank, cred_pos, cred_key = heapq.heappop(creditors)
        debt_value, debt_rank, debt_pos, debt_key = heapq.heappop(debtors)
        cred_amount = Money(-cred_value)
        debt_amount = Money(-debt_value)

        transfer_amount = min(cred_amount, debt_amount).round(2)
        transfers.append(Transfer(debtor=debt_key, creditor=cred_key, amount=transfer_amount))

        cred_amount = (cred_amount - transfer_amount).round(2)
        debt_amount = (debt_amount - transfer_amount).round(2)

        if cred_amount > DUST:
            heapq.heappush(creditors, (-cred_amount.value, cred_rank, cred_pos, cred_key))
        if debt_amount > DUST:
            heapq.heappush(debtors, (-debt_amount.value, debt_rank, debt_pos, debt_key))

    return transfers


def settle_greedy(graph: DebtGraph) -> None:
    """Replace every edge with the greedy settlement of the current net balances."""
    balances = {index: graph.net_balance(index) for index in graph.node_indices()}
    transfers = settle(balances, tiebreak=lambda index: graph.person(index).identifier())

    graph.clear_edges()
    for transfer in transfers:
        graph.add_edge(transfer.debtor, transfer.creditor, transfer.amount)


def simplify_bidirectional(graph: DebtGraph) -> int:
    """Cancel mutual debts, keeping only the difference on the heavier side.

    Returns the number of pairs that were simplified.
    """
    simplified = 0
    for source, target, _ in graph.snapshot():
        forward = graph.edge_weight(source, target)
        backward = graph.edge_weight(target, source)
        if forward is None or backward is None:
            continue

        if forward > backward:
            graph.set_edge(source, target, forward - backward)
            graph.remove_edge(target, source)
        elif forward < backward:
            graph.set_edge(target, source, backward - forward)
            graph.remove_edge(source, target)
        else:
            graph.remove_edge(source, target)
            graph.remove_edge(target, source)
        simplified += 1
    return simplified


def collapse_transitive(graph: DebtGraph) -> int:
    """Shortcut A -> B -> C chains into A -> C until no chain can be collapsed.

    Every collapse moves ``min(A->B, B->C)`` onto A -> C and takes it off both
    source edges, so the total edge weight strictly drops and the loop ends.
    Returns the number of collapses performed.
    """
    collapsed = 0
    progress = True
    while progress:
        progress = False
        for middle, creditor, _ in graph.snapshot():
            for debitor in graph.incoming(middle):
                if debitor == creditor:
                    continue
                first = graph.edge_weight(debitor, middle)
                second = graph.edge_weight(middle, creditor)
                if second is None:
                    break
                if first is None:
                    continue

                shift = min(first, second)
                if shift.is_zero():
                    continue
                graph.add_edge(debitor, creditor, shift)
                graph.set_edge(debitor, middle, first - shift)
                graph.set_edge(middle, creditor, second - shift)
                collapsed += 1
                progress = True
    return collapsed


def net(graph: DebtGraph) -> None:
    """Alternate bidirectional cancellation and transitive collapse to a fixed point."""
    while True:
        simplify_bidirectional(graph)
        if not collapse_transitive(graph):
            break


_STRATEGIES: Dict[Strategy, Callable[[DebtGraph], object]] = {
    Strategy.BIDIRECTIONAL: simplify_bidirectional,
    Strategy.NETTING: net,
    Strategy.GREEDY: settle_greedy,
}


def optimize(
    graph: DebtGraph,
    strategy: Optional[Strategy | str] = None,
    *,
    strict: Optional[bool] = None,
) -> bool:
    """Reduce the edge set in place and check that balances still hold.

    When the optimized graph breaks the fair-share invariant, strict mode
    raises ``SettlementInvariantError``; otherwise the violation is logged and
    the original edges are put back. Returns whether the optimized edges were
    kept.
    """
    settings = get_settings()
    strategy = Strategy(strategy or settings.strategy)
    if strict is None:
        strict = settings.strict

    log = get_logger(__name__)
    before = graph.snapshot()
    _STRATEGIES[strategy](graph)
    log.info(
        "settlement.optimize",
        strategy=strategy.value,
        edges_before=len(before),
        edges_after=graph.edge_count(),
    )

    try:
        assert_balanced(graph)
    except SettlementInvariantError as exc:
        if strict:
            raise
        log.error("settlement.invariant_violation", strategy=strategy.value, error=str(exc))
        graph.restore(before)
        return False
    return True

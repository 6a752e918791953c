from __future__ import annotations

from dataclasses import dataclass, field

from rachaconta.graph import DebtGraph, Payment
from rachaconta.money import Money
from rachaconta.person import Person


@dataclass(slots=True)
class PersonSummary:
    person: Person
    total_to_pay: Money
    total_to_receive: Money
    payments: list[Payment] = field(default_factory=list)

    @property
    def to_pay_per_head(self) -> Money:
        return self.total_to_pay / self.person.size()


def summarize(graph: DebtGraph) -> list[PersonSummary]:
    summaries: list[PersonSummary] = []
    for index in graph.node_indices():
        person = graph.person(index)
        payments = [
            Payment(debitor=person, creditor=graph.person(creditor), amount=amount)
            for creditor, amount in graph.outgoing(index).items()
        ]
        payments.sort(key=lambda p: p.creditor.identifier())
        summaries.append(
            PersonSummary(
                person=person,
                total_to_pay=graph.total_owed(index),
                total_to_receive=graph.total_to_receive(index),
                payments=payments,
            )
        )
    summaries.sort(key=lambda s: s.person.identifier())
    return summaries


def format_summary(summary: PersonSummary) -> str:
    """Anonymous groups see what each of their members pays, not the pooled total."""
    size = summary.person.size()
    lines = [
        f"{summary.person.identifier()}:",
        f"    total to pay: {summary.to_pay_per_head}",
        f"    total to receive: {summary.total_to_receive}",
    ]
    if summary.payments:
        lines.append("")
    for payment in summary.payments:
        lines.append(f"    pay: {payment.amount / size} -> {payment.creditor.identifier()}")
    return "\n".join(lines)


def format_report(graph: DebtGraph) -> str:
    return "\n\n".join(format_summary(summary) for summary in summarize(graph))


def _quote(label: str) -> str:
    return '"' + label.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(graph: DebtGraph) -> str:
    lines = ["digraph {"]
    for index in graph.node_indices():
        lines.append(f"    {index} [ label = {_quote(graph.person(index).identifier())} ]")
    for debitor, creditor, amount in sorted(graph.edges(), key=lambda edge: edge[:2]):
        lines.append(f"    {debitor} -> {creditor} [ label = {_quote(str(amount))} ]")
    lines.append("}")
    return "\n".join(lines)

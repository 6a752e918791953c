from rachaconta.money import Money
from rachaconta.person import named, unnamed
from rachaconta.services.report import format_report, summarize, to_dot
from rachaconta.services.settlement import optimize
from rachaconta.services.split import build_debt_graph
from rachaconta.services.strategy import Strategy


def _settled(persons, strategy=Strategy.GREEDY):
    graph = build_debt_graph(persons)
    optimize(graph, strategy, strict=True)
    return graph


def test_summaries_are_sorted_by_identifier():
    graph = _settled([named("C", 10), named("B", 20), named("A", 10), unnamed(1)])
    summaries = summarize(graph)

    assert [s.person.identifier() for s in summaries] == ["1 other person", "A", "B", "C"]
    anon = summaries[0]
    assert anon.total_to_pay == Money.of(10)
    assert [p.creditor.identifier() for p in anon.payments] == ["B"]
    assert summaries[2].total_to_receive == Money.of(10)


def test_format_report_dinner():
    graph = _settled([named("A", 10), named("B", 20), named("C", 10), unnamed(1)])
    text = format_report(graph)

    assert "1 other person:\n    total to pay: 10.00\n    total to receive: 0.00\n\n    pay: 10.00 -> B" in text
    assert "B:\n    total to pay: 0.00\n    total to receive: 10.00" in text


def test_anonymous_group_shows_amounts_per_head():
    graph = _settled([named("A", 30), unnamed(2)])
    [anon] = [s for s in summarize(graph) if s.person == unnamed(2)]
    assert anon.total_to_pay == Money.of(20)
    assert anon.to_pay_per_head == Money.of(10)

    text = format_report(graph)
    assert "2 other people:\n    total to pay: 10.00" in text
    assert "    pay: 10.00 -> A" in text


def test_to_dot():
    graph = _settled([named("A", 10), named('Bia "B"', 0)])
    dot = to_dot(graph)

    assert dot.startswith("digraph {\n")
    assert '    0 [ label = "A" ]' in dot
    assert '    1 [ label = "Bia \\"B\\"" ]' in dot
    assert '    1 -> 0 [ label = "5.00" ]' in dot
    assert dot.endswith("}")

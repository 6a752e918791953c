import pytest

from rachaconta.cli import main


def test_cli_report(capsys):
    assert main(["-p", "4", "A=10", "B=20", "C=10"]) == 0
    out = capsys.readouterr().out
    assert "1 other person:" in out
    assert "pay: 10.00 -> B" in out


def test_cli_bidirectional_strategy(capsys):
    assert main(["--strategy", "bidirectional", "-p", "4", "A=10", "B=20", "C=10"]) == 0
    out = capsys.readouterr().out
    assert "A:\n    total to pay: 2.50\n    total to receive: 2.50\n\n    pay: 2.50 -> B" in out


def test_cli_graphviz(capsys):
    assert main(["-g", "A=10", "B=0"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("digraph {")
    assert 'label = "5.00"' in out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["A=10"], "at least two people"),
        (["-p", "1", "A=10", "B=5"], "hint:"),
        (["A=abc", "B=1"], "invalid number"),
        (["A=1e26", "B=0"], "out of range"),
    ],
)
def test_cli_input_errors(capsys, argv, message):
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_cli_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "name, value",
    [("RACHACONTA_STRATEGY", "fastest"), ("RACHACONTA_STRICT", "sometimes")],
)
def test_cli_invalid_settings(capsys, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    assert main(["A=10", "B=0"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: invalid setting")
    assert name.lower() in err.lower()

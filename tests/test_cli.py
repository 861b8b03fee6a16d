import pytest

from matchbook import cli


def test_default_runs_exchange(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    for symbol in ("AAPL", "TSLA", "GOOG"):
        assert f"📘 OrderBook for {symbol}:" in out


def test_management(capsys):
    assert cli.main(["management"]) == 0
    assert "[CANCEL] Order ORD3 marked as canceled." in capsys.readouterr().out


def test_streaming(capsys):
    assert cli.main(["streaming", "--no-delay"]) == 0
    out = capsys.readouterr().out
    assert out.count("[Consumer] Processing") == 10


def test_queue(capsys):
    assert cli.main(["queue", "--no-delay"]) == 0
    out = capsys.readouterr().out
    assert out.count("[Producer] New Order:") == 5
    assert "✅ All orders processed." in out


def test_multi(capsys):
    assert cli.main(["multi", "--no-delay"]) == 0
    out = capsys.readouterr().out
    assert out.count("Pushed ORD") == 1000
    assert out.count("Got ORD") == 1000


def test_unknown_demo_is_rejected():
    with pytest.raises(SystemExit) as info:
        cli.main(["nonsense"])
    assert info.value.code == 2
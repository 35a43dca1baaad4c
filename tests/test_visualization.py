"""Tests for ASCII visualization."""

from tiny_qreg import QRegister, gates, probabilities_ascii, show_register


def test_probabilities_ascii_bell():
    qr = QRegister(2).apply_single(0, gates.H).apply_cnot(0, 1)
    text = show_register(qr)
    lines = text.splitlines()
    assert lines[0] == "Probabilities:"
    assert len(lines) == 4
    assert lines[2].startswith("|00⟩:")
    assert lines[3].startswith("|11⟩:")
    assert "50.0%" in lines[2]
    assert lines[2].count("█") == 20


def test_threshold_hides_small_entries():
    text = probabilities_ascii([0.995, 0.005], 1)
    assert "|0⟩" in text
    assert "|1⟩" not in text
    assert "|1⟩" in probabilities_ascii([0.995, 0.005], 1, threshold=0.0)


def test_show_register_does_not_measure():
    qr = QRegister(1).apply_single(0, gates.H)
    show_register(qr)
    assert qr.probabilities()[1] > 0.49

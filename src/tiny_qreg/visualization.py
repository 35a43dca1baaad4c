"""
ASCII rendering of register contents for terminals.

Bitstrings are printed with qubit n-1 leftmost, so ``|01⟩`` means
qubit 0 is 1.
"""
from typing import Sequence

import numpy as np

from .core import QRegister

BAR_WIDTH = 40


def probabilities_ascii(probs: Sequence[float], num_qubits: int,
                        threshold: float = 0.01) -> str:
    """Display probabilities as an ASCII bar chart."""
    lines = []
    lines.append("Probabilities:")
    lines.append("─" * 50)

    for i, prob in enumerate(np.asarray(probs, dtype=float)):
        if prob < threshold:
            continue

        bitstring = format(i, f'0{num_qubits}b')
        bar = '█' * int(round(prob * BAR_WIDTH))
        lines.append(f"|{bitstring}⟩: {bar:{BAR_WIDTH}s} {prob*100:5.1f}%")

    return '\n'.join(lines)


def show_register(register: QRegister, threshold: float = 0.01) -> str:
    """Show a register's current distribution without touching it."""
    return probabilities_ascii(register.probabilities(), register.num_qubits, threshold)

"""
Two-qubit Grover search for the marked state |11⟩.

With two qubits a single Grover iteration is exact: the oracle
phase-flips |11⟩ and the diffusion step rotates all amplitude onto it,
so measurement returns 3 with probability 1.

Both steps need a controlled-Z. The register only offers CNOT, so CZ is
built as H(target) CNOT H(target). Sandwiching CNOT between X gates
instead only permutes amplitudes, which leaves the uniform superposition
untouched and the search at 25%.

Usage:
    from tiny_qreg.apps import run_grover_2q

    result = run_grover_2q(seed=1)
    print(result.bitstring)  # '11'
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core import QRegister, gates
from ..core.register import UniformSource

MARKED_STATE = 0b11


def format_outcome(outcome: int, num_qubits: int) -> str:
    """Zero-padded bitstring of an outcome, qubit n-1 leftmost."""
    return format(outcome, f'0{num_qubits}b')


def format_ket(outcome: int, num_qubits: int) -> str:
    return f"|{format_outcome(outcome, num_qubits)}⟩"


def controlled_z(register: QRegister, control: int, target: int) -> QRegister:
    """Apply CZ as H(target) CNOT(control, target) H(target)."""
    register.apply_single(target, gates.H)
    register.apply_cnot(control, target)
    register.apply_single(target, gates.H)
    return register


def _hadamard_both(register: QRegister) -> QRegister:
    return register.apply_single(0, gates.H).apply_single(1, gates.H)


def _x_both(register: QRegister) -> QRegister:
    return register.apply_single(0, gates.X).apply_single(1, gates.X)


def oracle_11(register: QRegister) -> QRegister:
    """Phase-flip |11⟩."""
    return controlled_z(register, 0, 1)


def diffusion(register: QRegister) -> QRegister:
    """Inversion about the mean: H⊗2 X⊗2 CZ X⊗2 H⊗2."""
    _hadamard_both(register)
    _x_both(register)
    controlled_z(register, 0, 1)
    _x_both(register)
    _hadamard_both(register)
    return register


def prepare_grover_2q(
    seed: Optional[int] = None,
    rng: Optional[UniformSource] = None,
) -> QRegister:
    """Build the unmeasured two-qubit Grover state on a fresh register."""
    qr = QRegister(2, seed=seed, rng=rng)
    _hadamard_both(qr)
    oracle_11(qr)
    diffusion(qr)
    return qr


@dataclass
class GroverResult:
    """Outcome of one Grover run plus the distribution it was drawn from."""
    outcome: int
    probabilities: np.ndarray
    num_qubits: int = 2

    @property
    def bitstring(self) -> str:
        return format_outcome(self.outcome, self.num_qubits)

    @property
    def ket(self) -> str:
        return format_ket(self.outcome, self.num_qubits)

    @property
    def found_marked(self) -> bool:
        return self.outcome == MARKED_STATE


def run_grover_2q(
    seed: Optional[int] = None,
    rng: Optional[UniformSource] = None,
) -> GroverResult:
    """Prepare, snapshot probabilities, then measure."""
    qr = prepare_grover_2q(seed=seed, rng=rng)
    probs = qr.probabilities()
    outcome = qr.measure()
    return GroverResult(outcome=outcome, probabilities=probs, num_qubits=qr.num_qubits)

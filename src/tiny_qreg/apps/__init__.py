"""
Small programs built on the register.

- Grover: two-qubit search for |11⟩
- QRNG: Quantum Random Number Generator
"""
from .grover import (
    GroverResult,
    controlled_z,
    diffusion,
    format_ket,
    format_outcome,
    oracle_11,
    prepare_grover_2q,
    run_grover_2q,
)
from .qrng import QRNG, random_bits, random_bytes

__all__ = [
    # Grover
    'GroverResult', 'controlled_z', 'diffusion', 'oracle_11',
    'prepare_grover_2q', 'run_grover_2q', 'format_outcome', 'format_ket',
    # QRNG
    'QRNG', 'random_bits', 'random_bytes',
]

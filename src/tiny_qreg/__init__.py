"""
tiny-qreg: a minimal quantum state-vector register.

Features:
- Dense complex128 state for 1 to 8 qubits
- Any single-qubit unitary plus CNOT, applied in place
- Full-register measurement with collapse and an injectable random source
- Demos: two-qubit Grover search, quantum random numbers

Quick Start:
    >>> from tiny_qreg import QRegister, gates
    >>> qr = QRegister(2, seed=42)
    >>> qr.apply_single(0, gates.H).apply_cnot(0, 1)
    >>> qr.probabilities()   # [0.5, 0, 0, 0.5]
    >>> qr.measure()         # 0 or 3
"""
__version__ = "1.0.0"

# Core components
from .core import QRegister, InvalidArgument, MAX_QUBITS, gates
from .core.gates import H, X

# Visualization
from .visualization import probabilities_ascii, show_register

# Make apps accessible
from . import apps

__all__ = [
    # Core
    'QRegister',
    'InvalidArgument',
    'MAX_QUBITS',
    'gates',
    'H',
    'X',
    # Visualization
    'probabilities_ascii',
    'show_register',
    # Submodules
    'apps',
]

"""
Single-qubit gates as numpy arrays.

All gates are 2x2 unitary matrices in row-major order, so ``M[0, 1]``
couples the |1⟩ amplitude into the new |0⟩ amplitude. The two-qubit
controlled-NOT is not a matrix here: the register applies it directly
as a permutation of amplitudes.
"""
import numpy as np
from typing import Sequence, Union

from .errors import InvalidArgument


# =============================================================================
# FIXED GATES (2x2 matrices)
# =============================================================================

# Pauli gates
I = np.array([[1, 0], [0, 1]], dtype=np.complex128)
X = np.array([[0, 1], [1, 0]], dtype=np.complex128)
Y = np.array([[0, -1j], [1j, 0]], dtype=np.complex128)
Z = np.array([[1, 0], [0, -1]], dtype=np.complex128)

# Hadamard
H = np.array([[1, 1], [1, -1]], dtype=np.complex128) / np.sqrt(2)

# Phase gates
S = np.array([[1, 0], [0, 1j]], dtype=np.complex128)
S_DAG = np.array([[1, 0], [0, -1j]], dtype=np.complex128)
T = np.array([[1, 0], [0, np.exp(1j * np.pi / 4)]], dtype=np.complex128)
T_DAG = np.array([[1, 0], [0, np.exp(-1j * np.pi / 4)]], dtype=np.complex128)

# √X
SX = np.array([[1+1j, 1-1j], [1-1j, 1+1j]], dtype=np.complex128) / 2


# =============================================================================
# ROTATION GATES (parametric)
# =============================================================================

def Rx(theta: float) -> np.ndarray:
    """Rotation around X-axis: Rx(θ) = exp(-iθX/2)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c, -1j * s], [-1j * s, c]], dtype=np.complex128)


def Ry(theta: float) -> np.ndarray:
    """Rotation around Y-axis: Ry(θ) = exp(-iθY/2)"""
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([[c, -s], [s, c]], dtype=np.complex128)


def Rz(theta: float) -> np.ndarray:
    """Rotation around Z-axis: Rz(θ) = exp(-iθZ/2)"""
    return np.array([
        [np.exp(-1j * theta / 2), 0],
        [0, np.exp(1j * theta / 2)]
    ], dtype=np.complex128)


def P(phi: float) -> np.ndarray:
    """Phase gate: P(φ)|1⟩ = e^(iφ)|1⟩"""
    return np.array([[1, 0], [0, np.exp(1j * phi)]], dtype=np.complex128)


def U3(theta: float, phi: float, lam: float) -> np.ndarray:
    """
    General single-qubit unitary with 3 Euler angles.
    U3(θ,φ,λ) = Rz(φ)Ry(θ)Rz(λ)
    """
    c, s = np.cos(theta / 2), np.sin(theta / 2)
    return np.array([
        [c, -np.exp(1j * lam) * s],
        [np.exp(1j * phi) * s, np.exp(1j * (phi + lam)) * c]
    ], dtype=np.complex128)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

GateLike = Union[np.ndarray, Sequence[complex], Sequence[Sequence[complex]]]


def as_matrix(gate: GateLike) -> np.ndarray:
    """
    Coerce a gate to a (2, 2) complex128 array.

    Accepts a 2x2 array-like or a flat row-major ``[a, b, c, d]``
    meaning ``[[a, b], [c, d]]``.
    """
    try:
        matrix = np.asarray(gate, dtype=np.complex128)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Gate is not a numeric matrix: {exc}") from exc

    if matrix.shape == (4,):
        matrix = matrix.reshape(2, 2)
    if matrix.shape != (2, 2):
        raise InvalidArgument(
            f"Single-qubit gate must be 2x2 or flat length 4, got shape {matrix.shape}"
        )
    return matrix


def is_unitary(gate: GateLike, tol: float = 1e-10) -> bool:
    """Check if a matrix is unitary: U†U = I"""
    gate = np.asarray(gate, dtype=np.complex128)
    if gate.ndim != 2 or gate.shape[0] != gate.shape[1]:
        return False
    n = gate.shape[0]
    product = gate.conj().T @ gate
    return np.allclose(product, np.eye(n), atol=tol)


def gate_to_matrix(name: str, *params) -> np.ndarray:
    """Get gate matrix by name with optional parameters."""
    gates = {
        'I': I, 'X': X, 'Y': Y, 'Z': Z,
        'H': H, 'S': S, 'SDG': S_DAG, 'T': T, 'TDG': T_DAG, 'SX': SX,
    }

    param_gates = {
        'RX': Rx, 'RY': Ry, 'RZ': Rz, 'P': P, 'U3': U3,
    }

    name = name.upper()
    if name in gates:
        if params:
            raise InvalidArgument(f"Gate '{name}' takes no parameters, got {len(params)}")
        return gates[name]
    elif name in param_gates:
        try:
            return param_gates[name](*params)
        except TypeError as exc:
            raise InvalidArgument(f"Bad parameters for gate '{name}': {exc}") from exc
    else:
        raise InvalidArgument(f"Unknown gate: {name}")

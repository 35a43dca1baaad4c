"""
Dense state-vector register for a small, fixed number of qubits.

The joint state of n qubits is one contiguous complex128 array of 2^n
amplitudes. Bit b of a basis index is the value of qubit b, so qubit 0
is the least significant bit everywhere in this package.

Memory usage: 2^n * 16 bytes, capped at n = 8 (4 KiB).
"""
import logging
from typing import Optional, Protocol

import numpy as np

from .errors import InvalidArgument
from .gates import GateLike, as_matrix, is_unitary

logger = logging.getLogger(__name__)

MIN_QUBITS = 1
MAX_QUBITS = 8

# Tolerance used by the opt-in unitarity check.
NORM_TOL = 1e-9


class UniformSource(Protocol):
    """Anything with ``random()`` returning a float in [0, 1)."""

    def random(self) -> float:
        ...


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class QRegister:
    """
    Quantum register holding the full state vector.

    Parameters
    ----------
    num_qubits : int
        Number of qubits, 1 to 8 inclusive.
    seed : int | None
        Seed for the register's own random source. Ignored when ``rng``
        is given.
    rng : UniformSource | None
        Random source used by :meth:`measure`. Defaults to
        ``numpy.random.default_rng(seed)``.
    check_unitary : bool
        Reject non-unitary matrices in :meth:`apply_single`. Off by
        default; unitarity is the caller's responsibility.

    Example
    -------
    >>> from tiny_qreg import QRegister, gates
    >>> qr = QRegister(2, seed=7)
    >>> qr.apply_single(0, gates.H).apply_cnot(0, 1)
    QRegister(qubits=2, dim=4)
    >>> qr.probabilities()
    array([0.5, 0. , 0. , 0.5])
    """

    def __init__(
        self,
        num_qubits: int,
        seed: Optional[int] = None,
        rng: Optional[UniformSource] = None,
        check_unitary: bool = False,
    ) -> None:
        if not _is_index(num_qubits) or not MIN_QUBITS <= num_qubits <= MAX_QUBITS:
            raise InvalidArgument(
                f"num_qubits must be an integer in [{MIN_QUBITS}, {MAX_QUBITS}], got {num_qubits!r}"
            )
        self._num_qubits = int(num_qubits)
        self._dim = 1 << self._num_qubits
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.check_unitary = check_unitary
        self._data = np.zeros(self._dim, dtype=np.complex128)
        self._data[0] = 1.0  # |00...0⟩
        logger.debug("Created %d-qubit register (%d amplitudes)", self._num_qubits, self._dim)

    @property
    def num_qubits(self) -> int:
        return self._num_qubits

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def statevector(self) -> np.ndarray:
        """Return a copy of the amplitude vector."""
        return self._data.copy()

    def reset(self) -> None:
        """Reset to |00...0⟩ state."""
        self._data.fill(0)
        self._data[0] = 1.0

    def _check_qubit(self, qubit, role: str = "qubit") -> int:
        if not _is_index(qubit) or not 0 <= qubit < self._num_qubits:
            raise InvalidArgument(
                f"{role} index must be in [0, {self._num_qubits}), got {qubit!r}"
            )
        return int(qubit)

    def apply_single(self, target: int, matrix: GateLike) -> "QRegister":
        """
        Apply a 2x2 gate to qubit ``target``.

        Every basis index with the target bit clear is paired with the
        index that has it set; each pair is updated once from its
        pre-update amplitudes. O(2^n) per gate.
        """
        target = self._check_qubit(target, "target")
        m = as_matrix(matrix)
        if self.check_unitary and not is_unitary(m, tol=NORM_TOL):
            raise InvalidArgument(f"Gate is not unitary:\n{m}")

        bit = 1 << target
        indices = np.arange(self._dim)
        lo = indices[(indices & bit) == 0]
        hi = lo | bit

        # Fancy indexing copies, so both reads see the old amplitudes.
        a0 = self._data[lo]
        a1 = self._data[hi]
        self._data[lo] = m[0, 0] * a0 + m[0, 1] * a1
        self._data[hi] = m[1, 0] * a0 + m[1, 1] * a1
        return self

    def apply_cnot(self, control: int, target: int) -> "QRegister":
        """Flip ``target`` on every basis state where ``control`` is 1."""
        control = self._check_qubit(control, "control")
        target = self._check_qubit(target, "target")
        if control == target:
            raise InvalidArgument(f"control and target must differ, both are {control}")

        c_bit = 1 << control
        t_bit = 1 << target
        indices = np.arange(self._dim)
        src = indices[((indices & c_bit) != 0) & ((indices & t_bit) == 0)]
        dst = src | t_bit

        swapped = self._data[src]
        self._data[src] = self._data[dst]
        self._data[dst] = swapped
        return self

    def probabilities(self) -> np.ndarray:
        """Return measurement probabilities for all basis states."""
        return self._data.real ** 2 + self._data.imag ** 2

    def measure(self, rng: Optional[UniformSource] = None) -> int:
        """
        Measure every qubit, collapse the state and return the outcome.

        Draws a single uniform ``r`` and walks the basis states in index
        order subtracting each probability; the first index where
        ``r <= 0`` is the outcome. If rounding leaves ``r`` positive after
        the last state, the last index is returned.

        Parameters
        ----------
        rng : UniformSource, optional
            Source for this call only. Defaults to the register's own.

        Returns
        -------
        int
            Basis index in [0, 2^n). Bit b is the result for qubit b.
        """
        source = rng if rng is not None else self._rng
        r = float(source.random())

        outcome = self._dim - 1
        for i, p in enumerate(self.probabilities().tolist()):
            r -= p
            if r <= 0:
                outcome = i
                break
        else:
            logger.debug(
                "Probability mass short of 1 by %.3g, falling back to |%d⟩", r, outcome
            )

        self._data.fill(0)
        self._data[outcome] = 1.0
        logger.debug("Measured %d-qubit register: %d", self._num_qubits, outcome)
        return outcome

    def __repr__(self) -> str:
        return f"QRegister(qubits={self._num_qubits}, dim={self._dim})"

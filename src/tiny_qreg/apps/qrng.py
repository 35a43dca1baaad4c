"""
Quantum Random Number Generator (QRNG)

Each qubit put in |+⟩ by a Hadamard yields one unbiased bit when the
register is measured. A batch is one register of ``num_qubits`` qubits,
so one measurement produces ``num_qubits`` bits.

Usage:
    from tiny_qreg.apps import QRNG

    qrng = QRNG(seed=1234)

    bits = qrng.random_bits(128)  # 128 random bits
    n = qrng.random_int(0, 100)   # Random int in [0, 100)
    key = qrng.random_bytes(32)   # 256 bits
"""
import logging
from typing import List, Optional

from ..core import QRegister, InvalidArgument, gates
from ..core.register import MAX_QUBITS, UniformSource

logger = logging.getLogger(__name__)


class QRNG:
    """
    Quantum Random Number Generator.

    Attributes:
        num_qubits: Qubits per batch (1 to 8, default: 8)

    Example:
        >>> qrng = QRNG(seed=7)
        >>> len(qrng.random_bytes(16))
        16
    """

    def __init__(
        self,
        num_qubits: int = MAX_QUBITS,
        seed: Optional[int] = None,
        rng: Optional[UniformSource] = None,
    ):
        """
        Initialize QRNG.

        Args:
            num_qubits: Qubits per batch (more = fewer measurements)
            seed: Seed for the measurement draws (reproducible output)
            rng: Explicit uniform source; overrides ``seed``
        """
        # Validates num_qubits up front and owns the random source
        # shared by every batch.
        self._register = QRegister(num_qubits, seed=seed, rng=rng)
        self.num_qubits = self._register.num_qubits
        self._buffer: List[int] = []

    def _generate_batch(self) -> List[int]:
        """Generate a batch of random bits with one measurement."""
        qr = self._register
        qr.reset()
        for q in range(self.num_qubits):
            qr.apply_single(q, gates.H)
        outcome = qr.measure()
        logger.debug("QRNG batch outcome %d", outcome)
        return [(outcome >> q) & 1 for q in range(self.num_qubits)]

    def _ensure_buffer(self, n: int) -> None:
        while len(self._buffer) < n:
            self._buffer.extend(self._generate_batch())

    def _consume_bits(self, n: int) -> List[int]:
        if n < 0:
            raise InvalidArgument(f"Bit count must be non-negative, got {n}")
        self._ensure_buffer(n)
        bits = self._buffer[:n]
        self._buffer = self._buffer[n:]
        return bits

    def random_bit(self) -> int:
        """Generate a single random bit (0 or 1)."""
        return self._consume_bits(1)[0]

    def random_bits(self, n: int) -> List[int]:
        """Generate n random bits."""
        return self._consume_bits(n)

    def random_bitstring(self, n: int) -> str:
        return ''.join(str(b) for b in self.random_bits(n))

    def random_bytes(self, n: int) -> bytes:
        """Generate n random bytes, most significant bit first."""
        if n < 0:
            raise InvalidArgument(f"Byte count must be non-negative, got {n}")
        bits = self.random_bits(n * 8)
        result = bytearray()
        for i in range(0, len(bits), 8):
            byte = 0
            for j in range(8):
                byte = (byte << 1) | bits[i + j]
            result.append(byte)
        return bytes(result)

    def random_int(self, low: int, high: int) -> int:
        """
        Generate random integer in range [low, high).

        Uses rejection sampling for uniform distribution.
        """
        if low >= high:
            raise InvalidArgument(f"low ({low}) must be less than high ({high})")

        range_size = high - low
        bits_needed = (range_size - 1).bit_length()

        while True:
            value = 0
            for b in self.random_bits(bits_needed):
                value = (value << 1) | b
            if value < range_size:
                return low + value


def random_bits(n: int, seed: Optional[int] = None) -> List[int]:
    """Convenience function: generate n random bits."""
    return QRNG(seed=seed).random_bits(n)


def random_bytes(n: int, seed: Optional[int] = None) -> bytes:
    """Convenience function: generate n random bytes."""
    return QRNG(seed=seed).random_bytes(n)

"""Core quantum register components."""
from .errors import InvalidArgument
from .register import QRegister, MAX_QUBITS, MIN_QUBITS
from . import gates

__all__ = [
    'InvalidArgument',
    'QRegister',
    'MAX_QUBITS',
    'MIN_QUBITS',
    'gates',
]

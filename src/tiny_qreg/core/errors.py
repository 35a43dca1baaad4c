"""Error types raised by the register and its callers."""


class InvalidArgument(ValueError):
    """
    A caller passed an argument the register cannot act on.

    Raised for qubit counts outside the supported range, qubit indices
    outside the register, a CNOT whose control equals its target, and
    malformed gate matrices. Subclasses ValueError so existing
    ``except ValueError`` handlers keep working.
    """

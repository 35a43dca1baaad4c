"""Example: two-qubit Grover search on tiny-qreg."""
from tiny_qreg import QRegister, gates, show_register
from tiny_qreg.apps import controlled_z, format_ket

print("=" * 50)
print("tiny-qreg: Grover Search for |11⟩")
print("=" * 50)

qr = QRegister(2, seed=2024)

# Uniform superposition
qr.apply_single(0, gates.H).apply_single(1, gates.H)

# Oracle: phase-flip |11⟩
controlled_z(qr, 0, 1)

# Diffusion
qr.apply_single(0, gates.H).apply_single(1, gates.H)
qr.apply_single(0, gates.X).apply_single(1, gates.X)
controlled_z(qr, 0, 1)
qr.apply_single(0, gates.X).apply_single(1, gates.X)
qr.apply_single(0, gates.H).apply_single(1, gates.H)

print()
print(show_register(qr))

outcome = qr.measure()
print(f"\nMeasurement: {format_ket(outcome, qr.num_qubits)} (expect |11⟩)")

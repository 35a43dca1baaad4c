"""
Command-line interface for tiny-qreg.

Usage:
    tiny-qreg grover --show
    tiny-qreg qrng --bytes 32 --hex
    tiny-qreg qrng --int 1 7
    tiny-qreg info
"""
import argparse
import logging
import sys

from ..core import InvalidArgument

logger = logging.getLogger(__name__)


def cmd_grover(args):
    """Run the two-qubit Grover search."""
    from ..apps import run_grover_2q
    from ..visualization import probabilities_ascii

    result = run_grover_2q(seed=args.seed)
    if args.show:
        print(probabilities_ascii(result.probabilities, result.num_qubits))
        print()
    print(f"Measurement: {result.ket} (expect |11⟩)")


def cmd_qrng(args):
    """Generate quantum random numbers."""
    from ..apps import QRNG

    qrng = QRNG(num_qubits=args.qubits, seed=args.seed)

    if args.bits is not None:
        print(qrng.random_bitstring(args.bits))
    elif args.bytes is not None:
        data = qrng.random_bytes(args.bytes)
        if args.hex:
            print(data.hex())
        else:
            sys.stdout.buffer.write(data)
    elif args.int:
        low, high = args.int
        print(qrng.random_int(low, high))
    else:
        print(qrng.random_bytes(32).hex())


def cmd_info(args):
    """Show tiny-qreg information."""
    from .. import __version__
    from ..core import MAX_QUBITS

    print(f"""
tiny-qreg v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

A dense state-vector register for up to {MAX_QUBITS} qubits.

Operations:
  • apply_single(target, matrix)  - any 2x2 unitary
  • apply_cnot(control, target)   - controlled-NOT
  • probabilities()               - |amplitude|² per basis state
  • measure()                     - full-register collapse

Usage:
  tiny-qreg grover --show
  tiny-qreg qrng --bytes 16 --hex
""")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tiny-qreg',
        description='A minimal quantum register simulator'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Grover command
    grover_parser = subparsers.add_parser('grover', help='Two-qubit Grover search')
    grover_parser.add_argument('--seed', type=int, help='Seed for measurement')
    grover_parser.add_argument('--show', action='store_true',
                               help='Print the distribution before measuring')
    grover_parser.set_defaults(func=cmd_grover)

    # QRNG command
    qrng_parser = subparsers.add_parser('qrng', help='Quantum random numbers')
    group = qrng_parser.add_mutually_exclusive_group()
    group.add_argument('--bits', type=int, help='Generate N random bits')
    group.add_argument('--bytes', type=int, help='Generate N random bytes')
    group.add_argument('--int', type=int, nargs=2, metavar=('LOW', 'HIGH'),
                       help='Random int in [LOW, HIGH)')
    qrng_parser.add_argument('--hex', action='store_true', help='Output bytes as hex')
    qrng_parser.add_argument('--qubits', type=int, default=8, help='Qubits per batch')
    qrng_parser.add_argument('--seed', type=int, help='Seed for measurement')
    qrng_parser.set_defaults(func=cmd_qrng)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-qreg info')
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except InvalidArgument as exc:
        logger.debug("Command %s rejected", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())

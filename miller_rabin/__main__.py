import argparse
import logging
from collections.abc import Sequence

from .primes import INT64_MAX, INT64_MIN, is_prime


def _int64(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        msg = f'invalid integer: {value!r}'
        raise argparse.ArgumentTypeError(msg) from None

    if not INT64_MIN <= n <= INT64_MAX:
        msg = f'{n} does not fit into 64 bits'
        raise argparse.ArgumentTypeError(msg)
    return n


def _bases(value: str) -> list[int]:
    try:
        bases = [int(a) for a in value.split(',')]
    except ValueError:
        msg = f'invalid base list: {value!r}'
        raise argparse.ArgumentTypeError(msg) from None

    if any(a < 2 for a in bases):  # noqa: PLR2004
        msg = 'every base should be at least 2'
        raise argparse.ArgumentTypeError(msg)
    return bases


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='miller-rabin', description='Deterministic Miller-Rabin test for 64-bit integers.')
    parser.add_argument('n', nargs='?', help='number to test, read from stdin when omitted')
    parser.add_argument('--bases', type=_bases, help='comma separated bases, overriding the built-in table')
    parser.add_argument('-v', '--verbose', action='store_true', help='log which base decided the verdict')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    raw = args.n
    if raw is None:
        try:
            raw = input('Enter a number: ')
        except EOFError:
            parser.error('no number given')
    try:
        n = _int64(raw.strip())
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    verdict = 'PRIME' if is_prime(n, args.bases) else 'COMPOSITE'
    print(f'{n} is {verdict}')  # noqa: T201
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

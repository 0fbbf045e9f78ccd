import argparse
import logging
import sys
from typing import List, Optional

from . import utils
from .algorithms import DEFAULT_ALGORITHM, parse_algorithm
from .exceptions import EmptySecret, TOTPError
from .totp import DEFAULT_DIGITS, DEFAULT_INTERVAL, TOTP

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="totpgen", description="Generate a TOTP code (RFC 6238).")
    parser.add_argument("-s", "--secret", default="", help="secret key for OTP")
    parser.add_argument(
        "-a", "--alg", default=str(DEFAULT_ALGORITHM), help="hashing algorithm (SHA1, SHA256, SHA512)"
    )
    parser.add_argument(
        "-d", "--digits", type=int, default=DEFAULT_DIGITS, help="number of digits for the otp code (ex. 6, 8)"
    )
    parser.add_argument("-t", "--step", type=int, default=DEFAULT_INTERVAL, help="time step in sec (ex. 30, 60)")
    parser.add_argument("--time", type=int, default=None, help="Unix timestamp to generate the code for")
    parser.add_argument("-q", "--quiet", action="store_true", help="print only the code")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if not args.secret:
            raise EmptySecret()
        algorithm = parse_algorithm(args.alg)
        totp = TOTP(args.secret, digits=args.digits, algorithm=algorithm, interval=args.step)
        for_time = utils.unix_time(args.time)
        code = totp.at(for_time)
    except TOTPError as e:
        logger.debug("rejected input: %r", e)
        print("Error: {}".format(e), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    if args.quiet:
        print(code)
    else:
        print(
            "TOTP generated (Alg: {}, Digits: {}, Step: {}): {}".format(algorithm, args.digits, args.step, code)
        )
        logger.debug("code valid for another %ds", totp.remaining(for_time))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

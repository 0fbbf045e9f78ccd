from typing import Optional, Union

from .algorithms import HashingAlgorithm as HashingAlgorithm
from .algorithms import parse_algorithm as parse_algorithm
from .exceptions import EmptySecret as EmptySecret
from .exceptions import InvalidCounter as InvalidCounter
from .exceptions import InvalidDigits as InvalidDigits
from .exceptions import InvalidTimeStep as InvalidTimeStep
from .exceptions import TOTPError as TOTPError
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .utils import TimeInstant as TimeInstant


def generate(
    secret: Union[str, bytes],
    algorithm: HashingAlgorithm,
    digits: int,
    time_step: int,
    now: Optional[TimeInstant] = None,
) -> str:
    """
    Computes the RFC 6238 code for a single time instant.

    The secret is used as the raw HMAC key. An empty secret is not rejected
    here; input layers are expected to refuse it before calling.

    :param secret: shared secret, text or bytes
    :param algorithm: HMAC hash function
    :param digits: length of the code, greater than 0
    :param time_step: window length in seconds, greater than 0
    :param now: Unix timestamp or datetime; the system clock when None
    :returns: decimal code of exactly ``digits`` characters
    :raises InvalidTimeStep: if time_step <= 0
    :raises InvalidDigits: if digits <= 0
    :raises UnsupportedAlgorithm: if algorithm is not a HashingAlgorithm
    """
    return TOTP(secret, digits=digits, algorithm=algorithm, interval=time_step).at(now)

import hmac
import logging
from typing import Union

from . import utils
from .algorithms import DEFAULT_ALGORITHM, HashingAlgorithm
from .exceptions import InvalidCounter, InvalidDigits, UnsupportedAlgorithm

logger = logging.getLogger(__name__)


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = 6,
        algorithm: HashingAlgorithm = DEFAULT_ALGORITHM,
    ) -> None:
        """
        :param s: shared secret, used as the raw HMAC key
        :param digits: number of decimal digits in the OTP
        :param algorithm: hash function used in the HMAC
        """
        if digits <= 0:
            raise InvalidDigits(digits)
        if not isinstance(algorithm, HashingAlgorithm):
            raise UnsupportedAlgorithm(algorithm)
        self.secret = s
        self.digits = digits
        self.algorithm = algorithm

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually the number of time steps elapsed since the Unix epoch.
        """
        # Implements RFC 4226 section 5.3
        logger.debug("computing HMAC-%s over counter %d", self.algorithm, input)
        hasher = hmac.new(self.byte_secret(), self.int_to_bytestring(input), self.algorithm.digest)
        hmac_hash = bytearray(hasher.digest())
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        # digits beyond 9 exceed the 31-bit range; the code is still padded
        return str(code % 10**self.digits).zfill(self.digits)

    def byte_secret(self) -> bytes:
        return utils.secret_bytes(self.secret)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret

        :raises InvalidCounter: if i is negative or does not fit in padding bytes
        """
        if not 0 <= i < 1 << (8 * padding):
            raise InvalidCounter(i)
        result = bytearray()
        while i != 0:
            result.append(i & 0xFF)
            i >>= 8
        return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))

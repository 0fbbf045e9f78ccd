import logging
from typing import Optional, Union

from . import utils
from .algorithms import DEFAULT_ALGORITHM, HashingAlgorithm
from .exceptions import InvalidTimeStep
from .otp import OTP

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
DEFAULT_INTERVAL = 30


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = DEFAULT_DIGITS,
        algorithm: HashingAlgorithm = DEFAULT_ALGORITHM,
        interval: int = DEFAULT_INTERVAL,
    ) -> None:
        """
        :param s: shared secret, used as the raw HMAC key
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash function to use in the HMAC (RFC 6238 default is SHA1)
        :param interval: the time step in seconds. The default value is 30.
        """
        if interval <= 0:
            raise InvalidTimeStep(interval)
        self.interval = interval
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, for_time: Optional[utils.TimeInstant] = None) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for, the current
            system time when omitted
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at()

    def timecode(self, for_time: Optional[utils.TimeInstant] = None) -> int:
        """
        Number of whole intervals elapsed since the Unix epoch at for_time.
        """
        counter = utils.unix_time(for_time) // self.interval
        logger.debug("time step %ds gives counter %d", self.interval, counter)
        return counter

    def remaining(self, for_time: Optional[utils.TimeInstant] = None) -> int:
        """
        Seconds until the code for for_time stops being current.
        """
        return self.interval - utils.unix_time(for_time) % self.interval

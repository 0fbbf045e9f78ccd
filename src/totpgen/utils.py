import calendar
import datetime
import time
from typing import Optional, Union

TimeInstant = Union[int, float, datetime.datetime]


def secret_bytes(secret: Union[str, bytes]) -> bytes:
    """
    Returns the secret as the raw HMAC key.

    Text secrets are used as-is (UTF-8 encoded), not base32 decoded, so any
    text is a legal key.
    """
    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    return secret.encode("utf-8")


def unix_time(for_time: Optional[TimeInstant] = None) -> int:
    """
    Converts a time instant to whole seconds since the Unix epoch.

    :param for_time: seconds since the epoch, a datetime, or None for the
        current system time. Naive datetimes are taken as local time.
    :returns: integer seconds since the epoch (UTC)
    """
    if for_time is None:
        for_time = time.time()
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            return calendar.timegm(for_time.utctimetuple())
        return int(time.mktime(for_time.timetuple()))
    return int(for_time)

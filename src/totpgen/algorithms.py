import enum
import hashlib
from typing import Any, Callable

from .exceptions import UnsupportedAlgorithm


class HashingAlgorithm(enum.Enum):
    """
    Hash functions usable in the HMAC step of RFC 6238.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest(self) -> Callable[..., Any]:
        return _DIGESTS[self]

    @property
    def digest_size(self) -> int:
        return self.digest().digest_size

    def __str__(self) -> str:
        return self.value


_DIGESTS = {
    HashingAlgorithm.SHA1: hashlib.sha1,
    HashingAlgorithm.SHA256: hashlib.sha256,
    HashingAlgorithm.SHA512: hashlib.sha512,
}

DEFAULT_ALGORITHM = HashingAlgorithm.SHA1


def parse_algorithm(name: str) -> HashingAlgorithm:
    """
    Maps a user supplied algorithm name to a HashingAlgorithm.

    Matching is case-insensitive and accepts the dashed spelling used by
    some tools ("SHA-256").

    :param name: algorithm name, e.g. "SHA1", "sha256" or "SHA-512"
    :returns: the matching HashingAlgorithm
    :raises UnsupportedAlgorithm: for any other name
    """
    normalized = name.strip().upper().replace("-", "")
    try:
        return HashingAlgorithm[normalized]
    except KeyError:
        raise UnsupportedAlgorithm(name) from None

"""
Algorithm model for hashcheck, describing the supported digest algorithms and the
set of algorithms a digest session computes.
"""
import logging
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Dict, Iterable, Iterator, List, Union

logger = logging.getLogger(__name__)


class Algorithm(IntFlag):
    """Bitmask identifiers for the digest algorithms."""
    CRC32 = 0x01
    MD4 = 0x02
    MD5 = 0x04
    SHA1 = 0x08
    SHA256 = 0x10
    SHA512 = 0x20
    ED2K = 0x40


class CaseMode(str, Enum):
    """Letter case used when rendering digests as hex text."""
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


# Mask groups by digest width
ALL = 0x3F
ALL32 = Algorithm.CRC32
ALL128 = Algorithm.MD4 | Algorithm.MD5
ALL160 = Algorithm.SHA1
ALL256 = Algorithm.SHA256
ALL512 = Algorithm.SHA512

# Names accepted by AlgorithmSet.from_names for whole groups
GROUP_MASKS: Dict[str, int] = {
    "all": ALL,
    "all32": int(ALL32),
    "all128": int(ALL128),
    "all160": int(ALL160),
    "all256": int(ALL256),
    "all512": int(ALL512),
}

# Every bit a session knows how to compute, including the list hash
SUPPORTED_MASK = ALL | Algorithm.ED2K

DIGEST_SIZES: Dict[Algorithm, int] = {
    Algorithm.CRC32: 4,
    Algorithm.MD4: 16,
    Algorithm.MD5: 16,
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
    Algorithm.ED2K: 16,
}

# Hex digits plus one terminator slot, as laid out by fixed-width result buffers
HEX_STRING_CAPACITIES: Dict[Algorithm, int] = {
    algorithm: size * 2 + 1 for algorithm, size in DIGEST_SIZES.items()
}

# Canonical iteration order (ascending bit value)
ALGORITHM_ORDER: List[Algorithm] = sorted(DIGEST_SIZES, key=int)

_NAME_ALIASES = {
    "crc": Algorithm.CRC32,
    "crc32": Algorithm.CRC32,
    "md4": Algorithm.MD4,
    "md5": Algorithm.MD5,
    "sha1": Algorithm.SHA1,
    "sha-1": Algorithm.SHA1,
    "sha256": Algorithm.SHA256,
    "sha-256": Algorithm.SHA256,
    "sha512": Algorithm.SHA512,
    "sha-512": Algorithm.SHA512,
    "ed2k": Algorithm.ED2K,
}


def parse_algorithm(name: str) -> Algorithm:
    """
    Resolve a user-supplied algorithm name (case-insensitive).

    Args:
        name (str): Algorithm name such as "md5", "SHA-256" or "ed2k".

    Returns:
        Algorithm: The matching algorithm.

    Raises:
        ValueError: If the name is not a known algorithm.
    """
    key = name.strip().lower()
    if key not in _NAME_ALIASES:
        raise ValueError(f"Unsupported hash algorithm: {name}")
    return _NAME_ALIASES[key]


def digest_size(algorithm: Algorithm) -> int:
    """Return the raw digest length in bytes for a single algorithm."""
    return DIGEST_SIZES[Algorithm(algorithm)]


@dataclass(frozen=True)
class AlgorithmSet:
    """
    Immutable set of algorithms selected for a digest session.

    Attributes:
        mask (int): Bitmask of selected Algorithm flags. Must be non-empty and
            contain only supported bits.
    """
    mask: int

    def __post_init__(self):
        object.__setattr__(self, "mask", int(self.mask))
        if self.mask <= 0:
            raise ValueError("At least one algorithm must be selected")
        if self.mask & ~int(SUPPORTED_MASK):
            raise ValueError(f"Unsupported algorithm bits in mask: {self.mask:#x}")

    @classmethod
    def all_algorithms(cls) -> "AlgorithmSet":
        """The six primitive algorithms (the list hash is opt-in)."""
        return cls(ALL)

    @classmethod
    def of(cls, *algorithms: Algorithm) -> "AlgorithmSet":
        mask = 0
        for algorithm in algorithms:
            mask |= int(algorithm)
        return cls(mask)

    @classmethod
    def from_names(cls, names: Union[str, Iterable[str]]) -> "AlgorithmSet":
        """
        Build a set from algorithm names.

        Accepts either an iterable of names or a single comma separated string.
        The name "all" selects the six primitive algorithms; "all32", "all128",
        "all160", "all256" and "all512" select the algorithms of one digest width.
        """
        if isinstance(names, str):
            names = names.split(",")

        mask = 0
        for name in names:
            if not name.strip():
                continue
            if name.strip().lower() in GROUP_MASKS:
                mask |= GROUP_MASKS[name.strip().lower()]
            else:
                mask |= int(parse_algorithm(name))
        return cls(mask)

    def __contains__(self, algorithm: object) -> bool:
        # A single algorithm flag, never a combined mask
        if not isinstance(algorithm, int) or algorithm not in DIGEST_SIZES:
            return False
        return bool(self.mask & int(algorithm))

    def __iter__(self) -> Iterator[Algorithm]:
        return (a for a in ALGORITHM_ORDER if self.mask & int(a))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def names(self) -> List[str]:
        return [a.name for a in self]

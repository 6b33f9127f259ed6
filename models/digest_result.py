"""
DigestResult model for hashcheck, holding the hex digests produced by a finished session.
"""
import logging
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, InstanceOf, model_validator
from models.algorithm import Algorithm, AlgorithmSet, CaseMode, DIGEST_SIZES

logger = logging.getLogger(__name__)


class DigestResult(BaseModel):
    """
    Hex digests for every algorithm of one session.

    Attributes:
        algorithms (AlgorithmSet): The algorithms the session computed.
        case_mode (CaseMode): Letter case of the hex strings.
        digests (Dict[Algorithm, str]): Hex digest per selected algorithm. Each
            string is exactly twice the algorithm's digest size.

    Only algorithms in ``algorithms`` have an entry; looking up any other
    algorithm raises KeyError.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid'
    )

    algorithms: InstanceOf[AlgorithmSet] = Field(..., description="Algorithms computed by the session")
    case_mode: CaseMode = Field(CaseMode.LOWERCASE, description="Letter case of the hex digests")
    digests: Dict[Algorithm, str] = Field(default_factory=dict, description="Hex digest per algorithm")

    @model_validator(mode='after')
    def check_digests(self) -> 'DigestResult':
        """Ensure there is exactly one correctly sized digest per selected algorithm."""
        selected = set(self.algorithms)
        if set(self.digests) != selected:
            raise ValueError(
                f"Digests {sorted(a.name for a in self.digests)} do not match "
                f"selected algorithms {self.algorithms.names()}"
            )
        for algorithm, hex_digest in self.digests.items():
            expected = DIGEST_SIZES[algorithm] * 2
            if len(hex_digest) != expected:
                raise ValueError(
                    f"{algorithm.name} digest must be {expected} hex characters, got {len(hex_digest)}"
                )
        return self

    def __getitem__(self, algorithm: Algorithm) -> str:
        if algorithm not in self.algorithms:
            raise KeyError(f"{Algorithm(algorithm).name} was not computed by this session")
        return self.digests[Algorithm(algorithm)]

    def __contains__(self, algorithm: object) -> bool:
        return algorithm in self.algorithms

    def get(self, algorithm: Algorithm, default: Optional[str] = None) -> Optional[str]:
        if algorithm not in self.algorithms:
            return default
        return self.digests[Algorithm(algorithm)]

    def as_dict(self) -> Dict[str, str]:
        """Return the digests keyed by lowercase algorithm name, in mask order."""
        return {a.name.lower(): self.digests[a] for a in self.algorithms}

    # Per-algorithm accessors

    @property
    def crc32(self) -> str:
        return self[Algorithm.CRC32]

    @property
    def md4(self) -> str:
        return self[Algorithm.MD4]

    @property
    def md5(self) -> str:
        return self[Algorithm.MD5]

    @property
    def sha1(self) -> str:
        return self[Algorithm.SHA1]

    @property
    def sha256(self) -> str:
        return self[Algorithm.SHA256]

    @property
    def sha512(self) -> str:
        return self[Algorithm.SHA512]

    @property
    def ed2k(self) -> str:
        return self[Algorithm.ED2K]

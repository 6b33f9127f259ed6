"""
Models package for hashcheck.

This package contains the algorithm selection types and the digest result model.
"""

from .algorithm import Algorithm, AlgorithmSet, CaseMode, DIGEST_SIZES, HEX_STRING_CAPACITIES
from .digest_result import DigestResult

__all__ = ["Algorithm", "AlgorithmSet", "CaseMode", "DIGEST_SIZES", "HEX_STRING_CAPACITIES", "DigestResult"]

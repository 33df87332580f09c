from dataclasses import dataclass
from typing import Optional


# Largest supported list length; counts above it are rejected
MAX_SEQUENCE_LENGTH = 2**32 - 1


@dataclass
class QuantileConfig:
    # Upper bound for the evenly-spaced count form quantile_seq(data, N)
    max_count: int = MAX_SEQUENCE_LENGTH
    # Floyd-Rivest: ranges longer than this are narrowed by sampling first
    selection_sample_cutoff: int = 600
    # When set, Decimal results are quantized to this many decimal places
    decimal_places: Optional[int] = None


DEFAULT_CONFIG = QuantileConfig()

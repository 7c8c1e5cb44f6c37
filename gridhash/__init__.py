import logging

from .codec import (
    BASE32,
    cell_size,
    decode,
    decode_center,
    decode_indexes,
    encode,
    encode_indexes,
)
from .errors import (
    CellsLimitExceeded,
    EndOfMap,
    GeohashError,
    InvalidPrecision,
    InvalidSymbol,
)
from .geohash import DEFAULT_CELLS_LIMIT, DEFAULT_PRECISION, Geohash
from .neighbors import Direction, adjacent, neighbors
from .quantize import MAX_PRECISION
from .region import region_to_hashes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BASE32",
    "DEFAULT_CELLS_LIMIT",
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    "CellsLimitExceeded",
    "Direction",
    "EndOfMap",
    "Geohash",
    "GeohashError",
    "InvalidPrecision",
    "InvalidSymbol",
    "adjacent",
    "cell_size",
    "decode",
    "decode_center",
    "decode_indexes",
    "encode",
    "encode_indexes",
    "neighbors",
    "region_to_hashes",
]

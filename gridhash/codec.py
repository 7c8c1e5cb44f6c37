"""Geohash encoding and decoding.

Each symbol holds five bits taken alternately from the two axes. In a symbol at
an even position (0-based, from the left) longitude donates three bits (symbol
bits 4, 2, 0) and latitude two (bits 3, 1); at odd positions the roles swap.
Both directions go through the same split/join tables below, so encode and
decode stay exact inverses.
"""

from .errors import InvalidPrecision, InvalidSymbol
from .quantize import (
    MAX_PRECISION,
    axis_bits,
    grid_sizes,
    index_to_lat,
    index_to_lon,
    lat_to_index,
    lon_to_index,
)

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters
BASE32_CODES = {char: code for code, char in enumerate(BASE32)}

_WIDE_BITS = (0, 2, 4)
_NARROW_BITS = (1, 3)


def _gather(code: int, positions: tuple[int, ...]) -> int:
    value = 0
    for shift, position in enumerate(positions):
        value |= (code >> position & 1) << shift
    return value


# code -> (wide part, narrow part), and back
_SPLIT = tuple(
    (_gather(code, _WIDE_BITS), _gather(code, _NARROW_BITS)) for code in range(32)
)
_JOIN = {parts: code for code, parts in enumerate(_SPLIT)}


def check_precision(precision: int) -> None:
    if not 0 <= precision <= MAX_PRECISION:
        raise InvalidPrecision(precision, MAX_PRECISION)


def symbol_code(symbol: str, geohash: str) -> int:
    try:
        return BASE32_CODES[symbol]
    except KeyError:
        raise InvalidSymbol(symbol, geohash) from None


def encode_indexes(lat_index: int, lon_index: int, precision: int) -> str:
    """Interleave two quantized axis indexes into a geohash of `precision` symbols.

    The indexes must already fit the axis widths given by `axis_bits(precision)`.
    """
    check_precision(precision)
    symbols = []
    for position in reversed(range(precision)):
        if position % 2:
            code = _JOIN[lat_index & 7, lon_index & 3]
            lat_index >>= 3
            lon_index >>= 2
        else:
            code = _JOIN[lon_index & 7, lat_index & 3]
            lon_index >>= 3
            lat_index >>= 2
        symbols.append(BASE32[code])
    return "".join(reversed(symbols))


def encode(lat: float, lon: float, precision: int) -> str:
    """Encode a latitude and longitude into a geohash."""
    check_precision(precision)
    lat_grid, lon_grid = grid_sizes(precision)
    return encode_indexes(
        lat_to_index(lat, lat_grid), lon_to_index(lon, lon_grid), precision
    )


def decode_indexes(geohash: str) -> tuple[int, int, int]:
    """De-interleave a geohash into its axis indexes.

    Returns:
        (lat_index, lon_index, precision)
    """
    precision = len(geohash)
    check_precision(precision)

    lat_index = lon_index = 0
    for position, symbol in enumerate(geohash):
        wide, narrow = _SPLIT[symbol_code(symbol, geohash)]
        if position % 2:
            lat_index = lat_index << 3 | wide
            lon_index = lon_index << 2 | narrow
        else:
            lon_index = lon_index << 3 | wide
            lat_index = lat_index << 2 | narrow
    return lat_index, lon_index, precision


def cell_size(precision: int) -> tuple[float, float]:
    """Size of a geohash cell for a given precision.

    Returns:
        (lat_height, lon_width) in degrees
    """
    check_precision(precision)
    lat_bits, lon_bits = axis_bits(precision)
    return 180.0 / (1 << lat_bits), 360.0 / (1 << lon_bits)


def decode(geohash: str) -> tuple[tuple[float, float], tuple[float, float]]:
    """Decode a geohash into the rectangle it covers.

    Returns:
        ((lat_min, lat_max), (lon_min, lon_max))
    """
    lat_index, lon_index, precision = decode_indexes(geohash)
    lat_grid, lon_grid = grid_sizes(precision)
    lat_height, lon_width = cell_size(precision)

    lat_min = index_to_lat(lat_index, lat_grid)
    lon_min = index_to_lon(lon_index, lon_grid)
    return (lat_min, lat_min + lat_height), (lon_min, lon_min + lon_width)


def decode_center(geohash: str) -> tuple[float, float]:
    """Decode a geohash into the latitude and longitude of its cell center."""
    (lat_min, lat_max), (lon_min, lon_max) = decode(geohash)
    return (lat_min + lat_max) / 2, (lon_min + lon_max) / 2

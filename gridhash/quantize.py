"""Mapping between degrees and integer grid positions."""

MAX_PRECISION = 12

LAT_ORIGIN, LAT_SPAN = -90.0, 180.0
LON_ORIGIN, LON_SPAN = -180.0, 360.0


def axis_bits(precision: int) -> tuple[int, int]:
    """Split the 5 * precision interleaved bits between the two axes.

    Longitude takes the odd bit since it spans twice the angular range.

    Returns:
        (lat_bits, lon_bits)
    """
    lat_bits = precision * 5 // 2
    lon_bits = precision * 5 - lat_bits
    return lat_bits, lon_bits


def grid_sizes(precision: int) -> tuple[int, int]:
    lat_bits, lon_bits = axis_bits(precision)
    return 1 << lat_bits, 1 << lon_bits


def _to_index(value: float, origin: float, span: float, grid_size: int) -> int:
    index = min(int((value - origin) * grid_size / span), grid_size - 1)
    # value - origin rounds to nearest, which can push it up onto a cell edge
    if _to_degrees(index, origin, span, grid_size) > value:
        index -= 1
    return index


def _to_degrees(index: int, origin: float, span: float, grid_size: int) -> float:
    return index * (span / grid_size) + origin


def lat_to_index(lat: float, grid_size: int) -> int:
    """Quantize a latitude into [0, grid_size), clamping at the poles."""
    if lat >= 90.0:
        return grid_size - 1
    if lat <= -90.0:
        return 0
    return _to_index(lat, LAT_ORIGIN, LAT_SPAN, grid_size)


def lon_to_index(lon: float, grid_size: int) -> int:
    """Quantize a longitude into [0, grid_size), clamping at the antimeridian."""
    if lon >= 180.0:
        return grid_size - 1
    if lon <= -180.0:
        return 0
    return _to_index(lon, LON_ORIGIN, LON_SPAN, grid_size)


def index_to_lat(index: int, grid_size: int) -> float:
    """Southern edge of latitude cell `index`."""
    return _to_degrees(index, LAT_ORIGIN, LAT_SPAN, grid_size)


def index_to_lon(index: int, grid_size: int) -> float:
    """Western edge of longitude cell `index`."""
    return _to_degrees(index, LON_ORIGIN, LON_SPAN, grid_size)

import logging
from itertools import product

from .codec import check_precision, encode_indexes
from .errors import CellsLimitExceeded
from .quantize import grid_sizes, lat_to_index, lon_to_index

logger = logging.getLogger(__name__)


def region_to_hashes(
    lat_min: float,
    lat_max: float,
    lon_min: float,
    lon_max: float,
    precision: int,
    limit: int,
) -> list[str]:
    """List every geohash of `precision` symbols that intersects a bounding box.

    Args:
        lat_min, lat_max: latitude bounds in degrees
        lon_min, lon_max: longitude bounds in degrees
        precision: length of the returned geohashes
        limit: largest number of cells the caller accepts

    Returns:
        The geohashes in strictly descending order. An inverted box
        (min > max on either axis) yields an empty list.

    Raises:
        CellsLimitExceeded: the box covers more than `limit` cells.
    """
    if lat_min > lat_max or lon_min > lon_max:
        return []
    check_precision(precision)

    lat_grid, lon_grid = grid_sizes(precision)
    lat_first, lat_last = lat_to_index(lat_min, lat_grid), lat_to_index(lat_max, lat_grid)
    lon_first, lon_last = lon_to_index(lon_min, lon_grid), lon_to_index(lon_max, lon_grid)

    total = (lat_last - lat_first + 1) * (lon_last - lon_first + 1)
    if total > limit:
        logger.debug("region of %d cells rejected, limit %d", total, limit)
        raise CellsLimitExceeded(total, limit)

    logger.debug("enumerating %d cells at precision %d", total, precision)
    hashes = [
        encode_indexes(lat_index, lon_index, precision)
        for lat_index, lon_index in product(
            range(lat_first, lat_last + 1), range(lon_first, lon_last + 1)
        )
    ]
    hashes.sort(reverse=True)
    return hashes

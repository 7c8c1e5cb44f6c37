from .codec import cell_size, check_precision, decode, decode_center, encode
from .errors import InvalidPrecision
from .neighbors import adjacent, neighbors
from .quantize import MAX_PRECISION
from .region import region_to_hashes

DEFAULT_PRECISION = 5
DEFAULT_CELLS_LIMIT = 1024  # Set a reasonable limit


class Geohash:
    def __init__(self, precision: int = DEFAULT_PRECISION):
        """Initialize Geohash encoder/decoder with given precision."""
        check_precision(precision)  # 12 is standard max precision
        self.precision = precision

    def _check_length(self, geohash: str) -> None:
        if len(geohash) != self.precision:
            raise InvalidPrecision(len(geohash), MAX_PRECISION)

    def encode(self, lat: float, lon: float) -> str:
        """Encode a latitude and longitude into a geohash."""
        return encode(lat, lon, self.precision)

    def decode(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into the latitude and longitude of its cell center."""
        self._check_length(geohash)
        return decode_center(geohash)

    def bounds(self, geohash: str) -> tuple[tuple[float, float], tuple[float, float]]:
        """Decode a geohash into ((lat_min, lat_max), (lon_min, lon_max))."""
        self._check_length(geohash)
        return decode(geohash)

    def cell_size(self) -> tuple[float, float]:
        """Calculate the size of a geohash cell at this precision.

        Returns:
            (lat_height, lon_width)
        """
        return cell_size(self.precision)

    def adjacent(self, geohash: str, direction) -> str:
        self._check_length(geohash)
        return adjacent(geohash, direction)

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        """
        Compute the 8 neighboring geohashes (N, S, E, W, NE, NW, SE, SW).

        Neighbors past the poles or the antimeridian are omitted.
        """
        self._check_length(geohash)
        return neighbors(geohash)

    def cover(
        self,
        lat_min: float,
        lat_max: float,
        lon_min: float,
        lon_max: float,
        limit: int = DEFAULT_CELLS_LIMIT,
    ) -> list[str]:
        """Geohashes covering a bounding box, in descending order."""
        return region_to_hashes(lat_min, lat_max, lon_min, lon_max, self.precision, limit)


if __name__ == "__main__":
    geo = Geohash(precision=6)
    encoded = geo.encode(41.878738, -87.6359612)  # Willis Tower
    decoded = geo.decode(encoded)
    nearby = geo.get_neighbors(encoded)
    covering = geo.cover(41.87, 41.89, -87.65, -87.62)

    print(f"Encoded: {encoded}")
    print(f"Decoded: {decoded}")
    print(f"Neighbors: {nearby}")
    print(f"Covering {len(covering)} cells: {covering}")

"""Errors raised by the geohash operations."""


class GeohashError(Exception):
    """Base class for every geohash error."""


class InvalidPrecision(GeohashError, ValueError):
    """Precision (or geohash length) outside the supported range."""

    def __init__(self, precision: int, max_precision: int = 12):
        super().__init__(
            f"Precision must be between 0 and {max_precision}, got {precision}"
        )
        self.precision = precision


class InvalidSymbol(GeohashError, ValueError):
    """Character not in the geohash base32 alphabet."""

    def __init__(self, symbol: str, geohash: str):
        super().__init__(f"Invalid character {symbol!r} in geohash {geohash!r}")
        self.symbol = symbol
        self.geohash = geohash


class EndOfMap(GeohashError):
    """The requested neighbor lies outside the coordinate grid."""

    def __init__(self, geohash: str, direction):
        super().__init__(f"No {direction.value} neighbor for geohash {geohash!r}")
        self.geohash = geohash
        self.direction = direction


class CellsLimitExceeded(GeohashError):
    """A region covers more cells than the caller allowed."""

    def __init__(self, total: int, limit: int):
        super().__init__(f"Region covers {total} cells, limit is {limit}")
        self.total = total
        self.limit = limit

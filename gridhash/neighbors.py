"""Adjacent geohash cells.

Moving one cell is a ripple carry over the symbols, right to left: each symbol
is swapped for its neighbor, and when the symbol sat on the border of its own
block the move wraps and carries into the symbol on its left.
"""

import logging
from enum import Enum
from types import MappingProxyType

from .codec import check_precision, symbol_code
from .errors import EndOfMap

logger = logging.getLogger(__name__)


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if value in (member.value, member.value[0]):
                    return member
        return None


# Per direction, one entry per column kind: (even position, odd position).
# NEIGHBOR[d][k][code] is the symbol next to BASE32[code] in direction d.
NEIGHBOR = MappingProxyType(
    {
        Direction.NORTH: (
            "238967debc01fg45kmstqrwxuvhjyznp",
            "14365h7k9dcfesgujnmqp0r2twvyx8zb",
        ),
        Direction.SOUTH: (
            "bc01fg45238967deuvhjyznpkmstqrwx",
            "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
        ),
        Direction.EAST: (
            "14365h7k9dcfesgujnmqp0r2twvyx8zb",
            "238967debc01fg45kmstqrwxuvhjyznp",
        ),
        Direction.WEST: (
            "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
            "bc01fg45238967deuvhjyznpkmstqrwx",
        ),
    }
)

# Symbols whose move wraps and carries into the next symbol on the left.
BORDER = MappingProxyType(
    {
        Direction.NORTH: (frozenset("bcfguvyz"), frozenset("prxz")),
        Direction.SOUTH: (frozenset("0145hjnp"), frozenset("028b")),
        Direction.EAST: (frozenset("prxz"), frozenset("bcfguvyz")),
        Direction.WEST: (frozenset("028b"), frozenset("0145hjnp")),
    }
)

_COMPASS = MappingProxyType(
    {
        "n": (Direction.NORTH,),
        "ne": (Direction.NORTH, Direction.EAST),
        "e": (Direction.EAST,),
        "se": (Direction.SOUTH, Direction.EAST),
        "s": (Direction.SOUTH,),
        "sw": (Direction.SOUTH, Direction.WEST),
        "w": (Direction.WEST,),
        "nw": (Direction.NORTH, Direction.WEST),
    }
)


def adjacent(geohash: str, direction) -> str:
    """Return the geohash of the same length next to `geohash` in `direction`.

    Raises:
        EndOfMap: the neighbor would lie past the edge of the grid.
        InvalidSymbol: `geohash` holds a character outside the alphabet.
    """
    direction = Direction(direction)
    check_precision(len(geohash))

    codes = [symbol_code(symbol, geohash) for symbol in geohash]
    symbols = list(geohash)
    for position in reversed(range(len(symbols))):
        symbol = symbols[position]
        kind = position % 2
        symbols[position] = NEIGHBOR[direction][kind][codes[position]]
        if symbol not in BORDER[direction][kind]:
            return "".join(symbols)

    logger.debug("carry ran off the map: %r %s", geohash, direction.value)
    raise EndOfMap(geohash, direction)


def neighbors(geohash: str) -> dict[str, str]:
    """
    Compute the neighboring geohashes (n, ne, e, se, s, sw, w, nw).

    Directions that fall off the map are left out, so cells on the grid edge
    get fewer than eight entries.
    """
    result = {}
    for name, steps in _COMPASS.items():
        cell = geohash
        try:
            for step in steps:
                cell = adjacent(cell, step)
        except EndOfMap:
            continue
        result[name] = cell
    return result

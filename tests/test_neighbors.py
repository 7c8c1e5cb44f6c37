import pytest
from hypothesis import assume, given, strategies as st

from gridhash import (
    Direction,
    EndOfMap,
    InvalidPrecision,
    InvalidSymbol,
    adjacent,
    decode,
    decode_indexes,
    encode,
    encode_indexes,
    neighbors,
)
from gridhash.neighbors import BORDER, NEIGHBOR
from gridhash.quantize import grid_sizes

STEPS = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}
OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def test_north_of_known_vector():
    north = adjacent("u4pruy", Direction.NORTH)
    assert north == "u4pruz"

    (lat_min, lat_max), lon_range = decode("u4pruy")
    (north_min, north_max), north_lon_range = decode(north)
    assert north_min == pytest.approx(lat_max)
    assert north_max - north_min == pytest.approx(lat_max - lat_min)
    assert north_lon_range == lon_range


def test_carry_into_more_significant_symbols():
    # top-right cell of the "s" block steps east into the "t" block
    assert adjacent("sz", Direction.EAST) == "tp"
    assert adjacent("tp", Direction.WEST) == "sz"


@pytest.mark.parametrize(
    "geohash, direction",
    [
        ("z", Direction.NORTH),
        ("b", Direction.NORTH),
        ("0", Direction.SOUTH),
        ("z", Direction.EAST),
        ("0", Direction.WEST),
        ("zzzzzzzzzzzz", Direction.NORTH),
        ("", Direction.EAST),
    ],
)
def test_end_of_map(geohash, direction):
    with pytest.raises(EndOfMap) as excinfo:
        adjacent(geohash, direction)
    assert excinfo.value.geohash == geohash
    assert excinfo.value.direction is direction


@pytest.mark.parametrize("geohash", ["u4prua", "a0", "u4Pruy"])
def test_invalid_symbol(geohash):
    with pytest.raises(InvalidSymbol):
        adjacent(geohash, Direction.NORTH)


def test_too_long():
    with pytest.raises(InvalidPrecision):
        adjacent("s" * 13, Direction.NORTH)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("north", Direction.NORTH),
        ("N", Direction.NORTH),
        ("south", Direction.SOUTH),
        ("East", Direction.EAST),
        ("w", Direction.WEST),
        (Direction.WEST, Direction.WEST),
    ],
)
def test_direction_parsing(value, expected):
    assert Direction(value) is expected


def test_unknown_direction():
    with pytest.raises(ValueError):
        adjacent("u4pruy", "up")
    with pytest.raises(ValueError):
        Direction("northeast")


def test_tables_are_permutations_of_the_alphabet():
    for direction in Direction:
        for table, border in zip(NEIGHBOR[direction], BORDER[direction]):
            assert sorted(table) == sorted("0123456789bcdefghjkmnpqrstuvwxyz")
            assert border <= set(table)


@pytest.mark.parametrize("precision", [1, 2, 3])
@pytest.mark.parametrize("direction", list(Direction))
def test_every_cell_moves_one_step(precision, direction):
    lat_grid, lon_grid = grid_sizes(precision)
    dlat, dlon = STEPS[direction]
    for lat_index in range(lat_grid):
        for lon_index in range(lon_grid):
            geohash = encode_indexes(lat_index, lon_index, precision)
            target = (lat_index + dlat, lon_index + dlon)
            if not (0 <= target[0] < lat_grid and 0 <= target[1] < lon_grid):
                with pytest.raises(EndOfMap):
                    adjacent(geohash, direction)
                continue
            assert decode_indexes(adjacent(geohash, direction)) == (*target, precision)


def test_neighbors_of_interior_cell():
    found = neighbors("u4pruy")
    assert set(found) == {"n", "ne", "e", "se", "s", "sw", "w", "nw"}
    assert len(set(found.values())) == 8
    assert "u4pruy" not in found.values()
    assert found["n"] == "u4pruz"
    assert found["ne"] == adjacent(found["n"], Direction.EAST)


def test_neighbors_on_the_edge_are_omitted():
    found = neighbors(encode(90, 0, 4))
    assert set(found) == {"e", "se", "s", "sw", "w"}

    corner = neighbors("0")
    assert set(corner) == {"n", "ne", "e"}


class TestAdjacencyProperties:
    @given(
        st.floats(-90, 90),
        st.floats(-180, 180),
        st.integers(1, 12),
        st.sampled_from(list(Direction)),
    )
    def test_step_back_returns_to_start(self, lat, lon, precision, direction):
        geohash = encode(lat, lon, precision)
        try:
            moved = adjacent(geohash, direction)
        except EndOfMap:
            assume(False)
        assert len(moved) == precision
        assert moved != geohash
        assert adjacent(moved, OPPOSITE[direction]) == geohash

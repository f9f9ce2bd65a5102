"""Tests for chunked world storage and tile palette compaction."""

import logging

import pytest

from tilesmith.content import CHUNK_SIZE, Chunk, RegistryError, World
from tilesmith.world import (
    CompactionReport,
    compact_world,
    delete_chunk,
    get_chunk,
    get_tile_at,
    index_of_chunk,
    index_of_tile_palette_entry,
    insert_chunk,
    insert_tile_palette_entry,
    remove_duplicate_tile_palette_entries,
    remove_empty_chunks,
    remove_unused_tile_palette_entries,
    set_tile_at,
    world_to_chunk,
)


@pytest.fixture
def world() -> World:
    return World.default("overworld")


def chunk_with(x: int, y: int, cells: dict[int, int]) -> Chunk:
    """Build a chunk of zeros with some cells set."""
    chunk = Chunk.new(x, y)
    for index, value in cells.items():
        chunk.data[index] = value
    return chunk


class TestChunks:
    """Test sparse chunk allocation."""

    def test_insert_and_get_chunk(self, world: World) -> None:
        """Test a new chunk is all zeros and found by its coordinates."""
        result = insert_chunk(world, 0, 0)

        assert result
        assert len(world.chunks) == 1
        chunk = get_chunk(world, 0, 0)
        assert chunk is not None
        assert chunk.data == [0] * CHUNK_SIZE
        assert world.tile_palette[chunk.data[0]] == "air"

    def test_duplicate_chunk_is_refused(self, world: World) -> None:
        insert_chunk(world, 0, 0)

        result = insert_chunk(world, 0, 0)
        assert not result
        assert result.error == RegistryError.DUPLICATE_KEY
        assert result.message == "chunk x y already exists"
        assert len(world.chunks) == 1

    @pytest.mark.parametrize("coord", [(0.5, 0), (0, "1"), (True, 0), (None, None)])
    def test_non_integer_coordinates(self, world: World, coord: tuple) -> None:
        result = insert_chunk(world, *coord)
        assert not result
        assert result.error == RegistryError.INVALID_COORDINATE
        assert result.message == "chunk x y is not an integer"
        assert world.chunks == []

    def test_negative_coordinates(self, world: World) -> None:
        assert insert_chunk(world, -4, -9)
        assert index_of_chunk(world, -4, -9) == 0
        assert get_chunk(world, 4, 9) is None

    def test_delete_chunk(self, world: World) -> None:
        for x in range(3):
            insert_chunk(world, x, 0)

        assert delete_chunk(world, 1, 0)
        assert [(chunk.x, chunk.y) for chunk in world.chunks] == [(0, 0), (2, 0)]

        result = delete_chunk(world, 1, 0)
        assert not result
        assert result.error == RegistryError.NOT_FOUND
        assert result.message == "chunk x y does not exist"

    def test_insert_warns_without_air_first(self, world: World, caplog) -> None:
        world.tile_palette = ["stone", "air"]
        with caplog.at_level(logging.WARNING, logger="tilesmith.world.chunks"):
            assert insert_chunk(world, 0, 0)
        assert "palette index 0" in caplog.text


class TestTileCoordinates:
    """Test world tile coordinate helpers."""

    @pytest.mark.parametrize(
        "tile, expected",
        [
            ((0, 0), ((0, 0), (0, 0))),
            ((31, 32), ((0, 1), (31, 0))),
            ((-1, -1), ((-1, -1), (31, 31))),
            ((-33, 64), ((-2, 2), (31, 0))),
        ],
    )
    def test_world_to_chunk(self, tile: tuple, expected: tuple) -> None:
        assert world_to_chunk(*tile) == expected

    def test_cell_index(self) -> None:
        assert Chunk.cell_index(0, 0) == 0
        assert Chunk.cell_index(5, 2) == 69
        assert Chunk.cell_index(31, 31) == CHUNK_SIZE - 1
        with pytest.raises(IndexError):
            Chunk.cell_index(32, 0)

    def test_set_tile_allocates_chunk(self, world: World) -> None:
        index = set_tile_at(world, -1, 40, "grass")

        assert index == 1
        assert world.tile_palette == ["air", "grass"]
        chunk = get_chunk(world, -1, 1)
        assert chunk is not None
        assert chunk.data[Chunk.cell_index(31, 8)] == 1
        assert get_tile_at(world, -1, 40) == "grass"
        assert get_tile_at(world, -2, 40) == "air"

    def test_get_tile_outside_chunks(self, world: World) -> None:
        assert get_tile_at(world, 100, 100) is None

    def test_get_tile_outside_palette(self, world: World) -> None:
        world.chunks.append(chunk_with(0, 0, {0: 9}))
        assert get_tile_at(world, 0, 0) is None

    @pytest.mark.parametrize("tile", [(0.5, 0), (0, 1.0), (True, 3)])
    def test_non_integer_tile_coordinates(self, world: World, tile: tuple) -> None:
        """Test fractional tile coordinates are refused without allocating."""
        with pytest.raises(ValueError, match="not integers"):
            set_tile_at(world, *tile, "grass")
        with pytest.raises(ValueError, match="not integers"):
            get_tile_at(world, *tile)
        assert world.chunks == []
        assert world.tile_palette == ["air"]


class TestPaletteEntries:
    """Test palette lookup and insertion."""

    def test_insert_is_idempotent(self, world: World) -> None:
        """Test inserting the same tile twice returns the same index."""
        assert insert_tile_palette_entry(world, "grass") == 1
        assert insert_tile_palette_entry(world, "grass") == 1
        assert world.tile_palette == ["air", "grass"]

    def test_existing_air(self, world: World) -> None:
        assert insert_tile_palette_entry(world, "air") == 0
        assert world.tile_palette == ["air"]

    def test_index_of(self, world: World) -> None:
        world.tile_palette = ["air", "stone", "stone"]
        assert index_of_tile_palette_entry(world, "stone") == 1
        assert index_of_tile_palette_entry(world, "lava") is None


class TestRemoveUnused:
    """Test dropping palette entries no cell refers to."""

    def test_scenario_remap(self, world: World) -> None:
        world.tile_palette = ["air", "stone", "dirt", "grass"]
        world.chunks = [chunk_with(0, 0, {1: 3, 2: 3})]

        assert remove_unused_tile_palette_entries(world) == 2
        assert world.tile_palette == ["air", "grass"]
        assert world.chunks[0].data[:4] == [0, 1, 1, 0]
        assert set(world.chunks[0].data) == {0, 1}

    def test_remaps_every_chunk(self, world: World) -> None:
        world.tile_palette = ["air", "unused", "stone", "water"]
        world.chunks = [chunk_with(0, 0, {0: 2}), chunk_with(1, 0, {5: 3, 6: 2})]

        assert remove_unused_tile_palette_entries(world) == 1
        assert world.tile_palette == ["air", "stone", "water"]
        assert world.chunks[0].data[0] == 1
        assert world.chunks[1].data[5:7] == [2, 1]

    def test_no_chunks_keeps_nothing(self, world: World) -> None:
        world.tile_palette = ["air", "stone"]
        assert remove_unused_tile_palette_entries(world) == 2
        assert world.tile_palette == []

    def test_nothing_to_remove(self, world: World) -> None:
        world.chunks = [chunk_with(0, 0, {})]
        assert remove_unused_tile_palette_entries(world) == 0
        assert world.tile_palette == ["air"]

    def test_out_of_range_cells_untouched(self, world: World) -> None:
        world.tile_palette = ["air", "unused", "stone"]
        world.chunks = [chunk_with(0, 0, {0: 2, 1: 7})]

        remove_unused_tile_palette_entries(world)
        assert world.tile_palette == ["air", "stone"]
        assert world.chunks[0].data[:3] == [1, 7, 0]

    def test_chunk_data_is_updated_in_place(self, world: World) -> None:
        world.tile_palette = ["air", "unused", "stone"]
        chunk = chunk_with(0, 0, {0: 2})
        data = chunk.data
        world.chunks = [chunk]

        remove_unused_tile_palette_entries(world)
        assert chunk.data is data


class TestRemoveDuplicates:
    """Test merging repeated palette entries."""

    def test_duplicates_merge_onto_first(self, world: World) -> None:
        world.tile_palette = ["air", "stone", "air", "stone", "dirt"]
        world.chunks = [chunk_with(0, 0, {0: 1, 1: 2, 2: 3, 3: 4})]

        assert remove_duplicate_tile_palette_entries(world) == 2
        assert world.tile_palette == ["air", "stone", "dirt"]
        assert world.chunks[0].data[:5] == [1, 0, 1, 2, 0]

    def test_unused_unique_entries_are_kept(self, world: World) -> None:
        world.tile_palette = ["air", "unused", "air"]

        assert remove_duplicate_tile_palette_entries(world) == 1
        assert world.tile_palette == ["air", "unused"]

    def test_no_duplicates(self, world: World) -> None:
        world.tile_palette = ["air", "stone"]
        assert remove_duplicate_tile_palette_entries(world) == 0
        assert world.tile_palette == ["air", "stone"]


class TestRemoveEmptyChunks:
    """Test dropping chunks that hold nothing but air."""

    def test_single_stone_cell_keeps_chunk(self, world: World) -> None:
        """Test one non-air cell keeps a chunk until it is painted back to air."""
        insert_chunk(world, 0, 0)
        stone = insert_tile_palette_entry(world, "stone")
        assert stone == 1

        get_chunk(world, 0, 0).data[0] = stone
        assert remove_empty_chunks(world) == 0
        assert index_of_chunk(world, 0, 0) == 0

        get_chunk(world, 0, 0).data[0] = 0
        assert remove_empty_chunks(world) == 1
        assert get_chunk(world, 0, 0) is None

    def test_consecutive_empty_chunks(self, world: World) -> None:
        world.tile_palette = ["air", "stone"]
        world.chunks = [
            chunk_with(0, 0, {}),
            chunk_with(1, 0, {}),
            chunk_with(2, 0, {}),
            chunk_with(3, 0, {10: 1}),
            chunk_with(4, 0, {}),
        ]

        assert remove_empty_chunks(world) == 4
        assert [(chunk.x, chunk.y) for chunk in world.chunks] == [(3, 0)]

    def test_air_is_resolved_by_id(self, world: World) -> None:
        """Test emptiness follows the palette, not the value 0."""
        world.tile_palette = ["stone", "air"]
        world.chunks = [Chunk(data=[1] * CHUNK_SIZE, x=0, y=0), Chunk.new(1, 0)]

        assert remove_empty_chunks(world) == 1
        assert [(chunk.x, chunk.y) for chunk in world.chunks] == [(1, 0)]

    def test_out_of_range_is_not_air(self, world: World) -> None:
        world.chunks = [chunk_with(0, 0, {3: 5})]
        assert remove_empty_chunks(world) == 0
        assert len(world.chunks) == 1

    def test_duplicate_air_entries(self, world: World) -> None:
        world.tile_palette = ["air", "stone", "air"]
        world.chunks = [chunk_with(0, 0, {0: 2})]
        assert remove_empty_chunks(world) == 1


class TestCompactWorld:
    """Test the combined compaction pass."""

    def test_compact_world(self, world: World) -> None:
        world.tile_palette = ["air", "stone", "lava", "stone", "grass"]
        world.chunks = [
            chunk_with(0, 0, {0: 3}),
            chunk_with(1, 0, {}),
            chunk_with(2, 0, {7: 4, 8: 1}),
        ]

        report = compact_world(world)

        assert report == CompactionReport(duplicate_entries=1, unused_entries=1, empty_chunks=1)
        assert report.changed
        assert world.tile_palette == ["air", "stone", "grass"]
        assert [(chunk.x, chunk.y) for chunk in world.chunks] == [(0, 0), (2, 0)]
        assert world.chunks[0].data[0] == 1
        assert world.chunks[1].data[7:9] == [2, 1]

    def test_compact_is_stable(self, world: World) -> None:
        set_tile_at(world, 0, 0, "grass")
        compact_world(world)
        snapshot = world.to_dict()

        report = compact_world(world)
        assert not report.changed
        assert world.to_dict() == snapshot

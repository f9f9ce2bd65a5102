"""Tests for cross-entity reference checks."""

from tilesmith.content import Chunk, Content, check_references
from tilesmith.content.registry import insert_creature, insert_tile, insert_world


class TestCheckReferences:
    """Test consistency checks across collections."""

    def test_sample_content_is_clean(self, sample_content: Content) -> None:
        result = check_references(sample_content)
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_duplicate_ids(self, sample_content: Content) -> None:
        """Test duplicates that bypassed the registries are errors."""
        sample_content.tiles.append(sample_content.tiles[0])

        result = check_references(sample_content)
        assert not result.is_valid
        assert result.errors == ["Duplicate tile id: 'grass'"]

    def test_duplicate_chunks(self, sample_content: Content) -> None:
        world = sample_content.worlds[0]
        world.chunks.append(Chunk.new(0, 0))

        result = check_references(sample_content)
        assert result.errors == ["World 'overworld' has duplicate chunk at (0, 0)"]

    def test_wrong_chunk_size(self, sample_content: Content) -> None:
        sample_content.worlds[0].chunks.append(Chunk(data=[0, 0], x=5, y=5))

        result = check_references(sample_content)
        assert result.errors == ["World 'overworld' chunk (5, 5) has 2 cells, expected 1024"]

    def test_cells_outside_palette(self, sample_content: Content) -> None:
        chunk = sample_content.worlds[0].chunks[0]
        chunk.data[0] = 2
        chunk.data[1] = 40

        result = check_references(sample_content)
        assert result.errors == [
            "World 'overworld' chunk (0, 0) has 2 cell(s) outside the tile palette"
        ]

    def test_dangling_references_are_warnings(self, content: Content) -> None:
        insert_creature(content, "wolf")
        content.creatures[0].sprites = ["wolf"]
        insert_tile(content, "grass")
        content.tiles[0].sprites = ["grass"]
        insert_world(content, "overworld")
        content.worlds[0].tile_palette = ["stone", "air"]

        result = check_references(content)
        assert result.is_valid
        assert result.warnings == [
            "Creature 'wolf' uses unknown sprite 'wolf'",
            "Tile 'grass' uses unknown sprite 'grass'",
            "World 'overworld' palette does not start with 'air'",
            "World 'overworld' palette uses unknown tile 'stone'",
        ]

    def test_unknown_image(self, sample_content: Content) -> None:
        sample_content.sprites[0].image = "missing"

        result = check_references(sample_content)
        assert result.warnings == ["Sprite 'grass' uses unknown image 'missing'"]

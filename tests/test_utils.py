import pytest

from blocktree.models import BlockRecord, TextSpan
from blocktree.utils import find_list_index, get_text_content, get_top_level_page_block, join_text, map_image_url


class TestTextContent:
    def test_flattens_spans(self):
        spans = get_text_content([["Hello "], ["world", [["b"], ["i"]]]])
        assert spans == [
            TextSpan(text="Hello "),
            TextSpan(text="world", decorations=[["b"], ["i"]]),
        ]
        assert join_text(spans) == "Hello world"

    @pytest.mark.parametrize("value", [None, []])
    def test_empty(self, value):
        assert get_text_content(value) == []


class TestMapImageURL:
    def test_remote_url_goes_through_proxy(self):
        block = BlockRecord(id="img-1", type="image", parent_table="block")
        assert map_image_url("https://example.com/a.png", block) == (
            "https://www.notion.so/image/https%3A%2F%2Fexample.com%2Fa.png?table=block&id=img-1"
        )

    def test_collection_parent_table(self):
        block = BlockRecord(id="img-2", type="image", parent_table="collection")
        assert map_image_url("https://example.com/b.png", block).endswith("?table=collection&id=img-2")

    @pytest.mark.parametrize("url", [
        "data:image/png;base64,AAAA",
        "https://images.unsplash.com/photo-123",
    ])
    def test_passthrough(self, url):
        assert map_image_url(url, BlockRecord(id="i", type="image")) == url

    def test_no_source(self):
        assert map_image_url(None, BlockRecord(id="i", type="image")) is None


class TestFindListIndex:
    @pytest.fixture
    def graph(self):
        blocks = [
            BlockRecord(id="p", type="page", content=["n1", "n2", "t", "n3", "b1"]),
            BlockRecord(id="n1", type="numbered_list", parent_id="p"),
            BlockRecord(id="n2", type="numbered_list", parent_id="p"),
            BlockRecord(id="t", type="text", parent_id="p"),
            BlockRecord(id="n3", type="numbered_list", parent_id="p"),
            BlockRecord(id="b1", type="bulleted_list", parent_id="p"),
            BlockRecord(id="orphan", type="numbered_list"),
        ]
        return {block.id: block for block in blocks}

    @pytest.mark.parametrize("block_id,expected", [("n1", 1), ("n2", 2), ("n3", 1), ("b1", 1)])
    def test_numbering_restarts_after_other_types(self, graph, block_id, expected):
        assert find_list_index(block_id, graph) == expected

    def test_without_parent(self, graph):
        assert find_list_index("orphan", graph) == 1
        assert find_list_index("missing", graph) == 1


class TestTopLevelPage:
    @pytest.fixture
    def graph(self):
        blocks = [
            BlockRecord(id="root", type="page", content=["sub"]),
            BlockRecord(id="sub", type="page", parent_id="root", content=["tog"]),
            BlockRecord(id="tog", type="toggle", parent_id="sub", content=["leaf"]),
            BlockRecord(id="leaf", type="text", parent_id="tog"),
            BlockRecord(id="loose", type="text", parent_id="elsewhere"),
            BlockRecord(id="x", type="text", parent_id="y"),
            BlockRecord(id="y", type="text", parent_id="x"),
        ]
        return {block.id: block for block in blocks}

    def test_returns_outermost_page(self, graph):
        assert get_top_level_page_block(graph["leaf"], graph).id == "root"

    def test_root_page_is_its_own_top(self, graph):
        assert get_top_level_page_block(graph["root"], graph).id == "root"

    def test_no_page_ancestor(self, graph):
        assert get_top_level_page_block(graph["loose"], graph) is None

    def test_parent_cycle_terminates(self, graph):
        assert get_top_level_page_block(graph["x"], graph) is None

"""Tests for code block traversal and heading resolution."""

from readme_editor.core.document import get_literal, parse_readme
from readme_editor.core.tree_operations import (
    code_block_nodes,
    code_blocks_by_heading,
    heading_literal,
    node_heading,
    walk_to_node,
)


def test_index_maps_headings_to_their_blocks(network_readme):
    document = parse_readme(network_readme)
    index = code_blocks_by_heading(document.tree)

    assert list(index) == [
        "Basic Information",
        "Tag: package-2023-01",
        "Tag: package-2022-05",
    ]
    assert "tag: package-2023-01" in get_literal(index["Basic Information"])
    assert "2022-05-01" in get_literal(index["Tag: package-2022-05"])


def test_code_block_nodes_are_in_document_order(network_readme):
    document = parse_readme(network_readme)
    blocks = code_block_nodes(document.tree)

    assert len(blocks) == 3
    assert [block.map[0] for block in blocks] == sorted(block.map[0] for block in blocks)


def test_block_before_any_heading_is_excluded():
    text = "```yaml\ntag: orphan\n```\n\n## Later\n\n```yaml\ntag: owned\n```\n"
    document = parse_readme(text)
    orphan = code_block_nodes(document.tree)[0]

    assert node_heading(orphan) is None
    assert list(code_blocks_by_heading(document.tree)) == ["Later"]


def test_heading_found_through_enclosing_blockquote():
    text = "## Settings\n\nIntro.\n\n> Note:\n>\n> ```yaml\n> tag: quoted\n> ```\n"
    document = parse_readme(text)
    block = code_block_nodes(document.tree)[0]

    heading = node_heading(block)
    assert heading is not None
    assert heading_literal(heading) == "Settings"


def test_heading_found_through_list_item():
    text = "## Basic Information\n\n- first\n\n  ```yaml\n  tag: listed\n  ```\n"
    document = parse_readme(text)
    index = code_blocks_by_heading(document.tree)

    assert get_literal(index["Basic Information"]) == "tag: listed\n"


def test_duplicate_heading_text_keeps_later_block():
    text = "## Config\n\n```yaml\ntag: first\n```\n\n## Config\n\n```yaml\ntag: second\n```\n"
    document = parse_readme(text)
    blocks = code_block_nodes(document.tree)
    index = code_blocks_by_heading(document.tree)

    assert index["Config"] is blocks[1]
    assert get_literal(index["Config"]) == "tag: second\n"


def test_later_block_under_same_heading_wins():
    text = "## Config\n\n```yaml\ntag: first\n```\n\nMore text.\n\n```yaml\ntag: second\n```\n"
    document = parse_readme(text)
    index = code_blocks_by_heading(document.tree)

    assert get_literal(index["Config"]) == "tag: second\n"


def test_heading_literal_takes_first_text_run_only():
    text = "## *Basic* Information\n\n```yaml\ntag: a\n```\n"
    document = parse_readme(text)
    index = code_blocks_by_heading(document.tree)

    assert list(index) == ["Basic"]


def test_heading_without_text_is_skipped():
    text = "##\n\n```yaml\ntag: a\n```\n"
    document = parse_readme(text)

    assert code_blocks_by_heading(document.tree) == {}


def test_indented_code_block_is_indexed():
    text = "## Legacy\n\n    tag: old\n    other: value\n"
    document = parse_readme(text)
    index = code_blocks_by_heading(document.tree)

    assert index["Legacy"].type == "code_block"
    assert get_literal(index["Legacy"]) == "tag: old\nother: value\n"


def test_rebuilding_index_is_idempotent(network_readme):
    document = parse_readme(network_readme)
    first = code_blocks_by_heading(document.tree)
    second = code_blocks_by_heading(document.tree)

    assert first.keys() == second.keys()
    assert all(first[key] is second[key] for key in first)


def test_walk_to_node_resumes_from_shared_cursor():
    document = parse_readme("# One\n\n# Two\n")
    cursor = document.tree.walk()

    first = walk_to_node(cursor, lambda n: n.type == "heading")
    second = walk_to_node(cursor, lambda n: n.type == "heading")
    third = walk_to_node(cursor, lambda n: n.type == "heading")

    assert heading_literal(first) == "One"
    assert heading_literal(second) == "Two"
    assert third is None


def test_independent_cursors_do_not_interfere():
    document = parse_readme("# One\n\n# Two\n")
    left = document.tree.walk()
    right = document.tree.walk()

    walk_to_node(left, lambda n: n.type == "heading")
    found = walk_to_node(right, lambda n: n.type == "heading")

    assert heading_literal(found) == "One"

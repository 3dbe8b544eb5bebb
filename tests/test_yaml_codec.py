"""Tests for frontmatter and tree serialization."""

import json

import pytest
import yaml

from noteline.adapters.yaml_codec import YamlFrontmatter, dump_tree, load_tree
from noteline.core.model import AnnotatedNode

TREE = AnnotatedNode(
    "Root",
    children=(
        AnnotatedNode("A", inline_note="note: with colon"),
        AnnotatedNode("B", inline_note="", detailed_note="line 1\nline 2"),
        AnnotatedNode("C", children=(AnnotatedNode("Ünïcode"),)),
    ),
)


def test_decode_frontmatter():
    meta, body = YamlFrontmatter().decode("---\ntitle: Map\ntags: [a, b]\n---\n- A\n")
    assert meta == {"title": "Map", "tags": ["a", "b"]}
    assert body == "- A\n"


def test_decode_without_frontmatter():
    text = "- A\n- B"
    assert YamlFrontmatter().decode(text) == ({}, text)


@pytest.mark.parametrize(
    "text",
    [
        "---\n- just\n- a list\n---\n- A",
        "---\nkey: [unclosed\n---\n- A",
    ],
)
def test_decode_ignores_non_mapping_frontmatter(text):
    assert YamlFrontmatter().decode(text) == ({}, text)


def test_encode_frontmatter():
    fm = YamlFrontmatter()
    assert fm.encode({}) == ""
    encoded = fm.encode({"title": "Map"})
    assert encoded == "---\ntitle: Map\n---\n"
    assert fm.decode(encoded + "- A") == ({"title": "Map"}, "- A")


def test_dump_tree_json():
    data = json.loads(dump_tree(TREE, "json"))
    assert data["content"] == "Root"
    assert "hasNote" not in data
    assert data["children"][1]["inlineNote"] == ""
    assert data["children"][1]["hasNote"] is True
    assert data["children"][2]["children"][0]["content"] == "Ünïcode"


def test_dump_tree_yaml():
    data = yaml.safe_load(dump_tree(TREE, "yaml"))
    assert data == TREE.to_dict()


@pytest.mark.parametrize("fmt", ["json", "yaml"])
def test_load_tree_reads_both_formats(fmt):
    assert load_tree(dump_tree(TREE, fmt)) == TREE


def test_dump_tree_unknown_format():
    with pytest.raises(ValueError):
        dump_tree(TREE, "xml")


def test_load_tree_rejects_non_mapping():
    with pytest.raises(ValueError):
        load_tree("- a\n- b\n")

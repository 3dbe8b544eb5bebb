"""Tests for the node annotator."""

from noteline.core.model import AnnotatedNode, PureNode, SeparatorConfig
from noteline.notes.annotator import DEFAULT_ALLOWED_TAGS, NodeAnnotator, annotate_tree


def quote(text: str) -> PureNode:
    return PureNode(f"<blockquote><p>{text}</p></blockquote>")


def test_inline_note_on_leaf():
    """A leaf with a separator gets an inline note."""
    result = annotate_tree(PureNode("Title: Note"))
    assert result == AnnotatedNode("Title", inline_note="Note")
    assert result.has_note


def test_plain_node_has_no_note():
    """No separator, no quote children: no note fields."""
    result = annotate_tree(PureNode("Title"))
    assert result.inline_note is None
    assert result.detailed_note is None
    assert not result.has_note


def test_empty_inline_note_still_counts_as_note():
    """'Title:' carries an empty inline note."""
    result = annotate_tree(PureNode("Title:"))
    assert result.inline_note == ""
    assert result.has_note


def test_detailed_note_from_children():
    """Leading quote children become the detailed note and are removed."""
    tree = PureNode("Topic", (quote("First"), quote("Second"), PureNode("Rest")))
    result = annotate_tree(tree)
    assert result.detailed_note == "First\nSecond"
    assert result.children == (AnnotatedNode("Rest"),)


def test_mixed_notes():
    """Inline and detailed notes combine on the same node."""
    tree = PureNode("Topic: inline", (quote("Detail"), PureNode("Child: note")))
    result = annotate_tree(tree)
    assert result.content == "Topic"
    assert result.inline_note == "inline"
    assert result.detailed_note == "Detail"
    assert result.children == (AnnotatedNode("Child", inline_note="note"),)


def test_recurses_into_grandchildren():
    """Every level of the tree is annotated."""
    tree = PureNode("A", (PureNode("B", (PureNode("C: c", (quote("deep"),)),)),))
    result = annotate_tree(tree)
    leaf = result.children[0].children[0]
    assert leaf == AnnotatedNode("C", inline_note="c", detailed_note="deep")


def test_foreign_markup_skips_note_parsing():
    """Links and other markup suppress parsing for that node only."""
    content = '<a href="http://example.com">link</a>: not a note'
    tree = PureNode(content, (quote("kept as child"), PureNode("Child: note")))
    result = annotate_tree(tree)
    assert result.content == content
    assert not result.has_note
    assert len(result.children) == 2
    assert result.children[1] == AnnotatedNode("Child", inline_note="note")


def test_allowed_inline_tags_do_not_suppress():
    """Emphasis and strong markup is fine."""
    result = annotate_tree(PureNode("<strong>Bold</strong>: <em>note</em>"))
    assert result.content == "<strong>Bold</strong>"
    assert result.inline_note == "<em>note</em>"


def test_allowed_tags_are_extensible():
    """Adding a tag to the allow-list enables parsing for it."""
    tree = PureNode("<code>x</code>: note")
    assert not NodeAnnotator().annotate(tree).has_note
    annotator = NodeAnnotator(allowed_tags=DEFAULT_ALLOWED_TAGS | {"code"})
    assert annotator.annotate(tree).inline_note == "note"


def test_blockquote_inside_content():
    """A quote wrapper embedded in content becomes the detailed note."""
    tree = PureNode("Topic: short<blockquote><p>Long note</p></blockquote>")
    result = annotate_tree(tree)
    assert result.content == "Topic"
    assert result.inline_note == "short"
    assert result.detailed_note == "Long note"


def test_blockquote_inside_content_and_children():
    """Embedded and leading-child quote blocks are combined."""
    tree = PureNode(
        "Topic<blockquote><p>One</p></blockquote>",
        (quote("Two"), PureNode("Child")),
    )
    result = annotate_tree(tree)
    assert result.detailed_note == "One\nTwo"
    assert result.children == (AnnotatedNode("Child"),)


def test_custom_separators():
    """The annotator honours its own separator config."""
    annotator = NodeAnnotator(SeparatorConfig(note="|"))
    assert annotator.annotate(PureNode("A | B")) == AnnotatedNode("A", inline_note="B")
    assert annotator.annotate(PureNode("A: B")) == AnnotatedNode("A: B")


def test_empty_note_separator_disables_inline_notes():
    """An empty note separator is a no-op."""
    annotator = NodeAnnotator(SeparatorConfig(note=""))
    assert annotator.annotate(PureNode("A: B")) == AnnotatedNode("A: B")


def test_empty_block_marker_disables_detailed_notes():
    """An empty block marker leaves quote children in place."""
    annotator = NodeAnnotator(SeparatorConfig(note_block=""))
    tree = PureNode("Topic", (quote("Detail"),))
    result = annotator.annotate(tree)
    assert result.detailed_note is None
    assert len(result.children) == 1


def test_instances_do_not_interfere():
    """Two differently configured annotators give independent results."""
    colon = NodeAnnotator()
    pipe = NodeAnnotator(SeparatorConfig(note="|"))
    tree = PureNode("A: B | C")
    assert colon.annotate(tree) == AnnotatedNode("A", inline_note="B | C")
    assert pipe.annotate(tree) == AnnotatedNode("A: B", inline_note="C")
    assert colon.annotate(tree) == AnnotatedNode("A", inline_note="B | C")


def test_deep_tree_does_not_hit_recursion_limit():
    """Annotation is iterative."""
    node = PureNode("leaf: note")
    for i in range(5000):
        node = PureNode(f"level {i}", (node,))
    result = annotate_tree(node)
    depth = 0
    while result.children:
        result = result.children[0]
        depth += 1
    assert depth == 5000
    assert result.inline_note == "note"


def test_input_tree_untouched():
    """The input tree is not modified."""
    tree = PureNode("A: B", (quote("x"),))
    annotate_tree(tree)
    assert tree == PureNode("A: B", (quote("x"),))

"""End-to-end tests running serial traversals through in_serial."""

from serialscrape import (
    NodeSpec,
    ScrapeContext,
    in_serial,
    many,
    run_serial_scope,
    scope_nodes,
    seek_next,
    sequenced,
    step_next,
    succeed,
    until_next,
)
from tests.scrape_helpers import any_text, element, is_tag, text_of

EXPECTED_ARTICLE = (
    "title",
    [
        ("Section 1", ["Paragraph 1.1", "Paragraph 1.2"]),
        ("Section 2", ["Paragraph 2.1"]),
    ],
)


def section_with_paragraphs():
    return seek_next(text_of("h2")).and_then(
        lambda heading: until_next(is_tag("h2"), many(seek_next(text_of("p")))).map(
            lambda paragraphs: (heading, paragraphs)
        )
    )


def test_article_with_combinators(article_spec):
    article = seek_next(text_of("h1")).and_then(
        lambda title: many(section_with_paragraphs()).map(lambda sections: (title, sections))
    )

    assert in_serial(article).scrape(article_spec) == EXPECTED_ARTICLE


def test_article_with_sequenced_generator(article_spec):
    @sequenced
    def section():
        heading = yield seek_next(text_of("h2"))
        paragraphs = yield until_next(is_tag("h2"), many(seek_next(text_of("p"))))
        return heading, paragraphs

    @sequenced
    def article():
        title = yield seek_next(text_of("h1"))
        sections = yield many(section())
        return title, sections

    assert in_serial(article())(article_spec) == EXPECTED_ARTICLE


def test_scope_outside_chroot_walks_the_forest(article_tree):
    forest = NodeSpec.of_forest(article_tree.children)

    assert run_serial_scope(forest, many(step_next(any_text()))) == [
        "title", "Section 1", "Paragraph 1.1", "Paragraph 1.2", "Section 2", "Paragraph 2.1",
    ]


def test_scope_outside_chroot_sees_only_the_container_itself(article_tree):
    spec = NodeSpec.of(article_tree)

    assert run_serial_scope(spec, many(step_next(lambda s: s.root.label["tag"]))) == ["article"]


def test_scope_of_empty_spec_fails():
    assert scope_nodes(NodeSpec()) is None
    assert in_serial(succeed(1)).scrape(NodeSpec()) is None


def test_scope_of_childless_container_is_empty():
    spec = NodeSpec.of(element("div")).chrooted()

    assert scope_nodes(spec) == []
    assert run_serial_scope(spec, many(step_next(any_text()))) == []


def test_child_specs_share_document_and_context(article_spec):
    document = object()
    spec = NodeSpec.of(article_spec.root, context=ScrapeContext(in_chroot=True), document=document)

    children = scope_nodes(spec)

    assert len(children) == 6
    assert all(child.document is document for child in children)
    assert all(child.context.in_chroot for child in children)
    assert children[0].root is article_spec.root.children[0]


def test_traversal_failure_surfaces_as_no_result(article_spec):
    assert in_serial(seek_next(text_of("table"))).scrape(article_spec) is None


def test_nested_serial_scope_inside_a_step(article_tree):
    outer = element("body", "", article_tree, element("footer", "bye"))
    spec = NodeSpec.of(outer).chrooted()
    headings = in_serial(many(seek_next(text_of("h2"))))

    assert run_serial_scope(spec, step_next(headings)) == ["Section 1", "Section 2"]

"""Document fixtures for serialscrape tests."""

import pytest

from serialscrape import NodeSpec
from tests.scrape_helpers import element


@pytest.fixture
def article_tree():
    return element(
        "article", "",
        element("h1", "title"),
        element("h2", "Section 1"),
        element("p", "Paragraph 1.1"),
        element("p", "Paragraph 1.2"),
        element("h2", "Section 2"),
        element("p", "Paragraph 2.1"),
    )


@pytest.fixture
def article_spec(article_tree):
    return NodeSpec.of(article_tree).chrooted()


@pytest.fixture
def letters():
    """Top-level specs a..e, one per sibling."""
    return [NodeSpec.of(element(name, name.upper())) for name in "abcde"]

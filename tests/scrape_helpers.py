"""Tiny scrapers over ``{"tag": ..., "text": ...}`` labels used by the tests."""

from serialscrape import Scraper, Tree


def element(tag, text="", *children):
    return Tree.node({"tag": tag, "text": text}, *children)


def tag_of(spec):
    return spec.root.label["tag"]


def text_of(tag):
    """Scraper yielding the text of a node with the given tag."""
    def scrape(spec):
        label = spec.root.label
        return label["text"] if label["tag"] == tag else None
    return Scraper(scrape, name=f"text_of({tag})")


def is_tag(tag):
    """Boundary-style scraper: True on a matching tag, no result otherwise."""
    return Scraper(lambda spec: True if tag_of(spec) == tag else None, name=f"is_tag({tag})")


def any_text():
    return Scraper(lambda spec: spec.root.label["text"], name="any_text")

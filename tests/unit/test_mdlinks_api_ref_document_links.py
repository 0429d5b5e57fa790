"""Unit tests for mdlinks.api.ref.document_links and DocumentLink."""

import pytest

from mdlinks.api.ref.document_links import document_links
from mdlinks.api.ref.SourceRange import SourceRange
from mdlinks.api.target.OpenAction import OpenAction

pytestmark = pytest.mark.ref

TEXT = "[a](./a.md) and `./b.txt`"


def test_one_link_per_hit(docs):
    links = document_links(TEXT, docs)

    assert [link.source_range for link in links] == [SourceRange(4, 10), SourceRange(17, 24)]
    assert [link.target_path for link in links] == [docs / "a.md", docs / "b.txt"]
    assert all(link.tooltip == "Open path" for link in links)


def test_no_links_in_plain_text(docs):
    assert document_links("nothing to see", docs) == []


def test_activation_opens_bound_target(docs, make_opener):
    opener = make_opener()
    links = document_links(TEXT, docs, opener)

    result = links[1].activate()

    assert result.action is OpenAction.CREATED
    assert (docs / "b.txt").is_file()
    assert not (docs / "a.md").exists()
    assert opener._impl.actions == [{"action": "show", "path": str(docs / "b.txt"), "text": ""}]


def test_activation_without_opener_raises(docs):
    links = document_links(TEXT, docs)
    with pytest.raises(RuntimeError, match="No opener bound"):
        links[0].activate()

"""Unit tests for mdlinks.api.ref.is_markdown_document."""

import pytest

from mdlinks.api.ref.is_markdown_document import is_markdown_document

pytestmark = pytest.mark.ref


@pytest.mark.parametrize(
    ("path", "expected"),
    [("a.md", True), ("docs/A.MD", True), ("a.markdown", True), ("a.txt", False), ("md", False), ("a.md.bak", False)],
)
def test_default_extensions(path, expected):
    assert is_markdown_document(path) is expected


def test_custom_extensions():
    assert is_markdown_document("page.mdx", [".mdx"])
    assert not is_markdown_document("page.md", [".mdx"])

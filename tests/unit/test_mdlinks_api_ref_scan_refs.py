"""Unit tests for mdlinks.api.ref.scan_refs."""

from itertools import combinations
from pathlib import Path

import pytest

from mdlinks.api.ref.RefPattern import RefPattern
from mdlinks.api.ref.scan_refs import scan_refs
from mdlinks.api.ref.SourceRange import SourceRange

pytestmark = pytest.mark.ref


def _spans(hits):
    return [(h.source_range.start, h.source_range.end) for h in hits]


def test_markdown_link_in_prose():
    hits = scan_refs("See [config](./config.json) for details.", "/proj/docs")

    assert len(hits) == 1
    assert hits[0].target_path == Path("/proj/docs/config.json")
    assert hits[0].source_range == SourceRange(13, 26)
    assert hits[0].pattern is RefPattern.MARKDOWN_LINK


def test_backticked_parent_reference():
    hits = scan_refs("Edit `../src/main.ts` now", "/proj/docs")

    assert len(hits) == 1
    assert hits[0].target_path == Path("/proj/src/main.ts")
    assert hits[0].source_range == SourceRange(6, 20)


def test_backtick_token_is_claimed_by_bare_pass():
    # A backtick is a valid leading character for bare references, and the
    # bare pass runs before the inline-code pass.
    hits = scan_refs("Edit `../src/main.ts` now", "/proj/docs")
    assert hits[0].pattern is RefPattern.BARE


def test_bare_reference_in_prose():
    hits = scan_refs("Path: ./missing/file.txt end", "/proj")

    assert len(hits) == 1
    assert hits[0].pattern is RefPattern.BARE
    assert hits[0].target_path == Path("/proj/missing/file.txt")
    assert hits[0].source_range == SourceRange(6, 24)


def test_code_span_and_bare_mention_give_one_hit():
    hits = scan_refs("`./a.txt`", "/proj")

    assert len(hits) == 1
    assert hits[0].target_path == Path("/proj/a.txt")
    assert hits[0].source_range == SourceRange(1, 8)


def test_separate_code_span_and_bare_mention_give_two_hits():
    hits = scan_refs("use `./a.txt` or ./a.txt", "/proj")
    assert _spans(hits) == [(5, 12), (17, 24)]
    assert {h.target_path for h in hits} == {Path("/proj/a.txt")}


def test_link_range_uses_token_position_not_label():
    # The label spells the same token; the range must point at the URL part.
    hits = scan_refs("[./x](./x)", "/proj")
    assert _spans(hits) == [(6, 9)]


def test_link_with_padding_whitespace():
    hits = scan_refs("[a]( ./b.md )", "/proj")
    assert _spans(hits) == [(5, 11)]
    assert hits[0].pattern is RefPattern.MARKDOWN_LINK


def test_links_come_before_bare_hits():
    hits = scan_refs("./first.md and [l](./second.md)", "/proj")

    assert [h.target_path.name for h in hits] == ["second.md", "first.md"]
    assert [h.pattern for h in hits] == [RefPattern.MARKDOWN_LINK, RefPattern.BARE]
    assert _spans(hits) == [(19, 30), (0, 10)]


def test_text_order_within_a_pass():
    hits = scan_refs("[a](./a.md) [b](./b.md) [c](./c.md)", "/proj")
    assert [h.target_path.name for h in hits] == ["a.md", "b.md", "c.md"]


def test_at_prefix_is_stripped_from_target_but_kept_in_range():
    hits = scan_refs("Read @./notes.md please", "/proj")

    assert hits[0].target_path == Path("/proj/notes.md")
    assert hits[0].source_range == SourceRange(5, 16)


def test_absolute_token_ignores_base_dir():
    hits = scan_refs("Log at /var/log/app.log today", "/proj")
    assert [h.target_path for h in hits] == [Path("/var/log/app.log")]


def test_dot_segments_are_collapsed():
    hits = scan_refs("[up](../../x.md)", "/proj/docs/sub")
    assert hits[0].target_path == Path("/proj/x.md")


def test_reference_on_later_line():
    hits = scan_refs("first line\n./second.md", "/proj")
    assert _spans(hits) == [(11, 22)]


@pytest.mark.parametrize("text", ["", "./", "../", "see / here", "plain prose", "word./x"])
def test_no_hits(text):
    assert scan_refs(text, "/proj") == []


def test_bracket_is_not_a_leading_character():
    assert scan_refs("]./x", "/proj") == []


def test_hits_never_intersect():
    text = (
        "[a](./a.md) `./a.md` (./b.md) @./c.md\n"
        "[x](./x.md)./y.md `../z` ./w.md` [nested [a]](./n.md) (/abs/p) ``./q``"
    )
    hits = scan_refs(text, "/proj")

    assert hits
    for first, second in combinations(hits, 2):
        assert not first.source_range.intersects(second.source_range)


def test_scanning_is_repeatable():
    text = "[a](./a.md) and ./b.md and `./c.md`"
    assert scan_refs(text, "/proj") == scan_refs(text, "/proj")
    assert scan_refs(text, "/other") != scan_refs(text, "/proj")


def test_does_not_touch_filesystem(tmp_path):
    scan_refs("[a](./missing/a.md) ./missing/b.md", tmp_path)
    assert list(tmp_path.iterdir()) == []

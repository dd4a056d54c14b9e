from emblem_engine.buffer import BufferDocument
from emblem_engine.structure import (
    LineClassifier,
    MarkedRegion,
    iter_marked_regions,
    marked_region,
)

TEMPLATE = "\n".join(
    [
        "/ note",
        "  hidden",
        "    deeper",
        "p",
        "  | text",
        "    more",
        "javascript:",
        "  alert(1)",
        "",
    ]
)


def make_document() -> BufferDocument:
    return BufferDocument.from_text(TEMPLATE)


def test_comment_region_covers_nested_lines() -> None:
    region = marked_region(make_document(), 0, LineClassifier())

    assert region == MarkedRegion(kind="comment", start=0, end=2)
    assert region.contains(2) is True
    assert region.contains(3) is False


def test_plain_tag_is_not_a_region() -> None:
    assert marked_region(make_document(), 3, LineClassifier()) is None


def test_text_and_embedded_regions() -> None:
    document = make_document()
    classifier = LineClassifier()

    assert marked_region(document, 4, classifier) == MarkedRegion("text_block", 4, 5)
    assert marked_region(document, 6, classifier) == MarkedRegion("embedded", 6, 7)


def test_iter_marked_regions_skips_nested_markers() -> None:
    document = BufferDocument.from_text("/\n  / inner\n    x\ndiv")

    regions = list(iter_marked_regions(document, LineClassifier()))

    assert regions == [MarkedRegion("comment", 0, 2)]


def test_iter_marked_regions_whole_template() -> None:
    regions = list(iter_marked_regions(make_document(), LineClassifier()))

    assert [(r.kind, r.start, r.end) for r in regions] == [
        ("comment", 0, 2),
        ("text_block", 4, 5),
        ("embedded", 6, 7),
    ]

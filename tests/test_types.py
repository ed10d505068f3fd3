import dataclasses

import pytest

from pdf_highlights.core.types import (
    AnnotationKind,
    ExtractedHighlight,
    ExtractionResult,
    TextFragment,
)


@pytest.mark.parametrize(
    "subtype,type_,expected",
    [
        ("Highlight", None, AnnotationKind.HIGHLIGHT),
        ("/Highlight", "/Annot", AnnotationKind.HIGHLIGHT),
        (None, "Highlight", AnnotationKind.HIGHLIGHT),
        ("highlight", None, AnnotationKind.OTHER),
        ("Underline", None, AnnotationKind.OTHER),
        ("/Text", "/Annot", AnnotationKind.OTHER),
        (None, None, AnnotationKind.OTHER),
    ],
)
def test_annotation_kind_resolution(subtype, type_, expected):
    assert AnnotationKind.resolve(subtype, type_) is expected


def test_fragment_bbox_is_anchored_at_origin():
    frag = TextFragment("Hello", (100, 700), 50, 15)
    assert frag.bbox == (100, 700, 150, 715)


def test_fragment_is_immutable():
    frag = TextFragment("Hello", (100, 700), 50, 15)
    with pytest.raises(dataclasses.FrozenInstanceError):
        frag.content = "Bye"


def test_result_summary_and_dict():
    result = ExtractionResult(
        highlights=[ExtractedHighlight("a", 1), ExtractedHighlight("b", 2, source="embedded")],
        pages_scanned=3,
    )
    assert result.summary == "Scanned 3 pages and found 2 highlights."
    data = result.to_dict()
    assert data["total_highlights"] == 2
    assert data["highlights"][1] == {
        "text": "b",
        "page": 2,
        "color": None,
        "color_css": None,
        "source": "embedded",
    }


def test_summary_mentions_skipped_pages():
    result = ExtractionResult(pages_scanned=2, skipped_pages=[3, 5])
    assert result.summary.endswith("Skipped unreadable pages: 3, 5.")

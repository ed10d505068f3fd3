from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TypedDict

Rect = Tuple[float, float, float, float]  # [x1, y1, x2, y2], any corner order
Color = Tuple[Any, ...]                   # native color space, passed through as-is


class AnnotationKind(Enum):
    HIGHLIGHT = "Highlight"
    OTHER = "Other"

    @classmethod
    def resolve(cls, subtype: Optional[str] = None, type_: Optional[str] = None) -> "AnnotationKind":
        """Map the `subtype`/`type` discriminators (producers use either) to a kind.

        Exact, case-sensitive match; a leading PDF name slash is ignored.
        """
        for value in (subtype, type_):
            if value is not None and str(value).lstrip("/") == cls.HIGHLIGHT.value:
                return cls.HIGHLIGHT
        return cls.OTHER


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of text, in PDF user space (origin bottom-left)."""
    content: str
    origin: Tuple[float, float]
    width: float
    height: float

    @property
    def bbox(self) -> Rect:
        x, y = self.origin
        return (x, y, x + self.width, y + self.height)


@dataclass(frozen=True)
class HighlightAnnotation:
    kind: AnnotationKind
    rect: Rect
    embedded_text: Optional[str] = None
    color: Optional[Color] = None


class HighlightRecord(TypedDict, total=False):
    text: str
    page: int
    color: Optional[List[Any]]
    color_css: Optional[str]
    source: str            # "embedded", "spatial" or "fallback"


@dataclass(frozen=True)
class ExtractedHighlight:
    text: str
    page: int
    color: Optional[Color] = None
    source: str = "spatial"

    @property
    def color_css(self) -> Optional[str]:
        if not self.color:
            return None
        return f"rgb({','.join(str(c) for c in self.color)})"

    def to_dict(self) -> HighlightRecord:
        return {
            "text": self.text,
            "page": self.page,
            "color": list(self.color) if self.color else None,
            "color_css": self.color_css,
            "source": self.source,
        }


@dataclass
class ExtractionResult:
    highlights: List[ExtractedHighlight] = field(default_factory=list)
    pages_scanned: int = 0
    skipped_pages: List[int] = field(default_factory=list)

    @property
    def summary(self) -> str:
        text = f"Scanned {self.pages_scanned} pages and found {len(self.highlights)} highlights."
        if self.skipped_pages:
            skipped = ", ".join(str(p) for p in self.skipped_pages)
            text += f" Skipped unreadable pages: {skipped}."
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pages_scanned": self.pages_scanned,
            "total_highlights": len(self.highlights),
            "summary": self.summary,
            "skipped_pages": list(self.skipped_pages),
            "highlights": [h.to_dict() for h in self.highlights],
        }

from typing import List, Optional, Set


def _parse_part(total_pages: int, part: str, original: str) -> Set[int]:
    if part == "first":
        return {1}
    if part == "last":
        return {total_pages}
    if "-" in part:
        s, e = part.split("-", 1)
        try:
            start = int(s) if s.strip() else 1
            end = int(e) if e.strip() else total_pages
        except ValueError:
            raise ValueError(f"Invalid page range: {original}")
        if start < 1 or end < start or start > total_pages:
            raise ValueError(f"Invalid page range: {original}")
        return set(range(start, min(end, total_pages) + 1))
    try:
        page = int(part)
    except ValueError:
        raise ValueError(f"Invalid page specification: {original}")
    if page < 1 or page > total_pages:
        raise ValueError(f"Page {page} out of range (1-{total_pages})")
    return {page}


def parse_page_range(total_pages: int, page_range: Optional[str]) -> List[int]:
    """Return ascending, de-duplicated one-based page numbers.

    Supports: None / "all", "first", "last", "N", "S-E" (either end may be
    omitted) and comma-separated combinations such as "1,3,5-7".
    """
    if total_pages <= 0:
        return []
    if page_range is None:
        return list(range(1, total_pages + 1))

    pr = str(page_range).strip().lower()
    if pr in ("", "all"):
        return list(range(1, total_pages + 1))

    pages: Set[int] = set()
    for part in pr.split(","):
        part = part.strip()
        if not part:
            continue
        pages |= _parse_part(total_pages, part, str(page_range))
    if not pages:
        raise ValueError(f"Invalid page range: {page_range}")
    return sorted(pages)

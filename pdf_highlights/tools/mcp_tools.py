import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from pdf_highlights.core import paths as _paths
from pdf_highlights.core.errors import HighlightExtractionError
from pdf_highlights.core.paths import ALLOWED_EXTENSIONS, find_file, is_allowed_directory
from pdf_highlights.core.walker import PageErrorPolicy, extract_highlights_from_file
from pdf_highlights.render.pdf import render_pdf
from pdf_highlights.render.text import export_file_name, render_clipboard_text, render_plain_text

logger = logging.getLogger(__name__)

mcp = FastMCP("PDF Highlights")

EXPORT_FORMATS = ("txt", "pdf", "clipboard")


def _policy(on_page_error: Optional[str]) -> PageErrorPolicy:
    return PageErrorPolicy(on_page_error or _paths.PAGE_ERROR_POLICY)


@mcp.tool()
async def extract_highlights(
    file_path: str,
    page_range: Optional[str] = None,
    on_page_error: Optional[str] = None,
) -> str:
    """Recover the text covered by each highlight annotation in a PDF.

    Parameters
    ----------
    file_path: str
        Filename (relative) or absolute path to the PDF. The file must reside within the configured accessible directories.
    page_range: Optional[str]
        `first`, `last`, `N`, `S-E`, comma-separated combinations, or `None` for all pages.
    on_page_error: Optional[str]
        `abort` (fail on the first unreadable page) or `skip` (leave it out and continue).
        Defaults to the server's `--on-page-error` setting.
    """
    path = find_file(file_path)
    if not path:
        return f"Error: Could not find file '{file_path}'."
    try:
        result = await asyncio.to_thread(
            extract_highlights_from_file, path, page_range, _policy(on_page_error)
        )
    except ValueError as ve:
        return f"Error: {ve}"
    except HighlightExtractionError as e:
        logger.error(f"Highlight extraction failed for {path}: {e}")
        return f"Error: {e.user_message}"

    payload = {
        "file_name": path.name,
        "path": str(path),
        "page_range": page_range or "all",
        **result.to_dict(),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


@mcp.tool()
async def export_highlights(
    file_path: str,
    format: str = "txt",
    output_dir: Optional[str] = None,
    page_range: Optional[str] = None,
) -> str:
    """Export a PDF's highlights as a text file, a PDF report, or clipboard-ready text.

    `txt` and `pdf` write `<name>_highlights.<ext>` next to the source PDF
    (or into `output_dir`, which must be an accessible directory) and
    return its path. `clipboard` returns the highlight texts directly,
    separated by blank lines.
    """
    fmt = (format or "txt").strip().lower()
    if fmt not in EXPORT_FORMATS:
        return f"Error: Unsupported format '{format}'. Use one of: {', '.join(EXPORT_FORMATS)}."

    path = find_file(file_path)
    if not path:
        return f"Error: Could not find file '{file_path}'."

    if output_dir is not None and not is_allowed_directory(output_dir):
        return f"Error: Output directory '{output_dir}' is not an accessible directory."
    target_dir = Path(output_dir).expanduser().resolve() if output_dir else path.parent

    try:
        result = await asyncio.to_thread(
            extract_highlights_from_file, path, page_range, _policy(None)
        )
    except ValueError as ve:
        return f"Error: {ve}"
    except HighlightExtractionError as e:
        logger.error(f"Highlight extraction failed for {path}: {e}")
        return f"Error: {e.user_message}"

    if fmt == "clipboard":
        return render_clipboard_text(result)

    out_path = target_dir / export_file_name(path.name, fmt)
    try:
        if fmt == "txt":
            out_path.write_text(render_plain_text(result, path.name), encoding="utf-8")
        else:
            await asyncio.to_thread(render_pdf, result, out_path, path.name)
    except OSError as e:
        logger.error(f"Could not write {out_path}: {e}")
        return f"Error: {e}"
    logger.info(f"Wrote {len(result.highlights)} highlights to {out_path}")
    return f"Exported {len(result.highlights)} highlights to {out_path}"


@mcp.tool()
async def show_accessible_directories() -> str:
    """Return the current directory/configuration constraints as JSON."""
    info = {
        "accessible_directories": _paths.SEARCH_DIRECTORIES,
        "directory_count": len(_paths.SEARCH_DIRECTORIES),
        "max_file_size_mb": _paths.MAX_FILE_SIZE // (1024 * 1024),
        "allowed_extensions": ALLOWED_EXTENSIONS,
        "on_page_error": _paths.PAGE_ERROR_POLICY,
    }
    return json.dumps(info, indent=2, ensure_ascii=False)

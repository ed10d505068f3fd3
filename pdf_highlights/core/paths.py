import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Limits and filters
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB
ALLOWED_EXTENSIONS = [".pdf"]

# What to do when a single page cannot be read: "abort" or "skip"
PAGE_ERROR_POLICY = "abort"

# Default search directories (used when no args are provided)
DEFAULT_SEARCH_DIRECTORIES = [
    os.path.expanduser("~/Downloads"),
    os.path.expanduser("~/Desktop"),
    os.path.expanduser("~/Documents"),
    os.getcwd(),
]

# Actual configured directories (initialized at runtime)
SEARCH_DIRECTORIES: List[str] = []


def parse_arguments(argv: Optional[Sequence[str]] = None):
    """Parse CLI arguments for accessible directories, limits and extraction policy."""
    parser = argparse.ArgumentParser(
        description="PDF Highlights MCP Server — recover the text under PDF highlight annotations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "\nExamples:\n"
            "  python main.py ~/Downloads ~/Documents\n"
            "  python main.py --allow-dir ~/Work --allow-dir /shared/pdfs\n"
            "  python main.py ~/Papers --on-page-error skip --log-level DEBUG\n"
        ),
    )

    parser.add_argument(
        "directories",
        nargs="*",
        help="Accessible directories for PDFs (space-separated)",
    )

    parser.add_argument(
        "--allow-dir",
        action="append",
        dest="allowed_dirs",
        help="Add an allowed directory (can be used multiple times)",
    )

    parser.add_argument(
        "--max-file-size",
        type=int,
        default=100 * 1024 * 1024,
        help="Maximum file size in bytes (default: 100MB)",
    )

    parser.add_argument(
        "--on-page-error",
        choices=["abort", "skip"],
        default="abort",
        help="abort the whole document on an unreadable page, or skip it and keep going (default: abort)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def _is_within(base: str, target: str) -> bool:
    base = os.path.join(os.path.realpath(base), "")  # ensure trailing separator
    target = os.path.realpath(target)
    return target.startswith(base) or target == base[:-1]


def _normalize_dir(d: str) -> str:
    return os.path.realpath(os.path.abspath(os.path.expanduser(d)))


def setup_search_directories(args) -> None:
    """Configure SEARCH_DIRECTORIES, MAX_FILE_SIZE and PAGE_ERROR_POLICY from parsed args.
    Falls back to DEFAULT_SEARCH_DIRECTORIES when no directory is usable.
    """
    global MAX_FILE_SIZE, PAGE_ERROR_POLICY

    MAX_FILE_SIZE = int(args.max_file_size)
    PAGE_ERROR_POLICY = getattr(args, "on_page_error", None) or "abort"

    provided: List[str] = []
    if getattr(args, "directories", None):
        provided.extend(args.directories)
    if getattr(args, "allowed_dirs", None):
        provided.extend(args.allowed_dirs)

    validated: List[str] = []
    for d in provided:
        real_path = _normalize_dir(d)
        if not os.path.isdir(real_path):
            logger.warning(f"Not a directory, skipped: {d} -> {real_path}")
            continue
        if not os.access(real_path, os.R_OK):
            logger.warning(f"Unreadable directory, skipped: {d} -> {real_path}")
            continue
        if real_path not in validated:
            validated.append(real_path)

    if not validated:
        if provided:
            logger.warning("No valid directories from arguments; falling back to defaults.")
        else:
            logger.info("Using default search directories.")
        validated = [_normalize_dir(d) for d in DEFAULT_SEARCH_DIRECTORIES if os.path.isdir(d)]

    # mutate in place so modules holding a reference see the update
    SEARCH_DIRECTORIES.clear()
    SEARCH_DIRECTORIES.extend(validated)


def is_allowed_directory(directory: str) -> bool:
    real_path = _normalize_dir(directory)
    return os.path.isdir(real_path) and any(_is_within(root, real_path) for root in SEARCH_DIRECTORIES)


def validate_and_resolve_path(file_path: str) -> Optional[Path]:
    """Validate a candidate file path and return an absolute Path if allowed and safe."""
    abs_path = os.path.expanduser(file_path) if file_path.startswith("~") else os.path.abspath(file_path)
    real_path = os.path.realpath(abs_path)

    # Must be within one of the allowed directories; block traversal
    is_safe = any(_is_within(allowed, real_path) for allowed in SEARCH_DIRECTORIES)
    if not is_safe or ".." in Path(file_path).parts:
        logger.warning(f"Security risk detected (outside allowed directories): {file_path}")
        return None

    resolved = Path(real_path)
    if not resolved.is_file():
        return None
    if resolved.suffix.lower() not in ALLOWED_EXTENSIONS:
        logger.warning(f"Disallowed file extension: {file_path}")
        return None
    try:
        size = resolved.stat().st_size
    except OSError as e:
        logger.error(f"Error validating path {file_path}: {e}")
        return None
    if size > MAX_FILE_SIZE:
        logger.warning(f"File too large: {file_path}")
        return None
    return resolved


def find_file(file_name: str) -> Optional[Path]:
    """Resolve an absolute path or search by name/substring within the configured directories."""
    if os.path.isabs(file_name) or file_name.startswith("~"):
        return validate_and_resolve_path(file_name)

    for directory in SEARCH_DIRECTORIES:
        dir_path = Path(directory)
        # Direct match
        path = validate_and_resolve_path(str(dir_path / file_name))
        if path:
            return path
        # Fuzzy match
        for pdf in sorted(dir_path.glob("*.pdf")):
            if file_name.lower() in pdf.name.lower():
                path = validate_and_resolve_path(str(pdf))
                if path:
                    return path

    logger.warning(f"File not found: {file_name}")
    return None

#!/usr/bin/env python3
"""
PDF Highlights MCP Server
Recovers the text covered by highlight annotations in PDF files and exports
it as plain text, a PDF report, or clipboard-ready notes.
"""

import logging

from pdf_highlights.backends.document import configure_backends
from pdf_highlights.core import paths
from pdf_highlights.tools.mcp_tools import mcp

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("PDFHighlights")


def main(argv=None):
    args = paths.parse_arguments(argv)
    logging.getLogger().setLevel(getattr(logging, args.log_level))
    configure_backends()
    paths.setup_search_directories(args)

    logger.info("Starting PDF Highlights MCP Server...")
    logger.info(f"Accessible directories: {paths.SEARCH_DIRECTORIES}")
    logger.info(f"Maximum file size: {paths.MAX_FILE_SIZE // (1024 * 1024)} MB")
    logger.info(f"Unreadable pages: {paths.PAGE_ERROR_POLICY}")

    mcp.run()


if __name__ == "__main__":
    main()

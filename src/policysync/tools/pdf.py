"""PDF text extraction tool."""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from policysync.core.errors import ExtractionError


logger = logging.getLogger(__name__)


class PDFTextExtractor:
    """Tool for converting PDF bytes into plain text."""

    def extract(self, data: bytes) -> str:
        """Extract the text of every page.

        Args:
            data: Raw PDF bytes.

        Returns:
            Page texts joined with blank lines. Layout is not preserved.

        Raises:
            ExtractionError: If the bytes cannot be opened as a PDF.
        """
        try:
            with fitz.open(stream=data, filetype="pdf") as doc:
                is_pdf = doc.is_pdf
                pages = [page.get_text() for page in doc] if is_pdf else []
        except Exception as e:
            msg = f"Failed to extract text from PDF: {e}"
            raise ExtractionError(msg) from e
        if not is_pdf:
            msg = "Failed to extract text from PDF: document is not a PDF"
            raise ExtractionError(msg)

        logger.debug("Extracted text from %d pages", len(pages))
        return "\n\n".join(pages)

"""
Text extraction for uploaded documents.

Plain text is decoded as UTF-8. PDFs are written to a temporary file and read
with LangChain PyPDFLoader; the temporary directory is always removed.

Dependencies: langchain_community.document_loaders
System role: Converts an upload into raw text for ingestion
"""

import logging
import shutil
import tempfile
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from backend.core.exceptions import ParsingError, UnsupportedDocumentError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
TEXT_CONTENT_TYPE = "text/plain"
SUPPORTED_CONTENT_TYPES = {PDF_CONTENT_TYPE, TEXT_CONTENT_TYPE}


def _base_content_type(content_type: str | None) -> str | None:
    # "text/plain; charset=utf-8" -> "text/plain"
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower()


def extract_pdf_text(data: bytes) -> str:
    """
    Extract text from PDF bytes, one page per line block.

    Raises:
        ParsingError: When the PDF cannot be read
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="notes_"))
    pdf_path = temp_dir / "upload.pdf"
    try:
        pdf_path.write_bytes(data)
        pages = PyPDFLoader(str(pdf_path)).load()
        return "\n".join(page.page_content for page in pages)
    except Exception as e:
        raise ParsingError(f"Failed to parse PDF: {e}", file_type="pdf") from e
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


def extract_text(data: bytes, content_type: str | None) -> str:
    """
    Extract raw text from an uploaded file.

    Args:
        data: File contents
        content_type: MIME type reported by the client

    Returns:
        str: Extracted text (may be empty)

    Raises:
        UnsupportedDocumentError: When the content type is neither PDF nor plain text
        ParsingError: When PDF parsing fails
    """
    base_type = _base_content_type(content_type)

    if base_type == PDF_CONTENT_TYPE:
        text = extract_pdf_text(data)
    elif base_type == TEXT_CONTENT_TYPE:
        text = data.decode("utf-8", errors="replace")
    else:
        raise UnsupportedDocumentError(content_type)

    logger.info(f"{__name__}:extract_text - type={base_type} bytes={len(data)} chars={len(text)}")
    return text

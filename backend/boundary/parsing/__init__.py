"""
Document parsing boundary layer.

Dependencies: langchain_community.document_loaders
System role: Text extraction from uploaded files
"""

from backend.boundary.parsing.text_extractor import (
    PDF_CONTENT_TYPE,
    SUPPORTED_CONTENT_TYPES,
    TEXT_CONTENT_TYPE,
    extract_pdf_text,
    extract_text,
)

__all__ = [
    "PDF_CONTENT_TYPE",
    "SUPPORTED_CONTENT_TYPES",
    "TEXT_CONTENT_TYPE",
    "extract_pdf_text",
    "extract_text",
]

import fitz  # PyMuPDF
import logging

logger = logging.getLogger(__name__)


def pdf_to_text(source) -> str:
    """
    Extract text from a resume PDF, one page per line block.
    Works with file paths, raw bytes and file-like objects (Streamlit uploads).
    Returns an empty string when the PDF cannot be read.
    """

    try:
        if isinstance(source, str):
            doc = fitz.open(source)
        elif isinstance(source, (bytes, bytearray)):
            doc = fitz.open(stream=bytes(source), filetype="pdf")
        else:
            file_bytes = source.read()
            doc = fitz.open(stream=file_bytes, filetype="pdf")

        with doc:
            text = "\n".join(page.get_text("text") for page in doc)
        return text.strip()

    except Exception as e:
        logger.warning(f"PDF extraction failed: {e}")
        return ""

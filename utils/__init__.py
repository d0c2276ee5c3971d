from .file_utils import setup_logging, ensure_pdf_suffix, human_size, list_pdfs

__all__ = ["setup_logging", "ensure_pdf_suffix", "human_size", "list_pdfs"]

"""Shared file I/O helpers."""

from .documents import dump_document, is_json_path, load_document, write_document_atomic, write_text_atomic

__all__ = ["dump_document", "is_json_path", "load_document", "write_document_atomic", "write_text_atomic"]

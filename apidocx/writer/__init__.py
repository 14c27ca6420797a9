"""Writer backends that persist a styled Document."""

from .docx_writer import DocxWriter, WriterError

__all__ = [
    "DocxWriter",
    "WriterError",
]

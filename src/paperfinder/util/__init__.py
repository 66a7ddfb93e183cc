from .mime import (
    AUDIO_MIMES,
    AUDIO_SUFFIX,
    DEFAULT_AUDIO_MIME,
    FOLDER_MIME,
    PDF_MIME,
    is_audio,
    is_folder,
    is_pdf,
)
from .time import format_timestamp, parse_rfc3339

__all__ = [
    "FOLDER_MIME",
    "PDF_MIME",
    "AUDIO_MIMES",
    "AUDIO_SUFFIX",
    "DEFAULT_AUDIO_MIME",
    "is_folder",
    "is_pdf",
    "is_audio",
    "parse_rfc3339",
    "format_timestamp",
]

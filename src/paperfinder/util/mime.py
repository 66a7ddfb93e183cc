from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
PDF_MIME: str = "application/pdf"

# Mime types the archive uses for listening recordings.
AUDIO_MIMES: tuple[str, ...] = ("audio/mpeg", "audio/mp3")

AUDIO_SUFFIX: str = ".mp3"
DEFAULT_AUDIO_MIME: str = "audio/mpeg"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_pdf(mime_type: str) -> bool:
    return mime_type == PDF_MIME


def is_audio(mime_type: str, name: str = "") -> bool:
    """
    Returns True for audio mime types, or for a `.mp3` name whose mime type
    does not claim to be a PDF or a folder.
    """
    if mime_type.startswith("audio/"):
        return True
    if is_pdf(mime_type) or is_folder(mime_type):
        return False
    return name.lower().endswith(AUDIO_SUFFIX)

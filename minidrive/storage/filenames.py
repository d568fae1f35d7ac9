"""
Upload and download filename handling.

Browsers put the raw UTF-8 bytes of a filename in the multipart
``Content-Disposition`` header. We read that header as one character per
byte and then run the two-stage repair below, which turns it back into the
real name. Clients rely on this exact behaviour, so keep both stages.
"""

from urllib.parse import quote

from fastapi import UploadFile
from python_multipart.multipart import parse_options_header

# encodeURIComponent leaves these unescaped besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def decode_upload_name(raw: str) -> str:
    """Reinterpret ``raw`` (one char per byte) as UTF-8 text.

    Stage one keeps the low 8 bits of every character; stage two decodes the
    resulting bytes as UTF-8, replacing invalid sequences with U+FFFD.
    """
    data = bytes(ord(char) & 0xFF for char in raw)
    return data.decode("utf-8", errors="replace")


def header_filename(upload: UploadFile) -> str:
    """The filename as it appeared in the part header, one char per byte."""
    disposition = upload.headers.get("content-disposition")
    if disposition:
        _, options = parse_options_header(disposition)
        raw = options.get(b"filename")
        if raw is not None:
            return raw.decode("latin-1")

    # No usable header: fall back to the parser's own (UTF-8) decoding
    return (upload.filename or "").encode("utf-8").decode("latin-1")


def encode_for_download_header(name: str) -> str:
    return quote(name, safe=_URI_COMPONENT_SAFE, encoding="utf-8")


def content_disposition(name: str) -> str:
    return f"attachment; filename*=UTF-8''{encode_for_download_header(name)}"

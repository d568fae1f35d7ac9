# minidrive/models/file.py
from datetime import datetime, timezone

from pydantic import BaseModel


class FileRecord(BaseModel):
    name: str   # decoded name the user uploaded
    path: str   # files/<userId>/<YYYY-MM-DD>/<name>, relative to base_dir
    date: str   # upload time, ISO-8601 UTC


def iso_timestamp(when: datetime) -> str:
    """Format like JavaScript's Date.toISOString(): ``2024-05-01T09:30:12.345Z``."""
    utc = when.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

# minidrive/storage/paths.py
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath

from werkzeug.security import safe_join

from minidrive.core.exceptions import InvalidFileName

FILES_DIRNAME = "files"


def upload_date(when: datetime) -> str:
    """Calendar date of ``when`` in UTC, e.g. ``2024-05-01``."""
    return when.astimezone(timezone.utc).date().isoformat()


class StoragePaths:
    """Where uploads live: ``<base_dir>/files/<userId>/<YYYY-MM-DD>/<name>``."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    @property
    def files_root(self) -> Path:
        return self.base_dir / FILES_DIRNAME

    def directory_for(self, user_id: str, when: datetime) -> Path:
        directory = self.files_root / user_id / upload_date(when)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def relative_path(self, user_id: str, when: datetime, name: str) -> str:
        """The ``path`` stored in the file index for an upload."""
        directory = f"{FILES_DIRNAME}/{user_id}/{upload_date(when)}"
        joined = safe_join(directory, name) if name else None
        # the file has to land directly in the date directory
        if joined is None or PurePosixPath(joined).parent != PurePosixPath(directory):
            raise InvalidFileName()
        return joined

    def target_for(self, user_id: str, when: datetime, name: str) -> Path:
        """Absolute path the upload's bytes are written to; creates its directory."""
        relative = self.relative_path(user_id, when, name)
        self.directory_for(user_id, when)
        return self.base_dir / relative

    def resolve(self, relative_path: str) -> Path:
        joined = safe_join(str(self.base_dir), relative_path)
        if joined is None:
            raise InvalidFileName()
        return Path(joined)

# minidrive/stores/file_index.py
from pathlib import Path

from minidrive.core.exceptions import NotFound
from minidrive.models.file import FileRecord
from minidrive.stores.document import JsonDocument


class FileIndex:
    """files.json: user ID -> list of file records, in upload order.

    Lookups are linear scans by name and always take the first match, so
    when a name was uploaded twice only the oldest entry is found or removed.
    """

    def __init__(self, path: Path):
        self.document = JsonDocument(path)

    def list_for(self, user_id: str) -> list[FileRecord]:
        files = self.document.load()
        return [FileRecord.model_validate(raw) for raw in files.get(user_id, [])]

    def append(self, user_id: str, record: FileRecord) -> None:
        files = self.document.load()
        files.setdefault(user_id, []).append(record.model_dump())
        self.document.save(files)

    def find_by_name(self, user_id: str, name: str) -> FileRecord | None:
        for record in self.list_for(user_id):
            if record.name == name:
                return record
        return None

    def remove_at(self, user_id: str, name: str) -> None:
        files = self.document.load()
        entries = files.get(user_id, [])

        for position, raw in enumerate(entries):
            if raw.get("name") == name:
                break
        else:
            raise NotFound()

        del entries[position]
        self.document.save(files)

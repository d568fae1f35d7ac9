# minidrive/stores/credentials.py
import logging
import uuid
from pathlib import Path

from minidrive.core.exceptions import AlreadyExists, InvalidCredentials
from minidrive.core.security import hash_password, verify_password
from minidrive.models.user import CurrentUser, UserRecord
from minidrive.stores.document import JsonDocument

logger = logging.getLogger(__name__)


class CredentialStore:
    """users.json: login ID -> {userId, password digest}."""

    def __init__(self, path: Path):
        self.document = JsonDocument(path)

    def register(self, login_id: str, password: str) -> str:
        users = self.document.load()
        if login_id in users:
            raise AlreadyExists()

        record = UserRecord(user_id=str(uuid.uuid4()), password=hash_password(password))
        users[login_id] = record.model_dump(by_alias=True)
        self.document.save(users)

        logger.info("Registered login %s as user %s", login_id, record.user_id)
        return record.user_id

    def authenticate(self, login_id: str, password: str) -> CurrentUser:
        raw = self.document.load().get(login_id)
        if raw is None:
            raise InvalidCredentials()

        record = UserRecord.model_validate(raw)
        if not verify_password(password, record.password):
            raise InvalidCredentials()
        return CurrentUser(user_id=record.user_id, login_id=login_id)

# minidrive/models/user.py
from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """One entry of users.json, keyed by login ID."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")  # storage namespace, uuid4
    password: str                         # sha256 hex digest


class CurrentUser(BaseModel):
    """Who the current session belongs to."""

    user_id: str
    login_id: str

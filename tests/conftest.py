"""Shared fixtures: every test gets its own base directory under tmp_path."""

import pytest
from fastapi.testclient import TestClient

from minidrive.core.config import Settings
from minidrive.main import create_app
from minidrive.storage.paths import StoragePaths
from minidrive.stores.credentials import CredentialStore
from minidrive.stores.file_index import FileIndex


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a throwaway directory."""
    return Settings(base_dir=tmp_path, secret_key="test-secret")


@pytest.fixture
def credentials(settings):
    return CredentialStore(settings.users_file)


@pytest.fixture
def file_index(settings):
    return FileIndex(settings.files_file)


@pytest.fixture
def storage(settings):
    return StoragePaths(settings.base_dir)


@pytest.fixture
def client(settings):
    """A test client for an app that stores everything under tmp_path."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def logged_in_client(client, credentials):
    """Client whose session belongs to a registered user ``alice``."""
    credentials.register("alice", "secret")
    response = client.post(
        "/login",
        data={"loginId": "alice", "password": "secret"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client


@pytest.fixture
def lenient_client(settings, credentials):
    """Logged-in client that turns unhandled server errors into 500s."""
    credentials.register("alice", "secret")
    with TestClient(create_app(settings), raise_server_exceptions=False) as test_client:
        test_client.post(
            "/login",
            data={"loginId": "alice", "password": "secret"},
            follow_redirects=False,
        )
        yield test_client

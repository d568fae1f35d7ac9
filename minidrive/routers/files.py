import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Request, Depends, UploadFile, File as FastAPIFile
from fastapi.responses import HTMLResponse, RedirectResponse, FileResponse
from fastapi.templating import Jinja2Templates

from minidrive.core.exceptions import NotFound
from minidrive.core.session import current_user_or_none, get_current_user
from minidrive.models.file import FileRecord, iso_timestamp
from minidrive.models.user import CurrentUser
from minidrive.storage.filenames import content_disposition, decode_upload_name, header_filename
from minidrive.storage.paths import StoragePaths
from minidrive.stores.file_index import FileIndex

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")
logger = logging.getLogger(__name__)


# --- per-request dependencies (same pattern as in auth.py) ---
def get_file_index(request: Request) -> FileIndex:
    return FileIndex(request.app.state.settings.files_file)


def get_storage(request: Request) -> StoragePaths:
    return StoragePaths(request.app.state.settings.base_dir)


# --- show user's files (dashboard) ---
@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, index: FileIndex = Depends(get_file_index)):
    user = current_user_or_none(request)
    if not user:
        return RedirectResponse(url="/login", status_code=303)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "login_id": user.login_id,
            "files": index.list_for(user.user_id),
        },
    )


# --- upload a new file ---
@router.post("/upload")
def upload_file(
    file: UploadFile = FastAPIFile(...),
    user: CurrentUser = Depends(get_current_user),
    index: FileIndex = Depends(get_file_index),
    storage: StoragePaths = Depends(get_storage),
):
    name = decode_upload_name(header_filename(file))

    # one clock read for both the date directory and the record timestamp
    now = datetime.now(timezone.utc)
    target = storage.target_for(user.user_id, now, name)

    content = file.file.read()
    target.write_bytes(content)

    index.append(
        user.user_id,
        FileRecord(
            name=name,
            path=storage.relative_path(user.user_id, now, name),
            date=iso_timestamp(now),
        ),
    )
    logger.info("Stored %s (%d bytes) for user %s", target, len(content), user.user_id)

    return RedirectResponse(url="/dashboard", status_code=303)


# --- download a file ---
@router.get("/download/{file_name}")
def download_file(
    file_name: str,
    user: CurrentUser = Depends(get_current_user),
    index: FileIndex = Depends(get_file_index),
    storage: StoragePaths = Depends(get_storage),
):
    record = index.find_by_name(user.user_id, file_name)
    if record is None:
        raise NotFound()

    return FileResponse(
        storage.resolve(record.path),
        headers={"Content-Disposition": content_disposition(record.name)},
    )


# --- delete a file ---
@router.post("/delete/{file_name}")
def delete_file(
    file_name: str,
    user: CurrentUser = Depends(get_current_user),
    index: FileIndex = Depends(get_file_index),
    storage: StoragePaths = Depends(get_storage),
):
    record = index.find_by_name(user.user_id, file_name)
    if record is None:
        raise NotFound()

    # disk first, then the index; nothing is rolled back if the second step fails
    storage.resolve(record.path).unlink()
    index.remove_at(user.user_id, file_name)
    logger.info("Deleted %s for user %s", record.path, user.user_id)

    return RedirectResponse(url="/dashboard", status_code=303)

import logging
from pathlib import Path

from fastapi import APIRouter, Request, Form, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from minidrive.core.exceptions import InvalidCredentials
from minidrive.core.session import SESSION_USER_ID, end_session, start_session
from minidrive.stores.credentials import CredentialStore

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")
logger = logging.getLogger(__name__)


# credential store dependency, built per request from the app's settings
def get_credentials(request: Request) -> CredentialStore:
    return CredentialStore(request.app.state.settings.users_file)


@router.get("/register", response_class=HTMLResponse)
def register_page(request: Request):
    return templates.TemplateResponse(request, "register.html")


@router.post("/register")
def register(
    login_id: str = Form("", alias="loginId"),
    password: str = Form(""),
    credentials: CredentialStore = Depends(get_credentials),
):
    # AlreadyExists propagates and is rendered as 400 text
    credentials.register(login_id, password)
    return RedirectResponse(url="/login", status_code=303)


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html")


@router.post("/login")
def login(
    request: Request,
    login_id: str = Form("", alias="loginId"),
    password: str = Form(""),
    credentials: CredentialStore = Depends(get_credentials),
):
    try:
        user = credentials.authenticate(login_id, password)
    except InvalidCredentials:
        logger.warning("Failed login for %s", login_id)
        raise

    # login success → remember the user in the signed session cookie
    start_session(request, user)
    logger.info("User %s logged in", user.user_id)
    return RedirectResponse(url="/dashboard", status_code=303)


@router.get("/logout")
def logout(request: Request):
    user_id = request.session.get(SESSION_USER_ID)
    end_session(request)
    if user_id:
        logger.info("User %s logged out", user_id)
    return RedirectResponse(url="/", status_code=303)

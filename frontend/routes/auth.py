"""
Placeholder authentication pages.

Forms are validated but no credentials are checked or stored and no
session is created.
"""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..forms import LoginForm, SignupForm
from ..templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html", {"form": {}, "errors": {}})


@router.post("/login", response_class=HTMLResponse)
async def login(request: Request):
    data = dict(await request.form())
    form, errors = LoginForm.parse_form(data)
    if errors:
        data.pop("password", None)
        return templates.TemplateResponse(
            request, "login.html", {"form": data, "errors": errors}, status_code=422
        )

    logger.info(f"Login attempt for {form.email}")
    return RedirectResponse(url="/", status_code=303)


@router.get("/signup", response_class=HTMLResponse)
async def signup_page(request: Request, role: str = Query("seeker")):
    initial_role = "employer" if role == "employer" else "seeker"
    return templates.TemplateResponse(
        request, "signup.html", {"form": {"role": initial_role}, "errors": {}}
    )


@router.post("/signup", response_class=HTMLResponse)
async def signup(request: Request):
    data = dict(await request.form())
    form, errors = SignupForm.parse_form(data)
    if errors:
        data.pop("password", None)
        return templates.TemplateResponse(
            request, "signup.html", {"form": data, "errors": errors}, status_code=422
        )

    logger.info(f"Signup for {form.email} as {form.role}")
    return RedirectResponse(url="/auth/login", status_code=303)

# app/api/auth.py

from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from app.api.dependencies import get_identity_provider
from app.api.responses import to_response
from app.core.config import Settings, get_settings
from app.services.auth import IdentityProvider, authenticate

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=None)
def login(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    provider: IdentityProvider = Depends(get_identity_provider),
    settings: Settings = Depends(get_settings),
) -> Response:
    form = {"email": email, "password": password}
    return to_response(
        authenticate(provider, None, form, redirect_to=settings.dashboard_path)
    )

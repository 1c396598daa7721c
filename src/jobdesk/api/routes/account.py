from __future__ import annotations

from fastapi import APIRouter, Depends

from jobdesk.api.deps import backend_client, bearer_token, current_user
from jobdesk.core.config import env_status
from jobdesk.core.errors import NotFoundError
from jobdesk.core.models import AuthUser
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient

router = APIRouter(prefix="/api", tags=["account"])


@router.get("/profile")
async def get_profile(
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    """The caller's profile, including the remaining credit balance."""
    profile = await repository.get_profile(client, user.id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return {"profile": profile.model_dump(mode="json")}


@router.get("/test-env", dependencies=[Depends(bearer_token)])
async def test_env():
    """Report which configuration keys are present (never their values).

    Only the token's presence is checked, so this answers even when the
    backend settings are missing.
    """
    return env_status()

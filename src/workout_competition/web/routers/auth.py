"""Sign-in routes."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse

from ...auth.identity import sign_in
from ...config import get_session_cookie_name
from ..session import get_current_user, get_db_path, get_identity

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(request: Request, email: str = Form(...)):
    """Sign in by email and set the session cookie."""
    try:
        user, token = await sign_in(email, get_db_path(request))
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    response = JSONResponse({"status": "signed_in", "user": user.to_dict()})
    response.set_cookie(
        get_session_cookie_name(),
        token,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout(request: Request):
    """Sign out and clear the session cookie."""
    await get_identity(request).sign_out()

    response = JSONResponse({"status": "signed_out"})
    response.delete_cookie(get_session_cookie_name())
    return response


@router.get("/me")
async def me(request: Request):
    """Get the signed-in user."""
    user = await get_current_user(request)
    if user is None:
        return JSONResponse({"error": "Not signed in"}, status_code=401)
    return {"user": user.to_dict()}

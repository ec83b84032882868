from fastapi import APIRouter, Body, Depends

from flora.api.dependencies import Services, get_services
from flora.events.event_helpers import notify_success

router = APIRouter(prefix="/api")


@router.post("/login")
def login(payload: dict = Body(...), services: Services = Depends(get_services)):
    session = services.accounts.login(payload)
    notify_success(f"Welcome {session.name}")
    return {"status": "success", "user": session.to_dict(), "next_route": "Home"}


@router.post("/register")
def register(payload: dict = Body(...), services: Services = Depends(get_services)):
    session = services.accounts.register(payload)
    notify_success("Account created successfully! Please login to continue.")
    return {"status": "success", "user": session.to_dict(), "next_route": "Login"}


@router.post("/logout")
def logout(services: Services = Depends(get_services)):
    services.accounts.logout()
    return {"status": "success", "next_route": "Login"}


@router.get("/session")
def session_status(services: Services = Depends(get_services)):
    """Which screen the app opens on: Home with a stored session, Login otherwise."""
    logged_in = services.sessions.is_logged_in()
    return {"logged_in": logged_in, "initial_route": "Home" if logged_in else "Login"}


@router.get("/profile")
def profile(services: Services = Depends(get_services)):
    user = services.accounts.require_user()
    return user.to_dict()

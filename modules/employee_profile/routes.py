# modules/employee_profile/routes.py
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from core.templates import templates
from modules.employee_profile import services
from modules.employee_profile.dates import calculate_detailed_duration
from modules.employee_profile.schemas import (
    DurationOut,
    DurationRequest,
    ProfileRequest,
    ProfileView,
    TimelineOut,
)

api = APIRouter(prefix="/api/v1/employee-profile", tags=["Employee Profile API"])
pages = APIRouter(prefix="/employee-profile")


# ---------- API ----------
@api.post("/view", response_model=ProfileView)
def profile_view(
    payload: ProfileRequest,
    mode: Optional[str] = Query(None, description="personal | service | financial | documents | all | profile"),
    today: Optional[date] = Query(None, description="reference date for open spans (YYYY-MM-DD)"),
):
    return services.build_profile_view(
        payload.employee,
        view_mode=mode,
        compliance=payload.compliance,
        master=payload.master_data,
        today=today,
    )


@api.post("/timeline", response_model=TimelineOut)
def profile_timeline(
    payload: ProfileRequest,
    today: Optional[date] = Query(None),
):
    return services.get_timeline(payload.employee, today=today, master=payload.master_data)


@api.post("/durations/detailed", response_model=DurationOut)
def detailed_duration(payload: DurationRequest, today: Optional[date] = Query(None)):
    return DurationOut(duration=calculate_detailed_duration(payload.start, payload.end, today))


@api.get("/health")
def health():
    return {"status": "ok"}


# ---------- UI ----------
@pages.post("/render", response_class=HTMLResponse)
def render_profile(
    request: Request,
    payload: ProfileRequest,
    mode: Optional[str] = Query(None),
    today: Optional[date] = Query(None),
):
    view = services.build_profile_view(
        payload.employee,
        view_mode=mode,
        compliance=payload.compliance,
        master=payload.master_data,
        today=today,
    )
    return templates.TemplateResponse(request, "employee_profile/profile.html", {"view": view})

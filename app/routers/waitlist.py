# =============================================================================
# app/routers/waitlist.py - Waitlist Signup Endpoint
# =============================================================================
# POST joins the waitlist. Every other method gets a 405 with the same
# {"error": ...} body the landing page expects, without touching the
# database.
# =============================================================================

from fastapi import APIRouter, BackgroundTasks, Request

from app.dependencies import WaitlistServiceDep
from app.exceptions import MethodNotAllowedError
from core.models.signup import WaitlistRequest, WaitlistResponse

router = APIRouter()


@router.post("", response_model=WaitlistResponse)
async def join_waitlist(
    payload: WaitlistRequest,
    background_tasks: BackgroundTasks,
    service: WaitlistServiceDep,
):
    """
    Join the waitlist.

    - **email**: required
    - **name**, **message**: optional

    Returns 400 for an invalid or already registered email, 500 if the
    signup could not be saved. The welcome email is sent after the response
    and never affects it.
    """
    service.submit(payload, defer=background_tasks.add_task)

    return WaitlistResponse()


@router.api_route(
    "",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def waitlist_method_not_allowed(request: Request):
    """Reject anything that isn't a POST."""
    raise MethodNotAllowedError(request.method)

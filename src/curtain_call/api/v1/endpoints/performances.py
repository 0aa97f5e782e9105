# src/curtain_call/api/v1/endpoints/performances.py
"""Performance pages and the "wanna" toggle."""

import logging

from fastapi import APIRouter, Form
from fastapi.responses import Response

from curtain_call.api.v1.dependencies import (
    CsrfDep,
    CurrentUserDep,
    EntityId,
    PerformanceRepoDep,
    SessionDep,
    WannaRepoDep,
)
from curtain_call.api.v1.responder import not_found, redirect, render
from curtain_call.schemas.performance import PerformanceResponse

router = APIRouter(prefix="/performances", tags=["performances"])
logger = logging.getLogger(__name__)

WANNA_FORM_SCOPE = "performances/wanna"


@router.get("/{performance_id}")
async def show_performance(
    performance_id: EntityId,
    current_user: CurrentUserDep,
    performances: PerformanceRepoDep,
    wannas: WannaRepoDep,
    csrf: CsrfDep,
) -> Response:
    performance = performances.fetch_by_id(performance_id)
    if performance is None:
        not_found("Performance not found")

    return render("performances/show", {
        "performance": PerformanceResponse.model_validate(performance),
        "wanna": wannas.exists(current_user["id"], performance.id),
        "_token": csrf.generate(WANNA_FORM_SCOPE),
    })


@router.post("/{performance_id}/wanna")
async def add_wanna(
    performance_id: EntityId,
    current_user: CurrentUserDep,
    db: SessionDep,
    performances: PerformanceRepoDep,
    wannas: WannaRepoDep,
    csrf: CsrfDep,
    token: str | None = Form(None, alias="_token"),
) -> Response:
    """Mark the performance as one the user wants to see.

    The exists check and the insert are not atomic; two concurrent requests
    can still store two rows.
    """
    if performances.fetch_by_id(performance_id) is None:
        not_found("Performance not found")
    if not csrf.verify(WANNA_FORM_SCOPE, token):
        return redirect(f"/performances/{performance_id}")

    if not wannas.exists(current_user["id"], performance_id):
        wannas.insert(current_user["id"], performance_id)
        db.commit()
        logger.info("User %s wants performance %s", current_user["id"], performance_id)
    return redirect(f"/performances/{performance_id}")


@router.post("/{performance_id}/unwanna")
async def remove_wanna(
    performance_id: EntityId,
    current_user: CurrentUserDep,
    db: SessionDep,
    wannas: WannaRepoDep,
    csrf: CsrfDep,
    token: str | None = Form(None, alias="_token"),
) -> Response:
    """Withdraw the user's interest in the performance."""
    if not csrf.verify(WANNA_FORM_SCOPE, token):
        return redirect(f"/performances/{performance_id}")

    wannas.delete(current_user["id"], performance_id)
    db.commit()
    return redirect(f"/performances/{performance_id}")

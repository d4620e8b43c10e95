from __future__ import annotations

from fastapi import APIRouter, Depends

from complexcalc.application.dtos.calculator_dto import ComplexValue, MemoryResponse, ValueRequest
from complexcalc.application.dtos.common_dto import ErrorResponse
from complexcalc.infrastructure.api.dependencies import get_current_user, get_sessions
from complexcalc.infrastructure.session.session_store import SessionStore

router = APIRouter(
    prefix="/memory",
    tags=["Memory"],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid or missing authentication token"},
        422: {"description": "Validation Error - Invalid request format"},
    },
)


@router.get("", response_model=MemoryResponse, summary="Memory Read (MR)")
def read_memory(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    with sessions.open(user.id) as session:
        return MemoryResponse(value=ComplexValue.from_domain(session.memory.read_memory()))


@router.post("/set", response_model=MemoryResponse, summary="Memory Store (MS)")
def set_memory(
    body: ValueRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    with sessions.open(user.id) as session:
        session.memory.set_memory(body.value.to_domain())
        return MemoryResponse(value=ComplexValue.from_domain(session.memory.read_memory()))


@router.post("/add", response_model=MemoryResponse, summary="Memory Add (M+)")
def add_to_memory(
    body: ValueRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    with sessions.open(user.id) as session:
        session.memory.add_to_memory(body.value.to_domain())
        return MemoryResponse(value=ComplexValue.from_domain(session.memory.read_memory()))


@router.delete("", response_model=MemoryResponse, summary="Memory Clear (MC)")
def clear_memory(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    with sessions.open(user.id) as session:
        session.memory.clear_memory()
        return MemoryResponse(value=ComplexValue.from_domain(session.memory.read_memory()))

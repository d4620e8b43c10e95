from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from complexcalc.application.dtos.common_dto import ErrorResponse, SuccessResponse
from complexcalc.application.dtos.history_dto import (
    ExportHistoryResponse,
    HistoryItem,
    ImportHistoryRequest,
    ListHistoryResponse,
    NavigationResponse,
    PersistHistoryRequest,
    PersistHistoryResponse,
)
from complexcalc.application.use_cases.calculator_session import CalculatorSession
from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.errors import CalculatorError
from complexcalc.infrastructure.api.dependencies import (
    get_current_user,
    get_history_storage,
    get_sessions,
    http_error,
)
from complexcalc.infrastructure.session.session_store import SessionStore
from complexcalc.infrastructure.storage.history_storage import HistoryStorage

router = APIRouter(
    prefix="/history",
    tags=["Calculation History"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Unknown operation or malformed history text"},
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid or missing authentication token"},
        404: {"model": ErrorResponse, "description": "Not Found - History index out of range"},
        422: {"description": "Validation Error - Invalid request format"},
        500: {"model": ErrorResponse, "description": "Internal Server Error - History storage could not be read or written"},
    },
)


def _navigation(session: CalculatorSession, entry: HistoryEntry | None) -> NavigationResponse:
    index = session.cursor.index
    return NavigationResponse(
        moved=entry is not None,
        cursor=index,
        entry=HistoryItem.from_entry(index, entry) if entry is not None else None,
    )


@router.get(
    "",
    response_model=ListHistoryResponse,
    summary="List Calculation History",
    description="""
    Retrieve every recorded calculation of the session, oldest first, with
    the current undo/redo cursor.

    **Authentication required**: Yes (Bearer token)
    """,
    response_description="History entries and cursor position",
)
def list_history(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    """Get the session history."""
    with sessions.open(user.id) as session:
        items = [HistoryItem.from_entry(i, e) for i, e in enumerate(session.history.entries())]
        return ListHistoryResponse(history=items, size=len(items), cursor=session.cursor.index)


@router.get(
    "/export",
    response_model=ExportHistoryResponse,
    summary="Export History",
    description="Serialize the history to the persisted text format.",
)
def export_history(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    with sessions.open(user.id) as session:
        return ExportHistoryResponse(text=session.export_history(), size=session.history.get_history_size())


@router.post(
    "/import",
    response_model=ListHistoryResponse,
    summary="Import History",
    description="""
    Replace the history with a serialized document.

    The document is parsed completely before anything changes: an unknown
    operation name or a malformed number returns 400 and leaves the current
    history untouched.
    """,
)
def import_history(
    body: ImportHistoryRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    with sessions.open(user.id) as session:
        try:
            session.import_history(body.text)
        except CalculatorError as exc:
            raise http_error(exc) from exc
        items = [HistoryItem.from_entry(i, e) for i, e in enumerate(session.history.entries())]
        return ListHistoryResponse(history=items, size=len(items), cursor=session.cursor.index)


@router.post(
    "/save",
    response_model=PersistHistoryResponse,
    summary="Save History",
    description="Store the history as a named document.",
)
def save_history(
    body: PersistHistoryRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
    storage: HistoryStorage = Depends(get_history_storage),
):
    with sessions.open(user.id) as session:
        try:
            path = storage.save(session, body.name)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return PersistHistoryResponse(
            name=body.name, path=path, size=session.history.get_history_size(), cursor=session.cursor.index
        )


@router.post(
    "/load",
    response_model=PersistHistoryResponse,
    summary="Load History",
    description="""
    Replace the history with a previously saved document.

    Missing documents return 500 with the attempted path; unknown operations
    or malformed numbers return 400. In both cases the current history is kept.
    """,
)
def load_history(
    body: PersistHistoryRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
    storage: HistoryStorage = Depends(get_history_storage),
):
    with sessions.open(user.id) as session:
        try:
            path = storage.load(session, body.name)
        except CalculatorError as exc:
            raise http_error(exc) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PersistHistoryResponse(
            name=body.name, path=path, size=session.history.get_history_size(), cursor=session.cursor.index
        )


@router.post("/undo", response_model=NavigationResponse, summary="Undo")
def undo(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    """Step the cursor back one entry; no-op at the first entry."""
    with sessions.open(user.id) as session:
        try:
            entry = session.undo()
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return _navigation(session, entry)


@router.post("/redo", response_model=NavigationResponse, summary="Redo")
def redo(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    """Step the cursor forward one entry; no-op at the newest entry."""
    with sessions.open(user.id) as session:
        try:
            entry = session.redo()
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return _navigation(session, entry)


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Clear History",
    description="Empty the history log and reset the cursor.",
)
def clear_history(user=Depends(get_current_user), sessions: SessionStore = Depends(get_sessions)):
    with sessions.open(user.id) as session:
        session.clear_history()
        session.reset_cursor()
        return SuccessResponse(ok=True, message="History cleared")


@router.get(
    "/{index}",
    response_model=HistoryItem,
    summary="Get History Entry",
    description="Retrieve one recorded calculation by its position in the log.",
)
def get_history_entry(
    index: int,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    with sessions.open(user.id) as session:
        try:
            entry = session.history.get_history_entry(index)
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return HistoryItem.from_entry(index, entry)

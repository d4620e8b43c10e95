from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from complexcalc.application.dtos.calculator_dto import (
    CalculateRequest,
    CalculationResponse,
    ComplexValue,
    ListOperationsResponse,
    OperationInfo,
    OperatorRequest,
    PendingOperationResponse,
    ShapeRequest,
    ValueRequest,
)
from complexcalc.application.dtos.common_dto import ErrorResponse
from complexcalc.application.use_cases.calculator_session import CalculatorSession
from complexcalc.domain.entities.calculation import CalculationResult
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import CalculatorError
from complexcalc.infrastructure.api.dependencies import get_current_user, get_sessions, http_error
from complexcalc.infrastructure.session.session_store import SessionStore

router = APIRouter(
    prefix="/calculator",
    tags=["Calculator"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Division by zero, missing operand or invalid input"},
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid or missing authentication token"},
        422: {"description": "Validation Error - Invalid request format"},
    },
)


def _response(session: CalculatorSession, calc: CalculationResult) -> CalculationResponse:
    return CalculationResponse.from_result(
        calc, history_size=session.history.get_history_size(), cursor=session.cursor.index
    )


@router.get(
    "/operations",
    response_model=ListOperationsResponse,
    summary="List Operations",
    description="List every supported operation with its arity and display symbol.",
)
def list_operations():
    """List supported operations."""
    return ListOperationsResponse(
        operations=[OperationInfo(identity=op.value, arity=op.arity, symbol=op.symbol) for op in Operation]
    )


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    summary="Calculate",
    description="""
    Apply one operation and record it in the session history.

    **Operand order**: `operand1` is the left-hand side, so subtraction returns
    `operand1 - operand2` and division returns `operand1 / operand2`.
    Unary operations ignore `operand2`.

    A failed calculation (division by zero, missing second operand) returns
    400 and leaves the history and cursor unchanged.

    **Authentication required**: Yes (Bearer token)
    """,
    response_description="Result, plot points and the updated history position",
)
def calculate(
    body: CalculateRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    """Perform a calculation."""
    operand2 = body.operand2.to_domain() if body.operand2 is not None else None
    with sessions.open(user.id) as session:
        try:
            calc = session.calculate(body.operation, body.operand1.to_domain(), operand2)
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return _response(session, calc)


@router.post(
    "/operator",
    response_model=PendingOperationResponse,
    summary="Press Binary Operator",
    description="Hold the displayed value as the left-hand operand of a binary operation.",
)
def press_operator(
    body: OperatorRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    """Start a binary operation."""
    with sessions.open(user.id) as session:
        try:
            session.press_operator(body.operation, body.value.to_domain())
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PendingOperationResponse(
            operation=body.operation, held=ComplexValue.from_domain(session.memory.get_last())
        )


@router.post(
    "/equals",
    response_model=CalculationResponse,
    summary="Equals",
    description="Complete the pending binary operation as `held <op> value` and record it.",
)
def equals(
    body: ValueRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    """Complete the pending operation."""
    with sessions.open(user.id) as session:
        try:
            calc = session.equals(body.value.to_domain())
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return _response(session, calc)


@router.post(
    "/shapes",
    response_model=CalculationResponse,
    summary="Measure Shape",
    description="""
    Circle area / circumference or equilateral triangle area / perimeter.

    The value must be purely real and positive. Shape measurements are not
    recorded in history.
    """,
)
def measure_shape(
    body: ShapeRequest,
    user=Depends(get_current_user),
    sessions: SessionStore = Depends(get_sessions),
):
    """Measure a shape."""
    with sessions.open(user.id) as session:
        try:
            calc = session.measure_shape(body.shape, body.measure, body.value.to_domain())
        except CalculatorError as exc:
            raise http_error(exc) from exc
        return _response(session, calc)

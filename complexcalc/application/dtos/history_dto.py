from __future__ import annotations

from pydantic import BaseModel, Field

from complexcalc.application.dtos.calculator_dto import ComplexValue
from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.entities.operation import Arity


class HistoryItem(BaseModel):
    """Represents a single recorded calculation in the history."""
    index: int = Field(..., description="Position in the history log", examples=[0], ge=0)
    operation: str = Field(..., description="Serialized operation name", examples=["AdditionOperation"])
    symbol: str = Field(..., description="Display symbol of the operation", examples=["+"])
    arity: Arity = Field(..., description="unary or binary")
    result: ComplexValue = Field(..., description="Recorded result")
    operand1: ComplexValue = Field(..., description="First operand")
    operand2: ComplexValue | None = Field(None, description="Second operand for binary operations")

    @classmethod
    def from_entry(cls, index: int, entry: HistoryEntry) -> HistoryItem:
        return cls(
            index=index,
            operation=entry.operation.serialize(),
            symbol=entry.operation.symbol,
            arity=entry.operation.arity,
            result=ComplexValue.from_domain(entry.result),
            operand1=ComplexValue.from_domain(entry.operand1),
            operand2=ComplexValue.from_domain(entry.operand2) if entry.operand2 is not None else None,
        )


class ListHistoryResponse(BaseModel):
    """Response model for listing the history log."""
    history: list[HistoryItem] = Field(..., description="History entries, oldest first")
    size: int = Field(..., description="Number of entries", ge=0)
    cursor: int = Field(..., description="Current history cursor (-1 = no entry)", ge=-1)


class NavigationResponse(BaseModel):
    """Response model for undo / redo."""
    moved: bool = Field(..., description="False when already at the boundary")
    cursor: int = Field(..., description="Cursor after the move", ge=-1)
    entry: HistoryItem | None = Field(None, description="Entry the cursor now points to")


class ExportHistoryResponse(BaseModel):
    """Serialized history document."""
    text: str = Field(
        ...,
        description="History in the persisted text format",
        examples=["AdditionOperation:3+2i,2+3i,1+-1i;ConjugateOperation:2+-3i,2+3i"],
    )
    size: int = Field(..., description="Number of entries", ge=0)


class ImportHistoryRequest(BaseModel):
    """Replace the history with a serialized document."""
    text: str = Field(..., description="History in the persisted text format")


class PersistHistoryRequest(BaseModel):
    """Save or load a named history document."""
    name: str = Field(
        ...,
        description="Document name",
        examples=["history.txt"],
        pattern=r"^[A-Za-z0-9_.-]+$",
        max_length=128,
    )


class PersistHistoryResponse(BaseModel):
    """Outcome of a save or load."""
    name: str = Field(..., description="Document name")
    path: str = Field(..., description="Where the document is stored")
    size: int = Field(..., description="Number of entries in the saved or loaded history", ge=0)
    cursor: int = Field(..., description="Current history cursor (-1 = no entry)", ge=-1)

from __future__ import annotations

from pydantic import BaseModel, Field

from complexcalc.domain.entities.calculation import CalculationResult
from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.entities.operation import Arity, Operation
from complexcalc.domain.services.shape_service import Measure, Shape


class ComplexValue(BaseModel):
    """A complex number as entered on, or shown by, the calculator display."""
    real: float = Field(..., description="Real part", examples=[2.0])
    imaginary: float = Field(0.0, description="Imaginary part", examples=[3.0])

    def to_domain(self) -> ComplexNumber:
        return ComplexNumber(self.real, self.imaginary)

    @classmethod
    def from_domain(cls, number: ComplexNumber) -> ComplexValue:
        return cls(real=number.real, imaginary=number.imaginary)


class PlotPointItem(BaseModel):
    """One point for the complex-plane scatter plot."""
    name: str = Field(..., description="Series label", examples=["Result"])
    real: float = Field(..., description="Position on the real axis")
    imaginary: float = Field(..., description="Position on the imaginary axis")


class CalculateRequest(BaseModel):
    """Request model for a single calculation."""
    operation: Operation = Field(..., description="Operation identity", examples=["AdditionOperation"])
    operand1: ComplexValue = Field(..., description="First operand (left-hand side for binary operations)")
    operand2: ComplexValue | None = Field(None, description="Second operand; required for binary operations")


class OperatorRequest(BaseModel):
    """Press a binary operator while `value` is on the display."""
    operation: Operation = Field(..., description="Binary operation identity", examples=["SubtractionOperation"])
    value: ComplexValue = Field(..., description="Value held as the left-hand operand")


class ValueRequest(BaseModel):
    """Request carrying the value currently on the display."""
    value: ComplexValue = Field(..., description="Displayed value")


class ShapeRequest(BaseModel):
    """Request model for shape measurements."""
    shape: Shape = Field(..., description="Shape to measure", examples=["circle"])
    measure: Measure = Field(..., description="Quantity to compute", examples=["area"])
    value: ComplexValue = Field(..., description="Radius or side length; must be real and positive")


class CalculationResponse(BaseModel):
    """Result of a calculation, with what the display and plot need."""
    operation: str = Field(..., description="Serialized operation name", examples=["AdditionOperation"])
    symbol: str | None = Field(None, description="Display symbol of the operation", examples=["+"])
    result: ComplexValue = Field(..., description="Computed value")
    operand1: ComplexValue = Field(..., description="First operand")
    operand2: ComplexValue | None = Field(None, description="Second operand for binary operations")
    plot: list[PlotPointItem] = Field(..., description="Points to plot on the complex plane")
    recorded: bool = Field(..., description="Whether the step was written to history")
    history_size: int = Field(..., description="Number of entries in history", ge=0)
    cursor: int = Field(..., description="Current history cursor (-1 = no entry)", ge=-1)

    @classmethod
    def from_result(cls, calc: CalculationResult, history_size: int, cursor: int) -> CalculationResponse:
        op = Operation.deserialize(calc.operation)
        return cls(
            operation=calc.operation,
            symbol=op.symbol if op is not None else None,
            result=ComplexValue.from_domain(calc.result),
            operand1=ComplexValue.from_domain(calc.operand1),
            operand2=ComplexValue.from_domain(calc.operand2) if calc.operand2 is not None else None,
            plot=[
                PlotPointItem(name=p.name, real=p.value.real, imaginary=p.value.imaginary)
                for p in calc.plot
            ],
            recorded=calc.recorded,
            history_size=history_size,
            cursor=cursor,
        )


class PendingOperationResponse(BaseModel):
    """State after pressing a binary operator."""
    operation: Operation = Field(..., description="Pending binary operation")
    held: ComplexValue = Field(..., description="Left-hand operand held until equals")


class OperationInfo(BaseModel):
    """Description of a supported operation."""
    identity: str = Field(..., description="Serialized name", examples=["RootOperation"])
    arity: Arity = Field(..., description="unary or binary")
    symbol: str = Field(..., description="Display symbol", examples=["√"])


class ListOperationsResponse(BaseModel):
    operations: list[OperationInfo] = Field(..., description="All supported operations")


class MemoryResponse(BaseModel):
    """Contents of the memory register."""
    value: ComplexValue = Field(..., description="Value stored in memory")

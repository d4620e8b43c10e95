"""Line-oriented text format for calculator history.

A document is a `;`-separated list of entries::

    <identity>:<result>,<operand1>[,<operand2>]

where every complex literal is written `<real>+<imaginary>i`, e.g.
`AdditionOperation:3+2i,2+3i,1+-1i;ConjugateOperation:2+-3i,2+3i`.
The third literal is present exactly when the operation is binary.
"""
from __future__ import annotations

import re
from collections.abc import Iterable

from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import MalformedLiteralError

ENTRY_SEPARATOR = ";"
IDENTITY_SEPARATOR = ":"
LITERAL_SEPARATOR = ","

_FLOAT = r"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf|infinity|nan)"
_COMPLEX_LITERAL = re.compile(rf"(?P<real>{_FLOAT})\+(?P<imaginary>{_FLOAT})i", re.IGNORECASE)


def format_number(value: float) -> str:
    # repr() is the shortest text that parses back to the same float
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_complex(number: ComplexNumber) -> str:
    return f"{format_number(number.real)}+{format_number(number.imaginary)}i"


def parse_complex(text: str) -> ComplexNumber:
    match = _COMPLEX_LITERAL.fullmatch(text.strip())
    if match is None:
        raise MalformedLiteralError(text)
    return ComplexNumber(float(match.group("real")), float(match.group("imaginary")))


def serialize_entry(entry: HistoryEntry) -> str:
    literals = [format_complex(entry.result), format_complex(entry.operand1)]
    if entry.operand2 is not None:
        literals.append(format_complex(entry.operand2))
    return f"{entry.operation.serialize()}{IDENTITY_SEPARATOR}{LITERAL_SEPARATOR.join(literals)}"


def parse_entry(text: str) -> HistoryEntry:
    """Parse one entry.

    Raises:
        UnknownOperationError: the identity is not a known operation.
        MalformedLiteralError: the entry has no identity separator, a literal
            is malformed, or the literal count does not match the arity.
    """
    identity, sep, operands = text.strip().partition(IDENTITY_SEPARATOR)
    if not sep:
        raise MalformedLiteralError(text, f"missing {IDENTITY_SEPARATOR!r} after the operation name")
    operation = Operation.from_identity(identity.strip())

    literals = [parse_complex(part) for part in operands.split(LITERAL_SEPARATOR)]
    expected = 2 if operation.is_unary() else 3
    if len(literals) != expected:
        raise MalformedLiteralError(
            operands, f"{operation.value} expects {expected} literals, got {len(literals)}"
        )

    result, operand1 = literals[0], literals[1]
    operand2 = literals[2] if expected == 3 else None
    return HistoryEntry(operation=operation, result=result, operand1=operand1, operand2=operand2)


def serialize_entries(entries: Iterable[HistoryEntry]) -> str:
    return ENTRY_SEPARATOR.join(serialize_entry(entry) for entry in entries)


def parse_entries(text: str) -> list[HistoryEntry]:
    """Parse a whole document. Either every entry parses or an error is raised."""
    text = text.strip()
    if not text:
        return []
    return [parse_entry(chunk) for chunk in text.split(ENTRY_SEPARATOR)]

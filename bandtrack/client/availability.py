"""Which instruments and uniform pieces can still be handed out.

The server only reports what is checked out (the active-ids rows); the
assignable subset is the full inventory minus those ids.
"""
from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from bandtrack.schemas.assignment import ActiveIds
from bandtrack.schemas.instrument import InstrumentResponse
from bandtrack.schemas.student import StudentResponse
from bandtrack.schemas.uniform import UniformResponse

T = TypeVar("T")


@dataclass
class AssignmentOptions:
    students: list[StudentResponse] = field(default_factory=list)
    instruments: list[InstrumentResponse] = field(default_factory=list)
    uniforms: list[UniformResponse] = field(default_factory=list)


def active_id_sets(active: Iterable[ActiveIds]) -> tuple[set[int], set[int]]:
    """Split active-ids rows into (instrument ids, uniform ids), dropping nulls."""
    instrument_ids: set[int] = set()
    uniform_ids: set[int] = set()
    for row in active:
        if row.instrument_id is not None:
            instrument_ids.add(row.instrument_id)
        if row.uniform_id is not None:
            uniform_ids.add(row.uniform_id)
    return instrument_ids, uniform_ids


def assignable(items: Iterable[T], active_ids: set[int], key: str) -> list[T]:
    """Items whose ``key`` attribute is not among ``active_ids``, in input order."""
    return [item for item in items if getattr(item, key) not in active_ids]


def build_assignment_options(
    students: list[StudentResponse],
    instruments: list[InstrumentResponse],
    uniforms: list[UniformResponse],
    active: Iterable[ActiveIds],
) -> AssignmentOptions:
    active_instruments, active_uniforms = active_id_sets(active)
    return AssignmentOptions(
        students=list(students),
        instruments=assignable(instruments, active_instruments, "instrument_id"),
        uniforms=assignable(uniforms, active_uniforms, "uniform_id"),
    )

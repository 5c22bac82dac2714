"""Display strings shared by the page templates and API client callers."""
from bandtrack.schemas.assignment import AssignmentRow
from bandtrack.schemas.instrument import InstrumentResponse
from bandtrack.schemas.student import StudentResponse
from bandtrack.schemas.uniform import UniformResponse

NOT_APPLICABLE = "N/A"
ACTIVE_MARKER = "- Active -"


def student_label(student: StudentResponse) -> str:
    return f"{student.full_name} ({student.graduation_year})"


def instrument_label(instrument: InstrumentResponse) -> str:
    return f"{instrument.instrument_name} #{instrument.instrument_number} (Locker: {instrument.locker_number or ''})"


def uniform_label(uniform: UniformResponse) -> str:
    return f"{uniform.item_type} - Size: {uniform.size or ''} (#{uniform.item_number})"


def assignment_instrument_cell(row: AssignmentRow) -> str:
    if not row.instrument_name:
        return NOT_APPLICABLE
    return f"{row.instrument_name} (#{row.instrument_number})"


def assignment_uniform_cell(row: AssignmentRow) -> str:
    if not row.uniform_type:
        return NOT_APPLICABLE
    return f"{row.uniform_type} (#{row.uniform_item_number})"


def assignment_date_in_cell(row: AssignmentRow) -> str:
    return row.date_in.isoformat() if row.date_in else ACTIVE_MARKER

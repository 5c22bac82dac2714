from bandtrack.schemas.common import CreatedResponse, MessageResponse
from bandtrack.schemas.student import StudentCreate, StudentResponse
from bandtrack.schemas.instrument import InstrumentCreate, InstrumentResponse
from bandtrack.schemas.uniform import UniformCreate, UniformResponse
from bandtrack.schemas.assignment import AssignmentCreate, AssignmentRow, ActiveIds

__all__ = [
    "CreatedResponse", "MessageResponse",
    "StudentCreate", "StudentResponse",
    "InstrumentCreate", "InstrumentResponse",
    "UniformCreate", "UniformResponse",
    "AssignmentCreate", "AssignmentRow", "ActiveIds",
]

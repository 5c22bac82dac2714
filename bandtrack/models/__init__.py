from bandtrack.models.student import Student
from bandtrack.models.instrument import Instrument
from bandtrack.models.uniform import UniformPiece
from bandtrack.models.assignment import Assignment

__all__ = ["Student", "Instrument", "UniformPiece", "Assignment"]

from typing import Iterable
from bandtrack.schemas.student import StudentResponse


def matches(student: StudentResponse, term: str) -> bool:
    """Case-insensitive substring match on name, graduation year or instrument played."""
    needle = term.strip().lower()
    if not needle:
        return True
    return (
        needle in student.full_name.lower()
        or needle in str(student.graduation_year)
        or needle in (student.instrument_played or "").lower()
    )


def filter_roster(roster: Iterable[StudentResponse], term: str) -> list[StudentResponse]:
    return [s for s in roster if matches(s, term)]


class RosterSnapshot:
    """The last fetched roster, kept in memory so searches don't hit the server.

    Whoever fetches the roster replaces the snapshot; filtering always runs
    against the whole snapshot, never against a previous filter result.
    """

    def __init__(self, students: Iterable[StudentResponse] = ()):
        self._students: list[StudentResponse] = list(students)

    def replace(self, students: Iterable[StudentResponse]) -> None:
        self._students = list(students)

    def filter(self, term: str) -> list[StudentResponse]:
        return filter_roster(self._students, term)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self):
        return iter(self._students)

"""JSON client for the BandTrack REST API.

Each call is one round trip with no retries; a non-2xx response raises
:class:`ApiError` carrying the server's message. No timeout is applied
unless the caller passes one.
"""
import logging
from datetime import date
from typing import Any

import httpx

from bandtrack.client.availability import AssignmentOptions, build_assignment_options
from bandtrack.client.roster import RosterSnapshot
from bandtrack.schemas.assignment import ActiveIds, AssignmentRow
from bandtrack.schemas.common import CreatedResponse
from bandtrack.schemas.instrument import InstrumentResponse
from bandtrack.schemas.student import StudentResponse
from bandtrack.schemas.uniform import UniformResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class BandApiClient:
    def __init__(self, http: httpx.Client, prefix: str = "/api"):
        self._http = http
        self._prefix = prefix.rstrip("/")
        self.roster = RosterSnapshot()

    @classmethod
    def from_url(cls, base_url: str, prefix: str = "/api", timeout: float | None = None) -> "BandApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout), prefix=prefix)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "BandApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── transport ──────────────────────────────────────────────────────────

    def _check(self, response: httpx.Response, fallback: str) -> Any:
        if response.is_success:
            return response.json()
        try:
            body = response.json()
            message = (body.get("message") if isinstance(body, dict) else None) or fallback
        except ValueError:
            message = f"HTTP error! Status: {response.status_code}. Details: {response.text}"
        logger.error("%s %s failed with %s: %s",
                     response.request.method, response.request.url, response.status_code, message)
        raise ApiError(response.status_code, message)

    def _get(self, path: str, fallback: str) -> Any:
        return self._check(self._http.get(f"{self._prefix}{path}"), fallback)

    def _post(self, path: str, payload: dict, fallback: str) -> CreatedResponse:
        body = self._check(self._http.post(f"{self._prefix}{path}", json=payload), fallback)
        return CreatedResponse.model_validate(body)

    # ── reads ──────────────────────────────────────────────────────────────

    def fetch_roster(self) -> list[StudentResponse]:
        """Fetch the roster and make it the current search snapshot."""
        students = [StudentResponse.model_validate(s) for s in self._get("/roster", "Failed to fetch roster.")]
        self.roster.replace(students)
        return students

    def filter_roster(self, term: str) -> list[StudentResponse]:
        return self.roster.filter(term)

    def fetch_instruments(self) -> list[InstrumentResponse]:
        return [InstrumentResponse.model_validate(i) for i in self._get("/instruments", "Failed to fetch instruments.")]

    def fetch_uniforms(self) -> list[UniformResponse]:
        return [UniformResponse.model_validate(u) for u in self._get("/uniforms", "Failed to fetch uniforms.")]

    def fetch_assignments(self) -> list[AssignmentRow]:
        return [AssignmentRow.model_validate(a) for a in self._get("/assignments", "Failed to fetch assignments.")]

    def fetch_active_ids(self) -> list[ActiveIds]:
        rows = self._get("/assignments/active-ids", "Failed to fetch active item IDs.")
        return [ActiveIds.model_validate(r) for r in rows]

    def assignment_options(self) -> AssignmentOptions:
        """Students plus the instruments and uniform pieces nobody has checked out.

        Re-fetches all four source collections on every call.
        """
        return build_assignment_options(
            self.fetch_roster(),
            self.fetch_instruments(),
            self.fetch_uniforms(),
            self.fetch_active_ids(),
        )

    # ── writes ─────────────────────────────────────────────────────────────

    def add_student(self, full_name: str, graduation_year: int, instrument_played: str | None = None) -> CreatedResponse:
        return self._post("/roster", {
            "full_name": full_name,
            "graduation_year": graduation_year,
            "instrument_played": instrument_played,
        }, "Failed to add student to the database.")

    def add_instrument(
        self,
        instrument_name: str,
        instrument_number: str,
        locker_number: str | None = None,
        locker_code: str | None = None,
        condition_notes: str | None = None,
    ) -> CreatedResponse:
        return self._post("/instruments", {
            "instrument_name": instrument_name,
            "instrument_number": instrument_number,
            "locker_number": locker_number,
            "locker_code": locker_code,
            "condition_notes": condition_notes,
        }, "Failed to add instrument to the database.")

    def add_uniform(self, item_type: str, item_number: str, size: str | None = None,
                    status: str | None = None) -> CreatedResponse:
        return self._post("/uniforms", {
            "item_type": item_type,
            "item_number": item_number,
            "size": size,
            "status": status,
        }, "Failed to add uniform to the database.")

    def add_assignment(
        self,
        student_fk: int,
        date_out: date,
        instrument_fk: int | None = None,
        uniform_fk: int | None = None,
        date_in: date | None = None,
    ) -> CreatedResponse:
        return self._post("/assignments", {
            "student_fk": student_fk,
            "instrument_fk": instrument_fk,
            "uniform_fk": uniform_fk,
            "date_out": date_out.isoformat(),
            "date_in": date_in.isoformat() if date_in else None,
        }, "Failed to create assignment.")

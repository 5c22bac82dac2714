from bandtrack.client.api import ApiError, BandApiClient
from bandtrack.client.availability import AssignmentOptions, assignable, build_assignment_options
from bandtrack.client.roster import RosterSnapshot, filter_roster

__all__ = [
    "ApiError", "BandApiClient",
    "AssignmentOptions", "assignable", "build_assignment_options",
    "RosterSnapshot", "filter_roster",
]

from statuspage.incidents.manage_incidents import (
    INCIDENT_STATUSES,
    incidents,
    latest_incident,
    open_incident,
    unresolved_incidents,
    update_incident_by_id,
)

__all__ = [
    "INCIDENT_STATUSES",
    "incidents",
    "latest_incident",
    "open_incident",
    "unresolved_incidents",
    "update_incident_by_id",
]

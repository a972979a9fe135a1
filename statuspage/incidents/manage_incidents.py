"""List, open and update incidents.

Usage:
    statuspage incidents
    statuspage incidents open <status> <message> <name>
    statuspage incidents update <status> <message>

Arguments:
    status: Incident status (investigating, identified, monitoring, resolved)
    message: Update text shown on the status page
    name: Title of the new incident

Examples:
    # Show unresolved incidents
    statuspage incidents

    # Open a new incident
    statuspage incidents open identified "investigating root cause" "DB latency"

    # Update the latest unresolved incident
    statuspage incidents update monitoring "fix deployed, watching"
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import parser as dateutil_parser

from statuspage.common import StatusPageClient, UsageError, ValidationError

log = logging.getLogger(__name__)

INCIDENT_STATUSES = ["investigating", "identified", "monitoring", "resolved"]

# Statuses the API reports for incidents that are over.
RESOLVED_STATUSES = ("resolved", "postmortem", "completed")


def validate_incident_status(status: str) -> str:
    """Return the canonical incident status for ``status``.

    Raises:
        ValidationError: If the status is not one of INCIDENT_STATUSES.
    """
    normalized = status.lower()
    if normalized not in INCIDENT_STATUSES:
        raise ValidationError(
            f"{status} is not a valid incident status. "
            f"Please pick one of the following: {', '.join(INCIDENT_STATUSES)}"
        )
    return normalized


def list_incidents(client: StatusPageClient) -> List[Dict[str, Any]]:
    return client.get("/incidents.json")


def unresolved_incidents(incidents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Filter out incidents whose status marks them as over."""
    return [i for i in incidents if i.get("status") not in RESOLVED_STATUSES]


_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def _created_at(incident: Dict[str, Any]) -> datetime:
    """Parse an incident's creation time, treating naive values as UTC."""
    try:
        created = dateutil_parser.isoparse(incident.get("created_at"))
    except (ValueError, TypeError):
        return _UNDATED
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


def latest_incident(
    unresolved: List[Dict[str, Any]],
    order: str = "api",
) -> Optional[Dict[str, Any]]:
    """Pick the incident an ``update`` applies to.

    Args:
        unresolved: Unresolved incidents in API order.
        order: ``"api"`` takes the first incident as returned by the API,
            ``"created"`` takes the most recently created one.

    Returns:
        The chosen incident, or None if there are none.
    """
    if not unresolved:
        return None
    if order == "created":
        # First maximum wins, so undated incidents only win when nothing is dated.
        return max(unresolved, key=_created_at)
    return unresolved[0]


def open_incident(client: StatusPageClient, status: str, message: str, name: str) -> Dict[str, Any]:
    """Create a new incident.

    Returns:
        The created incident as returned by the API.
    """
    payload = {
        "incident[name]": name,
        "incident[status]": validate_incident_status(status),
        "incident[message]": message,
    }
    return client.post("/incidents.json", payload)


def update_incident_by_id(
    client: StatusPageClient,
    status: str,
    message: str,
    incident_id: str,
) -> Dict[str, Any]:
    """PATCH an incident's status and message without any checks.

    Intended for programmatic callers that already know the incident id.
    """
    payload = {"incident[status]": status, "incident[message]": message}
    return client.patch(f"/incidents/{incident_id}.json", payload)


def print_unresolved(unresolved: List[Dict[str, Any]]) -> None:
    if not unresolved:
        print("No unresolved incidents")
        return

    print("Unresolved incidents:")
    for incident in unresolved:
        print(f"{incident['name']} - status: {incident['status']}, created at {incident['created_at']}")


def incidents(client: StatusPageClient, *args: str) -> None:
    """Handle ``incidents [open status message name | update status message]``."""
    unresolved = unresolved_incidents(list_incidents(client))

    if not args:
        print_unresolved(unresolved)
    elif args[0] == "open":
        if len(args) < 4:
            raise UsageError("incidents open <status> <message> <name>")
        result = open_incident(client, args[1], args[2], args[3])
        print(f"Created new incident: {result['name']}")
    elif args[0] == "update":
        if len(args) < 3:
            raise UsageError("incidents update <status> <message>")
        status = validate_incident_status(args[1])
        incident = latest_incident(unresolved, client.config.incident_order)
        if incident is None:
            print("No open incidents")
            return
        log.debug("Updating incident %s", incident["id"])
        result = update_incident_by_id(client, status, args[2], incident["id"])
        print(f"Updated incident '{result['name']}' status to {result['status']}")
    else:
        print("Invalid command")

"""Show or change the status of components.

Usage:
    statuspage components
    statuspage components <component_name>
    statuspage components <component_name> <status>

Arguments:
    component_name: Any part of a component name (case-insensitive)
    status: Any part of a component status, e.g. "degraded" or "major"

Examples:
    # Dump every component
    statuspage components

    # Show the status of the "Website" component
    statuspage components web

    # Mark the API as having a partial outage
    statuspage components api partial
"""
from typing import Any, Dict, List

from statuspage.common import (
    ComponentNotFoundError,
    ComponentRegistry,
    StatusPageClient,
    ValidationError,
    pretty_print,
)

COMPONENT_STATUSES = ["operational", "degraded performance", "partial outage", "major outage"]


def humanize_status(status: str) -> str:
    """Render an API status such as ``major_outage`` as ``major outage``."""
    return status.replace("_", " ")


def match_component_status(fragment: str) -> str:
    """Return the first canonical component status containing ``fragment``.

    Raises:
        ValidationError: If no canonical status contains the fragment.
    """
    needle = fragment.lower()
    for status in COMPONENT_STATUSES:
        if needle in status:
            return status
    raise ValidationError(
        f"{fragment} is not a valid component status. "
        f"Please pick one of the following: {', '.join(COMPONENT_STATUSES)}"
    )


def list_components(client: StatusPageClient) -> List[Dict[str, Any]]:
    return client.get("/components.json")


def show_component(client: StatusPageClient, registry: ComponentRegistry, name_fragment: str) -> None:
    component_id = registry.resolve(name_fragment)
    component = next((c for c in list_components(client) if c["id"] == component_id), None)
    if component is None:
        raise ComponentNotFoundError(f"Component {component_id} is no longer listed")
    print(f"Status of {component['name']}: {humanize_status(component['status'])}")


def change_component_status(
    client: StatusPageClient,
    registry: ComponentRegistry,
    name_fragment: str,
    status_fragment: str,
) -> Dict[str, Any]:
    """Change the status of one component.

    Args:
        client: StatusPageClient instance.
        registry: Index used to resolve the component name.
        name_fragment: Part of the component name.
        status_fragment: Part of a canonical component status.

    Returns:
        The updated component as returned by the API.
    """
    new_status = match_component_status(status_fragment)
    name, component_id = registry.match(name_fragment)

    payload = {"component[status]": new_status.replace(" ", "_")}
    result = client.patch(f"/components/{component_id}.json", payload)

    print(f"Status for {result.get('name', name)} is now {humanize_status(result['status'])}")
    return result


def components(client: StatusPageClient, registry: ComponentRegistry, *args: str) -> None:
    """Handle ``components [name] [status]``."""
    if not args:
        pretty_print(list_components(client))
    elif len(args) == 1:
        show_component(client, registry, args[0])
    else:
        change_component_status(client, registry, args[0], args[1])

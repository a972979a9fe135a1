from statuspage.components.component_status import (
    COMPONENT_STATUSES,
    change_component_status,
    components,
    match_component_status,
)

__all__ = ["COMPONENT_STATUSES", "change_component_status", "components", "match_component_status"]

"""Component name to id lookup table."""
import logging
from typing import Dict, List, Optional, Tuple

from .client import ComponentNotFoundError, StatusPageClient

log = logging.getLogger(__name__)


class ComponentRegistry:
    """Case-insensitive index of component names to component ids.

    Built once per invocation from the full component listing and never
    refreshed. Names are stored lowercased; when two components share a
    name the later one in API order wins.
    """

    def __init__(self, components: Optional[Dict[str, str]] = None):
        self._components: Dict[str, str] = dict(components or {})

    @classmethod
    def build(cls, client: StatusPageClient) -> "ComponentRegistry":
        """Fetch the component listing once and index it."""
        registry = cls()
        for component in client.get("/components.json"):
            registry.add(component["name"], component["id"])
        log.debug("Indexed %d component(s)", len(registry))
        return registry

    def add(self, name: str, component_id: str) -> None:
        key = name.lower()
        if key in self._components and self._components[key] != component_id:
            log.debug("Component name %r is ambiguous, keeping id %s", key, component_id)
        self._components[key] = component_id

    def match(self, partial: str) -> Tuple[str, str]:
        """Return the ``(name, id)`` of the first name containing ``partial``.

        Names are tried in lexicographic order, and ``partial`` is compared
        case-insensitively as a literal substring.

        Raises:
            ComponentNotFoundError: If no name contains ``partial``.
        """
        needle = partial.lower()
        for name in self.names():
            if needle in name:
                return name, self._components[name]
        raise ComponentNotFoundError(f"No component matches {partial!r}")

    def resolve(self, partial: str) -> str:
        """Return the id of the first component whose name contains ``partial``."""
        return self.match(partial)[1]

    def names(self) -> List[str]:
        return sorted(self._components)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._components

    def __len__(self) -> int:
        return len(self._components)

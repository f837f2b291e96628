import logging
from typing import Any

from netbox_provider.config import Settings
from netbox_provider.netbox_client import NetBoxRestClient
from netbox_provider.resource import AggregateResource
from netbox_provider.schema import ResourceData

logger = logging.getLogger(__name__)

LIFECYCLE_OPERATIONS = ("create", "read", "update", "delete")


class Provider:
    """Resource types served by this provider, bound to one authenticated client."""

    RESOURCES = {
        AggregateResource.TYPE_NAME: AggregateResource,
    }

    def __init__(self, client: NetBoxRestClient):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "Provider":
        client = NetBoxRestClient(
            url=str(settings.netbox_url),
            token=settings.netbox_token.get_secret_value(),
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
        )
        return cls(client)

    def resource_types(self) -> list[str]:
        return sorted(self.RESOURCES)

    def resource(self, type_name: str) -> AggregateResource:
        """
        Return the handler for ``type_name`` bound to this provider's client.

        Raises:
            ValueError: If the resource type is not served by this provider
        """
        if type_name not in self.RESOURCES:
            valid_types = "\n".join(f"- {t}" for t in self.resource_types())
            raise ValueError(f"Invalid resource_type. Must be one of:\n{valid_types}")
        return self.RESOURCES[type_name](self.client)

    def apply(self, type_name: str, operation: str, state: dict[str, Any]) -> dict[str, Any]:
        """
        Run one lifecycle operation against a host state dict and return the new state.

        Args:
            type_name: Resource type, e.g. "netbox_ipam_aggregate"
            operation: One of "create", "read", "update", "delete"
            state: ``{"id": ..., **attributes}`` as last known by the host

        Returns:
            The resulting state. After delete the ID is empty.
        """
        if operation not in LIFECYCLE_OPERATIONS:
            raise ValueError(f"Unknown operation {operation!r}, expected one of {LIFECYCLE_OPERATIONS}")
        resource = self.resource(type_name)
        data = ResourceData.from_state(resource.SCHEMA, state)
        logger.info(f"{operation} {type_name} id={data.id or '<new>'}")
        getattr(resource, operation)(data)
        return data.state()

    def import_resource(self, type_name: str, id: str) -> list[dict[str, Any]]:
        """Import an existing object by ID and read back its attributes."""
        resource = self.resource(type_name)
        logger.info(f"import {type_name} id={id}")
        states = []
        for data in resource.import_state(resource.new_data(id=id)):
            resource.read(data)
            states.append(data.state())
        return states

from netbox_provider.netbox_client import (
    NetBoxAPIError,
    NetBoxConnectionError,
    NetBoxError,
    NetBoxNotFoundError,
    NetBoxRestClient,
)
from netbox_provider.provider import Provider
from netbox_provider.resource import AggregateResource
from netbox_provider.schema import FieldType, InvalidResourceIdError, ResourceData, SchemaField

__all__ = [
    "AggregateResource",
    "FieldType",
    "InvalidResourceIdError",
    "NetBoxAPIError",
    "NetBoxConnectionError",
    "NetBoxError",
    "NetBoxNotFoundError",
    "NetBoxRestClient",
    "Provider",
    "ResourceData",
    "SchemaField",
]

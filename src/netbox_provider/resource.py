"""netbox_ipam_aggregate resource."""

import logging

from netbox_provider.models import Aggregate, WritableAggregate
from netbox_provider.netbox_client import NetBoxRestClient
from netbox_provider.netbox_types import endpoint_for_type
from netbox_provider.schema import FieldType, ResourceData, SchemaField

logger = logging.getLogger(__name__)


class AggregateResource:
    """
    Maps the aggregate resource lifecycle onto the NetBox IPAM API.

    Each handler performs exactly one NetBox call and lets any error
    propagate to the caller untouched.
    """

    TYPE_NAME = "netbox_ipam_aggregate"
    ENDPOINT = endpoint_for_type("ipam.aggregate")

    SCHEMA = {
        "prefix": SchemaField(
            FieldType.STRING,
            required=True,
            description="Network prefix in slash notation for this aggregate. Example: 192.168.10.0/24.",
        ),
        "rir_id": SchemaField(
            FieldType.INT,
            required=True,
            description="Netbox ID of the regional internet registry (RIR) that manages this prefix.",
        ),
        "description": SchemaField(
            FieldType.STRING,
            optional=True,
            description="Description of this aggregate.",
        ),
    }

    def __init__(self, client: NetBoxRestClient):
        self.client = client

    def new_data(self, id: str = "", **attributes) -> ResourceData:
        return ResourceData(self.SCHEMA, id=id, attributes=attributes)

    def _payload(self, data: ResourceData) -> WritableAggregate:
        data.validate_required()
        # Tags are not managed, NetBox always receives an empty list.
        return WritableAggregate(
            prefix=data.get("prefix"),
            rir=data.get("rir_id"),
            description=data.get("description"),
            tags=[],
        )

    def create(self, data: ResourceData) -> None:
        """Create a new aggregate in NetBox and record its ID."""
        payload = self._payload(data)
        logger.debug(f"Creating aggregate in NetBox: {payload}")

        try:
            out = self.client.create(self.ENDPOINT, payload.model_dump())
        except Exception as e:
            logger.debug(f"Failed to create aggregate: {e}")
            raise

        data.set_id(out["id"])
        logger.debug(f"Created aggregate {data.id}: {out}")

    def read(self, data: ResourceData) -> None:
        """Refresh prefix, rir_id and description from NetBox."""
        object_id = data.int_id()

        try:
            out = self.client.get(f"{self.ENDPOINT}/{object_id}")
        except Exception as e:
            logger.debug(f"Error fetching aggregate {object_id} from NetBox: {e}")
            raise

        aggregate = Aggregate.model_validate(out)
        data.set("prefix", aggregate.prefix)
        data.set("rir_id", aggregate.rir.id)
        data.set("description", aggregate.description)
        logger.debug(f"Read aggregate {object_id} from NetBox: {aggregate}")

    def update(self, data: ResourceData) -> None:
        """Replace the aggregate with the declared field values."""
        object_id = data.int_id()
        payload = self._payload(data)
        logger.debug(f"Updating aggregate {object_id} in NetBox: {payload}")

        try:
            out = self.client.update(self.ENDPOINT, object_id, payload.model_dump())
        except Exception as e:
            logger.debug(f"Failed to update aggregate {object_id}: {e}")
            raise

        logger.debug(f"Updated aggregate {object_id}: {out}")

    def delete(self, data: ResourceData) -> None:
        object_id = data.int_id()
        logger.debug(f"Deleting aggregate {object_id}")

        try:
            self.client.delete(self.ENDPOINT, object_id)
        except Exception as e:
            logger.debug(f"Failed to delete aggregate {object_id}: {e}")
            raise

        data.set_id("")
        logger.debug(f"Deleted aggregate {object_id}")

    def import_state(self, data: ResourceData) -> list[ResourceData]:
        """Pass-through import: the ID alone is enough, read fills in the rest."""
        return [data]

import itertools

import pytest

from netbox_provider.netbox_client import NetBoxNotFoundError
from netbox_provider.provider import Provider
from netbox_provider.resource import AggregateResource


class FakeNetBox:
    """In-memory stand-in for NetBoxRestClient that behaves like the aggregate endpoint."""

    def __init__(self):
        self.objects: dict[str, dict[int, dict]] = {}
        self.calls: list[tuple] = []
        self._ids = itertools.count(1)

    def _store(self, endpoint):
        return self.objects.setdefault(endpoint.strip("/"), {})

    def _render(self, object_id, data):
        return {
            "id": object_id,
            "url": f"http://netbox.local/api/ipam/aggregates/{object_id}/",
            "prefix": data["prefix"],
            "rir": {"id": data["rir"], "name": f"RIR {data['rir']}", "slug": f"rir-{data['rir']}"},
            "description": data.get("description", ""),
            "tags": data.get("tags", []),
            "date_added": None,
        }

    def create(self, endpoint, data):
        self.calls.append(("create", endpoint, data))
        object_id = next(self._ids)
        self._store(endpoint)[object_id] = self._render(object_id, data)
        return dict(self._store(endpoint)[object_id])

    def get(self, endpoint, params=None):
        self.calls.append(("get", endpoint))
        collection, _, object_id = endpoint.strip("/").rpartition("/")
        store = self._store(collection)
        if int(object_id) not in store:
            raise NetBoxNotFoundError(404, "Not found.", {"detail": "Not found."})
        return dict(store[int(object_id)])

    def update(self, endpoint, object_id, data):
        self.calls.append(("update", endpoint, object_id, data))
        store = self._store(endpoint)
        if object_id not in store:
            raise NetBoxNotFoundError(404, "Not found.", {"detail": "Not found."})
        store[object_id] = self._render(object_id, data)
        return dict(store[object_id])

    def delete(self, endpoint, object_id):
        self.calls.append(("delete", endpoint, object_id))
        store = self._store(endpoint)
        if object_id not in store:
            raise NetBoxNotFoundError(404, "Not found.", {"detail": "Not found."})
        del store[object_id]
        return True


@pytest.fixture
def netbox():
    return FakeNetBox()


@pytest.fixture
def resource(netbox):
    return AggregateResource(netbox)


@pytest.fixture
def provider(netbox):
    return Provider(netbox)

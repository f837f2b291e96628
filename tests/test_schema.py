import pytest

from netbox_provider.schema import FieldType, InvalidResourceIdError, ResourceData, SchemaField

SCHEMA = {
    "name": SchemaField(FieldType.STRING, required=True),
    "count": SchemaField(FieldType.INT, optional=True),
}


class TestResourceData:
    def test_zero_values(self):
        data = ResourceData(SCHEMA)
        assert data.id == ""
        assert data.get("name") == ""
        assert data.get("count") == 0

    def test_set_coerces_to_field_type(self):
        data = ResourceData(SCHEMA)
        data.set("count", "12")
        data.set("name", 5)
        assert data.get("count") == 12
        assert data.get("name") == "5"

    def test_set_none_resets_to_zero_value(self):
        data = ResourceData(SCHEMA, attributes={"name": "x"})
        data.set("name", None)
        assert data.get("name") == ""

    def test_unknown_attribute(self):
        data = ResourceData(SCHEMA)
        with pytest.raises(KeyError):
            data.get("missing")
        with pytest.raises(KeyError):
            data.set("missing", 1)

    @pytest.mark.parametrize("value", [1, 4096, 2**31, 2**63 - 1])
    def test_id_round_trip(self, value):
        data = ResourceData(SCHEMA)
        data.set_id(value)
        assert data.id == str(value)
        assert data.int_id() == value

    @pytest.mark.parametrize("value", ["", "abc", "1.5"])
    def test_invalid_id(self, value):
        data = ResourceData(SCHEMA, id=value)
        with pytest.raises(InvalidResourceIdError):
            data.int_id()

    def test_invalid_id_is_value_error(self):
        with pytest.raises(ValueError):
            ResourceData(SCHEMA, id="x").int_id()

    def test_validate_required(self):
        with pytest.raises(ValueError, match="name"):
            ResourceData(SCHEMA).validate_required()
        ResourceData(SCHEMA, attributes={"name": "a"}).validate_required()

    def test_from_state_and_state(self):
        data = ResourceData.from_state(SCHEMA, {"id": 8, "name": "a"})
        assert data.id == "8"
        assert data.state() == {"id": "8", "name": "a", "count": 0}

    @pytest.mark.parametrize("value", [True, False, 1.9])
    def test_int_field_rejects_non_integers(self, value):
        data = ResourceData(SCHEMA)
        with pytest.raises(ValueError):
            data.set("count", value)

    def test_int_field_accepts_whole_float(self):
        data = ResourceData(SCHEMA)
        data.set("count", 3.0)
        assert data.get("count") == 3

    def test_from_state_rejects_unknown_attributes(self):
        with pytest.raises(ValueError, match="Unknown attributes: tags. Valid attributes: name, count"):
            ResourceData.from_state(SCHEMA, {"name": "a", "tags": []})

    def test_from_state_without_id(self):
        data = ResourceData.from_state(SCHEMA, {"name": "a", "count": 2})
        assert data.id == ""


def test_schema_field_to_dict():
    field = SchemaField(FieldType.INT, required=True, description="An integer.")
    assert field.to_dict() == {
        "type": "int",
        "required": True,
        "optional": False,
        "description": "An integer.",
    }

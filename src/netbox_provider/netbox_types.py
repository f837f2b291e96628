NETBOX_OBJECT_TYPES = {
    "ipam.aggregate": {
        "name": "Aggregate",
        "endpoint": "ipam/aggregates",
    },
}


def endpoint_for_type(object_type: str) -> str:
    """
    Returns partial API endpoint prefix for the given object type.
    e.g., "ipam.aggregate" -> "ipam/aggregates"
    """
    if object_type not in NETBOX_OBJECT_TYPES:
        valid_types = "\n".join(f"- {t}" for t in sorted(NETBOX_OBJECT_TYPES.keys()))
        raise ValueError(f"Invalid object_type. Must be one of:\n{valid_types}")
    return NETBOX_OBJECT_TYPES[object_type]["endpoint"]

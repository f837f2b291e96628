import argparse
import logging
import sys
from typing import Any

from fastmcp import FastMCP

from netbox_provider.config import Settings, configure_logging
from netbox_provider.provider import Provider


def parse_cli_args(argv: list[str] | None = None) -> dict[str, Any]:
    """
    Parse command-line arguments for configuration overrides.

    Returns:
        dict of configuration overrides (only includes explicitly set values)
    """
    parser = argparse.ArgumentParser(
        description="NetBox provider - resource lifecycle operations for NetBox IPAM aggregates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Core NetBox settings
    parser.add_argument(
        "--netbox-url",
        type=str,
        help="Base URL of the NetBox instance (e.g., https://netbox.example.com/)",
    )
    parser.add_argument(
        "--netbox-token",
        type=str,
        help="API token for NetBox authentication",
    )

    # Transport settings
    parser.add_argument(
        "--transport",
        type=str,
        choices=["stdio", "http"],
        help="MCP transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Host address for HTTP server (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port for HTTP server (default: 8000)",
    )

    # Client settings
    ssl_group = parser.add_mutually_exclusive_group()
    ssl_group.add_argument(
        "--verify-ssl",
        action="store_true",
        dest="verify_ssl",
        default=None,
        help="Verify SSL certificates (default)",
    )
    ssl_group.add_argument(
        "--no-verify-ssl",
        action="store_false",
        dest="verify_ssl",
        help="Disable SSL certificate verification (not recommended)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for NetBox responses (default: 30)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity level (default: INFO)",
    )

    args: argparse.Namespace = parser.parse_args(argv)

    overlay: dict[str, Any] = {}
    for name in (
        "netbox_url",
        "netbox_token",
        "transport",
        "host",
        "port",
        "verify_ssl",
        "timeout",
        "log_level",
    ):
        value = getattr(args, name)
        if value is not None:
            overlay[name] = value

    return overlay


mcp = FastMCP("NetBox Provider")
provider = None


@mcp.tool
def netbox_list_resource_types() -> list[str]:
    """List the resource types this provider manages."""
    return provider.resource_types()


@mcp.tool
def netbox_resource_schema(resource_type: str) -> dict[str, Any]:
    """
    Describe the attributes of a resource type.

    Args:
        resource_type: Resource type name (e.g. "netbox_ipam_aggregate")

    Returns:
        Mapping of attribute name to its type, whether it is required or optional, and a description
    """
    resource = provider.resource(resource_type)
    return {name: field.to_dict() for name, field in resource.SCHEMA.items()}


@mcp.tool
def netbox_resource_create(resource_type: str, state: dict[str, Any]) -> dict[str, Any]:
    """
    Create a resource in NetBox.

    Args:
        resource_type: Resource type name (e.g. "netbox_ipam_aggregate")
        state: Declared attributes, e.g. {"prefix": "10.0.0.0/8", "rir_id": 1, "description": "test"}

    Returns:
        The new state, with "id" set to the NetBox ID
    """
    return provider.apply(resource_type, "create", state)


@mcp.tool
def netbox_resource_read(resource_type: str, state: dict[str, Any]) -> dict[str, Any]:
    """
    Refresh a resource from NetBox.

    Args:
        resource_type: Resource type name
        state: Last known state; only "id" is required

    Returns:
        The state as NetBox currently reports it
    """
    return provider.apply(resource_type, "read", state)


@mcp.tool
def netbox_resource_update(resource_type: str, state: dict[str, Any]) -> dict[str, Any]:
    """
    Replace a resource in NetBox with the declared attributes.

    Args:
        resource_type: Resource type name
        state: Full declared state including "id". Omitted optional attributes are reset.

    Returns:
        The submitted state
    """
    return provider.apply(resource_type, "update", state)


@mcp.tool
def netbox_resource_delete(resource_type: str, state: dict[str, Any]) -> dict[str, Any]:
    """
    Delete a resource from NetBox.

    Args:
        resource_type: Resource type name
        state: State including "id"

    Returns:
        The state with an empty "id"
    """
    return provider.apply(resource_type, "delete", state)


@mcp.tool
def netbox_resource_import(resource_type: str, id: str) -> list[dict[str, Any]]:
    """
    Import an existing NetBox object by ID.

    Args:
        resource_type: Resource type name
        id: NetBox ID of the object

    Returns:
        List of imported states, populated from NetBox
    """
    return provider.import_resource(resource_type, id)


def main() -> None:
    """Main entry point for the provider's MCP host adapter."""
    global provider

    cli_overlay: dict[str, Any] = parse_cli_args()

    try:
        settings = Settings(**cli_overlay)
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    logger.info("Starting NetBox provider")
    logger.info(f"Effective configuration: {settings.get_effective_config_summary()}")

    if not settings.verify_ssl:
        logger.warning(
            "SSL certificate verification is DISABLED. "
            "This is insecure and should only be used for testing."
        )

    if settings.transport == "http" and settings.host in ["0.0.0.0", "::", "[::]"]:
        logger.warning(
            f"HTTP transport is bound to {settings.host}:{settings.port}, which exposes the service to all network interfaces. "
            "Ensure this is secured with TLS/reverse proxy."
        )

    try:
        provider = Provider.from_settings(settings)
        logger.debug("NetBox client initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize NetBox client: {e}")
        sys.exit(1)

    try:
        if settings.transport == "stdio":
            logger.info("Starting stdio transport")
            mcp.run(transport="stdio")
        elif settings.transport == "http":
            logger.info(f"Starting HTTP transport on {settings.host}:{settings.port}")
            mcp.run(transport="http", host=settings.host, port=settings.port)
    except Exception as e:
        logger.error(f"Failed to start MCP server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

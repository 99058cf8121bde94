"""Bazaar discovery extension.

Lets facilitators catalog x402 resources from the call description the
resource server declares. `info` holds the description, `schema` is the JSON
Schema it satisfies.

Resource server:

    from x402_extensions.bazaar import declare_discovery_extension

    extensions = declare_discovery_extension(
        input={"query": "example"},
        input_schema={
            "properties": {"query": {"type": "string"}},
            "required": ["query"]
        }
    )

Facilitator:

    from x402_extensions.bazaar import extract_discovery_info

    resource = extract_discovery_info(payment_payload)
    if resource:
        print(resource.resource_url, resource.method)
"""

from .types import (
    BAZAAR,
    QueryParamMethods,
    BodyMethods,
    BodyType,
    OutputInfo,
    QueryInput,
    BodyInput,
    QueryDiscoveryInfo,
    BodyDiscoveryInfo,
    DiscoveryInfo,
    QueryDiscoveryExtension,
    BodyDiscoveryExtension,
    DiscoveryExtension,
    is_query_method,
    is_body_method,
    parse_discovery_info,
    parse_discovery_extension
)
from .resource_service import (
    OutputConfig,
    DeclareQueryDiscoveryConfig,
    DeclareBodyDiscoveryConfig,
    declare_discovery_extension,
    declare_query_discovery_extension,
    declare_body_discovery_extension
)
from .facilitator import (
    DiscoveredResource,
    ValidationExtractResult,
    validate_discovery_extension,
    extract_discovery_result,
    extract_discovery_info,
    extract_discovery_info_from_extension,
    validate_and_extract
)
from .server import (
    BazaarResourceServerExtension,
    bazaar_resource_server_extension
)
from .v1 import (
    ResourceMetadataV1,
    extract_discovery_info_v1,
    extract_resource_metadata_v1,
    is_discoverable_v1
)

__all__ = [
    # Constants and method types
    "BAZAAR",
    "QueryParamMethods",
    "BodyMethods",
    "BodyType",

    # Info types
    "OutputInfo",
    "QueryInput",
    "BodyInput",
    "QueryDiscoveryInfo",
    "BodyDiscoveryInfo",
    "DiscoveryInfo",
    "QueryDiscoveryExtension",
    "BodyDiscoveryExtension",
    "DiscoveryExtension",
    "is_query_method",
    "is_body_method",
    "parse_discovery_info",
    "parse_discovery_extension",

    # Resource server
    "OutputConfig",
    "DeclareQueryDiscoveryConfig",
    "DeclareBodyDiscoveryConfig",
    "declare_discovery_extension",
    "declare_query_discovery_extension",
    "declare_body_discovery_extension",
    "BazaarResourceServerExtension",
    "bazaar_resource_server_extension",

    # Facilitator
    "DiscoveredResource",
    "ValidationExtractResult",
    "validate_discovery_extension",
    "extract_discovery_result",
    "extract_discovery_info",
    "extract_discovery_info_from_extension",
    "validate_and_extract",

    # V1
    "ResourceMetadataV1",
    "extract_discovery_info_v1",
    "extract_resource_metadata_v1",
    "is_discoverable_v1"
]

"""
Place Mapper

Normalizes place payloads from the upstream places-lookup API into a stable
canonical record, and converts records back to the API's JSON shape.

Main components:
- PlaceRecord: Canonical record and its structured sub-records (record.py)
- from_external / to_external: Decode and encode (mapper.py)
- load_mapper_config: YAML settings for the decode policy (config_loader.py)
"""

from .config_loader import MapperConfig, load_mapper_config
from .mapper import (
    DecodePolicy,
    from_external,
    get_address_component,
    get_formatted_hours,
    get_simplified,
    is_currently_open,
    is_valid,
    to_external,
)
from .record import (
    AddressComponent,
    EditorialSummary,
    Geometry,
    LatLng,
    OpeningHours,
    PlaceRecord,
    PlusCode,
    Viewport,
)

__all__ = [
    "AddressComponent",
    "DecodePolicy",
    "EditorialSummary",
    "Geometry",
    "LatLng",
    "MapperConfig",
    "OpeningHours",
    "PlaceRecord",
    "PlusCode",
    "Viewport",
    "from_external",
    "get_address_component",
    "get_formatted_hours",
    "get_simplified",
    "is_currently_open",
    "is_valid",
    "load_mapper_config",
    "to_external",
]
__version__ = "0.1.0"

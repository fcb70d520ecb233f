"""
Place Payload Mapping Logic

This module converts raw place payloads from the upstream places-lookup API
into our canonical PlaceRecord, and converts records back to the API's JSON
shape when they need to be re-serialized.

Key Responsibilities:
- Map snake_case API keys onto PlaceRecord fields
- Apply default values for missing fields (None for scalars, [] for lists)
- Populate nested structures only when their parent key is present
- Rebuild the full external key set on encode

Decoding never raises: unknown keys are ignored and wrong-typed values pass
through uncoerced. Callers that need stricter guarantees check is_valid().
"""

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

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

logger = logging.getLogger(__name__)


class DecodePolicy(str, Enum):
    """How decoding decides that a value is missing.

    FALSY treats None, False, 0, NaN and "" as missing (the upstream
    client's behaviour, so `open_now: false` is stored as None).
    NULLISH only treats absent keys and None as missing.
    """

    FALSY = 'falsy'
    NULLISH = 'nullish'


# Scalar fields: (record attribute, external key)
SCALAR_FIELDS = (
    ('place_id', 'place_id'),
    ('name', 'name'),
    ('formatted_address', 'formatted_address'),
    ('phone_number', 'formatted_phone_number'),
    ('international_phone_number', 'international_phone_number'),
    ('website', 'website'),
    ('business_status', 'business_status'),
    ('rating', 'rating'),
    ('user_ratings_total', 'user_ratings_total'),
    ('price_level', 'price_level'),
    ('vicinity', 'vicinity'),
    ('url', 'url'),
    ('adr_address', 'adr_address'),
)

SERVICE_FLAG_FIELDS = (
    ('delivery', 'delivery'),
    ('dine_in', 'dine_in'),
    ('takeout', 'takeout'),
    ('curbside_pickup', 'curbside_pickup'),
    ('reservable', 'reservable'),
    ('wheelchair_accessible_entrance', 'wheelchair_accessible_entrance'),
    ('serves_beer', 'serves_beer'),
    ('serves_wine', 'serves_wine'),
    ('serves_breakfast', 'serves_breakfast'),
    ('serves_brunch', 'serves_brunch'),
    ('serves_lunch', 'serves_lunch'),
    ('serves_dinner', 'serves_dinner'),
    ('serves_vegetarian_food', 'serves_vegetarian_food'),
)

METADATA_FIELDS = (
    ('icon', 'icon'),
    ('icon_background_color', 'icon_background_color'),
    ('icon_mask_base_uri', 'icon_mask_base_uri'),
    ('utc_offset', 'utc_offset'),
)

# Opaque lists kept as the provider sends them
PASS_THROUGH_LIST_FIELDS = (
    ('secondary_opening_hours', 'secondary_opening_hours'),
    ('reviews', 'reviews'),
    ('photos', 'photos'),
    ('types', 'types'),
)


def from_external(
    payload: Any,
    policy: DecodePolicy = DecodePolicy.FALSY
) -> PlaceRecord:
    """
    Decode a raw API place payload into a PlaceRecord.

    Args:
        payload: Place object as returned by the API (e.g. the `result`
                 member of a place details response). Any non-mapping value
                 is treated as an empty payload.
        policy: Rule used to decide that a value is missing

    Returns:
        PlaceRecord with every field set to a value, None, [] or the
        zero-value sub-record

    Examples:
        >>> place = from_external({'place_id': 'ChIJ123', 'name': 'Chick-fil-A'})
        >>> place.is_valid()
        True
        >>> from_external({'rating': 0}).rating is None
        True
        >>> from_external({'rating': 0}, DecodePolicy.NULLISH).rating
        0
    """
    policy = DecodePolicy(policy)

    if not isinstance(payload, Mapping):
        logger.debug(
            "Place payload is not a mapping, decoding as empty",
            extra={'payload_type': type(payload).__name__}
        )
        payload = {}

    place = PlaceRecord()

    for attr, key in SCALAR_FIELDS + SERVICE_FLAG_FIELDS + METADATA_FIELDS:
        setattr(place, attr, _scalar(payload.get(key), policy))

    for attr, key in PASS_THROUGH_LIST_FIELDS:
        setattr(place, attr, _sequence(payload.get(key), policy))

    place.address_components = _address_components(
        _sequence(payload.get('address_components'), policy),
        policy
    )

    geometry = payload.get('geometry')
    if geometry is not None:
        viewport = _get(geometry, 'viewport')
        place.geometry = Geometry(
            location=_lat_lng(_get(geometry, 'location'), policy),
            viewport=Viewport(
                northeast=_lat_lng(_get(viewport, 'northeast'), policy),
                southwest=_lat_lng(_get(viewport, 'southwest'), policy),
            ),
        )

    plus_code = payload.get('plus_code')
    if plus_code is not None:
        place.plus_code = PlusCode(
            compound_code=_scalar(_get(plus_code, 'compound_code'), policy),
            global_code=_scalar(_get(plus_code, 'global_code'), policy),
        )

    opening_hours = payload.get('opening_hours')
    if opening_hours is not None:
        place.opening_hours = _opening_hours(opening_hours, policy)

    current_opening_hours = payload.get('current_opening_hours')
    if current_opening_hours is not None:
        place.current_opening_hours = _opening_hours(current_opening_hours, policy)

    editorial_summary = payload.get('editorial_summary')
    if editorial_summary is not None:
        place.editorial_summary = EditorialSummary(
            language=_scalar(_get(editorial_summary, 'language'), policy),
            overview=_scalar(_get(editorial_summary, 'overview'), policy),
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Decoded place payload",
            extra={
                'place_id': place.place_id,
                'policy': policy.value,
                'unknown_keys': sorted(str(k) for k in payload.keys() - _KNOWN_KEYS),
            }
        )

    return place


def to_external(place: PlaceRecord) -> dict[str, Any]:
    """
    Encode a PlaceRecord back into the API's JSON shape.

    Every external key is emitted, even when its value is None. Nested
    objects are rebuilt field-by-field from the record's sub-records.

    Args:
        place: Record to encode

    Returns:
        Dictionary using the API's snake_case keys
    """
    external: dict[str, Any] = {}

    for attr, key in SCALAR_FIELDS:
        external[key] = getattr(place, attr)

    external['address_components'] = _encode_address_components(place.address_components)
    external['geometry'] = {
        'location': _encode_lat_lng(place.geometry.location),
        'viewport': {
            'northeast': _encode_lat_lng(place.geometry.viewport.northeast),
            'southwest': _encode_lat_lng(place.geometry.viewport.southwest),
        },
    }
    external['plus_code'] = {
        'compound_code': place.plus_code.compound_code,
        'global_code': place.plus_code.global_code,
    }
    external['opening_hours'] = _encode_opening_hours(place.opening_hours)
    external['current_opening_hours'] = _encode_opening_hours(place.current_opening_hours)
    external['secondary_opening_hours'] = place.secondary_opening_hours

    for attr, key in SERVICE_FLAG_FIELDS:
        external[key] = getattr(place, attr)

    external['editorial_summary'] = {
        'language': place.editorial_summary.language,
        'overview': place.editorial_summary.overview,
    }
    external['reviews'] = place.reviews
    external['photos'] = place.photos
    external['types'] = place.types

    for attr, key in METADATA_FIELDS:
        external[key] = getattr(place, attr)

    return external


# ============================================================================
# Derived accessors
# ============================================================================

def get_simplified(place: PlaceRecord) -> dict[str, Any]:
    """Reduced view of the place for display. See PlaceRecord.get_simplified."""
    return place.get_simplified()


def is_currently_open(place: PlaceRecord) -> Optional[bool]:
    """Open/closed/unknown, current hours first. See PlaceRecord.is_currently_open."""
    return place.is_currently_open()


def get_address_component(place: PlaceRecord, component_type: str) -> Optional[str]:
    """First-match address component lookup. See PlaceRecord.get_address_component."""
    return place.get_address_component(component_type)


def get_formatted_hours(place: PlaceRecord) -> list[str]:
    """Weekday hour lines for display. See PlaceRecord.get_formatted_hours."""
    return place.get_formatted_hours()


def is_valid(place: PlaceRecord) -> bool:
    """True iff place_id and name are both set. See PlaceRecord.is_valid."""
    return place.is_valid()


# ============================================================================
# Helpers
# ============================================================================

_KNOWN_KEYS = frozenset(
    key for _, key in SCALAR_FIELDS + SERVICE_FLAG_FIELDS + METADATA_FIELDS + PASS_THROUGH_LIST_FIELDS
) | {
    'address_components',
    'geometry',
    'plus_code',
    'opening_hours',
    'current_opening_hours',
    'editorial_summary',
}


def _is_missing(value: Any, policy: DecodePolicy) -> bool:
    """
    Check whether a raw value counts as missing under the given policy.

    Under FALSY, empty lists and dicts are NOT missing: only None, False,
    numeric zero, NaN and the empty string are.
    """
    if value is None:
        return True

    if policy is DecodePolicy.NULLISH:
        return False

    if isinstance(value, bool):
        return not value

    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))

    return isinstance(value, str) and value == ''


def _scalar(value: Any, policy: DecodePolicy) -> Any:
    return None if _is_missing(value, policy) else value


def _sequence(value: Any, policy: DecodePolicy) -> Any:
    return [] if _is_missing(value, policy) else value


def _get(container: Any, key: str) -> Any:
    """Look up a key on a nested object, yielding None through non-mappings."""
    if isinstance(container, Mapping):
        return container.get(key)
    return None


def _lat_lng(value: Any, policy: DecodePolicy) -> LatLng:
    return LatLng(
        lat=_scalar(_get(value, 'lat'), policy),
        lng=_scalar(_get(value, 'lng'), policy),
    )


def _opening_hours(value: Any, policy: DecodePolicy) -> OpeningHours:
    return OpeningHours(
        open_now=_scalar(_get(value, 'open_now'), policy),
        periods=_sequence(_get(value, 'periods'), policy),
        weekday_text=_sequence(_get(value, 'weekday_text'), policy),
    )


def _address_components(value: Any, policy: DecodePolicy) -> Any:
    """
    Decode address component entries.

    Mapping entries become AddressComponent; anything else (including a
    non-list value) passes through unchanged.
    """
    if not isinstance(value, list):
        return value

    components = []
    for entry in value:
        if isinstance(entry, Mapping):
            components.append(AddressComponent(
                long_name=_scalar(entry.get('long_name'), policy),
                short_name=_scalar(entry.get('short_name'), policy),
                types=_sequence(entry.get('types'), policy),
            ))
        else:
            components.append(entry)
    return components


def _encode_lat_lng(value: LatLng) -> dict[str, Any]:
    return {'lat': value.lat, 'lng': value.lng}


def _encode_opening_hours(value: OpeningHours) -> dict[str, Any]:
    return {
        'open_now': value.open_now,
        'periods': value.periods,
        'weekday_text': value.weekday_text,
    }


def _encode_address_components(value: Any) -> Any:
    if not isinstance(value, list):
        return value

    encoded = []
    for component in value:
        if isinstance(component, AddressComponent):
            encoded.append({
                'long_name': component.long_name,
                'short_name': component.short_name,
                'types': component.types,
            })
        else:
            encoded.append(component)
    return encoded

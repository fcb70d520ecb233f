"""
Canonical Place Record

This module defines the internal record shape that every place payload is
normalized into. Field names and nesting are fixed here, independent of the
upstream API's wire format.

Key Concepts:
- Every field is always present: scalars default to None, sequences to [],
  structured sub-records to their zero value (never None)
- Records compare by value, so two decodes of the same payload are equal
- A default-constructed record can be assembled field-by-field
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LatLng:
    """A latitude/longitude pair."""

    lat: Optional[float] = None
    lng: Optional[float] = None


@dataclass
class Viewport:
    """Recommended viewport for displaying the place."""

    northeast: LatLng = field(default_factory=LatLng)
    southwest: LatLng = field(default_factory=LatLng)


@dataclass
class Geometry:
    """Location and viewport of a place."""

    location: LatLng = field(default_factory=LatLng)
    viewport: Viewport = field(default_factory=Viewport)


@dataclass
class PlusCode:
    """Open Location Code for the place."""

    compound_code: Optional[str] = None
    global_code: Optional[str] = None


@dataclass
class OpeningHours:
    """Opening hours block (standing or current).

    `periods` are kept as the provider sends them.
    """

    open_now: Optional[bool] = None
    periods: list[Any] = field(default_factory=list)
    weekday_text: list[str] = field(default_factory=list)


@dataclass
class EditorialSummary:
    """Short editorial description of the place."""

    language: Optional[str] = None
    overview: Optional[str] = None


@dataclass
class AddressComponent:
    """One component of a structured address (street number, locality, ...)."""

    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: list[str] = field(default_factory=list)


@dataclass
class PlaceRecord:
    """Normalized place.

    Build one with `place_mapper.from_external()` or assemble it manually:

        >>> place = PlaceRecord()
        >>> place.place_id = 'custom_place_id'
        >>> place.name = 'Custom Restaurant'
        >>> place.geometry.location.lat = 37.3387
        >>> place.is_valid()
        True
    """

    # Identity
    place_id: Optional[str] = None
    name: Optional[str] = None

    # Contact and location
    formatted_address: Optional[str] = None
    phone_number: Optional[str] = None
    international_phone_number: Optional[str] = None
    website: Optional[str] = None
    vicinity: Optional[str] = None
    url: Optional[str] = None
    adr_address: Optional[str] = None

    # Classification
    business_status: Optional[str] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    price_level: Optional[int] = None
    types: list[str] = field(default_factory=list)

    # Structured sub-records
    address_components: list[AddressComponent] = field(default_factory=list)
    geometry: Geometry = field(default_factory=Geometry)
    plus_code: PlusCode = field(default_factory=PlusCode)
    opening_hours: OpeningHours = field(default_factory=OpeningHours)
    current_opening_hours: OpeningHours = field(default_factory=OpeningHours)
    secondary_opening_hours: list[Any] = field(default_factory=list)
    editorial_summary: EditorialSummary = field(default_factory=EditorialSummary)
    reviews: list[Any] = field(default_factory=list)
    photos: list[Any] = field(default_factory=list)

    # Service offerings
    delivery: Optional[bool] = None
    dine_in: Optional[bool] = None
    takeout: Optional[bool] = None
    curbside_pickup: Optional[bool] = None
    reservable: Optional[bool] = None
    wheelchair_accessible_entrance: Optional[bool] = None

    # Food service types
    serves_beer: Optional[bool] = None
    serves_wine: Optional[bool] = None
    serves_breakfast: Optional[bool] = None
    serves_brunch: Optional[bool] = None
    serves_lunch: Optional[bool] = None
    serves_dinner: Optional[bool] = None
    serves_vegetarian_food: Optional[bool] = None

    # Display metadata
    icon: Optional[str] = None
    icon_background_color: Optional[str] = None
    icon_mask_base_uri: Optional[str] = None
    utc_offset: Optional[int] = None

    def get_simplified(self) -> dict[str, Any]:
        """
        Project a reduced view of the place for lightweight display.

        Returns:
            Dictionary with place_id, name, address, phone, rating,
            rating_count, price_level, is_open, coordinates, website, types
        """
        return {
            'place_id': self.place_id,
            'name': self.name,
            'address': self.formatted_address,
            'phone': self.phone_number,
            'rating': self.rating,
            'rating_count': self.user_ratings_total,
            'price_level': self.price_level,
            'is_open': self.is_currently_open(),
            'coordinates': {
                'lat': self.geometry.location.lat,
                'lng': self.geometry.location.lng,
            },
            'website': self.website,
            'types': self.types,
        }

    def is_currently_open(self) -> Optional[bool]:
        """
        Check if the place is currently open.

        Current hours (which may reflect holiday schedules) take priority
        over standing hours whenever they carry a value.

        Returns:
            True if open, False if closed, None if unknown
        """
        if self.current_opening_hours.open_now is not None:
            return self.current_opening_hours.open_now
        return self.opening_hours.open_now

    def get_address_component(self, component_type: str) -> Optional[str]:
        """
        Get the long name of the first address component of a given type.

        Args:
            component_type: Address component type (e.g., 'locality', 'country')

        Returns:
            The component's long name, or None if no component matches
        """
        for component in self.address_components:
            if not isinstance(component, AddressComponent):
                continue
            if not isinstance(component.types, (list, tuple, set, frozenset)):
                continue
            if component_type in component.types:
                return component.long_name
        return None

    def get_formatted_hours(self) -> list[str]:
        """Weekday hour lines, preferring current hours when they are non-empty."""
        if self.current_opening_hours.weekday_text:
            return self.current_opening_hours.weekday_text
        return self.opening_hours.weekday_text or []

    def is_valid(self) -> bool:
        """A record is valid when it has both a place_id and a name."""
        return bool(self.place_id and self.name)

    def to_external(self) -> dict[str, Any]:
        """Convert back to the upstream API's JSON shape. See mapper.to_external."""
        from .mapper import to_external
        return to_external(self)

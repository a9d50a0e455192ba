"""Location Bounded Context.

Responsible for positions and the target-region boundary:
- Value Objects: Coordinate, BoundingRegion, PlaceDescription, MembershipResult
- Services: is_in_region, distance_km, compose_place_description
- Ports: PositionProvider, ReverseGeocoder
"""

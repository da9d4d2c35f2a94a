"""
animal_rescue.gateway

Route descriptor consumed by the external API gateway.

Responsibilities:
- Typed models for the gateway route configuration.
- Loading, validating and dumping the packaged `routes.json`.
"""

# Package marker.

"""
animal_rescue.services

Service layer.

Responsibilities:
- Own adoption rules and the transaction boundary around repository calls.
"""

# Package marker.

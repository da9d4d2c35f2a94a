"""
animal_rescue.api

API package for the Animal Rescue backend.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error translation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request binding + auth + delegation to services.

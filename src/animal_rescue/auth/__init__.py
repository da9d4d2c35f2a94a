"""
animal_rescue.auth

Authentication package.

Responsibilities:
- JWT helpers and validation.
- FastAPI dependencies that resolve the calling adopter (`Principal`).
"""

# Package marker.

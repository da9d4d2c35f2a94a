"""
animal_rescue.api.routers

HTTP routers, one module per surface (health, dev auth, adoption endpoints).
"""

# Package marker; routers are imported directly from submodules.

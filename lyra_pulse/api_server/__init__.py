"""
API server package: HTTP interface over the baseline engine.

Exposes the four core operations (dimension signals, net value, friction
hotspots, snapshot comparison) and an append-only cycle history per
organization to any rendering or reporting layer.
"""

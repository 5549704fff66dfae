"""
Lyra Pulse: AI-efficacy baseline scoring engine.

Turns survey anchor scores, externally extracted themes and friction
observations into per-dimension signals, a net-value score, ranked patterns
and hotspots, and longitudinal movement between pulse cycles.
"""

__version__ = "0.1.0"

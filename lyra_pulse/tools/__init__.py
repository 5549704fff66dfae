"""
Command-line tools over the baseline engine (file in, JSON out).
"""

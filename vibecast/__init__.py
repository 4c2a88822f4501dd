"""
VibeCast - trend-driven content challenges from Farcaster.
"""

__version__ = "1.0.0"

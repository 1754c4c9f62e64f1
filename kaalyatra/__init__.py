"""
Kaalyatra - a console time-travel simulator through Indian history.
"""

__version__ = "1.0.0"

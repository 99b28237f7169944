"""
Base API: user accounts, profiles and a background message queue.
"""

__version__ = "1.0.0"

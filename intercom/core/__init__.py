"""
Core helpers package for the Intercom client.

This package contains low-level infrastructure helpers: settings,
authentication and the synchronous transport wrapper.  Keeping these
helpers in a dedicated package makes it easy to swap implementations or
customise behaviour for testing.
"""

__all__ = []

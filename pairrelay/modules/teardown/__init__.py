"""
Teardown Module - Black Box Interface

Purpose: Take a session out of the waiting queue and its pair
Interface: leave()
Hidden: Partner notification

leave() is idempotent; a second call finds nothing to clean up.
"""

from .teardown import TeardownCoordinator

__all__ = ["TeardownCoordinator"]

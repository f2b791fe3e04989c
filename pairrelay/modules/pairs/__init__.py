"""
Pairs Module - Black Box Interface

Purpose: Symmetric mapping from a paired session to its partner
Interface: get_partner(), insert_pair(), remove()
Hidden: Mapping storage

Entries always exist in both directions; the table size is always even.
"""

from .pairs import ActivePairTable

__all__ = ["ActivePairTable"]

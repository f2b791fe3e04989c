"""
Pairing Module - Black Box Interface

Purpose: Turn waiting sessions into active pairs
Interface: try_pair_all()
Hidden: Drain loop, notification payloads
"""

from .pairing import PairingEngine

__all__ = ["PairingEngine"]

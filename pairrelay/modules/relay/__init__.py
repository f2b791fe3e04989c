"""
Relay Module - Black Box Interface

Purpose: Own all matchmaking state and dispatch client events
Interface: connect(), disconnect(), handle(), start_search(), next_partner(),
           stop_search(), relay(), snapshot()
Hidden: Lock, module wiring, payload validation

One RelayService instance is the single mutual-exclusion domain for the
waiting queue and the pair table.
"""

from .relay import RelayService, RelaySnapshot

__all__ = ["RelayService", "RelaySnapshot"]

"""
Queue Module - Black Box Interface

Purpose: Hold sessions waiting for a partner in arrival order
Interface: enqueue(), dequeue_pair(), remove()
Hidden: Ordering structure, membership index

Strict FIFO: arrival order alone decides who is paired with whom.
"""

from .queue import WaitingQueue

__all__ = ["WaitingQueue"]

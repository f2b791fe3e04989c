import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from conftest import FailingTransport, FakeTransport
from pairrelay.modules.pairing import PairingEngine
from pairrelay.modules.pairs import ActivePairTable
from pairrelay.modules.queue import WaitingQueue


@pytest.fixture
def waiting():
    return WaitingQueue()


@pytest.fixture
def pairs():
    return ActivePairTable()


@pytest.fixture
def engine(waiting, pairs):
    return PairingEngine(waiting, pairs)


def test_pairs_two_waiting_sessions(engine, waiting, pairs):
    """Both sides are paired and told each other's id."""
    a, b = FakeTransport(id="a"), FakeTransport(id="b")
    waiting.enqueue(a)
    waiting.enqueue(b)

    formed = engine.try_pair_all()

    assert formed == [("a", "b")]
    assert pairs.get_partner("a") == "b"
    assert a.sent == [("paired", {"partnerId": "b"})]
    assert b.sent == [("paired", {"partnerId": "a"})]
    assert len(waiting) == 0


def test_single_session_keeps_waiting(engine, waiting, pairs):
    a = FakeTransport(id="a")
    waiting.enqueue(a)

    assert engine.try_pair_all() == []
    assert waiting.ids() == ["a"]
    assert a.sent == []
    assert len(pairs) == 0


def test_drains_to_fixed_point_even(engine, waiting, pairs):
    """Several eligible sessions are all paired in one call, in arrival order."""
    for session_id in ("a", "b", "c", "d", "e", "f"):
        waiting.enqueue(FakeTransport(id=session_id))

    formed = engine.try_pair_all()

    assert formed == [("a", "b"), ("c", "d"), ("e", "f")]
    assert len(waiting) == 0
    assert pairs.pair_count() == 3


def test_drains_to_fixed_point_odd(engine, waiting, pairs):
    """With an odd count exactly the newest session is left waiting."""
    for session_id in ("a", "b", "c", "d", "e"):
        waiting.enqueue(FakeTransport(id=session_id))

    engine.try_pair_all()

    assert waiting.ids() == ["e"]
    assert pairs.pair_count() == 2


def test_pairing_survives_failed_notification(engine, waiting, pairs):
    """A session whose socket already died is still paired; the other side hears about it."""
    dead = FailingTransport("dead")
    alive = FakeTransport(id="alive")
    waiting.enqueue(dead)
    waiting.enqueue(alive)

    engine.try_pair_all()

    assert pairs.get_partner("alive") == "dead"
    assert alive.sent == [("paired", {"partnerId": "dead"})]
    assert dead.attempts == 1

"""
Request Registry Tests

Call and destination requests are independent sets; clearing a floor
removes it from both and reports which ones were present.
"""

from liftsim.core.request_registry import RequestRegistry


def test_new_and_duplicate_requests():
    registry = RequestRegistry()

    assert registry.is_empty()
    assert registry.add_call(3) is True
    assert registry.add_call(3) is False
    assert registry.add_destination(3) is True
    assert registry.add_destination(7) is True

    assert registry.call_requests == frozenset({3})
    assert registry.destination_requests == frozenset({3, 7})
    assert registry.pending() == frozenset({3, 7})
    assert not registry.is_empty()


def test_clear_at_reports_both_kinds():
    registry = RequestRegistry()
    registry.add_call(4)
    registry.add_destination(4)
    registry.add_destination(6)

    assert registry.clear_at(4) == (True, True)
    assert registry.pending() == frozenset({6})
    assert registry.clear_at(6) == (False, True)
    assert registry.clear_at(9) == (False, False)
    assert registry.is_empty()


def test_clear_empties_everything():
    registry = RequestRegistry()
    registry.add_call(1)
    registry.add_destination(2)

    registry.clear()

    assert registry.is_empty()
    assert registry.pending() == frozenset()


def test_pending_is_a_snapshot():
    registry = RequestRegistry()
    registry.add_call(2)
    pending = registry.pending()

    registry.add_call(5)

    assert pending == frozenset({2})

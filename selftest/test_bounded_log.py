from __future__ import annotations


def test_push_beyond_capacity_keeps_last_items_in_order():
    from runtime.bounded_log_v1 import BoundedLogV1

    log = BoundedLogV1(5)
    for i in range(12):
        log.push(i)
    assert len(log) == 5
    assert log.list() == [7, 8, 9, 10, 11]
    assert list(log) == [7, 8, 9, 10, 11]


def test_under_capacity_and_clear():
    from runtime.bounded_log_v1 import BoundedLogV1

    log = BoundedLogV1(600)
    for i in range(3):
        log.push(("r", i))
    assert log.list() == [("r", 0), ("r", 1), ("r", 2)]
    log.clear()
    assert len(log) == 0
    assert log.list() == []


def test_capacity_must_be_positive():
    from runtime.bounded_log_v1 import BoundedLogV1

    try:
        BoundedLogV1(0)
    except ValueError:
        return
    raise AssertionError("capacity 0 accepted")

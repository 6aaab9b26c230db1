import threading
import time

from marketplace.shared.locking import KeyedLock


class TestKeyedLock:
    def test_same_key_is_serialized(self):
        locks = KeyedLock()
        active = []
        overlaps = []

        def worker():
            with locks.hold("inv-1"):
                active.append(1)
                if len(active) > 1:
                    overlaps.append(True)
                time.sleep(0.01)
                active.pop()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert overlaps == []

    def test_distinct_keys_do_not_block_each_other(self):
        locks = KeyedLock()
        entered = threading.Event()
        release = threading.Event()

        def holder():
            with locks.hold("inv-1"):
                entered.set()
                release.wait(timeout=2)

        t = threading.Thread(target=holder)
        t.start()
        entered.wait(timeout=2)

        acquired = []

        def other():
            with locks.hold("inv-2"):
                acquired.append(True)

        t2 = threading.Thread(target=other)
        t2.start()
        t2.join(timeout=2)
        release.set()
        t.join()

        assert acquired == [True]

    def test_hold_is_reentrant(self):
        locks = KeyedLock()
        with locks.hold("order-1"):
            with locks.hold("order-1", "order-2"):
                entered = True
        assert entered

    def test_duplicate_keys_are_acquired_once(self):
        locks = KeyedLock()
        with locks.hold("a", "a", "b"):
            pass
        # Released fully: another thread can take the lock immediately
        result = []
        t = threading.Thread(target=lambda: result.append(locks._lock_for("a").acquire(timeout=1)))
        t.start()
        t.join()
        assert result == [True]

    def test_locks_are_released_when_body_raises(self):
        locks = KeyedLock()
        try:
            with locks.hold("inv-1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        result = []
        t = threading.Thread(target=lambda: result.append(locks._lock_for("inv-1").acquire(timeout=1)))
        t.start()
        t.join()
        assert result == [True]

    def test_reset_forgets_locks(self):
        locks = KeyedLock()
        first = locks._lock_for("inv-1")
        locks.reset()
        assert locks._lock_for("inv-1") is not first

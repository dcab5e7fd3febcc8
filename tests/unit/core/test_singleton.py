"""Unit tests for the ThreadSafeSingleton base class."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from confstore.core.patterns import ThreadSafeSingleton


class CountingSingleton(ThreadSafeSingleton):
    """Singleton that counts how often it is initialized."""

    created = 0

    def _initialize(self) -> None:
        type(self).created += 1
        # Widen the race window for concurrent first access
        time.sleep(0.05)
        self.ready = True


class OtherSingleton(ThreadSafeSingleton):
    """Second singleton used to check per-class isolation."""

    cleaned = False

    def _cleanup(self) -> None:
        type(self).cleaned = True


class BrokenCleanupSingleton(ThreadSafeSingleton):
    """Singleton whose cleanup fails."""

    def _cleanup(self) -> None:
        raise RuntimeError("cleanup failed")


@pytest.fixture(autouse=True)
def reset_test_singletons():
    """Reset the test singletons around each test."""
    for cls in (CountingSingleton, OtherSingleton, BrokenCleanupSingleton):
        cls.reset_instance()
    CountingSingleton.created = 0
    OtherSingleton.cleaned = False
    yield
    for cls in (CountingSingleton, OtherSingleton, BrokenCleanupSingleton):
        cls.reset_instance()


class TestSingletonCreation:
    """Tests for lazy creation and identity."""

    def test_not_created_until_first_access(self):
        """Test that no instance exists before first access."""
        assert CountingSingleton.has_instance() is False
        assert CountingSingleton.created == 0

    def test_get_instance_returns_same_object(self):
        """Test that repeated get_instance calls return one object."""
        first = CountingSingleton.get_instance()
        second = CountingSingleton.get_instance()

        assert first is second
        assert CountingSingleton.created == 1

    def test_direct_construction_returns_shared_instance(self):
        """Test that calling the class directly does not create a second instance."""
        first = CountingSingleton.get_instance()
        second = CountingSingleton()

        assert first is second
        assert CountingSingleton.created == 1

    def test_subclasses_have_separate_instances(self):
        """Test that each subclass owns its own instance."""
        counting = CountingSingleton.get_instance()
        other = OtherSingleton.get_instance()

        assert counting is not other
        assert isinstance(counting, CountingSingleton)
        assert isinstance(other, OtherSingleton)

    def test_initialize_runs_before_instance_is_returned(self):
        """Test that the returned instance is fully initialized."""
        instance = CountingSingleton.get_instance()
        assert instance.ready is True


class TestSingletonConcurrency:
    """Tests for concurrent first-time access."""

    def test_concurrent_first_access_creates_one_instance(self):
        """Test that racing threads all observe a single, initialized instance."""
        workers = 20
        barrier = threading.Barrier(workers)

        def grab():
            barrier.wait()
            instance = CountingSingleton.get_instance()
            return instance, instance.ready

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(grab) for _ in range(workers)]
            results = [f.result() for f in futures]

        instances = {id(instance) for instance, _ in results}
        assert len(instances) == 1
        assert all(ready for _, ready in results)
        assert CountingSingleton.created == 1


class TestResetInstance:
    """Tests for reset_instance."""

    def test_reset_creates_new_instance(self):
        """Test that a reset leads to a fresh instance."""
        first = CountingSingleton.get_instance()
        CountingSingleton.reset_instance()
        second = CountingSingleton.get_instance()

        assert first is not second
        assert CountingSingleton.created == 2

    def test_reset_calls_cleanup(self):
        """Test that reset invokes _cleanup on the old instance."""
        OtherSingleton.get_instance()
        OtherSingleton.reset_instance()

        assert OtherSingleton.cleaned is True
        assert OtherSingleton.has_instance() is False

    def test_reset_without_instance_is_noop(self):
        """Test that resetting an uncreated singleton does nothing."""
        OtherSingleton.reset_instance()
        assert OtherSingleton.cleaned is False

    def test_cleanup_failure_is_logged(self, caplog):
        """Test that a failing cleanup is logged and the instance still cleared."""
        BrokenCleanupSingleton.get_instance()

        with caplog.at_level(logging.WARNING):
            BrokenCleanupSingleton.reset_instance()

        assert BrokenCleanupSingleton.has_instance() is False
        assert "cleanup failed" in caplog.text

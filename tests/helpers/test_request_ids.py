"""Tests for request ID generation."""

from concurrent.futures import ThreadPoolExecutor

from nearrpc.helpers.request_ids import (
    DEFAULT_REQUEST_COUNTER,
    RequestIDCounter,
    generate_request_id,
)


class TestRequestIDCounter:
    """Tests for RequestIDCounter class."""

    def test_first_id_is_one(self) -> None:
        """Test that a fresh counter starts from zero and hands out 1."""
        counter = RequestIDCounter()

        assert counter.value == 0
        assert counter.next() == 1
        assert counter.value == 1

    def test_ids_increase_by_one(self) -> None:
        """Test consecutive IDs."""
        counter = RequestIDCounter()

        assert [counter() for _ in range(5)] == [1, 2, 3, 4, 5]

    def test_custom_start(self) -> None:
        """Test counter with a non-zero start."""
        counter = RequestIDCounter(start=100)

        assert counter() == 101

    def test_counters_are_independent(self) -> None:
        """Test that separate counters do not share state."""
        first = RequestIDCounter()
        second = RequestIDCounter()
        first()
        first()

        assert second() == 1

    def test_threads_never_share_an_id(self) -> None:
        """Test uniqueness under concurrent increments from threads."""
        counter = RequestIDCounter()

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: counter.next(), range(2000)))

        assert len(set(ids)) == 2000
        assert sorted(ids) == list(range(1, 2001))
        assert counter.value == 2000


class TestGenerateRequestId:
    """Tests for the process-wide generator."""

    def test_uses_default_counter(self) -> None:
        """Test that generate_request_id advances the shared counter."""
        before = DEFAULT_REQUEST_COUNTER.value
        request_id = generate_request_id()

        assert request_id > before
        assert DEFAULT_REQUEST_COUNTER.value >= request_id

    def test_monotonic(self) -> None:
        """Test that successive IDs increase."""
        first = generate_request_id()
        second = generate_request_id()

        assert second > first

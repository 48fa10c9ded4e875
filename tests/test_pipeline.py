import threading
import time

import pytest

from studykit.pipeline import (
    Request,
    TickerRateLimiter,
    generate,
    make_batch_api_calls,
    pool_workers,
    process_parallel,
    square,
)


def test_generate_yields_one_to_count():
    assert list(generate(10)) == list(range(1, 11))


def test_square_pipeline():
    assert list(square(generate(5), 0)) == [n * n for n in range(1, 6)]


def test_pool_workers_applies_function_to_all():
    results = pool_workers(lambda x: x * x, range(10), 3)
    assert sorted(results) == sorted(x * x for x in range(10))


def test_pool_workers_propagates_errors():
    def fail(x):
        if x == 4:
            raise KeyError(x)
        return x

    with pytest.raises(KeyError):
        pool_workers(fail, range(10), 3)


def test_pool_workers_rejects_zero_workers():
    with pytest.raises(ValueError):
        pool_workers(lambda x: x, [1], 0)


def test_process_parallel_processes_everything():
    results = process_parallel(range(100), 5, lambda v: v * 2)
    assert sorted(results) == [v * 2 for v in range(100)]


def test_process_parallel_drops_work_after_timeout():
    def slow(v):
        time.sleep(0.2)
        return v

    start = time.monotonic()
    results = process_parallel(range(50), 5, slow, timeout=0.05)
    assert results == []
    assert time.monotonic() - start < 1.0


def _fake_time():
    now = [0.0]
    slept = []

    def clock():
        return now[0]

    def sleep(seconds):
        slept.append(seconds)
        now[0] += seconds

    return now, slept, clock, sleep


def test_ticker_waits_one_interval_per_call():
    now, slept, clock, sleep = _fake_time()
    limiter = TickerRateLimiter(10, clock=clock, sleep=sleep)
    limiter.wait()
    limiter.wait()
    assert slept == [pytest.approx(limiter.interval), pytest.approx(limiter.interval)]


def test_ticker_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        TickerRateLimiter(0)


class _RecordingClient:
    def __init__(self, failing=()):
        self.sent = []
        self.failing = set(failing)
        self._lock = threading.Lock()

    def send_request(self, request):
        if request.payload in self.failing:
            raise RuntimeError(request.payload)
        with self._lock:
            self.sent.append(request.payload)


def test_batch_sends_every_request():
    client = _RecordingClient()
    requests = [Request(str(i)) for i in range(20)]
    failures = make_batch_api_calls(client, requests, rps=1000)
    assert failures == []
    assert sorted(client.sent) == sorted(r.payload for r in requests)


def test_batch_reports_failures():
    client = _RecordingClient(failing={"3", "7"})
    requests = [Request(str(i)) for i in range(10)]
    failures = make_batch_api_calls(client, requests, rps=1000)
    assert sorted(r.payload for r, _ in failures) == ["3", "7"]
    assert all(isinstance(exc, RuntimeError) for _, exc in failures)
    assert len(client.sent) == 8
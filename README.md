# studykit

Small, self-contained reference implementations of rate limiters, a cache,
stacks, concurrency patterns and a few classic interview puzzles. Only the
standard library is used.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `studykit.ratelimit` | `Decision`, the abstract `Limiter` with `allow(key)`, and the in-memory `InMemoryFixedWindowLimiter`, `InMemorySlidingWindowLimiter` and `InMemoryTokenBucketLimiter`; also the key-less `SlidingWindowLimiter` whose `allow()` returns a bool |
| `studykit.debuglog` | `Logger` (strftime time format, debug flag, `log`, `switch_debug`), `LoggerLevel`, `print_loggers`, and `StatementLog`, which writes only while debug is on |
| `studykit.animals` | `Animal`, `Cat`, `Dog`, `new_cat`, `new_dog`, `print_animal`, `print_animal_type` |
| `studykit.flexjson` | `parse_ne_bool` ("yes"/"true"/"1" are true), `RequestData`, `RawRequestData`, `parse_request_data`, `parse_raw_request_data` |
| `studykit.samplecheck` | `Sample` and `check_samples`, which prints a report and returns whether each sample matched |
| `studykit.topk` | `top_k_elements`: the k largest values in ascending order, using a bounded min-heap |
| `studykit.textops` | `reverse` and `is_palindrome`, working on characters rather than bytes |
| `studykit.stack` | Generic `Stack` (`push`, `pop`, `peek`, `empty`), `normalize_path`, `IntStack` and the thread-safe `ConcurrentIntStack`; popping an empty stack raises `IndexError` |
| `studykit.lru` | `LRUCache` with `put` and `get`; `get` of a missing key raises `KeyError` |
| `studykit.puzzles` | `Flight`, `find_route`, `find_max_average`, `find_max_average_naive`, `count_strokes`, `count_fills`, `find_replace_index` |
| `studykit.extsort` | External sort: `split_and_sort_chunks`, `write_chunk_to_file`, `merge_chunks`, and the `main` command |
| `studykit.singleflight` | `Singleflight.do(key, task)` runs one task per key at a time and shares its result; failures raise `SingleflightError`, an expired wait raises `TimeoutError` |
| `studykit.pubsub` | `PubSub` with `subscribe` (an iterable subscription), `publish` and `close` |
| `studykit.protected_map` | `ProtectedMap`, a lock-guarded mapping with `put` and `get` |
| `studykit.stream` | `LocalStream` answers each `UserEvent` with a `StreamAck`; `send`/`recv` raise `StreamClosed` after `close` or the timeout |
| `studykit.outbox` | `KafkaMessage` and a `Worker` that checks each transfer with antifraud and limits, pays, and acknowledges, until a `threading.Event` is set |
| `studykit.taxi` | `Point`, `Location`, `LOCATIONS` and a `Consumer` counting riders and drivers per location, with `get_demand` |
| `studykit.closebox` | `Box`, a string channel closed safely by `safe_close` or `safe_close_once`, with `write_values` and `read_values` |
| `studykit.fetcher` | `Result`, `FetchError` and `Fetcher.fetch_all(ids, workers)`: a cached worker pool with an optional deadline that stops at the first failure |
| `studykit.pipeline` | `generate`, `square`, `pool_workers`, `process_parallel`, `Request`, `TickerRateLimiter` and `make_batch_api_calls` |

## Examples

```python
from studykit.topk import top_k_elements
from studykit.puzzles import find_replace_index

top_k_elements([12, 3, 17, 8, 34, 25, 99, 45, 67, 5, 19, 21, 23, 88, 100], 10)
# [19, 21, 23, 25, 34, 45, 67, 88, 99, 100]

find_replace_index("(((()))(")  # 7: flipping that bracket balances the string
find_replace_index("(((((")     # -1
```

Every limiter takes a `clock` keyword, which makes it easy to drive in tests.
Times are in seconds:

```python
from studykit.ratelimit import InMemoryTokenBucketLimiter

limiter = InMemoryTokenBucketLimiter(2, 1, clock=lambda: 0.0)
limiter.allow("ip-1").allowed   # True
limiter.allow("ip-1").allowed   # True
limiter.allow("ip-1")           # Decision(allowed=False, retry_after=1.0)
```

## Command line

```
studykit-extsort [input] [output] [--chunk-dir DIR] [--chunk-size BYTES]
```

The command reads one integer per line from `input` (default `bigfile.txt`).
It writes sorted `chunk_N.txt` files into `--chunk-dir` (default: the current
directory), then merges them into `output` (default `sorted_output.txt`). A
chunk is written out once it holds `--chunk-size` bytes' worth of 8-byte
numbers. The default is 1 GiB. Chunk files are left in place after the merge.

## What it does not do

All state lives in the process. The rate limiters, cache and fetcher cache
have no shared or persistent storage backend, and nothing talks to a network
service. By default `Fetcher`, `square` and `process_parallel` simulate their
work with short sleeps. The outbox `Worker` only calls the collaborator
objects you pass it.
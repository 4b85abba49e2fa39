"""Rate limiter CLI: fire simulated requests at a limiter and report totals."""

from __future__ import annotations

import argparse
import json
import logging
import threading

from tokenbucket.config.logging_config import setup_logging
from tokenbucket.config.settings import get_settings
from tokenbucket.core.errors import InvalidConfiguration
from tokenbucket.core.limiter import TokenBucketLimiter, new_limiter

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Token bucket rate limiter tools.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Send a burst of requests for one key.")
    sim.add_argument("key", help="Key to rate limit.")
    sim.add_argument("--requests", type=_non_negative_int, default=20, help="Total allow() calls.")
    sim.add_argument("--threads", type=_positive_int, default=1, help="Threads sharing the calls.")
    sim.add_argument("--capacity", type=float, default=None, help="Bucket capacity.")
    sim.add_argument("--refill-rate", type=float, default=None, help="Tokens per second.")

    return parser


def simulate(limiter: TokenBucketLimiter, key: str, requests: int, threads: int) -> dict:
    """
    Issue ``requests`` calls for ``key`` spread over ``threads`` threads.

    All threads start together so that calls contend on the same bucket.
    """
    if requests < 0:
        raise ValueError(f"requests must be >= 0, got {requests}")
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")
    threads = max(1, min(threads, requests)) if requests > 0 else 1
    counts = {"admitted": 0, "denied": 0}
    counts_lock = threading.Lock()
    barrier = threading.Barrier(threads)

    share, extra = divmod(requests, threads)

    def run(n: int) -> None:
        admitted = 0
        barrier.wait()
        for _ in range(n):
            if limiter.allow(key):
                admitted += 1
        with counts_lock:
            counts["admitted"] += admitted
            counts["denied"] += n - admitted

    workers = [
        threading.Thread(target=run, args=(share + (1 if i < extra else 0),), name=f"sim-{i}")
        for i in range(threads)
    ]
    for t in workers:
        t.start()
    for t in workers:
        t.join()

    return {"key": key, "requests": requests, "threads": threads, **counts}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, level=args.log_level)

    if args.command != "simulate":
        parser.print_help()
        return 1

    capacity = args.capacity if args.capacity is not None else settings.limiter.capacity
    refill_rate = args.refill_rate if args.refill_rate is not None else settings.limiter.refill_rate

    try:
        limiter = new_limiter(capacity, refill_rate)
    except InvalidConfiguration as exc:
        logger.error("Invalid limiter configuration: %s", exc)
        return 2

    summary = simulate(limiter, args.key, args.requests, args.threads)
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

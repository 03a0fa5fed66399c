"""
Demo for the process-wide lazy singleton.

Starts one thread per init value. Each thread calls get_instance() with its
own value and prints what it got back. Every thread prints the same value,
which is whichever init value won the race.

Usage:
    python -m lazy_holder.main              # FOO and BAR (or DEMO_VALUES)
    python -m lazy_holder.main A B C D      # one thread per value
    lazy-holder-demo --timeout 5 FOO BAR
"""

import argparse
import logging
import sys
import threading
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .config import get_config
from .constants import DEMO_HEADER, LOG_FORMAT
from .core.patterns import validate_timeout
from .instance import get_instance

logger = logging.getLogger(__name__)


def _timeout_arg(text: str) -> Optional[float]:
    try:
        return validate_timeout(float(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Race threads to initialize a lazy singleton"
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Init values, one thread each (default: DEMO_VALUES or FOO BAR)",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout_arg,
        default=None,
        help="Seconds to wait for a concurrent construction (default: HOLDER_LOCK_TIMEOUT)",
    )
    return parser.parse_args(argv)


def run_demo(values: List[str], timeout: Optional[float] = None) -> Dict[str, Optional[str]]:
    """
    Race one thread per value to get_instance() and print each result.

    Args:
        values: Init values, one per thread
        timeout: Lock timeout passed to get_instance()

    Returns:
        Mapping of thread name to the value it observed (None if it failed)
    """
    results: Dict[str, Optional[str]] = {}
    results_lock = threading.Lock()

    def worker(init_value: str) -> None:
        name = threading.current_thread().name
        observed: Optional[str] = None
        try:
            observed = get_instance(init_value, timeout=timeout).value
            print(observed)
        except Exception as e:
            logger.error(f"[{name}] get_instance({init_value!r}) failed: {e}")
        with results_lock:
            results[name] = observed

    threads = [
        threading.Thread(target=worker, args=(value,), name=f"demo-{i}-{value}")
        for i, value in enumerate(values)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo and return the process exit code."""
    load_dotenv()
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    args = parse_args(argv)
    values = args.values or config.demo_values

    logger.info(f"Starting {len(values)} threads: {', '.join(values)}")
    print(DEMO_HEADER)
    results = run_demo(values, timeout=args.timeout)

    failed = [name for name, value in results.items() if value is None]
    if failed:
        logger.error(f"{len(failed)} thread(s) failed: {', '.join(sorted(failed))}")
        return 1

    logger.info(f"All threads observed {next(iter(results.values()))!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

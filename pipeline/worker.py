#!/usr/bin/env python3
"""
RQ Worker for scoring jobs.

Usage:
    python -m pipeline.worker
    python -m pipeline.worker --burst
    python -m pipeline.worker --verbose
"""

import sys
import argparse
import logging

from redis import Redis
from rq import Worker

from core.config_loader import load_config

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def start_worker(redis_url: str, queues: list, burst: bool = False):
    """Start the RQ worker."""
    logger.info("Starting RQ Worker")
    logger.info(f"Redis URL: {redis_url}")
    logger.info(f"Queues: {', '.join(queues)}")
    logger.info(f"Burst mode: {burst}")

    try:
        redis_conn = Redis.from_url(redis_url)
        redis_conn.ping()
        logger.info("Connected to Redis")

        worker = Worker(queues, connection=redis_conn)

        if burst:
            logger.info("Running in burst mode...")
            worker.work(burst=True)
        else:
            logger.info("Worker started. Press Ctrl+C to stop.")
            worker.work()

    except KeyboardInterrupt:
        logger.info("Worker stopped")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def main():
    config = load_config()

    parser = argparse.ArgumentParser(description='Tipping Arena Scoring Worker')
    parser.add_argument('--burst', action='store_true', help='Process all and exit')
    parser.add_argument('--queues', nargs='+', default=[config.queue.queue_name])
    parser.add_argument('--verbose', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    redis_url = config.queue.redis_url or 'redis://localhost:6379/0'
    start_worker(redis_url, queues=args.queues, burst=args.burst)


if __name__ == '__main__':
    main()

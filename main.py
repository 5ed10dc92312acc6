#!/usr/bin/env python3
"""
Tipping Arena - command line entry point.

Usage:
    python main.py init-db
    python main.py score <match_id> [--queue]
    python main.py rescore <match_id> [--queue]
    python main.py catch-up [--limit N]
"""

import sys
import json
import logging
import argparse

from core.config_loader import load_config
from core.scorer import ScoringService, ScoringError
from database.database import make_engine, make_session_factory
from database.init_db import init_db
from database.uow import bind_scoring_uow
from pipeline.scoring_queue import ScoringQueue
from pipeline.catch_up import enqueue_missed_matches

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Tipping Arena scoring')
    parser.add_argument('--config', default='config.yaml', help='Path to config.yaml')
    parser.add_argument('--verbose', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='Create database tables')

    score = subparsers.add_parser('score', help='Score pending predictions of a finished match')
    score.add_argument('match_id')
    score.add_argument('--queue', action='store_true', help='Enqueue instead of scoring in-process')

    rescore = subparsers.add_parser('rescore', help='Reset and rescore a finished match')
    rescore.add_argument('match_id')
    rescore.add_argument('--queue', action='store_true', help='Enqueue instead of scoring in-process')

    catch_up = subparsers.add_parser('catch-up', help='Enqueue finished matches with pending predictions')
    catch_up.add_argument('--limit', type=int, default=None)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    engine = make_engine(config.database.url)
    uow_factory = bind_scoring_uow(make_session_factory(engine))

    if args.command == 'init-db':
        init_db(bind=engine)
        return 0

    if args.command == 'catch-up':
        queue = ScoringQueue(config.queue)
        limit = args.limit or config.queue.catch_up_limit
        match_ids = enqueue_missed_matches(queue, limit=limit, uow_factory=uow_factory)
        print(json.dumps({'enqueued': match_ids}, indent=2))
        return 0

    if args.queue:
        queue = ScoringQueue(config.queue)
        if args.command == 'score':
            result = queue.enqueue_scoring(args.match_id)
        else:
            result = queue.enqueue_rescore(args.match_id)
        print(json.dumps(result, indent=2, default=str))
        return 0

    service = ScoringService(uow_factory=uow_factory, config=config.scoring)
    try:
        if args.command == 'score':
            report = service.score_match(args.match_id)
        else:
            report = service.rescore_match(args.match_id)
    except ScoringError as e:
        logger.error(f"{args.command} failed for match {args.match_id}: {e}")
        return 1

    print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Redis queue client for scoring jobs."""

import os
import logging
from typing import Any, Callable, Dict, Optional

from redis import Redis
from redis.exceptions import RedisError
from rq import Queue, Retry
from rq.job import JobStatus

from core.config_loader import QueueConfig
from pipeline.tasks import score_match_task, rescore_match_task

logger = logging.getLogger(__name__)

ACTIVE_JOB_STATUSES = (
    JobStatus.QUEUED,
    JobStatus.STARTED,
    JobStatus.DEFERRED,
    JobStatus.SCHEDULED,
)


class ScoringQueue:
    """
    Enqueues scoring jobs on Redis, one job id per match and action.

    When the queue is disabled in config, or Redis is unreachable at
    startup, jobs are executed synchronously in the calling process.
    """

    def __init__(self, config: Optional[QueueConfig] = None, redis_conn: Optional[Redis] = None):
        self.config = config or QueueConfig()
        self.redis_url = self.config.redis_url or os.environ.get(
            'REDIS_URL',
            'redis://localhost:6379/0'
        )

        if not self.config.enabled:
            logger.info("Scoring queue disabled via config. Using sync mode.")
            self.redis_conn = None
            self.queue = None
            self.async_mode = False
            return

        try:
            self.redis_conn = redis_conn or Redis.from_url(self.redis_url)
            self.redis_conn.ping()
            self.queue = Queue(self.config.queue_name, connection=self.redis_conn)
            self.async_mode = True
            logger.info(f"Scoring queue '{self.config.queue_name}' connected to Redis")
        except RedisError as e:
            logger.error(f"Redis connection failed: {e}. Falling back to sync mode.")
            self.redis_conn = None
            self.queue = None
            self.async_mode = False

    def enqueue_scoring(self, match_id: str) -> Dict[str, Any]:
        return self._enqueue(score_match_task, f"score-{match_id}", match_id)

    def enqueue_rescore(self, match_id: str) -> Dict[str, Any]:
        return self._enqueue(rescore_match_task, f"rescore-{match_id}", match_id)

    def _enqueue(self, func: Callable[..., Dict[str, Any]], job_id: str, match_id: str) -> Dict[str, Any]:
        if not self.async_mode:
            return {'job_id': None, 'queued': False, 'result': func(match_id)}

        existing = self.queue.fetch_job(job_id)
        if existing is not None and existing.get_status() in ACTIVE_JOB_STATUSES:
            logger.info(f"Job {job_id} already queued, not enqueuing again")
            return {'job_id': existing.id, 'queued': False, 'result': None}

        job = self.queue.enqueue(
            func,
            match_id,
            job_id=job_id,
            job_timeout=self.config.job_timeout,
            result_ttl=self.config.result_ttl,
            retry=Retry(max=self.config.retry_max, interval=self.config.retry_intervals)
        )
        logger.info(f"Queued {func.__name__} for match {match_id} as job {job.id}")
        return {'job_id': job.id, 'queued': True, 'result': None}

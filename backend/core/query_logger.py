# backend/core/query_logger.py

import logging
import time
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine import Engine

from core.config import get_settings

logger = logging.getLogger("sqlalchemy.engine")
query_logger = logging.getLogger("query_performance")

settings = get_settings()


class QueryLogger:
    """SQL Query Logger for development and debugging"""

    def __init__(self):
        self.enabled = settings.is_development or settings.debug
        self.slow_query_threshold = settings.slow_query_threshold_seconds
        self.query_stats: Dict[str, Any] = {
            "total_queries": 0,
            "slow_queries": 0,
            "total_time": 0.0,
        }

    def record(self, statement: str, elapsed: float) -> None:
        self.query_stats["total_queries"] += 1
        self.query_stats["total_time"] += elapsed

        if elapsed > self.slow_query_threshold:
            self.query_stats["slow_queries"] += 1
            query_logger.warning(
                f"SLOW QUERY ({elapsed:.3f}s): {statement[:200]}..."
            )

    def log_query_stats(self):
        """Log accumulated query statistics"""
        if not self.enabled:
            return

        total = self.query_stats["total_queries"]
        query_logger.info(
            f"Query statistics: total={total} "
            f"slow={self.query_stats['slow_queries']} "
            f"avg={self.query_stats['total_time'] / max(total, 1):.3f}s"
        )

    def reset_stats(self):
        """Reset query statistics"""
        self.query_stats = {
            "total_queries": 0,
            "slow_queries": 0,
            "total_time": 0.0,
        }


# Singleton instance
query_logger_instance = QueryLogger()


def setup_query_logging(engine: Engine):
    """
    Setup query logging for an SQLAlchemy engine

    Args:
        engine: SQLAlchemy engine instance
    """
    if not query_logger_instance.enabled:
        return

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.perf_counter())

        if settings.log_sql_queries:
            logger.debug("Start Query: %s", statement)

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        elapsed = time.perf_counter() - conn.info["query_start_time"].pop(-1)
        query_logger_instance.record(statement, elapsed)

        if settings.log_sql_queries:
            logger.debug("Query Complete in %.3fs", elapsed)

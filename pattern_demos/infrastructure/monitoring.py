"""Monitoring and metrics using Prometheus.

Counters live in the default in-process registry; nothing is served over
HTTP. The CLI can print them in text exposition format after a run.
"""
import logging
from prometheus_client import Counter, REGISTRY, generate_latest

from pattern_demos.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
media_dispatch_total = Counter(
    'pattern_demos_media_dispatch_total',
    'Total number of media files dispatched by the audio player',
    ['format', 'status']
)

demo_runs_total = Counter(
    'pattern_demos_demo_runs_total',
    'Total number of demo runs',
    ['demo', 'status']
)


def track_media_dispatch(media_format: str, supported: bool) -> None:
    """
    Track media dispatch metrics.
    
    Args:
        media_format: Matched suffix (e.g., '.mp3'), or 'unknown'
        supported: Whether an adapter was found for the file
    """
    try:
        if Config.ENABLE_METRICS:
            status = "played" if supported else "unsupported"
            media_dispatch_total.labels(format=media_format, status=status).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track media dispatch metrics: {e}")


def track_demo_run(demo_name: str, success: bool) -> None:
    """
    Track demo run metrics.
    
    Args:
        demo_name: Name of the demo that ran
        success: Whether the demo completed without raising
    """
    try:
        if Config.ENABLE_METRICS:
            status = "success" if success else "error"
            demo_runs_total.labels(demo=demo_name, status=status).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track demo run metrics: {e}")


def render_metrics() -> str:
    """Render every registered metric in Prometheus text format."""
    return generate_latest(REGISTRY).decode("utf-8")

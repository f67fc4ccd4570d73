"""Diary background worker - periodically applies scheduled commands."""

import logging

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import Config, load_config
from .executor import CommandExecutor
from .ports import CommandQueue
from .workflows import get_command_queue, get_state_store

logger = logging.getLogger(__name__)


def drain_job(executor: CommandExecutor, queue: CommandQueue) -> None:
    """Scheduler job: apply everything pending, never let an error kill the worker."""
    try:
        executor.drain(queue)
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to drain command log: {e}")


def setup_scheduler(config: Config | None = None) -> BlockingScheduler:
    """Set up the periodic drain job."""
    if config is None:
        config = load_config()

    interval = config.poll_interval
    if interval <= 0:
        logger.warning(f"Invalid poll interval {interval}s, using 5s")
        interval = 5

    scheduler = BlockingScheduler()
    executor = CommandExecutor(get_state_store(config))
    scheduler.add_job(
        drain_job,
        IntervalTrigger(seconds=interval),
        args=[executor, get_command_queue(config)],
        id="drain_commands",
        # Commands must be applied one at a time
        max_instances=1,
        coalesce=True,
    )
    logger.info(f"Scheduled command drain every {interval}s")
    return scheduler


def run_worker(config: Config | None = None) -> None:
    """Run the worker until interrupted."""
    if config is None:
        config = load_config()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, config.log_level, logging.INFO),
    )

    scheduler = setup_scheduler(config)
    logger.info(f"Starting Diary worker on {config.data_path}")
    scheduler.start()

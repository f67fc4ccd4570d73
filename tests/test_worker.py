"""Tests for the background worker."""

from unittest.mock import MagicMock

from diary.config import Config
from diary.worker import drain_job, setup_scheduler


class TestSetupScheduler:
    def test_registers_drain_job(self, tmp_path):
        scheduler = setup_scheduler(Config(data_dir=str(tmp_path), poll_interval=30))
        job = scheduler.get_job("drain_commands")
        assert job is not None
        assert job.trigger.interval.total_seconds() == 30
        assert job.max_instances == 1

    def test_invalid_interval_falls_back(self, tmp_path):
        scheduler = setup_scheduler(Config(data_dir=str(tmp_path), poll_interval=0))
        job = scheduler.get_job("drain_commands")
        assert job.trigger.interval.total_seconds() == 5


class TestDrainJob:
    def test_drains_queue(self):
        executor = MagicMock()
        queue = MagicMock()
        drain_job(executor, queue)
        executor.drain.assert_called_once_with(queue)

    def test_io_errors_do_not_escape(self):
        executor = MagicMock()
        executor.drain.side_effect = OSError("disk full")
        drain_job(executor, MagicMock())

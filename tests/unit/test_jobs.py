"""
Tests for the worker-side message processor.
"""
from unittest.mock import MagicMock, patch

from base_api.queue.jobs import process_message


def test_process_message_outside_worker():
    payload = {"message": "hello", "timestamp": "2024-01-01T00:00:00+00:00", "metadata": None}

    result = process_message(payload, delay_seconds=0)

    assert set(result) == {"processed", "message", "timestamp", "processedAt"}
    assert result["processed"] is True
    assert result["message"] == "hello"
    assert result["timestamp"] == payload["timestamp"]
    assert result["processedAt"]


def test_process_message_reports_progress():
    job = MagicMock()
    job.id = "job-1"
    job.meta = {}
    reported = []
    job.save_meta.side_effect = lambda: reported.append(job.meta["progress"])

    with patch("base_api.queue.jobs.get_current_job", return_value=job):
        process_message({"message": "hello"}, delay_seconds=0)

    assert reported == [0, 50, 100]


def test_process_message_uses_configured_delay():
    with patch("base_api.queue.jobs.time.sleep") as sleep:
        process_message({"message": "hello"})

    # JOB_SIMULATED_DELAY_SECONDS is 0 in the test environment
    sleep.assert_called_once_with(0.0)

import threading
import time

import pytest

from dns_probe.context import CheckContext
from dns_probe.errors import CheckCancelled, DeadlineExceeded, DeadlineMissingError


def test_with_timeout_sets_absolute_deadline():
    before = time.time()
    context = CheckContext.with_timeout(5)

    assert before + 5 <= context.deadline <= time.time() + 5
    assert 0 < context.remaining() <= 5
    assert context.err() is None


def test_with_timeout_rejects_non_positive():
    with pytest.raises(ValueError, match="positive"):
        CheckContext.with_timeout(0)


def test_background_context_has_no_deadline():
    context = CheckContext.background()

    assert context.deadline is None
    assert context.err() is None
    with pytest.raises(DeadlineMissingError, match="deadline not set"):
        context.remaining()


def test_expired_deadline_reports_deadline_exceeded():
    context = CheckContext(time.time() - 1)

    assert context.remaining() == 0.0
    assert isinstance(context.err(), DeadlineExceeded)
    with pytest.raises(DeadlineExceeded):
        context.raise_if_done()


def test_cancel_takes_precedence_over_deadline():
    context = CheckContext(time.time() - 1)
    context.cancel()

    assert context.cancelled is True
    assert isinstance(context.err(), CheckCancelled)


def test_cancel_from_another_thread():
    context = CheckContext.with_timeout(5)
    worker = threading.Thread(target=context.cancel)
    worker.start()
    worker.join()

    with pytest.raises(CheckCancelled):
        context.raise_if_done()

import asyncio

import pytest
from tenacity import wait_none

from starr.application.exceptions import StatusError, TransportError
from starr.infrastructure.decorators import retry_on_transport_error


def _flaky(failures, error):
    calls = []

    @retry_on_transport_error
    async def call_service():
        calls.append(1)
        if len(calls) <= failures:
            raise error
        return "ok"

    return call_service.retry_with(wait=wait_none()), calls


class TestRetryOnTransportError:
    def test_recovers_after_transport_errors(self):
        call, calls = _flaky(2, TransportError("connection refused"))

        assert asyncio.run(call()) == "ok"
        assert len(calls) == 3

    def test_gives_up_after_three_attempts(self):
        call, calls = _flaky(5, TransportError("connection refused"))

        with pytest.raises(TransportError):
            asyncio.run(call())
        assert len(calls) == 3

    def test_status_errors_are_not_retried(self):
        call, calls = _flaky(5, StatusError(500, "boom"))

        with pytest.raises(StatusError):
            asyncio.run(call())
        assert len(calls) == 1

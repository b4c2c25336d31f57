"""HTTP client that executes parsed reqline requests.

Wraps a requests.Session and shapes the response into a ResponseEnvelope
with timing metadata.
"""

import logging
import time

import requests
from pydantic import JsonValue

from reqline.errors import ExecutionError
from reqline.parser.base import RequestDescriptor, RequestEcho, ResponseEnvelope, ResponseMetrics
from reqline.parser.jsonvalue import json_keys, stringify

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = None  # seconds; None waits indefinitely


class ReqlineClient:
    """Executes RequestDescriptors over HTTP."""

    def __init__(
        self,
        timeout: float | None = None,
        raise_for_status: bool = True,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.raise_for_status = raise_for_status
        self.session = session or requests.Session()

    def send_request(self, request: RequestDescriptor) -> ResponseEnvelope:
        """Send the request and return the envelope.

        Raises ExecutionError when the transport fails, or on a non-2xx
        status while raise_for_status is enabled.
        """
        kwargs = {"headers": _header_dict(request.headers), "timeout": self.timeout}
        if request.method == "POST" and json_keys(request.body):
            # String bodies go out raw, everything else as JSON.
            if isinstance(request.body, str):
                kwargs["data"] = request.body.encode("utf-8")
            else:
                kwargs["json"] = request.body

        logger.debug("Sending %s %s", request.method, request.url)
        start = _now_ms()
        try:
            response = self.session.request(request.method, request.url, **kwargs)
            if self.raise_for_status:
                response.raise_for_status()
        except requests.HTTPError as e:
            raise ExecutionError(
                str(e),
                status=e.response.status_code,
                response_data=_response_data(e.response),
            ) from e
        except requests.RequestException as e:
            raise ExecutionError(str(e)) from e
        stop = _now_ms()
        logger.debug("Received %s in %d ms", response.status_code, stop - start)

        return ResponseEnvelope(
            request=RequestEcho(
                query=request.query,
                body=request.body,
                headers=request.headers,
                full_url=request.full_url,
            ),
            response=ResponseMetrics(
                http_status=response.status_code,
                duration=stop - start,
                request_start_timestamp=start,
                request_stop_timestamp=stop,
                response_data=_response_data(response),
            ),
        )


def _now_ms() -> int:
    return int(time.time() * 1000)


def _header_dict(headers: JsonValue) -> dict[str, str]:
    if not isinstance(headers, dict):
        return {}
    return {k: stringify(v) for k, v in headers.items()}


def _response_data(response: requests.Response) -> JsonValue:
    try:
        return response.json()
    except ValueError:
        return response.text

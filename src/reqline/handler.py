"""Request handler: maps a reqline payload to a status code and response data."""

from pydantic import BaseModel

from reqline.client import ReqlineClient
from reqline.errors import ReqlineError
from reqline.parser.statement import parse_reqline

HTTP_201_CREATED = 201
HTTP_400_BAD_REQUEST = 400


class HandlerResponse(BaseModel):
    status: int
    data: dict


def handle_reqline(payload: dict, client: ReqlineClient | None = None) -> HandlerResponse:
    """Parse and execute ``payload["reqline"]``.

    Parse and execution failures both map to 400 with an error message;
    a successful run maps to 201 with the response envelope.
    """
    reqline = payload.get("reqline")
    if not reqline:
        return _error("Missing reqline parameter")

    client = client or ReqlineClient()
    try:
        request = parse_reqline(reqline)
        envelope = client.send_request(request)
    except ReqlineError as e:
        return _error(e.message)

    return HandlerResponse(status=HTTP_201_CREATED, data=envelope.model_dump())


def _error(message: str) -> HandlerResponse:
    return HandlerResponse(status=HTTP_400_BAD_REQUEST, data={"error": True, "message": message})

"""JsonLinesChannel — serves a QueryService over newline-delimited JSON streams."""

import asyncio
import json
from typing import Any, TextIO

from usage_meter.query.application.service import QueryService
from usage_meter.query.domain.envelope import Failure, RequestEnvelope
from usage_meter.query.domain.observer import QueryObserver

_BAD_REQUEST = "BAD_REQUEST"


class JsonLinesChannel:
    """Reads one request per line and writes exactly one response line for it.

    Requests are handled strictly in order. A request ``id`` is echoed back so
    callers can correlate responses; malformed lines get a BAD_REQUEST error.
    """

    def __init__(self, service: QueryService, observer: QueryObserver) -> None:
        self._service = service
        self._observer = observer

    async def serve(self, reader: TextIO, writer: TextIO) -> int:
        """Serve until *reader* is exhausted. Returns the number of responses written."""
        handled = 0
        while True:
            line = await asyncio.to_thread(reader.readline)
            if not line:
                return handled
            if not line.strip():
                continue
            response = await self.handle_line(line)
            writer.write(json.dumps(response) + "\n")
            writer.flush()
            handled += 1

    async def handle_line(self, line: str) -> dict[str, Any]:
        """Decode *line*, dispatch it, and return the serialized response."""
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as exc:
            return self._bad_request(reason=f"invalid JSON: {exc.msg}", request_id=None)

        if not isinstance(raw, dict):
            return self._bad_request(reason="request must be a JSON object", request_id=None)

        request_id = raw.get("id")
        try:
            request = RequestEnvelope.from_mapping(raw)
        except ValueError as exc:
            return self._bad_request(reason=str(exc), request_id=request_id)

        response = (await self._service.handle(request)).to_dict()
        return _with_id(response, request_id)

    def _bad_request(self, reason: str, request_id: Any) -> dict[str, Any]:
        self._observer.request_malformed(reason=reason)
        failure = Failure(code=_BAD_REQUEST, message=f"Failed to parse request: {reason}")
        return _with_id(failure.to_dict(), request_id)


def _with_id(response: dict[str, Any], request_id: Any) -> dict[str, Any]:
    if request_id is None:
        return response
    return {"id": request_id, **response}

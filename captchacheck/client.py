"""A small HTTP client that sends form or JSON bodies and decodes JSON replies."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Mapping
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlsplit, urlunsplit

_FORM_TYPE = "application/x-www-form-urlencoded"
_JSON_TYPE = "application/json"


class RequestError(Exception):
    """An HTTP request could not be made or did not succeed."""


def _is_form(body: Any) -> bool:
    return (
        isinstance(body, (list, tuple))
        and len(body) > 0
        and all(
            isinstance(pair, tuple)
            and len(pair) == 2
            and all(isinstance(part, str) for part in pair)
            for pair in body
        )
    )


def _encode_form(pairs: list[tuple[str, str]]) -> str:
    # Fields are ordered by name, keeping the order of repeated names.
    return urlencode(sorted(pairs, key=lambda pair: pair[0]))


def _with_query(endpoint: str, params: Mapping[str, str]) -> str:
    parts = urlsplit(endpoint)
    query = urlencode(sorted(params.items()))
    return urlunsplit(parts._replace(query=query))


class Client:
    """Sends requests with a fixed timeout, honouring proxy settings from the environment."""

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout
        self._opener = urllib.request.build_opener()

    def request(
        self,
        endpoint: str,
        method: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON reply, or None if it is empty.

        A body given as a sequence of (name, value) string pairs is sent
        form-encoded; any other body is sent as JSON.
        """
        sent_headers = dict(headers or {})
        data: bytes | None = None

        if body is not None:
            if _is_form(body):
                data = _encode_form(list(body)).encode("utf-8")
                default_type = _FORM_TYPE
            else:
                try:
                    data = json.dumps(body, separators=(",", ":")).encode("utf-8")
                except (TypeError, ValueError) as exc:
                    raise RequestError(f"json: unsupported type: {exc}") from exc
                default_type = _JSON_TYPE
            if not any(name.lower() == "content-type" for name in sent_headers):
                sent_headers["Content-Type"] = default_type

        url = _with_query(endpoint, params) if params else endpoint

        try:
            req = urllib.request.Request(url, data=data, headers=sent_headers, method=method)
        except ValueError as exc:
            raise RequestError(str(exc)) from exc

        try:
            with self._opener.open(req, timeout=self.timeout) as res:
                payload = res.read()
        except HTTPError as exc:
            exc.close()
            raise RequestError(f"non-2xx response: {exc.code} {exc.reason}") from exc
        except (URLError, OSError, ValueError) as exc:
            raise RequestError(str(exc)) from exc

        if not payload.strip():
            return None
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise RequestError(f"invalid JSON response: {exc}") from exc
"""
K8s API errors, as raised by all API calls of the client.

Every response with an HTTP status of 400 or above becomes an `APIError`,
or one of its subclasses for the statuses that the callers usually handle
differently: 401, 403, 404, 409. The aiohttp error is chained as the cause.

The "not found" case is the one this library relies on the most. The 404
status is the only signal of absence: `APINotFoundError` is what turns into
``None`` in `Api.get_opt`, the ``get_*_opt()`` helpers, `get_owner_k`,
and the ``get_pods_by_*_name()`` helpers, and into `Absent` in
`classify_not_found` and `not_found_ok`. The error messages are never
matched, so a 404 means "absent" regardless of its wording, and any other
status is escalated even if its message says "not found".

The response bodies are kept in the errors only if they are K8s ``Status``
objects. Anything else (HTML pages of proxies, other JSON) is dropped,
so that it does not leak into the logs and the stack traces.

Network-level errors (connectivity, SSL, timeouts) are not API errors
and are escalated from aiohttp as is.
"""
import collections.abc
import json
from typing import Any, Collection, Optional

import aiohttp
from typing_extensions import Literal, TypedDict


class RawStatusCause(TypedDict):
    field: str
    reason: str
    message: str


class RawStatusDetails(TypedDict, total=False):
    name: str
    uid: str
    retryAfterSeconds: int
    kind: str
    group: str
    causes: Collection[RawStatusCause]


# https://kubernetes.io/docs/reference/generated/kubernetes-api/v1.30/#status-v1-meta
class RawStatus(TypedDict, total=False):
    apiVersion: str
    kind: Literal["Status"]
    code: int
    status: Literal["Success", "Failure"]
    reason: str
    message: str
    details: RawStatusDetails


class APIError(Exception):

    def __init__(
            self,
            payload: Optional[RawStatus],
            *,
            status: int,
    ) -> None:
        message = payload.get('message') if payload else None
        super().__init__(message, payload)
        self._status = status
        self._payload = payload

    @property
    def status(self) -> int:
        return self._status

    @property
    def payload(self) -> Optional[RawStatus]:
        return self._payload

    @property
    def code(self) -> Optional[int]:
        return self._payload.get('code') if self._payload else None

    @property
    def reason(self) -> Optional[str]:
        return self._payload.get('reason') if self._payload else None

    @property
    def message(self) -> Optional[str]:
        return self._payload.get('message') if self._payload else None

    @property
    def details(self) -> Optional[RawStatusDetails]:
        return self._payload.get('details') if self._payload else None


class APIUnauthorizedError(APIError):
    pass


class APIForbiddenError(APIError):
    pass


class APINotFoundError(APIError):
    pass


class APIConflictError(APIError):
    pass


async def check_response(
        response: aiohttp.ClientResponse,
) -> None:
    """
    Check for specialised K8s errors, and raise with extended information.
    """
    if response.status >= 400:

        # Read the response's body before it is closed by raise_for_status().
        payload: Optional[RawStatus]
        try:
            payload = await response.json()
        except (json.JSONDecodeError, aiohttp.ContentTypeError, aiohttp.ClientConnectionError):
            payload = None

        # Better be safe: who knows which sensitive information can be dumped unless kind==Status.
        if not isinstance(payload, collections.abc.Mapping) or payload.get('kind') != 'Status':
            payload = None

        cls = (
            APIUnauthorizedError if response.status == 401 else
            APIForbiddenError if response.status == 403 else
            APINotFoundError if response.status == 404 else
            APIConflictError if response.status == 409 else
            APIError
        )

        # Raise the library-specific error while keeping the original error in scope.
        # This call also closes the response's body, so it cannot be read afterwards.
        try:
            response.raise_for_status()
        except aiohttp.ClientResponseError as e:
            raise cls(payload, status=response.status) from e


async def parse_response(
        response: aiohttp.ClientResponse,
) -> Any:
    """
    Check the response for errors, and either raise or returned the parsed data.
    """
    await check_response(response)
    payload = await response.json()
    return payload

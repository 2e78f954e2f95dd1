"""
Helpers to treat the absence of objects as a success, e.g. for idempotent deletion.

Example::

    result = await kubeext.not_found_ok(client.pods().delete('my-pod'))
    if isinstance(result, kubeext.Absent):
        logger.info(f"The pod was already absent: {result.status.get('message')}")

Or, if the errors are already caught for other reasons::

    try:
        await client.namespaces().delete('nonexistent', client.delete_params())
    except kubeext.APIError as e:
        absent = kubeext.classify_not_found(e)  # re-raises all other errors
"""
import dataclasses
from typing import Awaitable, TypeVar, Union

from kubeext._cogs.clients import errors

_T = TypeVar('_T')


@dataclasses.dataclass(frozen=True)
class Absent:
    """
    A marker of an object that is already absent, as reported by K8s API.

    The status is the ``Status`` object from the API's response if provided,
    or a substitute with the HTTP status code if the response had no status.
    """
    status: errors.RawStatus


def classify_not_found(exc: BaseException) -> Absent:
    """
    Convert a "not found" error into an `Absent` marker; re-raise all other errors.
    """
    if isinstance(exc, errors.APINotFoundError):
        if exc.payload is not None:
            status = exc.payload
        else:
            status = errors.RawStatus(
                kind='Status', apiVersion='v1', status='Failure',
                reason='NotFound', code=exc.status,
            )
        return Absent(status=status)
    raise exc


async def not_found_ok(awaitable: Awaitable[_T]) -> Union[_T, Absent]:
    """
    Await for the API call; convert "not found" into `Absent`, escalate other errors.
    """
    try:
        return await awaitable
    except errors.APINotFoundError as e:
        return classify_not_found(e)

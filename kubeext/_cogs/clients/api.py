"""
The low-level requests to K8s API: one function per HTTP method.

There are no retries: any error is escalated to the caller immediately,
either as one of `errors.APIError` (if the API has responded with an error)
or as the networking errors of the underlying client library.
"""
from typing import Any, Mapping, Optional

import aiohttp

from kubeext._cogs.clients import auth, errors
from kubeext._cogs.configs import configuration
from kubeext._cogs.helpers import typedefs


async def request(
        method: str,
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        payload: Optional[object] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    if '://' not in url:
        url = context.server.rstrip('/') + '/' + url.lstrip('/')

    if timeout is None:
        timeout = aiohttp.ClientTimeout(
            total=settings.networking.request_timeout,
            sock_connect=settings.networking.connect_timeout,
        )

    what = f"{method.upper()} {url}"
    logger.debug(f"Requesting: {what}")
    try:
        response = await context.session.request(
            method=method,
            url=url,
            json=payload,
            headers=headers,
            timeout=timeout,
        )
        async with response:
            return await errors.parse_response(response)
    except errors.APIError as e:
        logger.debug(f"Request failed with HTTP {e.status}: {what}")
        raise


async def get(
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    return await request(
        method='get',
        url=url,
        headers=headers,
        timeout=timeout,
        context=context,
        settings=settings,
        logger=logger,
    )


async def post(
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        payload: Optional[object] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    return await request(
        method='post',
        url=url,
        payload=payload,
        headers=headers,
        timeout=timeout,
        context=context,
        settings=settings,
        logger=logger,
    )


async def put(
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        payload: Optional[object] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    return await request(
        method='put',
        url=url,
        payload=payload,
        headers=headers,
        timeout=timeout,
        context=context,
        settings=settings,
        logger=logger,
    )


async def patch(
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        payload: Optional[object] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    return await request(
        method='patch',
        url=url,
        payload=payload,
        headers=headers,
        timeout=timeout,
        context=context,
        settings=settings,
        logger=logger,
    )


async def delete(
        url: str,  # relative to the server/api root.
        *,
        context: auth.APIContext,
        settings: configuration.ClientSettings,
        payload: Optional[object] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        logger: typedefs.Logger,
) -> Any:
    return await request(
        method='delete',
        url=url,
        payload=payload,
        headers=headers,
        timeout=timeout,
        context=context,
        settings=settings,
        logger=logger,
    )

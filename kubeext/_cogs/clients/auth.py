import base64
import contextlib
import os
import ssl
import tempfile
from typing import Dict, Optional, Union

import aiohttp

from kubeext._cogs.helpers import versions
from kubeext._cogs.structs import credentials


class APIContext:
    """
    A container for an aiohttp session and the environment info.

    The container is constructed once per :class:`kubeext.Client`, and is used
    by all the API calls of that client and its scoped sub-clients.
    It is bound to the event loop where it was created.
    """

    # The main contained object used by the API methods.
    session: aiohttp.ClientSession

    # Contextual information for URL building.
    server: str
    default_namespace: Optional[str]

    def __init__(
            self,
            info: credentials.ConnectionInfo,
            *,
            session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        super().__init__()

        # Generic aiohttp session based on the constructed credentials, unless provided.
        self.session = session if session is not None else self.make_aiohttp_session(info)
        self.session_owned = session is None

        # It is a good practice to self-identify a bit, even with a user-provided session.
        if self.session.headers.get('User-Agent') is None:
            self.session.headers['User-Agent'] = f'kubeext/{versions.version or "unknown"}'

        self.server = info.server
        self.default_namespace = info.default_namespace

    def make_aiohttp_session(self, info: credentials.ConnectionInfo) -> aiohttp.ClientSession:

        # Some SSL data are not accepted directly, so we have to use temp files.
        # Do not even create temporary files if there is no need. It can be a readonly filesystem.
        with contextlib.ExitStack() as stack:

            cert_path: Optional[Union[str, os.PathLike[str]]]
            if info.certificate_path:
                cert_path = info.certificate_path
            elif info.certificate_data:
                cert_file = stack.enter_context(tempfile.NamedTemporaryFile(buffering=0))
                cert_file.write(decode_to_pem(info.certificate_data).encode('ascii'))
                cert_path = cert_file.name
            else:
                cert_path = None

            pkey_path: Optional[Union[str, os.PathLike[str]]]
            if info.private_key_path:
                pkey_path = info.private_key_path
            elif info.private_key_data:
                pkey_file = stack.enter_context(tempfile.NamedTemporaryFile(buffering=0))
                pkey_file.write(decode_to_pem(info.private_key_data).encode('ascii'))
                pkey_path = pkey_file.name
            else:
                pkey_path = None

            # The SSL part (both client certificate auth and CA verification).
            context = ssl.create_default_context(
                purpose=ssl.Purpose.SERVER_AUTH,
                cafile=info.ca_path,
                cadata=decode_to_pem(info.ca_data) if info.ca_data is not None else None,
            )
            if cert_path and pkey_path:
                context.load_cert_chain(certfile=cert_path, keyfile=pkey_path)

        if info.insecure:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE

        # The token auth part.
        headers: Dict[str, str] = {}
        if info.scheme and info.token:
            headers['Authorization'] = f'{info.scheme} {info.token}'
        elif info.scheme:
            headers['Authorization'] = f'{info.scheme}'
        elif info.token:
            headers['Authorization'] = f'Bearer {info.token}'

        # The basic auth part.
        auth: Optional[aiohttp.BasicAuth]
        if info.username and info.password:
            auth = aiohttp.BasicAuth(info.username, info.password)
        else:
            auth = None

        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(
                limit=0,
                ssl=context,
            ),
            headers=headers,
            auth=auth,
        )

    async def close(self) -> None:
        # The user-provided sessions are closed by the users.
        if self.session_owned:
            await self.session.close()


def decode_to_pem(data: Union[str, bytes]) -> str:
    if isinstance(data, str) and data.startswith('-----BEGIN '):
        return data
    elif isinstance(data, bytes) and data.startswith(b'-----BEGIN '):
        return data.decode('ascii')
    else:
        return base64.b64decode(data).decode('ascii')

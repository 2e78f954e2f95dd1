import logging
from types import TracebackType
from typing import Optional, Type

import aiohttp

from kubeext._cogs.clients import auth
from kubeext._cogs.configs import configuration
from kubeext._cogs.helpers import typedefs
from kubeext._cogs.structs import credentials
from kubeext._core import authentication, relations


class Client(relations.Relations):
    """
    The base client handle: a connection to one cluster with one identity.

    The client owns an HTTP session, so it must be closed when not needed,
    either explicitly or by using it as an async context manager::

        async with kubeext.Client.from_environment() as client:
            pods = await client.get_pods_by_deployment_name('nginx', 'web')

    The client must be created in the event loop where it is used.
    Besides the session, it has no state, and can be shared by the tasks.
    """

    def __init__(
            self,
            info: credentials.ConnectionInfo,
            *,
            settings: Optional[configuration.ClientSettings] = None,
            session: Optional[aiohttp.ClientSession] = None,
            logger: Optional[typedefs.Logger] = None,
    ) -> None:
        super().__init__()
        self.info = info
        self.settings = settings if settings is not None else configuration.ClientSettings()
        self.logger = logger if logger is not None else logging.getLogger('kubeext')
        self._context = auth.APIContext(info, session=session)

    @classmethod
    def from_environment(
            cls,
            *,
            settings: Optional[configuration.ClientSettings] = None,
            logger: Optional[typedefs.Logger] = None,
    ) -> "Client":
        """ Login in-cluster or via kubeconfig, whichever is available. """
        if logger is not None:
            info = authentication.login(logger=logger)
        else:
            info = authentication.login()
        return cls(info, settings=settings, logger=logger)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(server={self.info.server!r})'

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_val: Optional[BaseException],
            exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._context.close()

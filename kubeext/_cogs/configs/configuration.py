"""
All configuration flags, options, settings to fine-tune the client.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

Some of the settings are flags, some are scalars, some are optional,
some are not (but all of them have reasonable defaults).

The settings are read at the time of the API calls, so they can be changed
on an existing client and will have effect for the next calls::

    client = kubeext.Client(info)
    client.settings.networking.request_timeout = 30
    client.settings.writing.field_manager = 'my-controller'
"""
import dataclasses
from typing import Optional


@dataclasses.dataclass
class NetworkingSettings:

    request_timeout: Optional[float] = 5 * 60  # == aiohttp.client.DEFAULT_TIMEOUT
    """
    A timeout for the whole API request (in seconds), including the connection.
    """

    connect_timeout: Optional[float] = None
    """
    A timeout for the connection to be established (in seconds).
    """


@dataclasses.dataclass
class WritingSettings:

    field_manager: Optional[str] = None
    """
    The field manager used for the writes when no explicit one is specified.

    It is used by ``client.post_params()`` & ``client.patch_params()``.
    ``None`` means that the API server decides: usually, the user agent.
    """


@dataclasses.dataclass
class NamespacingSettings:

    fallback_namespace: str = 'default'
    """
    The namespace used when the namespace is not specified in the API calls,
    and the credentials define no default namespace either.
    """


@dataclasses.dataclass
class ClientSettings:
    networking: NetworkingSettings = dataclasses.field(default_factory=NetworkingSettings)
    writing: WritingSettings = dataclasses.field(default_factory=WritingSettings)
    namespacing: NamespacingSettings = dataclasses.field(default_factory=NamespacingSettings)

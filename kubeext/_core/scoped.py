"""
Scoped sub-clients: the API operations on one resource kind in one namespace.

A scoped sub-client is only a binding of the client's context to a resource
and a namespace. Constructing it does no i/o and cannot fail; all the i/o
happens in its methods, and all the errors are escalated from there as is
(except for `Api.get_opt`, which converts "not found" into ``None``).
"""
import dataclasses
from typing import Any, Dict, List, Mapping, Optional, Union

from kubeext._cogs.clients import api, auth, errors
from kubeext._cogs.configs import configuration
from kubeext._cogs.helpers import typedefs
from kubeext._cogs.structs import bodies, references
from kubeext._cogs.structs.params import DeleteParams, ListParams, PatchParams, PatchType, \
                                         PostParams


class Api:
    """
    Operations on the objects of one resource kind in one specific namespace.

    The namespace is ``None`` for cluster-scoped resources, and also for
    the cluster-wide listing of namespaced resources (see `Client.all_namespaces`).
    In the latter case, only the collection-level operations are possible.
    """

    def __init__(
            self,
            *,
            context: auth.APIContext,
            settings: configuration.ClientSettings,
            resource: references.Resource,
            namespace: references.Namespace,
            logger: typedefs.Logger,
    ) -> None:
        super().__init__()
        self.resource = resource
        self.namespace = namespace
        self._context = context
        self._settings = settings
        self._logger = logger

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.resource!r}, namespace={self.namespace!r})'

    def _url(
            self,
            name: Optional[str] = None,
            *,
            subresource: Optional[str] = None,
            query: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.resource.get_url(namespace=self.namespace, name=name,
                                     subresource=subresource, params=query)

    async def get(self, name: str) -> bodies.RawBody:
        """ Get the named object; raise `APINotFoundError` if it does not exist. """
        body: bodies.RawBody = await api.get(
            url=self._url(name),
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return body

    async def get_opt(self, name: str) -> Optional[bodies.RawBody]:
        """ Get the named object; return ``None`` if it does not exist. """
        try:
            return await self.get(name)
        except errors.APINotFoundError:
            return None

    async def list(
            self,
            params: Optional[ListParams] = None,
    ) -> List[bodies.RawBody]:
        """
        List the objects, following the continuation tokens if the listing is paginated.

        The objects are returned as served, in the order as served.
        """
        lp = params if params is not None else ListParams()
        items: List[bodies.RawBody] = []
        while True:
            rsp: bodies.RawList = await api.get(
                url=self._url(query=lp.as_query()),
                context=self._context,
                settings=self._settings,
                logger=self._logger,
            )
            items.extend(rsp.get('items') or [])
            token: Optional[str] = rsp.get('metadata', {}).get('continue')
            if not token:
                break
            lp = dataclasses.replace(lp, continue_token=token)
        return items

    async def create(
            self,
            body: Mapping[str, Any],
            params: Optional[PostParams] = None,
    ) -> bodies.RawBody:
        pp = params if params is not None else PostParams()
        created_body: bodies.RawBody = await api.post(
            url=self._url(query=pp.as_query()),
            payload=body,
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return created_body

    async def replace(
            self,
            name: str,
            body: Mapping[str, Any],
            params: Optional[PostParams] = None,
    ) -> bodies.RawBody:
        pp = params if params is not None else PostParams()
        replaced_body: bodies.RawBody = await api.put(
            url=self._url(name, query=pp.as_query()),
            payload=body,
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return replaced_body

    async def patch(
            self,
            name: str,
            patch: Union[Mapping[str, Any], List[Mapping[str, Any]]],
            params: Optional[PatchParams] = None,
            *,
            patch_type: PatchType = PatchType.MERGE,
            subresource: Optional[str] = None,
    ) -> bodies.RawBody:
        """
        Patch the object (or its subresource) with the patch of a specific type.

        The JSON-patches are lists of operations; all other types are mappings.
        The apply-patches are sent as JSON, which is a valid YAML too.
        """
        pp = params if params is not None else PatchParams()
        patched_body: bodies.RawBody = await api.patch(
            url=self._url(name, subresource=subresource, query=pp.as_query()),
            headers={'Content-Type': patch_type.value},
            payload=patch,
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return patched_body

    async def apply(
            self,
            name: str,
            body: Mapping[str, Any],
            params: PatchParams,
            *,
            subresource: Optional[str] = None,
    ) -> bodies.RawBody:
        """ Server-side apply. The field manager in the params is required by K8s API. """
        return await self.patch(name, body, params, patch_type=PatchType.APPLY,
                                subresource=subresource)

    async def delete(
            self,
            name: str,
            params: Optional[DeleteParams] = None,
    ) -> Dict[str, Any]:
        """
        Delete the object.

        The result is either the object itself (if its deletion is postponed,
        e.g. due to finalizers or the foreground propagation), or a ``Status``.
        """
        dp = params if params is not None else DeleteParams()
        result: Dict[str, Any] = await api.delete(
            url=self._url(name, query=dp.as_query()),
            payload=dp.as_body(),
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return result

    async def delete_collection(
            self,
            params: Optional[DeleteParams] = None,
            list_params: Optional[ListParams] = None,
    ) -> Dict[str, Any]:
        """ Delete all the objects matching the list params (all of them by default). """
        dp = params if params is not None else DeleteParams()
        lp = list_params if list_params is not None else ListParams()
        result: Dict[str, Any] = await api.delete(
            url=self._url(query={**lp.as_query(), **dp.as_query()}),
            payload=dp.as_body(),
            context=self._context,
            settings=self._settings,
            logger=self._logger,
        )
        return result


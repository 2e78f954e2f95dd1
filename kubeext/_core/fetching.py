"""
Fetching & listing helpers for the individual resource kinds.

The helpers are generated from the resource descriptors (see `getter`
and `lister`) rather than written one by one: all of them follow the same
calling convention, and only differ in the resource and in the presence
of the namespace argument (absent for the cluster-scoped resources)::

    pod = await client.get_pod_opt('my-pod')                # default namespace
    pod = await client.get_pod('my-pod', 'kube-system')     # APINotFoundError if absent
    crd = await client.get_crd_opt('kexamples.kubeext.dev')
    secrets = await client.list_secrets('my-namespace')

For custom resources, use the generic forms with own descriptors::

    KEX = kubeext.Resource('kubeext.dev', 'v1', 'kexamples', kind='KExample', namespaced=True)
    kex = await client.get_k_opt(KEX, 'kex1')
"""
from typing import Any, Callable, Coroutine, List, Optional, TypeVar

from kubeext._cogs.structs import bodies, params, references
from kubeext._core import accessors

_R = TypeVar('_R')
_Method = Callable[..., Coroutine[Any, Any, _R]]


class Fetching(accessors.Accessors):

    async def get_k(
            self,
            resource: references.Resource,
            name: str,
            namespace: Optional[str] = None,
    ) -> bodies.RawBody:
        """ Get the named object; raise `APINotFoundError` if it does not exist. """
        return await self.api(resource, namespace).get(name)

    async def get_k_opt(
            self,
            resource: references.Resource,
            name: str,
            namespace: Optional[str] = None,
    ) -> Optional[bodies.RawBody]:
        """ Get the named object; return ``None`` if it does not exist. """
        return await self.api(resource, namespace).get_opt(name)

    async def list_k(
            self,
            resource: references.Resource,
            namespace: Optional[str] = None,
            params: Optional[params.ListParams] = None,
    ) -> List[bodies.RawBody]:
        """ List the objects in a given (or default) namespace, as served. """
        return await self.api(resource, namespace).list(params)


def getter(resource: references.Resource, *, optional: bool = False) -> _Method[Any]:
    """
    Generate a fetching method for a specific resource kind.

    For namespaced resources, the method accepts the name & optional namespace.
    For cluster-scoped resources, the method accepts the name only.
    """
    fn: _Method[Any]
    if resource.namespaced:
        async def get_namespaced(
                self: Fetching,
                name: str,
                namespace: Optional[str] = None,
        ) -> Optional[bodies.RawBody]:
            if optional:
                return await self.get_k_opt(resource, name, namespace)
            else:
                return await self.get_k(resource, name, namespace)
        fn = get_namespaced
    else:
        async def get_clustered(
                self: Fetching,
                name: str,
        ) -> Optional[bodies.RawBody]:
            if optional:
                return await self.get_k_opt(resource, name)
            else:
                return await self.get_k(resource, name)
        fn = get_clustered

    where = "from a given (or default) namespace" if resource.namespaced else "from the cluster"
    fn.__doc__ = (
        f"Get the named {resource.kind} {where}.\n"
        f"Return ``None`` if it does not exist." if optional else
        f"Get the named {resource.kind} {where}.\n"
        f"Raise `APINotFoundError` if it does not exist."
    )
    return fn


def lister(resource: references.Resource) -> _Method[List[bodies.RawBody]]:
    """
    Generate a listing method for a specific resource kind.

    For namespaced resources, the method accepts an optional namespace.
    For cluster-scoped resources, the method accepts no arguments.
    """
    fn: _Method[List[bodies.RawBody]]
    if resource.namespaced:
        async def list_namespaced(
                self: Fetching,
                namespace: Optional[str] = None,
        ) -> List[bodies.RawBody]:
            return await self.list_k(resource, namespace)
        fn = list_namespaced
        fn.__doc__ = f"List all {resource.kind} objects in a given (or default) namespace."
    else:
        async def list_clustered(
                self: Fetching,
        ) -> List[bodies.RawBody]:
            return await self.list_k(resource)
        fn = list_clustered
        fn.__doc__ = f"List all {resource.kind} objects in the cluster."
    return fn


class TypedFetching(Fetching):

    get_pod = getter(references.PODS)
    get_pod_opt = getter(references.PODS, optional=True)
    get_deployment = getter(references.DEPLOYMENTS)
    get_deployment_opt = getter(references.DEPLOYMENTS, optional=True)
    get_replicaset = getter(references.REPLICASETS)
    get_replicaset_opt = getter(references.REPLICASETS, optional=True)
    get_statefulset = getter(references.STATEFULSETS)
    get_statefulset_opt = getter(references.STATEFULSETS, optional=True)
    get_service = getter(references.SERVICES)
    get_service_opt = getter(references.SERVICES, optional=True)
    get_secret = getter(references.SECRETS)
    get_secret_opt = getter(references.SECRETS, optional=True)
    get_configmap = getter(references.CONFIGMAPS)
    get_configmap_opt = getter(references.CONFIGMAPS, optional=True)
    get_job = getter(references.JOBS)
    get_job_opt = getter(references.JOBS, optional=True)
    get_cronjob = getter(references.CRONJOBS)
    get_cronjob_opt = getter(references.CRONJOBS, optional=True)
    get_serviceaccount = getter(references.SERVICEACCOUNTS)
    get_serviceaccount_opt = getter(references.SERVICEACCOUNTS, optional=True)
    get_node = getter(references.NODES)
    get_node_opt = getter(references.NODES, optional=True)
    get_namespace = getter(references.NAMESPACES)
    get_namespace_opt = getter(references.NAMESPACES, optional=True)
    get_crd = getter(references.CRDS)
    get_crd_opt = getter(references.CRDS, optional=True)
    get_cluster_role = getter(references.CLUSTER_ROLES)
    get_cluster_role_opt = getter(references.CLUSTER_ROLES, optional=True)
    get_apiservice = getter(references.APISERVICES)
    get_apiservice_opt = getter(references.APISERVICES, optional=True)

    list_pods = lister(references.PODS)
    list_deployments = lister(references.DEPLOYMENTS)
    list_replicasets = lister(references.REPLICASETS)
    list_statefulsets = lister(references.STATEFULSETS)
    list_services = lister(references.SERVICES)
    list_secrets = lister(references.SECRETS)
    list_configmaps = lister(references.CONFIGMAPS)
    list_jobs = lister(references.JOBS)
    list_cronjobs = lister(references.CRONJOBS)
    list_serviceaccounts = lister(references.SERVICEACCOUNTS)
    list_nodes = lister(references.NODES)
    list_namespaces = lister(references.NAMESPACES)
    list_crds = lister(references.CRDS)
    list_cluster_roles = lister(references.CLUSTER_ROLES)
    list_apiservices = lister(references.APISERVICES)

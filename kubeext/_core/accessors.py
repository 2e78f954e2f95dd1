"""
Shorthand accessors for the scoped sub-clients & the default operation params.

Nothing here does any i/o: the accessors only bind the resource kinds
and the namespaces to the client's context. The i/o happens later,
when the methods of the returned sub-clients are called.

The namespaces of the namespaced accessors are optional: ``None`` means
the client's default namespace (as defined in the credentials or settings),
and never the cluster-wide access. For the cluster-wide access to namespaced
resources, use `Accessors.all_namespaces` explicitly.
"""
from typing import Optional

from kubeext._cogs.clients import auth
from kubeext._cogs.configs import configuration
from kubeext._cogs.helpers import typedefs
from kubeext._cogs.structs import params, references
from kubeext._core import scoped


class Accessors:

    # Provided by the actual client class.
    settings: configuration.ClientSettings
    logger: typedefs.Logger
    _context: auth.APIContext

    @property
    def default_namespace(self) -> references.NamespaceName:
        namespace = self._context.default_namespace or self.settings.namespacing.fallback_namespace
        return references.NamespaceName(namespace)

    def api(
            self,
            resource: references.Resource,
            namespace: Optional[str] = None,
    ) -> scoped.Api:
        """
        A sub-client for any resource, either namespaced or cluster-scoped.

        For namespaced resources, an absent namespace means the default one.
        For cluster-scoped resources, the namespace is ignored.
        """
        if resource.namespaced:
            return self.namespaced_k(resource, namespace)
        else:
            return self.cluster_k(resource)

    def namespaced_k(
            self,
            resource: references.Resource,
            namespace: Optional[str] = None,
    ) -> scoped.Api:
        return scoped.Api(
            resource=resource,
            namespace=references.NamespaceName(namespace) if namespace is not None else
                      self.default_namespace,
            context=self._context,
            settings=self.settings,
            logger=self.logger,
        )

    def cluster_k(
            self,
            resource: references.Resource,
    ) -> scoped.Api:
        return scoped.Api(
            resource=resource,
            namespace=None,
            context=self._context,
            settings=self.settings,
            logger=self.logger,
        )

    def all_namespaces(
            self,
            resource: references.Resource,
    ) -> scoped.Api:
        """ A sub-client for listing the namespaced resources in all namespaces at once. """
        return self.cluster_k(resource)

    #
    # Default parameters of the operations.
    #

    def delete_params(self) -> params.DeleteParams:
        return params.delete_params()

    def foreground_delete(self) -> params.DeleteParams:
        return params.foreground_delete()

    def list_params(self) -> params.ListParams:
        return params.list_params()

    def post_params(self) -> params.PostParams:
        return params.PostParams(field_manager=self.settings.writing.field_manager)

    def patch_params(self) -> params.PatchParams:
        return params.PatchParams(field_manager=self.settings.writing.field_manager)

    def post_params_with_manager(self, manager: str) -> params.PostParams:
        return params.post_params_with_manager(manager)

    def patch_params_with_manager(self, manager: str) -> params.PatchParams:
        return params.patch_params_with_manager(manager)

    #
    # Cluster-scoped resources.
    #

    def nodes(self) -> scoped.Api:
        return self.cluster_k(references.NODES)

    def namespaces(self) -> scoped.Api:
        return self.cluster_k(references.NAMESPACES)

    def persistent_volumes(self) -> scoped.Api:
        return self.cluster_k(references.PERSISTENT_VOLUMES)

    def cluster_roles(self) -> scoped.Api:
        return self.cluster_k(references.CLUSTER_ROLES)

    def cluster_role_bindings(self) -> scoped.Api:
        return self.cluster_k(references.CLUSTER_ROLE_BINDINGS)

    def storage_classes(self) -> scoped.Api:
        return self.cluster_k(references.STORAGE_CLASSES)

    def crds(self) -> scoped.Api:
        return self.cluster_k(references.CRDS)

    def apiservices(self) -> scoped.Api:
        return self.cluster_k(references.APISERVICES)

    #
    # Namespaced resources.
    #

    def pods(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.PODS, namespace)

    def services(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.SERVICES, namespace)

    def secrets(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.SECRETS, namespace)

    def configmaps(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.CONFIGMAPS, namespace)

    def serviceaccounts(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.SERVICEACCOUNTS, namespace)

    def events(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.EVENTS, namespace)

    def persistent_volume_claims(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.PERSISTENT_VOLUME_CLAIMS, namespace)

    def deployments(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.DEPLOYMENTS, namespace)

    def replicasets(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.REPLICASETS, namespace)

    def statefulsets(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.STATEFULSETS, namespace)

    def daemonsets(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.DAEMONSETS, namespace)

    def jobs(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.JOBS, namespace)

    def cronjobs(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.CRONJOBS, namespace)

    def horizontal_pod_autoscalers(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.HORIZONTAL_POD_AUTOSCALERS, namespace)

    def roles(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.ROLES, namespace)

    def role_bindings(self, namespace: Optional[str] = None) -> scoped.Api:
        return self.namespaced_k(references.ROLE_BINDINGS, namespace)

import dataclasses
import urllib.parse
from typing import FrozenSet, Iterator, List, Mapping, NewType, Optional

# A specific really existing addressable namespace (at least, the one assumed to be so).
# Made as a NewType for stricter type-checking to avoid collisions with names and other strings.
NamespaceName = NewType('NamespaceName', str)

# A namespace reference usable in the API calls. `None` means cluster-wide API calls.
Namespace = Optional[NamespaceName]


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Resource:
    """
    A reference to a very specific custom or built-in resource kind.

    It is used to form the K8s API URLs. Generally, K8s API only needs
    an API group, an API version, and a plural name of the resource.
    The kind is used to match the owner references of other objects.
    All other names are remembered for logging and informational purposes.
    """

    group: str
    """
    The resource's API group; e.g. ``"apps"``, ``"batch"``.
    For Core v1 API resources, an empty string: ``""``.
    """

    version: str
    """
    The resource's API version; e.g. ``"v1"``, ``"v1beta1"``, etc.
    """

    plural: str
    """
    The resource's plural name; e.g. ``"pods"``, ``"deployments"``.
    It is used as an API endpoint, together with API group & version.
    """

    kind: Optional[str] = None
    """
    The resource's kind (as in YAML files); e.g. ``"Pod"``, ``"Deployment"``.
    """

    singular: Optional[str] = None
    """
    The resource's singular name; e.g. ``"pod"``, ``"deployment"``.
    """

    shortcuts: FrozenSet[str] = frozenset()
    """
    The resource's short names; e.g. ``{"po"}``, ``{"deploy"}``.
    """

    namespaced: Optional[bool] = None
    """
    Whether the resource is namespaced (``True``) or cluster-scoped (``False``).
    """

    def __hash__(self) -> int:
        return hash((self.group, self.version, self.plural))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Resource):
            self_tuple = (self.group, self.version, self.plural)
            other_tuple = (other.group, other.version, other.plural)
            return self_tuple == other_tuple
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return f'{self.plural}.{self.version}.{self.group}'.strip('.')

    # Mostly for tests & logs, to be unpacked as `group, version, plural = resource`.
    def __iter__(self) -> Iterator[str]:
        return iter((self.group, self.version, self.plural))

    @property
    def api_version(self) -> str:
        """ The ``apiVersion`` field as seen in the objects, e.g. ``"apps/v1"``. """
        return f'{self.group}/{self.version}' if self.group else self.version

    def get_url(
            self,
            *,
            server: Optional[str] = None,
            namespace: Namespace = None,
            name: Optional[str] = None,
            subresource: Optional[str] = None,
            params: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Build a URL to be used with K8s API.

        If the namespace is not set, a cluster-wide URL is returned.
        For cluster-scoped resources, the namespace must not be set.

        If the name is not set, the URL for the resource list is returned.
        Otherwise (if set), the URL for the individual resource is returned.

        If subresource is set, that subresource's URL is returned,
        regardless of whether such a subresource is known or not.

        Params go to the query parameters (``?param1=value1&param2=value2...``).
        """
        # Empty strings would be dropped from the path and address the whole collection.
        if name == '':
            raise ValueError("Names of specific resources cannot be empty.")
        if namespace == '':
            raise ValueError("Namespaces cannot be empty; use None for cluster-wide access.")
        if subresource == '':
            raise ValueError("Subresources cannot be empty.")
        if subresource is not None and name is None:
            raise ValueError("Subresources can be used only with specific resources by their name.")
        if not self.namespaced and namespace is not None:
            raise ValueError("Specific namespaces are not supported for cluster-scoped resources.")
        if self.namespaced and namespace is None and name is not None:
            raise ValueError("Specific namespaces are required for specific namespaced resources.")

        parts: List[Optional[str]] = [
            '/api' if self.group == '' and self.version == 'v1' else '/apis',
            self.group,
            self.version,
            'namespaces' if self.namespaced and namespace is not None else None,
            namespace if self.namespaced and namespace is not None else None,
            self.plural,
            name,
            subresource,
        ]

        query = urllib.parse.urlencode(params, encoding='utf-8') if params else ''
        path = '/'.join([part for part in parts if part])
        url = path + ('?' if query else '') + query
        return url if server is None else server.rstrip('/') + '/' + url.lstrip('/')


# Built-in resources as served by any modern cluster in their stable API versions.
# Custom resources can be declared the same way by the users, e.g. for `get_k()`/`list_k()`.
NODES = Resource('', 'v1', 'nodes', kind='Node', singular='node',
                 shortcuts=frozenset({'no'}), namespaced=False)
NAMESPACES = Resource('', 'v1', 'namespaces', kind='Namespace', singular='namespace',
                      shortcuts=frozenset({'ns'}), namespaced=False)
PERSISTENT_VOLUMES = Resource('', 'v1', 'persistentvolumes', kind='PersistentVolume',
                              singular='persistentvolume',
                              shortcuts=frozenset({'pv'}), namespaced=False)
PODS = Resource('', 'v1', 'pods', kind='Pod', singular='pod',
                shortcuts=frozenset({'po'}), namespaced=True)
SERVICES = Resource('', 'v1', 'services', kind='Service', singular='service',
                    shortcuts=frozenset({'svc'}), namespaced=True)
SECRETS = Resource('', 'v1', 'secrets', kind='Secret', singular='secret',
                   namespaced=True)
CONFIGMAPS = Resource('', 'v1', 'configmaps', kind='ConfigMap', singular='configmap',
                      shortcuts=frozenset({'cm'}), namespaced=True)
SERVICEACCOUNTS = Resource('', 'v1', 'serviceaccounts', kind='ServiceAccount',
                           singular='serviceaccount',
                           shortcuts=frozenset({'sa'}), namespaced=True)
EVENTS = Resource('', 'v1', 'events', kind='Event', singular='event',
                  shortcuts=frozenset({'ev'}), namespaced=True)
PERSISTENT_VOLUME_CLAIMS = Resource('', 'v1', 'persistentvolumeclaims',
                                    kind='PersistentVolumeClaim',
                                    singular='persistentvolumeclaim',
                                    shortcuts=frozenset({'pvc'}), namespaced=True)
DEPLOYMENTS = Resource('apps', 'v1', 'deployments', kind='Deployment', singular='deployment',
                       shortcuts=frozenset({'deploy'}), namespaced=True)
REPLICASETS = Resource('apps', 'v1', 'replicasets', kind='ReplicaSet', singular='replicaset',
                       shortcuts=frozenset({'rs'}), namespaced=True)
STATEFULSETS = Resource('apps', 'v1', 'statefulsets', kind='StatefulSet', singular='statefulset',
                        shortcuts=frozenset({'sts'}), namespaced=True)
DAEMONSETS = Resource('apps', 'v1', 'daemonsets', kind='DaemonSet', singular='daemonset',
                      shortcuts=frozenset({'ds'}), namespaced=True)
JOBS = Resource('batch', 'v1', 'jobs', kind='Job', singular='job',
                namespaced=True)
CRONJOBS = Resource('batch', 'v1', 'cronjobs', kind='CronJob', singular='cronjob',
                    shortcuts=frozenset({'cj'}), namespaced=True)
HORIZONTAL_POD_AUTOSCALERS = Resource('autoscaling', 'v2', 'horizontalpodautoscalers',
                                      kind='HorizontalPodAutoscaler',
                                      singular='horizontalpodautoscaler',
                                      shortcuts=frozenset({'hpa'}), namespaced=True)
ROLES = Resource('rbac.authorization.k8s.io', 'v1', 'roles', kind='Role', singular='role',
                 namespaced=True)
ROLE_BINDINGS = Resource('rbac.authorization.k8s.io', 'v1', 'rolebindings',
                         kind='RoleBinding', singular='rolebinding', namespaced=True)
CLUSTER_ROLES = Resource('rbac.authorization.k8s.io', 'v1', 'clusterroles',
                         kind='ClusterRole', singular='clusterrole', namespaced=False)
CLUSTER_ROLE_BINDINGS = Resource('rbac.authorization.k8s.io', 'v1', 'clusterrolebindings',
                                 kind='ClusterRoleBinding', singular='clusterrolebinding',
                                 namespaced=False)
STORAGE_CLASSES = Resource('storage.k8s.io', 'v1', 'storageclasses', kind='StorageClass',
                           singular='storageclass',
                           shortcuts=frozenset({'sc'}), namespaced=False)
CRDS = Resource('apiextensions.k8s.io', 'v1', 'customresourcedefinitions',
                kind='CustomResourceDefinition', singular='customresourcedefinition',
                shortcuts=frozenset({'crd', 'crds'}), namespaced=False)
APISERVICES = Resource('apiregistration.k8s.io', 'v1', 'apiservices', kind='APIService',
                       singular='apiservice', namespaced=False)

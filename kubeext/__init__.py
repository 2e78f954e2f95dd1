"""
The main kubeext module for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the users. So, we export the individual functions.

from kubeext._cogs.clients.errors import (
    APIError,
    APIUnauthorizedError,
    APIForbiddenError,
    APINotFoundError,
    APIConflictError,
    RawStatus,
)
from kubeext._cogs.configs.configuration import (
    ClientSettings,
    NetworkingSettings,
    WritingSettings,
    NamespacingSettings,
)
from kubeext._cogs.helpers.typedefs import (
    Logger,
)
from kubeext._cogs.helpers.versions import (
    version as __version__,
)
from kubeext._cogs.structs.bodies import (
    RawBody,
    RawMeta,
    Labels,
    Annotations,
    OwnerReference,
    LabelSelector,
    render_label_selector,
)
from kubeext._cogs.structs.credentials import (
    LoginError,
    ConnectionInfo,
)
from kubeext._cogs.structs.params import (
    DeleteParams,
    ListParams,
    PatchParams,
    PatchType,
    PostParams,
    delete_params,
    foreground_delete,
    list_params,
    post_params_with_manager,
    patch_params_with_manager,
)
from kubeext._cogs.structs.references import (
    Resource,
    NamespaceName,
    Namespace,
    NODES,
    NAMESPACES,
    PERSISTENT_VOLUMES,
    PODS,
    SERVICES,
    SECRETS,
    CONFIGMAPS,
    SERVICEACCOUNTS,
    EVENTS,
    PERSISTENT_VOLUME_CLAIMS,
    DEPLOYMENTS,
    REPLICASETS,
    STATEFULSETS,
    DAEMONSETS,
    JOBS,
    CRONJOBS,
    HORIZONTAL_POD_AUTOSCALERS,
    ROLES,
    ROLE_BINDINGS,
    CLUSTER_ROLES,
    CLUSTER_ROLE_BINDINGS,
    STORAGE_CLASSES,
    CRDS,
    APISERVICES,
)
from kubeext._core.authentication import (
    login,
    login_with_kubeconfig,
    login_with_service_account,
)
from kubeext._core.client import (
    Client,
)
from kubeext._core.loggers import (
    LogFormat,
    configure,
)
from kubeext._core.notfound import (
    Absent,
    classify_not_found,
    not_found_ok,
)
from kubeext._core.relations import (
    is_controlled_by,
)
from kubeext._core.scoped import (
    Api,
)

__all__ = [
    'APIError', 'APIUnauthorizedError', 'APIForbiddenError',
    'APINotFoundError', 'APIConflictError', 'RawStatus',
    'ClientSettings', 'NetworkingSettings', 'WritingSettings', 'NamespacingSettings',
    'Logger',
    'RawBody', 'RawMeta', 'Labels', 'Annotations', 'OwnerReference', 'LabelSelector',
    'render_label_selector',
    'LoginError', 'ConnectionInfo',
    'DeleteParams', 'ListParams', 'PatchParams', 'PatchType', 'PostParams',
    'delete_params', 'foreground_delete', 'list_params',
    'post_params_with_manager', 'patch_params_with_manager',
    'Resource', 'NamespaceName', 'Namespace',
    'NODES', 'NAMESPACES', 'PERSISTENT_VOLUMES',
    'PODS', 'SERVICES', 'SECRETS', 'CONFIGMAPS', 'SERVICEACCOUNTS', 'EVENTS',
    'PERSISTENT_VOLUME_CLAIMS',
    'DEPLOYMENTS', 'REPLICASETS', 'STATEFULSETS', 'DAEMONSETS',
    'JOBS', 'CRONJOBS', 'HORIZONTAL_POD_AUTOSCALERS',
    'ROLES', 'ROLE_BINDINGS', 'CLUSTER_ROLES', 'CLUSTER_ROLE_BINDINGS',
    'STORAGE_CLASSES', 'CRDS', 'APISERVICES',
    'login', 'login_with_kubeconfig', 'login_with_service_account',
    'Client', 'Api',
    'LogFormat', 'configure',
    'Absent', 'classify_not_found', 'not_found_ok',
    'is_controlled_by',
]

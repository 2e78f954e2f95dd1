"""
Rudimentary login to the cluster: from the service account or from kubeconfig.

The library is not a full-featured client, and avoids bringing too much logic
for proper authentication, especially all the complex auth-providers
(OIDC refreshes, exec plugins, etc).

Instead, only the basic credentials are read from the environment,
as they are prepared by Kubernetes for the pods (service accounts),
or by the cluster providers & developers (kubeconfig files).

.. seealso::
    :class:`kubeext.ConnectionInfo`.
"""
import logging
import os
from typing import Any, Dict, Optional

import yaml

from kubeext._cogs.helpers import typedefs
from kubeext._cogs.structs import credentials

# Keep as constants to make them patchable in tests.
# As per https://kubernetes.io/docs/tasks/run-application/access-api-from-pod/
SERVICE_ACCOUNT_TOKEN_PATH = '/var/run/secrets/kubernetes.io/serviceaccount/token'
SERVICE_ACCOUNT_NAMESPACE_PATH = '/var/run/secrets/kubernetes.io/serviceaccount/namespace'
SERVICE_ACCOUNT_CA_PATH = '/var/run/secrets/kubernetes.io/serviceaccount/ca.crt'
SERVICE_ACCOUNT_SERVER = 'https://kubernetes.default.svc'
DEFAULT_KUBECONFIG_PATH = '~/.kube/config'

logger = logging.getLogger(__name__)


def login(
        *,
        logger: typedefs.Logger = logger,
) -> credentials.ConnectionInfo:
    """
    Find the credentials in the environment: in-cluster first, then kubeconfig.

    Raises `LoginError` if neither of the methods is available.
    """
    info = login_with_service_account()
    if info is not None:
        logger.debug("Client is configured in cluster with service account.")
        return info

    info = login_with_kubeconfig()
    if info is not None:
        logger.debug("Client is configured via kubeconfig file.")
        return info

    raise credentials.LoginError("Cannot authenticate neither in-cluster, nor via kubeconfig.")


def has_service_account() -> bool:
    return os.path.exists(SERVICE_ACCOUNT_TOKEN_PATH)


def login_with_service_account() -> Optional[credentials.ConnectionInfo]:
    """
    A minimalistic login function that can get raw data from a service account.

    Authentication capabilities can be limited to keep the code short & simple.
    No parsing or sophisticated multi-step token retrieval is performed.
    """
    if has_service_account():
        with open(SERVICE_ACCOUNT_TOKEN_PATH, encoding='utf-8') as f:
            token = f.read().strip()

        namespace: Optional[str] = None
        if os.path.exists(SERVICE_ACCOUNT_NAMESPACE_PATH):
            with open(SERVICE_ACCOUNT_NAMESPACE_PATH, encoding='utf-8') as f:
                namespace = f.read().strip()

        # Prefer the env vars injected by K8s into every pod, if present.
        host = os.environ.get('KUBERNETES_SERVICE_HOST')
        port = os.environ.get('KUBERNETES_SERVICE_PORT')
        server = f'https://{host}:{port}' if host and port else SERVICE_ACCOUNT_SERVER

        return credentials.ConnectionInfo(
            server=server,
            ca_path=SERVICE_ACCOUNT_CA_PATH if os.path.exists(SERVICE_ACCOUNT_CA_PATH) else None,
            token=token or None,
            default_namespace=namespace or None,
        )
    else:
        return None


def has_kubeconfig() -> bool:
    env_var_set = bool(os.environ.get('KUBECONFIG'))
    file_exists = os.path.exists(os.path.expanduser(DEFAULT_KUBECONFIG_PATH))
    return env_var_set or file_exists


def login_with_kubeconfig() -> Optional[credentials.ConnectionInfo]:
    """
    A minimalistic login function that can get raw data from a kubeconfig file.

    Authentication capabilities can be limited to keep the code short & simple.
    No parsing or sophisticated multi-step token retrieval is performed.
    """

    # As per https://kubernetes.io/docs/concepts/configuration/organize-cluster-access-kubeconfig/
    if not has_kubeconfig():
        return None
    kubeconfig = os.environ.get('KUBECONFIG') or DEFAULT_KUBECONFIG_PATH

    paths = [path.strip() for path in kubeconfig.split(os.pathsep)]
    paths = [os.path.expanduser(path) for path in paths if path]

    # As prescribed: if the file is absent or non-deserialisable, then fail. The first value wins.
    current_context: Optional[str] = None
    contexts: Dict[Any, Any] = {}
    clusters: Dict[Any, Any] = {}
    users: Dict[Any, Any] = {}
    for path in paths:

        with open(path, encoding='utf-8') as f:
            config = yaml.safe_load(f.read()) or {}

        if current_context is None:
            current_context = config.get('current-context')
        for item in config.get('contexts') or []:
            if item['name'] not in contexts:
                contexts[item['name']] = item.get('context') or {}
        for item in config.get('clusters') or []:
            if item['name'] not in clusters:
                clusters[item['name']] = item.get('cluster') or {}
        for item in config.get('users') or []:
            if item['name'] not in users:
                users[item['name']] = item.get('user') or {}

    # Once fully parsed, use the current context only.
    if current_context is None:
        raise credentials.LoginError('Current context is not set in kubeconfigs.')
    if current_context not in contexts:
        raise credentials.LoginError(f'Current context {current_context!r} is not defined.')
    context = contexts[current_context]
    cluster = clusters.get(context.get('cluster'), {})
    user = users.get(context.get('user'), {})
    if not cluster.get('server'):
        raise credentials.LoginError(f'No server is defined for context {current_context!r}.')

    # We do not make a fake API request to refresh the auth-provider's token, only read it.
    provider_token = user.get('auth-provider', {}).get('config', {}).get('access-token')

    # Map the retrieved fields into the credentials object.
    return credentials.ConnectionInfo(
        server=cluster['server'],
        ca_path=cluster.get('certificate-authority'),
        ca_data=cluster.get('certificate-authority-data'),
        insecure=cluster.get('insecure-skip-tls-verify'),
        certificate_path=user.get('client-certificate'),
        certificate_data=user.get('client-certificate-data'),
        private_key_path=user.get('client-key'),
        private_key_data=user.get('client-key-data'),
        username=user.get('username'),
        password=user.get('password'),
        token=user.get('token') or provider_token,
        default_namespace=context.get('namespace'),
    )

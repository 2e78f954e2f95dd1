"""
All the structures coming from/to the Kubernetes API.

The objects are plain dicts as JSON-decoded from the API responses.
For strict type-checking, they are detailed to the per-field level
(e.g. `TypedDict` instead of just ``Mapping[Any, Any]``) -- as used
by the library. Arbitrary fields are accessible at runtime, though
they are not declared in the type definitions at type-checking time.

Nothing in this module mutates the bodies: they are returned to the callers
exactly as received from the API, and only read here.
"""
from typing import Any, Collection, List, Mapping, Optional, cast

from typing_extensions import Literal, TypedDict

Labels = Mapping[str, str]
Annotations = Mapping[str, str]


class OwnerReference(TypedDict, total=False):
    controller: bool
    blockOwnerDeletion: bool
    apiVersion: str
    kind: str
    name: str
    uid: str


class RawMeta(TypedDict, total=False):
    uid: str
    name: str
    namespace: str
    labels: Labels
    annotations: Annotations
    finalizers: List[str]
    ownerReferences: List[OwnerReference]
    resourceVersion: str
    deletionTimestamp: str
    creationTimestamp: str


class RawBody(TypedDict, total=False):
    apiVersion: str
    kind: str
    metadata: RawMeta
    spec: Mapping[str, Any]
    status: Mapping[str, Any]


class RawListMeta(TypedDict, total=False):
    resourceVersion: str
    remainingItemCount: int
    # "continue" is a keyword, hence not declared: use `.get('continue')`.


class RawList(TypedDict, total=False):
    apiVersion: str
    kind: str
    metadata: RawListMeta
    items: List[RawBody]


class LabelSelectorRequirement(TypedDict, total=False):
    key: str
    operator: Literal['In', 'NotIn', 'Exists', 'DoesNotExist']
    values: List[str]


class LabelSelector(TypedDict, total=False):
    matchLabels: Labels
    matchExpressions: List[LabelSelectorRequirement]


def get_namespace(body: Mapping[str, Any]) -> Optional[str]:
    return cast(Optional[str], body.get('metadata', {}).get('namespace'))


def get_uid(body: Mapping[str, Any]) -> Optional[str]:
    return cast(Optional[str], body.get('metadata', {}).get('uid'))


def get_owner_references(body: Mapping[str, Any]) -> Collection[OwnerReference]:
    return cast(Collection[OwnerReference], body.get('metadata', {}).get('ownerReferences') or [])


def render_label_selector(selector: LabelSelector) -> str:
    """
    Render a structured label selector into the ``labelSelector`` query syntax.

    The syntax is the same as for ``kubectl get -l ...``: comma-separated
    requirements, all of which must be satisfied (i.e. logical AND)::

        app=nginx,tier in (frontend,backend),!canary

    The match labels go first in their original order, then the expressions.
    An empty selector renders into an empty string (which matches everything).
    """
    requirements: List[str] = []
    for key, val in (selector.get('matchLabels') or {}).items():
        requirements.append(f'{key}={val}')
    for expr in selector.get('matchExpressions') or []:
        key, operator = expr['key'], expr['operator']
        values = ','.join(expr.get('values') or [])
        if operator == 'In':
            requirements.append(f'{key} in ({values})')
        elif operator == 'NotIn':
            requirements.append(f'{key} notin ({values})')
        elif operator == 'Exists':
            requirements.append(f'{key}')
        elif operator == 'DoesNotExist':
            requirements.append(f'!{key}')
        else:
            raise ValueError(f"Unsupported label selector operator: {operator!r}")
    return ','.join(requirements)

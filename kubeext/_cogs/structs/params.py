"""
Parameters of the API operations: listing, creating, patching, deleting.

The parameter objects are immutable and cheap to construct, so they are
constructed fresh for every call and never retained by the library.
They only know how to render themselves into the URL's query parameters
or into the request's body, as the K8s API expects them.

No validation is done: e.g. an empty field manager is sent as is,
and it is up to the API server to accept or to reject it.
"""
import dataclasses
import enum
from typing import Any, Dict, Optional

from typing_extensions import Literal

PropagationPolicy = Literal['Orphan', 'Background', 'Foreground']


class PatchType(str, enum.Enum):
    """ The content types of the patches, as they define the patching semantics. """
    MERGE = 'application/merge-patch+json'
    STRATEGIC = 'application/strategic-merge-patch+json'
    JSON = 'application/json-patch+json'
    APPLY = 'application/apply-patch+yaml'


@dataclasses.dataclass(frozen=True)
class ListParams:
    label_selector: Optional[str] = None
    field_selector: Optional[str] = None
    limit: Optional[int] = None
    continue_token: Optional[str] = None

    def labels(self, label_selector: str) -> "ListParams":
        return dataclasses.replace(self, label_selector=label_selector)

    def fields(self, field_selector: str) -> "ListParams":
        return dataclasses.replace(self, field_selector=field_selector)

    def as_query(self) -> Dict[str, str]:
        query: Dict[str, str] = {}
        if self.label_selector:
            query['labelSelector'] = self.label_selector
        if self.field_selector:
            query['fieldSelector'] = self.field_selector
        if self.limit is not None:
            query['limit'] = str(self.limit)
        if self.continue_token:
            query['continue'] = self.continue_token
        return query


@dataclasses.dataclass(frozen=True)
class PostParams:
    field_manager: Optional[str] = None
    dry_run: bool = False

    def as_query(self) -> Dict[str, str]:
        query: Dict[str, str] = {}
        if self.dry_run:
            query['dryRun'] = 'All'
        if self.field_manager is not None:
            query['fieldManager'] = self.field_manager
        return query


@dataclasses.dataclass(frozen=True)
class PatchParams:
    field_manager: Optional[str] = None
    force: bool = False
    dry_run: bool = False

    def as_query(self) -> Dict[str, str]:
        query: Dict[str, str] = {}
        if self.dry_run:
            query['dryRun'] = 'All'
        if self.field_manager is not None:
            query['fieldManager'] = self.field_manager
        if self.force:
            query['force'] = 'true'
        return query


@dataclasses.dataclass(frozen=True)
class DeleteParams:
    grace_period_seconds: Optional[int] = None
    propagation_policy: Optional[PropagationPolicy] = None
    dry_run: bool = False

    def as_query(self) -> Dict[str, str]:
        return {'dryRun': 'All'} if self.dry_run else {}

    def as_body(self) -> Dict[str, Any]:
        """ Render the parameters into a ``DeleteOptions`` body of the request. """
        body: Dict[str, Any] = {'apiVersion': 'v1', 'kind': 'DeleteOptions'}
        if self.grace_period_seconds is not None:
            body['gracePeriodSeconds'] = self.grace_period_seconds
        if self.propagation_policy is not None:
            body['propagationPolicy'] = self.propagation_policy
        if self.dry_run:
            body['dryRun'] = ['All']
        return body


def delete_params() -> DeleteParams:
    """ Delete immediately, with no grace period. """
    return DeleteParams(grace_period_seconds=0)


def foreground_delete() -> DeleteParams:
    """ Delete and block the object's removal until its dependents are removed. """
    return DeleteParams(propagation_policy='Foreground')


def list_params() -> ListParams:
    return ListParams()


def post_params_with_manager(manager: str) -> PostParams:
    return PostParams(field_manager=manager)


def patch_params_with_manager(manager: str) -> PatchParams:
    """
    Patch (usually, server-side-apply) as the field manager, and take the ownership.

    The conflicts are forced: the fields owned by other managers are overwritten,
    and the ownership is transferred to this manager.
    """
    return PatchParams(field_manager=manager, force=True)

"""
Relationship helpers: from the owners to their children and back.

Kubernetes models the ownership only as back-references from the children
to their owners (``metadata.ownerReferences``), and the claiming of pods
by the workloads via the label selectors. There are no forward links.
So, the related objects are derived from this metadata here.
"""
from typing import Any, List, Mapping, Optional

from kubeext._cogs.structs import bodies, references
from kubeext._core import fetching

# As set by the StatefulSet controller on its pods; the value is the controller revision name.
CONTROLLER_REVISION_HASH_LABEL = 'controller-revision-hash'


class Relations(fetching.TypedFetching):

    async def get_owner_k(
            self,
            child: Mapping[str, Any],
            resource: references.Resource,
    ) -> Optional[bodies.RawBody]:
        """
        Get the owner of the child object assuming that the owner is of a given kind.

        The owner is looked up in the child's namespace. Returns ``None`` both
        if there is no owner reference of that kind, and if the referenced owner
        does not exist anymore: the callers cannot distinguish these cases.
        Malformed references without a name are skipped.
        """
        namespace = bodies.get_namespace(child)
        for owner in bodies.get_owner_references(child):
            name = owner.get('name')
            if owner.get('kind') == resource.kind and name:
                return await self.get_k_opt(resource, name, namespace)
        return None

    async def get_pods_by_deployment_name(
            self,
            name: str,
            namespace: Optional[str] = None,
    ) -> Optional[List[bodies.RawBody]]:
        """
        Get all the pods claimed by the named deployment.

        Returns ``None`` if the deployment does not exist.
        """
        deployment = await self.get_k_opt(references.DEPLOYMENTS, name, namespace)
        if deployment is None:
            return None
        return await self.get_pods_by_deployment(deployment)

    async def get_pods_by_deployment(
            self,
            deployment: Mapping[str, Any],
    ) -> Optional[List[bodies.RawBody]]:
        """
        Get all the pods claimed by the deployment via its pod selector.

        The pods are owned by the deployment's replica sets, not by the deployment
        itself, so the owner references cannot be used. Instead, the deployment's
        label selector (the one it uses to claim the pods) is used for listing.

        Returns ``None`` if the deployment has no selector (it claims nothing).
        """
        selector: Optional[bodies.LabelSelector] = (deployment.get('spec') or {}).get('selector')
        if selector is None:
            return None
        namespace = bodies.get_namespace(deployment)
        lp = self.list_params().labels(bodies.render_label_selector(selector))
        return await self.list_k(references.PODS, namespace, lp)

    async def get_pods_by_statefulset_name(
            self,
            name: str,
            namespace: Optional[str] = None,
    ) -> Optional[List[bodies.RawBody]]:
        """
        Get all the pods of the current revision of the named stateful set.

        Returns ``None`` if the stateful set does not exist.
        """
        statefulset = await self.get_k_opt(references.STATEFULSETS, name, namespace)
        if statefulset is None:
            return None
        return await self.get_pods_by_statefulset(statefulset)

    async def get_pods_by_statefulset(
            self,
            statefulset: Mapping[str, Any],
    ) -> List[bodies.RawBody]:
        """
        Get all the pods of the current revision of the stateful set.

        If the stateful set reports no current revision yet, there are no pods.
        """
        revision: Optional[str] = (statefulset.get('status') or {}).get('currentRevision')
        if not revision:
            return []
        namespace = bodies.get_namespace(statefulset)
        lp = self.list_params().labels(f'{CONTROLLER_REVISION_HASH_LABEL}={revision}')
        return await self.list_k(references.PODS, namespace, lp)


def is_controlled_by(
        child: Mapping[str, Any],
        owner: Mapping[str, Any],
) -> bool:
    """ Check if the child is controlled (not just owned) by the owner, by uid. """
    uid = bodies.get_uid(owner)
    return uid is not None and any(
        ref.get('controller') and ref.get('uid') == uid
        for ref in bodies.get_owner_references(child)
    )

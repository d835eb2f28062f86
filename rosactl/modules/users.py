from typing import Dict, Iterable, List

from rosactl.errors import LookupFailedError, NoResultsError
from rosactl.modules.cluster import ensure_ready, get_cluster
from rosactl.ocm import OCMError, User
from rosactl.runtime import Runtime

CLUSTER_ADMINS = "cluster-admins"
DEDICATED_ADMINS = "dedicated-admins"

# Account created by the service in every cluster-admins group; never listed.
CLUSTER_ADMIN_USER = "cluster-admin"


def merge_user_groups(cluster_admins: Iterable[User], dedicated_admins: Iterable[User]) -> Dict[str, List[str]]:
    """Map each user id to the admin groups it belongs to.

    The service account 'cluster-admin' is dropped from the cluster-admins
    before merging.
    """
    groups: Dict[str, List[str]] = {}
    for user in cluster_admins:
        if user.id == CLUSTER_ADMIN_USER:
            continue
        groups.setdefault(user.id, [])
        if CLUSTER_ADMINS not in groups[user.id]:
            groups[user.id].append(CLUSTER_ADMINS)
    for user in dedicated_admins:
        groups.setdefault(user.id, [])
        if DEDICATED_ADMINS not in groups[user.id]:
            groups[user.id].append(DEDICATED_ADMINS)
    return groups


def _load_group(r: Runtime, cluster_id: str, group: str) -> List[User]:
    try:
        return r.ocm.get_users(cluster_id, group)
    except OCMError as e:
        raise LookupFailedError(f"Failed to get {group} for cluster '{r.cluster_key}': {e}") from e


def list_users(r: Runtime) -> Dict[str, List[str]]:
    """Load the administrative users of the runtime's cluster.

    Raises:
        StatePreconditionError: if the cluster is not ready
        NoResultsError: if neither admin group has users
    """
    cluster = ensure_ready(r, get_cluster(r))

    r.reporter.debug("Loading users for cluster '%s'", r.cluster_key)
    cluster_admins = [
        user for user in _load_group(r, cluster.id, CLUSTER_ADMINS)
        if user.id != CLUSTER_ADMIN_USER
    ]
    dedicated_admins = _load_group(r, cluster.id, DEDICATED_ADMINS)

    if not cluster_admins and not dedicated_admins:
        raise NoResultsError(f"There are no users configured for cluster '{r.cluster_key}'")

    return merge_user_groups(cluster_admins, dedicated_admins)

"""
Machine pool operations.
"""
from typing import Iterable

from rosactl.confirm import confirm
from rosactl.errors import ActionFailedError, LookupFailedError, NotFoundError
from rosactl.modules.cluster import get_cluster
from rosactl.ocm import MachinePool, OCMError
from rosactl.runtime import Runtime
from rosactl.validators import validate_machine_pool_id


def find_machine_pool(machine_pools: Iterable[MachinePool], machine_pool_id: str) -> MachinePool:
    """Return the machine pool with the given id.

    Ids are unique within a cluster, so the first match is the only one.

    Raises:
        NotFoundError: if no machine pool has that id
    """
    for machine_pool in machine_pools:
        if machine_pool.id == machine_pool_id:
            return machine_pool
    raise NotFoundError(f"Machine pool '{machine_pool_id}' not found")


def delete_machine_pool(r: Runtime, machine_pool_id: str, yes: bool = False) -> bool:
    """
    Delete an additional machine pool from the runtime's cluster.

    Args:
        r: Runtime of the current command
        machine_pool_id: Id of the machine pool to delete
        yes: Skip the confirmation prompt

    Returns:
        True if the machine pool was deleted, False if the operator declined
    """
    validate_machine_pool_id(machine_pool_id, r.cluster_key)

    cluster = get_cluster(r)

    r.reporter.debug("Loading machine pools for cluster '%s'", r.cluster_key)
    try:
        machine_pools = r.ocm.get_machine_pools(cluster.id)
    except OCMError as e:
        raise LookupFailedError(f"Failed to get machine pools for cluster '{r.cluster_key}': {e}") from e

    try:
        machine_pool = find_machine_pool(machine_pools, machine_pool_id)
    except NotFoundError:
        raise NotFoundError(
            f"Failed to get machine pool '{machine_pool_id}' for cluster '{r.cluster_key}'"
        ) from None

    if not confirm(f"delete machine pool '{machine_pool_id}' on cluster '{r.cluster_key}'", yes=yes):
        return False

    r.reporter.debug("Deleting machine pool '%s' on cluster '%s'", machine_pool.id, r.cluster_key)
    try:
        r.ocm.delete_machine_pool(cluster.id, machine_pool.id)
    except OCMError as e:
        raise ActionFailedError(
            f"Failed to delete machine pool '{machine_pool.id}' on cluster '{r.cluster_key}': {e}"
        ) from e
    r.reporter.info("Successfully deleted machine pool '%s' from cluster '%s'", machine_pool_id, r.cluster_key)
    return True

from rosactl.errors import LookupFailedError, NotFoundError, StatePreconditionError
from rosactl.ocm import Cluster, OCMError, OCMNotFoundError
from rosactl.runtime import Runtime


def get_cluster(r: Runtime) -> Cluster:
    """Resolve the cluster key of the runtime to exactly one cluster."""
    r.reporter.debug("Loading cluster '%s'", r.cluster_key)
    try:
        return r.ocm.get_cluster(r.cluster_key, r.creator)
    except OCMNotFoundError as e:
        raise NotFoundError(f"Failed to get cluster '{r.cluster_key}': {e}") from e
    except OCMError as e:
        raise LookupFailedError(f"Failed to get cluster '{r.cluster_key}': {e}") from e


def ensure_ready(r: Runtime, cluster: Cluster) -> Cluster:
    if not cluster.is_ready:
        raise StatePreconditionError(f"Cluster '{r.cluster_key}' is not yet ready")
    return cluster

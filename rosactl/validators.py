"""Validation of identifiers given on the command line.

Identifiers end up in API paths and search queries, so anything outside the
allowed character sets is rejected before a request is made.
"""
import re

from rosactl.errors import InvalidInputError, ProtectedResourceError

MACHINE_POOL_KEY_RE = re.compile(r"[a-z]([-a-z0-9]*[a-z0-9])?")
CLUSTER_KEY_RE = re.compile(r"[\w-]+", re.ASCII)

# Created with the cluster and removed only with it.
DEFAULT_MACHINE_POOL = "Default"


def validate_cluster_key(cluster_key: str) -> str:
    if not CLUSTER_KEY_RE.fullmatch(cluster_key or ""):
        raise InvalidInputError(
            f"Cluster name, identifier or external identifier '{cluster_key}' isn't valid: "
            "it must contain only letters, digits, dashes and underscores"
        )
    return cluster_key


def validate_machine_pool_id(machine_pool_id: str, cluster_key: str = "") -> str:
    """Check that a machine pool id can be sent to the API for deletion.

    Raises:
        ProtectedResourceError: for the reserved default pool
        InvalidInputError: when the id doesn't match MACHINE_POOL_KEY_RE
    """
    if machine_pool_id == DEFAULT_MACHINE_POOL:
        raise ProtectedResourceError(
            f"Machine pool '{machine_pool_id}' cannot be deleted from cluster '{cluster_key}'"
        )
    if not MACHINE_POOL_KEY_RE.fullmatch(machine_pool_id or ""):
        raise InvalidInputError("Expected a valid identifier for the machine pool")
    return machine_pool_id

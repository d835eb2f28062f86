import pytest

from rosactl.ocm import Cluster, MachinePool, OCMError, OCMNotFoundError, User
from rosactl.reporter import Reporter
from rosactl.runtime import Invocation, Runtime


class FakeOCMClient:
    """Stands in for OCMClient, recording every call made to it."""

    def __init__(self, clusters=None, machine_pools=None, users=None, fail=None):
        self.clusters = clusters or {}
        self.machine_pools = machine_pools or {}
        self.users = users or {}
        self.fail = fail or {}
        self.calls = []
        self.closed = False

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail:
            raise self.fail[name]

    def get_cluster(self, cluster_key, creator=None):
        self._call("get_cluster", cluster_key, creator)
        for cluster in self.clusters.values():
            if cluster_key in (cluster.id, cluster.name):
                return cluster
        raise OCMNotFoundError(f"There is no cluster with identifier or name '{cluster_key}'")

    def get_machine_pools(self, cluster_id):
        self._call("get_machine_pools", cluster_id)
        return list(self.machine_pools.get(cluster_id, []))

    def delete_machine_pool(self, cluster_id, machine_pool_id):
        self._call("delete_machine_pool", cluster_id, machine_pool_id)
        self.machine_pools[cluster_id] = [
            mp for mp in self.machine_pools.get(cluster_id, []) if mp.id != machine_pool_id
        ]

    def get_users(self, cluster_id, group):
        self._call("get_users", cluster_id, group)
        return [User(id=user_id) for user_id in self.users.get(group, [])]

    def close(self):
        self.closed = True

    def called(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def ocm():
    return FakeOCMClient(
        clusters={"c1": Cluster(id="c1", name="mycluster", state="ready")},
        machine_pools={"c1": [MachinePool(id="mp-1", replicas=3), MachinePool(id="mp-2", replicas=2)]},
        users={
            "cluster-admins": ["cluster-admin", "alice"],
            "dedicated-admins": ["alice", "bob"],
        },
    )


@pytest.fixture
def invocation(ocm):
    return Invocation(reporter=Reporter(), connect=lambda: ocm, creator=None)


@pytest.fixture
def runtime(ocm):
    return Runtime(ocm=ocm, reporter=Reporter(), cluster_key="mycluster")


@pytest.fixture
def api_error():
    return OCMError("Internal error", status=500, code="CLUSTERS-MGMT-500")

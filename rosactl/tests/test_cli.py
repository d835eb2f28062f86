import json
import re

import yaml
from typer.testing import CliRunner

from rosactl.cli import app
from rosactl.ocm import OCMAuthenticationError
from rosactl.reporter import Reporter
from rosactl.runtime import Invocation

runner = CliRunner()


def invoke(args, invocation, **kwargs):
    return runner.invoke(app, args, obj=invocation, **kwargs)


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "delete" in result.stdout
    assert "list" in result.stdout


def test_delete_machinepool_confirmed(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "mp-1"], invocation, input="y\n")
    assert result.exit_code == 0
    assert "Are you sure you want to delete machine pool 'mp-1' on cluster 'mycluster'?" in result.output
    assert "Successfully deleted machine pool 'mp-1' from cluster 'mycluster'" in result.output
    assert ocm.called("delete_machine_pool") == [("delete_machine_pool", "c1", "mp-1")]
    assert ocm.closed


def test_delete_machinepool_yes_flag(invocation, ocm):
    result = invoke(["delete", "machine-pool", "-c", "mycluster", "--yes", "mp-2"], invocation)
    assert result.exit_code == 0
    assert "Are you sure" not in result.output
    assert ocm.called("delete_machine_pool") == [("delete_machine_pool", "c1", "mp-2")]


def test_delete_machinepool_declined(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "mp-1"], invocation, input="n\n")
    assert result.exit_code == 0
    assert "Successfully deleted" not in result.output
    assert ocm.called("delete_machine_pool") == []
    assert ocm.closed


def test_delete_machinepool_end_of_input(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "mp-1"], invocation, input="")
    assert result.exit_code == 0
    assert "Aborted" not in result.output
    assert "Successfully deleted" not in result.output
    assert ocm.called("delete_machine_pool") == []
    assert ocm.closed


def test_delete_default_machinepool(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "Default"], invocation)
    assert result.exit_code == 1
    assert "Machine pool 'Default' cannot be deleted from cluster 'mycluster'" in result.output
    assert ocm.calls == []


def test_delete_invalid_machinepool_id(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "Bad_ID"], invocation)
    assert result.exit_code == 1
    assert "Expected a valid identifier for the machine pool" in result.output
    assert ocm.calls == []


def test_delete_machinepool_not_found(invocation, ocm):
    result = invoke(["delete", "machinepool", "--cluster=mycluster", "--yes", "mp-9"], invocation)
    assert result.exit_code == 1
    assert "E: Failed to get machine pool 'mp-9' for cluster 'mycluster'" in result.output
    assert ocm.closed


def test_delete_machinepool_requires_cluster(invocation):
    result = invoke(["delete", "machinepool", "mp-1"], invocation)
    assert result.exit_code == 2


def test_delete_machinepool_requires_id(invocation):
    result = invoke(["delete", "machinepool", "--cluster=mycluster"], invocation)
    assert result.exit_code == 2


def test_connection_failure_is_reported():
    def connect():
        raise OCMAuthenticationError("Not logged in")

    invocation = Invocation(reporter=Reporter(), connect=connect, creator=None)
    result = invoke(["list", "users", "--cluster=mycluster"], invocation)
    assert result.exit_code == 1
    assert "Failed to create OCM connection: Not logged in" in result.output


def test_list_users_table(invocation, ocm):
    result = invoke(["list", "users", "--cluster=mycluster"], invocation)
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert re.match(r"^ID\s+GROUPS$", lines[0])
    assert re.match(r"^alice\s+cluster-admins, dedicated-admins$", lines[1])
    assert re.match(r"^bob\s+dedicated-admins$", lines[2])
    assert "cluster-admin " not in result.stdout
    assert ocm.closed


def test_list_users_json(invocation):
    result = invoke(["list", "user", "--cluster=mycluster", "--output", "json"], invocation)
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"id": "alice", "groups": ["cluster-admins", "dedicated-admins"]},
        {"id": "bob", "groups": ["dedicated-admins"]},
    ]


def test_list_users_yaml(invocation):
    result = invoke(["list", "users", "--cluster=mycluster", "-o", "yaml"], invocation)
    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout)[1] == {"id": "bob", "groups": ["dedicated-admins"]}


def test_list_users_bad_output_format(invocation, ocm):
    result = invoke(["list", "users", "--cluster=mycluster", "-o", "xml"], invocation)
    assert result.exit_code == 2
    assert "xml" in result.output
    assert ocm.calls == []


def test_list_users_empty(invocation, ocm):
    ocm.users = {}
    result = invoke(["list", "users", "--cluster=mycluster"], invocation)
    assert result.exit_code == 1
    assert "W: There are no users configured for cluster 'mycluster'" in result.output
    assert "GROUPS" not in result.output


def test_list_users_cluster_not_ready(invocation, ocm):
    ocm.clusters["c1"] = ocm.clusters["c1"].model_copy(update={"state": "pending"})
    result = invoke(["list", "users", "--cluster=mycluster"], invocation)
    assert result.exit_code == 1
    assert "Cluster 'mycluster' is not yet ready" in result.output


def test_list_users_unknown_cluster(invocation):
    result = invoke(["list", "users", "--cluster=other"], invocation)
    assert result.exit_code == 1
    assert "Failed to get cluster 'other'" in result.output


def test_list_users_invalid_cluster_key(invocation, ocm):
    result = invoke(["list", "users", "--cluster", "bad key"], invocation)
    assert result.exit_code == 1
    assert "isn't valid" in result.output
    assert ocm.calls == []

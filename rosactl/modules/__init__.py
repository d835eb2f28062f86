"""
Cluster administration operations used by the commands.
"""
from .machinepool import delete_machine_pool, find_machine_pool
from .users import list_users, merge_user_groups

__all__ = [
    'delete_machine_pool',
    'find_machine_pool',
    'list_users',
    'merge_user_groups',
]

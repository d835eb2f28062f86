"""Client and data models for the OCM clusters management API."""
from .client import (
    OCMAuthenticationError,
    OCMClient,
    OCMConnectionError,
    OCMError,
    OCMNotFoundError,
)
from .models import Cluster, ClusterState, MachinePool, User

__all__ = [
    'OCMClient', 'OCMError', 'OCMAuthenticationError', 'OCMConnectionError',
    'OCMNotFoundError', 'Cluster', 'ClusterState', 'MachinePool', 'User',
]

"""
Data models for the OCM clusters management API.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

M = TypeVar('M', bound='OCMObject')


class ClusterState(str, Enum):
    """States reported in the 'state' field of a cluster."""
    ERROR = 'error'
    HIBERNATING = 'hibernating'
    INSTALLING = 'installing'
    PENDING = 'pending'
    POWERING_DOWN = 'powering_down'
    READY = 'ready'
    RESUMING = 'resuming'
    UNINSTALLING = 'uninstalling'
    UNKNOWN = 'unknown'
    VALIDATING = 'validating'
    WAITING = 'waiting'


class OCMObject(BaseModel):
    """Common fields of every object returned by the API."""
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    kind: Optional[str] = None
    id: str = ''
    href: Optional[str] = None


class Cluster(OCMObject):
    name: str = ''
    external_id: Optional[str] = None
    state: Optional[str] = None
    product: Dict[str, Any] = Field(default_factory=dict)
    properties: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_ready(self) -> bool:
        return self.state == ClusterState.READY.value


class MachinePoolAutoscaling(BaseModel):
    model_config = ConfigDict(extra='ignore')

    min_replicas: int = 0
    max_replicas: int = 0


class MachinePool(OCMObject):
    replicas: Optional[int] = None
    instance_type: Optional[str] = None
    availability_zones: List[str] = Field(default_factory=list)
    labels: Dict[str, str] = Field(default_factory=dict)
    autoscaling: Optional[MachinePoolAutoscaling] = None


class User(OCMObject):
    pass


class ObjectList(BaseModel):
    """Page envelope of a collection listing."""
    model_config = ConfigDict(extra='ignore')

    kind: Optional[str] = None
    page: int = 1
    size: int = 0
    total: int = 0
    items: List[Dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of a failed API call."""
    model_config = ConfigDict(extra='ignore')

    kind: str = 'Error'
    id: Optional[str] = None
    href: Optional[str] = None
    code: Optional[str] = None
    reason: str = ''
    operation_id: Optional[str] = None


def unmarshal_list(model: Type[M], source: Union[str, bytes, List[Dict[str, Any]]]) -> List[M]:
    """Read a list of values of the given type from JSON text or decoded data."""
    adapter = TypeAdapter(List[model])
    if isinstance(source, (str, bytes)):
        return adapter.validate_json(source)
    return adapter.validate_python(source)


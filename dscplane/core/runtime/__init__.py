"""
Runtime: resolución de rutas de estado y valores de una invocación.

El estado real NUNCA vive dentro del repo; el staging usa state_root().
"""

from dscplane.core.runtime.resolver import state_root, default_configuration_path
from dscplane.core.runtime.state import ExecutionResult, OperationTiming, ResourceChangeRecord

__all__ = [
    "state_root",
    "default_configuration_path",
    "ExecutionResult",
    "OperationTiming",
    "ResourceChangeRecord",
]

"""
LCM: staging, construcción de comandos, clasificación y el manager.
"""

from dscplane.core.lcm.classifier import (
    LCM_MODULE_NOT_INSTALLED_ERROR_CODE,
    LcmFailureKind,
    classify_failure,
    normalize_stderr,
)
from dscplane.core.lcm.command import LcmMode, build_lcm_command
from dscplane.core.lcm.manager import LocalConfigurationManager

__all__ = [
    "LCM_MODULE_NOT_INSTALLED_ERROR_CODE",
    "LcmFailureKind",
    "classify_failure",
    "normalize_stderr",
    "LcmMode",
    "build_lcm_command",
    "LocalConfigurationManager",
]

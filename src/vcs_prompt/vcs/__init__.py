"""Version control backends for vcs-prompt.

Each backend pairs a pure parser (raw status text in, ``StatusRecord`` out)
with a provider that runs the backend's single status command.
"""

from vcs_prompt.vcs.base import StatusProvider, VCSType
from vcs_prompt.vcs.exceptions import (
    SpecialConditionError,
    StatusParseError,
    UpgradeRequiredError,
    VCSError,
)
from vcs_prompt.vcs.factory import DETECTION_ORDER, VCSFactory

__all__ = [
    "DETECTION_ORDER",
    "SpecialConditionError",
    "StatusParseError",
    "StatusProvider",
    "UpgradeRequiredError",
    "VCSError",
    "VCSFactory",
    "VCSType",
]

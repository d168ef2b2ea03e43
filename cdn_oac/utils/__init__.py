# Local Modules
from cdn_oac.utils.enums import (
    OriginType,
    SigningBehavior,
    SigningProtocol,
)
from cdn_oac.utils.config import StackConfig, load_stack_config

__all__ = [
    "OriginType",
    "SigningBehavior",
    "SigningProtocol",
    "StackConfig",
    "load_stack_config",
]

"""
mskput._config is considered explicitly upstream of everything else in mskput,
should have no intra-mskput dependencies.
"""
__all__ = [
    "config",
    "get_option",
    "set_option",
    "reset_option",
    "describe_option",
    "option_context",
]
from mskput._config import config
from mskput._config.config import (
    describe_option,
    get_option,
    option_context,
    reset_option,
    set_option,
)

from ._config import Config, get_config, set_config
from ._deprecation import renamed
from ._equality import strict_equals, strict_key
from ._errors import ContractError, require_callable, require_wait
from ._logging import configure_logging, get_logger
from ._main import OMITTED, CommonBase, Pipeable
from ._protocols import (
    Handle,
    Scheduler,
    SupportsKeysAndGetItem,
    SupportsRichComparison,
)

__all__ = [
    "CommonBase",
    "Config",
    "ContractError",
    "Handle",
    "OMITTED",
    "Pipeable",
    "Scheduler",
    "SupportsKeysAndGetItem",
    "SupportsRichComparison",
    "configure_logging",
    "get_config",
    "get_logger",
    "renamed",
    "require_callable",
    "require_wait",
    "set_config",
    "strict_equals",
    "strict_key",
]

from .option import Option, Some, NONE, DONE, UnwrapError, from_nullable, attempt
from .chain import Chain, chain, chain_assign, attr, item, call, set_attr, set_item
from .unwrap import (
    EarlyReturn,
    early_return,
    guarded,
    require_or_fail,
    require_or_default,
    bind_or_early_return,
    bind_multiple,
)
from .lateinit import LateInit
from .context import Context, current_context, use_context, current_logger
from .logger import ConsoleLogger

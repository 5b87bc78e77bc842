from .errors import OptionError, EmptyAccess, InvalidArgument
from .option import Option, Some, NONE, Nothing, from_nullable, is_option
from .combinators import (
    map_option,
    flat_map,
    filter_option,
    flatten,
    flatten_all,
)
from .forward import forward, Forwarder, ForwardedMember
from .interop import detect, fetch
from .logger import ConsoleLogger, configure, get_logger, set_logger

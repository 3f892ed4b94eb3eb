# Common utilities
from moibit.common.logging_utils import setup_logger as setup_logger
from moibit.common.mixins import Configurable as Configurable

__all__ = ["Configurable", "setup_logger"]

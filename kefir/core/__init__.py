# Core module exports
from kefir.core.config import settings, get_settings
from kefir.core.logging import (
    configure_logging,
    get_logger,
    engine_logger,
    language_logger,
)

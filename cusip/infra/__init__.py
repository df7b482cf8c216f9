"""cusip.infra — configuration and logging setup for the command-line tool."""

from cusip.infra.config import ToolConfig as ToolConfig
from cusip.infra.config import configure_logging as configure_logging
from cusip.infra.config import parse_log_level as parse_log_level

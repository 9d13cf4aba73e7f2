import logging
from typing import Optional, Union

from machine_conditions.config import get_config

log_format = "[%(asctime)s %(levelname)s %(name)s] %(message)s"

# names accepted on top of the ones the logging module knows
LEVEL_ALIASES = {"NONE": logging.NOTSET}


def to_log_level(level: Union[str, int, None]) -> int:
    """Resolve a level name such as "debug" or "warn"; empty or unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    if not isinstance(level, str) or not level.strip():
        return logging.INFO
    name = level.strip().upper()
    if name in LEVEL_ALIASES:
        return LEVEL_ALIASES[name]
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def init(project_log_level: Optional[Union[str, int]] = None):
    """Configure the root logger and the machine_conditions logger from ConditionsConfig."""
    config = get_config()
    logging.basicConfig(format=log_format, level=to_log_level(config.root_log_level))
    if project_log_level is None:
        project_log_level = config.project_log_level
    logging.getLogger("machine_conditions").setLevel(to_log_level(project_log_level))

import json
import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

from machine_conditions.clock import get_timestamp
from machine_conditions.common.log import to_log_level
from machine_conditions.config import get_config

logger = logging.getLogger(__name__)


class EventData(BaseModel):
    event: str
    timestamp: Optional[datetime] = None
    data: Dict[str, Any]


class Observer:
    def __init__(self):
        self.callbacks = []

    def register(self, callback: Callable[[EventData], None]):
        self.callbacks.append(callback)

    def notify(self, event: str, data: Dict[str, Any], timestamp: Optional[datetime] = None):
        timestamp = timestamp if timestamp else get_timestamp()
        for callback in self.callbacks:
            try:
                event_data = EventData(event=event, data=data, timestamp=timestamp)
                callback(event_data)
            except Exception as e:
                logger.warning(f"Callback {getattr(callback, '__name__', callback)} failed with exception for event {event}: {e}")


def custom_serializer(obj):
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def gen_json_logging_callback(logger: logging.Logger, level: Optional[int] = None) -> Callable[[EventData], None]:
    level = level if level is not None else logging.INFO

    def json_logging(event_data: EventData):
        if not logger.isEnabledFor(level):
            return
        json_str = json.dumps({"event": event_data.event, **event_data.data}, default=custom_serializer)
        logger.log(level, json_str)

    return json_logging


DEFAULT_OBSERVER = Observer()
DEFAULT_OBSERVER.register(gen_json_logging_callback(logger, to_log_level(get_config().event_log_level)))

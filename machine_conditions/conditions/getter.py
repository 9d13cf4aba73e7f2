# Copyright contributors to the machine-conditions project. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from datetime import datetime
from typing import Any, Optional

from machine_conditions.conditions.accessor import get_getter_object
from machine_conditions.models.condition import (
    Condition,
    ConditionSeverity,
    ConditionStatus,
)


def get(from_: Any, t: str) -> Optional[Condition]:
    """Return the condition with the given type, or None if it does not exist."""
    conditions = get_getter_object(from_).get_conditions()
    for condition in conditions:
        if condition.type == t:
            return condition
    return None


def has(from_: Any, t: str) -> bool:
    return get(from_, t) is not None


def is_true(from_: Any, t: str) -> bool:
    c = get(from_, t)
    return c is not None and c.status == ConditionStatus.TRUE


def is_false(from_: Any, t: str) -> bool:
    c = get(from_, t)
    return c is not None and c.status == ConditionStatus.FALSE


def is_unknown(from_: Any, t: str) -> bool:
    """A missing condition counts as Unknown."""
    c = get(from_, t)
    return c is None or c.status == ConditionStatus.UNKNOWN


def get_reason(from_: Any, t: str) -> str:
    c = get(from_, t)
    return c.reason if c else ""


def get_message(from_: Any, t: str) -> str:
    c = get(from_, t)
    return c.message if c else ""


def get_severity(from_: Any, t: str) -> ConditionSeverity:
    c = get(from_, t)
    return c.severity if c else ConditionSeverity.NONE


def get_last_transition_time(from_: Any, t: str) -> Optional[datetime]:
    c = get(from_, t)
    return c.lastTransitionTime if c else None

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

import logging
from typing import Any, Optional

from machine_conditions.clock import Clock, get_timestamp, normalize
from machine_conditions.conditions.accessor import get_setter_object
from machine_conditions.conditions.compare import has_same_state, sort_conditions
from machine_conditions.models.condition import (
    Condition,
    ConditionSeverity,
    ConditionStatus,
)
from machine_conditions.observer import DEFAULT_OBSERVER, Observer

logger = logging.getLogger(__name__)


def set_condition(to: Any, condition: Optional[Condition], clock: Optional[Clock] = None, observer: Optional[Observer] = None) -> None:
    """Set the given condition on an object.

    If a condition with the same type already exists, lastTransitionTime is updated only
    if a change is detected in status, reason, severity or message. Neither the given
    condition nor the object's current list is modified; a new list is written back.
    """
    if to is None or condition is None:
        return
    observer = observer if observer else DEFAULT_OBSERVER

    obj = get_setter_object(to)

    conditions = list(obj.get_conditions())
    event = "conditions:set:added"
    data = {"type": condition.type, "status": condition.status}
    exists = False
    for i, existing in enumerate(conditions):
        if existing.type != condition.type:
            continue
        exists = True
        if has_same_state(existing, condition):
            # nothing changed, keep the current last transition time
            event = "conditions:set:unchanged"
            conditions[i] = condition.model_copy(update={"lastTransitionTime": existing.lastTransitionTime})
        else:
            event = "conditions:set:transitioned"
            data["previous_status"] = existing.status
            logger.debug(f"Condition '{condition.type}' transitioned: {existing.status} -> {condition.status}")
            conditions[i] = condition.model_copy(update={"lastTransitionTime": get_timestamp(clock)})
        break

    # new condition, stamp it only if the caller did not
    if not exists:
        new_condition = condition.model_copy()
        if new_condition.lastTransitionTime is None:
            new_condition.lastTransitionTime = get_timestamp(clock)
        else:
            new_condition.lastTransitionTime = normalize(new_condition.lastTransitionTime)
        conditions.append(new_condition)

    obj.set_conditions(sort_conditions(conditions))
    observer.notify(event, data, timestamp=get_timestamp(clock))


def _format(message_format: str, message_args: tuple) -> str:
    if not message_args:
        return message_format
    return message_format % message_args


def true_condition(t: str) -> Condition:
    return Condition(type=t, status=ConditionStatus.TRUE)


def false_condition(t: str, reason: str, severity: ConditionSeverity, message_format: str, *message_args: Any) -> Condition:
    return Condition(
        type=t,
        status=ConditionStatus.FALSE,
        reason=reason,
        severity=severity,
        message=_format(message_format, message_args),
    )


def unknown_condition(t: str, reason: str, message_format: str, *message_args: Any) -> Condition:
    return Condition(
        type=t,
        status=ConditionStatus.UNKNOWN,
        reason=reason,
        message=_format(message_format, message_args),
    )


def mark_true(to: Any, t: str, clock: Optional[Clock] = None, observer: Optional[Observer] = None) -> None:
    set_condition(to, true_condition(t), clock=clock, observer=observer)


def mark_false(
    to: Any,
    t: str,
    reason: str,
    severity: ConditionSeverity,
    message_format: str,
    *message_args: Any,
    clock: Optional[Clock] = None,
    observer: Optional[Observer] = None,
) -> None:
    set_condition(to, false_condition(t, reason, severity, message_format, *message_args), clock=clock, observer=observer)


def mark_unknown(
    to: Any, t: str, reason: str, message_format: str, *message_args: Any, clock: Optional[Clock] = None, observer: Optional[Observer] = None
) -> None:
    set_condition(to, unknown_condition(t, reason, message_format, *message_args), clock=clock, observer=observer)

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

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from machine_conditions.models.condition import Condition, ConditionSeverity
from machine_conditions.models.machine import (
    Machine,
    MachineHealthCheck,
    MachineHealthCheckStatus,
    MachineStatus,
    ObjectMeta,
)

BASETIME = datetime(year=2024, month=10, day=1, hour=0, minute=0, second=0, tzinfo=timezone.utc)


def build(type_status_reason_trios: List[Tuple[str, str, Optional[str]]], basetime: Optional[datetime] = BASETIME) -> List[Condition]:
    return [Condition(lastTransitionTime=basetime, type=x[0], status=x[1], reason=x[2] or "") for x in type_status_reason_trios]


def condition(type="type", status="True", severity=ConditionSeverity.NONE, reason="reason", message="message", lastTransitionTime=None) -> Condition:
    return Condition(type=type, status=status, severity=severity, reason=reason, message=message, lastTransitionTime=lastTransitionTime)


def machine(conditions: Optional[List[Condition]] = None) -> Machine:
    status = MachineStatus(conditions=conditions) if conditions is not None else None
    return Machine(metadata=ObjectMeta(name="machine-0", namespace="openshift-machine-api"), status=status)


def machine_health_check(conditions: Optional[List[Condition]] = None) -> MachineHealthCheck:
    status = MachineHealthCheckStatus(conditions=conditions) if conditions is not None else None
    return MachineHealthCheck(metadata=ObjectMeta(name="mhc-0", namespace="openshift-machine-api"), status=status)


INITIAL = build(
    [
        ("InfrastructureReady", "False", "WaitingForInfrastructure"),
        ("Ready", "Unknown", None),
    ]
)
READY = build(
    [
        ("InfrastructureReady", "True", None),
        ("Ready", "True", None),
    ]
)

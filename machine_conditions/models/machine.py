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

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from machine_conditions.models.condition import Condition


class ObjectMeta(BaseModel):
    name: str
    namespace: Optional[str] = None
    labels: Optional[Dict[str, str]] = None


class MachineSpec(BaseModel):
    providerID: Optional[str] = Field(None, description="The identifier of the backing instance at the infrastructure provider.")
    providerSpec: Optional[Dict[str, str]] = Field(None, description="Provider-specific configuration for the machine.")


class MachineStatus(BaseModel):
    nodeRef: Optional[str] = Field(None, description="The name of the node backed by this machine.")
    phase: Optional[str] = Field(None, description="The lifecycle phase of the machine.")
    conditions: List[Condition] = Field(default_factory=list, description="List of conditions for the machine.")


class Machine(BaseModel):
    metadata: ObjectMeta
    spec: MachineSpec = Field(default_factory=MachineSpec)
    status: Optional[MachineStatus] = None


class UnhealthyCondition(BaseModel):
    type: str = Field(..., description="The node condition type to watch.")
    status: str = Field(..., description="The node condition status considered unhealthy.")
    timeout: str = Field(..., description="How long the condition must hold before the node is considered unhealthy.")


class MachineHealthCheckSpec(BaseModel):
    selector: Optional[Dict[str, str]] = Field(None, description="Label selector for the machines to check.")
    unhealthyConditions: List[UnhealthyCondition] = Field(default_factory=list)
    maxUnhealthy: Optional[str] = Field(None, description="Remediation is stopped when more machines than this are unhealthy.")


class MachineHealthCheckStatus(BaseModel):
    expectedMachines: Optional[int] = Field(None, description="Number of machines targeted by the health check.")
    currentHealthy: Optional[int] = Field(None, description="Number of targeted machines that are healthy.")
    remediationsAllowed: Optional[int] = Field(None, description="Number of further remediations allowed.")
    conditions: List[Condition] = Field(default_factory=list, description="List of conditions for the health check.")


class MachineHealthCheck(BaseModel):
    metadata: ObjectMeta
    spec: MachineHealthCheckSpec = Field(default_factory=MachineHealthCheckSpec)
    status: Optional[MachineHealthCheckStatus] = None

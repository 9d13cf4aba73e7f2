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
from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from machine_conditions.models.condition import Conditions
from machine_conditions.models.machine import (
    Machine,
    MachineHealthCheck,
    MachineHealthCheckStatus,
    MachineStatus,
)

logger = logging.getLogger(__name__)


class Getter(ABC):

    @abstractmethod
    def get_conditions(self) -> Conditions: ...


class Setter(Getter):

    @abstractmethod
    def set_conditions(self, conditions: Conditions) -> None: ...


class MachineWrapper(Setter):

    def __init__(self, machine: Machine) -> None:
        self.machine = machine

    def get_conditions(self) -> Conditions:
        if not self.machine.status:
            return []
        return self.machine.status.conditions

    def set_conditions(self, conditions: Conditions) -> None:
        if not self.machine.status:
            self.machine.status = MachineStatus()
        self.machine.status.conditions = conditions


class MachineHealthCheckWrapper(Setter):

    def __init__(self, mhc: MachineHealthCheck) -> None:
        self.mhc = mhc

    def get_conditions(self) -> Conditions:
        if not self.mhc.status:
            return []
        return self.mhc.status.conditions

    def set_conditions(self, conditions: Conditions) -> None:
        if not self.mhc.status:
            self.mhc.status = MachineHealthCheckStatus()
        self.mhc.status.conditions = conditions


# Resource kinds that can carry conditions. Add new kinds here.
WRAPPERS: Dict[type, Type[Setter]] = {
    Machine: MachineWrapper,
    MachineHealthCheck: MachineHealthCheckWrapper,
}


class UnsupportedTypeError(TypeError):

    def __init__(self, obj_type: type, role: str = "setter"):
        self.obj_type = obj_type
        self.role = role
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"type {self.obj_type.__name__} is not supported as conditions {self.role}"


def get_setter_object(obj: Any) -> Setter:
    if isinstance(obj, Setter):
        return obj
    wrapper = WRAPPERS.get(type(obj))
    if wrapper is None:
        err = UnsupportedTypeError(type(obj), "setter")
        logger.error(str(err))
        raise err
    return wrapper(obj)


def get_getter_object(obj: Any) -> Getter:
    if isinstance(obj, Getter):
        return obj
    wrapper = WRAPPERS.get(type(obj))
    if wrapper is None:
        err = UnsupportedTypeError(type(obj), "getter")
        logger.error(str(err))
        raise err
    return wrapper(obj)

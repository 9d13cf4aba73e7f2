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
from enum import Enum
from typing import List, Optional

import pandas as pd
from pandas import DataFrame
from pydantic import BaseModel, Field


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionSeverity(str, Enum):
    NONE = ""
    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


class Condition(BaseModel):
    type: str = Field(..., description="The type of condition (e.g., 'Ready', 'MachineOwnerRemediated'). Unique within a list.")
    status: ConditionStatus = Field(..., description='The status of the condition: "True", "False", or "Unknown".')
    severity: ConditionSeverity = Field(
        default=ConditionSeverity.NONE, description="How serious a False status is. Only meaningful when status is False."
    )
    reason: str = Field(default="", description="A brief machine-readable explanation for the condition's status.")
    message: str = Field(default="", description="A human-readable message indicating details about the condition.")
    lastTransitionTime: Optional[datetime] = Field(
        default=None, description="The last time the condition transitioned from one state to another. None if not stamped yet."
    )

    class Column:
        type = "type"
        status = "status"
        severity = "severity"
        reason = "reason"
        message = "message"
        lastTransitionTime = "lastTransitionTime"

    @classmethod
    def to_dataframe(cls, conditions: List["Condition"]) -> DataFrame:
        if len(conditions) > 0:
            df = DataFrame([x.model_dump(mode="json") for x in conditions])
            df[cls.Column.lastTransitionTime] = pd.to_datetime(df[cls.Column.lastTransitionTime], utc=True)
            return df
        return DataFrame(
            {
                cls.Column.type: pd.Series(dtype="str"),
                cls.Column.status: pd.Series(dtype="str"),
                cls.Column.severity: pd.Series(dtype="str"),
                cls.Column.reason: pd.Series(dtype="str"),
                cls.Column.message: pd.Series(dtype="str"),
                cls.Column.lastTransitionTime: pd.Series(dtype="datetime64[ns, UTC]"),
            }
        )


Conditions = List[Condition]

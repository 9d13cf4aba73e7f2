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

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConditionsConfig(BaseSettings):
    project_log_level: Optional[str] = Field("", description="Log level of the machine_conditions logger. Default is INFO.")
    root_log_level: Optional[str] = Field("", description="Log level of the root logger set by log.init. Default is INFO.")
    event_log_level: Optional[str] = Field("debug", description="Log level used by the default observer for condition events.")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="MACHINE_CONDITIONS_", extra="ignore")


@lru_cache(maxsize=1)
def get_config() -> ConditionsConfig:
    return ConditionsConfig()

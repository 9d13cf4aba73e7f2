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

import pytest
from pydantic import ValidationError

from machine_conditions.common import log
from machine_conditions.conditions.compare import has_same_state
from machine_conditions.config import get_config
from machine_conditions.models.condition import Condition, ConditionStatus
from tests import condition_fixtures


def test_condition_validation():
    c = Condition(type="Ready", status="Unknown")
    assert c.status == ConditionStatus.UNKNOWN
    assert c.lastTransitionTime is None
    with pytest.raises(ValidationError):
        Condition(type="Ready", status="Maybe")
    with pytest.raises(ValidationError):
        Condition(type="Ready", status="True", severity="Fatal")


def test_condition_round_trip_keeps_state():
    c = condition_fixtures.READY[0]
    restored = Condition.model_validate(c.model_dump(mode="json"))
    assert has_same_state(restored, c)
    assert restored.lastTransitionTime == c.lastTransitionTime


def test_to_dataframe():
    df = Condition.to_dataframe(condition_fixtures.INITIAL)
    assert list(df.columns) == ["type", "status", "severity", "reason", "message", "lastTransitionTime"]
    assert list(df[Condition.Column.status]) == ["False", "Unknown"]
    assert df[Condition.Column.lastTransitionTime].iloc[0] == condition_fixtures.BASETIME
    not_ready = df[df[Condition.Column.status] != "True"]
    assert len(not_ready) == 2


def test_to_dataframe_empty():
    df = Condition.to_dataframe([])
    assert df.empty
    assert Condition.Column.lastTransitionTime in df.columns


def test_to_log_level():
    assert log.to_log_level("debug") == logging.DEBUG
    assert log.to_log_level("WARN") == logging.WARNING
    assert log.to_log_level("") == logging.INFO
    assert log.to_log_level(None) == logging.INFO
    assert log.to_log_level(logging.ERROR) == logging.ERROR
    assert log.to_log_level(" Fatal ") == logging.FATAL
    assert log.to_log_level("none") == logging.NOTSET
    assert log.to_log_level("notset") == logging.NOTSET
    assert log.to_log_level("verbose") == logging.INFO


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("MACHINE_CONDITIONS_PROJECT_LOG_LEVEL", "warning")
    get_config.cache_clear()
    try:
        assert get_config().project_log_level == "warning"
        log.init()
        assert logging.getLogger("machine_conditions").level == logging.WARNING
    finally:
        get_config.cache_clear()
        logging.getLogger("machine_conditions").setLevel(logging.NOTSET)

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

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional, Union


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """Clock whose time only moves when told to. Meant for tests."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.current = start if start else datetime(year=2024, month=10, day=1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    def set(self, t: datetime) -> None:
        self.current = t

    def step(self, seconds: Union[int, float] = 1) -> datetime:
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


DEFAULT_CLOCK = SystemClock()


def normalize(t: datetime) -> datetime:
    """Convert to UTC and drop sub-second precision.

    Naive values are taken to be UTC already.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    else:
        t = t.astimezone(timezone.utc)
    return t.replace(microsecond=0)


def get_timestamp(clock: Optional[Clock] = None) -> datetime:
    clock = clock if clock else DEFAULT_CLOCK
    return normalize(clock.now())

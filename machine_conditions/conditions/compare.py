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

from typing import Iterable, List

from machine_conditions.models.condition import Condition


def lexicographic_less(i: Condition, j: Condition) -> bool:
    """Order of conditions designed for the convenience of the consumer, e.g. oc/kubectl output."""
    return i.type < j.type


def sort_conditions(conditions: Iterable[Condition]) -> List[Condition]:
    return sorted(conditions, key=lambda x: x.type)


def has_same_state(i: Condition, j: Condition) -> bool:
    """Return True if both conditions have the same state.

    State is the union of type, status, reason, severity and message.
    lastTransitionTime is not part of it.
    """
    return i.type == j.type and i.status == j.status and i.reason == j.reason and i.severity == j.severity and i.message == j.message

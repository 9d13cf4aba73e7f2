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

from typing import Any, List

from machine_conditions.conditions.compare import has_same_state
from machine_conditions.models.condition import Condition


def _describe(x: Any) -> str:
    if isinstance(x, Condition):
        return repr(x.model_dump(exclude={"lastTransitionTime"}, mode="json"))
    if isinstance(x, list):
        return "[" + ", ".join(_describe(c) for c in x) + "]"
    return repr(x)


class ConditionMatcher:
    """Matches a condition with the same state as the expected one, ignoring lastTransitionTime."""

    def __init__(self, expected: Condition) -> None:
        self.expected = expected

    def match(self, actual: Any) -> bool:
        if not isinstance(actual, Condition):
            raise TypeError(f"actual should be of type Condition, got {type(actual).__name__}")
        return has_same_state(actual, self.expected)

    def __call__(self, actual: Any) -> bool:
        return self.match(actual)

    def failure_message(self, actual: Any) -> str:
        return f"Expected\n\t{_describe(actual)}\nto match\n\t{_describe(self.expected)}"

    def negated_failure_message(self, actual: Any) -> str:
        return f"Expected\n\t{_describe(actual)}\nnot to match\n\t{_describe(self.expected)}"


class ConditionsMatcher:
    """Matches a condition list element by element, in order."""

    def __init__(self, expected: List[Condition]) -> None:
        self.expected = expected

    def match(self, actual: Any) -> bool:
        if not isinstance(actual, list) or not all(isinstance(x, Condition) for x in actual):
            raise TypeError(f"actual should be a list of Condition, got {type(actual).__name__}")
        if len(actual) != len(self.expected):
            return False
        for i, condition in enumerate(actual):
            if not ConditionMatcher(self.expected[i]).match(condition):
                return False
        return True

    def __call__(self, actual: Any) -> bool:
        return self.match(actual)

    def failure_message(self, actual: Any) -> str:
        return f"Expected\n\t{_describe(actual)}\nto match\n\t{_describe(self.expected)}"

    def negated_failure_message(self, actual: Any) -> str:
        return f"Expected\n\t{_describe(actual)}\nnot to match\n\t{_describe(self.expected)}"


def match_condition(expected: Condition) -> ConditionMatcher:
    return ConditionMatcher(expected)


def match_conditions(expected: List[Condition]) -> ConditionsMatcher:
    return ConditionsMatcher(expected)


def assert_condition(actual: Condition, expected: Condition) -> None:
    matcher = match_condition(expected)
    if not matcher.match(actual):
        raise AssertionError(matcher.failure_message(actual))


def assert_conditions(actual: List[Condition], expected: List[Condition]) -> None:
    matcher = match_conditions(expected)
    if not matcher.match(actual):
        raise AssertionError(matcher.failure_message(actual))

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from typemeta import AccessMode, ReflectorConfig
from typemeta.classifier import classify, group_candidates
from typemeta.members import get_class_members


class Sample:
    def getName(self) -> str:
        return "name"

    def isActive(self) -> bool:
        return True

    def setName(self, value: str) -> None:
        pass

    def getWithArg(self, x: int) -> int:
        return x

    def setNothing(self) -> None:
        pass

    def get(self) -> int:
        return 0

    def compute(self) -> int:
        return 0

    def getClass(self) -> type:
        return type(self)

    def get_(self) -> int:
        return 0

    def get_serial_version_uid(self) -> int:
        return 1


class Flags:
    def isEnabled(self) -> bool:
        return True

    def getEnabled(self) -> bool:
        return True


class Top:
    def getValue(self) -> object:
        return None


class Bottom(Top):
    def getValue(self) -> int:
        return 0


def _members(klass):
    return {member.name: member for member in get_class_members(klass)}


@pytest.mark.classifier
class TestClassify:
    config = ReflectorConfig.default()

    def test_getter(self):
        candidate = classify(_members(Sample)["getName"], Sample, self.config)

        assert candidate is not None
        assert candidate.property_name == "name"
        assert candidate.mode is AccessMode.GET
        assert candidate.value_type is str
        assert candidate.declaring_type is Sample

    def test_boolean_getter(self):
        candidate = classify(_members(Sample)["isActive"], Sample, self.config)

        assert candidate is not None
        assert candidate.property_name == "active"
        assert candidate.value_type is bool

    def test_setter(self):
        candidate = classify(_members(Sample)["setName"], Sample, self.config)

        assert candidate is not None
        assert candidate.property_name == "name"
        assert candidate.mode is AccessMode.SET
        assert candidate.value_type is str

    @pytest.mark.parametrize("name", ["getWithArg", "setNothing", "get", "compute", "get_"])
    def test_ignored(self, name):
        assert classify(_members(Sample)[name], Sample, self.config) is None


@pytest.mark.classifier
class TestGroupCandidates:
    config = ReflectorConfig.default()

    def test_groups_by_property(self):
        getters = group_candidates(get_class_members(Sample), AccessMode.GET, Sample, self.config)
        setters = group_candidates(get_class_members(Sample), AccessMode.SET, Sample, self.config)

        assert set(getters) == {"name", "active"}
        assert set(setters) == {"name"}

    def test_reserved_names_dropped(self):
        getters = group_candidates(get_class_members(Sample), AccessMode.GET, Sample, self.config)

        assert "class" not in getters
        assert "serial_version_uid" not in getters

    def test_canonical_order(self):
        getters = group_candidates(get_class_members(Flags), AccessMode.GET, Flags, self.config)

        assert [candidate.name for candidate in getters["enabled"]] == ["getEnabled", "isEnabled"]

    def test_declaration_order(self):
        config = ReflectorConfig(canonical_order=False)
        getters = group_candidates(get_class_members(Flags), AccessMode.GET, Flags, config)

        assert [candidate.name for candidate in getters["enabled"]] == ["isEnabled", "getEnabled"]

    def test_most_derived_first(self):
        getters = group_candidates(get_class_members(Bottom), AccessMode.GET, Bottom, self.config)

        assert [candidate.declaring_type for candidate in getters["value"]] == [Bottom, Top]
        assert [candidate.value_type for candidate in getters["value"]] == [int, object]


class Private:
    def _getSecret(self) -> str:
        return "secret"

    def _Private__getMangled(self) -> str:
        return "mangled"

    def __isHidden(self) -> bool:
        return True


class Delegating:
    def getValue(self) -> int:
        return self._getValue()

    def _getValue(self) -> int:
        return 0

    def _getHidden(self) -> str:
        return "hidden"


@pytest.mark.classifier
class TestNonPublicAccessors:
    config = ReflectorConfig.default()

    def test_internal_marker_is_ignored(self):
        candidate = classify(_members(Private)["_getSecret"], Private, self.config)

        assert candidate is not None
        assert candidate.property_name == "secret"
        assert candidate.name == "_getSecret"

    def test_mangled_names_are_not_accessors(self):
        members = _members(Private)

        assert classify(members["_Private__getMangled"], Private, self.config) is None
        assert classify(members["_Private__isHidden"], Private, self.config) is None

    def test_public_twin_wins(self):
        getters = group_candidates(get_class_members(Delegating), AccessMode.GET, Delegating, self.config)

        assert [candidate.name for candidate in getters["value"]] == ["getValue"]
        assert [candidate.name for candidate in getters["hidden"]] == ["_getHidden"]

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from typemeta import ReflectionError, property_namer


@pytest.mark.naming
class TestMethodToProperty:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("getName", "name"),
            ("getUserName", "userName"),
            ("isActive", "active"),
            ("setName", "name"),
            ("getURL", "URL"),
            ("getX", "x"),
            ("getuser", "user"),
            ("get_user_name", "user_name"),
            ("is_active", "active"),
            ("set_value", "value"),
        ],
    )
    def test_strips_prefix(self, name, expected):
        assert property_namer.method_to_property(name) == expected

    def test_lone_separator_yields_empty_name(self):
        assert property_namer.method_to_property("get_") == ""

    def test_rejects_unknown_prefix(self):
        with pytest.raises(ReflectionError, match="fetchName"):
            property_namer.method_to_property("fetchName")

    def test_custom_prefixes(self):
        assert property_namer.method_to_property("fetchName", prefixes=("fetch",)) == "name"

        with pytest.raises(ReflectionError):
            property_namer.method_to_property("getName", prefixes=("fetch",))


@pytest.mark.naming
class TestAccessorPredicates:
    @pytest.mark.parametrize(
        ("name", "getter", "setter"),
        [
            ("getX", True, False),
            ("isX", True, False),
            ("setX", False, True),
            ("get", False, False),
            ("is", False, False),
            ("set", False, False),
            ("name", False, False),
            ("get_x", True, False),
        ],
    )
    def test_predicates(self, name, getter, setter):
        assert property_namer.is_getter(name) is getter
        assert property_namer.is_setter(name) is setter
        assert property_namer.is_property(name) is (getter or setter)

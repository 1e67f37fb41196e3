# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Unit tests for LoggableMixin."""

import logging

import pytest

from contentmodel.util.mixins import LoggableMixin


class L(LoggableMixin):
    pass


class LN(LoggableMixin):
    def __init__(self, instance_name: str | None = None, instance_parent: object | None = None) -> None:
        self.instance_name = instance_name
        self.instance_parent = instance_parent


@pytest.mark.mixins
@pytest.mark.loggable_mixin
class TestLoggableMixins:
    def test_simple(self):
        a = L()
        assert a.log is not None
        assert a.log.parent == logging.root
        assert a.log.name == "L"

        b = LN()
        assert b.log.name == "LN"

        c = LN(instance_name="named")
        assert c.log.name == "named"

    def test_parent(self):
        parent = LN(instance_name="parent")
        child = LN(instance_name="child", instance_parent=parent)
        assert child.log.parent is parent.log
        assert child.log.name == "parent.child"

        # Parents that cannot log are ignored
        orphan = LN(instance_name="orphan", instance_parent=object())
        assert orphan.log.parent == logging.root

    def test_class(self):
        assert L.log is not None
        assert L.log.parent == logging.root
        assert L.log.name == "T(L)"
        assert LN.log.name == "T(LN)"

    def test_instance_does_not_inherit_class_logger(self):
        assert L.log.name == "T(L)"
        assert L().log.name == "L"

    def test_reset_log_cache(self):
        c = LN(instance_name="before")
        assert c.log.name == "before"

        c.instance_name = "after"
        assert c.log.name == "before"
        c._reset_log_cache()  # noqa: SLF001
        assert c.log.name == "after"

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from contentmodel.models import ContentType, DirtyTracker, DirtyTrackingProtocol, PropertyGroup, PropertyType, PropertyTypeField


class Owner:
    pass


@pytest.mark.tracking
class TestDirtyTracker:
    def test_starts_clean(self):
        tracker = DirtyTracker()
        assert not tracker.is_dirty()
        assert tracker.dirty_properties == frozenset()

    def test_set_dirty_accepts_enum_and_str(self):
        tracker = DirtyTracker()
        tracker.set_dirty(PropertyTypeField.ALIAS)
        tracker.set_dirty("name")

        assert tracker.dirty_properties == {"alias", "name"}
        assert tracker.is_property_dirty("alias")
        assert tracker.is_property_dirty(PropertyTypeField.NAME)
        assert not tracker.is_property_dirty(PropertyTypeField.MANDATORY)

    def test_set_dirty_is_idempotent(self):
        tracker = DirtyTracker()
        tracker.set_dirty("name")
        tracker.set_dirty("name")
        assert tracker.dirty_properties == {"name"}

    def test_reset(self):
        tracker = DirtyTracker()
        tracker.set_dirty("name")
        tracker.reset()
        assert not tracker.is_dirty()
        tracker.reset()
        assert not tracker.is_dirty()

    def test_observers_receive_every_change(self):
        owner = Owner()
        tracker = DirtyTracker(owner)
        seen = []

        def observer(source, field):
            seen.append((source, field))

        tracker.subscribe(observer)
        tracker.set_dirty("name")
        tracker.set_dirty("name")
        tracker.set_dirty(PropertyTypeField.ALIAS)

        assert seen == [(owner, "name"), (owner, "name"), (owner, "alias")]
        assert all(type(field) is str for _, field in seen)

    def test_unsubscribe(self):
        tracker = DirtyTracker()
        seen = []
        observer = seen.append

        tracker.subscribe(lambda owner, field: observer(field))
        tracker.subscribe(print)
        assert tracker.unsubscribe(print)
        assert not tracker.unsubscribe(print)
        assert len(tracker.observers) == 1

        tracker.set_dirty("name")
        assert seen == ["name"]

    def test_owner_is_weak(self):
        owner = Owner()
        tracker = DirtyTracker(owner)
        assert tracker.owner is owner

        del owner
        assert tracker.owner is None

    def test_log_changes(self, caplog):
        tracker = DirtyTracker(log_changes=True)
        with caplog.at_level(logging.DEBUG, logger=tracker.log.name):
            tracker.set_dirty("name")
        assert "'name' changed" in caplog.text

    def test_no_logging_by_default(self, caplog):
        tracker = DirtyTracker()
        with caplog.at_level(logging.DEBUG, logger=tracker.log.name):
            tracker.set_dirty("name")
        assert "changed" not in caplog.text

    def test_entities_implement_protocol(self):
        for entity in (PropertyType(alias="title"), PropertyGroup(name="Content"), ContentType(parent_id=-1, alias="page")):
            assert isinstance(entity, DirtyTrackingProtocol)
        assert not isinstance(DirtyTracker(), DirtyTrackingProtocol)

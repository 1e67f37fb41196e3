# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from contentmodel.models import ContentType, PropertyType, Template


@pytest.mark.entity
@pytest.mark.clone
class TestDeepClone:
    def test_property_type(self):
        property_type = PropertyType(alias="title", name="Title", mandatory=True, id=4)
        property_type.adding_entity()
        property_type.help_text = "Heading"

        clone = property_type.deep_clone()
        assert clone is not property_type
        assert clone.alias == "title"
        assert clone.mandatory
        assert clone.help_text == "Heading"
        assert clone.id is None
        assert clone.version is None
        assert not clone.persisted
        assert not clone.is_dirty()

    def test_content_type_graph(self, content_type: ContentType):
        content_type.assign_identity(1050)
        content_type.adding_entity()

        clone = content_type.deep_clone()
        assert clone.alias == content_type.alias
        assert clone.id is None
        assert clone.key is None
        assert not clone.is_dirty()

        assert [group.name for group in clone.property_groups] == ["Content", "SEO"]
        for original, copied in zip(content_type.property_types, clone.property_types, strict=True):
            assert copied is not original
            assert copied.alias == original.alias
            assert copied.instance_parent.instance_parent is clone

    def test_clone_is_independent(self, content_type: ContentType):
        clone = content_type.deep_clone()
        clone.get_property_type("title").name = "Heading"

        assert clone.is_dirty()
        assert not content_type.is_dirty()
        assert content_type.get_property_type("title").name == "Title"

    def test_clone_can_join_another_group(self, content_type: ContentType):
        title = content_type.get_property_type("title")
        other = ContentType(parent_id=-1, alias="article")
        assert other.add_property_type(title.deep_clone(), "Content")
        assert other.get_property_type("title").instance_parent is other.property_groups.get("Content")

    def test_templates_and_composition_are_shared(self, content_type: ContentType):
        template = Template(id=5, alias="home")
        base = ContentType(parent_id=-1, alias="base")
        content_type.set_default_template(template)
        content_type.add_content_type(base)

        clone = content_type.deep_clone()
        assert clone.allowed_templates[0] is template
        assert clone.default_template is template
        assert clone.content_type_composition[0] is base

    def test_observers_are_not_copied(self, content_type: ContentType):
        seen = []
        content_type.subscribe(lambda entity, field: seen.append(field))

        clone = content_type.deep_clone()
        clone.name = "Copy"
        assert seen == []

# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from contentmodel.models import ContentType, ContentTypeBaseField, PropertyType


@pytest.fixture
def seo() -> ContentType:
    seo = ContentType(parent_id=-1, alias="seo", id=1100)
    seo.add_property_type(PropertyType(alias="metaDescription"), "SEO")
    return seo


@pytest.fixture
def navigation() -> ContentType:
    navigation = ContentType(parent_id=-1, alias="navigation", id=1101)
    navigation.add_property_type(PropertyType(alias="hideFromMenu"), "Navigation")
    return navigation


@pytest.mark.entity
@pytest.mark.composition
class TestComposition:
    def test_add_content_type(self, content_type: ContentType, seo: ContentType):
        assert content_type.add_content_type(seo)
        assert content_type.content_type_composition == (seo,)
        assert content_type.is_property_dirty(ContentTypeBaseField.CONTENT_TYPE_COMPOSITION)
        assert content_type.content_type_composition_exists("seo")
        assert content_type.composition_aliases() == ("seo",)
        assert content_type.composition_ids() == (1100,)

    def test_composed_types_are_not_owned(self, content_type: ContentType, seo: ContentType):
        content_type.add_content_type(seo)
        assert seo.instance_parent is None
        assert seo.property_groups[0].instance_parent is seo

    def test_rejections(self, content_type: ContentType, seo: ContentType):
        assert not content_type.add_content_type(content_type)
        assert not content_type.add_content_type(ContentType(parent_id=-1, alias="page"))

        assert content_type.add_content_type(seo)
        assert not content_type.add_content_type(seo)
        assert not content_type.add_content_type(ContentType(parent_id=-1, alias="seo"))

    def test_rejects_cycles(self, content_type: ContentType, seo: ContentType, navigation: ContentType):
        assert content_type.add_content_type(seo)
        assert seo.add_content_type(navigation)
        assert not navigation.add_content_type(content_type)
        assert not seo.add_content_type(content_type)

    def test_transitive(self, content_type: ContentType, seo: ContentType, navigation: ContentType):
        seo.add_content_type(navigation)
        content_type.add_content_type(seo)

        assert content_type.content_type_composition_exists("navigation")
        assert content_type.composition_aliases() == ("seo", "navigation")
        assert content_type.composition_ids() == (1100, 1101)
        assert [group.name for group in content_type.composition_property_groups()] == ["Content", "SEO", "SEO", "Navigation"]
        assert [property_type.alias for property_type in content_type.composition_property_types()] == [
            "title",
            "body",
            "seoTitle",
            "metaDescription",
            "hideFromMenu",
        ]

    def test_shared_composition_is_visited_once(self, content_type: ContentType, seo: ContentType, navigation: ContentType):
        seo.add_content_type(navigation)
        # Assigned directly, as add_content_type rejects an alias already reachable through seo
        content_type.content_type_composition = (seo, navigation)

        assert content_type.composition_aliases().count("navigation") == 1

    def test_property_type_exists_across_composition(self, content_type: ContentType, seo: ContentType):
        assert not content_type.property_type_exists("metaDescription")
        content_type.add_content_type(seo)
        assert content_type.property_type_exists("metaDescription")
        assert not content_type.add_property_type(PropertyType(alias="metaDescription"))

    def test_composed_changes_do_not_dirty_the_composer(self, content_type: ContentType, seo: ContentType):
        content_type.add_content_type(seo)
        content_type.reset_dirty_properties()

        seo.get_property_type("metaDescription").mandatory = True
        assert seo.is_dirty()
        assert not content_type.is_dirty()

    def test_remove_content_type(self, content_type: ContentType, seo: ContentType):
        content_type.add_content_type(seo)
        content_type.reset_dirty_properties()

        assert content_type.remove_content_type("seo")
        assert not content_type.remove_content_type("seo")
        assert content_type.content_type_composition == ()
        assert content_type.is_property_dirty(ContentTypeBaseField.CONTENT_TYPE_COMPOSITION)

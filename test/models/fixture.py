# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from contentmodel.models import ContentType, PropertyType, Template
from contentmodel.persistence import ContentTypeRepository, IncrementingIdFactory


@pytest.fixture
def content_type() -> ContentType:
    """A clean, transient ``page`` content type with two groups and three property types."""
    content_type = ContentType(parent_id=-1, alias="page", name="Page")
    content_type.add_property_type(PropertyType(alias="title", name="Title"), "Content")
    content_type.add_property_type(PropertyType(alias="body", name="Body"), "Content")
    content_type.add_property_type(PropertyType(alias="seoTitle", name="SEO title"), "SEO")
    content_type.reset_dirty_properties()
    return content_type


@pytest.fixture
def templates() -> tuple[Template, Template]:
    return Template(id=5, alias="home", name="Home"), Template(id=7, alias="article", name="Article")


@pytest.fixture
def repository() -> ContentTypeRepository:
    return ContentTypeRepository(IncrementingIdFactory())

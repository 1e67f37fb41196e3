# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from pydantic import Field

from ..util.config import BaseConfigModel, ConfigBase


class TrackingConfig(BaseConfigModel):
    log_changes: bool = Field(default=False, description="Log every change notification at DEBUG level")


class RepositoryConfig(BaseConfigModel):
    first_id: int = Field(default=1, ge=1, description="First numeric identifier handed out by the in-memory repository")


# MARK: Main Config
class Config(ConfigBase):
    tracking: TrackingConfig = Field(default_factory=TrackingConfig, description="Change tracking configuration")
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig, description="In-memory repository configuration")

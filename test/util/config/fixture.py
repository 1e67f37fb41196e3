# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Any

import pytest

from contentmodel.config import Config


class ConfigFixture:
    def __init__(self):
        from contentmodel.config import CFG

        self.config = CFG
        self.config.reset()

    def load(self, data: dict[str, Any] | str) -> Config:
        """Reset and load the configuration with the provided data."""
        self.config.reset()
        return self.config.load(data)

    def cleanup(self):
        self.config.reset()

    def __getattr__(self, name) -> Any:
        return getattr(self.config, name)


@pytest.fixture
def config():
    fixture = ConfigFixture()
    yield fixture
    fixture.cleanup()

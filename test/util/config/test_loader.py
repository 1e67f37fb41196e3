# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from typing import TYPE_CHECKING

import pytest

from contentmodel.config import CFG, Config
from contentmodel.util.config import ConfigLoader


if TYPE_CHECKING:
    from .fixture import ConfigFixture


@pytest.mark.config
class TestConfigLoader:
    def test_config_loads_yaml(self, config: ConfigFixture):
        config.load("""
            logging:
                levels:
                    tty: INFO
            tracking:
                log_changes: true
            repository:
                first_id: 1000
        """)

        assert hasattr(config, "logging")
        assert config.logging.levels.tty == logging.INFO
        assert config.tracking.log_changes is True
        assert config.repository.first_id == 1000

    def test_config_defaults(self, config: ConfigFixture):
        assert not CFG.loaded
        assert config.tracking.log_changes is False
        assert config.repository.first_id == 1
        assert CFG.loaded

    def test_config_empty(self, config: ConfigFixture):
        loaded = config.load("")
        assert isinstance(loaded, Config)
        assert loaded.repository.first_id == 1
        assert loaded.logging.levels.file == "OFF"

    def test_config_invalid_yaml(self, config: ConfigFixture):
        with pytest.raises(ValueError, match=r"Extra inputs are not permitted"):
            config.load("""
                any: text
            """)

    def test_config_not_a_mapping(self, config: ConfigFixture):
        with pytest.raises(TypeError, match=r"Expected a dictionary"):
            config.load("""
                - a
                - b
            """)

    def test_config_invalid_log_level(self, config: ConfigFixture):
        with pytest.raises(ValueError, match=r"Unknown logging level string: banana"):
            config.load("""
                logging:
                  levels:
                    tty: banana
            """)

    def test_config_invalid_first_id(self, config: ConfigFixture):
        with pytest.raises(ValueError, match=r"greater than or equal to 1"):
            config.load({"repository": {"first_id": 0}})

    def test_config_is_frozen(self, config: ConfigFixture):
        loaded = config.load({})
        with pytest.raises(ValueError, match=r"frozen"):
            loaded.repository.first_id = 5

    def test_loader_loads_once(self):
        loader = ConfigLoader(Config)
        loader.load({})
        with pytest.raises(RuntimeError):
            loader.load({})

    def test_config_load_from_file(self, tmp_path, config: ConfigFixture):
        config_path = tmp_path / "test.yaml"
        with config_path.open("w") as f:
            f.write("""
                logging:
                    levels:
                        tty: INFO
            """)

        config.open(config_path)

        assert config.logging.levels.tty == logging.INFO
        assert config.logging.levels.tty == "INFO"

    def test_config_include(self, tmp_path, config: ConfigFixture):
        (tmp_path / "repository.yaml").write_text("first_id: 42\n")
        config_path = tmp_path / "test.yaml"
        config_path.write_text("repository: !include repository.yaml\n")

        config.open(config_path)
        assert config.repository.first_id == 42

    def test_config_missing_file(self, tmp_path, config: ConfigFixture):
        with pytest.raises(FileNotFoundError):
            config.open(tmp_path / "missing.yaml")

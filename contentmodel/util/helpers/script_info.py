# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import os


_IS_UNIT_TEST = None

#: Name used for the log file
LIBRARY_NAME = "contentmodel"


def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running in a unit test environment, False otherwise.

    """
    global _IS_UNIT_TEST  # noqa: PLW0603

    if _IS_UNIT_TEST is None:
        _IS_UNIT_TEST = _is_unit_test()
    return _IS_UNIT_TEST


def _is_unit_test() -> bool:
    # Detect pytest
    if os.environ.get("PYTEST_VERSION", None) is not None:
        return True

    env = os.environ.get("UNIT_TEST", "").strip()
    if not env:
        return False

    return env.lower() not in ("false", "0", "no")


def enable_extra_sanity_checks() -> bool:
    return __debug__ and is_unit_test()


def get_script_name() -> str:
    return LIBRARY_NAME

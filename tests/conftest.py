# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0

"""Global test fixtures"""

from pathlib import Path

import pytest

from human_utils.utils.config import HUMAN_UTILS_CONFIG_ENV, HumanUtilsConfigSingleton


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Never pick up the developer's own ~/.human_utils/config.json."""
    monkeypatch.setenv(HUMAN_UTILS_CONFIG_ENV, str(tmp_path / "no-such-config.json"))
    HumanUtilsConfigSingleton.reset_instance()
    yield
    HumanUtilsConfigSingleton.reset_instance()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""
    root = tmp_path / "work"
    root.mkdir()
    monkeypatch.chdir(root)
    return root

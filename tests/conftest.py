"""Shared fixtures for chartnames tests.

Provides a chart directory on disk (Chart.yaml + values.yaml) and a
changelog file so CLI and loader tests can run against real files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

CHART_YAML = """\
apiVersion: v2
name: aptos-validator
version: 1.2+3
appVersion: 1.0
description: Validator chart
"""

VALUES_YAML = """\
nameOverride: ""
fullnameOverride: ""
serviceAccount:
  create: true
  name: ""
replicas: 2
"""

CHANGELOG_MD = """\
# Changelog

All notable changes to this project will be documented in this file.

## [1.1.0] - 2023-05-02
### Added
- New `--foo` flag
- Multi line entry
  continued here

### Fixed
- Crash on empty input

## [1.0.0] - 2023-01-01
### Added
- Initial release

[1.1.0]: https://example.com/compare/v1.0.0...v1.1.0
"""


@pytest.fixture
def chart_dir(tmp_path: Path) -> Path:
    chart = tmp_path / "aptos-validator"
    chart.mkdir()
    (chart / "Chart.yaml").write_text(CHART_YAML)
    (chart / "values.yaml").write_text(VALUES_YAML)
    return chart


@pytest.fixture
def changelog_file(tmp_path: Path) -> Path:
    path = tmp_path / "CHANGELOG.md"
    path.write_text(CHANGELOG_MD)
    return path

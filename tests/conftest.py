from __future__ import annotations

import json

import pytest
import yaml

from update_manager.models.project import Project


def project_dict(**overrides) -> dict:
    d = {
        "title": "Views",
        "link": "https://example.org/project/views",
        "project_type": "module",
        "existing_version": "1.0.0",
        "existing_major": 1,
        "status": "not-current",
        "recommended": "1.2.0",
        "releases": {
            "1.2.0": {
                "version": "1.2.0",
                "release_link": "https://example.org/views/releases/1.2.0",
                "download_link": "https://example.org/files/views-1.2.0.tar.gz",
            },
        },
    }
    d.update(overrides)
    return d


def make_project(name: str = "views", **overrides) -> Project:
    return Project.from_dict(name, project_dict(**overrides))


@pytest.fixture
def sample_snapshot() -> dict:
    return {
        "projects": {
            "drupal": project_dict(
                title="Core", project_type="core", status="not-secure",
                existing_version="10.1.0", existing_major=10, recommended="10.1.6",
                releases={"10.1.6": {"version": "10.1.6", "download_link": "https://example.org/core.tgz"}},
            ),
            "views": project_dict(),
            "token": project_dict(
                title="Token", status="not-secure", recommended="1.3.0",
                releases={"1.3.0": {"version": "1.3.0", "download_link": "https://example.org/token.tgz"}},
            ),
            "olivero": project_dict(
                title="Olivero", project_type="theme-disabled", status="not-supported",
                recommended="2.0.0",
                releases={"2.0.0": {"version": "2.0.0", "download_link": "https://example.org/olivero.tgz"}},
            ),
            "legacy": project_dict(
                title="Legacy", recommended="3.0.0",
                releases={"3.0.0": {
                    "version": "3.0.0",
                    "download_link": "https://example.org/legacy.tgz",
                    "core_compatible": False,
                    "core_compatibility_message": "Requires core 11.",
                }},
            ),
            "ctools": project_dict(title="Chaos tools", status="current"),
        }
    }


@pytest.fixture
def snapshot_file(tmp_path, sample_snapshot):
    path = tmp_path / "available.yaml"
    path.write_text(yaml.safe_dump(sample_snapshot, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"update.last_check": 1700000000}), encoding="utf-8")
    return path

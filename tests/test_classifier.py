import logging

from conftest import make_project

from update_manager.core.classifier import classify_projects, display_title
from update_manager.models import Bucket, Group
from update_manager.models.classification import MAJOR_UPDATE_WARNING


def test_current_projects_are_dropped():
    result = classify_projects({"views": make_project(status="current")})
    assert not result.has_updates
    assert result.downloads == {}


def test_project_without_recommendation_is_dropped():
    projects = {
        "a": make_project("a", recommended=None),
        "b": make_project("b", recommended="9.9.9"),
    }
    result = classify_projects(projects)
    assert result.entries == []


def test_major_update_is_recommended_with_warning():
    project = make_project(
        "a",
        existing_major=1,
        recommended="2.0",
        releases={"2.0": {"version": "2.0", "download_link": "https://example.org/a-2.0.tgz"}},
    )
    result = classify_projects({"a": project})

    entry = result.get("a")
    assert entry.bucket == Bucket.RECOMMENDED
    assert entry.group == Group.ENABLED
    assert entry.requires_checkbox
    assert entry.major_update
    assert entry.major_update_warning == MAJOR_UPDATE_WARNING
    assert result.downloads == {"a": "https://example.org/a-2.0.tgz"}


def test_minor_update_has_no_warning():
    entry = classify_projects({"views": make_project()}).get("views")
    assert not entry.major_update
    assert entry.major_update_warning is None


def test_core_always_needs_manual_update():
    core = make_project(
        "drupal",
        project_type="core",
        status="not-secure",
        releases={"1.2.0": {"version": "1.2.0", "core_compatible": False}},
    )
    result = classify_projects({"drupal": core})

    entry = result.get("drupal")
    assert entry.bucket == Bucket.MANUAL
    assert entry.group == Group.MANUAL
    assert not entry.requires_checkbox
    assert entry.title == "Views (Security update)"
    assert entry.weight == 0
    assert result.downloads == {}


def test_incompatible_release_with_message():
    project = make_project(releases={"1.2.0": {
        "version": "1.2.0",
        "core_compatible": False,
        "core_compatibility_message": "Requires 11.x",
    }})
    result = classify_projects({"views": project})

    entry = result.get("views")
    assert entry.bucket == Bucket.NOT_COMPATIBLE
    assert not entry.requires_checkbox
    assert entry.compatibility_message == "Requires 11.x"
    assert "views" not in result.downloads


def test_incompatible_release_without_message():
    project = make_project(releases={"1.2.0": {"version": "1.2.0", "core_compatible": False}})
    entry = classify_projects({"views": project}).get("views")
    assert entry.bucket == Bucket.NOT_COMPATIBLE
    assert entry.compatibility_message is None


def test_compatible_flag_true_keeps_checkbox():
    project = make_project(releases={"1.2.0": {"version": "1.2.0", "core_compatible": True}})
    entry = classify_projects({"views": project}).get("views")
    assert entry.requires_checkbox
    assert entry.compatibility_message is None


def test_security_and_unsupported_suffixes_and_weights():
    projects = {
        "a": make_project("a", title="A", status="not-secure"),
        "b": make_project("b", title="B", status="revoked"),
        "c": make_project("c", title="C", status="not-supported"),
        "d": make_project("d", title="D", status="unknown"),
    }
    result = classify_projects(projects)

    assert [(e.name, e.bucket, e.weight) for e in result.entries] == [
        ("a", Bucket.SECURITY, -2),
        ("b", Bucket.SECURITY, -2),
        ("c", Bucket.UNSUPPORTED, -1),
        ("d", Bucket.RECOMMENDED, 0),
    ]
    assert result.get("a").title == "A (Security update)"
    assert result.get("c").title == "C (Unsupported)"
    assert result.get("d").title == "D"


def test_numeric_status_codes():
    result = classify_projects({
        "a": make_project("a", status=1),
        "b": make_project("b", status=5),
        "c": make_project("c", status=-3),
    })
    assert [e.name for e in result.entries] == ["a", "c"]
    assert result.get("a").bucket == Bucket.SECURITY
    assert result.get("c").bucket == Bucket.RECOMMENDED


def test_unrecognized_status_is_dropped_and_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="update_manager.core.classifier"):
        result = classify_projects({"views": make_project(status=-4)})
    assert not result.has_updates
    assert "Unrecognized status -4 for views" in caplog.text


def test_disabled_projects_are_grouped_separately():
    result = classify_projects({
        "a": make_project("a", project_type="module-disabled"),
        "b": make_project("b", project_type="theme"),
        "c": make_project("c", project_type="theme-disabled"),
    })
    assert [e.name for e in result.group(Group.ENABLED)] == ["b"]
    assert [e.name for e in result.group(Group.DISABLED)] == ["a", "c"]
    assert set(result.downloads) == {"a", "b", "c"}


def test_unknown_project_type_row_is_dropped():
    result = classify_projects({"x": make_project("x", project_type="profile")})
    assert result.entries == []
    assert result.downloads == {}


def test_display_title_fallbacks():
    assert display_title("views", make_project(title="Views")) == "Views"
    assert display_title("views", make_project(title="", info={"name": "Views UI"})) == "Views UI"
    assert display_title("views", make_project(title="")) == "views"
    assert display_title("olivero", make_project(title="Olivero", project_type="theme")) == "Olivero (Theme)"


def test_link_only_kept_with_title():
    assert classify_projects({"views": make_project()}).get("views").link == "https://example.org/project/views"
    entry = classify_projects({"views": make_project(title="")}).get("views")
    assert entry.link == ""


def test_theme_suffix_precedes_status_suffix():
    entry = classify_projects({
        "olivero": make_project("olivero", title="Olivero", project_type="theme", status="not-secure"),
    }).get("olivero")
    assert entry.title == "Olivero (Theme) (Security update)"


def test_core_major_fills_in_missing_installed_major():
    project = make_project(existing_major=None, existing_version="", recommended="1.2.0")
    assert not classify_projects({"views": project}, core_major=1).get("views").major_update
    assert classify_projects({"views": project}, core_major=2).get("views").major_update


def test_core_prefixed_versions():
    project = make_project(
        existing_version="8.x-1.4",
        existing_major=None,
        recommended="8.x-1.5",
        releases={"8.x-1.5": {"version": "8.x-1.5"}},
    )
    assert not classify_projects({"views": project}).get("views").major_update


def test_buckets_are_exclusive_and_ordered(sample_snapshot):
    from update_manager.core.snapshot import projects_from_dict

    projects = projects_from_dict(sample_snapshot)
    result = classify_projects(projects)

    buckets = result.buckets
    assert list(buckets) == [Bucket.SECURITY, Bucket.UNSUPPORTED, Bucket.RECOMMENDED,
                             Bucket.MANUAL, Bucket.NOT_COMPATIBLE]
    names = [e.name for rows in buckets.values() for e in rows]
    assert len(names) == len(set(names))
    assert "ctools" not in names
    assert [e.name for e in buckets[Bucket.SECURITY]] == ["token"]
    assert [e.name for e in buckets[Bucket.MANUAL]] == ["drupal"]


def test_classification_is_repeatable(sample_snapshot):
    from update_manager.core.snapshot import projects_from_dict

    projects = projects_from_dict(sample_snapshot)
    first = classify_projects(projects)
    second = classify_projects(projects)
    assert first == second


def test_unknown_project_type_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="update_manager.core.classifier"):
        classify_projects({"x": make_project("x", project_type="profile")})
    assert "Unrecognized project type 'profile' for x" in caplog.text

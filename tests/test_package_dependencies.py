"""Tests for the package dependency workflow contributor."""

import os

import pytest

from errors import CoordinateError, DescriptorError
from octo.descriptor import Descriptor
from octo.package_dependencies import contribute_package_dependencies, contribute_package_dependency
from octo.scripts import script


def write_package_toml(tmp_path, content):
    """Helper to drop a package.toml into a project directory."""
    (tmp_path / "package.toml").write_text(content, encoding="utf-8")


@pytest.fixture
def descriptor(tmp_path):
    return Descriptor(path=str(tmp_path), package={"repository": "gcr.io/example/java"})


class TestContributePackageDependencies:
    """Contribution pass over a descriptor."""

    def test_no_package_section(self, tmp_path):
        # no package.toml on disk either: it must not be read
        assert contribute_package_dependencies(Descriptor(path=str(tmp_path))) == []

    def test_single_dependency(self, tmp_path, descriptor):
        write_package_toml(tmp_path, """
[[dependencies]]
image = "registry.example.com/foo:1.2.3"
""")
        contributions = contribute_package_dependencies(descriptor)

        assert len(contributions) == 1
        c = contributions[0]
        assert c.workflow.name == "Update foo"
        assert c.path == os.path.join(".github", "workflows", "update-foo.yml")

        steps = c.workflow.jobs["update"].steps
        update = next(s for s in steps if s.id == "package")
        assert update.env == {"DEPENDENCY": "registry.example.com/foo"}

    def test_multiple_dependencies_in_order(self, tmp_path, descriptor):
        write_package_toml(tmp_path, """
[[dependencies]]
image = "gcr.io/paketo-buildpacks/bellsoft-liberica:6.2.1"

[[dependencies]]
image = "localhost:5000/paketo-buildpacks/maven:5.3.2"
""")
        contributions = contribute_package_dependencies(descriptor)

        assert [c.workflow.name for c in contributions] == [
            "Update bellsoft-liberica",
            "Update maven",
        ]
        envs = [c.workflow.jobs["update"].steps[7].env["DEPENDENCY"] for c in contributions]
        assert envs == [
            "gcr.io/paketo-buildpacks/bellsoft-liberica",
            "localhost:5000/paketo-buildpacks/maven",
        ]

    def test_untagged_coordinate_fails_whole_pass(self, tmp_path, descriptor):
        write_package_toml(tmp_path, """
[[dependencies]]
image = "registry.example.com/good:1.0.0"

[[dependencies]]
image = "registry.example.com/foo"
""")
        with pytest.raises(CoordinateError) as exc_info:
            contribute_package_dependencies(descriptor)
        assert exc_info.value.image == "registry.example.com/foo"
        assert "registry.example.com/foo" in str(exc_info.value)

    def test_missing_package_toml(self, descriptor):
        with pytest.raises(DescriptorError) as exc_info:
            contribute_package_dependencies(descriptor)
        assert exc_info.value.path.endswith("package.toml")

    def test_malformed_package_toml(self, tmp_path, descriptor):
        write_package_toml(tmp_path, "invalid toml {")
        with pytest.raises(DescriptorError, match="unable to decode"):
            contribute_package_dependencies(descriptor)

    def test_package_toml_not_utf8(self, tmp_path, descriptor):
        (tmp_path / "package.toml").write_bytes(b'[[dependencies]]\nimage = "caf\xe9:1"\n')
        with pytest.raises(DescriptorError) as exc_info:
            contribute_package_dependencies(descriptor)
        assert exc_info.value.path.endswith("package.toml")

    def test_no_dependencies(self, tmp_path, descriptor):
        write_package_toml(tmp_path, '[buildpack]\nuri = "."\n')
        assert contribute_package_dependencies(descriptor) == []


class TestContributePackageDependency:
    """Shape of a single generated workflow."""

    def test_triggers(self):
        doc = contribute_package_dependency("registry.example.com/foo").workflow.to_dict()
        assert doc["on"] == {
            "schedule": [{"cron": "0 * * * *"}],
            "workflow_dispatch": {},
        }

    def test_fixed_step_order(self):
        job = contribute_package_dependency("registry.example.com/foo").workflow.jobs["update"]
        assert job.name == "Update Package Dependency"
        assert job.to_dict()["runs-on"] == "ubuntu-latest"

        labels = [s.uses or s.name for s in job.steps]
        assert labels == [
            "actions/checkout@v2",
            "actions/setup-go@v2",
            "Install crane",
            "Install yj",
            "Install update-package-dependency",
            "GoogleCloudPlatform/github-actions/setup-gcloud@master",
            "Configure gcloud docker credentials",
            "Update Package Dependency",
            "peter-evans/create-pull-request@v3",
        ]

    def test_step_details(self):
        steps = contribute_package_dependency("registry.example.com/foo").workflow.jobs["update"].steps

        assert steps[1].with_ == {"go-version": "1.15"}
        assert steps[2].run == script("install-crane.sh")
        assert steps[3].env == {"YJ_VERSION": "5.0.0"}
        assert steps[5].with_ == {"service_account_key": "${{ secrets.JAVA_GCLOUD_SERVICE_ACCOUNT_KEY }}"}
        assert steps[6].run == "gcloud auth configure-docker"
        assert steps[7].id == "package"
        assert steps[7].run == script("update-package-dependency.sh")

    def test_pull_request_templating(self):
        pr = contribute_package_dependency("registry.example.com/foo").workflow.jobs["update"].steps[8].with_
        old = "${{ steps.package.outputs.old-version }}"
        new = "${{ steps.package.outputs.new-version }}"

        assert pr["token"] == "${{ secrets.GITHUB_TOKEN }}"
        assert pr["branch"] == "update-package/foo"
        assert pr["title"] == f"Bump registry.example.com/foo from {old} to {new}"
        assert pr["commit-message"] == (
            f"Bump registry.example.com/foo from {old} to {new}\n\n"
            f"Bumps registry.example.com/foo from {old} to {new}."
        )
        assert pr["body"] == (
            f"Bumps [`registry.example.com/foo`](https://registry.example.com/foo) "
            f"from [`{old}`](https://registry.example.com/foo:{old}) "
            f"to [`{new}`](https://registry.example.com/foo:{new})."
        )
        assert pr["signoff"] is True
        assert pr["delete-branch"] is True
        assert pr["labels"] == "semver:minor, type:dependency-upgrade"

    def test_update_script_publishes_versions(self):
        body = script("update-package-dependency.sh")
        assert "old-version=" in body
        assert "new-version=" in body

from unittest.mock import patch

import pytest

from tf_schema_extractor.errors import WorkspaceError
from tf_schema_extractor.provider import ProviderSpec
from tf_schema_extractor.terraform.workspace import (
    CONFIG_FILENAME,
    cleanup_workspace,
    provision_workspace,
    render_config,
    workspace,
)


@pytest.fixture
def aws_spec():
    return ProviderSpec.create("aws", "5.0.0")


class TestRenderConfig:
    def test_declares_required_provider(self, aws_spec):
        config = render_config(aws_spec)
        assert "required_providers" in config
        assert "aws = {" in config
        assert 'source  = "hashicorp/aws"' in config
        assert 'version = "5.0.0"' in config

    def test_uses_short_name_as_alias(self):
        config = render_config(ProviderSpec.create("integrations/github", "6.0.0"))
        assert "github = {" in config
        assert 'source  = "integrations/github"' in config


class TestProvisionWorkspace:
    def test_creates_directory_with_config(self, aws_spec):
        path = provision_workspace(aws_spec)
        try:
            assert path.is_dir()
            assert path.name.startswith("tf-")
            assert (path / CONFIG_FILENAME).read_text(encoding="utf-8") == render_config(aws_spec)
        finally:
            cleanup_workspace(path)
        assert not path.exists()

    def test_each_workspace_is_unique(self, aws_spec):
        first = provision_workspace(aws_spec)
        second = provision_workspace(aws_spec)
        try:
            assert first != second
        finally:
            cleanup_workspace(first)
            cleanup_workspace(second)


class TestCleanupWorkspace:
    def test_removes_nested_content(self, tmp_path):
        target = tmp_path / "tf-x"
        (target / ".terraform" / "providers").mkdir(parents=True)
        (target / ".terraform" / "providers" / "plugin").write_text("bin")

        cleanup_workspace(target)

        assert not target.exists()

    def test_missing_directory_is_ignored(self, tmp_path):
        cleanup_workspace(tmp_path / "does-not-exist")


class TestWorkspaceContext:
    def test_removed_after_success(self, aws_spec):
        with workspace(aws_spec) as path:
            assert (path / CONFIG_FILENAME).exists()
        assert not path.exists()

    def test_removed_after_failure(self, aws_spec):
        with pytest.raises(RuntimeError):
            with workspace(aws_spec) as path:
                raise RuntimeError("boom")
        assert not path.exists()



class TestProvisionFailures:
    @patch("tf_schema_extractor.terraform.workspace.tempfile.mkdtemp")
    def test_unwritable_temp_dir(self, mock_mkdtemp, aws_spec):
        mock_mkdtemp.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(WorkspaceError, match="Could not create workspace"):
            provision_workspace(aws_spec)

    @patch("tf_schema_extractor.terraform.workspace.tempfile.mkdtemp")
    def test_config_write_failure(self, mock_mkdtemp, aws_spec, tmp_path):
        mock_mkdtemp.return_value = str(tmp_path / "vanished")

        with pytest.raises(WorkspaceError, match="main.tf"):
            provision_workspace(aws_spec)

"""Tests for the aggregated config_dirs lookup."""

import os
from unittest.mock import patch

import pytest

from configdir.exceptions import InvalidArgumentError
from configdir.lookup import candidate_dirs, config_dirs, is_readable_dir
from configdir.resolvers import RESOLVERS, Category


@pytest.fixture
def fake_tree(tmp_path, monkeypatch):
    """Point every category at directories below tmp_path.

    Each category resolves to ``<tmp>/<category>[/<app>]``. Only some of
    them exist, and ``here`` repeats the ``system`` directory.
    """
    existing = {
        Category.SYSTEM,
        Category.DESKTOP,
        Category.SINGLEAPP,
        Category.SITE,
        Category.USER,
        Category.XDG_CONFIG_HOME,
    }

    def make_resolver(category):
        def resolver(cfg_base):
            if category is Category.HERE:
                category_dir = tmp_path / Category.SYSTEM.value
            else:
                category_dir = tmp_path / category.value
            path = category_dir / cfg_base if cfg_base else category_dir
            return [str(path)]

        return resolver

    for category in Category:
        monkeypatch.setitem(RESOLVERS, category, make_resolver(category))
        if category in existing:
            (tmp_path / category.value / "myapp").mkdir(parents=True)

    return tmp_path


class TestConfigDirs:
    """Tests for config_dirs against a controlled directory tree."""

    def test_priority_order_without_app(self, fake_tree):
        """Test existing directories come back in category priority order."""
        expected = [
            str(fake_tree / name)
            for name in (
                "system",
                "desktop",
                "singleapp",
                "site",
                "user",
                "xdg_config_home",
            )
        ]
        assert config_dirs() == expected

    def test_app_name_excludes_singleapp(self, fake_tree):
        """Test the single application directory is skipped for an app."""
        expected = [
            str(fake_tree / name / "myapp")
            for name in ("system", "desktop", "site", "user", "xdg_config_home")
        ]
        assert config_dirs("myapp") == expected
        assert str(fake_tree / "singleapp") not in candidate_dirs("myapp")

    def test_duplicates_removed_keeping_first(self, fake_tree):
        """Test the repeated system directory appears once, in first position."""
        candidates = candidate_dirs()
        assert candidates.count(str(fake_tree / "system")) == 1
        assert candidates[0] == str(fake_tree / "system")

    def test_locallib_not_aggregated(self, fake_tree):
        """Test locallib candidates are never part of the lookup."""
        (fake_tree / "locallib").mkdir()
        assert str(fake_tree / "locallib") not in config_dirs()

    def test_unreadable_directory_skipped(self, fake_tree):
        """Test directories the process cannot read are dropped."""
        blocked = str(fake_tree / "site")
        real_access = os.access

        def fake_access(path, mode):
            return path != blocked and real_access(path, mode)

        with patch("configdir.lookup.os.access", side_effect=fake_access):
            assert blocked not in config_dirs()

    def test_nothing_exists(self, fake_tree, monkeypatch):
        """Test an empty list is a normal result."""
        monkeypatch.setattr("configdir.lookup.is_readable_dir", lambda path: False)
        assert config_dirs() == []

    def test_rejects_two_arguments(self):
        """Test more than one application name is rejected."""
        with pytest.raises(InvalidArgumentError, match="config_dirs"):
            config_dirs("a", "b")


class TestConfigDirsOnHost:
    """Tests for config_dirs against the real environment."""

    def test_idempotent(self):
        """Test two calls in one process agree."""
        assert config_dirs() == config_dirs()

    def test_no_duplicates(self):
        """Test no directory is listed twice."""
        dirs = config_dirs()
        assert len(dirs) == len(set(dirs))

    def test_removed_working_directory(self, monkeypatch, tmp_path):
        """Test the lookup still works after the working directory is deleted."""
        gone = tmp_path / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        gone.rmdir()

        dirs = config_dirs()

        assert str(gone / "etc") not in dirs
        assert config_dirs("myapp") == config_dirs("myapp")

    def test_entries_exist_and_are_readable(self):
        """Test every returned entry is a readable directory."""
        for path in config_dirs():
            assert os.path.isdir(path)
            assert os.access(path, os.R_OK)


class TestIsReadableDir:
    """Tests for is_readable_dir."""

    def test_directory(self, tmp_path):
        """Test an existing directory qualifies."""
        assert is_readable_dir(str(tmp_path)) is True

    def test_file(self, tmp_path):
        """Test a regular file does not qualify."""
        path = tmp_path / "config.yaml"
        path.write_text("key: value\n")
        assert is_readable_dir(str(path)) is False

    def test_missing(self, tmp_path):
        """Test a missing path does not qualify."""
        assert is_readable_dir(str(tmp_path / "missing")) is False

    def test_invalid_path(self):
        """Test a path the OS cannot check does not qualify."""
        assert is_readable_dir("/etc/\0bad") is False

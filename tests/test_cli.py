"""Tests for the nextkit command-line entry point (nextkit.cli)."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from nextkit import cli
from nextkit.cli import EXIT_CONFIGURATION, EXIT_INTERRUPTED, EXIT_OK, build_parser, main


class TestParser:
    @pytest.mark.unit
    def test_add_module_arguments(self):
        args = build_parser().parse_args(["add-module", "dashboard", "--routes", "a,b", "--with-api"])
        assert args.command == "add-module"
        assert args.names == "dashboard"
        assert args.routes == "a,b"
        assert args.with_api is True
        assert args.with_redux is False

    @pytest.mark.unit
    def test_common_flags_default_to_none(self):
        args = build_parser().parse_args(["add"])
        assert args.yes is None
        assert args.skip_install is None
        assert args.cwd is None

    @pytest.mark.unit
    def test_component_requires_name(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["add-component"])
        assert exc.value.code == 2

    @pytest.mark.unit
    def test_missing_command(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2


class TestMain:
    @pytest.mark.unit
    def test_success(self, app_project, make_ctx):
        ctx = make_ctx(app_project)
        assert main(["add-component", "--name", "card"], ctx=ctx) == EXIT_OK
        assert app_project.is_file("components/Card/Card.tsx")

    @pytest.mark.unit
    def test_configuration_error_exit_code(self, memory_fs, make_ctx):
        assert main(["add"], ctx=make_ctx(memory_fs)) == EXIT_CONFIGURATION
        assert memory_fs.files == {}

    @pytest.mark.unit
    def test_input_error_is_not_fatal(self, app_project, make_ctx):
        assert main(["add-module", "dashboard", "--routes", " , "], ctx=make_ctx(app_project)) == EXIT_OK
        assert not app_project.exists("app/(dashboard)")

    @pytest.mark.unit
    def test_invalid_package_manager_from_env(self, local_app_project):
        env = {"NEXTKIT_ROOT": str(local_app_project), "NEXTKIT_PACKAGE_MANAGER": "bun"}
        with patch.dict(os.environ, env, clear=True):
            assert main(["add"]) == EXIT_CONFIGURATION
        assert not (local_app_project / "hooks").exists()

    @pytest.mark.unit
    def test_install_failure_still_succeeds(self, app_project, make_ctx, failing_runner):
        ctx = make_ctx(app_project, command_runner=failing_runner)
        assert main(["add-redux", "user"], ctx=ctx) == EXIT_OK
        assert app_project.is_file("store/slices/userSlice.ts")

    @pytest.mark.unit
    def test_keyboard_interrupt(self, app_project, make_ctx, monkeypatch):
        def interrupted(ctx, args):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "_dispatch", interrupted)
        assert main(["add"], ctx=make_ctx(app_project)) == EXIT_INTERRUPTED

    @pytest.mark.unit
    def test_missing_project_directory(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            assert main(["add", "--cwd", str(tmp_path / "missing")]) == EXIT_CONFIGURATION

    @pytest.mark.integration
    def test_real_project_non_interactive(self, local_app_project):
        with patch.dict(os.environ, {}, clear=True):
            code = main(["add-tailwind", "--cwd", str(local_app_project), "--yes", "--skip-install"])
        assert code == EXIT_OK
        assert (local_app_project / "tailwind.config.ts").is_file()
        assert (local_app_project / "app" / "globals.css").read_text(encoding="utf-8").startswith("@tailwind base;")

    @pytest.mark.integration
    def test_env_skip_install(self, local_app_project):
        env = {"NEXTKIT_ROOT": str(local_app_project), "NEXTKIT_SKIP_INSTALL": "1", "NEXTKIT_ASSUME_YES": "1"}
        with patch.dict(os.environ, env, clear=True):
            assert main(["add"]) == EXIT_OK
        assert (local_app_project / "app" / "api").is_dir()
        assert not (local_app_project / "src").exists()

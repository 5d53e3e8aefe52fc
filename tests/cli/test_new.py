# Copyright (c) 2026 human-utils contributors
# SPDX-License-Identifier: Apache-2.0
"""Tests for the ``new`` command."""

import builtins
import errno
import json

from typer.testing import CliRunner

from human_utils.cli.context import CLIContext
from human_utils.cli.main import new_app, split_content
from human_utils.core import operations
from human_utils.utils.config import HUMAN_UTILS_CONFIG_ENV

runner = CliRunner()


def invoke_new(argv, input=None, env=None):
    """Invoke ``new`` the way the console script does, splitting at ``--``."""
    args, content = split_content(argv)
    return runner.invoke(new_app, args, input=input, env=env, obj=CLIContext(content=content))


def lines(result):
    return result.output.splitlines()


class TestSplitContent:
    def test_without_separator(self):
        assert split_content(["a", "b"]) == (["a", "b"], None)

    def test_with_separator(self):
        assert split_content(["a", "--", "hello", "world"]) == (["a"], ["hello", "world"])

    def test_only_first_separator_splits(self):
        assert split_content(["a", "--", "x", "--", "y"]) == (["a"], ["x", "--", "y"])

    def test_empty_content(self):
        assert split_content(["a", "--"]) == (["a"], [])


class TestCreate:
    """Creating paths that do not exist yet."""

    def test_directories_then_files(self, workdir):
        result = invoke_new(["a/", "b", "c"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["N a/", "N b", "N c"]
        assert (workdir / "a").is_dir()
        assert (workdir / "b").read_text() == ""
        assert (workdir / "c").read_text() == ""

    def test_output_is_sorted(self, workdir):
        result = invoke_new(["z", "y/", "x", "w/"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["N w/", "N y/", "N x", "N z"]

    def test_missing_ancestors_are_created(self, workdir):
        result = invoke_new(["x/y/z", "p/q/"])
        assert result.exit_code == 0, result.output
        assert (workdir / "x" / "y" / "z").is_file()
        assert (workdir / "p" / "q").is_dir()
        assert lines(result) == ["N p/q/", "N x/y/z"]

    def test_file_and_directory_options(self, workdir):
        result = invoke_new(["--file", "f", "-d", "d", "--directory", "e"])
        assert result.exit_code == 0, result.output
        assert (workdir / "f").is_file()
        assert (workdir / "d").is_dir()
        assert (workdir / "e").is_dir()

    def test_duplicates_are_created_once(self, workdir):
        result = invoke_new(["a", "./a", "a"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["N a"]

    def test_content_is_joined_with_newline(self, workdir):
        result = invoke_new(["a", "b", "--", "hello", "world"])
        assert result.exit_code == 0, result.output
        assert (workdir / "a").read_text() == "hello world\n"
        assert (workdir / "b").read_text() == "hello world\n"

    def test_empty_content_writes_empty_file(self, workdir):
        result = invoke_new(["a", "--"])
        assert result.exit_code == 0, result.output
        assert (workdir / "a").read_text() == ""

    def test_dry_run_changes_nothing(self, workdir):
        result = invoke_new(["-n", "a/", "b/c"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["N a/", "N b/c"]
        assert list(workdir.iterdir()) == []

    def test_silent_hides_status_lines(self, workdir):
        result = invoke_new(["-s", "a"])
        assert result.exit_code == 0, result.output
        assert result.output == ""
        assert (workdir / "a").is_file()


class TestValidation:
    """Requests rejected before anything is touched."""

    def test_no_paths(self, workdir):
        result = invoke_new([])
        assert result.exit_code == 1
        assert "At least one path is required" in result.output

    def test_same_path_as_file_and_directory(self, workdir):
        result = invoke_new(["b", "c", "b/", "c/"])
        assert result.exit_code == 1
        assert "Error: Cannot create both file and a directory at:\nb\nc" in result.output
        assert list(workdir.iterdir()) == []

    def test_file_is_implied_ancestor(self, workdir):
        result = invoke_new(["x", "a/b", "a"])
        assert result.exit_code == 1
        assert "Cannot create both file and a directory at:\na" in result.output
        assert list(workdir.iterdir()) == []

    def test_file_option_with_trailing_slash(self, workdir):
        result = invoke_new(["--file", "foo/"])
        assert result.exit_code == 1
        assert 'File path "foo/" cannot end with a / when --file option is used.' in result.output

    def test_working_directory_as_file(self, workdir):
        (workdir / "keep").write_text("data")
        result = invoke_new(["-f", "."])
        assert result.exit_code == 1
        assert 'Cannot create file "." because it contains the working directory' in result.output
        assert (workdir / "keep").read_text() == "data"

    def test_parent_of_working_directory_as_file(self, workdir):
        (workdir / "keep").write_text("data")
        for path in ("..", "../work", "--file=.."):
            result = invoke_new(["-f", path])
            assert result.exit_code == 1, path
            assert "contains the working directory" in result.output
        assert (workdir / "keep").read_text() == "data"


class TestExisting:
    """Paths that already exist."""

    def test_existing_empty_file_is_noop(self, workdir):
        (workdir / "a").write_text("")
        result = invoke_new(["a"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ['Empty file "a" already exists']

    def test_existing_directory_is_noop(self, workdir):
        (workdir / "a").mkdir()
        (workdir / "a" / "keep").write_text("x")
        result = invoke_new(["a/"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ['Directory "a/" already exists']
        assert (workdir / "a" / "keep").read_text() == "x"

    def test_noop_message_shown_when_silent(self, workdir):
        (workdir / "a").write_text("")
        result = invoke_new(["-s", "a", "b"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ['Empty file "a" already exists']

    def test_existing_empty_file_with_content_is_modified(self, workdir):
        (workdir / "a").write_text("")
        result = invoke_new(["a", "--", "hi"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["M a"]
        assert (workdir / "a").read_text() == "hi\n"

    def test_non_empty_file_asks_first(self, workdir):
        (workdir / "a").write_text("old")
        result = invoke_new(["a"], input="y\n")
        assert result.exit_code == 0, result.output
        assert 'Overwrite file "a"? [Y/n]' in result.output
        assert "M a" in lines(result)
        assert (workdir / "a").read_text() == ""

    def test_empty_answer_confirms(self, workdir):
        (workdir / "a").write_text("old")
        result = invoke_new(["a", "--", "new"], input="\n")
        assert result.exit_code == 0, result.output
        assert (workdir / "a").read_text() == "new\n"

    def test_declining_changes_nothing(self, workdir):
        (workdir / "a").write_text("old")
        (workdir / "d").mkdir()
        result = invoke_new(["a", "d", "e/"], input="no\n")
        assert result.exit_code == 1
        assert (workdir / "a").read_text() == "old"
        assert (workdir / "d").is_dir()
        assert not (workdir / "e").exists()

    def test_end_of_input_declines(self, workdir):
        (workdir / "a").write_text("old")
        result = invoke_new(["a"], input="")
        assert result.exit_code == 1
        assert (workdir / "a").read_text() == "old"

    def test_directory_replaced_by_file(self, workdir):
        assert invoke_new(["b/", "a", "--force"]).exit_code == 0
        (workdir / "b" / "inner").write_text("x")
        result = invoke_new(["b", "--", "hi"], input="y\n")
        assert result.exit_code == 0, result.output
        assert 'Overwrite directory "b"? [Y/n]' in result.output
        assert lines(result)[-2:] == ["D b/", "M b"]
        assert (workdir / "b").read_text() == "hi\n"

    def test_force_skips_confirmation(self, workdir):
        (workdir / "b").mkdir()
        result = invoke_new(["-f", "b", "--", "hi"])
        assert result.exit_code == 0, result.output
        assert "Overwrite" not in result.output
        assert lines(result) == ["D b/", "M b"]
        assert (workdir / "b").read_text() == "hi\n"

    def test_file_in_the_way_of_directory(self, workdir):
        (workdir / "a").write_text("x")
        result = invoke_new(["a/b"], input="y\n")
        assert result.exit_code == 0, result.output
        assert 'Overwrite file "a"? [Y/n]' in result.output
        assert lines(result)[-2:] == ["D a", "N a/b"]
        assert (workdir / "a" / "b").is_file()

    def test_several_clashes_are_listed(self, workdir):
        (workdir / "a").write_text("x")
        (workdir / "b").mkdir()
        result = invoke_new(["a/c", "b"], input="y\n")
        assert result.exit_code == 0, result.output
        assert "For the following...\na\nb/\n...overwrite all? [Y/n]" in result.output
        assert (workdir / "a" / "c").is_file()
        assert (workdir / "b").is_file()

    def test_dry_run_still_asks(self, workdir):
        (workdir / "a").write_text("old")
        result = invoke_new(["-n", "a"], input="y\n")
        assert result.exit_code == 0, result.output
        assert 'Overwrite file "a"?' in result.output
        assert (workdir / "a").read_text() == "old"

    def test_symlink_is_replaced_not_followed(self, workdir):
        (workdir / "target").write_text("keep")
        (workdir / "link").symlink_to(workdir / "target")
        result = invoke_new(["-f", "link", "--", "new"])
        assert result.exit_code == 0, result.output
        assert not (workdir / "link").is_symlink()
        assert (workdir / "link").read_text() == "new\n"
        assert (workdir / "target").read_text() == "keep"

    def test_symlink_to_directory_is_kept_as_parent(self, workdir):
        (workdir / "real").mkdir()
        (workdir / "link").symlink_to(workdir / "real")
        result = invoke_new(["link/file"])
        assert result.exit_code == 0, result.output
        assert (workdir / "link").is_symlink()
        assert (workdir / "real" / "file").is_file()


class TestOptions:
    def test_color_flag_forces_ansi(self, workdir):
        result = invoke_new(["--color", "a"])
        assert result.exit_code == 0, result.output
        assert "\x1b[" in result.output

    def test_no_color_flag(self, workdir):
        result = invoke_new(["--no-color", "a"])
        assert result.exit_code == 0, result.output
        assert "\x1b[" not in result.output

    def test_config_file_enables_color(self, workdir, tmp_path):
        conf = tmp_path / "config.json"
        conf.write_text(json.dumps({"color": "always"}))
        result = invoke_new(["a"], env={HUMAN_UTILS_CONFIG_ENV: str(conf)})
        assert result.exit_code == 0, result.output
        assert "\x1b[" in result.output

    def test_flag_overrides_config_file(self, workdir, tmp_path):
        conf = tmp_path / "config.json"
        conf.write_text(json.dumps({"color": "always"}))
        result = invoke_new(["--no-color", "a"], env={HUMAN_UTILS_CONFIG_ENV: str(conf)})
        assert result.exit_code == 0, result.output
        assert "\x1b[" not in result.output

    def test_invalid_config_file(self, workdir, tmp_path):
        conf = tmp_path / "config.json"
        conf.write_text(json.dumps({"color": "rainbow"}))
        result = invoke_new(["a"], env={HUMAN_UTILS_CONFIG_ENV: str(conf)})
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (workdir / "a").exists()

    def test_version(self):
        result = invoke_new(["--version"])
        assert result.exit_code == 0
        assert "human-utils" in result.output


class TestIOErrors:
    def test_first_failure_stops_the_rest(self, workdir, monkeypatch):
        real_open = builtins.open

        def failing_open(path, *args, **kwargs):
            if path == "a/x":
                raise PermissionError(errno.EACCES, "Permission denied", path)
            return real_open(path, *args, **kwargs)

        monkeypatch.setattr(operations, "open", failing_open, raising=False)
        result = invoke_new(["a/x", "b"])
        assert result.exit_code == 1
        assert 'Error for "a/x": Permission denied' in result.output
        assert not (workdir / "a" / "x").exists()
        assert not (workdir / "b").exists()

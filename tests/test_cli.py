"""
Tests for the pathcomplete command line entrypoint.
"""

from unittest.mock import patch

from pathcomplete import cli


class TestCli:
    """Test cases for cli.main."""

    def test_prints_suggestions(self, temp_directory, capsys):
        code = cli.main([temp_directory + "/", "--home", "/home/user"])

        assert code == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [temp_directory + "/docs/", temp_directory + "/downloads/"]

    def test_max_bounds_output(self, temp_directory, capsys):
        code = cli.main([temp_directory + "/", "--max", "1"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [temp_directory + "/docs/"]

    def test_tilde_uses_home_option(self, temp_directory, capsys):
        code = cli.main(["~/dow", "--home", temp_directory])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["~/downloads/"]

    def test_boundary(self, capsys):
        code = cli.main(["~/projects/my", "--home", "/home/user", "--boundary"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "/home/user/projects/"

    def test_missing_directory_prints_nothing(self, capsys):
        code = cli.main(["/nonexistent/directory/"])

        assert code == 0
        assert capsys.readouterr().out == ""

    def test_pretty(self, temp_directory):
        with patch.object(cli, "_render_pretty") as render:
            code = cli.main([temp_directory + "/d", "--pretty"])

        assert code == 0
        render.assert_called_once_with(
            temp_directory + "/d",
            [temp_directory + "/docs/", temp_directory + "/downloads/"],
            temp_directory + "/",
        )

    def test_relative_home_option_rejected(self, capsys):
        code = cli.main(["~/x", "--home", "relative/home"])

        assert code == 2
        err = capsys.readouterr().err
        assert "--home must be an absolute path, got: relative/home" in err

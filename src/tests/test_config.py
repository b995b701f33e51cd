"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

from tinywiki.config import TEMPLATES_DIR, Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("data")
            assert s.templates_dir == TEMPLATES_DIR
            assert s.front_page == "FrontPage"
            assert s.escape_html is True
            assert s.port == 8080
            assert s.debug is False
            assert s.app_title == "TinyWiki"

    def test_from_env(self):
        env = {
            "TINYWIKI_DATA_DIR": "/tmp/wiki",
            "TINYWIKI_FRONT_PAGE": "Home",
            "TINYWIKI_ESCAPE_HTML": "false",
            "TINYWIKI_PORT": "9000",
            "TINYWIKI_APP_TITLE": "MyWiki",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings()
            assert s.data_dir == Path("/tmp/wiki")
            assert s.front_page == "Home"
            assert s.escape_html is False
            assert s.port == 9000
            assert s.app_title == "MyWiki"

    def test_env_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("TINYWIKI_APP_TITLE=FromFile\n")
        monkeypatch.chdir(tmp_path)
        with patch.dict("os.environ", {}, clear=True):
            assert Settings().app_title == "FromFile"
            assert Settings(_env_file=None).app_title == "TinyWiki"

    def test_bundled_templates_exist(self):
        assert (TEMPLATES_DIR / "view.html").is_file()
        assert (TEMPLATES_DIR / "edit.html").is_file()

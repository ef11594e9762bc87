"""
Tests for ServerSettings parsed from --server: option strings.
"""

import pytest

from sjbuild.config import SjbuildConfig
from sjbuild.options import (
    SERVER_SUB_OPTIONS,
    ServerSettings,
    clean_sub_options,
    extract_string_option,
    strip_flag_prefix,
)


class TestFromOptionString:

    def test_full_option(self, server_option):
        s = ServerSettings.from_option_string(server_option)
        assert s.portfile == "/tmp/javac.port"
        assert s.sjavac == "/opt/bin/sjavac"
        assert s.id == "build42"
        assert s.poolsize == 4
        assert s.keepalive == 30
        assert s.background is False

    def test_defaults_from_config(self, config_file):
        path = config_file("server:\n  sjavac: mysjavac\n  keepalive: 60\n  poolsize: 3\n  background: false\n")
        cfg = SjbuildConfig(path)
        s = ServerSettings.from_option_string("--server:portfile=/p", cfg)
        assert s.portfile == "/p"
        assert s.sjavac == "mysjavac"
        assert s.keepalive == 60
        assert s.poolsize == 3
        assert s.background is False
        assert s.id is None

    def test_builtin_defaults(self):
        s = ServerSettings.from_option_string("portfile=/p")
        assert s.sjavac == "sjavac"
        assert s.keepalive == 120
        assert s.background is True
        assert s.poolsize >= 1

    def test_none_uses_defaults(self):
        s = ServerSettings.from_option_string(None)
        assert s.portfile is None
        assert s.keepalive == 120

    def test_bad_int_is_zero(self):
        s = ServerSettings.from_option_string("--server:poolsize=lots")
        assert s.poolsize == 0

    def test_single_dash_prefix_agrees_with_extractors(self):
        """'-server:' keeps its first sub-option, like the raw extractors do."""
        text = "-server:id=foo,portfile=bar"
        s = ServerSettings.from_option_string(text)
        assert s.id == extract_string_option("id", text) == "foo"
        assert s.portfile == "bar"

    def test_unknown_keys_ignored(self):
        """A foreign 'xportfile=' must not be read as portfile."""
        s = ServerSettings.from_option_string("--server:xportfile=/wrong,portfile=/right")
        assert s.portfile == "/right"

    def test_frozen(self):
        s = ServerSettings.from_option_string("portfile=/p")
        with pytest.raises(AttributeError):
            s.portfile = "/other"


class TestToOptionString:

    def test_skips_unset(self):
        s = ServerSettings.from_option_string("portfile=/p,poolsize=2")
        text = s.to_option_string()
        assert "id=" not in text
        assert text.startswith("portfile=/p,sjavac=sjavac,poolsize=2")
        assert text.endswith("background=true")

    def test_survives_cleaning(self, server_option):
        s = ServerSettings.from_option_string(server_option)
        text = s.to_option_string()
        assert clean_sub_options(SERVER_SUB_OPTIONS, text) == text
        assert ServerSettings.from_option_string(text) == s


class TestStripFlagPrefix:

    def test_strips(self):
        assert strip_flag_prefix("--server:id=a", "--server:") == "id=a"

    def test_leaves_other(self):
        assert strip_flag_prefix("id=a", "--server:") == "id=a"

    def test_single_dash_flag(self):
        assert strip_flag_prefix("-server:id=a", "--server:") == "id=a"

    def test_colon_inside_value_kept(self):
        """Only a colon ahead of the first '=' ends a flag."""
        assert strip_flag_prefix("-x=C:\\tmp", "--server:") == "-x=C:\\tmp"

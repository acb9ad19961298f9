# tests/test_skylink.py
"""Tests for skylink parsing."""

import pytest

from skyns.errors import MalformedSkylink
from skyns.skylink import Skylink, parse_skylink

SKYLINK = "XABvi7JtJbQSMAcDwnUnmp2FKDPjg8_tTTFP4BwMSxVdEg"


@pytest.fixture
def skylink():
    return parse_skylink(SKYLINK)


class TestParseSkylink:
    """Test the accepted input shapes."""

    def test_bare(self, skylink):
        assert len(skylink.raw) == 34
        assert skylink.to_base64() == SKYLINK

    @pytest.mark.parametrize("text", [
        f"sia:{SKYLINK}",
        f"sia://{SKYLINK}",
        f"  {SKYLINK}\n",
        f"https://siasky.net/{SKYLINK}",
        f"https://siasky.net/{SKYLINK}/",
        f"https://siasky.net/{SKYLINK}/index.html?x=1",
        f"/{SKYLINK}/foo/bar",
        f"siasky.net/{SKYLINK}",
    ])
    def test_base64_forms(self, text):
        assert parse_skylink(text).to_base64() == SKYLINK

    def test_base32_forms(self, skylink):
        base32 = skylink.to_base32()
        assert len(base32) == 55

        assert parse_skylink(base32) == skylink
        assert parse_skylink(base32.upper()) == skylink
        assert parse_skylink(f"https://{base32}.siasky.net/") == skylink
        assert parse_skylink(f"{base32}.siasky.net") == skylink

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "not a skylink",
        SKYLINK[:-1],
        SKYLINK + "A",
        "https://siasky.net/",
        "https://siasky.net/file/abc",
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedSkylink):
            parse_skylink(text)

    def test_not_a_string(self):
        with pytest.raises(MalformedSkylink):
            parse_skylink(None)


class TestSkylink:
    """Test Skylink formatting."""

    def test_wrong_size(self):
        with pytest.raises(MalformedSkylink):
            Skylink(b"\x00" * 33)

    def test_subdomain_url(self, skylink):
        url = skylink.subdomain_url("https://siasky.net")
        assert url == f"https://{skylink.to_base32()}.siasky.net"

    def test_subdomain_url_bare_host(self, skylink):
        assert skylink.subdomain_url("skyportal.xyz").endswith(".skyportal.xyz")

    def test_str(self, skylink):
        assert str(skylink) == SKYLINK

from __future__ import annotations

import pytest

from qr_encoder.payloads import escape_wifi, text_payload, url_payload, vcard_payload, wifi_payload


def test_text() -> None:
    assert text_payload("  hello ") == "hello"
    with pytest.raises(ValueError):
        text_payload("   ")


@pytest.mark.parametrize("url, expected", [
    ("example.com", "https://example.com"),
    ("http://example.com", "http://example.com"),
    (" https://example.com/a?b=1 ", "https://example.com/a?b=1"),
])
def test_url(url: str, expected: str) -> None:
    assert url_payload(url) == expected


def test_empty_url() -> None:
    with pytest.raises(ValueError):
        url_payload("")


def test_wifi() -> None:
    assert wifi_payload("home", "secret") == "WIFI:T:WPA;S:home;P:secret;;"
    assert wifi_payload("home", "k", security='WEP', hidden=True) == "WIFI:T:WEP;S:home;P:k;H:true;;"
    assert wifi_payload("cafe", "ignored", security='nopass') == "WIFI:T:nopass;S:cafe;;"


def test_wifi_escaping() -> None:
    assert escape_wifi(r'a;b,c:d\e"f') == r'a\;b\,c\:d\\e\"f'
    assert wifi_payload("my;net", "p:w") == r"WIFI:T:WPA;S:my\;net;P:p\:w;;"


@pytest.mark.parametrize("ssid, security", [("", "WPA"), ("net", "WPA3")])
def test_wifi_rejects_bad_input(ssid: str, security: str) -> None:
    with pytest.raises(ValueError):
        wifi_payload(ssid, "pw", security=security)


def test_vcard() -> None:
    assert vcard_payload("Ada", "+100", "ada@example.com").split("\n") == [
        "BEGIN:VCARD", "VERSION:3.0", "FN:Ada", "TEL:+100", "EMAIL:ada@example.com", "END:VCARD",
    ]
    assert "TEL" not in vcard_payload(name="Ada")
    with pytest.raises(ValueError):
        vcard_payload()

# -*- coding: utf-8 -*-
"""
QR Payload Builders

Helpers that turn form input into the text conventions QR readers understand:
plain text, URLs, Wi-Fi network credentials and vCard contacts.
"""

import re

WIFI_SECURITY = ('WPA', 'WEP', 'nopass')

_WIFI_SPECIAL = re.compile(r'([\\;,:"\'])')


def escape_wifi(value: str) -> str:
    """Backslash-escape the characters reserved by the WIFI: syntax."""
    return _WIFI_SPECIAL.sub(r'\\\1', value)


def text_payload(text: str) -> str:
    text = text.strip()
    if not text:
        raise ValueError("Text cannot be empty")
    return text


def url_payload(url: str) -> str:
    """Strip the URL and default to https:// when no scheme is given."""
    url = url.strip()
    if not url:
        raise ValueError("URL cannot be empty")
    if not re.match(r'^https?://', url):
        url = 'https://' + url
    return url


def wifi_payload(ssid: str, password: str = '', security: str = 'WPA', hidden: bool = False) -> str:
    """
    Build a Wi-Fi network configuration payload.

    Args:
        ssid: Network name
        password: Network key, ignored for open networks
        security: 'WPA', 'WEP' or 'nopass'
        hidden: Whether the network hides its SSID

    Returns:
        str: e.g. ``WIFI:T:WPA;S:home;P:secret;;``

    Raises:
        ValueError: If the SSID is empty or the security type is unknown
    """
    ssid = ssid.strip()
    if not ssid:
        raise ValueError("SSID cannot be empty")
    if security not in WIFI_SECURITY:
        raise ValueError(f"Security must be one of {', '.join(WIFI_SECURITY)}, got {security!r}")

    hidden_field = 'H:true;' if hidden else ''
    if security == 'nopass':
        return f"WIFI:T:nopass;S:{escape_wifi(ssid)};{hidden_field};"
    return f"WIFI:T:{security};S:{escape_wifi(ssid)};P:{escape_wifi(password)};{hidden_field};"


def vcard_payload(name: str = '', phone: str = '', email: str = '') -> str:
    """
    Build a vCard 3.0 contact with whichever fields are present.

    Raises:
        ValueError: If all fields are empty
    """
    name, phone, email = name.strip(), phone.strip(), email.strip()
    if not (name or phone or email):
        raise ValueError("A contact needs a name, phone or email")

    lines = ['BEGIN:VCARD', 'VERSION:3.0']
    if name:
        lines.append(f'FN:{name}')
    if phone:
        lines.append(f'TEL:{phone}')
    if email:
        lines.append(f'EMAIL:{email}')
    lines.append('END:VCARD')
    return '\n'.join(lines)

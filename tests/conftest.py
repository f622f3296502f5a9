"""Shared fixtures: a fresh store, application and test client per test."""

import base64
import re
import zlib

import pytest

from app import create_app
from user import User
from user_store import UserStore


@pytest.fixture
def store():
    """Empty in-memory store."""
    return UserStore()


@pytest.fixture
def seeded_store():
    """Store holding three users created in order."""
    s = UserStore()
    s.create(User(None, "Ann", "ann@x.com"))
    s.create(User(None, "Bo", "bo@example.org"))
    s.create(User(None, "Cyan", "cy@x.com"))
    return s


@pytest.fixture
def app(seeded_store):
    return create_app(store=seeded_store, config={"TESTING": True, "SECRET_KEY": "test"})


@pytest.fixture
def client(app):
    return app.test_client()


def _decode_stream(header, data):
    if b"/ASCII85Decode" in header:
        data = data.strip()
        if data.endswith(b"~>"):
            data = data[:-2]
        data = base64.a85decode(data)
    if b"/FlateDecode" in header:
        data = zlib.decompressobj().decompress(data)
    return data


@pytest.fixture
def pdf_text():
    """Return a function that decodes every content stream of a PDF into one byte string."""
    def extract(pdf):
        streams = re.finditer(rb"<<([^<>]*)>>\s*stream\r?\n(.*?)endstream", pdf, re.S)
        return b"\n".join(_decode_stream(m.group(1), m.group(2)) for m in streams)
    return extract

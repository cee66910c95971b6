"""Pytest configuration for CSS Inliner tests."""

import logging

import pytest
import requests

from ..utils.html import parse_html

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text='', status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

class FakeWeb:
    """Registered URL bodies plus a log of requested URLs."""

    def __init__(self):
        self.pages = {}
        self.requested = []

    def get(self, url, **kwargs):
        self.requested.append(url)
        if url in self.pages:
            return FakeResponse(self.pages[url])
        return FakeResponse('', status_code=404)

@pytest.fixture
def parse():
    """Return the HTML parser used by the pipelines."""
    return parse_html

@pytest.fixture
def fake_web(monkeypatch):
    """Serve registered URLs instead of touching the network; unknown URLs answer 404."""
    web = FakeWeb()

    def fake_get(session, url, **kwargs):
        return web.get(url, **kwargs)

    monkeypatch.setattr(requests.Session, 'get', fake_get)
    return web

@pytest.fixture(scope='session')
def sample_html():
    """Return sample HTML content for testing."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>Newsletter</title>
        <style>
            .header { color: blue; font-size: 24px; }
            .content { padding: 20px; }
            .content p { line-height: 1.5; }
            a:hover { color: red; }
            @media print {
                .header { display: none; }
            }
        </style>
    </head>
    <body>
        <div class="header">Title</div>
        <div class="content">
            <p>First paragraph</p>
            <p style="margin: 0;">Second paragraph</p>
        </div>
        <a href="#">Link</a>
    </body>
    </html>
    """

@pytest.fixture(scope='session')
def inline_styled_html():
    """Return HTML carrying only inline styles."""
    return """
    <html>
    <head><title>Inline</title></head>
    <body style="margin:0">
        <div class="card" style="padding:10px;border:1px solid #ccc">
            <span style="font-weight:bold">Name</span>
        </div>
        <div class="card" style="border:1px solid #ccc;padding:10px">Second</div>
        <p style="color:red">Loose</p>
    </body>
    </html>
    """

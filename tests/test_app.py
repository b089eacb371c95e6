"""Integration tests for the Flask app."""

import pytest

from app import _as_text, _as_types, app
from qrmarkup.module_types import IS_DARK, M_FINDER, M_TIMING


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.mark.unit
class TestAsTypes:
    def test_names(self):
        assert _as_types('finder, timing-dark') == (M_FINDER, M_TIMING | IS_DARK)

    def test_unknown_and_empty(self):
        assert _as_types('nope,,') == ()
        assert _as_types(None) == ()


@pytest.mark.integration
class TestExportSvg:
    def test_missing_text(self, client):
        response = client.get('/markup/svg')
        assert response.status_code == 400

    def test_download(self, client):
        response = client.get('/markup/svg?text=hello&connect=true&circular=true')
        assert response.status_code == 200
        assert response.mimetype == 'image/svg+xml'
        assert response.data.startswith(b'<?xml')
        assert response.data.count(b'<path') == 2

    def test_base64(self, client):
        response = client.get('/markup/svg?text=hello&base64=true')
        assert response.status_code == 200
        assert response.get_data(as_text=True).startswith('data:image/svg+xml;base64,')

    def test_colors(self, client):
        response = client.get('/markup/svg?text=hello&color_finder_dark=purple&border=0')
        assert b'fill="purple"' in response.data

    def test_bad_numbers_fall_back(self, client):
        response = client.get('/markup/svg?text=hello&radius=abc&opacity=x&border=zz')
        assert response.status_code == 200

    def test_generation_error(self, client):
        response = client.get('/markup/svg?text=' + 'x' * 100 + '&version=1')
        assert response.status_code == 400


@pytest.mark.integration
class TestExportHtml:
    def test_download(self, client):
        response = client.get('/markup/html?text=hello')
        assert response.status_code == 200
        assert response.data.startswith(b'<!DOCTYPE html>')


@pytest.mark.integration
class TestIndex:
    def test_empty_form(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert b'<form' in response.data

    def test_preview(self, client):
        response = client.get('/?text=hello')
        assert response.status_code == 200
        assert b'<svg xmlns' in response.data
        assert b'<div class="qr-html">' in response.data


@pytest.mark.unit
class TestAsText:
    def test_escapes_quotes(self):
        assert _as_text('red" onmouseover="alert(1)') == 'red&#34; onmouseover=&#34;alert(1)'

    def test_blank_uses_default(self):
        assert _as_text('  ', 'xMidYMid') == 'xMidYMid'
        assert _as_text(None) is None

    def test_plain_value_unchanged(self):
        assert _as_text(" '#ff0000' ") == '#ff0000'


@pytest.mark.integration
class TestPreviewEscaping:
    def test_css_class_cannot_break_out(self, client):
        response = client.get('/', query_string={
            'text': 'hello',
            'css_class': '"><script>alert(1)</script>',
            'width': '1" onload="alert(2)',
            'aspect': '"><img src=x onerror=alert(3)>',
        })
        body = response.get_data(as_text=True)

        assert response.status_code == 200
        assert '<script>' not in body
        assert 'onload="' not in body
        assert '<img' not in body

    def test_color_cannot_add_attributes(self, client):
        response = client.get('/', query_string={
            'text': 'hello',
            'border': '0',
            'color_finder_dark': 'red" onmouseover="alert(1)',
        })
        body = response.get_data(as_text=True)

        assert 'onmouseover="' not in body
        assert 'fill="red&#34; onmouseover=&#34;alert(1)"' in body

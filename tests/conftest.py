import io

import pytest
from PIL import Image

from app import create_app


@pytest.fixture
def app():
    return create_app({'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_image():
    def _make(colour, fmt='PNG', size=(16, 16)):
        buf = io.BytesIO()
        Image.new('RGB', size, colour).save(buf, format=fmt)
        return buf.getvalue()
    return _make

import os
import sys
from io import BytesIO

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from research_assistant import create_app
from research_assistant.extensions import db
from research_assistant.policy import Identity
from research_assistant.services.accounts import register_user

PASSWORD = 'correct-horse'


@pytest.fixture
def app(tmp_path):
    app = create_app(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite://',
        WTF_CSRF_ENABLED=False,
        RQ_ASYNC=False,
        STORAGE_BACKEND='local',
        LOCAL_STORAGE_DIR=str(tmp_path / 'storage'),
        COMPLETION_API_KEY=None,
    )
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    return register_user('analyst@example.com', PASSWORD, 'Ada Analyst')


@pytest.fixture
def other_user(app):
    return register_user('someone@example.com', PASSWORD, 'Someone Else')


@pytest.fixture
def identity(user):
    return Identity.from_user(user)


@pytest.fixture
def logged_in(client, user):
    resp = client.post('/auth/login', data={'email': user.email, 'password': PASSWORD})
    assert resp.status_code == 302
    return client


def audio_file(name='Interview_A.mp3', payload=b'ID3fake-audio-bytes'):
    return (BytesIO(payload), name)


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=''):
        self.status_code = status_code
        self._body = body
        self.text = text

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f'{self.status_code} error', response=self)

    def json(self):
        if self._body is None:
            raise ValueError('no JSON body')
        return self._body


def completion_body(content):
    return {'choices': [{'message': {'role': 'assistant', 'content': content}}]}

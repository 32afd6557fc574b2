import pytest
import requests

from conftest import FakeResponse, completion_body
from research_assistant.errors import CompletionEndpointError
from research_assistant.services.completion import SYSTEM_PROMPT, request_analysis


def test_missing_key_raises(app):
    with pytest.raises(CompletionEndpointError):
        request_analysis('hello')


def test_request_shape_and_content(app, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    captured = {}

    def fake_post(url, headers=None, json=None, timeout=None):
        captured.update(url=url, headers=headers, json=json)
        return FakeResponse(body=completion_body('analysis text'))

    monkeypatch.setattr('research_assistant.services.completion.requests.post', fake_post)
    assert request_analysis('the transcript') == 'analysis text'
    assert captured['url'] == app.config['COMPLETION_API_URL']
    assert captured['headers']['Authorization'] == 'Bearer sk-test'
    assert captured['json']['model'] == 'google/gemini-2.5-flash'
    messages = captured['json']['messages']
    assert [m['role'] for m in messages] == ['system', 'user']
    assert messages[0]['content'] == SYSTEM_PROMPT
    assert messages[1]['content'].endswith('the transcript')


def test_non_2xx_raises(app, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    monkeypatch.setattr('research_assistant.services.completion.requests.post',
                        lambda *a, **k: FakeResponse(status_code=429, text='rate limited'))
    with pytest.raises(CompletionEndpointError, match='429'):
        request_analysis('t')


def test_network_error_raises(app, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'

    def boom(*a, **k):
        raise requests.exceptions.ConnectionError('down')

    monkeypatch.setattr('research_assistant.services.completion.requests.post', boom)
    with pytest.raises(CompletionEndpointError):
        request_analysis('t')


def test_malformed_body_raises(app, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    monkeypatch.setattr('research_assistant.services.completion.requests.post',
                        lambda *a, **k: FakeResponse(body={'choices': []}))
    with pytest.raises(CompletionEndpointError):
        request_analysis('t')

import random

import pytest
import requests

from conftest import FakeResponse, completion_body
from research_assistant.errors import NotFoundError
from research_assistant.extensions import db
from research_assistant.jobs.process_audio import _run_process, process_transcript
from research_assistant.models import Insight, Transcript
from research_assistant.policy import insert_owned

SUMMARY = (
    "Key themes:\n"
    "- Recurring revenue growth of 150% year over year\n"
    "- Talent acquisition is the main scaling risk\n"
    "- Series B funding to support market expansion\n"
)


@pytest.fixture
def transcript(identity):
    return insert_owned(Transcript, identity, title='Interview A', file_name='Interview_A.mp3')


def _completion(monkeypatch, response):
    def fake_post(*args, **kwargs):
        if isinstance(response, Exception):
            raise response
        return response
    monkeypatch.setattr('research_assistant.services.completion.requests.post', fake_post)


def test_updates_text_duration_and_processed_at_together(app, transcript):
    result = process_transcript(transcript.id)
    tr = db.session.get(Transcript, transcript.id)
    assert result['success'] is True
    assert result['message'] == 'Audio processed successfully'
    assert result['transcript'] == tr.transcript_text
    assert tr.transcript_text.startswith('File: Interview_A.mp3')
    assert tr.processed_at is not None
    assert 300 <= tr.audio_duration < 3600


def test_no_key_means_no_insight(app, transcript, monkeypatch):
    def fail(*a, **k):
        raise AssertionError('completion endpoint must not be called')
    monkeypatch.setattr('research_assistant.services.completion.requests.post', fail)
    process_transcript(transcript.id)
    assert Insight.query.count() == 0


def test_insight_created_from_completion(app, transcript, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    _completion(monkeypatch, FakeResponse(body=completion_body(SUMMARY)))

    process_transcript(transcript.id)

    insights = Insight.query.filter_by(transcript_id=transcript.id).all()
    assert len(insights) == 1
    ins = insights[0]
    assert ins.user_id == transcript.user_id
    assert ins.summary_text == SUMMARY
    assert 0.85 <= ins.confidence_score < 1.0
    assert len(ins.key_points) <= 8
    assert ins.key_points[0] == 'Recurring revenue growth of 150% year over year'
    assert 3 <= len(ins.tags) <= 6
    assert 'revenue' in ins.tags and 'funding' in ins.tags


def test_confidence_always_in_range(app, identity, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    _completion(monkeypatch, FakeResponse(body=completion_body(SUMMARY)))
    rng = random.Random(11)
    for i in range(20):
        tr = insert_owned(Transcript, identity, title=f't{i}', file_name=f'f{i}.wav')
        _run_process(tr.id, rng=rng)
    scores = [i.confidence_score for i in Insight.query.all()]
    assert len(scores) == 20
    assert all(0.85 <= s < 1.0 for s in scores)


@pytest.mark.parametrize('response', [
    FakeResponse(status_code=500, text='upstream error'),
    requests.exceptions.ConnectionError('network down'),
    FakeResponse(body={'unexpected': True}),
])
def test_completion_failures_are_swallowed(app, transcript, monkeypatch, response):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    _completion(monkeypatch, response)

    result = process_transcript(transcript.id)

    assert result['success'] is True
    assert db.session.get(Transcript, transcript.id).processed_at is not None
    assert Insight.query.count() == 0


def test_insight_insert_failure_is_logged_only(app, transcript, monkeypatch):
    app.config['COMPLETION_API_KEY'] = 'sk-test'
    _completion(monkeypatch, FakeResponse(body=completion_body(SUMMARY)))

    def broken_insert(*a, **k):
        raise ValueError('confidence_score must lie in [0, 1]')
    monkeypatch.setattr('research_assistant.jobs.process_audio._create_insight', broken_insert)

    result = process_transcript(transcript.id)
    assert result['success'] is True
    tr = db.session.get(Transcript, transcript.id)
    assert tr.transcript_text is not None
    assert tr.insights == []


def test_missing_transcript_is_fatal(app):
    with pytest.raises(NotFoundError):
        process_transcript('00000000-0000-0000-0000-000000000000')


def test_http_endpoint_success(logged_in, transcript):
    resp = logged_in.post('/functions/process-audio', json={'transcriptId': transcript.id})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['success'] is True
    assert body['transcript'].startswith('File: Interview_A.mp3')


def test_http_endpoint_errors(logged_in):
    resp = logged_in.post('/functions/process-audio', json={'transcriptId': 'nope'})
    assert resp.status_code == 500
    assert 'Failed to fetch transcript' in resp.get_json()['error']

    resp = logged_in.post('/functions/process-audio', json={})
    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'Transcript ID is required'}

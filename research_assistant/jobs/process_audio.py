import random
from datetime import datetime, timezone

from flask import current_app, has_app_context
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..errors import CompletionEndpointError, NotFoundError
from ..models.transcript import Transcript
from ..models.insight import Insight
from ..services.completion import request_analysis
from ..services.insights import extract_key_points, generate_tags
from ..services.mock_transcript import generate_mock_transcript, random_duration

MIN_CONFIDENCE = 0.85
CONFIDENCE_SPAN = 0.15


def _create_insight(transcript, summary, rng=random):
    insight = Insight(
        transcript_id=transcript.id,
        user_id=transcript.user_id,
        summary_text=summary,
        key_points=extract_key_points(summary),
        tags=generate_tags(summary),
        confidence_score=MIN_CONFIDENCE + rng.random() * CONFIDENCE_SPAN,
    )
    db.session.add(insight)
    db.session.commit()
    return insight


def _run_process(transcript_id: str, rng=random):
    tr = db.session.get(Transcript, transcript_id)
    if tr is None:
        raise NotFoundError(f"Failed to fetch transcript: {transcript_id} not found")

    text = generate_mock_transcript(tr.file_name, rng=rng)
    try:
        tr.transcript_text = text
        tr.audio_duration = random_duration(rng=rng)
        tr.processed_at = datetime.now(timezone.utc)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    if current_app.config.get('COMPLETION_API_KEY'):
        # insights are best-effort: nothing below fails the job
        try:
            summary = request_analysis(text)
            _create_insight(tr, summary, rng=rng)
        except CompletionEndpointError:
            current_app.logger.exception('AI processing failed for transcript %s', transcript_id)
        except (SQLAlchemyError, ValueError):
            db.session.rollback()
            current_app.logger.exception('Failed to create insights for transcript %s', transcript_id)
    else:
        current_app.logger.info('No completion API key configured; skipping insights for %s', transcript_id)

    return {
        'success': True,
        'message': 'Audio processed successfully',
        'transcript': text,
    }


def process_transcript(transcript_id: str):
    """Job entrypoint for the processing step.

    Runs inside the current app context when there is one (inline
    execution); RQ workers get a fresh app.
    """
    if has_app_context():
        return _run_process(transcript_id)
    # lazy import to avoid circular imports at module import time
    from research_assistant import create_app
    app = create_app()
    with app.app_context():
        return _run_process(transcript_id)

from flask import current_app, jsonify, request
from flask_login import login_required
from . import bp
from ...jobs.process_audio import process_transcript


@bp.post("/process-audio")
@login_required
def process_audio():
    """HTTP entrypoint for the processing step: ``{"transcriptId": ...}``."""
    payload = request.get_json(silent=True) or {}
    transcript_id = payload.get('transcriptId')
    try:
        if not transcript_id:
            raise ValueError('Transcript ID is required')
        result = process_transcript(transcript_id)
    except Exception as e:
        current_app.logger.exception('Error processing audio')
        return jsonify({'error': str(e) or 'Unknown error occurred'}), 500
    return jsonify(result), 200

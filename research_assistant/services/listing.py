"""Read-side helpers for the dashboard and transcript list."""
from ..models.insight import Insight
from ..models.transcript import Transcript
from ..policy import Identity, scoped

RECENT_LIMIT = 5


def search_transcripts(transcripts, term):
    """Case-insensitive substring match on title, file name or text."""
    if not term:
        return list(transcripts)
    needle = term.lower()
    return [
        t for t in transcripts
        if needle in t.title.lower()
        or needle in t.file_name.lower()
        or (t.transcript_text and needle in t.transcript_text.lower())
    ]


def total_duration(transcripts):
    return sum(t.audio_duration or 0 for t in transcripts)


def list_transcripts(identity: Identity):
    return scoped(Transcript, identity).order_by(Transcript.created_at.desc()).all()


def dashboard_stats(identity: Identity):
    transcripts = list_transcripts(identity)
    return {
        'total_transcripts': len(transcripts),
        'total_insights': scoped(Insight, identity).count(),
        'total_duration': total_duration(transcripts),
        'recent_transcripts': transcripts[:RECENT_LIMIT],
    }

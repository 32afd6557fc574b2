from flask import render_template, request
from flask_login import login_required, current_user
from . import bp
from ...models.transcript import Transcript
from ...policy import Identity, get_owned_or_404
from ...services.listing import list_transcripts, search_transcripts, total_duration


@bp.get("")
@login_required
def list_view():
    identity = Identity.from_user(current_user)
    transcripts = list_transcripts(identity)
    q = request.args.get('q', '').strip()
    items = search_transcripts(transcripts, q)
    stats = {
        'total': len(transcripts),
        'total_duration': total_duration(transcripts),
        'total_insights': sum(len(t.insights) for t in transcripts),
    }
    return render_template("transcripts/list.html", items=items, stats=stats, q=q)


@bp.get("/<transcript_id>")
@login_required
def detail(transcript_id):
    identity = Identity.from_user(current_user)
    tr = get_owned_or_404(Transcript, identity, transcript_id)
    return render_template("transcripts/detail.html", transcript=tr, insights=tr.insights)

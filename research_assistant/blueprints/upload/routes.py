from flask import render_template, redirect, url_for, flash
from flask_login import login_required, current_user
from . import bp
from .forms import UploadForm
from ...errors import MissingInformationError, RecordCreationError, UploadError
from ...policy import Identity
from ...services import pipeline


@bp.route("", methods=["GET", "POST"])
@login_required
def upload():
    form = UploadForm()
    if not form.is_submitted():
        return render_template("upload.html", form=form)

    # reject before touching the database or the bucket
    if not form.validate():
        flash("Missing Information: Please select a file and provide a title.", "danger")
        return render_template("upload.html", form=form), 400

    identity = Identity.from_user(current_user)
    try:
        result = pipeline.upload_and_process(identity, form.file.data, form.title.data)
    except MissingInformationError as e:
        flash(f"Missing Information: {e}", "danger")
        return render_template("upload.html", form=form), 400
    except (RecordCreationError, UploadError) as e:
        flash(f"Upload Failed: {e}", "danger")
        return render_template("upload.html", form=form), 500

    if result.processed:
        flash("Processing Complete! Your transcript and insights are ready for review.", "success")
    else:
        flash("Processing Error: Audio uploaded but processing failed. Please try again later.", "danger")
    return redirect(url_for("transcripts.detail", transcript_id=result.transcript_id))

from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length

ACCEPTED_TYPES = "audio/*,video/*,.mp3,.wav,.m4a,.mp4,.mov,.avi"


class UploadForm(FlaskForm):
    title = StringField("Interview Title", validators=[DataRequired(), Length(max=500)],
                        render_kw={"placeholder": "e.g., Client Interview - Tech Startup A"})
    file = FileField("Audio File", validators=[FileRequired()], render_kw={"accept": ACCEPTED_TYPES})
    submit = SubmitField("Upload & Process")

from ..extensions import db
from .base import OwnerScopedMixin, TimestampMixin, new_id


class Transcript(db.Model, OwnerScopedMixin, TimestampMixin):
    __tablename__ = "transcripts"
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.Text, nullable=False)
    # original name of the uploaded file, extension included
    file_name = db.Column(db.Text, nullable=False)
    # both stay NULL until the processing step has run
    transcript_text = db.Column(db.Text, nullable=True)
    processed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    audio_duration = db.Column(db.Integer, nullable=True)  # seconds

    insights = db.relationship(
        "Insight",
        back_populates="transcript",
        cascade="all, delete-orphan",
        order_by="Insight.created_at",
    )

    def __repr__(self) -> str:
        return f"<Transcript id={self.id} title={self.title!r}>"

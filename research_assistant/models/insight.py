from sqlalchemy.orm import validates
from ..extensions import db
from .base import OwnerScopedMixin, TimestampMixin, new_id


class Insight(db.Model, OwnerScopedMixin, TimestampMixin):
    __tablename__ = "insights"
    __table_args__ = (
        db.CheckConstraint("confidence_score >= 0 AND confidence_score <= 1", name="ck_insights_confidence_range"),
    )
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    transcript_id = db.Column(db.String(36), db.ForeignKey("transcripts.id", ondelete="CASCADE"), nullable=False, index=True)
    summary_text = db.Column(db.Text, nullable=False)
    key_points = db.Column(db.JSON)  # ordered list of strings
    tags = db.Column(db.JSON)        # list of strings
    confidence_score = db.Column(db.Float)

    transcript = db.relationship("Transcript", back_populates="insights")

    @validates("confidence_score")
    def _check_confidence(self, key, value):
        if value is not None and not 0.0 <= float(value) <= 1.0:
            raise ValueError(f"confidence_score must lie in [0, 1], got {value}")
        return value

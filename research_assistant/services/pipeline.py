"""Upload-and-process workflow.

Three independent steps with no transaction around them: insert the
transcript row, upload the audio, invoke processing. Only an upload failure
is compensated (the fresh row is deleted); nothing is retried.
"""
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..errors import (
    MissingInformationError,
    PolicyViolation,
    ProcessingInvocationError,
    RecordCreationError,
    UploadError,
)
from ..extensions import db, rq
from ..jobs.process_audio import process_transcript
from ..models.transcript import Transcript
from ..policy import Identity, delete_owned, insert_owned
from .storage import object_key, upload_object


@dataclass
class PipelineResult:
    transcript_id: str
    storage_key: str
    processing_error: Optional[ProcessingInvocationError] = None

    @property
    def processed(self) -> bool:
        return self.processing_error is None


def invoke_processing(transcript_id: str):
    """Hand the transcript to the processing step.

    Only the invocation itself is observed: a queued job counts as success,
    and inline runs fail when the step raises.
    """
    try:
        return rq.enqueue(process_transcript, transcript_id)
    except Exception as e:
        raise ProcessingInvocationError(f"processing failed for {transcript_id}: {e}") from e


def upload_and_process(identity: Identity, file_storage, title: str) -> PipelineResult:
    file_name = getattr(file_storage, 'filename', None) if file_storage else None
    title = (title or '').strip()
    if not file_name or not title:
        raise MissingInformationError("Please select a file and provide a title.")

    # 1. transcript row first; its id names the stored object
    try:
        tr = insert_owned(Transcript, identity, title=title, file_name=file_name)
    except (PolicyViolation, SQLAlchemyError) as e:
        db.session.rollback()
        raise RecordCreationError(f"Failed to create transcript record: {e}") from e
    transcript_id = tr.id

    # 2. upload, deleting the row again if it fails
    key = object_key(identity.user_id, transcript_id, file_name)
    try:
        upload_object(file_storage, key)
    except UploadError:
        current_app.logger.warning('Upload of %s failed; removing transcript %s', key, transcript_id)
        delete_owned(Transcript, identity, transcript_id)
        raise

    # 3. processing; failures here leave the upload in place
    result = PipelineResult(transcript_id=transcript_id, storage_key=key)
    try:
        invoke_processing(transcript_id)
    except ProcessingInvocationError as e:
        current_app.logger.exception('Processing error for transcript %s', transcript_id)
        result.processing_error = e
    return result

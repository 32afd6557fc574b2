import os
from flask import current_app
import boto3
from botocore.client import Config

from ..errors import UploadError


def object_key(owner_id, transcript_id, file_name):
    """``{owner}/{transcript}.{ext}``; ext is everything after the last dot."""
    ext = file_name.rsplit('.', 1)[-1]
    return f"{owner_id}/{transcript_id}.{ext}"


def _bucket_dir():
    d = os.path.join(current_app.config['LOCAL_STORAGE_DIR'], current_app.config['AUDIO_BUCKET'])
    os.makedirs(d, exist_ok=True)
    return d


def local_path(key):
    return os.path.join(_bucket_dir(), *key.split('/'))


def _s3_client():
    # endpoint_url may be empty on AWS-managed S3
    s3_kwargs = {}
    endpoint = current_app.config.get('S3_ENDPOINT')
    if endpoint:
        s3_kwargs['endpoint_url'] = endpoint
    region = current_app.config.get('S3_REGION')
    if region:
        s3_kwargs['region_name'] = region

    s3_config = Config(signature_version='s3v4', s3={'addressing_style': 'virtual'})

    return boto3.client(
        's3',
        aws_access_key_id=current_app.config.get('S3_ACCESS_KEY'),
        aws_secret_access_key=current_app.config.get('S3_SECRET_KEY'),
        config=s3_config,
        **s3_kwargs,
    )


def upload_object(file_storage, key):
    """Write the uploaded file under ``key`` in the audio bucket.

    Existing objects are never overwritten. Any backend failure is raised as
    UploadError.
    """
    backend = current_app.config.get('STORAGE_BACKEND', 'local')
    bucket = current_app.config['AUDIO_BUCKET']
    stream = getattr(file_storage, 'stream', file_storage)

    if backend == 's3':
        try:
            s3 = _s3_client()
            s3.upload_fileobj(stream, bucket, key)
        except Exception as e:
            raise UploadError(f"Failed to upload file: {e}") from e
        return f"s3://{bucket}/{key}"

    path = local_path(key)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if os.path.exists(path):
            raise FileExistsError(f"object already exists: {key}")
        file_storage.save(path)
    except OSError as e:
        raise UploadError(f"Failed to upload file: {e}") from e
    return f"file://{os.path.abspath(path)}"

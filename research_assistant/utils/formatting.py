STATUS_PROCESSING = 'Processing'
STATUS_FAILED = 'Failed'
STATUS_READY = 'Ready'


def format_duration(seconds):
    if not seconds:
        return 'Unknown'
    hours = int(seconds) // 3600
    minutes = (int(seconds) % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_date(value):
    if value is None:
        return ''
    return value.strftime('%b %d, %Y %I:%M %p')


def transcript_status(transcript):
    if not transcript.processed_at:
        return STATUS_PROCESSING
    if not transcript.transcript_text:
        return STATUS_FAILED
    return STATUS_READY


def register_filters(app):
    app.add_template_filter(format_duration, 'duration')
    app.add_template_filter(format_date, 'datetime')
    app.add_template_filter(transcript_status, 'status')

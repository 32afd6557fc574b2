"""Thin client for the chat-completion endpoint.

We call the HTTP API directly with `requests` rather than through a vendor
SDK; only ``choices[0].message.content`` of the response is consumed.
"""

from flask import current_app
import requests

from ..errors import CompletionEndpointError

SYSTEM_PROMPT = (
    "You are an expert research analyst. Analyze the transcript and provide structured insights "
    "for private equity and consulting teams. Focus on key themes, risks, opportunities, and "
    "actionable recommendations."
)


def build_messages(transcript_text: str) -> list:
    return [
        {'role': 'system', 'content': SYSTEM_PROMPT},
        {'role': 'user', 'content': f"Please analyze this interview transcript and provide insights:\n\n{transcript_text}"},
    ]


def request_analysis(transcript_text: str) -> str:
    """Send one chat-completion request and return the assistant's text.

    Single attempt, no retry. Every failure mode (missing key, network error,
    non-2xx status, unexpected body) is raised as CompletionEndpointError.
    """
    api_key = current_app.config.get('COMPLETION_API_KEY')
    if not api_key:
        raise CompletionEndpointError('completion API key is not configured')

    url = current_app.config['COMPLETION_API_URL']
    headers = {'Authorization': f'Bearer {api_key}', 'Content-Type': 'application/json'}
    body = {
        'model': current_app.config['COMPLETION_MODEL'],
        'messages': build_messages(transcript_text),
    }

    try:
        r = requests.post(url, headers=headers, json=body, timeout=current_app.config.get('COMPLETION_TIMEOUT'))
        r.raise_for_status()
        jr = r.json()
    except requests.exceptions.HTTPError as e:
        status = getattr(e.response, 'status_code', None)
        text = getattr(e.response, 'text', '') or ''
        raise CompletionEndpointError(f'completion endpoint returned {status}: {text[:500]}') from e
    except (requests.exceptions.RequestException, ValueError) as e:
        raise CompletionEndpointError(f'completion request failed: {e}') from e

    try:
        return jr['choices'][0]['message']['content'] or ''
    except (KeyError, IndexError, TypeError) as e:
        raise CompletionEndpointError(f'unexpected completion response shape: {e}') from e

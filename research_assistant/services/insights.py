"""Heuristics that turn a free-text analysis into key points and tags."""
import re

MAX_KEY_POINTS = 8
FALLBACK_SENTENCES = 5
MAX_TAGS = 6
MIN_TAGS = 3

BULLET_CHARS = ('•', '-', '*')
_BULLET_RE = re.compile(r"[•\-*]")

BUSINESS_TAGS = [
    'growth', 'revenue', 'market-position', 'competition', 'scaling',
    'funding', 'technology', 'team', 'strategy', 'risks', 'opportunities',
    'product-development', 'customer-success', 'market-expansion', 'partnerships',
]
FILLER_TAGS = ['business-model', 'financial-performance', 'leadership']


def extract_key_points(summary: str) -> list:
    """Pick bullet-ish or medium-length lines out of ``summary``.

    A line counts when it contains a bullet character (all of which are
    stripped) or is 51-199 characters long. At most 8 are returned. When no
    line qualifies, the first 5 sentences longer than 30 characters are used.
    """
    lines = [line for line in summary.split('\n') if line.strip()]
    points = []
    for line in lines:
        if any(c in line for c in BULLET_CHARS):
            points.append(_BULLET_RE.sub('', line).strip())
        elif 50 < len(line) < 200:
            points.append(line.strip())

    if not points:
        sentences = [s for s in summary.split('.') if len(s.strip()) > 30]
        return [s.strip() + '.' for s in sentences[:FALLBACK_SENTENCES]]

    return points[:MAX_KEY_POINTS]


def generate_tags(summary: str) -> list:
    lowered = summary.lower()
    tags = [
        tag for tag in BUSINESS_TAGS
        if tag.replace('-', ' ', 1) in lowered or tag.replace('-', '', 1) in lowered
    ]
    if len(tags) < MIN_TAGS:
        tags.extend(FILLER_TAGS[:MIN_TAGS - len(tags)])
    return tags[:MAX_TAGS]

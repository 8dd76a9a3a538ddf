"""YouTube reference parsing for the careers page culture video."""

import re

EMBED_HOST = "https://www.youtube-nocookie.com/embed"

_VIDEO_ID = r"[a-zA-Z0-9_-]{11}"
_EMBED_RE = re.compile(rf"youtube(?:-nocookie)?\.com/embed/({_VIDEO_ID})")
_IFRAME_SRC_RE = re.compile(r"src=[\"']([^\"']*youtube[^\"']*?)[\"']")
_EMBED_PATH_RE = re.compile(rf"embed/({_VIDEO_ID})")
_WATCH_RE = re.compile(rf"(?:youtube\.com/watch\?v=|youtu\.be/)({_VIDEO_ID})")
_BARE_ID_RE = re.compile(_VIDEO_ID)


def extract_youtube_video_id(text: str | None) -> str | None:
    """Pull an 11-character video id out of whatever the user pasted.

    Accepts embed URLs (youtube.com or youtube-nocookie.com), a full
    ``<iframe>`` snippet, watch and youtu.be share URLs, or a bare id.
    The forms are tried in that order and the first match wins.

    Args:
        text: Raw user input. May be empty or ``None``.

    Returns:
        The video id, or ``None`` when nothing recognizable was found.
    """
    if not text:
        return None

    m = _EMBED_RE.search(text)
    if m:
        return m.group(1)

    m = _IFRAME_SRC_RE.search(text)
    if m:
        # A youtube src without an embed path falls through to the URL forms.
        inner = _EMBED_PATH_RE.search(m.group(1))
        if inner:
            return inner.group(1)

    m = _WATCH_RE.search(text)
    if m:
        return m.group(1)

    candidate = text.strip()
    if _BARE_ID_RE.fullmatch(candidate):
        return candidate

    return None


def get_youtube_embed_url(video_id: str) -> str:
    """Return the privacy-enhanced, controls-free embed URL for a video id."""
    return f"{EMBED_HOST}/{video_id}?controls=0"


def normalize_video_reference(text: str | None) -> str | None:
    vid = extract_youtube_video_id(text)
    if not vid:
        return None
    return get_youtube_embed_url(vid)

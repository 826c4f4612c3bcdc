"""Embedding of image, video and audio URLs.

Each embedder scans the whole content for ``http(s)`` URLs ending in one of
its file extensions and replaces the URL, together with any whitespace
around it, by an embed padded with a single space on each side. The
extension sets are disjoint, so the three scans can run in any order.
"""

from __future__ import annotations

import re


IMAGE_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "gif", "bmp")
VIDEO_EXTENSIONS: tuple[str, ...] = ("mp4", "webm", "ogg", "mov")
AUDIO_EXTENSIONS: tuple[str, ...] = ("mp3",)

DEFAULT_VIDEO_TYPE = "video/mp4"

VIDEO_TYPES: dict[str, str] = {
    "mp4": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
    "mov": "video/quicktime",
}


def _media_url_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(extensions)
    return re.compile(rf"\s*(https?://\S+\.({alternatives}))\s*", re.IGNORECASE)


_IMAGE_URL_RE = _media_url_pattern(IMAGE_EXTENSIONS)
_VIDEO_URL_RE = _media_url_pattern(VIDEO_EXTENSIONS)
_AUDIO_URL_RE = _media_url_pattern(AUDIO_EXTENSIONS)


def process_image_urls(content: str | None) -> str | None:
    """Replace image URLs with markdown images.

    Examples:
        ```python
        process_image_urls("check https://x.com/a.png out")
        # "check ![Image](https://x.com/a.png) out"
        ```
    """
    if content is None:
        return None
    return _IMAGE_URL_RE.sub(lambda m: f" ![Image]({m.group(1)}) ", content)


def process_video_urls(
    content: str | None,
    *,
    type_from_extension: bool = False,
) -> str | None:
    """Replace video URLs with ``<video>`` embeds.

    Args:
        content: Text to scan; ``None`` passes through.
        type_from_extension: Declare the media type matching the URL
            extension. When False every embed declares ``video/mp4``.
    """
    if content is None:
        return None

    def _embed(match: re.Match[str]) -> str:
        media_type = DEFAULT_VIDEO_TYPE
        if type_from_extension:
            media_type = VIDEO_TYPES[match.group(2).lower()]
        return f' <video controls><source src="{match.group(1)}" type="{media_type}"></video> '

    return _VIDEO_URL_RE.sub(_embed, content)


def process_audio_urls(content: str | None) -> str | None:
    """Replace audio URLs with ``<audio>`` embeds."""
    if content is None:
        return None
    return _AUDIO_URL_RE.sub(lambda m: f' <audio controls src="{m.group(1)}"></audio> ', content)

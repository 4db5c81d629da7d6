"""Render parsed songs as text."""
from enum import Enum

from .constants import CCLI_LICENSE_LINES, CCLI_LICENSE_NUMBER_LINE, CCLI_NUMBER_LINE
from .types import Song


class RenderFormat(Enum):
    """Text formats a Song can be rendered to."""
    PLAIN_TEXT = "plain_text"
    CCLI_TEXT = "ccli_text"


def render_plain(song: Song) -> str:
    """Slide texts separated by blank lines, ready for ProPresenter's plain text import."""
    lines = []
    for slide in song.slides:
        lines.extend([str(slide), ""])
    return "".join(f"{line}\n" for line in lines)


def render_ccli(song: Song) -> str:
    """Song in the layout of a CCLI SongSelect text report."""
    lines = [song.title, ""]
    for slide in song.slides:
        lines.extend([slide.ccli_heading, str(slide), "", ""])
    lines.extend([
        CCLI_NUMBER_LINE,
        song.artist or "",
        song.info or "",
        *CCLI_LICENSE_LINES,
        CCLI_LICENSE_NUMBER_LINE,
    ])
    return "".join(f"{line}\n" for line in lines)


RENDERERS = {
    RenderFormat.PLAIN_TEXT: render_plain,
    RenderFormat.CCLI_TEXT: render_ccli,
}


def render(song: Song, fmt: RenderFormat = RenderFormat.PLAIN_TEXT) -> str:
    if fmt not in RENDERERS:
        raise ValueError(f"Unknown render format: {fmt!r}")
    return RENDERERS[fmt](song)

"""Merge Presenter song metadata into ProPresenter 5 documents."""
import logging

from .document import ProPresenter5Document
from .errors import SlideCountMismatchError
from .types import Song

# Set up logger
logger = logging.getLogger(__name__)


def check_slide_counts(document: ProPresenter5Document, song: Song, source: str = "") -> None:
    """Raise SlideCountMismatchError unless slides and slide groups pair up one-to-one."""
    slide_groups = len(document.slide_groups)
    if len(song.slides) != slide_groups:
        raise SlideCountMismatchError(len(song.slides), slide_groups, source or song.title)


def update_from(
    document: ProPresenter5Document,
    song: Song,
    *,
    strict: bool = False,
    source: str = "",
) -> None:
    """
    Copy title, artist, copyright info, key and sequence from a Presenter song
    onto the document root and name the slide groups after the song's slides.

    Slides and slide groups are paired by position. When the counts differ the
    surplus on either side is left alone and a warning is logged, or with
    strict=True SlideCountMismatchError is raised before anything is changed.
    """
    if not isinstance(song, Song):
        raise TypeError(f"cannot convert {song!r}:{type(song).__name__} to Song")

    try:
        check_slide_counts(document, song, source)
    except SlideCountMismatchError as e:
        if strict:
            raise
        logger.warning(f"{e} - merging the first {min(e.slides, e.slide_groups)} only")

    doc = document.doc
    doc["CCLISongTitle"] = song.title
    # ProPresenter reads artist, CCLI reports read author
    doc["artist"] = song.artist or ""
    doc["author"] = song.artist or ""
    doc["CCLICopyRightInfo"] = song.info or ""
    doc["notes"] = song.notes

    for slide_group, slide in zip(document.slide_groups, song.slides):
        slide_group["name"] = slide.group_name

"""Presenter to ProPresenter 5 song migration."""

__version__ = "0.1.0"

# Public API
from .constants import DEFAULT_ENCODING
from .document import ProPresenter5Document
from .errors import MalformedInputError, MigrationError, SlideCountMismatchError
from .merge import check_slide_counts, update_from
from .parser import PresenterParser, parse_song
from .renderers import RenderFormat, render, render_ccli, render_plain
from .types import Slide, Song
from .utils import setup_logging

__all__ = [
    "DEFAULT_ENCODING",
    "Song",
    "Slide",
    "PresenterParser",
    "parse_song",
    "RenderFormat",
    "render",
    "render_plain",
    "render_ccli",
    "ProPresenter5Document",
    "update_from",
    "check_slide_counts",
    "MigrationError",
    "MalformedInputError",
    "SlideCountMismatchError",
    "setup_logging",
]

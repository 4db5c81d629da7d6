"""Parse Presenter song files into Song objects.

A Presenter file starts with a header (title, artist and dot directives)
followed by a body of slides. Slides are started by dot markers:

    .1 - .8   verse number
    .0 .*     chorus
    .9 ./     bridge
    .         blank line inside the current slide

Rules are checked in order and the first matching rule handles the line.
"""
import logging
import re
from enum import Enum
from typing import Callable

from .constants import BRIDGE, CHORUS, UNLABELLED, WHITESPACE
from .errors import MalformedInputError
from .types import Slide, Song

# Set up logger
logger = logging.getLogger(__name__)

# A line including its "\n", or a final unterminated line
LINE = re.compile(r"[^\n]*\n|[^\n]+")


class ParserState(Enum):
    """Which part of a Presenter file is being read."""
    HEADER = 1
    BODY = 2


Rule = tuple[re.Pattern, Callable[["PresenterParser", re.Match], None]]


def _set_field(name: str) -> Callable[["PresenterParser", re.Match], None]:
    """Header action storing the directive value in the named Song field."""
    def action(parser: "PresenterParser", match: re.Match) -> None:
        parser.fields[name] = match.group(1).strip(WHITESPACE)
    return action


class PresenterParser:
    """Line scanner that builds a Song from Presenter text."""

    def __init__(self) -> None:
        self.state = ParserState.HEADER
        self.title: str | None = None
        self.fields: dict[str, str] = {}
        self.slides: list[Slide] = []

    # --- Header actions ---
    def _end_header(self, match: re.Match) -> None:
        self.state = ParserState.BODY

    def _artist_or_end_header(self, match: re.Match) -> None:
        # A second bare line after the artist ends the header and is dropped
        if "artist" in self.fields:
            self.state = ParserState.BODY
        else:
            self.fields["artist"] = match.group(0)

    # --- Body actions ---
    def _start_slide(self, label: str = UNLABELLED) -> Slide:
        slide = Slide(label)
        self.slides.append(slide)
        return slide

    def _current_slide(self) -> Slide:
        return self.slides[-1] if self.slides else self._start_slide()

    def _start_chorus(self, match: re.Match) -> None:
        self._start_slide(CHORUS)

    def _start_bridge(self, match: re.Match) -> None:
        self._start_slide(BRIDGE)

    def _start_verse(self, match: re.Match) -> None:
        self._start_slide(match.group(1))

    def _blank_line(self, match: re.Match) -> None:
        self._current_slide().append(" \n")

    def _ignore(self, match: re.Match) -> None:
        pass

    def _start_unlabelled(self, match: re.Match) -> None:
        self._start_slide()

    def _append_line(self, match: re.Match) -> None:
        self._current_slide().append(match.string)

    HEADER_RULES: list[Rule] = [
        (re.compile(r"\.a(.*)"), _set_field("artist")),
        (re.compile(r"\.i(.*)"), _set_field("info")),
        (re.compile(r"\.s(.*)"), _set_field("sequence")),
        (re.compile(r"\.k(.*)"), _set_field("key")),
        (re.compile(r"\.b(.*)"), _set_field("background")),
        (re.compile(r"\s*$", re.ASCII), _end_header),
        (re.compile(r".*"), _artist_or_end_header),
    ]

    BODY_RULES: list[Rule] = [
        (re.compile(r"\.[0*]\s*$", re.ASCII), _start_chorus),
        (re.compile(r"\.[9/]\s*$", re.ASCII), _start_bridge),
        (re.compile(r"\.([1-8])\s*$", re.ASCII), _start_verse),
        (re.compile(r"\.\s*$", re.ASCII), _blank_line),
        (re.compile(r"\."), _ignore),  # e.g. .- .# .b
        (re.compile(r"\s*$", re.ASCII), _start_unlabelled),
        (re.compile(r".*", re.DOTALL), _append_line),
    ]

    def feed(self, line: str) -> None:
        """Consume a single line, including its line ending."""
        if self.state is ParserState.HEADER:
            line = line.strip(WHITESPACE)
            if self.title is None:
                # The first non-empty line is the title
                if line:
                    self.title = line
                return
            rules = self.HEADER_RULES
        else:
            rules = self.BODY_RULES

        for pattern, action in rules:
            match = pattern.match(line)
            if match:
                action(self, match)
                return

    def song(self) -> Song:
        """Build the Song from everything fed so far, dropping empty slides."""
        if self.title is None:
            raise MalformedInputError("Presenter song has no title line")
        song = Song(title=self.title, slides=list(self.slides), **self.fields)
        song.prune_empty_slides()
        return song


def parse_song(text: str) -> Song:
    """Parse decoded Presenter text into a Song."""
    parser = PresenterParser()
    # Only "\n" ends a line, U+0085 from Latin-1 files is lyric text
    for line in LINE.findall(text):
        parser.feed(line)
    song = parser.song()
    logger.debug(f"{song.title}: {len(song.slides)} slides parsed")
    return song

"""Song content types with data and methods."""
from dataclasses import dataclass, field

from .constants import UNLABELLED, WHITESPACE


@dataclass
class Slide:
    """A single lyric slide: a verse number, Chorus, Bridge or unlabelled ("-")."""
    label: str = UNLABELLED
    body: str = ""

    def append(self, text: str) -> None:
        self.body += text

    @property
    def is_empty(self) -> bool:
        return not self.body.strip(WHITESPACE)

    @property
    def is_verse(self) -> bool:
        return self.label.isdigit()

    @property
    def group_name(self) -> str:
        """Name given to the matching ProPresenter slide group."""
        return f"Verse {self.label}" if self.is_verse else self.label

    @property
    def ccli_heading(self) -> str:
        """Section heading used in CCLI song reports."""
        return f"Verse {self.label}" if self.is_verse else f"{self.label} 1"

    def __str__(self) -> str:
        return self.body.strip(WHITESPACE)


@dataclass
class Song:
    """Represents a Presenter song with header metadata and slides."""
    title: str
    artist: str | None = None
    info: str | None = None
    sequence: str | None = None
    key: str | None = None
    background: str | None = None  # Parsed but not carried over to ProPresenter
    slides: list[Slide] = field(default_factory=list)

    @property
    def notes(self) -> str:
        """Key and sequence lines for the ProPresenter notes field."""
        lines = [
            f"Key: {self.key}" if self.key is not None else None,
            f"Sequence: {self.sequence}" if self.sequence is not None else None,
        ]
        return "\n".join(line for line in lines if line is not None)

    def prune_empty_slides(self) -> None:
        self.slides = [slide for slide in self.slides if not slide.is_empty]

    def __str__(self) -> str:
        if self.artist:
            return f"{self.title} ({self.artist}) - {len(self.slides)} slides"
        return f"{self.title} - {len(self.slides)} slides"

"""Exceptions raised while migrating songs."""


class MigrationError(Exception):
    """Base class for song migration errors."""


class MalformedInputError(MigrationError):
    """Input is missing a structure the migration requires."""


class SlideCountMismatchError(MigrationError):
    """Parsed slides and ProPresenter slide groups cannot be paired one-to-one."""

    def __init__(self, slides: int, slide_groups: int, source: str = "") -> None:
        self.slides = slides
        self.slide_groups = slide_groups
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(
            f"{prefix}{slides} Presenter slides but {slide_groups} ProPresenter slide groups"
        )

"""
Pytest configuration and shared fixtures
"""

import pytest

SCENARIO = (
    "My Song\n"
    "Jane Doe\n"
    ".k G\n"
    ".s V1 C\n"
    "\n"
    ".1\n"
    "Line one\n"
    "Line two\n"
    "\n"
    ".0\n"
    "Chorus line\n"
)


def pro5_markup(slide_count: int) -> bytes:
    """Minimal ProPresenter 5 document with slide_count display slides"""
    slides = "".join(
        f'<RVDisplaySlide name="" UUID="slide-{i}" label=""/>' for i in range(slide_count)
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<RVPresentationDocument height="768" width="1024" versionNumber="500" '
        'CCLISongTitle="" artist="" author="" CCLICopyRightInfo="" notes="">'
        '<groups containerClass="NSMutableArray">'
        '<RVSlideGrouping name="Group" uuid="group-0">'
        f'<slides containerClass="NSMutableArray">{slides}</slides>'
        '</RVSlideGrouping>'
        '</groups>'
        '</RVPresentationDocument>'
    ).encode("utf-8")


@pytest.fixture
def scenario_text():
    """Presenter song with header directives, a verse and a chorus"""
    return SCENARIO


@pytest.fixture
def make_pro5():
    """Factory for .pro5 markup with a given number of slides"""
    return pro5_markup


@pytest.fixture
def song_dirs(tmp_path):
    """Presenter, ProPresenter and output directories for batch runs"""
    source = tmp_path / "presenter"
    propresenter = tmp_path / "propresenter_xml"
    source.mkdir()
    propresenter.mkdir()
    return source, propresenter, tmp_path / "out"

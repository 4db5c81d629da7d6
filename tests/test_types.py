"""
Tests for the Song and Slide types
"""

import pytest

from presenter_migrator.types import Slide, Song


class TestSlide:
    """Slide labels and emptiness"""

    def test_default_slide_is_unlabelled_and_empty(self):
        """Should default to the unlabelled marker with no body"""
        slide = Slide()
        assert slide.label == "-"
        assert slide.is_empty

    def test_whitespace_body_is_empty(self):
        """Should treat a whitespace-only body as empty"""
        assert Slide("1", " \n \n").is_empty
        assert not Slide("1", " \nx\n").is_empty

    def test_append(self):
        """Should accumulate appended text"""
        slide = Slide("2")
        slide.append("one\n")
        slide.append("two\n")
        assert slide.body == "one\ntwo\n"

    @pytest.mark.parametrize("label, group_name, ccli_heading", [
        ("1", "Verse 1", "Verse 1"),
        ("8", "Verse 8", "Verse 8"),
        ("Chorus", "Chorus", "Chorus 1"),
        ("Bridge", "Bridge", "Bridge 1"),
        ("-", "-", "- 1"),
    ])
    def test_names(self, label, group_name, ccli_heading):
        """Should name verses by number and other slides by label"""
        slide = Slide(label)
        assert slide.group_name == group_name
        assert slide.ccli_heading == ccli_heading

    def test_str_is_trimmed_body(self):
        """Should render as the trimmed body"""
        assert str(Slide("1", "  hello  \n")) == "hello"


class TestSongNotes:
    """Key and sequence notes"""

    def test_key_and_sequence(self):
        """Should put key and sequence on separate lines"""
        assert Song("T", key="G", sequence="V1 C V2").notes == "Key: G\nSequence: V1 C V2"

    def test_key_only(self):
        """Should omit the sequence line when no sequence is set"""
        assert Song("T", key="G").notes == "Key: G"

    def test_sequence_only(self):
        """Should omit the key line when no key is set"""
        assert Song("T", sequence="1 C").notes == "Sequence: 1 C"

    def test_neither(self):
        """Should be empty without key and sequence"""
        assert Song("T").notes == ""

    def test_prune_empty_slides(self):
        """Should drop empty slides and keep the rest in order"""
        song = Song("T", slides=[Slide("1", "a"), Slide("2", " "), Slide("Chorus", "c")])
        song.prune_empty_slides()
        assert [slide.label for slide in song.slides] == ["1", "Chorus"]

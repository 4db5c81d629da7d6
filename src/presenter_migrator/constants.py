"""Shared constants across the application."""

# Presenter files are single-byte Western text, and so are the rewritten .pro5 files
DEFAULT_ENCODING = "ISO-8859-1"

# Default directory layout, relative to the working directory
DEFAULT_SOURCE_DIR = "."
PLAIN_TEXT_DIR = "plain_text"
PROPRESENTER_DIR = "propresenter_xml"
MODIFIED_XML_DIR = "modified_xml"

# Presenter file glob
PRESENTER_GLOB = "*.txt"

# Default log file
DEFAULT_LOG_FILE = "migrator.log"

# Slide labels
CHORUS = "Chorus"
BRIDGE = "Bridge"
UNLABELLED = "-"

# ProPresenter 5 XML element names
DOCUMENT_TAG = "RVPresentationDocument"
SLIDE_GROUP_TAG = "RVDisplaySlide"

# CCLI song report footer
CCLI_NUMBER_LINE = "CCLI Number: -"
CCLI_LICENSE_LINES = (
    "For use within terms of license.",
    "All rights Reserved.  www.ccli.com",
)
CCLI_LICENSE_NUMBER_LINE = "CCLI License No. -"

# Blank-line detection and trimming only treat ASCII whitespace as blank
WHITESPACE = " \t\n\r\f\v"

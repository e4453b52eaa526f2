"""Checks that CHANGELOG.md and kmpsearch.__version__ stay in step."""

import re
from datetime import date
from pathlib import Path

import pytest

import kmpsearch

CHANGELOG = Path(__file__).parent.parent / "CHANGELOG.md"
HEADING = re.compile(r"^## (\d\d)\.(\d\d)\.(\d+)$", re.MULTILINE)


@pytest.fixture(scope="module")
def releases():
    # (year, month, patch) triples, newest first
    text = CHANGELOG.read_text()
    return [tuple(map(int, m.groups())) for m in HEADING.finditer(text)]


def test_newest_release_is_current_version(releases):
    assert ".".join(f"{part:02}" for part in releases[0]) == kmpsearch.__version__


def test_no_release_is_dated_in_the_future(releases):
    today = date.today()
    for year, month, _ in releases:
        assert (2000 + year, month) <= (today.year, today.month)


def test_releases_are_newest_first_and_numbered_per_month(releases):
    for older, newer in zip(releases[1:], releases):
        assert newer > older
        if newer[:2] == older[:2]:
            assert newer[2] == older[2] + 1
        else:
            assert newer[2] == 1

# tests/test_i18n.py
import sys

import pytest

from print_size_suggester import i18n
from print_size_suggester.utils.cli import parse_arguments


@pytest.mark.parametrize("argv, expected", [
    (["prog", "--lang", "ru", "photo.jpg"], "ru"),
    (["prog", "--lang=en", "-s", "10x10"], "en"),
    (["prog", "--lang", "de"], None),
    (["prog", "photo.jpg", "--lang"], None),
    (["prog", "photo.jpg"], None),
])
def test_detect_language_from_args(monkeypatch, argv, expected):
    monkeypatch.setattr(sys, "argv", argv)
    assert i18n.detect_language_from_args() == expected


def test_parse_arguments_does_not_rebind_translation():
    translate = i18n._
    args = parse_arguments(["--lang", "ru", "-s", "10x10"])

    assert args.lang == "ru"
    assert i18n._ is translate

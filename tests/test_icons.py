import pytest

from lsrender.icons import (
    DEFAULT_DIRECTORY_ICON,
    DEFAULT_EXTENSION_ICON,
    DEFAULT_FILE_ICON,
    Icons,
    icon_for_file,
    iconify_style,
)
from lsrender.style import Colour, Style


def test_name_takes_priority_over_extension():
    assert icon_for_file("Cargo.lock", "lock", False) == "\ue7a8"
    assert icon_for_file("x.lock", "lock", False) == "\uf023"


def test_name_takes_priority_over_directory():
    assert icon_for_file(".git", None, True) == "\uf1d3"


def test_named_directories():
    assert icon_for_file(".idea", None, True) == "\ue7b5"
    assert icon_for_file("bin", None, True) == icon_for_file("bin", None, False)


def test_plain_directory_gets_default_folder_icon():
    assert icon_for_file("src", None, True) == DEFAULT_DIRECTORY_ICON


def test_directory_ignores_extension():
    assert icon_for_file("foo.rs", "rs", True) == DEFAULT_DIRECTORY_ICON


def test_known_extension():
    assert icon_for_file("main.rs", "rs", False) == "\ue7a8"
    assert icon_for_file("lib.rlib", "rlib", False) == icon_for_file("main.rs", "rs", False)


def test_unknown_extension():
    assert icon_for_file("thing.qqq", "qqq", False) == DEFAULT_EXTENSION_ICON


def test_extension_lookup_is_case_sensitive():
    assert icon_for_file("A.RS", "RS", False) == DEFAULT_EXTENSION_ICON
    assert icon_for_file("a.DS_store", "DS_store", False) == icon_for_file("a.ds_store", "ds_store", False)


def test_no_extension():
    assert icon_for_file("README", None, False) == DEFAULT_FILE_ICON
    assert DEFAULT_FILE_ICON != DEFAULT_EXTENSION_ICON


@pytest.mark.parametrize(
    "icon, name, ext",
    [
        (Icons.IMAGE, "a.png", "png"),
        (Icons.IMAGE, "a.jpg", "jpg"),
        (Icons.AUDIO, "a.mp3", "mp3"),
        (Icons.AUDIO, "a.flac", "flac"),
        (Icons.VIDEO, "a.mkv", "mkv"),
        (Icons.VIDEO, "a.mp4", "mp4"),
    ],
)
def test_media_icons_match_extensions(icon, name, ext):
    assert icon.value() == icon_for_file(name, ext, False)


def test_icon_values_are_distinct():
    values = {Icons.AUDIO.value(), Icons.IMAGE.value(), Icons.VIDEO.value()}
    assert len(values) == 3


def test_iconify_prefers_background():
    assert iconify_style(Colour.RED.on(Colour.BLUE)) == Style(foreground=Colour.BLUE)


def test_iconify_uses_foreground_and_drops_attributes():
    assert iconify_style(Colour.RED.bold()) == Style(foreground=Colour.RED)
    assert iconify_style(Colour.GREEN.underline()) == Colour.GREEN.normal()


def test_iconify_plain_style():
    assert iconify_style(Style(is_bold=True)) == Style()
    assert iconify_style(Style()).is_plain()


def test_iconify_background_only():
    assert iconify_style(Style(background=Colour.CYAN)) == Style(foreground=Colour.CYAN)
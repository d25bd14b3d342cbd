"""Tests for grid and long listing text."""

from __future__ import annotations

import io
import unittest
from datetime import datetime
from pathlib import Path

from dirls.config import ListingLayout
from dirls.listing_model import DirectoryEntry
from dirls.options import Options
from dirls.render import format_name, format_timestamp, render_listing, write_listing
from dirls.ui_theme import DEFAULT_THEME

MTIME = datetime(2021, 3, 4, 5, 6)


def _file(name: str, size: int = 0) -> DirectoryEntry:
    return DirectoryEntry(name=name, path=Path(name), is_dir=False, size=size, mtime=MTIME, mode="-rw-r--r--")


def _dir(name: str) -> DirectoryEntry:
    return DirectoryEntry(name=name, path=Path(name), is_dir=True, size=4096, mtime=MTIME, mode="drwxr-xr-x")


class NameFormattingTests(unittest.TestCase):
    def test_names_with_spaces_are_quoted_and_others_are_not(self) -> None:
        layout = ListingLayout()
        self.assertEqual(format_name(_file("my notes.txt"), layout), "'my notes.txt'")
        self.assertEqual(format_name(_file("notes.txt"), layout), "notes.txt")

    def test_directory_marker_only_on_directories(self) -> None:
        layout = ListingLayout()
        self.assertEqual(format_name(_dir("src"), layout), "src\\")
        self.assertEqual(format_name(_dir("old stuff"), layout), "'old stuff'\\")
        self.assertFalse(format_name(_file("src"), layout).endswith("\\"))

    def test_layout_overrides_marker_and_quote(self) -> None:
        layout = ListingLayout(directory_marker="/", quote='"')
        self.assertEqual(format_name(_dir("a b"), layout), '"a b"/')

    def test_timestamp_pads_fields_except_year(self) -> None:
        self.assertEqual(format_timestamp(MTIME), "03/04/2021  05:06")
        self.assertEqual(format_timestamp(datetime(987, 12, 31, 23, 59)), "12/31/987  23:59")


class GridRenderTests(unittest.TestCase):
    def test_grid_groups_four_names_per_line_with_leading_newline(self) -> None:
        entries = [_file(f"f{idx}") for idx in range(6)]

        text = render_listing(entries, Path("/work"), Options())

        lines = text.split("\n")
        self.assertEqual(lines[0], "")
        self.assertEqual(lines[1], "".join(f"f{idx}".rjust(40) for idx in range(4)))
        self.assertEqual(lines[2], "f4".rjust(40) + "f5".rjust(40))
        self.assertTrue(text.endswith("f5\n\n"))
        self.assertEqual(lines[3:], ["", ""])

    def test_grid_contains_each_formatted_name_once(self) -> None:
        entries = [_file("a.txt", 10), _file("b c.txt", 5), _dir("docs")]

        text = render_listing(entries, Path("/work"), Options())

        expected = "\n" + "a.txt".rjust(40) + "'b c.txt'".rjust(40) + "docs\\".rjust(40) + "\n\n"
        self.assertEqual(text, expected)

    def test_empty_listing_is_only_trailing_newlines(self) -> None:
        self.assertEqual(render_listing([], Path("/work"), Options()), "\n\n")
        self.assertTrue(render_listing([], Path("/work"), Options(long_format=True)).endswith("----\n\n\n"))

    def test_grid_respects_layout_width_and_columns(self) -> None:
        layout = ListingLayout(names_per_line=2, name_width=6)
        entries = [_file("a"), _file("b"), _file("c")]

        text = render_listing(entries, Path("/work"), Options(), layout)

        self.assertEqual(text, "\n     a     b\n     c\n\n")


class LongRenderTests(unittest.TestCase):
    def test_long_listing_header_and_rows(self) -> None:
        entries = [_dir("docs"), _file("a.txt", 10), _file("big file.bin", 123456)]

        text = render_listing(entries, Path("/work/project"), Options(long_format=True))

        expected = (
            "\n\tDirectory: /work/project\n\n\n"
            "Mode \t\t LastWriteTime \t\t Length Name\n"
            "---- \t\t ------------- \t\t ------ ----\n"
            "drwxr-xr-x \t03/04/2021  05:06 \t\tdocs\\\n"
            f"-rw-r--r-- \t03/04/2021  05:06 {'10'.rjust(13)} a.txt\n"
            f"-rw-r--r-- \t03/04/2021  05:06 {'123456'.rjust(13)} 'big file.bin'\n"
            "\n\n"
        )
        self.assertEqual(text, expected)

    def test_directory_rows_never_show_their_size(self) -> None:
        text = render_listing([_dir("docs")], Path("/w"), Options(long_format=True))
        self.assertNotIn("4096", text)


class ColorRenderTests(unittest.TestCase):
    def test_color_wraps_names_without_changing_padding(self) -> None:
        theme = DEFAULT_THEME
        text = render_listing([_dir("docs")], Path("/w"), Options(), theme=theme)

        expected_padding = " " * (40 - len("docs\\"))
        self.assertEqual(text, f"\n{expected_padding}{theme.directory}docs\\{theme.reset}\n\n")

    def test_color_long_listing_paints_size_and_header(self) -> None:
        theme = DEFAULT_THEME
        text = render_listing([_file("a", 3)], Path("/w"), Options(long_format=True), theme=theme)

        self.assertIn(f"{theme.header}Directory: /w{theme.reset}", text)
        self.assertIn(f"{theme.size}{'3'.rjust(13)}{theme.reset} {theme.file}a{theme.reset}", text)


class WriteListingTests(unittest.TestCase):
    def test_write_listing_targets_given_stream(self) -> None:
        stream = io.StringIO()
        write_listing([_file("a")], Path("/w"), Options(), stream=stream)
        self.assertEqual(stream.getvalue(), "\n" + "a".rjust(40) + "\n\n")


if __name__ == "__main__":
    unittest.main()

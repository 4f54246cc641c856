from filesorter.core.models import SortBy

SORT_BY_ALIASES = {
    "alphabetical": SortBy.ALPHABETICAL,
    "alpha": SortBy.ALPHABETICAL,
    "name": SortBy.ALPHABETICAL,
    "created": SortBy.CREATED,
    "birth": SortBy.CREATED,
    "modified": SortBy.MODIFIED,
    "mtime": SortBy.MODIFIED,
    "natural": SortBy.NATURAL,
    "size": SortBy.SIZE,
}

SORT_BY_CHOICES = list(SORT_BY_ALIASES.keys())

SORT_BY_HELP_TEXT = (
    "Ordering criterion (default comes from the settings file, else alphabetical):\n"
    "  alphabetical, alpha, name : Path text, codepoint order\n"
    "  created, birth            : Creation (birth) time; where the platform records none (Linux)\n"
    "                              entries keep scan order within directories and within files\n"
    "  modified, mtime           : Modification time\n"
    "  natural                   : Path text with numbers compared by value (file2 < file10)\n"
    "  size                      : Own size; directories use --dir-sizes totals when available\n"
    "Example:\n"
    "  %(prog)s -i ~/Downloads --sort natural --insensitive"
)

EPILOG_TEXT = """
Examples:
  List a folder, directories first, alphabetical
  %(prog)s -i ~/Downloads

  Biggest entries first, with real directory totals
  %(prog)s -i ~/Downloads --sort size --reverse --dir-sizes

  Natural order, ignore case, mix directories with files
  %(prog)s -i ~/Music --sort natural --insensitive --no-dir-first

  Use defaults from a settings file ([manager] table)
  %(prog)s -i ~/Downloads --config ~/.config/filesorter.toml
"""

from comparetrees.core.models import MatchMode

DELETE_SWITCH = "/delete"

MATCH_MODE_ALIASES = {
    "size": MatchMode.SIZE,
    "name": MatchMode.NAME,
}

MATCH_MODE_CHOICES = list(MATCH_MODE_ALIASES.keys())

MATCH_MODE_HELP_TEXT = (
    "How destination candidates are selected before comparing content:\n"
    "  size : Compare against files of the same size (default)\n"
    "  name : Compare against files of the same file name\n"
)

COMPARATOR_CHOICES = ["auto", "diff", "filecmp"]

COMPARATOR_HELP_TEXT = (
    "Content comparison backend:\n"
    "  auto    : diff if installed, otherwise filecmp (default)\n"
    "  diff    : external 'diff --binary --brief'\n"
    "  filecmp : in-process byte comparison\n"
)

EPILOG_TEXT = """
If /delete is provided, files in the source directory are deleted if
they exist somewhere in the destination tree.

If files are deleted from a directory, the directory is deleted if it's empty.

Both directories are recursed and you are NOT asked to confirm file deletion.
USE AT OWN RISK!

Examples:
  Report which files of ~/inbox already exist in ~/archive
  %(prog)s ~/inbox ~/archive

  Delete them
  %(prog)s ~/inbox ~/archive /delete
"""

"""Shared constants for git-recent."""

# Only the most recently committed branches are listed
MAX_BRANCHES = 50

# Visual rows per branch in the selection table: header, summary, separator
ROWS_PER_RECORD = 3

# Length of the abbreviated commit sha shown in the table
SHORT_SHA_LENGTH = 8

CURRENT_BRANCH_MARKER = "* "
HIGHLIGHT_SYMBOL = ">> "
TABLE_TITLE = "Recent branches"

NOT_CLEAN_MESSAGE = "Repository is not in a clean state (in the middle of a merge?), aborting"
CHECKOUT_HINT = "Please commit your changes or stash them before you switch branches."
NOTHING_TO_DO_MESSAGE = "Nothing to do"

"""Constants and default values for git-new-branch."""

# Environment variable that replaces the system username as branch prefix
PREFIX_ENV_VAR = "GNB_PREFIX"

# Date used as the branch suffix when no description is given (YYMMDD)
DATE_FORMAT = "%y%m%d"

# Collision suffixes look like <base>_2, <base>_3, ...
SUFFIX_SEPARATOR = "_"
FIRST_SUFFIX = 2

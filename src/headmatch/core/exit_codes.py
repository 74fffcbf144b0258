# topmark:header:start
#
#   project      : HeadMatch
#   file         : exit_codes.py
#   file_relpath : src/headmatch/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the HeadMatch CLI.

HeadMatch aligns with the BSD `sysexits` convention where practical. The one
divergence is `WOULD_CHANGE=2`, returned by ``headmatch check`` when headers
need fixing and ``--apply`` was not given. Click also exits with 2 on usage
errors, so tests must assert ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the HeadMatch CLI.

    Attributes:
        SUCCESS: Successful execution, nothing to report.
        FAILURE: Generic failure.
        WOULD_CHANGE: Violations found; ``--apply`` would change files.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: A file is not valid UTF-8. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a file failed. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or invalid configuration. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

"""
Standard exit codes for versioninfo commands.

Following Unix/POSIX conventions for command-line tools.
"""
# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
CONFIG_ERROR = 66        # Manifest or configuration file error
PERMISSION_ERROR = 67    # Insufficient permissions
DATA_ERROR = 70          # Data format or validation error
VCS_ERROR = 72           # A git command failed
NO_MATCHING_VERSION = 73  # No released version matches the branch range
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'ValueError': DATA_ERROR,
    'KeyError': DATA_ERROR,
    'JSONDecodeError': DATA_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ManifestError(CommandError):
    """Raised when package.json is missing, unreadable or incomplete."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class RepoUrlError(CommandError):
    """Raised when the repository URL is not a github.com HTTPS clone URL."""
    def __init__(self, url):
        super().__init__(
            f"Unsupported repository url {url!r}: "
            "expected 'https://github.com/<owner>/<repo>.git'",
            DATA_ERROR
        )
        self.url = url


class CodeNameError(CommandError):
    """Raised when a release tag carries no codename annotation."""
    def __init__(self, tag: str):
        super().__init__(
            f"Could not extract release code name. The message of tag {tag} "
            "must match '*codename(some release name)*'",
            DATA_ERROR
        )
        self.tag = tag


class GitCommandError(CommandError):
    """Raised when a git command whose output is required fails."""
    def __init__(self, message: str):
        super().__init__(message, VCS_ERROR)


class NoMatchingVersionError(CommandError):
    """Raised when no previous release satisfies the branch version range."""
    def __init__(self, branch_version: str):
        super().__init__(
            f"No released version satisfies branchVersion {branch_version!r}; "
            "cannot compute a snapshot version",
            NO_MATCHING_VERSION
        )
        self.branch_version = branch_version

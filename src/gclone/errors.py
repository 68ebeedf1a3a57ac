class GcloneError(Exception):
    """Base class for every failure that ends a gclone invocation."""


class HomeDirectoryError(GcloneError):
    pass


class ConfigError(GcloneError):
    pass


class NotConfiguredError(GcloneError):
    pass


class UsageError(GcloneError):
    pass


class DirectoryError(GcloneError):
    pass


class CloneError(GcloneError):
    pass


class EditorError(GcloneError):
    pass

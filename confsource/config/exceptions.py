"""Exceptions raised while loading configuration."""


class ConfigError(Exception):
    """Malformed schema, file content that is not a mapping, or a missing required variable."""


class FileAccessError(OSError):
    """A referenced file does not exist or cannot be read."""

    def __init__(self, file_path: str, why: str = ""):
        """
        Args:
            file_path: File or directory path
            why: Optional reason
        """
        self.file_path = str(file_path)
        self.why = why
        if why:
            message = f"{why}: {self.file_path}"
        else:
            message = f"File operation failed: {self.file_path}"
        super().__init__(message)


class ContractViolationError(TypeError):
    """A source's import step returned something other than a mapping."""


__all__ = ["ConfigError", "FileAccessError", "ContractViolationError"]

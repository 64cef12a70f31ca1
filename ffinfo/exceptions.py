"""Custom exceptions for ffinfo"""

from typing import Optional


class FFInfoError(Exception):
    """Base exception for all ffinfo errors"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DeserializationError(FFInfoError):
    """ffprobe output could not be turned into a MediaFile"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(f"Deserialization error: {message}")


class InvocationError(FFInfoError):
    """ffprobe could not be run or exited with an error.

    The message is ffprobe's own diagnostic text, passed through unchanged.
    """
    def __init__(self, message: str, exit_code: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr

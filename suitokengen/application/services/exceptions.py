"""Custom exceptions for the Sui token generator services.

Every exception carries a stable ``kind`` string, which is what the HTTP API
puts on the wire and what the client uses to raise the matching class again.
"""

from typing import Dict, Optional, Type


class TokenGenError(Exception):
    """Base class for every error raised by the token generator."""

    kind = "token_gen_error"
    default_message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"error": self.kind, "message": self.message}


class ValidationError(TokenGenError):
    """Raised when a token parameter fails a domain rule.

    Attributes:
        field: The offending parameter (decimals, symbol, name, description)
    """

    kind = "validation_error"
    default_message = "Invalid token parameters"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Invalid {field} provided")

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class TemplateError(TokenGenError):
    """Raised when a template cannot be found or compiled."""

    kind = "template_error"
    default_message = "Template could not be loaded"


class RenderError(TemplateError):
    """Raised when a template references a variable that was not supplied."""

    kind = "render_error"
    default_message = "Template rendering failed"


class TamperedError(TokenGenError):
    """Raised when a contract does not match its regenerated canonical form."""

    kind = "tampered"
    default_message = "content mismatch detected"


class SourceAcquisitionError(TokenGenError):
    """Raised when a verification target cannot be resolved to Move sources."""

    kind = "source_acquisition_error"
    default_message = "Could not acquire contract sources"


class InvalidUrlError(SourceAcquisitionError):
    """Raised when a repository URL cannot be parsed."""

    kind = "invalid_url"
    default_message = "Invalid URL: malformed URL"


class UnsupportedRepositoryError(SourceAcquisitionError):
    """Raised when a URL is not a GitHub or GitLab repository URL."""

    kind = "unsupported_repository"
    default_message = "Invalid URL: not a GitHub or GitLab repository"


class GitCloneError(SourceAcquisitionError):
    """Raised when cloning a repository fails or times out.

    This is the one acquisition failure that may be transient.
    """

    kind = "git_clone_error"
    default_message = "Git operation failed"


class SourcePathNotFoundError(SourceAcquisitionError):
    """Raised when a local verification path does not exist."""

    kind = "path_not_found"
    default_message = "Invalid path: directory not found"


class MissingSourcesError(SourceAcquisitionError):
    """Raised when a cloned repository has no sources folder."""

    kind = "missing_sources"
    default_message = "Cloned repository has no sources folder"


class NoMoveFilesError(SourceAcquisitionError):
    """Raised when no Move file can be found at the verification target."""

    kind = "no_move_files"
    default_message = "Invalid path: no Move files in sources"


class UnsupportedSourceError(SourceAcquisitionError):
    """Raised when no fetcher is configured for the kind of verification target."""

    kind = "unsupported_source"
    default_message = "No source fetcher configured for this target"


class FileIOError(TokenGenError):
    """Raised when a filesystem read or write fails.

    Attributes:
        path: The path being accessed
        operation: What was attempted (read, write, create)
    """

    kind = "io_error"
    default_message = "File I/O error"

    def __init__(
        self,
        path: str,
        operation: str,
        reason: str = "",
        message: Optional[str] = None,
    ):
        self.path = str(path)
        self.operation = operation
        if message is None:
            message = f"Failed to {operation} {self.path}"
            if reason:
                message = f"{message}: {reason}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = super().to_dict()
        data["path"] = self.path
        data["operation"] = self.operation
        return data


class RPCConnectionError(TokenGenError):
    """Raised by the client when the RPC server cannot be reached."""

    kind = "rpc_connection_error"
    default_message = "Failed to initiate a connection to the RPC service"


ERROR_KINDS: Dict[str, Type[TokenGenError]] = {
    cls.kind: cls
    for cls in (
        TokenGenError,
        ValidationError,
        TemplateError,
        RenderError,
        TamperedError,
        SourceAcquisitionError,
        InvalidUrlError,
        UnsupportedRepositoryError,
        GitCloneError,
        SourcePathNotFoundError,
        MissingSourcesError,
        NoMoveFilesError,
        UnsupportedSourceError,
        FileIOError,
        RPCConnectionError,
    )
}


def error_from_dict(data: Dict[str, Optional[str]]) -> TokenGenError:
    """Rebuild an exception from its wire representation."""
    kind = data.get("error") or TokenGenError.kind
    message = data.get("message")
    error_cls = ERROR_KINDS.get(kind, TokenGenError)

    if error_cls is ValidationError:
        return ValidationError(data.get("field") or "input", message)
    if error_cls is FileIOError:
        return FileIOError(
            data.get("path") or "", data.get("operation") or "", message=message
        )
    return error_cls(message)

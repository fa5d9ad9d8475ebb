"""
Configuration validation module.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlparse


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


KNOWN_KEYS = [
    "LOG_LEVEL",
    "LOG_FILE",
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_URL",
    "REQUEST_TIMEOUT",
    "GIT_EXECUTABLE",
    "GIT_CLONE_TIMEOUT",
]


def validate_server_url(url: str) -> ValidationResult:
    """Validate the RPC server URL."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        return ValidationResult(False, "Invalid server URL scheme. Must be http or https")
    if not parsed.netloc:
        return ValidationResult(False, "Invalid server URL format")
    return ValidationResult(True, "Valid server URL")


def validate_port(value: str) -> ValidationResult:
    """Validate a TCP port number."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        return ValidationResult(False, "Port must be an integer")
    if not 0 < port < 65536:
        return ValidationResult(False, "Port must be between 1 and 65535")
    return ValidationResult(True, "Valid port")


def validate_timeout(value: str) -> ValidationResult:
    """Validate a timeout expressed in seconds."""
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return ValidationResult(False, "Timeout must be a number of seconds")
    if timeout <= 0:
        return ValidationResult(False, "Timeout must be positive")
    return ValidationResult(True, "Valid timeout")


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level and level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    log_dir = Path(path).parent
    if not log_dir.exists():
        return ValidationResult(False, f"Log directory does not exist: {log_dir}")
    return ValidationResult(True, "Valid log file path")


def validate_config(config: Dict[str, Optional[str]]) -> Dict[str, ValidationResult]:
    """Validate all configuration settings.

    Keys with a ``None`` value are treated as unset and skipped.
    """
    validators = {
        "LOG_LEVEL": validate_log_level,
        "LOG_FILE": validate_log_file,
        "SERVER_URL": validate_server_url,
        "SERVER_PORT": validate_port,
        "REQUEST_TIMEOUT": validate_timeout,
        "GIT_CLONE_TIMEOUT": validate_timeout,
    }

    results = {}
    for key, value in config.items():
        if value is None:
            continue
        if key not in KNOWN_KEYS:
            results[key] = ValidationResult(False, f"Invalid configuration key: {key}")
        elif key in validators:
            results[key] = validators[key](value)
    return results

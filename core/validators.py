"""
Core Validators

Shared validation functions for all modules.
"""

import os
from typing import Iterable, Optional


def validate_required_field(
    value: Optional[str],
    field_name: str,
    module_name: str = "Module"
) -> None:
    """
    Validate that a required field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages
        module_name: Name of the module for error messages

    Raises:
        ValueError: If value is None or empty
    """
    if not value or not value.strip():
        raise ValueError(
            f"{module_name}: {field_name} is required and cannot be empty."
        )


def validate_file_extension(
    filename: Optional[str],
    allowed: Iterable[str],
    module_name: str = "Module"
) -> str:
    """
    Validate a filename's extension against an allowed set.

    Args:
        filename: Original filename of the upload
        allowed: Allowed extensions, lowercase with leading dot
        module_name: Name of the module for error messages

    Returns:
        The lowercased extension

    Raises:
        ValueError: If the extension is not allowed
    """
    extension = os.path.splitext(filename or "")[1].lower()
    if extension not in set(allowed):
        raise ValueError(
            f"{module_name}: Unsupported file type '{extension or filename}'. "
            f"Supported types: {', '.join(sorted(allowed))}"
        )
    return extension


def validate_url(
    url: Optional[str],
    module_name: str = "Module"
) -> None:
    """
    Validate that a URL is present and uses http or https.

    Raises:
        ValueError: If the URL is empty or not http(s)
    """
    validate_required_field(url, "URL", module_name)
    if not url.strip().lower().startswith(("http://", "https://")):
        raise ValueError(f"{module_name}: URL must start with http:// or https://")

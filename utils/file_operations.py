"""File operation utilities for the token report application."""
import os
import json
import logging
import config

logger = logging.getLogger('debug')

SENSITIVE_KEYS = ('email',)


def resolve_data_path(file_name):
    """Resolve an input file name against the configured data folder.

    Absolute paths are returned unchanged.

    Args:
        file_name: File name or path of a JSON input

    Returns:
        str: Path to read the input from
    """
    return os.path.join(config.DATA_FOLDER, os.fspath(file_name))


def read_json_array(file_path):
    """Read a JSON file whose top level must be an array of objects.

    Args:
        file_path: Path to the JSON file

    Returns:
        list: The parsed array

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not valid JSON or not an array of objects
    """
    logger.debug(f"Reading file content: {file_path}")
    with open(file_path, 'r', encoding='utf-8') as file:
        data = json.load(file)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {file_path}, got {type(data).__name__}")

    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Expected an object at index {index} in {file_path}, got {type(item).__name__}")

    logger.debug(f"Read {len(data)} records from {file_path}")
    return data


def sanitize_data_for_logging(data):
    """Create a copy of data with sensitive information masked for safe logging.

    Args:
        data: Data structure to sanitize

    Returns:
        Data structure with email addresses masked
    """
    if data is None:
        return None

    # For primitive types, return as is
    if not isinstance(data, (dict, list)):
        return data

    # For lists, sanitize each element
    if isinstance(data, list):
        return [sanitize_data_for_logging(item) for item in data]

    # For dictionaries, sanitize each value
    sanitized = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS and isinstance(value, str):
            sanitized[key] = _mask_email(value)
        elif isinstance(value, (dict, list)):
            sanitized[key] = sanitize_data_for_logging(value)
        else:
            sanitized[key] = value

    return sanitized


def _mask_email(value):
    local, sep, domain = value.partition('@')
    if not sep:
        return '*' * len(value)
    return f"{local[:1]}{'*' * max(len(local) - 1, 0)}@{domain}"

import json
import os
import uuid
from typing import Any


def generate_data_source_id() -> str:
    """
    Generate the synthetic identifier assigned to a data source read.

    The handle is only meaningful for the read that produced it; it must not be
    used as a durable key.

    :return: Prefixed identifier string (e.g., "ds-<uuid>").
    """
    return f"ds-{uuid.uuid4()}"


def ensure_directory_exists(path: str) -> None:
    """
    Ensure that a directory exists. If it does not exist, create it.

    Args:
        path (str): The directory path to check or create.
    """
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def load_json_data(json_str: str = None, json_file: str = None) -> Any:
    """
    Load JSON data from a string or file.

    Args:
        json_str (str): JSON string input.
        json_file (str): Path to a JSON file.

    Returns:
        Any: Parsed JSON data as a Python object.

    Raises:
        ValueError: If neither `json_str` nor `json_file` is provided.
    """
    if json_str:
        return json.loads(json_str)

    if json_file:
        with open(json_file, "r") as f:
            return json.load(f)

    raise ValueError("Either `json_str` or `json_file` must be provided.")

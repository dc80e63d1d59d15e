"""
JSON loaders for matching inputs.

Reads profiles and opportunities in the camelCase shape produced by the
web client's profile store and opportunity feed.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from skillglobe.data.models import Opportunity, Profile
from skillglobe.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def _read_json(path: Path | str) -> Any:
    """Read and decode a JSON document."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _to_models(model_class: type[T], documents: Any) -> list[T]:
    """Validate a single document or a list of documents."""
    if isinstance(documents, dict):
        documents = [documents]
    return [model_class.model_validate(doc) for doc in documents]


def load_profiles(path: Path | str) -> list[Profile]:
    """
    Load profiles from a JSON file.

    Accepts a list of profiles, a single profile, or a user document
    with a ``profiles`` list.

    Args:
        path: Path to the JSON file

    Returns:
        Validated profiles in file order
    """
    data = _read_json(path)
    if isinstance(data, dict) and "profiles" in data:
        data = data["profiles"]

    profiles = _to_models(Profile, data)
    logger.debug(f"Loaded {len(profiles)} profile(s) from {path}")
    return profiles


def load_opportunities(path: Path | str) -> list[Opportunity]:
    """
    Load opportunities from a JSON file.

    Args:
        path: Path to a JSON file holding one opportunity or a list

    Returns:
        Validated opportunities in file order
    """
    opportunities = _to_models(Opportunity, _read_json(path))
    logger.debug(f"Loaded {len(opportunities)} opportunit(ies) from {path}")
    return opportunities

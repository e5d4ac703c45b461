"""Reading generation results and caching classification results as JSON."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from appsketch.models.classification import ClassificationResult
from appsketch.models.entities import GenerationResult


def load_generation_result(path: str | Path) -> GenerationResult:
    """Load a generation service response from a JSON file.

    Args:
        path: File holding the response body (camelCase keys accepted).

    Returns:
        Validated GenerationResult.

    Raises:
        FileNotFoundError: If path does not exist.
        pydantic.ValidationError: If the content is not a valid result.
    """
    p = Path(path)
    if not p.exists():
        msg = f"Generation result not found: {p}"
        raise FileNotFoundError(msg)

    result = GenerationResult.model_validate_json(p.read_text())
    logger.info(
        "Loaded generation result {app} from {path}: {n} entities",
        app=result.app_name,
        path=p,
        n=len(result.entities),
    )
    return result


def save_classification(result: ClassificationResult, output_path: str | Path) -> None:
    """Save a ClassificationResult to JSON.

    Args:
        result: The classification result to persist.
        output_path: File path to write the JSON to.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(indent=2))
    logger.info("Saved classification to {path}", path=path)


def load_classification(path: str | Path) -> ClassificationResult:
    """Load a saved ClassificationResult from JSON.

    Raises:
        FileNotFoundError: If path does not exist.
    """
    p = Path(path)
    if not p.exists():
        msg = f"Classification file not found: {p}"
        raise FileNotFoundError(msg)

    result = ClassificationResult.model_validate_json(p.read_text())
    logger.info(
        "Loaded classification from {path}: primary domain {primary}",
        path=p,
        primary=result.primary_domain.value,
    )
    return result

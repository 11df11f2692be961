"""Export functions for optimization results."""

import json
from pathlib import Path

from .config import load_json
from .exceptions import InvalidRequestError
from .models import OptimizationResult


def export_result_json(result: OptimizationResult, output_path: Path | str) -> None:
    """Export an optimization result to a JSON file.

    Args:
        result: OptimizationResult to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)


def load_result(input_path: Path | str) -> OptimizationResult:
    """Load an exported optimization result.

    Args:
        input_path: Path to a JSON file written by export_result_json

    Returns:
        OptimizationResult
    """
    data = load_json(input_path)
    try:
        return OptimizationResult.from_dict(data)
    except KeyError as e:
        raise InvalidRequestError(f"missing key {e}", "schedule") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidRequestError(str(e), "schedule") from e

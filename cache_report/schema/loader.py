# Copyright (c) Nex-AGI. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Report model loading.

Reads the input model either from a plain JSON file or from the data script
that accompanies an HTML report:

    function configurationCacheProblems() { return ({...}); }
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import ValidationError

from .batch_schema import BatchConfig, BatchEntry
from .report_schema import ReportModel

logger = logging.getLogger(__name__)

_DATA_SCRIPT_PATTERN = re.compile(
    r"return\s*\(?\s*(?P<model>\{.*\})\s*\)?\s*;?\s*\}\s*;?\s*$", re.DOTALL
)


def report_model_from_dict(data: Dict[str, Any]) -> ReportModel:
    """
    Validate an in-memory input model.

    Raises:
        ValueError: If the outer shape of the model is invalid
    """
    if not isinstance(data, dict):
        raise ValueError(
            f"Report model must be a JSON object, got {type(data).__name__}"
        )
    try:
        return ReportModel.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid report model: {e}") from e


def _extract_model_from_script(content: str) -> str:
    """Extract the JSON object returned by the data script"""
    match = _DATA_SCRIPT_PATTERN.search(content)
    if not match:
        raise ValueError("No 'return ({...})' model found in data script")
    return match.group("model")


def load_report_model(filepath: Union[str, Path]) -> ReportModel:
    """
    Load and validate a report model from disk.

    Args:
        filepath: Path to a `.json` model or a `.js` data script

    Returns:
        Validated ReportModel

    Raises:
        ValueError: If the file cannot be read, parsed or validated
    """
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ValueError(f"Cannot read report model {path}: {e}") from e

    try:
        if path.suffix == ".js":
            content = _extract_model_from_script(content)
        data = json.loads(content)
        model = report_model_from_dict(data)
    except (json.JSONDecodeError, ValueError) as e:
        raise ValueError(f"Invalid report model in {path}: {e}") from e

    logger.info(f"Loaded report model from {path}: {len(model.problems)} problems")
    return model


def load_batch_config(filepath: Union[str, Path]) -> List[BatchEntry]:
    """
    Load a YAML batch config listing the reports to render.

    Raises:
        ValueError: If the file cannot be read, parsed or validated
    """
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ValueError(f"Cannot read batch config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in batch config {path}: {e}") from e

    try:
        config = BatchConfig(entries=data or [])
    except ValidationError as e:
        raise ValueError(f"Invalid batch config {path}: {e}") from e

    logger.info(f"Loaded batch config from {path}: {len(config.entries)} reports")
    return config.entries

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
.env loader to populate environment variables from a file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env_file(env_path: Optional[Path]) -> bool:
    """
    Load key=value pairs from a .env file into os.environ.

    Existing environment variables take precedence and will not be overwritten.

    Returns:
        True if any variable was read from the file
    """
    if not env_path:
        return False
    env_path = Path(env_path)
    if not env_path.is_file():
        return False

    loaded = load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return loaded

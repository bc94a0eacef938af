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
Global configuration for the problem report
"""
import os

from ..problem_report.page_model import MESSAGE_TREE_TITLE, TASK_TREE_TITLE

# Report Configuration
# Reads from environment variables, see utils.env_loader for .env support
REPORT_CONFIG = {
    "message_tree_title": os.getenv("REPORT_MESSAGE_TREE_TITLE", MESSAGE_TREE_TITLE),
    "task_tree_title": os.getenv("REPORT_TASK_TREE_TITLE", TASK_TREE_TITLE),
    "page_title": os.getenv("REPORT_PAGE_TITLE", "Configuration cache report"),
    "output_dir": os.getenv("REPORT_OUTPUT_DIR", "build/reports"),
    "output_name": os.getenv(
        "REPORT_OUTPUT_NAME", "configuration-cache-report.html"
    ),
}

# Logging Configuration
LOGGING_CONFIG = {
    "level": os.getenv("REPORT_LOG_LEVEL", "INFO"),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "log_file": os.getenv("REPORT_LOG_FILE", ""),  # Empty: log to stdout only
}

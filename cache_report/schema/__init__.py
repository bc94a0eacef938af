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
Input schema and loading for configuration cache report models.
"""

from .batch_schema import BatchConfig, BatchEntry
from .loader import load_batch_config, load_report_model, report_model_from_dict
from .report_schema import RawMessageFragment, RawProblem, RawTraceEntry, ReportModel

__all__ = [
    "BatchConfig",
    "BatchEntry",
    "RawMessageFragment",
    "RawProblem",
    "RawTraceEntry",
    "ReportModel",
    "load_batch_config",
    "load_report_model",
    "report_model_from_dict",
]

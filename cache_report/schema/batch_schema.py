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
Batch Config Schema using Pydantic

A batch config is a YAML list of reports to render:

    - input: build/reports/configuration-cache/a/configuration-cache-report-data.js
      output: out/a.html
    - input: models/b.json
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BatchEntry(BaseModel):
    """One report to render"""

    model_config = ConfigDict(extra="forbid")

    input: str = Field(..., description="Path to the report model (.json or .js)")
    output: Optional[str] = Field(
        None, description="Path of the HTML file, defaults to the output dir"
    )

    @field_validator("input")
    def validate_input_not_empty(cls, v):
        if not v.strip():
            raise ValueError("Batch entry input must not be empty")
        return v


class BatchConfig(BaseModel):
    """Complete batch config"""

    entries: List[BatchEntry] = Field(..., description="Reports to render")

    @field_validator("entries")
    def validate_entries_not_empty(cls, v):
        if not v:
            raise ValueError("Batch config must list at least one report")
        return v

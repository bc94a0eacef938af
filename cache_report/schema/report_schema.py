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
Configuration Cache Report Input Schema using Pydantic

This module defines the data models for the problem report input model
written by the build next to the HTML report (`configuration-cache-report-data.js`).

Only the outer shape is validated strictly. Trace entries and message fragments
accept any value: extra fields are kept, field values are not type checked and
non-object entries are kept under `unparsed`, so that unrecognised shapes reach
the classifier and the text formatter, which degrade them instead of failing.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _wrap_unparsed(data: Any) -> Any:
    if isinstance(data, (dict, BaseModel)):
        return data
    return {"unparsed": data}


class RawMessageFragment(BaseModel):
    """One fragment of a problem message: literal text or a symbol reference"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    text: Any = Field(None, description="Literal message text")
    name: Any = Field(None, description="Referenced symbol name")
    unparsed: Any = Field(None, description="Non-object fragment as received")

    @model_validator(mode="before")
    @classmethod
    def wrap_non_object(cls, data):
        return _wrap_unparsed(data)


class RawTraceEntry(BaseModel):
    """
    One entry of a problem trace.

    `kind` selects which of the optional fields are meaningful:
    Task (path, type), Bean (type), Field (name, declaringType),
    InputProperty / OutputProperty (name, task).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    kind: Any = Field(None, description="Trace entry discriminator")
    path: Any = Field(None, description="Task path")
    type: Any = Field(None, description="Task or bean type")
    name: Any = Field(None, description="Field or property name")
    declaring_type: Any = Field(
        None, alias="declaringType", description="Type declaring the field"
    )
    task: Any = Field(None, description="Path of the task owning the property")
    unparsed: Any = Field(None, description="Non-object entry as received")

    @model_validator(mode="before")
    @classmethod
    def wrap_non_object(cls, data):
        return _wrap_unparsed(data)


class RawProblem(BaseModel):
    """A single recorded problem"""

    model_config = ConfigDict(populate_by_name=True)

    trace: List[RawTraceEntry] = Field(
        default_factory=list, description="Context entries, innermost first"
    )
    message: List[RawMessageFragment] = Field(
        default_factory=list, description="Message fragments"
    )
    error: Optional[str] = Field(None, description="Raw exception text, if any")
    documentation_link: Optional[str] = Field(
        None, alias="documentationLink", description="Documentation URL for the problem"
    )


class ReportModel(BaseModel):
    """Complete input model of a configuration cache report"""

    model_config = ConfigDict(populate_by_name=True)

    cache_action: str = Field(
        ..., alias="cacheAction", description="What the build did, e.g. 'storing'"
    )
    documentation_link: str = Field(
        ..., alias="documentationLink", description="Report documentation URL"
    )
    problems: List[RawProblem] = Field(
        default_factory=list, description="Recorded problems"
    )

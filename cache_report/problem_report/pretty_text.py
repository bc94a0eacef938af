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
Pretty Text

Structured problem messages: an ordered sequence of literal text fragments
and symbol references.
"""

import json
import logging
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ..schema.report_schema import RawMessageFragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    """Literal message text"""

    text: str


@dataclass(frozen=True)
class Reference:
    """Reference to a symbol (type, property, method...) rendered as code"""

    name: str


Fragment = Union[Text, Reference]


@dataclass(frozen=True)
class PrettyText:
    """Immutable message made of fragments"""

    fragments: Tuple[Fragment, ...] = ()

    def plain(self) -> str:
        """Concatenate all fragments without markup"""
        return "".join(
            f.text if isinstance(f, Text) else f"'{f.name}'" for f in self.fragments
        )


def _dump_fragment(fragment: RawMessageFragment) -> str:
    if "unparsed" in fragment.model_fields_set:
        data = fragment.unparsed
    else:
        data = fragment.model_dump(exclude_unset=True)
        data.update(fragment.model_extra or {})
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, default=str)


def to_fragment(fragment: RawMessageFragment) -> Fragment:
    """Convert one raw fragment, degrading unknown shapes to diagnostic text"""
    if isinstance(fragment.text, str):
        return Text(fragment.text)
    if isinstance(fragment.name, str):
        return Reference(fragment.name)

    dump = _dump_fragment(fragment)
    logger.warning(f"Unrecognised message fragment: {dump}")
    return Text(f"Unrecognised message fragment: {dump}")


def to_pretty_text(message: Iterable[RawMessageFragment]) -> PrettyText:
    """Convert raw message fragments into a PrettyText"""
    return PrettyText(tuple(to_fragment(fragment) for fragment in message))

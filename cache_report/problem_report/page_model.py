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
Report Page Model

Assembles the page-level model handed to the renderer: the report metadata
plus the two grouped trees.
"""

import logging
from dataclasses import dataclass

from ..schema.report_schema import ReportModel
from .paths import problem_nodes_by_message, problem_nodes_by_task
from .problem_nodes import LabelNode, ProblemNode, import_problem
from .tree import Tree, tree_model_for

logger = logging.getLogger(__name__)

MESSAGE_TREE_TITLE = "Problems grouped by message"
TASK_TREE_TITLE = "Problems grouped by task"


@dataclass(frozen=True)
class ReportPageModel:
    cache_action: str
    documentation_link: str
    total_problems: int
    message_tree: Tree[ProblemNode]
    task_tree: Tree[ProblemNode]


def report_page_model_from_model(
    model: ReportModel,
    message_tree_title: str = MESSAGE_TREE_TITLE,
    task_tree_title: str = TASK_TREE_TITLE,
) -> ReportPageModel:
    """
    Group the problems of `model` by message and by task.

    Args:
        model: Validated input model
        message_tree_title: Root label of the by-message tree
        task_tree_title: Root label of the by-task tree

    Returns:
        ReportPageModel with both trees rooted at expanded section labels
    """
    problems = [import_problem(problem) for problem in model.problems]

    page_model = ReportPageModel(
        cache_action=model.cache_action,
        documentation_link=model.documentation_link,
        total_problems=len(model.problems),
        message_tree=tree_model_for(
            LabelNode(message_tree_title), problem_nodes_by_message(problems)
        ),
        task_tree=tree_model_for(
            LabelNode(task_tree_title), problem_nodes_by_task(problems)
        ),
    )

    logger.info(
        f"Grouped {page_model.total_problems} problems into "
        f"{len(page_model.message_tree.children)} messages and "
        f"{len(page_model.task_tree.children)} tasks"
    )
    return page_model

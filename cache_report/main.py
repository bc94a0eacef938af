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
Main entry point for the configuration cache problem report

Command-line interface for rendering report models into HTML pages.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# IMPORTANT: Load .env files BEFORE importing config.settings
# This ensures environment variables are available when settings.py is loaded
from cache_report.utils.env_loader import load_env_file

package_dir = Path(__file__).parent
load_env_file(package_dir.parent / ".env")  # Project root
load_env_file(Path.cwd() / ".env")  # Current directory

# Now safe to import modules that use settings
from cache_report.config.settings import LOGGING_CONFIG, REPORT_CONFIG
from cache_report.problem_report import (
    ProblemReportVisualizer,
    report_page_model_from_model,
    tree_statistics,
)
from cache_report.schema import BatchEntry, load_batch_config, load_report_model

logger = logging.getLogger(__name__)


@dataclass
class ReportRunResult:
    """Result of rendering a single report"""

    input_path: str
    output_file: Optional[str] = None
    total_problems: int = 0
    statistics: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOGGING_CONFIG["format"],
        handlers=handlers,
        force=True,
    )


def default_output_path(input_path: Optional[str] = None) -> Path:
    """Output file under the configured output dir, named after the input if given"""
    output_dir = Path(REPORT_CONFIG["output_dir"])
    if input_path is None:
        return output_dir / REPORT_CONFIG["output_name"]
    return output_dir / f"{Path(input_path).stem}.html"


def render_report(input_path: str, output_path: Optional[str] = None) -> ReportRunResult:
    """
    Load a report model, group its problems and write the HTML page.

    Raises:
        ValueError: If the model cannot be loaded
        OSError: If the HTML file cannot be written
    """
    model = load_report_model(input_path)
    page_model = report_page_model_from_model(
        model,
        message_tree_title=REPORT_CONFIG["message_tree_title"],
        task_tree_title=REPORT_CONFIG["task_tree_title"],
    )

    visualizer = ProblemReportVisualizer(title=REPORT_CONFIG["page_title"])
    output_file = visualizer.generate_html(
        page_model, output_path or default_output_path()
    )

    return ReportRunResult(
        input_path=input_path,
        output_file=output_file,
        total_problems=page_model.total_problems,
        statistics={
            "message_tree": tree_statistics(page_model.message_tree),
            "task_tree": tree_statistics(page_model.task_tree),
        },
    )


def run_batch(entries: List[BatchEntry]) -> List[ReportRunResult]:
    """
    Render every report of a batch. A failing entry is recorded and the
    batch continues.
    """
    results = []

    for entry in entries:
        output_path = entry.output or str(default_output_path(entry.input))
        try:
            results.append(render_report(entry.input, output_path))
        except (ValueError, OSError) as e:
            logger.error(f"Batch report failed for {entry.input}: {e}")
            results.append(ReportRunResult(input_path=entry.input, errors=[str(e)]))

    return results


def print_result(result: ReportRunResult):
    print(f"\nReport for: {result.input_path}")
    if result.errors:
        print(f"Errors: {len(result.errors)}")
        for error in result.errors:
            print(f"  - {error}")
        return

    print(f"Problems: {result.total_problems}")
    for tree_name, stats in result.statistics.items():
        print(
            f"  {tree_name}: {stats.get('total_nodes', 0)} nodes, "
            f"{stats.get('total_leaves', 0)} leaves, "
            f"max depth {stats.get('max_depth', 0)}"
        )
    print(f"Output file: {result.output_file}")
    print(f"Open in browser: file://{Path(result.output_file).absolute()}")


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Render configuration cache problem reports"
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Report model: a .json file or a configuration-cache-report-data.js script",
    )
    parser.add_argument(
        "--output",
        type=str,
        help=f"Output HTML file (default: {default_output_path()})",
    )
    parser.add_argument(
        "--batch-config", type=str, help="Path to YAML file listing reports to render"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOGGING_CONFIG["level"].upper(),
        help="Logging level (default: REPORT_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    if not args.input and not args.batch_config:
        parser.error("an input model or --batch-config is required")

    setup_logging(args.log_level, LOGGING_CONFIG["log_file"] or None)

    try:
        if args.batch_config:
            results = run_batch(load_batch_config(args.batch_config))
            for result in results:
                print_result(result)

            failed = [result for result in results if result.errors]
            print(f"\nRendered {len(results) - len(failed)}/{len(results)} reports")
            if failed:
                sys.exit(1)
        else:
            print_result(render_report(args.input, args.output))

    except (ValueError, OSError) as e:
        logger.error(f"Report generation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

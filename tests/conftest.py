"""Shared fixtures for the problem report test suite."""
import sys
from pathlib import Path

import pytest

# Add project root to path so imports work without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cache_report.problem_report import import_problem  # noqa: E402
from cache_report.schema import RawProblem, report_model_from_dict  # noqa: E402


# ── Raw input data matching the report data script ──────────────────────

DOC_URL = "https://docs.gradle.org/current/userguide/configuration_cache.html"

TASK_A = {"kind": "Task", "path": ":app:compileJava", "type": "org.gradle.api.tasks.compile.JavaCompile"}
TASK_B = {"kind": "Task", "path": ":lib:jar", "type": "org.gradle.api.tasks.bundling.Jar"}

REPORT_MODEL = {
    "cacheAction": "storing",
    "documentationLink": DOC_URL,
    "problems": [
        {
            "trace": [
                {"kind": "Field", "name": "project", "declaringType": "com.acme.Helper"},
                {"kind": "InputProperty", "name": "helper", "task": ":app:compileJava"},
                TASK_A,
            ],
            "message": [
                {"text": "cannot serialize object of type "},
                {"name": "org.gradle.api.Project"},
            ],
            "documentationLink": DOC_URL + "#disallowed_types",
        },
        {
            "trace": [
                {"kind": "Bean", "type": "com.acme.Helper"},
                TASK_B,
            ],
            "message": [
                {"text": "cannot serialize object of type "},
                {"name": "org.gradle.api.Project"},
            ],
            "documentationLink": DOC_URL + "#disallowed_types",
        },
        {
            "trace": [
                {"kind": "OutputProperty", "name": "archive", "task": ":lib:jar"},
                TASK_B,
            ],
            "message": [{"text": "invocation of "}, {"name": "Task.project"}, {"text": " at execution time"}],
            "error": "java.lang.IllegalStateException: boom\n\tat Foo.bar(Foo.java:1)",
        },
        {
            "trace": [{"kind": "BuildLogic", "location": "build.gradle"}],
            "message": [{"text": "registration of listener on "}, {"name": "Gradle.buildFinished"}],
        },
    ],
}


def raw_problem(trace=None, message="bad value", error=None, documentation_link=None) -> RawProblem:
    return RawProblem.model_validate(
        {
            "trace": trace or [],
            "message": [{"text": message}],
            "error": error,
            "documentationLink": documentation_link,
        }
    )


def imported(trace=None, message="bad value", error=None, documentation_link=None):
    return import_problem(raw_problem(trace, message, error, documentation_link))


@pytest.fixture
def report_model_dict():
    return REPORT_MODEL


@pytest.fixture
def report_model():
    return report_model_from_dict(REPORT_MODEL)

import os
import sys
from textwrap import dedent

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from podlint.core.models import SourcePaths
from podlint.parsing.loader import load_documents
from podlint.validator.validator import validate

PATHS = SourcePaths(relative="pod.yaml", absolute="/manifests/pod.yaml")

VALID_POD = """\
apiVersion: v1
kind: Pod
metadata:
  name: ok
spec:
  containers:
  - name: ok
    image: registry.bigbrother.io/a/b:1
    resources: {}
"""


def run_lint(text):
    """Validates YAML text and returns the Diagnostic objects."""
    return validate(load_documents(dedent(text)), PATHS)


@pytest.fixture
def lint():
    """Returns the rendered diagnostic lines for a YAML snippet."""
    def _lint(text):
        return [str(d) for d in run_lint(text)]
    return _lint

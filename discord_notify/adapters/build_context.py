"""Build-context adapter for Jenkins-style environments.

Jenkins exports `JOB_NAME` and `BUILD_URL` to every build step. The current
result is not exported by default, so pipelines pass it explicitly, e.g.
`BUILD_RESULT="${currentBuild.currentResult}"`.
"""

from __future__ import annotations

import os
from typing import Mapping

from ..domain.models import BuildContext


def build_context_from_env(environ: Mapping[str, str] | None = None) -> BuildContext:
    env = os.environ if environ is None else environ
    return BuildContext(
        job_name=env.get("JOB_NAME"),
        build_url=env.get("BUILD_URL"),
        result=env.get("BUILD_RESULT") or env.get("CURRENT_RESULT"),
    )

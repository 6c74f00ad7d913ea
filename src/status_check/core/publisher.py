"""Build the check run for a finished run and post it."""

from __future__ import annotations

import logging

from status_check.core.github_client import CheckRunClient, CheckRunForbidden
from status_check.core.run_result import RunResult
from status_check.models.check_run import CheckConclusion, CheckRunRequest, PublishOutcome

logger = logging.getLogger(__name__)


def build_check_run(result: RunResult, head_sha: str) -> CheckRunRequest:
    """Return the check-run request describing ``result`` at ``head_sha``."""
    tool = result.tool_name
    word = "success" if result.success else "failure"
    annotations = list(result.annotations)
    return CheckRunRequest(
        name=tool,
        head_sha=head_sha,
        conclusion=CheckConclusion.SUCCESS if result.success else CheckConclusion.FAILURE,
        title=f"{tool} Check Run results",
        summary=f"{tool} result is {word} with {len(annotations)} diagnostics.",
        annotations=annotations,
    )


def publish(
    result: RunResult,
    client: CheckRunClient,
    owner: str,
    repo: str,
    head_sha: str,
) -> PublishOutcome:
    """Post the run as a single check run.

    A token without permission to create check runs (forks, restricted
    workflows) only produces a console warning. Other errors propagate.
    No retries.
    """
    request = build_check_run(result, head_sha)
    logger.debug(
        "Creating check run %r on %s/%s@%s with %d annotations",
        request.name, owner, repo, head_sha, len(request.annotations),
    )
    try:
        client.create_check_run(owner, repo, request)
    except CheckRunForbidden as e:
        result.reporter.write_text("===== WARNING: Could not create a check run.=====")
        result.reporter.write_text("Exception details:")
        result.reporter.write_text(str(e))
        logger.warning("Check run for %s was not posted to %s/%s: %s", request.name, owner, repo, e)
        return PublishOutcome.FORBIDDEN
    return PublishOutcome.PUBLISHED

"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from status_check.core.run_result import RunResult
from status_check.models.check_run import CheckRunRequest

console = Console()


def _request_to_dict(request: CheckRunRequest, owner: str = "", repo: str = "") -> dict[str, Any]:
    data = request.to_dict()
    if owner and repo:
        data["repository"] = f"{owner}/{repo}"
    return data


def output_run(
    result: RunResult,
    request: CheckRunRequest,
    fmt: str,
    owner: str = "",
    repo: str = "",
    out: Console | None = None,
) -> None:
    out = out or console
    if fmt == "json":
        data = _request_to_dict(request, owner, repo)
        out.print_json(json.dumps(data, indent=2, ensure_ascii=False))
    elif fmt == "yaml":
        data = _request_to_dict(request, owner, repo)
        text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        out.print(text, markup=False, soft_wrap=True)
    else:
        from status_check.output.tables import annotation_table, summary_line
        if result.annotations:
            out.print(annotation_table(result))
        out.print(summary_line(result))

"""Analyze command: scan a directory and report state management usage."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from hookscan.components.analysis.state_usage_comp import build_pattern_table
from hookscan.helpers.dto.analysis_dto import AnalysisResult
from hookscan.helpers.exceptions import HookscanError
from hookscan.helpers.logging_helper import configure_logging
from hookscan.interfaces.cli.cli_ui import print_error, print_info, print_success, print_warning
from hookscan.interfaces.cli.report import print_report
from hookscan.interfaces.cli.types.result_types import AnalysisResultResponse
from hookscan.services.config_svc import ConfigService
from hookscan.workflows.analyze_wf import analyze_state_workflow

if TYPE_CHECKING:
    import argparse


def result_to_json(result: AnalysisResult) -> str:
    """Serialize a result with camelCase keys, two-space indented."""
    payload = AnalysisResultResponse.from_dto(result).model_dump(by_alias=True)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def save_result(result: AnalysisResult, output_path: str | Path) -> Path:
    """Write the JSON result to ``output_path`` and return its absolute path."""
    absolute_path = Path(output_path).resolve()
    absolute_path.write_text(result_to_json(result), encoding="utf-8")
    return absolute_path


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze React state management under args.path."""
    cli_log_level = getattr(args, "log_level", None)
    # Handlers must exist before config loading so its warnings are formatted
    configure_logging(cli_log_level or "WARNING")

    try:
        config = ConfigService(getattr(args, "config", None)).get_config()
        configure_logging(cli_log_level or config["log_level"])
        patterns = build_pattern_table(config["extra_patterns"])
    except HookscanError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    print_info("\nStarting state analysis...\n")

    try:
        result = analyze_state_workflow(args.path, excluded_dirs=config["exclude_dirs"], patterns=patterns)
    except HookscanError as e:
        print_error(str(e))
        return 1

    if result.summary.total_components == 0:
        print_warning("No components found.\n")

    print_report(result, verbose=bool(getattr(args, "verbose", False)), top_limit=config["top_limit"])

    if getattr(args, "output", None):
        try:
            saved_to = save_result(result, args.output)
        except OSError as e:
            print_error(f"Could not write results to {args.output}: {e}")
            return 1
        print_success(f"Results saved to {saved_to}\n")

    return 0

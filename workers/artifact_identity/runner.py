"""
Runner — classify executable names for a project.

Ties together the policy loader, the codec and the report writer.
Build-discovery tooling hands over the names it found; names that do
not decode are excluded from the set with their error kind, not fatal.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from artifact_identity.config import settings
from artifact_identity.core.codec import decode
from artifact_identity.core.errors import ArtifactIdentityError
from artifact_identity.core.host import detect_host_platform
from artifact_identity.core.tokens import Platform
from artifact_identity.io.loader import load_policy_table
from artifact_identity.io.schema import (
    ArtifactCounts,
    ArtifactReport,
    ClassifiedArtifact,
    ExcludedArtifact,
)
from artifact_identity.io.writer import write_report
from artifact_identity.policy.naming import NamingPolicy

logger = logging.getLogger(__name__)


def classify_artifacts(
    file_names: Iterable[str],
    project_name: str,
    policy: NamingPolicy,
    host_platform: Optional[Platform] = None,
) -> ArtifactReport:
    """
    Decode every name in *file_names* for *project_name*.

    Duplicate names are classified once, in first-seen order.
    """
    if host_platform is None:
        host_platform = detect_host_platform()

    report = ArtifactReport(
        project_name=project_name,
        policy=policy.summary(),
        host_platform=host_platform.value,
    )
    counts = ArtifactCounts()
    seen = set()

    for file_name in file_names:
        if file_name in seen:
            continue
        seen.add(file_name)
        counts.total += 1

        try:
            ident = decode(file_name, project_name, policy, host_platform)
        except ArtifactIdentityError as exc:
            logger.debug("excluding %s: %s", file_name, exc)
            report.excluded.append(ExcludedArtifact(
                file_name=file_name,
                reason=exc.kind.value,
                message=exc.message,
                token=exc.token,
            ))
            counts.excluded += 1
            continue

        report.artifacts.append(ClassifiedArtifact.from_identity(file_name, ident))
        counts.classified += 1

    report.counts = counts
    logger.info(
        "%s: %d artifacts classified, %d excluded",
        project_name, counts.classified, counts.excluded,
    )
    return report


def run_from_paths(
    file_names: Iterable[str],
    project_name: str,
    policy_table_path: Optional[Path] = None,
    host_platform: Optional[Platform] = None,
    output_dir: Optional[Path] = None,
) -> ArtifactReport:
    """
    Look up *project_name* in the policy table and classify *file_names*.

    Parameters
    ----------
    policy_table_path : Path, optional
        JSON policy table.  Defaults to ``settings.POLICY_TABLE_PATH``.
    output_dir : Path, optional
        Directory to write the report into.  If None, nothing is
        written (API-only usage).

    Raises
    ------
    ValueError
        No policy table configured, or the table is invalid.
    MissingNamingPolicy
        The table has no entry for *project_name*.
    """
    if policy_table_path is None:
        if not settings.POLICY_TABLE_PATH:
            raise ValueError("no policy table given and POLICY_TABLE_PATH is unset")
        policy_table_path = Path(settings.POLICY_TABLE_PATH)

    table = load_policy_table(policy_table_path)
    policy = table.lookup(project_name)

    report = classify_artifacts(file_names, project_name, policy, host_platform)

    if output_dir:
        path = write_report(report, output_dir)
        logger.info("Wrote artifact report to %s", path)

    return report


# ── CLI ──────────────────────────────────────────────────────────────────────

def main():
    """CLI entry point for artifact_identity."""
    parser = argparse.ArgumentParser(
        description="artifact_identity — classify executable names by project, "
                    "platform, configuration and role",
    )
    parser.add_argument("project", help="Project name, e.g. FortniteGame")
    parser.add_argument(
        "names",
        nargs="+",
        help="Executable file names to classify",
    )
    parser.add_argument(
        "-p", "--policy-table",
        type=Path,
        default=None,
        help="JSON naming policy table (default: $ARTIFACT_IDENTITY_POLICY_TABLE_PATH)",
    )
    parser.add_argument(
        "--host-platform",
        default=None,
        help="Platform token for names without a platform suffix",
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help="Directory to write artifact_report.json",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        host = detect_host_platform(args.host_platform)
        report = run_from_paths(
            file_names=args.names,
            project_name=args.project,
            policy_table_path=args.policy_table,
            host_platform=host,
            output_dir=args.output_dir,
        )
    except (ArtifactIdentityError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    for a in report.artifacts:
        print(f"{a.file_name}: {a.platform} {a.configuration} {a.role}")
    for e in report.excluded:
        print(f"{e.file_name}: excluded ({e.reason})")

    print(f"Artifacts: {report.counts.total} "
          f"(classified={report.counts.classified}, "
          f"excluded={report.counts.excluded})")

    if args.output_dir:
        print(f"Report written to: {args.output_dir}")


if __name__ == "__main__":
    main()

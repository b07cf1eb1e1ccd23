"""
Writer — serialize the artifact report to JSON.

Filesystem layout:
    <output_dir>/<settings.REPORT_FILENAME>   (artifact_report.json)
"""
import json
from pathlib import Path
from typing import Optional

from artifact_identity.config import settings
from artifact_identity.io.schema import ArtifactReport


def write_report(
    report: ArtifactReport,
    output_dir: Path,
    filename: Optional[str] = None,
) -> Path:
    """
    Write the report into *output_dir*, creating it if needed.

    *filename* defaults to ``settings.REPORT_FILENAME``.
    Returns the path of the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / (filename or settings.REPORT_FILENAME)
    report_path.write_text(
        json.dumps(
            report.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )
    return report_path

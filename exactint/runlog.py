"""
Structured logging for validation runs.

Produces, inside the chosen output directory:
  - manifest.json:  one-time run metadata (git hash, versions, config)
  - checks.jsonl:   every check, pass or fail
  - failures.jsonl: failed checks only
"""

import hashlib
import json
import platform
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ValidationManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    node_name: str
    python_version: str
    numpy_version: str
    sympy_version: str
    exactint_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    return result.stdout.strip() if result.returncode == 0 else "unknown"


def config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def create_manifest(run_id: str, config: Dict[str, Any]) -> ValidationManifest:
    """Create a ValidationManifest with auto-detected metadata."""
    import numpy
    import sympy
    from . import __version__

    return ValidationManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=config_hash(config),
        node_name=platform.node(),
        python_version=sys.version,
        numpy_version=numpy.__version__,
        sympy_version=sympy.__version__,
        exactint_version=__version__,
        config=config,
    )


class ValidationLogger:
    """JSONL logger for one validation run.

    Writes two files:
      - checks.jsonl   (every check)
      - failures.jsonl (failed checks only)
    """

    def __init__(self, output_dir: Path, manifest: Optional[ValidationManifest] = None):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        if manifest is not None:
            manifest.save(self.output_dir / "manifest.json")

        self._checks_path = self.output_dir / "checks.jsonl"
        self._failures_path = self.output_dir / "failures.jsonl"

        # Append mode so reruns into the same directory accumulate
        self._checks_f = open(self._checks_path, 'a')
        self._failures_f = open(self._failures_path, 'a')

        self._checks_count = 0
        self._failures_count = 0

    def log_check(self, section: str, name: str, passed: bool, detail: str = ""):
        """Log one check result."""
        record = {
            "section": section,
            "name": name,
            "passed": passed,
            "detail": detail,
            "timestamp": time.time(),
        }
        line = json.dumps(record, default=str) + "\n"
        self._checks_f.write(line)
        self._checks_count += 1
        if not passed:
            self._failures_f.write(line)
            self._failures_f.flush()
            self._failures_count += 1

    def close(self):
        """Flush and close all log files."""
        for f in [self._checks_f, self._failures_f]:
            f.flush()
            f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "checks_logged": self._checks_count,
            "failures_logged": self._failures_count,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

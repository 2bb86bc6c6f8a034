from .core import run_case, run_batch
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "timestamp_id",
           "git_commit_or_unknown"]

"""Bucket color maps."""

from update_manager.models import Bucket

BUCKET_COLORS: dict[Bucket, str] = {
    Bucket.SECURITY: "red bold",
    Bucket.UNSUPPORTED: "magenta",
    Bucket.RECOMMENDED: "yellow",
    Bucket.MANUAL: "cyan",
    Bucket.NOT_COMPATIBLE: "dim",
}


def styled_bucket(bucket: Bucket) -> str:
    color = BUCKET_COLORS.get(bucket, "white")
    return f"[{color}]{bucket.value}[/{color}]"


def bucket_row_style(bucket: Bucket) -> str:
    return "red" if bucket == Bucket.SECURITY else ""

"""Turn a project selection into a download batch job."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from update_manager.models.batch import PROJECT_GET_CALLBACK, BatchJob, BatchOperation

logger = logging.getLogger(__name__)


def build_download_job(
    selected: Iterable[str],
    downloads: Mapping[str, str],
) -> BatchJob:
    """Build one fetch step per selected project, in selection order.

    The job is only described here; running it is up to the caller's batch runner.
    """
    operations: list[BatchOperation] = []
    for name in selected:
        url = downloads.get(name)
        if url is None:
            logger.debug("No download recorded for %s", name)
        operations.append(BatchOperation(PROJECT_GET_CALLBACK, (name, url)))
    return BatchJob(operations=operations)

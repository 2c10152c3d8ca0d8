from __future__ import annotations

from gedcom_importer.core.context import ImportContext


def flush_batch(ctx: ImportContext, processed: int) -> None:
    """Flush pending rows once every ``ctx.batch_size`` records."""
    if ctx.batch_size > 0 and processed % ctx.batch_size == 0:
        ctx.store.flush()

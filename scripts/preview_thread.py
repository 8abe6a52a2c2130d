#!/usr/bin/env python3
"""Print the comment thread of one content item as the reader would see it.

Usage:
    python scripts/preview_thread.py <content_item_id> [page]
"""

import asyncio
import sys

import logfire

from discuss.config import Settings
from discuss.domain.value import CommentQuery, ContentItemId
from discuss.interface.view import CommentsSection, render_thread
from discuss.util.di.container import create_container
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


async def preview(content_item_id: str, page: int) -> str:
    container = create_container()
    try:
        async with container() as request_container:
            section = await CommentsSection.from_container(
                request_container,
                ContentItemId(content_item_id),
                query=CommentQuery(page=page),
            )
            await section.load()
            if section.error is not None:
                return f"error: {section.error.message}"
            header = (
                f"{section.page.total} comments, "
                f"page {section.page.page}/{section.page.total_pages}"
            )
            return header + "\n" + render_thread(
                section.nodes(), section.ui_state.is_expanded
            )
    finally:
        await container.close()


def main() -> int:
    """Render a thread and log any failure to Logfire."""
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    page = int(sys.argv[2]) if len(sys.argv) > 2 else 1
    try:
        print(asyncio.run(preview(sys.argv[1], page)))
        return 0
    except Exception as e:
        logfire.error(
            "Thread preview failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

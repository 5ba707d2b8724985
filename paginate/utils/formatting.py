"""Page listing formatters."""
import json
from enum import Enum
from itertools import islice

from paginate.config import config


class ResponseFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"


def format_page(page, fmt: ResponseFormat = ResponseFormat.MARKDOWN) -> str:
    if fmt == ResponseFormat.JSON:
        return json.dumps(page.model_dump(), indent=2)
    if page.is_empty:
        return f"_Page {page.offset} is empty._"
    return f"**Page {page.offset}**: items {page.start}-{page.end} ({page.count})"


def format_pages(pages, fmt: ResponseFormat = ResponseFormat.MARKDOWN) -> str:
    """Render the pages of ``pages`` from offset 0.

    Iterates a restarted copy, so the caller's cursor is left as is.
    Markdown output only computes the first ``max_rendered_pages`` pages.
    """
    total = pages.page_count()
    if fmt == ResponseFormat.JSON:
        return json.dumps(
            {
                "length": pages.length,
                "limit": pages.limit,
                "page_count": total,
                "pages": [page.model_dump() for page in pages.restarted()],
            },
            indent=2,
        )
    if total == 0:
        return "_No pages._"
    cap = config.max_rendered_pages
    lines = [f"**{total} page(s) of {pages.length} item(s)**\n"]
    lines.append("| offset | count | start | end |")
    lines.append("| --- | --- | --- | --- |")
    for page in islice(pages.restarted(), cap):
        lines.append(f"| {page.offset} | {page.count} | {page.start} | {page.end} |")
    if total > cap:
        lines.append(f"\n_...and {total - cap} more pages_")
    return "\n".join(lines)

# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Page-bounded listing over GAPIC pagers.

GAPIC pagers transparently fetch further pages while being iterated. The
listing operations must never do that: they return one page and hand the
continuation token back to the caller. `take_page` reads only the first
response of a pager, which the pager already holds after the initial call.
"""

import itertools
from typing import Any


def take_page(pager: Any, field: str, page_size: int) -> tuple[list[Any], str]:
    """Take at most `page_size` items from the first page of a pager.

    Args:
        pager: A GAPIC pager (anything with a `pages` iterable of responses).
        field: Name of the repeated field holding the items on each response.
        page_size: Maximum number of items to return.

    Returns:
        The items and the response's `next_page_token` ('' on the last page).
    """
    page = next(iter(pager.pages), None)
    if page is None:
        return [], ''
    items = list(itertools.islice(getattr(page, field), page_size))
    return items, page.next_page_token or ''

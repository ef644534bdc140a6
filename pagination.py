from dataclasses import dataclass


def page_count(total_records: int, page_size: int) -> int:
    total_records = max(0, total_records)
    if total_records == 0:
        return 1
    return (total_records - 1) // page_size + 1


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of the navigation bar for one (total, config, page) triple."""

    current_page: int
    total_pages: int
    middle_button_count: int
    visible_button_count: int
    visible_page_numbers: tuple[int, ...]
    show_prev_ellipsis: bool
    show_next_ellipsis: bool
    show_first_button: bool
    show_last_button: bool
    prev_enabled: bool
    next_enabled: bool

    @property
    def body_button_count(self) -> int:
        return self.visible_button_count - 2

    @property
    def quick_jump_step(self) -> int:
        return self.body_button_count


def compute_state(
    requested_page: int, total_pages: int, middle_button_count: int
) -> PaginationState:
    total_pages = max(1, total_pages)
    current = clamp_page(requested_page, total_pages)

    visible = min(total_pages, middle_button_count) + 2
    half = (visible - 1) // 2
    body = visible - 2

    show_prev = total_pages > visible and current > visible - half
    # body == total_pages - 1 means the body already reaches the last page
    not_last_to_end = body != total_pages - 1
    show_next = (
        total_pages > middle_button_count
        and not_last_to_end
        and current < total_pages - half
    )

    pages = _window(current, total_pages, middle_button_count, visible, show_prev, show_next)

    return PaginationState(
        current_page=current,
        total_pages=total_pages,
        middle_button_count=middle_button_count,
        visible_button_count=visible,
        visible_page_numbers=tuple(pages),
        show_prev_ellipsis=show_prev,
        show_next_ellipsis=show_next,
        show_first_button=show_prev or not not_last_to_end,
        show_last_button=show_next,
        prev_enabled=current != 1,
        next_enabled=current != total_pages,
    )


def _window(current, total_pages, middle_button_count, visible, show_prev, show_next):
    body = visible - 2
    if show_prev and not show_next:
        start = total_pages - body + 1
        return list(range(start, total_pages + 1))
    if show_next and not show_prev:
        # first-page slot is hidden here, so the body starts at page 1
        return list(range(1, body + 1))
    if show_prev and show_next:
        offset = visible // 2 - 1
        return list(range(current - offset, current + offset + 1))[:body]
    if total_pages <= middle_button_count:
        return [i - 1 for i in range(2, visible)]
    return list(range(2, visible))

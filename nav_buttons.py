from dataclasses import dataclass
from typing import Optional

from pagination import PaginationState

ELLIPSIS_LABEL = "…"

ROLES = (
    "total",
    "prev",
    "first",
    "quick_prev",
    "page",
    "quick_next",
    "last",
    "next",
)


@dataclass(frozen=True)
class ButtonDescriptor:
    role: str
    label: str
    target: Optional[int] = None
    visible: bool = True
    enabled: bool = True
    current: bool = False


def build_buttons(state: PaginationState, total_records: int) -> list[ButtonDescriptor]:
    """Describe every navigation control, in display order, for ``state``.

    Targets may fall outside ``[1, total_pages]`` (quick jumps near either end);
    the engine clamps them when a descriptor is activated.
    """
    cur = state.current_page
    step = state.quick_jump_step
    buttons = [
        ButtonDescriptor("total", f"Total {total_records}", enabled=False),
        ButtonDescriptor("prev", "<", target=cur - 1, enabled=state.prev_enabled),
        ButtonDescriptor(
            "first",
            "1",
            target=1,
            visible=state.show_first_button,
            current=cur == 1,
        ),
        ButtonDescriptor(
            "quick_prev",
            ELLIPSIS_LABEL,
            target=cur - step,
            visible=state.show_prev_ellipsis,
        ),
    ]
    for number in state.visible_page_numbers:
        buttons.append(
            ButtonDescriptor("page", str(number), target=number, current=number == cur)
        )
    buttons.extend(
        [
            ButtonDescriptor(
                "quick_next",
                ELLIPSIS_LABEL,
                target=cur + step,
                visible=state.show_next_ellipsis,
            ),
            ButtonDescriptor(
                "last",
                str(state.total_pages),
                target=state.total_pages,
                visible=state.show_last_button,
                current=cur == state.total_pages,
            ),
            ButtonDescriptor("next", ">", target=cur + 1, enabled=state.next_enabled),
        ]
    )
    return buttons


def visible_buttons(buttons: list[ButtonDescriptor]) -> list[ButtonDescriptor]:
    return [b for b in buttons if b.visible]

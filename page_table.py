import logging
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from dataset_store import DatasetStore, InvalidArgument, Record
from default_rows import default_header
from nav_buttons import ROLES, ButtonDescriptor, build_buttons
from pagination import PaginationState, compute_state, page_count

logger = logging.getLogger("pagetable.page_table")

DEFAULT_PAGE_SIZE = 25
DEFAULT_MIDDLE_BUTTON_COUNT = 10


class Operation(Enum):
    APPEND = 0
    MODIFY = 1
    DELETE = 2


class PageTable:
    """Paginated record collection with a computed navigation window.

    All calls run to completion synchronously. A single owner drives the
    engine; callers on other threads must serialize into it.
    """

    def __init__(
        self,
        initial_rows: Iterable[Iterable] = (),
        header: Optional[Sequence[str]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        middle_button_count: int = DEFAULT_MIDDLE_BUTTON_COUNT,
    ):
        if page_size <= 0:
            raise InvalidArgument(f"page_size must be positive, got {page_size}")
        if middle_button_count < 1:
            raise InvalidArgument(
                f"middle_button_count must be at least 1, got {middle_button_count}"
            )
        self._page_size = page_size
        self._middle_button_count = middle_button_count
        self._header = list(header) if header else default_header()
        self._store = DatasetStore(initial_rows)
        self._page_handlers: list[Callable[[int], None]] = []
        self._data_handlers: list[Callable[[], None]] = []
        self._state = compute_state(1, self.page_count, middle_button_count)

    # ----- accessors -----
    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def middle_button_count(self) -> int:
        return self._middle_button_count

    @property
    def header(self) -> list[str]:
        return list(self._header)

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def page_count(self) -> int:
        return page_count(self._store.total, self._page_size)

    @property
    def total(self) -> int:
        return self._store.total

    @property
    def state(self) -> PaginationState:
        return self._state

    def all_data(self) -> list[Record]:
        return self._store.records

    def current_page_data(self) -> list[Record]:
        return self._store.page_slice(self.current_page, self._page_size)

    def current_page_bounds(self) -> tuple[int, int]:
        return self._store.slice_bounds(self.current_page, self._page_size)

    def buttons(self) -> list[ButtonDescriptor]:
        return build_buttons(self._state, self.total)

    # ----- notifications -----
    def on_current_page_changed(self, handler: Callable[[int], None]) -> Callable[[], None]:
        self._page_handlers.append(handler)
        return lambda: self._unsubscribe(self._page_handlers, handler)

    def on_data_changed(self, handler: Callable[[], None]) -> Callable[[], None]:
        self._data_handlers.append(handler)
        return lambda: self._unsubscribe(self._data_handlers, handler)

    @staticmethod
    def _unsubscribe(handlers, handler):
        if handler in handlers:
            handlers.remove(handler)

    # ----- data -----
    def update_data(
        self,
        rows: Iterable[Iterable],
        operation: Operation = Operation.APPEND,
        index: int = -1,
    ) -> None:
        rows = list(rows)
        if operation is Operation.APPEND:
            self._store.append(rows)
        elif operation is Operation.MODIFY:
            try:
                self._store.modify(rows, index)
            except InvalidArgument as exc:
                logger.error("Rejected modify: %s", exc)
                raise
        elif operation is Operation.DELETE:
            self._store.delete(rows)
        else:
            raise InvalidArgument(f"Unknown operation: {operation!r}")

        # state must reflect the new total before any handler runs
        self._state = compute_state(
            self.current_page, self.page_count, self._middle_button_count
        )
        for handler in list(self._data_handlers):
            handler()
        self._notify_page_changed()

    def _notify_page_changed(self):
        for handler in list(self._page_handlers):
            handler(self._state.current_page)

    # ----- navigation -----
    def set_current_page(self, page: int) -> PaginationState:
        self._state = compute_state(page, self.page_count, self._middle_button_count)
        self._notify_page_changed()
        return self._state

    def prev_page(self) -> PaginationState:
        if not self._state.prev_enabled:
            return self._state
        return self.set_current_page(self.current_page - 1)

    def next_page(self) -> PaginationState:
        if not self._state.next_enabled:
            return self._state
        return self.set_current_page(self.current_page + 1)

    def quick_prev(self) -> PaginationState:
        return self.set_current_page(self.current_page - self._state.quick_jump_step)

    def quick_next(self) -> PaginationState:
        return self.set_current_page(self.current_page + self._state.quick_jump_step)

    def go_to(self, text) -> PaginationState:
        return self.set_current_page(parse_page_input(text))

    def activate(self, button: ButtonDescriptor) -> PaginationState:
        if button.role not in ROLES:
            raise InvalidArgument(f"Unknown button role: {button.role!r}")
        if not button.visible:
            return self._state
        if button.role == "prev":
            return self.prev_page()
        if button.role == "next":
            return self.next_page()
        if button.target is None or not button.enabled:
            return self._state
        return self.set_current_page(button.target)


def parse_page_input(text) -> int:
    """Read a page number from free text; anything unparseable is page 0."""
    if isinstance(text, int):
        return text
    s = "" if text is None else str(text).strip()
    sign = 1
    if s[:1] in {"-", "+"}:
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if not (s.isascii() and s.isdigit()):
        return 0
    return sign * int(s)

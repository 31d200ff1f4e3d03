"""Selectable collections of import subjects.

``do_import`` flags only change through the methods below; the set of ids
is fixed once a selection is built. The tri-state header values are always
derived from the flags, never stored.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from importprep.models.import_data import ImportChannel, ImportFileData, ImportUser

ItemT = TypeVar("ItemT", ImportUser, ImportChannel)


class Selection(Generic[ItemT]):
    """Ordered, id-indexed collection of selectable rows."""

    def __init__(self, items: Iterable[ItemT] = ()) -> None:
        self._items: dict[str, ItemT] = {}
        for item in items:
            self._items[item.item_id] = item.model_copy(update={"do_import": True})

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> ItemT:
        """Return the row with the given id."""
        return self._items[item_id]

    @property
    def ids(self) -> list[str]:
        return list(self._items)

    @property
    def selected_count(self) -> int:
        return sum(1 for item in self._items.values() if item.do_import)

    @property
    def checked(self) -> bool:
        return self.selected_count > 0

    @property
    def indeterminate(self) -> bool:
        return 0 < self.selected_count < len(self._items)

    def set_selected(self, item_id: str, checked: bool) -> None:
        """Set one row's flag."""
        self._items[item_id].do_import = checked

    def toggle(self, item_id: str) -> bool:
        """Flip one row's flag and return the new value."""
        item = self._items[item_id]
        item.do_import = not item.do_import
        return item.do_import

    def toggle_all(self) -> None:
        """Apply the bulk checkbox.

        Nothing selected selects everything. Otherwise, while any selected
        row is deleted or archived, only those rows are unchecked; a further
        toggle clears the rest.
        """
        items = self._items.values()
        if self.selected_count == 0:
            for item in items:
                item.do_import = True
            return

        if any(item.is_excluded and item.do_import for item in items):
            for item in items:
                if item.is_excluded:
                    item.do_import = False
            return

        for item in items:
            item.do_import = False

    def to_payload(self) -> list[dict[str, Any]]:
        """Serialize every row, unselected ones included."""
        return [item.model_dump() for item in self._items.values()]


class SelectionState:
    """Users and channels chosen for import."""

    def __init__(
        self,
        users: Iterable[ImportUser] = (),
        channels: Iterable[ImportChannel] = (),
    ) -> None:
        self.users: Selection[ImportUser] = Selection(users)
        self.channels: Selection[ImportChannel] = Selection(channels)

    @classmethod
    def from_file_data(cls, data: ImportFileData) -> "SelectionState":
        """Build a selection with every row checked."""
        return cls(data.users, data.channels)

    def to_payload(self) -> dict[str, list[dict[str, Any]]]:
        """Request body for starting the import."""
        return {"users": self.users.to_payload(), "channels": self.channels.to_payload()}

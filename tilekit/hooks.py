"""Hooks: user code run at fixed points of window manager operation.

A hook is an object whose methods are called by the window manager when the
matching trigger point is reached. The methods of :class:`Hook` leave the
window manager untouched and report the trigger as unhandled, so a hook only
overrides the trigger points it cares about. Registered hooks are always
called in the order they were registered. While they run, the window manager
does nothing else: it handles no events until every hook has returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from tilekit.data_types import Region


class _Unhandled:
    """Marker returned by a trigger point that a hook does not override."""

    __slots__ = ("trigger",)

    def __init__(self, trigger: str) -> None:
        self.trigger = trigger

    def __repr__(self) -> str:
        return f"<unhandled {self.trigger}>"


class Hook:
    """User defined behaviour triggered by window manager actions.

    Subclasses override the trigger points they want to respond to. Hooks may
    keep state of their own and may subscribe to several triggers. Care is
    needed not to cause endless loops through nested triggers.
    """

    def _not_handled(self, trigger: str) -> _Unhandled:
        return _Unhandled(trigger)

    def startup(self, wm: Any) -> Any:
        """Called once after bindings are grabbed, before the event loop starts.

        All workspaces and screens are set up by then, so set-up work that needs
        them belongs here rather than in the hook's constructor.
        """
        return self._not_handled("startup")

    def new_client(self, wm: Any, client: Any) -> Any:
        """Called when a new client has been created from a map request.

        The client is not yet on a workspace and no layout has been applied.
        The hook may modify it, or mark it as externally managed, in which case
        the hook is responsible for mapping and unmapping it.
        """
        return self._not_handled("new_client")

    def remove_client(self, wm: Any, id: int) -> Any:
        """Called after a client has been removed from window manager state."""
        return self._not_handled("remove_client")

    def client_added_to_workspace(self, wm: Any, id: int, wix: int) -> Any:
        """Called whenever a client is added to the workspace at index ``wix``.

        This covers newly mapped clients as well as clients moved between
        workspaces.
        """
        return self._not_handled("client_added_to_workspace")

    def client_name_updated(
        self, wm: Any, id: int, name: str, is_root: bool
    ) -> Any:
        """Called when WM_NAME or _NET_WM_NAME changes on a window.

        ``is_root`` is true when the window is the root window.
        """
        return self._not_handled("client_name_updated")

    def layout_applied(
        self, wm: Any, workspace_index: int, screen_index: int
    ) -> Any:
        """Called after a layout is applied to the active workspace.

        That happens when the active workspace changes, when a client is added
        to or removed from it, when the layout parameters change and when a
        screen is laid out explicitly.
        """
        return self._not_handled("layout_applied")

    def layout_change(
        self, wm: Any, workspace_index: int, screen_index: int
    ) -> Any:
        """Called after a workspace's layout has been cycled."""
        return self._not_handled("layout_change")

    def workspace_change(
        self, wm: Any, previous_workspace: int, new_workspace: int
    ) -> Any:
        """Called after the active workspace on a screen has changed."""
        return self._not_handled("workspace_change")

    def workspaces_updated(
        self, wm: Any, names: Sequence[str], active: int
    ) -> Any:
        """Called when a workspace is added or removed while running."""
        return self._not_handled("workspaces_updated")

    def screen_change(self, wm: Any, screen_index: int) -> Any:
        """Called after focus moves to another screen."""
        return self._not_handled("screen_change")

    def screens_updated(self, wm: Any, dimensions: Sequence[Region]) -> Any:
        """Called when the list of known screens is detected again."""
        return self._not_handled("screens_updated")

    def randr_notify(self, wm: Any) -> Any:
        """Called on a RandR notification, before screens are detected again."""
        return self._not_handled("randr_notify")

    def focus_change(self, wm: Any, id: int) -> Any:
        """Called after the client ``id`` gains focus."""
        return self._not_handled("focus_change")

    def event_handled(self, wm: Any) -> Any:
        """Called at the end of the event loop after each event is handled."""
        return self._not_handled("event_handled")


HOOK_POINTS = frozenset(
    {
        "startup",
        "new_client",
        "remove_client",
        "client_added_to_workspace",
        "client_name_updated",
        "layout_applied",
        "layout_change",
        "workspace_change",
        "workspaces_updated",
        "screen_change",
        "screens_updated",
        "randr_notify",
        "focus_change",
        "event_handled",
    }
)


def run_hooks(hooks: Iterable[Hook], trigger: str, wm: Any, *args: Any) -> int:
    """Call the ``trigger`` method of every hook in order with ``wm`` and ``args``.

    Returns how many of the hooks handled the trigger. Raises ValueError for a
    trigger that is not a hook point. An exception raised by a hook propagates
    and the remaining hooks are not called.
    """
    if trigger not in HOOK_POINTS:
        raise ValueError(f"unknown hook trigger: {trigger!r}")
    handled = 0
    for hook in hooks:
        if not isinstance(getattr(hook, trigger)(wm, *args), _Unhandled):
            handled += 1
    return handled
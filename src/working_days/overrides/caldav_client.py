"""CalDAV implementation of :class:`CalendarOverrideClient` built on the ``caldav`` library.

Protocol handling (authentication, XML, transport) stays inside ``caldav``; this module
only maps its objects and failures onto the oracle's types.
"""

from __future__ import annotations

from typing import Any, List, Optional

import caldav  # type: ignore
from caldav.elements import dav  # type: ignore
from caldav.lib import error as caldav_error  # type: ignore
from lxml import etree  # type: ignore

from src.working_days.errors import CalendarLookupError, ConnectivityError
from src.working_days.overrides.override_client import (CalendarEvent,
                                                        EventWindow)

_CALDAV_FAILURES = (caldav_error.DAVError, OSError, ValueError, etree.LxmlError)


class CaldavOverrideClient:
    """Reads holiday events from a CalDAV server."""

    __slots__ = ("_client",)

    def __init__(self, client: Any) -> None:
        if client is None:
            raise ValueError("`client` must be defined")
        self._client = client

    @staticmethod
    def from_url(
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> CaldavOverrideClient:
        """Create a client speaking to the CalDAV server at *url*."""
        if not isinstance(url, str) or len(url.strip()) == 0:
            raise ValueError("CalDAV url is empty")
        return CaldavOverrideClient(
            caldav.DAVClient(url=url.strip(), username=username, password=password)
        )

    def _calendar(self, calendar_path: str) -> Any:
        return self._client.calendar(url=calendar_path)

    def validate(self, calendar_path: str) -> None:
        """Check that *calendar_path* is a reachable collection on the server."""
        try:
            self._calendar(calendar_path).get_properties([dav.DisplayName()])
        except _CALDAV_FAILURES as exc:
            raise ConnectivityError(
                f"bad caldav configuration, unable to validate connection: {exc}"
            ) from exc

    @staticmethod
    def _to_event(resource: Any) -> CalendarEvent:
        component = resource.icalendar_component
        summary = component.get("SUMMARY")
        uid = component.get("UID")
        return CalendarEvent(
            summary="" if summary is None else str(summary),
            uid=None if uid is None else str(uid),
        )

    def query_events(
        self, calendar_path: str, window: EventWindow
    ) -> List[CalendarEvent]:
        """Return the events of *calendar_path* overlapping *window*."""
        try:
            resources = self._calendar(calendar_path).search(
                start=window.start, end=window.end, event=True, expand=False
            )
            return [CaldavOverrideClient._to_event(r) for r in resources]
        except _CALDAV_FAILURES as exc:
            raise CalendarLookupError(
                f"unable to list events from caldav: {exc}"
            ) from exc

"""Client-side interaction state machine for the map terminal.

One explicit ``ViewState`` and a strict transition table replace the loose
UI flags. The machine suspends only while a scan or artwork call is in
flight; re-entrant triggers during that time are ignored.

    explore --scan--> scanning --request_artwork--> generating --artwork_ready--> artwork
    generating --artwork_failed--> scanning
    artwork --back--> scanning
    scanning | generating | artwork --close--> explore
"""

from __future__ import annotations

import enum
import logging
from typing import Protocol

from ortholocus.models.domain import ArtworkStyle, Coordinate
from ortholocus.orchestrators.scan import system_error_report

logger = logging.getLogger(__name__)


class ViewState(str, enum.Enum):
    EXPLORE = "explore"
    SCANNING = "scanning"
    GENERATING = "generating"
    ARTWORK = "artwork"


class Trigger(str, enum.Enum):
    SCAN = "scan"
    SCAN_RESULT = "scan_result"
    REQUEST_ARTWORK = "request_artwork"
    ARTWORK_READY = "artwork_ready"
    ARTWORK_FAILED = "artwork_failed"
    BACK = "back"
    CLOSE = "close"


TRANSITIONS: dict[tuple[ViewState, Trigger], ViewState] = {
    (ViewState.EXPLORE, Trigger.SCAN): ViewState.SCANNING,
    (ViewState.SCANNING, Trigger.SCAN_RESULT): ViewState.SCANNING,
    (ViewState.SCANNING, Trigger.REQUEST_ARTWORK): ViewState.GENERATING,
    (ViewState.GENERATING, Trigger.ARTWORK_READY): ViewState.ARTWORK,
    (ViewState.GENERATING, Trigger.ARTWORK_FAILED): ViewState.SCANNING,
    (ViewState.ARTWORK, Trigger.BACK): ViewState.SCANNING,
    (ViewState.SCANNING, Trigger.CLOSE): ViewState.EXPLORE,
    (ViewState.GENERATING, Trigger.CLOSE): ViewState.EXPLORE,
    (ViewState.ARTWORK, Trigger.CLOSE): ViewState.EXPLORE,
}


class Camera(Protocol):
    """The map view, as far as the state machine is concerned."""

    def center(self) -> Coordinate: ...

    def lock_gestures(self) -> None: ...

    def unlock_gestures(self) -> None: ...


class ScanBackend(Protocol):
    async def initiate_scan(self, coord: Coordinate) -> str: ...

    async def generate_artwork(self, coord: Coordinate, style: ArtworkStyle) -> str | None: ...

    def snapshot_url(self, coord: Coordinate) -> str: ...


class InteractionStateMachine:
    def __init__(self, camera: Camera, backend: ScanBackend) -> None:
        self._camera = camera
        self._backend = backend
        self._state = ViewState.EXPLORE
        # Bumped on close so late results from a dismissed panel are dropped
        self._session = 0
        self._scan_pending = False
        self._artwork_pending = False

        self.target: Coordinate | None = None
        self.snapshot_url: str | None = None
        self.report_text: str | None = None
        self.requested_style: ArtworkStyle | None = None
        self.image_uri: str | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    def can(self, trigger: Trigger) -> bool:
        return (self._state, trigger) in TRANSITIONS

    def _fire(self, trigger: Trigger) -> bool:
        target = TRANSITIONS.get((self._state, trigger))
        if target is None:
            logger.debug("Ignoring %s in state %s", trigger.value, self._state.value)
            return False
        logger.debug("%s --%s--> %s", self._state.value, trigger.value, target.value)
        self._state = target
        return True

    # -- triggers -------------------------------------------------------

    async def scan(self) -> bool:
        """Scan the current map center. Returns True once a report is stored."""
        if self._scan_pending or not self.can(Trigger.SCAN):
            return False

        coord = self._camera.center()
        self._fire(Trigger.SCAN)
        self._camera.lock_gestures()
        self.target = coord
        self.snapshot_url = self._backend.snapshot_url(coord)

        session = self._session
        self._scan_pending = True
        try:
            report = await self._backend.initiate_scan(coord)
        except Exception as e:
            logger.exception("Scan backend raised")
            report = system_error_report(str(e) or type(e).__name__)
        finally:
            self._scan_pending = False

        if session != self._session:
            logger.debug("Dropping scan result for closed session %d", session)
            return False
        if not self._fire(Trigger.SCAN_RESULT):
            return False
        self.report_text = report
        return True

    async def request_artwork(self, style: ArtworkStyle | str) -> bool:
        """Generate artwork for the scanned target. Returns True if an image was stored."""
        style = ArtworkStyle.parse(style)
        if not self.artwork_enabled:
            logger.debug("Artwork request ignored in state %s", self._state.value)
            return False

        self._fire(Trigger.REQUEST_ARTWORK)
        self.requested_style = style
        coord = self.target

        session = self._session
        self._artwork_pending = True
        try:
            uri = await self._backend.generate_artwork(coord, style)
        except Exception:
            logger.exception("Artwork backend raised; treating as no image")
            uri = None
        finally:
            self._artwork_pending = False

        if session != self._session:
            logger.debug("Dropping artwork result for closed session %d", session)
            return False
        if uri:
            self._fire(Trigger.ARTWORK_READY)
            self.image_uri = uri
            return True

        self._fire(Trigger.ARTWORK_FAILED)
        self.requested_style = None
        return False

    def back(self) -> bool:
        if not self._fire(Trigger.BACK):
            return False
        self.image_uri = None
        return True

    def close(self) -> bool:
        if not self._fire(Trigger.CLOSE):
            return False
        self._session += 1
        self.target = None
        self.snapshot_url = None
        self.report_text = None
        self.requested_style = None
        self.image_uri = None
        self._camera.unlock_gestures()
        return True

    # -- affordances ----------------------------------------------------

    @property
    def camera_locked(self) -> bool:
        return self._state is not ViewState.EXPLORE

    @property
    def crosshair_visible(self) -> bool:
        return self._state is ViewState.EXPLORE

    @property
    def analyzing(self) -> bool:
        return self._state is ViewState.SCANNING and self.report_text is None

    @property
    def artwork_enabled(self) -> bool:
        return (
            self._state is ViewState.SCANNING
            and self.report_text is not None
            and not self._artwork_pending
            and self.target is not None
        )

    @property
    def back_enabled(self) -> bool:
        return self.can(Trigger.BACK)

    @property
    def close_enabled(self) -> bool:
        return self.can(Trigger.CLOSE)

    @property
    def status_line(self) -> str:
        mode = "TERMINAL_ACTIVE" if self._state is ViewState.EXPLORE else "SCANNING..."
        return f"ORTHO_LOCUS // {mode}"

    @property
    def coords_label(self) -> str:
        return f"COORDS: {self._camera.center().label()}"

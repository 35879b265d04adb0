"""
Character Preview - Animated preview of the class being chosen.

Ties the pieces of the selection screen together:
- AssetResolver builds each class's frame pool from the asset store
- DirectionalFrameSelector narrows the pool to the facing direction
- AnimationClock cycles the selected frames into the display sink
- InputCooldowns debounces class, gender, direction and confirm input

State changes are announced on the event bus so the UI can follow along.
"""

import asyncio
import time
from typing import Dict, Iterable, List, Optional

from common.src.sprites import (
    AnimationClock,
    Direction,
    DisplaySink,
    Frame,
    InputCooldowns,
    MonotonicClock,
    MotionType,
)
from .assets.provider import AssetProvider
from .config import PreviewConfig, get_config
from .core.event_bus import EventBus, EventType, get_event_bus
from .game.catalog import DEFAULT_RACE, ClassCatalog
from .game.selection_state import SelectedCharacter, SelectionState
from .logging_config import get_logger
from .rendering.frame_resolver import AssetResolver
from .rendering.frame_selector import DirectionalFrameSelector
from .rendering.preview_sources import PreviewRigRegistry, PreviewRigSource, rig_frames

logger = get_logger("character_preview")

EVENT_SOURCE = "character_preview"

# Cooldown keys
ACTION_CLASS_SELECT = "class_select"
ACTION_GENDER = "gender"
ACTION_DIRECTION = "direction"
ACTION_CONFIRM = "confirm"


class CharacterPreview:
    """
    Selection-screen preview controller.

    Attributes:
        state: The in-progress selection
        animation: Clock cycling the displayed frames
        cooldowns: Input debounce guards
    """

    def __init__(
        self,
        provider: AssetProvider,
        config: Optional[PreviewConfig] = None,
        resolver: Optional[AssetResolver] = None,
        selector: Optional[DirectionalFrameSelector] = None,
        catalog: Optional[ClassCatalog] = None,
        rig_registry: Optional[PreviewRigRegistry] = None,
        rig_source: Optional[PreviewRigSource] = None,
        event_bus: Optional[EventBus] = None,
        clock: MonotonicClock = time.monotonic,
        sink: Optional[DisplaySink] = None,
    ):
        self.config = config or get_config()
        settings = self.config.animation

        self.paths = self.config.assets.asset_paths()
        self.resolver = resolver or AssetResolver(
            provider,
            paths=self.paths,
            query_timeout=self.config.assets.asset_query_timeout,
        )
        self.selector = selector or DirectionalFrameSelector(settings.row_directions())
        self.catalog = catalog or ClassCatalog.from_yaml(self.config.classes_file)
        self.rig_registry = rig_registry
        self.rig_source = rig_source
        self.event_bus = event_bus or get_event_bus()

        self.state = SelectionState()
        self.animation = AnimationClock(fps=settings.fps, sink=sink)
        self.cooldowns = InputCooldowns(clock)

    # =========================================================================
    # FRAME ACCESS
    # =========================================================================

    def resolve_frames(
        self,
        class_name: str,
        direction: Direction,
        motion: MotionType = MotionType.WALK,
    ) -> List[Frame]:
        """
        Get the frames to show for a class facing a direction.

        A configured preview rig takes precedence over raw sheets.

        Args:
            class_name: Class to preview.
            direction: Facing direction.
            motion: Preferred motion.

        Returns:
            Ordered frames, empty when the class has no art.
        """
        frames = rig_frames(
            self.rig_registry,
            self.rig_source,
            class_name,
            direction,
            race=self.state.race,
            is_male=self.state.is_male,
        )
        if frames:
            return frames

        pool = self.resolver.resolve(class_name)
        return self.selector.select(pool, direction, motion)

    def advance(self, dt: float) -> Optional[Frame]:
        """Advance the preview animation by dt seconds and return the active frame."""
        return self.animation.tick(dt)

    def invalidate_cache(self, class_name: Optional[str] = None) -> None:
        """Forget cached frame pools for one class, or for every class."""
        self.resolver.invalidate(class_name)

    async def preload(self, class_names: Optional[Iterable[str]] = None) -> Dict[str, int]:
        """
        Resolve frame pools ahead of selection, off the event loop.

        Args:
            class_names: Classes to warm; every catalog class by default.

        Returns:
            Mapping of class name to pool size.
        """
        names = list(class_names) if class_names is not None else [c.class_name for c in self.catalog]
        pools = await asyncio.gather(*(self.resolver.resolve_async(name) for name in names))
        return {name: len(pool) for name, pool in zip(names, pools)}

    @property
    def has_active_preview(self) -> bool:
        return self.state.has_class and self.animation.current is not None

    # =========================================================================
    # SELECTION INPUT
    # =========================================================================

    def select_class(self, class_name: str, race: Optional[str] = None, now: Optional[float] = None) -> bool:
        """
        Select a class and start previewing it walking south.

        Args:
            class_name: Class to select (case-insensitive).
            race: Race the class belongs to; taken from the catalog if omitted.
            now: Input timestamp on the monotonic clock.

        Returns:
            True if the selection was applied, False if it was debounced or
            the class name was blank.
        """
        if not class_name or not class_name.strip():
            self._clear_preview()
            return False

        if not self.cooldowns.try_acquire(ACTION_CLASS_SELECT, self.config.animation.class_select_debounce, now):
            logger.debug("Class selection of %s ignored (debounce)", class_name)
            return False

        entry = self.catalog.get(class_name, race)
        self.state.class_name = entry.class_name if entry else class_name.strip()
        self.state.race = race or (entry.race if entry else DEFAULT_RACE)
        self.state.direction = Direction.SOUTH
        self.state.motion = MotionType.WALK
        self.state.confirmed = None

        self.event_bus.emit(
            EventType.CLASS_SELECTED,
            {"class_name": self.state.class_name, "race": self.state.race},
            source=EVENT_SOURCE,
        )
        self._refresh_frames()
        return True

    def set_gender(self, is_male: bool, now: Optional[float] = None) -> bool:
        """
        Set the previewed gender.

        Returns:
            True if applied, False if debounced.
        """
        if not self.cooldowns.try_acquire(ACTION_GENDER, self.config.animation.gender_debounce, now):
            return False

        self.state.is_male = is_male
        self.event_bus.emit(EventType.GENDER_CHANGED, {"is_male": is_male}, source=EVENT_SOURCE)
        if self.state.has_class:
            self._refresh_frames()
        return True

    def next_direction(self, now: Optional[float] = None) -> Optional[Direction]:
        """Rotate the preview clockwise; returns the new facing, or None if ignored."""
        return self._turn(self.state.direction.next(), now)

    def previous_direction(self, now: Optional[float] = None) -> Optional[Direction]:
        """Rotate the preview counter-clockwise; returns the new facing, or None if ignored."""
        return self._turn(self.state.direction.previous(), now)

    def confirm(self, now: Optional[float] = None, character_name: str = "") -> Optional[SelectedCharacter]:
        """
        Confirm the current selection.

        Args:
            now: Input timestamp on the monotonic clock.
            character_name: Name entered for the new character.

        Returns:
            The confirmed character, or None when no class is selected or
            the input was debounced.
        """
        if not self.state.has_class:
            return None
        if not self.cooldowns.try_acquire(ACTION_CONFIRM, self.config.animation.confirm_debounce, now):
            return None

        selected = SelectedCharacter.build(
            class_name=self.state.class_name,
            race=self.state.race or DEFAULT_RACE,
            is_male=self.state.is_male,
            facing=self.state.direction,
            paths=self.paths,
            character_name=character_name,
            rig_name=self._rig_name(),
        )
        self.state.confirmed = selected
        logger.info("Confirmed %s (%s)", selected.class_name, selected.race)
        self.event_bus.emit(EventType.SELECTION_CONFIRMED, selected.to_dict(), source=EVENT_SOURCE)
        return selected

    def set_motion(self, motion: MotionType) -> None:
        """Switch the previewed motion (walk or idle)."""
        if motion == self.state.motion:
            return
        self.state.motion = motion
        if self.state.has_class:
            self._refresh_frames()

    def back_out(self) -> None:
        """Abandon the selection and clear the preview."""
        self.cooldowns.release()
        self._clear_preview()
        self.event_bus.emit(EventType.SELECTION_CANCELLED, source=EVENT_SOURCE)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _turn(self, direction: Direction, now: Optional[float]) -> Optional[Direction]:
        if not self.has_active_preview:
            return None
        if not self.cooldowns.try_acquire(ACTION_DIRECTION, self.config.animation.direction_cooldown, now):
            return None

        self.state.direction = direction
        self.event_bus.emit(EventType.DIRECTION_CHANGED, {"direction": direction.value}, source=EVENT_SOURCE)
        if self.state.has_class:
            self._refresh_frames()
        return direction

    def _refresh_frames(self) -> None:
        frames = self.resolve_frames(self.state.class_name, self.state.direction, self.state.motion)
        if not frames:
            logger.debug("No preview frames for %s facing %s", self.state.class_name, self.state.direction.value)
        self.animation.set_frames(frames)
        self.event_bus.emit(
            EventType.FRAMES_CHANGED,
            {
                "class_name": self.state.class_name,
                "direction": self.state.direction.value,
                "frame_count": len(frames),
            },
            source=EVENT_SOURCE,
        )

    def _rig_name(self) -> Optional[str]:
        if self.rig_registry is None or not self.state.has_class:
            return None
        return self.rig_registry.rig_name_for(self.state.class_name, self.state.race, self.state.is_male)

    def _clear_preview(self) -> None:
        self.state.clear()
        self.animation.reset()
        self.event_bus.emit(EventType.PREVIEW_CLEARED, source=EVENT_SOURCE)

"""
Typed access to Quelea's properties.

QueleaProperties owns the loaded property store. It is created once when
the application starts and handed to everything that needs a setting.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Protocol, TypeVar, Union

from ..utils import get_quelea_user_home, native_style_name, quelea_user_home_path
from . import defaults as keys
from .codecs import (
    Color,
    ConfigDecodeError,
    Rectangle,
    decode_bool,
    decode_color,
    decode_int,
    decode_rectangle,
    decode_string_list,
    encode_bool,
    encode_color,
    encode_int,
    encode_rectangle,
    encode_string_list,
)
from .defaults import DEFAULT_PROPERTIES
from .store import PropertyStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROPERTIES_FILENAME = "quelea.properties"
LANGUAGES_DIR = "languages"


class DisplayTarget(Enum):
    """Output that can be placed either on a screen or at fixed coordinates."""

    PROJECTOR = "projector"
    STAGE = "stage"

    def key(self, suffix: str) -> str:
        return f"{self.value}.{suffix}"


class NamedEntity(Protocol):
    """Anything with a display name, such as a bible."""

    name: str


class QueleaProperties:
    """
    Application properties for Quelea.

    Values live in ~/.quelea/quelea.properties. Each setter writes the whole
    file before returning.

    Getters return the documented default when a key is absent. A value
    that is present but malformed raises ConfigDecodeError instead of being
    replaced by the default, so corrupted files are noticed.
    """

    def __init__(self, user_home: Optional[Union[str, Path]] = None):
        """
        Initialize and load properties.

        Args:
            user_home: Home directory holding .quelea (defaults to the
                current user's home)
        """
        self.user_home = user_home
        # Created by the store on load
        self.config_dir = quelea_user_home_path(user_home)
        self.config_file = self.config_dir / PROPERTIES_FILENAME
        self._store = PropertyStore(self.config_file)
        self._properties = self._store.load()

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def _get(self, key: str) -> Optional[str]:
        value = self._properties.get(key)
        if value is None:
            return DEFAULT_PROPERTIES.get(key)
        return value

    def _get_decoded(self, key: str, decode: Callable[[str], T]) -> T:
        value = self._get(key)
        try:
            return decode(value)
        except ConfigDecodeError as e:
            logger.error(f"Malformed value for {key}: {value!r}")
            raise ConfigDecodeError(str(e), e.value, key=key) from e

    def _set(self, key: str, value: str):
        self._properties[key] = value
        self._store.write(self._properties)

    # ------------------------------------------------------------------
    # Locations and appearance
    # ------------------------------------------------------------------

    def get_quelea_user_home(self) -> Path:
        """Get (and create if needed) the .quelea directory."""
        return get_quelea_user_home(self.user_home)

    def get_language_file(self) -> Path:
        """
        Get the language file used for the GUI.

        Returns:
            Path relative to the working directory, under "languages"
        """
        return Path(LANGUAGES_DIR) / self._get(keys.LANGUAGE_FILE)

    def set_language_file(self, filename: str):
        self._set(keys.LANGUAGE_FILE, filename)

    def get_laf(self) -> str:
        """
        Get the Qt style name to use.

        "System" (in any case) selects the platform's native style.

        Returns:
            Style name
        """
        laf = self._get(keys.LAF)
        if laf.strip().lower() == keys.SYSTEM_LAF.lower():
            return native_style_name()
        return laf

    def set_laf(self, laf: str):
        self._set(keys.LAF, laf)

    def get_bible_dir(self) -> Path:
        return Path(self._get(keys.BIBLES_DIR))

    def get_schedule_extension(self) -> str:
        return self._get(keys.SCHEDULE_EXTENSION)

    def get_songpack_extension(self) -> str:
        return self._get(keys.SONGPACK_EXTENSION)

    def get_active_selection_color(self) -> Color:
        """Get the colour used to mark the active list."""
        return self._get_decoded(keys.ACTIVE_SELECTION_COLOR, decode_color)

    def set_active_selection_color(self, color: Color):
        self._set(keys.ACTIVE_SELECTION_COLOR, encode_color(color))

    def get_outline_thickness(self) -> int:
        """Get the text outline thickness in pixels."""
        return self._get_decoded(keys.OUTLINE_THICKNESS, decode_int)

    def set_outline_thickness(self, px: int):
        self._set(keys.OUTLINE_THICKNESS, encode_int(px))

    def get_notice_box_height(self) -> int:
        return self._get_decoded(keys.NOTICE_BOX_HEIGHT, decode_int)

    def set_notice_box_height(self, height: int):
        self._set(keys.NOTICE_BOX_HEIGHT, encode_int(height))

    def get_notice_box_speed(self) -> int:
        return self._get_decoded(keys.NOTICE_BOX_SPEED, decode_int)

    def set_notice_box_speed(self, speed: int):
        self._set(keys.NOTICE_BOX_SPEED, encode_int(speed))

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def get_control_screen(self) -> int:
        """Get the screen number the operator window is shown on."""
        return self._get_decoded(keys.CONTROL_SCREEN, decode_int)

    def set_control_screen(self, screen: int):
        self._set(keys.CONTROL_SCREEN, encode_int(screen))

    def get_screen(self, target: DisplayTarget) -> int:
        """
        Get the screen number a display target is shown on.

        Args:
            target: Projector or stage

        Returns:
            Screen index
        """
        return self._get_decoded(target.key(keys.SCREEN_SUFFIX), decode_int)

    def set_screen(self, target: DisplayTarget, screen: int):
        self._set(target.key(keys.SCREEN_SUFFIX), encode_int(screen))

    def get_coords(self, target: DisplayTarget) -> Rectangle:
        """
        Get the manual coordinates of a display target.

        Args:
            target: Projector or stage

        Returns:
            Rectangle in screen pixels

        Raises:
            ConfigDecodeError: If the stored rectangle is malformed
        """
        return self._get_decoded(target.key(keys.COORDS_SUFFIX), decode_rectangle)

    def set_coords(self, target: DisplayTarget, coords: Rectangle):
        self._set(target.key(keys.COORDS_SUFFIX), encode_rectangle(coords))

    def is_mode_coords(self, target: DisplayTarget) -> bool:
        """
        Determine whether a display target uses manual coordinates.

        Returns:
            True for manual coordinates, False for a screen number (also
            when no mode has been chosen)
        """
        return self._get(target.key(keys.MODE_SUFFIX)) == keys.MODE_COORDS

    def set_mode_coords(self, target: DisplayTarget):
        """Use manual coordinates; the stored screen number is kept."""
        self._set(target.key(keys.MODE_SUFFIX), keys.MODE_COORDS)

    def set_mode_screen(self, target: DisplayTarget):
        """Use a screen number; the stored coordinates are kept."""
        self._set(target.key(keys.MODE_SUFFIX), keys.MODE_SCREEN)

    def get_projector_screen(self) -> int:
        return self.get_screen(DisplayTarget.PROJECTOR)

    def set_projector_screen(self, screen: int):
        self.set_screen(DisplayTarget.PROJECTOR, screen)

    def get_projector_coords(self) -> Rectangle:
        return self.get_coords(DisplayTarget.PROJECTOR)

    def set_projector_coords(self, coords: Rectangle):
        self.set_coords(DisplayTarget.PROJECTOR, coords)

    def is_projector_mode_coords(self) -> bool:
        return self.is_mode_coords(DisplayTarget.PROJECTOR)

    def set_projector_mode_coords(self):
        self.set_mode_coords(DisplayTarget.PROJECTOR)

    def set_projector_mode_screen(self):
        self.set_mode_screen(DisplayTarget.PROJECTOR)

    def get_stage_screen(self) -> int:
        return self.get_screen(DisplayTarget.STAGE)

    def set_stage_screen(self, screen: int):
        self.set_screen(DisplayTarget.STAGE, screen)

    def get_stage_coords(self) -> Rectangle:
        return self.get_coords(DisplayTarget.STAGE)

    def set_stage_coords(self, coords: Rectangle):
        self.set_coords(DisplayTarget.STAGE, coords)

    def is_stage_mode_coords(self) -> bool:
        return self.is_mode_coords(DisplayTarget.STAGE)

    def set_stage_mode_coords(self):
        self.set_mode_coords(DisplayTarget.STAGE)

    def set_stage_mode_screen(self):
        self.set_mode_screen(DisplayTarget.STAGE)

    # ------------------------------------------------------------------
    # Text display
    # ------------------------------------------------------------------

    def get_max_chars(self) -> int:
        """
        Get the maximum characters on one line of projected text.

        Longer lines are split.
        """
        return self._get_decoded(keys.MAX_CHARS, decode_int)

    def set_max_chars(self, max_chars: int):
        self._set(keys.MAX_CHARS, encode_int(max_chars))

    def get_min_lines(self) -> int:
        """
        Get the minimum number of lines the font is sized to fit.

        Stops short sections being shown in a huge font.
        """
        return self._get_decoded(keys.MIN_LINES, decode_int)

    def set_min_lines(self, min_lines: int):
        self._set(keys.MIN_LINES, encode_int(min_lines))

    def get_one_line_mode(self) -> bool:
        return self._get_decoded(keys.ONE_LINE_MODE, decode_bool)

    def set_one_line_mode(self, enabled: bool):
        self._set(keys.ONE_LINE_MODE, encode_bool(enabled))

    def get_capital_first(self) -> bool:
        """Whether the first letter of every displayed line is capitalised."""
        return self._get_decoded(keys.CAPITAL_FIRST, decode_bool)

    def set_capital_first(self, enabled: bool):
        self._set(keys.CAPITAL_FIRST, encode_bool(enabled))

    def get_display_song_info_text(self) -> bool:
        return self._get_decoded(keys.DISPLAY_SONG_INFO_TEXT, decode_bool)

    def set_display_song_info_text(self, enabled: bool):
        self._set(keys.DISPLAY_SONG_INFO_TEXT, encode_bool(enabled))

    def get_god_words(self) -> List[str]:
        """
        Get the words the song importer keeps capitalised.

        Returns:
            Words in stored order
        """
        return self._get_decoded(keys.GOD_WORDS, decode_string_list)

    def set_god_words(self, words: List[str]):
        """
        Store the words the song importer keeps capitalised.

        Raises:
            ValueError: If words is empty (it would read back as [""])
        """
        if not words:
            raise ValueError("god words list must not be empty")
        self._set(keys.GOD_WORDS, encode_string_list(words))

    # ------------------------------------------------------------------
    # Bibles
    # ------------------------------------------------------------------

    def get_default_bible(self) -> Optional[str]:
        """
        Get the name of the default bible.

        Returns:
            Bible name, or None if none was chosen
        """
        return self._get(keys.DEFAULT_BIBLE)

    def set_default_bible(self, bible: NamedEntity):
        self._set(keys.DEFAULT_BIBLE, bible.name)

    def get_max_verses(self) -> int:
        """Get the maximum number of verses in one bible passage."""
        return self._get_decoded(keys.MAX_VERSES, decode_int)

    def set_max_verses(self, max_verses: int):
        self._set(keys.MAX_VERSES, encode_int(max_verses))

    # ------------------------------------------------------------------
    # Start-up behaviour
    # ------------------------------------------------------------------

    def get_phone_home(self) -> bool:
        """Whether to send anonymous usage information at start-up."""
        return self._get_decoded(keys.PHONE_HOME, decode_bool)

    def set_phone_home(self, enabled: bool):
        self._set(keys.PHONE_HOME, encode_bool(enabled))

    def get_single_monitor_warning(self) -> bool:
        """Whether to warn the user that only one monitor is attached."""
        return self._get_decoded(keys.SINGLE_MONITOR_WARNING, decode_bool)

    def set_single_monitor_warning(self, enabled: bool):
        self._set(keys.SINGLE_MONITOR_WARNING, encode_bool(enabled))

    def get_check_update(self) -> bool:
        """Whether to check for a newer version at start-up."""
        return self._get_decoded(keys.CHECK_UPDATE, decode_bool)

    def set_check_update(self, enabled: bool):
        self._set(keys.CHECK_UPDATE, encode_bool(enabled))

    # ------------------------------------------------------------------
    # Web locations
    # ------------------------------------------------------------------

    def get_download_location(self) -> str:
        return self._get(keys.DOWNLOAD_LOCATION)

    def get_website_location(self) -> str:
        return self._get(keys.WEBSITE_LOCATION)

    def get_discuss_location(self) -> str:
        return self._get(keys.DISCUSS_LOCATION)

    def get_update_url(self) -> str:
        return self._get(keys.UPDATE_URL)

"""Key names accepted by the device's /keypress/ endpoint."""
from enum import Enum
from urllib.parse import quote


class RokuKey(str, Enum):
    HOME = "Home"
    REV = "Rev"
    FWD = "Fwd"
    PLAY = "Play"
    SELECT = "Select"
    LEFT = "Left"
    RIGHT = "Right"
    DOWN = "Down"
    UP = "Up"
    BACK = "Back"
    INSTANT_REPLAY = "InstantReplay"
    INFO = "Info"
    BACKSPACE = "Backspace"
    SEARCH = "Search"
    ENTER = "Enter"
    FIND_REMOTE = "FindRemote"

    # TV models only
    VOLUME_DOWN = "VolumeDown"
    VOLUME_MUTE = "VolumeMute"
    VOLUME_UP = "VolumeUp"
    POWER_OFF = "PowerOff"
    POWER_ON = "PowerOn"
    CHANNEL_UP = "ChannelUp"
    CHANNEL_DOWN = "ChannelDown"
    INPUT_TUNER = "InputTuner"
    INPUT_HDMI1 = "InputHDMI1"
    INPUT_HDMI2 = "InputHDMI2"
    INPUT_HDMI3 = "InputHDMI3"
    INPUT_HDMI4 = "InputHDMI4"
    INPUT_AV1 = "InputAV1"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def literal(char: str) -> str:
        """Key name that types a single character, e.g. 'Lit_%20' for a space."""
        if len(char) != 1:
            raise ValueError(f"Literal key needs exactly one character, got {char!r}")
        return "Lit_" + quote(char, safe="")

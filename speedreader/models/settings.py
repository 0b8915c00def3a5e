"""Reader settings model persisted by the settings collaborator."""

from pydantic import BaseModel, ConfigDict, Field

from speedreader.models.enums import FontSize

MIN_WPM = 100
MAX_WPM = 1000


class ReaderSettings(BaseModel):
    """User-facing reader settings with defaults applied."""

    model_config = ConfigDict(validate_assignment=True)

    wpm: int = Field(300, ge=MIN_WPM, le=MAX_WPM)
    font_size: FontSize = FontSize.MEDIUM
    highlight_focus: bool = True
    fixation_point: bool = False

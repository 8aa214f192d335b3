from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(_CamelModel):
    model_config = ConfigDict(extra="allow")

    latitude: int | float | None = None
    longitude: int | float | None = None
    altitude: int | float | None = None


class ImageMediaMetadata(_CamelModel):
    """EXIF-derived image details, field names as Drive reports them."""

    model_config = ConfigDict(extra="allow")

    width: int | float | None = None
    height: int | float | None = None
    rotation: int | float | None = None
    location: Location | None = None
    time: str | None = None
    camera_make: str | None = None
    camera_model: str | None = None
    exposure_time: int | float | None = None
    aperture: int | float | None = None
    flash_used: bool | None = None
    focal_length: int | float | None = None
    iso_speed: int | float | None = None
    metering_mode: str | None = None
    sensor: str | None = None
    exposure_mode: str | None = None
    color_space: str | None = None
    white_balance: str | None = None
    exposure_bias: int | float | None = None
    max_aperture_value: int | float | None = None
    subject_distance: int | float | None = None
    lens: str | None = None


class VideoMediaMetadata(_CamelModel):
    model_config = ConfigDict(extra="allow")

    width: int | float | None = None
    height: int | float | None = None
    duration_millis: str | None = None


class FileMetadata(_CamelModel):
    """Provider-neutral metadata for a single file. Serialized with camelCase keys."""

    id: str
    name: str
    mime_type: str
    size: str | None = None
    modified_time: str | None = None
    icon_link: str | None = None
    thumbnail_link: str | None = None
    image_media_metadata: ImageMediaMetadata | None = None
    video_media_metadata: VideoMediaMetadata | None = None

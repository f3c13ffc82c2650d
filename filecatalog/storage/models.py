from dataclasses import dataclass, field

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StorageLocator:
    """Bucket + key address of an object in the object store."""

    bucket: str
    key: str

    @property
    def file_name(self) -> str:
        return self.key.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class RawFileContent:
    """Object bytes plus what the uploader declared about them."""

    data: bytes
    file_name: str
    mime_type: str = DEFAULT_CONTENT_TYPE
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.data)

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator


class _Missing:
    """Marks a key that is absent from a response source, as opposed to one holding null."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class CreateMapRequest(BaseModel):
    """
    One masked record to create. Values are sent as given; uniqueness of
    ``tp_key`` per domain is checked by the server, not here.

    ``settings`` is an opaque string holding a JSON object and is not parsed.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    uid: int
    tp_key: str = Field(
        validation_alias=AliasChoices("tp_key", "tpKey"),
        serialization_alias="tpKey",
    )
    domain: str
    destination: str
    status: str = "active"
    type: str = "redirect"
    is_set: int = Field(default=0, validation_alias=AliasChoices("is_set", "isSet"))
    tags: str = ""
    notes: str = ""
    settings: str = "{}"
    cache_content: int = Field(default=0, validation_alias=AliasChoices("cache_content", "cacheContent"))

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class CreateMapResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = ""
    success: bool = False
    source: Optional[Mapping[str, Any]] = None

    @field_validator("source")
    @classmethod
    def _freeze_source(cls, value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        return None if value is None else MappingProxyType(dict(value))

    @field_serializer("source")
    def _dump_source(self, value: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return None if value is None else dict(value)

    @classmethod
    def from_payload(cls, data: Any) -> "CreateMapResponse":
        """
        Build a response from a decoded JSON body. Anything missing or of the
        wrong type falls back to its default instead of raising.
        """
        if not isinstance(data, Mapping):
            data = {}

        message = data.get("message")
        success = data.get("success")
        source = data.get("source")

        return cls(
            message=message if isinstance(message, str) else "",
            success=success if isinstance(success, bool) else False,
            source={str(k): v for k, v in source.items()} if isinstance(source, Mapping) else None,
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()

    def source_field(self, key: str) -> Union[Any, _Missing]:
        if self.source is None or key not in self.source:
            return MISSING
        return self.source[key]

    def _lookup(self, key: str) -> Any:
        value = self.source_field(key)
        return None if value is MISSING else value

    @property
    def mid(self) -> Optional[int]:
        return self._lookup("mid")

    @property
    def tp_key(self) -> Optional[str]:
        return self._lookup("tpKey")

    @property
    def domain(self) -> Optional[str]:
        return self._lookup("domain")

    @property
    def destination(self) -> Optional[str]:
        return self._lookup("destination")

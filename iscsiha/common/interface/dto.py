from typing import (
    Any,
    Mapping,
    Type,
    TypeVar,
)

import dacite


class PayloadConversionError(Exception):
    pass


class DataTransferObject:
    pass


DTOTYPE = TypeVar("DTOTYPE", bound=DataTransferObject)


def from_dict(
    cls: Type[DTOTYPE], data: Mapping[str, Any], strict: bool = False
) -> DTOTYPE:
    """
    Build a DTO from a decoded JSON payload

    Keys unknown to the DTO are ignored unless strict is set, cluster manager
    output carries far more than we need.
    """
    if not isinstance(data, dict):
        raise PayloadConversionError(
            f"expected an object, got {type(data).__name__}"
        )
    try:
        return dacite.from_dict(
            data_class=cls,
            data=data,
            config=dacite.Config(strict=strict),
        )
    except dacite.DaciteError as e:
        raise PayloadConversionError(str(e)) from e


class ImplementsToDto:
    def to_dto(self) -> Any:
        raise NotImplementedError()

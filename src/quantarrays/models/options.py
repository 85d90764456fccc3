"""Option models for the quantization codecs.

Options are validated with Pydantic so that malformed settings are rejected
before any array work starts. Validation failures surface as
InvalidArgumentError with the Pydantic error chained.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import InvalidArgumentError

O = TypeVar("O", bound="CodecOptions")


class RoundMode(str, enum.Enum):
    """Round-to-nearest policy for logarithmic quantization.

    LINSPACE minimizes the reconstruction error in the linear value domain,
    LOGSPACE minimizes it in the log domain.
    """

    LINSPACE = "linspace"
    LOGSPACE = "logspace"


class CodecOptions(BaseModel):
    """Base class for codec option records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=False,
    )


class LinearOptions(CodecOptions):
    """Options for linear quantization.

    Attributes:
        extrema: Explicit (min, max) range; None derives it from the data.
            Values outside an explicit range saturate to the boundary codes.
    """

    extrema: Optional[Tuple[float, float]] = None

    @field_validator("extrema", mode="before")
    @classmethod
    def _coerce_extrema(cls, value: Any) -> Any:
        if value is None:
            return None
        # numpy scalars are not always accepted as floats by Pydantic
        try:
            return tuple(float(v) for v in value)
        except (TypeError, ValueError):
            return value


class LogOptions(CodecOptions):
    """Options for logarithmic quantization.

    Attributes:
        round_mode: Round-to-nearest in linear ("linspace") or log ("logspace") space
    """

    round_mode: RoundMode = RoundMode.LINSPACE

    @field_validator("round_mode", mode="before")
    @classmethod
    def _normalize_round_mode(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, RoundMode):
            return value.lower()
        return value


class SlabOptions(CodecOptions):
    """Options for per-slab quantization.

    Attributes:
        dim: Axis along which the array is sliced (negative values count from the end)
        workers: Number of threads used to process slabs; None or 1 runs sequentially
    """

    dim: int
    workers: Optional[int] = Field(default=None, ge=1)


def parse_options(model_class: Type[O], **values: Any) -> O:
    """Build an option record, translating validation errors.

    Args:
        model_class: Option model to instantiate
        **values: Field values

    Returns:
        Validated option record

    Raises:
        InvalidArgumentError: If any value fails validation
    """
    try:
        return model_class(**values)
    except ValidationError as err:
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in err.errors()
        )
        raise InvalidArgumentError(f"Invalid {model_class.__name__}: {details}") from err

"""Resolution options and condition set assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pkgexports.errors import InvalidInputError
from pkgexports.types import ConditionSet

if TYPE_CHECKING:
    from pkgexports.config import Config

__all__ = ["ResolveOptions", "build_conditions", "coerce_options", "DEFAULT_CONDITION"]

DEFAULT_CONDITION = "default"


class ResolveOptions(BaseModel):
    """Options controlling which conditions are active during resolution.

    Attributes:
        conditions: Custom conditions to match with, e.g. ``("node",)``.
        is_production: Use the ``production`` condition instead of ``development``.
        is_require: Use the ``require`` condition instead of ``import``/``module``.
        assert_match: Raise instead of returning an empty list when nothing matches.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    conditions: tuple[str, ...] = ()
    is_production: bool = Field(default=False, alias="isProduction")
    is_require: bool = Field(default=False, alias="isRequire")
    assert_match: bool = Field(default=False, alias="assertMatch")

    @classmethod
    def from_config(cls, config: Config) -> ResolveOptions:
        """Build options from the ``resolve.*`` keys of a Config."""
        return coerce_options(
            {
                "conditions": config.get("resolve.conditions") or (),
                "is_production": config.get("resolve.is_production", False),
                "is_require": config.get("resolve.is_require", False),
                "assert_match": config.get("resolve.assert_match", False),
            }
        )


def coerce_options(options: ResolveOptions | dict[str, Any] | None) -> ResolveOptions:
    """Normalize user supplied options into a ResolveOptions instance.

    Raises:
        InvalidInputError: If a dict of options does not validate.
    """
    if options is None:
        return ResolveOptions()
    if isinstance(options, ResolveOptions):
        return options
    try:
        return ResolveOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidInputError(message=f"Invalid resolve options: {e}", cause=e) from e


def build_conditions(
    options: ResolveOptions | dict[str, Any] | None = None,
    inline_conditions: Iterable[str] | None = None,
) -> ConditionSet:
    """Assemble the effective condition set for one resolution.

    The ``default`` condition is always present.
    """
    opts = coerce_options(options)
    names: list[str] = [*opts.conditions, *(inline_conditions or ())]
    names.append("production" if opts.is_production else "development")
    if opts.is_require:
        names.append("require")
    else:
        names.extend(("import", "module"))
    names.append(DEFAULT_CONDITION)
    return frozenset(name for name in names if name)

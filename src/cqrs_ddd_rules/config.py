"""Validator configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValidatorConfig(BaseModel):
    """Configuration for :class:`~cqrs_ddd_rules.validator.Validator`.

    Attributes:
        install_builtins: Populate a new validator's rule registry with
            ``notEmpty``, ``greaterThan``, ``lessThan`` and ``isEmail``.
        seal_on_first_validate: Seal both registries the first time
            ``validate`` runs, so registration after setup raises.
        log_violations: Emit a DEBUG record for every violation
            returned from ``validate``.
    """

    model_config = ConfigDict(frozen=True)

    install_builtins: bool = True
    seal_on_first_validate: bool = False
    log_violations: bool = True

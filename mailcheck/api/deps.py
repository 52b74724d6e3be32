"""Shared API dependencies."""

from collections.abc import Mapping
from typing import Annotated

from fastapi import Depends

from mailcheck.validation.typos import get_domain_typos

DomainTypos = Annotated[Mapping[str, str], Depends(get_domain_typos)]

__all__ = ["DomainTypos"]

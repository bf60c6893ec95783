"""
Pydantic schemas for student endpoints.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field


class AlunoIn(BaseModel):
    tx_nome: str | None = Field(default=None, examples=["Maria Silva"])
    tx_sexo: Literal["M", "F"] | None = Field(default=None, examples=["F"])
    dt_nascimento: date | None = Field(default=None, examples=["2000-01-15"])

"""
Pydantic schemas for institution endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InstituicaoIn(BaseModel):
    tx_sigla: str | None = Field(default=None, max_length=20, examples=["USP"])
    tx_descricao: str | None = Field(default=None, examples=["Universidade de São Paulo"])

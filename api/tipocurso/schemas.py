"""
Pydantic schemas for course type endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TipoCursoIn(BaseModel):
    # Checked by the router so a missing value answers 400, not 422.
    tx_descricao: str | None = Field(default=None, examples=["Bacharelado"])

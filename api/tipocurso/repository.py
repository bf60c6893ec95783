"""
Course type persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_tipos_curso() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM tipo_curso ORDER BY id_tipo_curso")


async def get_tipo_curso(id_tipo_curso: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "SELECT * FROM tipo_curso WHERE id_tipo_curso = $1",
        id_tipo_curso,
    )


async def create_tipo_curso(tx_descricao: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        "INSERT INTO tipo_curso (tx_descricao) VALUES ($1) RETURNING *",
        tx_descricao,
    )


async def update_tipo_curso(id_tipo_curso: int, tx_descricao: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE tipo_curso
        SET tx_descricao = $2
        WHERE id_tipo_curso = $1
        RETURNING *
        """,
        id_tipo_curso,
        tx_descricao,
    )


async def delete_tipo_curso(id_tipo_curso: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM tipo_curso WHERE id_tipo_curso = $1 RETURNING id_tipo_curso",
        id_tipo_curso,
    )

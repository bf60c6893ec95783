"""
Institution persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_instituicoes() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM instituicao ORDER BY id_instituicao")


async def get_instituicao(id_instituicao: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "SELECT * FROM instituicao WHERE id_instituicao = $1",
        id_instituicao,
    )


async def create_instituicao(*, tx_sigla: str | None, tx_descricao: str | None) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO instituicao (tx_sigla, tx_descricao)
        VALUES ($1, $2)
        RETURNING *
        """,
        tx_sigla,
        tx_descricao,
    )


async def update_instituicao(
    id_instituicao: int,
    *,
    tx_sigla: str | None,
    tx_descricao: str | None,
) -> dict[str, Any] | None:
    """
    Returns the updated row, or None when the id does not exist.
    Omitted (None) fields keep their stored value.
    """
    return await db.fetch_one(
        """
        UPDATE instituicao
        SET tx_sigla = COALESCE($2, tx_sigla),
            tx_descricao = COALESCE($3, tx_descricao)
        WHERE id_instituicao = $1
        RETURNING *
        """,
        id_instituicao,
        tx_sigla,
        tx_descricao,
    )


async def delete_instituicao(id_instituicao: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM instituicao WHERE id_instituicao = $1 RETURNING id_instituicao",
        id_instituicao,
    )

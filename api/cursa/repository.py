"""
Enrollment persistence (raw SQL).

An enrollment is keyed by (id_aluno, id_disciplina, in_ano, in_semestre).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core import db


async def list_cursa() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM cursa
        ORDER BY id_aluno, in_ano, in_semestre, id_disciplina
        """
    )


async def list_cursa_by_aluno(id_aluno: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM cursa
        WHERE id_aluno = $1
        ORDER BY in_ano, in_semestre, id_disciplina
        """,
        id_aluno,
    )


async def create_cursa(
    *,
    id_aluno: int | None,
    id_disciplina: int | None,
    in_ano: int | None,
    in_semestre: int | None,
    nm_nota1: Decimal | None,
    nm_nota2: Decimal | None,
    nm_nota3: Decimal | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO cursa (id_aluno, id_disciplina, in_ano, in_semestre, nm_nota1, nm_nota2, nm_nota3)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        id_aluno,
        id_disciplina,
        in_ano,
        in_semestre,
        nm_nota1,
        nm_nota2,
        nm_nota3,
    )


async def update_notas(
    *,
    id_aluno: int,
    id_disciplina: int,
    in_ano: int,
    in_semestre: int,
    nm_nota1: Decimal | None,
    nm_nota2: Decimal | None,
    nm_nota3: Decimal | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE cursa
        SET nm_nota1 = COALESCE($5, nm_nota1),
            nm_nota2 = COALESCE($6, nm_nota2),
            nm_nota3 = COALESCE($7, nm_nota3)
        WHERE id_aluno = $1
          AND id_disciplina = $2
          AND in_ano = $3
          AND in_semestre = $4
        RETURNING *
        """,
        id_aluno,
        id_disciplina,
        in_ano,
        in_semestre,
        nm_nota1,
        nm_nota2,
        nm_nota3,
    )


async def delete_cursa(
    *,
    id_aluno: int,
    id_disciplina: int,
    in_ano: int,
    in_semestre: int,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM cursa
        WHERE id_aluno = $1
          AND id_disciplina = $2
          AND in_ano = $3
          AND in_semestre = $4
        RETURNING id_aluno, id_disciplina, in_ano, in_semestre
        """,
        id_aluno,
        id_disciplina,
        in_ano,
        in_semestre,
    )

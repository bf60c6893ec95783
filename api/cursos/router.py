"""
Course endpoints (`/cursos`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Curso não encontrado"


@router.get("/cursos")
async def list_cursos() -> list[dict]:
    with errors.failures():
        return await repository.list_cursos()


@router.get("/cursos/{id_curso}")
@errors.rejects(errors.MESSAGE, message="Erro ao buscar curso")
async def get_curso(id_curso: int) -> dict:
    with errors.failures("Erro ao buscar curso", style=errors.MESSAGE):
        row = await repository.get_curso(id_curso)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return row


@router.post("/cursos", status_code=status.HTTP_201_CREATED)
async def create_curso(payload: schemas.CursoIn) -> dict:
    with errors.failures():
        return await repository.create_curso(
            id_instituicao=payload.id_instituicao,
            id_tipo_curso=payload.id_tipo_curso,
            tx_descricao=payload.tx_descricao,
        )


@router.put("/cursos/{id_curso}")
@errors.rejects(errors.MESSAGE, message="Erro ao atualizar curso")
async def update_curso(id_curso: int, payload: schemas.CursoIn) -> dict:
    with errors.failures("Erro ao atualizar curso", style=errors.MESSAGE):
        row = await repository.update_curso(
            id_curso,
            id_instituicao=payload.id_instituicao,
            id_tipo_curso=payload.id_tipo_curso,
            tx_descricao=payload.tx_descricao,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return row


@router.delete("/cursos/{id_curso}")
@errors.rejects(errors.MESSAGE, message="Erro ao remover curso")
async def delete_curso(id_curso: int) -> dict:
    with errors.failures("Erro ao remover curso", style=errors.MESSAGE):
        row = await repository.delete_curso(id_curso)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return {"message": "Curso removido com sucesso"}

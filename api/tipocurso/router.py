"""
Course type endpoints (`/tipocurso`).

Errors are {"error": "..."} with a fixed message per route; driver messages
are logged, never returned.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Tipo de curso não encontrado"
DESCRIPTION_REQUIRED = "tx_descricao é obrigatório"


def _required_description(payload: schemas.TipoCursoIn | None) -> str:
    if payload is None or not payload.tx_descricao:
        raise errors.BadRequestError(DESCRIPTION_REQUIRED, style=errors.ERROR)
    return payload.tx_descricao


@router.get("/tipocurso")
async def list_tipos_curso() -> list[dict]:
    with errors.failures("Erro ao buscar tipos de curso", style=errors.ERROR):
        return await repository.list_tipos_curso()


@router.get("/tipocurso/{id_tipo_curso}")
@errors.rejects(errors.ERROR, message="Erro ao buscar tipo de curso")
async def get_tipo_curso(id_tipo_curso: int) -> dict:
    with errors.failures("Erro ao buscar tipo de curso", style=errors.ERROR):
        row = await repository.get_tipo_curso(id_tipo_curso)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.ERROR)
    return row


@router.post("/tipocurso", status_code=status.HTTP_201_CREATED)
@errors.rejects(errors.ERROR, status_code=400, message=DESCRIPTION_REQUIRED)
async def create_tipo_curso(payload: schemas.TipoCursoIn | None = None) -> dict:
    tx_descricao = _required_description(payload)
    with errors.failures("Erro ao criar tipo de curso", style=errors.ERROR):
        return await repository.create_tipo_curso(tx_descricao)


@router.put("/tipocurso/{id_tipo_curso}")
@errors.rejects(errors.ERROR, status_code=400, message=DESCRIPTION_REQUIRED)
async def update_tipo_curso(id_tipo_curso: int, payload: schemas.TipoCursoIn | None = None) -> dict:
    tx_descricao = _required_description(payload)
    with errors.failures("Erro ao atualizar tipo de curso", style=errors.ERROR):
        row = await repository.update_tipo_curso(id_tipo_curso, tx_descricao)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.ERROR)
    return row


@router.delete("/tipocurso/{id_tipo_curso}", status_code=status.HTTP_204_NO_CONTENT)
@errors.rejects(errors.ERROR, message="Erro ao remover tipo de curso")
async def delete_tipo_curso(id_tipo_curso: int) -> Response:
    with errors.failures("Erro ao remover tipo de curso", style=errors.ERROR):
        row = await repository.delete_tipo_curso(id_tipo_curso)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

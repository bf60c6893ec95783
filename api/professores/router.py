"""
Professor endpoints (`/professores`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Professor não encontrado"


def _fields(payload: schemas.ProfessorIn) -> dict:
    return {
        "id_titulo": payload.id_titulo,
        "tx_nome": payload.tx_nome,
        "tx_sexo": payload.tx_sexo,
        "tx_estado_civil": payload.tx_estado_civil,
        "dt_nascimento": payload.dt_nascimento,
        "tx_telefone": payload.tx_telefone,
    }


@router.get("/professores")
async def list_professores() -> list[dict]:
    with errors.failures():
        return await repository.list_professores()


@router.get("/professores/{id_professor}")
async def get_professor(id_professor: int) -> dict:
    with errors.failures():
        row = await repository.get_professor(id_professor)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.post("/professores", status_code=status.HTTP_201_CREATED)
async def create_professor(payload: schemas.ProfessorIn) -> dict:
    with errors.failures():
        return await repository.create_professor(**_fields(payload))


@router.put("/professores/{id_professor}")
async def update_professor(id_professor: int, payload: schemas.ProfessorIn) -> dict:
    with errors.failures():
        row = await repository.update_professor(id_professor, **_fields(payload))
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.delete("/professores/{id_professor}")
async def delete_professor(id_professor: int) -> dict:
    with errors.failures():
        row = await repository.delete_professor(id_professor)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return {"message": "Professor removido com sucesso"}

"""
Institution endpoints (`/instituicoes`).

Errors are plain text: the driver message on failures, a fixed message on 404.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Instituição não encontrada"


@router.get("/instituicoes")
async def list_instituicoes() -> list[dict]:
    with errors.failures():
        return await repository.list_instituicoes()


@router.get("/instituicoes/{id_instituicao}")
async def get_instituicao(id_instituicao: int) -> dict:
    with errors.failures():
        row = await repository.get_instituicao(id_instituicao)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.post("/instituicoes", status_code=status.HTTP_201_CREATED)
async def create_instituicao(payload: schemas.InstituicaoIn) -> dict:
    with errors.failures():
        return await repository.create_instituicao(
            tx_sigla=payload.tx_sigla,
            tx_descricao=payload.tx_descricao,
        )


@router.put("/instituicoes/{id_instituicao}")
async def update_instituicao(id_instituicao: int, payload: schemas.InstituicaoIn) -> dict:
    with errors.failures():
        row = await repository.update_instituicao(
            id_instituicao,
            tx_sigla=payload.tx_sigla,
            tx_descricao=payload.tx_descricao,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.delete("/instituicoes/{id_instituicao}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_instituicao(id_instituicao: int) -> Response:
    with errors.failures():
        row = await repository.delete_instituicao(id_instituicao)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

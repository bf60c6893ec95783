import json

import pytest
from fastapi.exceptions import RequestValidationError

from core import errors


def test_text_style_renders_plain_message():
    response = errors.render(errors.NotFoundError("Aluno não encontrado"))

    assert response.status_code == 404
    assert response.media_type == "text/plain"
    assert response.body.decode() == "Aluno não encontrado"


def test_error_style():
    response = errors.render(errors.BadRequestError("tx_descricao é obrigatório", style=errors.ERROR))

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "tx_descricao é obrigatório"}


def test_message_style_includes_driver_error_only_when_different():
    with_error = errors.render(
        errors.OperationFailedError("Erro ao remover curso", style=errors.MESSAGE, error="boom")
    )
    same = errors.render(errors.NotFoundError("Curso não encontrado", style=errors.MESSAGE))

    assert json.loads(with_error.body) == {"message": "Erro ao remover curso", "error": "boom"}
    assert json.loads(same.body) == {"message": "Curso não encontrado"}


def test_failures_wraps_unexpected_exceptions():
    with pytest.raises(errors.OperationFailedError) as info:
        with errors.failures():
            raise ValueError("invalid input syntax for type integer")

    assert info.value.status_code == 500
    assert info.value.message == "invalid input syntax for type integer"
    assert isinstance(info.value.__cause__, ValueError)


def test_failures_prefers_fixed_message():
    with pytest.raises(errors.OperationFailedError) as info:
        with errors.failures("Erro ao buscar tipos de curso", style=errors.ERROR):
            raise RuntimeError("connection refused")

    assert info.value.message == "Erro ao buscar tipos de curso"
    assert info.value.error == "connection refused"
    assert info.value.style == errors.ERROR


def test_failures_lets_api_errors_through():
    with pytest.raises(errors.NotFoundError):
        with errors.failures():
            raise errors.NotFoundError("Curso não encontrado")


def test_describe_validation_joins_locations():
    exc = RequestValidationError(
        [
            {"type": "int_parsing", "loc": ("path", "id_aluno"), "msg": "Input should be a valid integer"},
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
        ]
    )

    assert errors.describe_validation(exc) == (
        "path.id_aluno: Input should be a valid integer; body: Field required"
    )


def test_rejects_marks_endpoint():
    @errors.rejects(errors.ERROR, status_code=400, message="tx_descricao é obrigatório")
    async def endpoint():
        return None

    assert endpoint.rejects == (errors.ERROR, 400, "tx_descricao é obrigatório")

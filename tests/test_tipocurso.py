import pytest

BACHARELADO = {"id_tipo_curso": 1, "tx_descricao": "Bacharelado"}


@pytest.mark.asyncio
async def test_list(client, fake_db):
    fake_db.queue([BACHARELADO])

    response = await client.get("/tipocurso")

    assert response.status_code == 200
    assert response.json() == [BACHARELADO]
    assert fake_db.last_sql.endswith("ORDER BY id_tipo_curso")


@pytest.mark.asyncio
async def test_create(client, fake_db):
    fake_db.queue(BACHARELADO)

    response = await client.post("/tipocurso", json={"tx_descricao": "Bacharelado"})

    assert response.status_code == 201
    assert response.json() == BACHARELADO


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"tx_descricao": ""}, {"tx_descricao": None}])
async def test_create_requires_description(client, fake_db, body):
    response = await client.post("/tipocurso", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "tx_descricao é obrigatório"}
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_update_requires_description(client, fake_db):
    response = await client.put("/tipocurso/1", json={})

    assert response.status_code == 400
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_update_absent_id(client, fake_db):
    response = await client.put("/tipocurso/99", json={"tx_descricao": "Tecnólogo"})

    assert response.status_code == 404
    assert response.json() == {"error": "Tipo de curso não encontrado"}


@pytest.mark.asyncio
async def test_get_absent_id(client, fake_db):
    response = await client.get("/tipocurso/99")

    assert response.status_code == 404
    assert response.json() == {"error": "Tipo de curso não encontrado"}


@pytest.mark.asyncio
async def test_delete(client, fake_db):
    fake_db.queue({"id_tipo_curso": 1})

    response = await client.delete("/tipocurso/1")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_failure_hides_driver_message(client, fake_db):
    fake_db.queue(RuntimeError("update or delete on table violates foreign key constraint"))

    response = await client.delete("/tipocurso/1")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro ao remover tipo de curso"}


@pytest.mark.asyncio
async def test_create_without_body_is_400(client, fake_db):
    response = await client.post("/tipocurso")

    assert response.status_code == 400
    assert response.json() == {"error": "tx_descricao é obrigatório"}
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_update_without_body_is_400(client, fake_db):
    response = await client.put("/tipocurso/1")

    assert response.status_code == 400
    assert response.json() == {"error": "tx_descricao é obrigatório"}
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_create_with_non_text_description_is_400(client, fake_db):
    response = await client.post("/tipocurso", json={"tx_descricao": 123})

    assert response.status_code == 400
    assert response.json() == {"error": "tx_descricao é obrigatório"}


@pytest.mark.asyncio
async def test_non_integer_id_uses_error_body(client, fake_db):
    response = await client.get("/tipocurso/abc")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro ao buscar tipo de curso"}
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_delete_absent_id(client, fake_db):
    response = await client.delete("/tipocurso/99")

    assert response.status_code == 404
    assert response.json() == {"error": "Tipo de curso não encontrado"}
    assert len(fake_db.calls) == 1

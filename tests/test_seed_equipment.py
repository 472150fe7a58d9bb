from seed_equipment import DEMO_ROWS, insert_demo_rows, reset_equipment_table


def test_demo_rows_are_listed(app, client) -> None:
    with app.app_context():
        assert insert_demo_rows(app.extensions["equipment_store"]) == len(DEMO_ROWS)

    names = [r["name"] for r in client.get("/api/equipments").get_json()]
    assert names == [row[0] for row in reversed(DEMO_ROWS)]


def test_reset_empties_table(app, client) -> None:
    client.post("/api/equipments", json={"name": "Press-01"})

    with app.app_context():
        reset_equipment_table()

    assert client.get("/api/equipments").get_json() == []
